from datetime import date
from typing import Optional

from src.common.config import settings
from src.common.utils.global_messages import GlobalMessages
from src.common.utils.templating import render_template
from src.modules.contact.contact_service import ContactForm
from src.modules.site import content


def step_number(index: int) -> str:
    """Zero-padded display number for a 0-based process step index."""
    return str(index + 1).zfill(2)


def render_home(contact_form: Optional[ContactForm] = None, today: Optional[date] = None) -> str:
    """
    Render the one-page site.

    The output depends only on the content tables, the contact form state
    and `today`, which is used for the copyright year.
    """
    today = today or date.today()
    if contact_form is None:
        contact_form = ContactForm()

    context = {
        "site_name": settings.SITE_NAME,
        "contact_email": settings.CONTACT_EMAIL,
        "nav_items": content.NAV_ITEMS,
        "hero_highlights": content.HERO_HIGHLIGHTS,
        "presentation_facts": content.PRESENTATION_FACTS,
        "services": content.SERVICES,
        "process_steps": [
            (step_number(index), step) for index, step in enumerate(content.PROCESS_STEPS)
        ],
        "credibility_stats": content.CREDIBILITY_STATS,
        "privacy_policy": content.PRIVACY_POLICY,
        "consent_notice": content.CONSENT_NOTICE,
        "developer_credit": content.DEVELOPER_CREDIT,
        "form": contact_form,
        "sending_label": GlobalMessages.SENDING_LABEL,
        "invalid_fields_message": GlobalMessages.INVALID_FIELDS,
        "copyright_year": today.year,
    }
    return render_template("index.html", context)
