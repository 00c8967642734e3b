import re
from datetime import date

from src.common.utils.global_messages import GlobalMessages
from src.modules.contact.contact_service import ContactForm
from src.modules.contact.schemas import SubmitStatus
from src.modules.site import content
from src.modules.site.site_service import render_home, step_number

from tests.conftest import ALICE

DISABLED_CONTROL = re.compile(r"<(?:input|textarea|button)\b[^>]*\sdisabled[\s>]")


def test_sections_and_anchors_are_rendered():
    html = render_home(today=date(2025, 1, 1))

    assert 'id="top"' in html
    for item in content.NAV_ITEMS:
        anchor = item.href.lstrip("#")
        assert f'id="{anchor}"' in html
        assert f'href="{item.href}"' in html


def test_content_tables_are_rendered():
    html = render_home(today=date(2025, 1, 1))

    for service in content.SERVICES:
        assert service.title in html
        assert service.problem in html
    for step in content.PROCESS_STEPS:
        assert step.title in html
    for stat in content.CREDIBILITY_STATS:
        assert stat.value in html
    for paragraph in content.PRIVACY_POLICY:
        assert paragraph in html


def test_process_steps_are_numbered():
    html = render_home(today=date(2025, 1, 1))

    assert [step_number(i) for i in range(len(content.PROCESS_STEPS))] == ["01", "02", "03", "04", "05"]
    assert "<span>05</span>" in html


def test_copyright_year_follows_today():
    assert "© 2031 NFZI Talent. Tous droits réservés." in render_home(today=date(2031, 6, 15))


def test_idle_form_is_enabled_with_native_constraints():
    html = render_home(today=date(2025, 1, 1))

    assert DISABLED_CONTROL.findall(html) == []
    assert f">{GlobalMessages.SUBMIT_LABEL}</button>" in html
    assert 'type="email"' in html
    # name, company, email and message carry the required attribute, phone does not
    assert len(re.findall(r"<(?:input|textarea)\b[^>]*\srequired[\s>]", html)) == 4


def test_sending_form_disables_every_control():
    form = ContactForm.from_submission(ALICE)
    form.status = SubmitStatus.SENDING

    html = render_home(form, today=date(2025, 1, 1))

    assert len(DISABLED_CONTROL.findall(html)) == 6
    assert f">{GlobalMessages.SENDING_LABEL}</button>" in html


def test_error_form_shows_fallback_message_when_none_recorded():
    form = ContactForm()
    form.status = SubmitStatus.ERROR

    html = render_home(form, today=date(2025, 1, 1))

    assert GlobalMessages.GENERIC_ERROR in html
    assert 'role="alert"' in html


async def test_home_route(app_client):
    response = await app_client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert 'action="/contact#contact"' in response.text


async def test_static_assets_are_served(app_client):
    response = await app_client.get("/static/site.css")

    assert response.status_code == 200
