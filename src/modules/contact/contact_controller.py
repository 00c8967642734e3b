# src/modules/contact/contact_controller.py

from fastapi import APIRouter, Depends, Form, HTTPException, status
from fastapi.responses import HTMLResponse

from src.modules.contact import schemas
from src.modules.contact.contact_service import ContactForm
from src.modules.contact.intake_client import FormIntakeClient
from src.modules.site.site_service import render_home

router = APIRouter(tags=["contact"])

def get_intake_client() -> FormIntakeClient:
    return FormIntakeClient()

@router.post("/contact", response_class=HTMLResponse)
async def submit_contact_form(
    name: str = Form(""),
    company: str = Form(""),
    email: str = Form(""),
    phone: str = Form(""),
    message: str = Form(""),
    intake: FormIntakeClient = Depends(get_intake_client),
):
    """
    Handle the browser form post and re-render the page with the outcome.

    The page is returned with a 200 whatever happened to the submission; the
    feedback lives in the rendered contact section.
    """
    form = ContactForm.from_submission(
        {"name": name, "company": company, "email": email, "phone": phone, "message": message},
        intake=intake,
    )
    await form.submit()
    return HTMLResponse(render_home(form))

@router.post("/api/contact", response_model=schemas.ContactFormResponse)
async def submit_contact_json(
    payload: schemas.ContactFormRequest,
    intake: FormIntakeClient = Depends(get_intake_client),
):
    """
    Forward a JSON contact request to the intake endpoint.
    Field constraints are enforced by the request schema (422).
    """
    form = ContactForm.from_submission(payload.model_dump(), intake=intake)
    result = await form.submit()
    if result is not schemas.SubmitStatus.SUCCESS:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=form.feedback,
        )
    return schemas.ContactFormResponse(status=result, message=form.feedback)
