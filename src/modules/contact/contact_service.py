import logging
from typing import Dict, List, Mapping, Optional

from pydantic import ValidationError

from src.common.config import settings
from src.common.utils.global_messages import GlobalMessages
from src.modules.contact.intake_client import FormIntakeClient
from src.modules.contact.schemas import ContactFormRequest, FormValues, SubmitStatus

logger = logging.getLogger(__name__)

FIELD_NAMES = tuple(FormValues.model_fields)


class ContactForm:
    """
    State of one contact form: the field values, the submission status and
    the error message shown when the last attempt failed.

    A submission moves the status idle -> sending -> success | error. While
    sending, the form is disabled and further submits are ignored.
    """

    def __init__(self, intake: Optional[FormIntakeClient] = None, source: Optional[str] = None):
        self.intake = intake or FormIntakeClient()
        self.source = source or settings.CONTACT_FORM_SOURCE
        self.values = FormValues()
        self.status = SubmitStatus.IDLE
        self.error_message: Optional[str] = None
        self.invalid_fields: List[str] = []

    @classmethod
    def from_submission(cls, data: Mapping[str, str], **kwargs) -> "ContactForm":
        """Build a form and apply every known field found in `data`."""
        form = cls(**kwargs)
        for field in FIELD_NAMES:
            value = data.get(field)
            if value is not None:
                form.update_field(field, value)
        return form

    def update_field(self, field: str, value: str) -> None:
        if field not in FIELD_NAMES:
            raise KeyError(f"Unknown contact form field: {field}")
        setattr(self.values, field, value)

    def field_errors(self) -> List[str]:
        """Names of the fields that fail their required/email constraints."""
        try:
            ContactFormRequest(**self.values.model_dump())
        except ValidationError as e:
            return sorted({str(error["loc"][0]) for error in e.errors()})
        return []

    def payload(self) -> Dict[str, str]:
        return {
            "name": self.values.name,
            "company": self.values.company,
            "email": self.values.email,
            "phone": self.values.phone,
            "message": self.values.message,
            "source": self.source,
        }

    @property
    def is_disabled(self) -> bool:
        return self.status is SubmitStatus.SENDING

    @property
    def submit_label(self) -> str:
        return GlobalMessages.SENDING_LABEL if self.is_disabled else GlobalMessages.SUBMIT_LABEL

    @property
    def feedback(self) -> Optional[str]:
        if self.status is SubmitStatus.SUCCESS:
            return GlobalMessages.SUBMISSION_SUCCESS
        if self.status is SubmitStatus.ERROR:
            return self.error_message or GlobalMessages.GENERIC_ERROR
        return None

    async def submit(self) -> SubmitStatus:
        """
        Deliver the current values to the intake endpoint.

        Never raises: the outcome is recorded in `status` and `error_message`.
        Values are cleared only after a successful delivery.
        """
        if self.is_disabled:
            logger.debug("Submit ignored, a submission is already in flight")
            return self.status

        self.invalid_fields = self.field_errors()
        if self.invalid_fields:
            logger.debug(f"Submit blocked by field constraints: {', '.join(self.invalid_fields)}")
            return self.status

        # Both assignments happen before the first await
        self.status = SubmitStatus.SENDING
        self.error_message = None

        result = await self.intake.submit(self.payload())

        if result.success:
            self.status = SubmitStatus.SUCCESS
            self.values = FormValues()
        elif result.reached_endpoint:
            self.status = SubmitStatus.ERROR
            self.error_message = GlobalMessages.SUBMISSION_FAILED
        else:
            self.status = SubmitStatus.ERROR
            self.error_message = GlobalMessages.NETWORK_ERROR
        return self.status
