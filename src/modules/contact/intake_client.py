"""
Form intake client: forwards contact requests to the third-party form service.
"""
import logging
from dataclasses import dataclass
from typing import Dict, Optional
import httpx

from src.common.config import settings

logger = logging.getLogger(__name__)


@dataclass
class IntakeResult:
    """Outcome of one delivery attempt."""
    success: bool
    status_code: Optional[int] = None  # None when no response was received

    @property
    def reached_endpoint(self) -> bool:
        return self.status_code is not None


class FormIntakeClient:
    """Posts multipart form payloads to the configured intake endpoint."""

    def __init__(
        self,
        endpoint: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.endpoint = endpoint or settings.CONTACT_FORM_ENDPOINT
        self.timeout = timeout if timeout is not None else settings.CONTACT_FORM_TIMEOUT_SECONDS
        self._client = client

    @property
    def headers(self) -> Dict[str, str]:
        return {"Accept": "application/json"}

    async def submit(self, fields: Dict[str, str]) -> IntakeResult:
        """
        Send one POST with `fields` as multipart form data.

        Redirects are followed and any final 2xx status is a success. The response body is not inspected.
        Transport failures are reported in the result, never raised.
        """
        # (None, value) parts keep the body multipart without attaching filenames
        multipart = {key: (None, value) for key, value in fields.items()}

        try:
            if self._client is not None:
                response = await self._post(self._client, multipart)
            else:
                async with httpx.AsyncClient() as client:
                    response = await self._post(client, multipart)
        except Exception as e:
            logger.warning(f"Contact intake unreachable ({type(e).__name__}): {e}")
            return IntakeResult(success=False)

        if response.is_success:
            logger.info(f"Contact intake accepted submission (HTTP {response.status_code})")
            return IntakeResult(success=True, status_code=response.status_code)

        logger.warning(f"Contact intake rejected submission (HTTP {response.status_code})")
        return IntakeResult(success=False, status_code=response.status_code)

    async def _post(self, client: httpx.AsyncClient, multipart) -> httpx.Response:
        return await client.post(
            self.endpoint,
            headers=self.headers,
            files=multipart,
            timeout=self.timeout,
            follow_redirects=True,
        )
