"""Resend email adapter: implements EmailTransport over the Resend HTTP API."""

from __future__ import annotations

import logging

import httpx

from cotitra.application.ports.email_port import EmailMessage, EmailTransport
from cotitra.config import settings
from cotitra.domain.errors import EmailServiceError

logger = logging.getLogger(__name__)


def _email_id(response: httpx.Response) -> str | None:
    if not response.headers.get("content-type", "").startswith("application/json"):
        return None
    return response.json().get("id")


class ResendEmailAdapter(EmailTransport):
    """Sends one message per call to every recipient."""

    def __init__(
        self,
        api_key: str | None = None,
        from_email: str | None = None,
        api_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_key = api_key or settings.resend_api_key
        self._from_email = from_email or settings.from_email
        if not self._api_key or not self._from_email:
            raise ValueError("RESEND_API_KEY and FROM_EMAIL must be configured")
        self._api_url = api_url or settings.resend_api_url
        self._timeout = timeout if timeout is not None else settings.email_timeout
        self._transport = transport

    async def send(self, message: EmailMessage) -> None:
        addresses = [r.email for r in message.recipients]
        logger.info("Sending email [%s] to %s", message.subject, ", ".join(addresses))
        payload = {
            "from": self._from_email,
            "to": addresses,
            "subject": message.subject,
            "html": message.html_body,
            "text": message.text_body,
        }
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(
                    self._api_url,
                    json=payload,
                    headers={"Authorization": f"Bearer {self._api_key}"},
                    timeout=self._timeout,
                )
                response.raise_for_status()
                email_id = _email_id(response)
        except httpx.HTTPStatusError as e:
            raise EmailServiceError(
                f"Email delivery failed: HTTP {e.response.status_code} {e.response.text}"
            ) from e
        except httpx.HTTPError as e:
            raise EmailServiceError(f"Email delivery failed: {e}") from e

        logger.info("Email sent: %s", email_id)
