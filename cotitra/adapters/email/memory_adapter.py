"""In-memory email adapter: records messages instead of delivering them."""

from __future__ import annotations

import logging

from cotitra.application.ports.email_port import EmailMessage, EmailTransport

logger = logging.getLogger(__name__)


class InMemoryEmailAdapter(EmailTransport):
    """Used in development and tests (EMAIL_PROVIDER=memory)."""

    def __init__(self):
        self.sent: list[EmailMessage] = []

    async def send(self, message: EmailMessage) -> None:
        logger.debug(
            "Recording email [%s] for %d recipient(s)", message.subject, len(message.recipients)
        )
        self.sent.append(message)

    def clear(self) -> None:
        self.sent.clear()
