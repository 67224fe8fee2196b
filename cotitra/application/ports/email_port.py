"""Port interface for outgoing email."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmailRecipient:
    email: str
    name: str


@dataclass(frozen=True)
class EmailMessage:
    recipients: list[EmailRecipient] = field(default_factory=list)
    subject: str = ""
    html_body: str = ""
    text_body: str = ""


class EmailTransport(ABC):
    @abstractmethod
    async def send(self, message: EmailMessage) -> None:
        """Deliver *message*.

        Raises:
            EmailServiceError: delivery failed.
        """
        ...

    async def send_safe(self, message: EmailMessage) -> bool:
        """Deliver *message* without raising; returns whether it was sent."""
        try:
            await self.send(message)
            return True
        except Exception:
            logger.exception("Email delivery failed (non-blocking): %s", message.subject)
            return False
