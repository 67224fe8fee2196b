"""Best-effort notification phase shared by the mutating use cases.

A mutating use case runs in two phases: the commit phase (repository write,
errors propagate) and the notify phase run through ``notify_safely``. The
notify phase is awaited, so attempts are never dropped, but its outcome is
only logged and never changes the use case result.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Awaitable, Callable, Iterable

from cotitra.application.ports.email_port import EmailMessage, EmailRecipient, EmailTransport
from cotitra.application.ports.template_port import EmailTemplate
from cotitra.domain.entities.user import User


class NotificationOutcome(str, Enum):
    SENT = "sent"
    SKIPPED = "skipped"
    FAILED = "failed"


def recipients_for(users: Iterable[User]) -> list[EmailRecipient]:
    return [EmailRecipient(email=u.email, name=u.full_name) for u in users]


async def deliver(
    email: EmailTransport, recipients: list[EmailRecipient], template: EmailTemplate
) -> NotificationOutcome:
    """Send one message to *recipients*; an empty list is skipped."""
    if not recipients:
        return NotificationOutcome.SKIPPED
    sent = await email.send_safe(
        EmailMessage(
            recipients=recipients,
            subject=template.subject,
            html_body=template.html_body,
            text_body=template.text_body,
        )
    )
    return NotificationOutcome.SENT if sent else NotificationOutcome.FAILED


async def notify_safely(
    kind: str,
    notify: Callable[[], Awaitable[NotificationOutcome]],
    logger: logging.Logger,
    **context: object,
) -> NotificationOutcome:
    """Run one notification attempt, swallowing and logging any failure."""
    extra = {"notification": kind, **context}
    try:
        outcome = await notify()
    except Exception:
        logger.error("Notification '%s' failed", kind, exc_info=True, extra=extra)
        return NotificationOutcome.FAILED

    if outcome == NotificationOutcome.FAILED:
        logger.warning("Notification '%s' was not delivered", kind, extra=extra)
    else:
        logger.debug("Notification '%s': %s", kind, outcome.value, extra=extra)
    return outcome
