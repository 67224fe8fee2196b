"""Email transport selection from settings."""

from __future__ import annotations

from cotitra.adapters.email.memory_adapter import InMemoryEmailAdapter
from cotitra.adapters.email.resend_adapter import ResendEmailAdapter
from cotitra.application.ports.email_port import EmailTransport
from cotitra.config import Settings


def build_email_transport(settings: Settings) -> EmailTransport:
    provider = settings.email_provider.strip().lower()
    if provider == "resend":
        return ResendEmailAdapter(
            api_key=settings.resend_api_key,
            from_email=settings.from_email,
            api_url=settings.resend_api_url,
            timeout=settings.email_timeout,
        )
    if provider == "memory":
        return InMemoryEmailAdapter()
    raise ValueError(
        f"Invalid EMAIL_PROVIDER: {settings.email_provider!r}. Accepted values: 'resend', 'memory'"
    )
