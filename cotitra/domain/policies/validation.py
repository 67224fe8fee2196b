"""Field validation rules for tickets and comments: pure functions."""

from __future__ import annotations

import uuid
from typing import Any

from cotitra.domain.errors import FieldValidationError, InvalidIdError
from cotitra.domain.value_objects.enums import TicketStatus

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 5000
CONTENT_MAX_LENGTH = 2000


def require_text(
    value: Any,
    field: str,
    max_length: int,
    required_message: str,
    too_long_message: str,
) -> str:
    """Validate a required free-text field and return it trimmed.

    Length is measured after trimming, so surrounding whitespace never
    counts against the bound.

    Raises:
        FieldValidationError: value is not a string, is empty after trimming,
            or exceeds *max_length*.
    """
    if not isinstance(value, str) or not value.strip():
        raise FieldValidationError(required_message, field=field)
    trimmed = value.strip()
    if len(trimmed) > max_length:
        raise FieldValidationError(too_long_message, field=field)
    return trimmed


def validate_title(value: Any) -> str:
    return require_text(
        value,
        "title",
        TITLE_MAX_LENGTH,
        "Le titre est requis",
        f"Le titre ne doit pas dépasser {TITLE_MAX_LENGTH} caractères",
    )


def validate_description(value: Any) -> str:
    return require_text(
        value,
        "description",
        DESCRIPTION_MAX_LENGTH,
        "La description est requise",
        f"La description ne doit pas dépasser {DESCRIPTION_MAX_LENGTH} caractères",
    )


def validate_comment_content(value: Any) -> str:
    return require_text(
        value,
        "content",
        CONTENT_MAX_LENGTH,
        "Le contenu du commentaire est requis",
        f"Le commentaire ne doit pas dépasser {CONTENT_MAX_LENGTH} caractères",
    )


def validate_status(value: Any) -> TicketStatus:
    try:
        return TicketStatus(value)
    except ValueError:
        raise FieldValidationError("Statut invalide", field="status") from None


def is_valid_id(value: Any) -> bool:
    """Identifiers are canonical UUID strings (hyphenated, any case)."""
    if not isinstance(value, str):
        return False
    try:
        return str(uuid.UUID(value)) == value.lower()
    except ValueError:
        return False


def ensure_valid_id(value: Any) -> str:
    """Return *value* unchanged or raise InvalidIdError."""
    if not is_valid_id(value):
        raise InvalidIdError(value)
    return value


def normalize_assignee(value: Any) -> str | None:
    """Trim an assignee id; empty or whitespace-only means unassigned."""
    if not isinstance(value, str) or not value.strip():
        return None
    return value.strip()
