"""Domain exceptions.

Hierarchy:
    DomainError
    ├── ValidationError            caller input rejected (400-class)
    │   ├── FieldValidationError   one field breaks a field rule
    │   ├── ArchivedStateError     mutation of an archived ticket
    │   └── ReferenceValidationError  referenced entity does not exist
    ├── InvalidIdError             identifier is not well formed
    └── EmailServiceError          email transport failure

"Not found" is never an exception: lookups return None.
"""

from __future__ import annotations


class DomainError(Exception):
    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"error": self.message, "code": self.code}


class ValidationError(DomainError):
    def __init__(self, message: str, field: str | None = None, code: str | None = None):
        self.field = field
        super().__init__(message, code)

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result


class FieldValidationError(ValidationError):
    pass


class ArchivedStateError(ValidationError):
    def __init__(self, ticket_id: str | None = None):
        self.ticket_id = ticket_id
        super().__init__("Un ticket archivé ne peut pas être modifié")


class ReferenceValidationError(ValidationError):
    pass


class InvalidIdError(DomainError):
    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid ID format: {value}")


class EmailServiceError(DomainError):
    pass
