"""
Error taxonomy for the records service layer.

Every failure an operation can report is one of four kinds. The HTTP layer
maps them to status codes; the service never deals in status codes itself.
"""
from typing import Optional


class RecordsError(Exception):
    """Base class for all expected service failures."""
    code: str = "records_error"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self) -> dict:
        return {"detail": self.message, "code": self.code, "field": self.field}


class InvalidArgument(RecordsError):
    """Input failed a local, stateless check. Never touches the store."""
    code = "invalid_argument"


class NotFound(RecordsError):
    """The id was well formed but no record has it."""
    code = "not_found"


class Conflict(RecordsError):
    """A cpf/crm uniqueness constraint would be violated."""
    code = "conflict"


class Internal(RecordsError):
    """The store failed for a reason not attributable to caller input."""
    code = "internal"
