# fleet/errors.py
"""Error taxonomy shared by the services, stores and routes.

Every error carries a ``kind`` tag. Callers branch on ``error.kind`` rather
than on the concrete class.
"""

from enum import Enum
from typing import Iterable


class ErrorKind(str, Enum):
    INVALID_IDENTIFIER = "invalid_identifier"
    VALIDATION_FAILURE = "validation_failure"
    NOT_FOUND = "not_found"
    COLLABORATOR_FAILURE = "collaborator_failure"


class FleetError(Exception):
    kind: ErrorKind


class InvalidIdentifier(FleetError):
    """An id <= 0, or a required payload that is missing."""

    kind = ErrorKind.INVALID_IDENTIFIER

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationFailure(FleetError):
    """Ordered set of field violations reported as a single failure.

    An empty aggregate means "no error" and is falsy.
    """

    kind = ErrorKind.VALIDATION_FAILURE
    separator = ","

    def __init__(self, messages: Iterable[str]):
        self.messages = tuple(messages)
        super().__init__(self.separator.join(self.messages))

    def __bool__(self) -> bool:
        return len(self.messages) > 0

    def __eq__(self, other) -> bool:
        if not isinstance(other, ValidationFailure):
            return NotImplemented
        return self.messages == other.messages

    def __hash__(self) -> int:
        return hash(self.messages)

    def __repr__(self) -> str:
        return f"ValidationFailure({list(self.messages)!r})"


class NotFound(FleetError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity: str):
        super().__init__(f"{entity} not found")
        self.entity = entity


class StoreError(FleetError):
    """Storage failure raised by a store; the services pass it through untouched."""

    kind = ErrorKind.COLLABORATOR_FAILURE
