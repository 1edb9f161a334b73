"""
Failure Classification — Known Errors for the Card Model.

Every failure raised by the model layer is a KnownError carrying a
FailureKind. Failures are local and synchronous: they always indicate a
programming error or bad input data, never a transient condition.

Error taxonomy:
- InvalidArgumentError: a value that cannot be constructed
- InvalidStateError: an operation not allowed in the current state
- CardDecodeError / RegulationDecodeError: a persisted document that
  cannot be turned back into a model
- CardNotFoundError: identity lookup of an unknown card
"""

from enum import Enum


class FailureKind(str, Enum):
    """Classification of failure types."""

    INVALID_ARGUMENT = "invalid_argument"
    INVALID_STATE = "invalid_state"
    DECODE_ERROR = "decode_error"
    NOT_FOUND = "not_found"


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        super().__init__(message)


class InvalidArgumentError(KnownError, ValueError):
    """Raised when a model value is constructed from an unusable argument."""

    def __init__(self, argument: str, reason: str):
        self.argument = argument
        self.reason = reason
        super().__init__(
            kind=FailureKind.INVALID_ARGUMENT,
            message=f"Invalid argument '{argument}': {reason}",
        )


class InvalidStateError(KnownError, RuntimeError):
    """Raised when an operation is not valid for the object's current state."""

    def __init__(self, message: str):
        super().__init__(kind=FailureKind.INVALID_STATE, message=message)


class CardDecodeError(KnownError, ValueError):
    """
    Raised when a card document cannot be decoded.

    The record should be rejected. Callers loading many records skip the
    bad one and keep going.
    """

    def __init__(self, reason: str, card_name: str | None = None, detail: str | None = None):
        self.reason = reason
        self.card_name = card_name
        where = f" for '{card_name}'" if card_name else ""
        super().__init__(
            kind=FailureKind.DECODE_ERROR,
            message=f"Cannot decode card{where}: {reason}",
            detail=detail,
            suggestion="Fix or remove the offending record.",
        )


class RegulationDecodeError(KnownError, ValueError):
    """Raised when a limit regulation document cannot be decoded."""

    def __init__(self, reason: str, detail: str | None = None):
        self.reason = reason
        super().__init__(
            kind=FailureKind.DECODE_ERROR,
            message=f"Cannot decode limit regulation: {reason}",
            detail=detail,
        )


class CardNotFoundError(KnownError, LookupError):
    """Raised when a card name is not present in a card database."""

    def __init__(self, card_name: str):
        self.card_name = card_name
        super().__init__(
            kind=FailureKind.NOT_FOUND,
            message=f"Card '{card_name}' not found",
            suggestion="Check the card name spelling against the database.",
        )
