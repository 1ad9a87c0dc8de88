"""Outcome unions: expected divergence modeled as values instead of exceptions.

Three closed unions cover the layers a request can fail at:

- ValidationOutcome: Invalid(detail) | Valid(value)      (payload syntax/format)
- LookupOutcome:     NotFound()      | Found(value)      (identifier presence)
- BusinessOutcome:   Rejected(detail)| Accepted(value)   (domain rules)

Edit nests all three. FlatEditResult is the equivalent single-level union;
flatten_edit_result converts one into the other so callers match once.

Payload-carrying variants reject None on construction.
"""

from dataclasses import dataclass
from typing import Any

type ErrorDetail = dict[str, Any]


def _require_payload(variant: object, value: object) -> None:
    if value is None:
        raise TypeError(f"{type(variant).__name__} requires a payload, got None")


@dataclass(frozen=True)
class Invalid:
    """Payload failed field-level validation."""

    detail: ErrorDetail

    def __post_init__(self) -> None:
        _require_payload(self, self.detail)


@dataclass(frozen=True)
class Valid[T]:
    """Payload passed validation; value is the validated (or downstream) result."""

    value: T

    def __post_init__(self) -> None:
        _require_payload(self, self.value)


@dataclass(frozen=True)
class NotFound:
    """No resource exists for the identifier."""


@dataclass(frozen=True)
class Found[T]:
    """Resource exists; value is the loaded (or downstream) result."""

    value: T

    def __post_init__(self) -> None:
        _require_payload(self, self.value)


@dataclass(frozen=True)
class Rejected:
    """A business rule refused the operation."""

    detail: ErrorDetail

    def __post_init__(self) -> None:
        _require_payload(self, self.detail)


@dataclass(frozen=True)
class Accepted[T]:
    """Business rules allowed the operation."""

    value: T

    def __post_init__(self) -> None:
        _require_payload(self, self.value)


type ValidationOutcome[T] = Invalid | Valid[T]
type LookupOutcome[T] = NotFound | Found[T]
type BusinessOutcome[T] = Rejected | Accepted[T]
type EditResult[T] = ValidationOutcome[LookupOutcome[BusinessOutcome[T]]]


# Flat edit union


@dataclass(frozen=True)
class InvalidInput:
    detail: ErrorDetail

    def __post_init__(self) -> None:
        _require_payload(self, self.detail)


@dataclass(frozen=True)
class EditNotFound:
    pass


@dataclass(frozen=True)
class EditRejected:
    detail: ErrorDetail

    def __post_init__(self) -> None:
        _require_payload(self, self.detail)


@dataclass(frozen=True)
class EditAccepted[T]:
    value: T

    def __post_init__(self) -> None:
        _require_payload(self, self.value)


type FlatEditResult[T] = InvalidInput | EditNotFound | EditRejected | EditAccepted[T]


def flatten_edit_result[T](outcome: EditResult[T]) -> FlatEditResult[T]:
    """Collapse the three nested edit checks into one flat variant.

    Raises:
        TypeError: If outcome is not a well-formed EditResult.
    """
    match outcome:
        case Invalid(detail=detail):
            return InvalidInput(detail)
        case Valid(value=NotFound()):
            return EditNotFound()
        case Valid(value=Found(value=Rejected(detail=detail))):
            return EditRejected(detail)
        case Valid(value=Found(value=Accepted(value=value))):
            return EditAccepted(value)
    raise TypeError(f"Not an edit result: {outcome!r}")
