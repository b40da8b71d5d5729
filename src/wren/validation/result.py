"""Validation outcomes — tagged per-field results and the form-level result.

Every pipeline stage returns one of three immutable outcomes::

    Success(value)           # keep going / final value
    Absent()                 # nothing supplied, nothing wrong
    Failure(kind, message)   # record message under the field name

``ValidationResult`` is the container ``validate()`` returns for a
whole form.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Why a field was rejected."""

    MISSING_REQUIRED = "missing_required"
    TOO_LONG = "too_long"
    NOT_AN_INTEGER = "not_an_integer"
    NOT_A_NUMBER = "not_a_number"
    OUT_OF_RANGE = "out_of_range"
    ILLEGAL_CHOICE = "illegal_choice"
    ILLEGAL_SCALAR = "illegal_scalar"


@dataclass(frozen=True, slots=True)
class Success[T]:
    """A coerced, constrained value."""

    value: T


@dataclass(frozen=True, slots=True)
class Absent:
    """No value was supplied and that is not an error."""


@dataclass(frozen=True, slots=True)
class Failure:
    """The field was rejected with a user-facing *message*."""

    kind: ErrorKind
    message: str


type Outcome[T] = Success[T] | Absent | Failure


def unwrap(outcome: Outcome[Any]) -> Any:
    """Return the value of a ``Success``, or ``None`` for anything else."""
    if isinstance(outcome, Success):
        return outcome.value
    return None


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """The outcome of validating a form against a list of fields.

    ``is_valid`` is True when there are no errors.
    The result is falsy when invalid, so you can write::

        result = validate(form, fields)
        if not result:
            return render_form(form, errors=result.errors)

    ``data`` maps every field that did not fail to its value: the coerced
    value, the default for an absent defaulting field, ``None`` for an
    absent optional field, and ``[]`` for an empty checkbox group.

    ``errors`` maps field names to a single message::

        {"age": "Age must be a whole number"}
    """

    data: dict[str, Any]
    errors: Mapping[str, str]

    @property
    def is_valid(self) -> bool:
        """True if validation passed with no errors."""
        return not self.errors

    def __bool__(self) -> bool:
        """Falsy when invalid — enables ``if not result:`` pattern."""
        return self.is_valid
