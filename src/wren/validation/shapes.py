"""Value shapes — the coercion and constraint stages of a field.

A shape receives a raw value the presence stage found and turns it into
an outcome. Checks run in a fixed order and stop at the first failure:

1. trim (text shapes only)
2. maximum length of the trimmed text
3. type coercion (``Integer``, ``Float``)
4. inclusive range or legal-value membership

Text shapes treat blank input as absent. Choice shapes decide presence
by key existence, so an empty string is a real radio value.
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, ClassVar

from wren.config import Messages, ValidationConfig
from wren.errors import ConfigurationError
from wren.validation.result import Absent, ErrorKind, Failure, Outcome, Success

# Canonical whole number: what str(int(text)) would print
_INTEGER_RE = re.compile(r"0|-?[1-9][0-9]*")

# Optionally signed decimal or exponential literal, ASCII digits only
_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def _as_text(raw: Any, config: ValidationConfig) -> str:
    """Trimmed text for a scalar field. A list where a scalar belongs reads as blank."""
    if isinstance(raw, str):
        text = raw
    elif isinstance(raw, (bytes, bytearray)):
        text = raw.decode("utf-8", errors="replace")
    elif isinstance(raw, Sequence):
        text = ""
    else:
        text = str(raw)
    return text.strip(config.strip_chars)


def _format_bound(bound: float) -> str:
    """Render a range bound the way a user typed it: ``10`` not ``10.0``."""
    if isinstance(bound, float) and bound.is_integer():
        return str(int(bound))
    return str(bound)


class Shape:
    """Base for value shapes.

    Subclasses override ``coerce`` and, where presence is not decided by
    blank text, ``is_blank``, ``missing_message`` and ``absent``.
    """

    __slots__ = ()

    # Read every submitted value instead of the first
    multiple: ClassVar[bool] = False

    def is_blank(self, raw: Any, config: ValidationConfig) -> bool:
        return _as_text(raw, config) == ""

    def missing_message(self, label: str, messages: Messages) -> str:
        return messages.required.format(label=label)

    def absent(self) -> Outcome[Any]:
        return Absent()

    def coerce(self, raw: Any, label: str, config: ValidationConfig) -> Outcome[Any]:
        raise NotImplementedError


# ---------------------------------------------------------------------------
# Text and numbers
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Text(Shape):
    """Trimmed string no longer than *maxlength* characters."""

    maxlength: int

    def __post_init__(self) -> None:
        if self.maxlength < 0:
            msg = f"maxlength must not be negative, got {self.maxlength}"
            raise ConfigurationError(msg)

    def _measure(self, raw: Any, label: str, config: ValidationConfig) -> Outcome[str]:
        text = _as_text(raw, config)
        if len(text) > self.maxlength:
            message = config.messages.too_long.format(label=label, maxlength=self.maxlength)
            return Failure(ErrorKind.TOO_LONG, message)
        return Success(text)

    def coerce(self, raw: Any, label: str, config: ValidationConfig) -> Outcome[Any]:
        return self._measure(raw, label, config)


@dataclass(frozen=True, slots=True)
class _Ranged(Text):
    min_value: float
    max_value: float

    def __post_init__(self) -> None:
        Text.__post_init__(self)
        if self.min_value > self.max_value:
            msg = f"min_value {self.min_value} is greater than max_value {self.max_value}"
            raise ConfigurationError(msg)

    def _parse(self, text: str, label: str, config: ValidationConfig) -> Outcome[Any]:
        raise NotImplementedError

    def _range_message(self, label: str, config: ValidationConfig) -> str:
        return config.messages.out_of_range.format(
            label=label,
            min=_format_bound(self.min_value),
            max=_format_bound(self.max_value),
        )

    def coerce(self, raw: Any, label: str, config: ValidationConfig) -> Outcome[Any]:
        outcome = self._measure(raw, label, config)
        if isinstance(outcome, Success):
            outcome = self._parse(outcome.value, label, config)
        if not isinstance(outcome, Success):
            return outcome
        if not self.min_value <= outcome.value <= self.max_value:
            return Failure(ErrorKind.OUT_OF_RANGE, self._range_message(label, config))
        return outcome


@dataclass(frozen=True, slots=True)
class Integer(_Ranged):
    """Whole number in ``[min_value, max_value]``.

    The text must survive an ``int`` round trip unchanged, so ``"+5"``,
    ``"007"``, ``"1_000"`` and ``"42.0"`` are all rejected.

    A whole number longer than the interpreter's integer string limit
    (``sys.get_int_max_str_digits()``) cannot be converted and fails the
    range check.
    """

    def _parse(self, text: str, label: str, config: ValidationConfig) -> Outcome[Any]:
        if not _INTEGER_RE.fullmatch(text):
            message = config.messages.not_integer.format(label=label)
            return Failure(ErrorKind.NOT_AN_INTEGER, message)
        try:
            return Success(int(text))
        except ValueError:
            return Failure(ErrorKind.OUT_OF_RANGE, self._range_message(label, config))


@dataclass(frozen=True, slots=True)
class Float(_Ranged):
    """Decimal or exponential number in ``[min_value, max_value]``."""

    def _parse(self, text: str, label: str, config: ValidationConfig) -> Outcome[Any]:
        if not _NUMBER_RE.fullmatch(text):
            message = config.messages.not_number.format(label=label)
            return Failure(ErrorKind.NOT_A_NUMBER, message)
        return Success(float(text))


# ---------------------------------------------------------------------------
# Choice
# ---------------------------------------------------------------------------


def _legal_tuple(legal_values: Sequence[str]) -> tuple[str, ...]:
    if isinstance(legal_values, str):
        msg = f"legal_values must be a sequence of values, not the string {legal_values!r}"
        raise ConfigurationError(msg)
    return tuple(legal_values)


@dataclass(frozen=True, slots=True)
class Choice(Shape):
    """One value from a radio group's *legal_values*."""

    legal_values: Sequence[str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "legal_values", _legal_tuple(self.legal_values))

    def is_blank(self, raw: Any, config: ValidationConfig) -> bool:
        return False

    def missing_message(self, label: str, messages: Messages) -> str:
        return messages.radio_missing.format(label=label)

    def coerce(self, raw: Any, label: str, config: ValidationConfig) -> Outcome[Any]:
        if raw not in self.legal_values:
            message = config.messages.radio_illegal.format(label=label)
            return Failure(ErrorKind.ILLEGAL_CHOICE, message)
        return Success(raw)


@dataclass(frozen=True, slots=True)
class Checkbox(Shape):
    """A single checkbox whose only legal value is *legal_value*."""

    legal_value: str

    def is_blank(self, raw: Any, config: ValidationConfig) -> bool:
        return False

    def coerce(self, raw: Any, label: str, config: ValidationConfig) -> Outcome[Any]:
        if raw != self.legal_value:
            message = config.messages.checkbox_illegal.format(label=label)
            return Failure(ErrorKind.ILLEGAL_CHOICE, message)
        return Success(raw)


@dataclass(frozen=True, slots=True)
class MultiChoice(Shape):
    """Zero or more values from a checkbox group's *legal_values*.

    Nothing checked is a valid answer and yields ``[]``. A single string
    where a list belongs is rejected, and so is the whole group as soon as
    one value is illegal.
    """

    legal_values: Sequence[str]

    multiple: ClassVar[bool] = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "legal_values", _legal_tuple(self.legal_values))

    def is_blank(self, raw: Any, config: ValidationConfig) -> bool:
        return False

    def absent(self) -> Outcome[Any]:
        return Success([])

    def coerce(self, raw: Any, label: str, config: ValidationConfig) -> Outcome[Any]:
        message = config.messages.checkbox_illegal.format(label=label)
        if isinstance(raw, str) or not isinstance(raw, Sequence):
            return Failure(ErrorKind.ILLEGAL_SCALAR, message)
        for value in raw:
            if value not in self.legal_values:
                return Failure(ErrorKind.ILLEGAL_CHOICE, message)
        return Success(list(raw))
