"""Named field validators — one call per form control.

Each validator reads one field from *source*, returns the validated
value (or ``None``), and writes at most one message into *errors* under
*name*. None of them raise on bad input.

Usage::

    errors = ErrorCollection()
    title = required_string(form, "title", "Title", maxlength=80, errors=errors)
    qty = defaulting_int(form, "qty", "Quantity", maxlength=3, min_value=1,
                         max_value=99, default=1, errors=errors)
    size = required_radio(form, "size", "size", ["S", "M", "L"], errors=errors)
    extras = multiple_checkboxes(form, "extras", "extras", ["cheese", "ham"],
                                 errors=errors)
    if errors:
        ...
"""

from collections.abc import Sequence
from typing import Any

from wren._internal.types import FieldSource
from wren.config import DEFAULT_CONFIG, ValidationConfig
from wren.validation.collection import ErrorSink
from wren.validation.pipeline import Field, run
from wren.validation.presence import Defaulting, Optional_, Required
from wren.validation.shapes import Checkbox, Choice, Float, Integer, MultiChoice, Text

# ---------------------------------------------------------------------------
# Strings
# ---------------------------------------------------------------------------


def required_string(
    source: FieldSource,
    name: str,
    label: str,
    *,
    maxlength: int,
    errors: ErrorSink,
    config: ValidationConfig = DEFAULT_CONFIG,
) -> str | None:
    """Non-blank text of at most *maxlength* characters, trimmed.

    Args:
        source: Submitted fields — ``FormData``, ``QueryParams`` or a ``dict``.
        name: The control's ``name`` attribute; also the error key.
        label: The control's label, used in error messages.
        maxlength: Longest accepted trimmed text.
        errors: Error sink, usually an ``ErrorCollection``.
        config: Trimming and message configuration.

    Returns:
        The trimmed text, or ``None`` after recording an error.
    """
    form_field = Field(name, label, Text(maxlength), Required())
    return run(source, form_field, errors, config=config)


def optional_string(
    source: FieldSource,
    name: str,
    label: str,
    *,
    maxlength: int,
    errors: ErrorSink,
    config: ValidationConfig = DEFAULT_CONFIG,
) -> str | None:
    """Like ``required_string``, but blank input returns ``None`` silently."""
    form_field = Field(name, label, Text(maxlength), Optional_())
    return run(source, form_field, errors, config=config)


def defaulting_string(
    source: FieldSource,
    name: str,
    label: str,
    *,
    maxlength: int,
    default: Any,
    errors: ErrorSink,
    config: ValidationConfig = DEFAULT_CONFIG,
) -> Any:
    """Like ``required_string``, but blank input returns *default* unchecked."""
    form_field = Field(name, label, Text(maxlength), Defaulting(default))
    return run(source, form_field, errors, config=config)


# ---------------------------------------------------------------------------
# Integers
# ---------------------------------------------------------------------------


def required_int(
    source: FieldSource,
    name: str,
    label: str,
    *,
    maxlength: int,
    min_value: int,
    max_value: int,
    errors: ErrorSink,
    config: ValidationConfig = DEFAULT_CONFIG,
) -> int | None:
    """Whole number in ``[min_value, max_value]``.

    The trimmed text must be exactly what ``str(int(text))`` produces, so
    ``"42"`` passes while ``"42.0"``, ``"+42"`` and ``"042"`` do not.
    Checks run in order: presence, length, whole number, range.
    """
    form_field = Field(name, label, Integer(maxlength, min_value, max_value), Required())
    return run(source, form_field, errors, config=config)


def optional_int(
    source: FieldSource,
    name: str,
    label: str,
    *,
    maxlength: int,
    min_value: int,
    max_value: int,
    errors: ErrorSink,
    config: ValidationConfig = DEFAULT_CONFIG,
) -> int | None:
    form_field = Field(name, label, Integer(maxlength, min_value, max_value), Optional_())
    return run(source, form_field, errors, config=config)


def defaulting_int(
    source: FieldSource,
    name: str,
    label: str,
    *,
    maxlength: int,
    min_value: int,
    max_value: int,
    default: Any,
    errors: ErrorSink,
    config: ValidationConfig = DEFAULT_CONFIG,
) -> Any:
    form_field = Field(name, label, Integer(maxlength, min_value, max_value), Defaulting(default))
    return run(source, form_field, errors, config=config)


# ---------------------------------------------------------------------------
# Floats
# ---------------------------------------------------------------------------


def required_float(
    source: FieldSource,
    name: str,
    label: str,
    *,
    maxlength: int,
    min_value: float,
    max_value: float,
    errors: ErrorSink,
    config: ValidationConfig = DEFAULT_CONFIG,
) -> float | None:
    """Number in ``[min_value, max_value]``.

    Accepts signed decimal and exponential literals (``"-1.5"``,
    ``".5"``, ``"2e3"``); rejects ``"inf"``, ``"nan"`` and hex.
    """
    form_field = Field(name, label, Float(maxlength, min_value, max_value), Required())
    return run(source, form_field, errors, config=config)


def optional_float(
    source: FieldSource,
    name: str,
    label: str,
    *,
    maxlength: int,
    min_value: float,
    max_value: float,
    errors: ErrorSink,
    config: ValidationConfig = DEFAULT_CONFIG,
) -> float | None:
    form_field = Field(name, label, Float(maxlength, min_value, max_value), Optional_())
    return run(source, form_field, errors, config=config)


def defaulting_float(
    source: FieldSource,
    name: str,
    label: str,
    *,
    maxlength: int,
    min_value: float,
    max_value: float,
    default: Any,
    errors: ErrorSink,
    config: ValidationConfig = DEFAULT_CONFIG,
) -> Any:
    form_field = Field(name, label, Float(maxlength, min_value, max_value), Defaulting(default))
    return run(source, form_field, errors, config=config)


# ---------------------------------------------------------------------------
# Radio buttons and checkboxes
# ---------------------------------------------------------------------------


def required_radio(
    source: FieldSource,
    name: str,
    label: str,
    legal_values: Sequence[str],
    *,
    errors: ErrorSink,
    config: ValidationConfig = DEFAULT_CONFIG,
) -> str | None:
    """The value of the checked button, which must be one of *legal_values*.

    Presence means the key was submitted at all; an empty string is a
    legitimate button value.
    """
    form_field = Field(name, label, Choice(legal_values), Required())
    return run(source, form_field, errors, config=config)


def optional_radio(
    source: FieldSource,
    name: str,
    label: str,
    legal_values: Sequence[str],
    *,
    errors: ErrorSink,
    config: ValidationConfig = DEFAULT_CONFIG,
) -> str | None:
    form_field = Field(name, label, Choice(legal_values), Optional_())
    return run(source, form_field, errors, config=config)


def optional_checkbox(
    source: FieldSource,
    name: str,
    label: str,
    legal_value: str,
    *,
    errors: ErrorSink,
    config: ValidationConfig = DEFAULT_CONFIG,
) -> str | None:
    """*legal_value* if the box was checked, ``None`` if not."""
    form_field = Field(name, label, Checkbox(legal_value), Optional_())
    return run(source, form_field, errors, config=config)


def multiple_checkboxes(
    source: FieldSource,
    name: str,
    label: str,
    legal_values: Sequence[str],
    *,
    errors: ErrorSink,
    config: ValidationConfig = DEFAULT_CONFIG,
) -> list[str] | None:
    """Every checked value of a checkbox group, in submitted order.

    Returns ``[]`` when nothing was checked. Returns ``None`` and records
    an error if a single string arrives where a list belongs, or if any
    value is not in *legal_values*.
    """
    form_field = Field(name, label, MultiChoice(legal_values), Optional_())
    return run(source, form_field, errors, config=config)
