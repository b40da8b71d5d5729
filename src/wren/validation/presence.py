"""Field extraction and presence policies.

The first stage of every validator. ``extract()`` answers "was this field
supplied at all?" and a presence policy decides what an absent field
means:

- ``Required()`` — absence is an error
- ``Optional_()`` — absence is silently ``None``
- ``Defaulting(default)`` — absence yields *default*, trusted and unchecked

The trailing underscore on ``Optional_`` keeps it from shadowing
``typing.Optional`` in modules that import both.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final

from wren._internal.multimap import MultiValueMapping
from wren._internal.types import FieldSource
from wren.validation.result import ErrorKind, Failure, Outcome, Success

if TYPE_CHECKING:
    from wren.config import ValidationConfig
    from wren.validation.shapes import Shape


class _Missing:
    """Marker for a field that was not supplied."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


def extract(source: FieldSource, name: str, *, multiple: bool = False) -> Any:
    """Return the raw value for *name*, or ``MISSING``.

    A key mapped to ``None`` counts as missing. For multi-value sources
    (``FormData``, ``QueryParams``) a scalar read returns the first value
    and ``multiple=True`` returns every value as a list. Plain mappings
    are returned as stored, so a checkbox group submitted as a single
    string stays a string.
    """
    if name not in source:
        return MISSING
    if isinstance(source, MultiValueMapping):
        if multiple:
            return source.get_list(name)
        value = source.get(name)
    else:
        value = source[name]
    if value is None:
        return MISSING
    return value


# ---------------------------------------------------------------------------
# Policies
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Required:
    """An absent or blank field is an error."""

    def on_absent(self, shape: Shape, label: str, config: ValidationConfig) -> Outcome[Any]:
        return Failure(ErrorKind.MISSING_REQUIRED, shape.missing_message(label, config.messages))


@dataclass(frozen=True, slots=True)
class Optional_:
    """An absent or blank field is fine; the shape decides what "nothing" is."""

    def on_absent(self, shape: Shape, label: str, config: ValidationConfig) -> Outcome[Any]:
        return shape.absent()


@dataclass(frozen=True, slots=True)
class Defaulting:
    """An absent or blank field yields *default* as the final value."""

    default: Any = None

    def on_absent(self, shape: Shape, label: str, config: ValidationConfig) -> Outcome[Any]:
        return Success(self.default)


type Presence = Required | Optional_ | Defaulting


def resolve(
    source: FieldSource,
    name: str,
    label: str,
    presence: Presence,
    shape: Shape,
    config: ValidationConfig,
) -> tuple[Any, Outcome[Any] | None]:
    """Extract *name* and settle absence.

    Returns ``(raw, None)`` when a value is present and must go on to the
    shape, or ``(MISSING, outcome)`` when the presence policy already
    decided the result.
    """
    raw = extract(source, name, multiple=shape.multiple)
    if raw is MISSING or shape.is_blank(raw, config):
        return MISSING, presence.on_absent(shape, label, config)
    return raw, None

