"""Field pipeline — presence, then shape, then (maybe) one recorded error.

``check()`` is pure: it reads the source and returns an outcome.
``run()`` is what the named validators use: it unwraps the outcome and
writes a failure into the caller's error sink. ``validate()`` runs a
whole list of fields and returns a ``ValidationResult``.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from wren._internal.types import FieldSource
from wren.config import DEFAULT_CONFIG, ValidationConfig
from wren.errors import ConfigurationError
from wren.validation.collection import ErrorCollection, ErrorSink, record_error
from wren.validation.presence import Optional_, Presence, resolve
from wren.validation.result import Absent, Failure, Outcome, ValidationResult, unwrap
from wren.validation.shapes import Shape

logger = logging.getLogger("wren.validation")


@dataclass(frozen=True, slots=True)
class Field:
    """One named slot of a form.

    Attributes:
        name: The HTML ``name`` attribute; also the error key.
        label: Human-readable name used in error messages.
        shape: What the raw value must turn into.
        presence: What an absent value means. Defaults to ``Optional_()``.
    """

    name: str
    label: str
    shape: Shape
    presence: Presence = field(default_factory=Optional_)


def check(
    source: FieldSource,
    form_field: Field,
    *,
    config: ValidationConfig = DEFAULT_CONFIG,
) -> Outcome[Any]:
    """Run one field through presence resolution and its shape."""
    raw, settled = resolve(
        source, form_field.name, form_field.label, form_field.presence, form_field.shape, config
    )
    if settled is not None:
        return settled
    return form_field.shape.coerce(raw, form_field.label, config)


def run(
    source: FieldSource,
    form_field: Field,
    errors: ErrorSink,
    *,
    config: ValidationConfig = DEFAULT_CONFIG,
) -> Any:
    """Check one field, record its failure in *errors*, return its value or ``None``."""
    outcome = check(source, form_field, config=config)
    if isinstance(outcome, Failure):
        logger.debug("Field %r rejected: %s", form_field.name, outcome.kind.value)
        record_error(errors, form_field.name, outcome.message)
    return unwrap(outcome)


def validate(
    source: FieldSource,
    fields: Sequence[Field],
    *,
    config: ValidationConfig = DEFAULT_CONFIG,
) -> ValidationResult:
    """Validate a whole submission.

    Args:
        source: Any mapping of field names to submitted values —
            ``FormData``, ``QueryParams``, or a plain ``dict``.
        fields: The fields to check. Names must be unique.
        config: Trimming and message configuration.

    Returns:
        A ``ValidationResult`` with ``.data`` (values of every field that
        did not fail) and ``.errors`` (field → message).

    Raises:
        ConfigurationError: If two fields share a name.

    Example::

        result = validate(form, [
            Field("title", "Title", Text(maxlength=200), Required()),
            Field("tags", "Tags", MultiChoice(["python", "web"])),
        ])
        if not result:
            # result.errors == {"title": "Title is required"}
            ...
    """
    seen: set[str] = set()
    for form_field in fields:
        if form_field.name in seen:
            msg = f"Duplicate field name {form_field.name!r} in form definition"
            raise ConfigurationError(msg)
        seen.add(form_field.name)

    errors = ErrorCollection()
    data: dict[str, Any] = {}

    for form_field in fields:
        outcome = check(source, form_field, config=config)
        if isinstance(outcome, Failure):
            logger.debug("Field %r rejected: %s", form_field.name, outcome.kind.value)
            errors.record(form_field.name, outcome.message)
        elif isinstance(outcome, Absent):
            data[form_field.name] = None
        else:
            data[form_field.name] = outcome.value

    if errors:
        logger.debug("Form rejected with %d error(s): %s", len(errors), ", ".join(errors))

    return ValidationResult(data=data, errors=errors)
