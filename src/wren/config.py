"""Validation configuration.

``ValidationConfig`` and ``Messages`` are frozen dataclasses — immutable
after creation, IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass, field

# Whitespace removed from both ends of submitted text before any check
DEFAULT_STRIP_CHARS = " \t\n\r\0\x0b"


@dataclass(frozen=True, slots=True)
class Messages:
    """End-user error message templates.

    Templates are ``str.format`` strings. Available placeholders:
    ``{label}`` everywhere, ``{maxlength}`` in ``too_long``, and
    ``{min}``/``{max}`` in ``out_of_range``.

    Override individual templates to localize or rephrase::

        messages = Messages(required="Please fill in {label}")
        config = ValidationConfig(messages=messages)
    """

    required: str = "{label} is required"
    too_long: str = "{label} must be {maxlength} characters or less"
    not_integer: str = "{label} must be a whole number"
    not_number: str = "{label} must be a number"
    out_of_range: str = "{label} must be between {min} and {max} inclusive"
    radio_missing: str = "You didn't select one of the {label} buttons"
    radio_illegal: str = "You provided an illegal value for the {label} buttons"
    checkbox_illegal: str = "You provided an illegal value for the {label} checkbox"


@dataclass(frozen=True, slots=True)
class ValidationConfig:
    """Engine configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ValidationConfig(strip_chars=" ")
    """

    # Characters trimmed from both ends of text input
    strip_chars: str = DEFAULT_STRIP_CHARS

    # Error message templates
    messages: Messages = field(default_factory=Messages)


DEFAULT_CONFIG = ValidationConfig()
