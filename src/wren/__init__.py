"""Wren — typed validation for untrusted form input.

Turns submitted key-value text into ``str``, ``int``, ``float`` and
choice values, collecting one human-readable error per field.

Basic usage::

    from wren import ErrorCollection, required_string, required_int

    errors = ErrorCollection()
    name = required_string(form, "name", "Name", maxlength=40, errors=errors)
    age = required_int(form, "age", "Age", maxlength=3,
                       min_value=0, max_value=130, errors=errors)
    if errors:
        ...  # re-present the form with errors

Parsing request bodies (``pip install wren[forms]`` for multipart)::

    from wren.http.forms import parse_form_data
    form = await parse_form_data(body, content_type)
"""

import importlib

__version__ = "0.1.0"

# Public name → module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    # Engine
    "ErrorCollection": "wren.validation.collection",
    "Field": "wren.validation.pipeline",
    "ValidationResult": "wren.validation.result",
    "validate": "wren.validation.pipeline",
    # Validators
    "required_string": "wren.validation.validators",
    "optional_string": "wren.validation.validators",
    "defaulting_string": "wren.validation.validators",
    "required_int": "wren.validation.validators",
    "optional_int": "wren.validation.validators",
    "defaulting_int": "wren.validation.validators",
    "required_float": "wren.validation.validators",
    "optional_float": "wren.validation.validators",
    "defaulting_float": "wren.validation.validators",
    "required_radio": "wren.validation.validators",
    "optional_radio": "wren.validation.validators",
    "optional_checkbox": "wren.validation.validators",
    "multiple_checkboxes": "wren.validation.validators",
    # Sources
    "FormData": "wren.http.forms",
    "QueryParams": "wren.http.query",
    # Configuration and errors
    "Messages": "wren.config",
    "ValidationConfig": "wren.config",
    "WrenError": "wren.errors",
    "ConfigurationError": "wren.errors",
}

__all__ = [
    "ConfigurationError",
    "ErrorCollection",
    "Field",
    "FormData",
    "Messages",
    "QueryParams",
    "ValidationConfig",
    "ValidationResult",
    "WrenError",
    "defaulting_float",
    "defaulting_int",
    "defaulting_string",
    "multiple_checkboxes",
    "optional_checkbox",
    "optional_float",
    "optional_int",
    "optional_radio",
    "optional_string",
    "required_float",
    "required_int",
    "required_radio",
    "required_string",
    "validate",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module_path), name)
