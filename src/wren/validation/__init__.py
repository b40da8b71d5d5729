"""Form validation — typed fields, one error per field.

Usage::

    from wren.validation import ErrorCollection, required_string, optional_int

    async def create_order(request):
        form = await request.form()
        errors = ErrorCollection()
        name = required_string(form, "name", "Name", maxlength=50, errors=errors)
        qty = optional_int(form, "qty", "Quantity", maxlength=3,
                           min_value=1, max_value=99, errors=errors)
        if errors:
            return render("order.html", form=form, errors=errors)

Or declare the form once and validate it in one call::

    from wren.validation import Field, Integer, Required, Text, validate

    ORDER = [
        Field("name", "Name", Text(maxlength=50), Required()),
        Field("qty", "Quantity", Integer(3, 1, 99)),
    ]
    result = validate(form, ORDER)
    if not result:
        ...  # result.errors == {"name": "Name is required"}
"""

from wren.validation.collection import ErrorCollection, ErrorSink
from wren.validation.pipeline import Field, check, run, validate
from wren.validation.presence import MISSING, Defaulting, Optional_, Presence, Required, extract
from wren.validation.result import (
    Absent,
    ErrorKind,
    Failure,
    Outcome,
    Success,
    ValidationResult,
)
from wren.validation.shapes import Checkbox, Choice, Float, Integer, MultiChoice, Shape, Text
from wren.validation.validators import (
    defaulting_float,
    defaulting_int,
    defaulting_string,
    multiple_checkboxes,
    optional_checkbox,
    optional_float,
    optional_int,
    optional_radio,
    optional_string,
    required_float,
    required_int,
    required_radio,
    required_string,
)

__all__ = [
    "MISSING",
    "Absent",
    "Checkbox",
    "Choice",
    "Defaulting",
    "ErrorCollection",
    "ErrorKind",
    "ErrorSink",
    "Failure",
    "Field",
    "Float",
    "Integer",
    "MultiChoice",
    "Optional_",
    "Outcome",
    "Presence",
    "Required",
    "Shape",
    "Success",
    "Text",
    "ValidationResult",
    "check",
    "defaulting_float",
    "defaulting_int",
    "defaulting_string",
    "extract",
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
    "run",
    "validate",
]
