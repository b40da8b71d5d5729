"""Wren exception hierarchy.

Bad input never raises: validators report it through outcomes and the
error collection. These exceptions are for programmer mistakes caught
when a field is defined or a dependency is missing.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when a field definition or form setup is invalid.

    Typically raised while building ``Field`` shapes (``min_value`` above
    ``max_value``, a negative ``maxlength``) or when ``validate()`` receives
    two fields with the same name.
    """
