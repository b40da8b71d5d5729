"""Shared type aliases used across wren modules."""

from collections.abc import Mapping
from typing import Any, TypeAlias

from wren._internal.multimap import MultiValueMapping

# Anything a field can be read from: a plain mapping, FormData or QueryParams
FieldSource: TypeAlias = Mapping[str, Any] | MultiValueMapping
