"""
Reusable helpers for renderers.

Path conversion and label formatting shared by the generator,
the validator and any rendering layer.
"""

from json_flow.utils.naming import format_property_name
from json_flow.utils.paths import (
    SCOPE_PREFIX,
    get_value_by_path,
    join_path,
    key_to_scope,
    resolve_property,
    scope_to_key,
    set_value_by_path,
)

__all__ = [
    "SCOPE_PREFIX",
    "format_property_name",
    "get_value_by_path",
    "join_path",
    "key_to_scope",
    "resolve_property",
    "scope_to_key",
    "set_value_by_path",
]
