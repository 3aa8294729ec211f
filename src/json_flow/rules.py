"""
Constraint rules applied by the validator.

Each rule pairs a schema keyword with a check that returns an error
message, or None when the value satisfies the constraint. Rules are
grouped by schema type and run in table order; every rule of a group
is evaluated, so one value can fail several rules.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable

from json_flow.models.schema_node import SchemaNode

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")

# Decimal literals a text input can carry; "inf", "nan" and "1_0" are not numbers here
NUMERIC_STRING_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?|[+-]?Infinity")


def _format_number(number: int | float) -> str:
    if isinstance(number, float) and number.is_integer():
        return str(int(number))
    return str(number)


def _as_number(value: Any) -> int | float | None:
    """
    Numeric view of a form value.

    Text inputs deliver numbers as strings: a cleared input counts as 0,
    anything that is not a decimal literal is not a number.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        if NUMERIC_STRING_PATTERN.fullmatch(text) is None:
            return None
        return float(text.replace("Infinity", "inf"))
    return None


@dataclass(frozen=True)
class ConstraintRule:
    """A keyword check for values of one schema type."""

    keyword: str
    check: Callable[[Any, SchemaNode], str | None]


def _check_min_length(value: str, node: SchemaNode) -> str | None:
    if node.min_length and len(value) < node.min_length:
        return f"Must be at least {node.min_length} characters"
    return None


def _check_max_length(value: str, node: SchemaNode) -> str | None:
    if node.max_length and len(value) > node.max_length:
        return f"Must be at most {node.max_length} characters"
    return None


def _check_pattern(value: str, node: SchemaNode) -> str | None:
    # re.error from a malformed pattern propagates to the caller
    if node.pattern and re.search(node.pattern, value) is None:
        return "Invalid format"
    return None


def _check_email(value: str, node: SchemaNode) -> str | None:
    if node.format == "email" and EMAIL_PATTERN.fullmatch(value) is None:
        return "Invalid email address"
    return None


def _check_minimum(value: int | float, node: SchemaNode) -> str | None:
    if node.minimum is not None and value < node.minimum:
        return f"Must be at least {_format_number(node.minimum)}"
    return None


def _check_maximum(value: int | float, node: SchemaNode) -> str | None:
    if node.maximum is not None and value > node.maximum:
        return f"Must be at most {_format_number(node.maximum)}"
    return None


STRING_RULES: tuple[ConstraintRule, ...] = (
    ConstraintRule("minLength", _check_min_length),
    ConstraintRule("maxLength", _check_max_length),
    ConstraintRule("pattern", _check_pattern),
    ConstraintRule("format", _check_email),
)

NUMBER_RULES: tuple[ConstraintRule, ...] = (
    ConstraintRule("minimum", _check_minimum),
    ConstraintRule("maximum", _check_maximum),
)


def check_constraints(value: Any, node: SchemaNode) -> list[str]:
    """
    Run the rules for ``node.type`` against a present value.

    Values that do not fit the rule group (a number under a string
    node, a non-numeric string under a number node) and nodes of other
    or unknown types produce no messages.
    """
    if node.type == "string":
        if not isinstance(value, str):
            return []
        rules, subject = STRING_RULES, value
    elif node.type in ("number", "integer"):
        subject = _as_number(value)
        if subject is None:
            return []
        rules = NUMBER_RULES
    else:
        return []

    messages = []
    for rule in rules:
        message = rule.check(subject, node)
        if message is not None:
            messages.append(message)
    return messages
