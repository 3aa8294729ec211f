"""Property name formatting."""

import re

_UPPERCASE = re.compile(r"([A-Z])")


def format_property_name(name: str) -> str:
    """
    Turn a camelCase, snake_case or dotted property name into a label.

    Only the last ``.``-delimited segment is used. Runs of whitespace
    collapse to a single space, so formatting a label again returns it
    unchanged.

    Examples:
        >>> format_property_name("firstName")
        'First Name'
        >>> format_property_name("first_name")
        'First Name'
        >>> format_property_name("person.address.city")
        'City'
        >>> format_property_name("AB")
        'A B'
    """
    spaced = _UPPERCASE.sub(r" \1", name).replace("_", " ")
    last = spaced.split(".")[-1].strip()
    return " ".join(word[:1].upper() + word[1:].lower() for word in last.split())
