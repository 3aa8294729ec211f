"""
Built-in schema templates.

Starting points for the schema editor: the default registration form
plus contact, signup and survey forms.
"""

import copy
from typing import Any

TEMPLATES: dict[str, dict[str, Any]] = {
    "registration": {
        "type": "object",
        "title": "Registration Form",
        "properties": {
            "firstName": {"type": "string", "title": "First Name", "minLength": 2},
            "lastName": {"type": "string", "title": "Last Name", "minLength": 2},
            "email": {"type": "string", "title": "Email", "format": "email"},
            "age": {"type": "integer", "title": "Age", "minimum": 18, "maximum": 100},
            "subscribe": {"type": "boolean", "title": "Subscribe to newsletter", "default": False},
        },
        "required": ["firstName", "lastName", "email"],
    },
    "contact": {
        "type": "object",
        "title": "Contact Form",
        "properties": {
            "name": {"type": "string", "title": "Full Name", "minLength": 2},
            "email": {"type": "string", "title": "Email Address", "format": "email"},
            "message": {"type": "string", "title": "Message", "minLength": 10},
        },
        "required": ["name", "email", "message"],
    },
    "signup": {
        "type": "object",
        "title": "Sign Up Form",
        "properties": {
            "username": {
                "type": "string",
                "title": "Username",
                "minLength": 3,
                "pattern": "^[a-zA-Z0-9_]+$",
            },
            "email": {"type": "string", "title": "Email Address", "format": "email"},
            "password": {"type": "string", "title": "Password", "minLength": 8},
            "confirmPassword": {"type": "string", "title": "Confirm Password"},
            "terms": {
                "type": "boolean",
                "title": "I agree to the terms and conditions",
                "default": False,
            },
        },
        "required": ["username", "email", "password", "confirmPassword", "terms"],
    },
    "survey": {
        "type": "object",
        "title": "Customer Survey",
        "properties": {
            "satisfaction": {
                "type": "integer",
                "title": "Overall Satisfaction",
                "minimum": 1,
                "maximum": 5,
            },
            "feedback": {"type": "string", "title": "Detailed Feedback", "minLength": 10},
            "improvements": {"type": "string", "title": "Suggested Improvements", "minLength": 10},
            "wouldRecommend": {
                "type": "boolean",
                "title": "Would you recommend us?",
                "default": False,
            },
            "source": {
                "type": "string",
                "title": "How did you hear about us?",
                "enum": ["Social Media", "Friend", "Advertisement", "Search Engine", "Other"],
                "default": "Social Media",
            },
        },
    },
}

DEFAULT_TEMPLATE = "registration"


def list_templates() -> list[str]:
    """Names of the built-in templates."""
    return list(TEMPLATES)


def get_template(name: str) -> dict[str, Any]:
    """
    Get a copy of a built-in template schema.

    Raises:
        KeyError: If no template has that name.
    """
    if name not in TEMPLATES:
        raise KeyError(f"Unknown template: {name}. Available: {', '.join(TEMPLATES)}")
    return copy.deepcopy(TEMPLATES[name])
