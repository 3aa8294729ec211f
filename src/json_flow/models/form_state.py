"""
Validation result models.

These models represent the output of the validator.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FormError(BaseModel):
    """Validation error for a specific data path."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Dotted data path, array indices as name[i]")
    message: str = Field(..., description="Human-readable error message")


class FormState(BaseModel):
    """Snapshot of form data together with its validation errors."""

    data: dict[str, Any] = Field(default_factory=dict, description="Current form data")
    errors: list[FormError] = Field(default_factory=list, description="Validation errors")
    valid: bool = Field(..., description="Whether the form data is valid")

    @property
    def error_count(self) -> int:
        """Get the number of validation errors."""
        return len(self.errors)

    def get_field_errors(self, path: str) -> list[FormError]:
        """Get all errors for a specific path."""
        return [e for e in self.errors if e.path == path]

    def first_error(self, path: str) -> FormError | None:
        """Get the error a renderer shows next to the control at ``path``."""
        return next((e for e in self.errors if e.path == path), None)

    def to_error_dict(self) -> dict[str, list[str]]:
        """Convert errors to a dict mapping paths to error messages."""
        result: dict[str, list[str]] = {}
        for error in self.errors:
            if error.path not in result:
                result[error.path] = []
            result[error.path].append(error.message)
        return result
