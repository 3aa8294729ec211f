"""
UI Schema models.

A UI schema is a tree of layouts and controls. Layouts group
elements; controls bind a single schema property through a scope
string such as ``#/properties/person.name``.
"""

from collections.abc import Iterator
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Control(BaseModel):
    """Leaf element bound to one schema property."""

    model_config = ConfigDict(frozen=True)

    type: Literal["Control"] = "Control"
    scope: str = Field(..., description="Scope string, e.g. #/properties/email")
    label: str | None = Field(default=None, description="Display label")
    options: dict[str, Any] = Field(default_factory=dict, description="Rendering hints")


class Layout(BaseModel):
    """Container element: vertical, horizontal or labeled group."""

    model_config = ConfigDict(frozen=True)

    type: Literal["VerticalLayout", "HorizontalLayout", "Group"] = "VerticalLayout"
    label: str | None = Field(default=None, description="Group heading")
    elements: list["UiNode"] = Field(default_factory=list)

    def iter_controls(self) -> Iterator[Control]:
        """Yield every control in document order."""
        for element in self.elements:
            if isinstance(element, Control):
                yield element
            else:
                yield from element.iter_controls()

    def to_dict(self) -> dict[str, Any]:
        """Export as a UI Schema dict."""
        return self.model_dump(exclude_none=True)


UiNode = Annotated[Union[Layout, Control], Field(discriminator="type")]

Layout.model_rebuild()


class UiSchema(Layout):
    """Root of a generated UI schema."""

    type: Literal["VerticalLayout"] = "VerticalLayout"
