"""
JSON Schema node model.

A permissive, immutable model of the JSON Schema subset understood by
the generator and the validator. Keywords use their JSON spelling on
input and output (``minLength``, ``enumNames``), snake_case in Python.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

SCHEMA_TYPES = frozenset({"object", "string", "number", "integer", "boolean", "array"})


class SchemaNode(BaseModel):
    """A single node of a JSON Schema document."""

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    type: str | None = Field(default=None, description="object, string, number, integer, boolean or array")
    title: str | None = Field(default=None, description="Human-readable label")
    description: str | None = Field(default=None, description="Help text")
    format: str | None = Field(default=None, description="Format hint: email, textarea, ...")
    default: Any = Field(default=None, description="Initial value")

    properties: dict[str, "SchemaNode"] | None = Field(
        default=None, description="Child properties in declaration order"
    )
    required: list[str] | None = Field(default=None, description="Required property keys")
    items: "SchemaNode | None" = Field(default=None, description="Schema of array elements")

    enum: list[Any] | None = Field(default=None, description="Allowed values")
    enum_names: list[str] | None = Field(
        default=None, alias="enumNames", description="Display names aligned with enum"
    )

    minimum: int | float | None = Field(default=None)
    maximum: int | float | None = Field(default=None)
    min_length: int | None = Field(default=None, alias="minLength")
    max_length: int | None = Field(default=None, alias="maxLength")
    pattern: str | None = Field(default=None, description="Regular expression")

    @model_validator(mode="after")
    def _check_enum_names(self) -> "SchemaNode":
        if self.enum_names is not None and len(self.enum_names) != len(self.enum or []):
            raise ValueError(
                f"enumNames has {len(self.enum_names)} entries but enum has {len(self.enum or [])}"
            )
        return self

    @property
    def is_group(self) -> bool:
        """Whether this node is an object declaring a ``properties`` map, even an empty one."""
        return self.type == "object" and self.properties is not None

    def to_dict(self) -> dict[str, Any]:
        """Export as a JSON Schema dict."""
        return self.model_dump(by_alias=True, exclude_none=True)


SchemaNode.model_rebuild()


def as_schema(schema: "SchemaNode | Mapping[str, Any]") -> SchemaNode:
    """Return ``schema`` as a SchemaNode, parsing plain mappings."""
    if isinstance(schema, SchemaNode):
        return schema
    return SchemaNode.model_validate(dict(schema))
