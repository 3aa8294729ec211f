"""
Schema property traversal.

Walks a schema's property map depth-first in declaration order.
Objects declaring properties are groups: the walker descends into
their children and hands the group visit the children's results.
Every other property is a leaf.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Generic, TypeVar

from json_flow.models.schema_node import SchemaNode
from json_flow.utils.paths import join_path

T = TypeVar("T")


class SchemaVisitor(ABC, Generic[T]):
    """Callbacks invoked by :func:`walk`."""

    @abstractmethod
    def visit_property(self, key: str, node: SchemaNode, path: str) -> T:
        """Build the result for a leaf property."""

    @abstractmethod
    def visit_group(self, key: str, node: SchemaNode, path: str, children: list[T]) -> T:
        """Build the result for a group from its children's results."""


def iter_children(node: SchemaNode, path: str = "") -> Iterator[tuple[str, SchemaNode, str]]:
    """Yield ``(key, child, child_path)`` for each declared property."""
    for key, child in (node.properties or {}).items():
        yield key, child, join_path(path, key)


def walk(node: SchemaNode, visitor: SchemaVisitor[T], path: str = "") -> list[T]:
    """
    Visit every property below ``node`` and collect the visitor results.

    Returns one result per direct property, in declaration order.
    """
    results: list[T] = []
    for key, child, child_path in iter_children(node, path):
        if child.is_group:
            children = walk(child, visitor, child_path)
            results.append(visitor.visit_group(key, child, child_path, children))
        else:
            results.append(visitor.visit_property(key, child, child_path))
    return results


def iter_leaves(node: SchemaNode, path: str = "") -> Iterator[tuple[str, SchemaNode, str]]:
    """Yield every leaf property, pre-order, as ``(key, node, path)``."""
    for key, child, child_path in iter_children(node, path):
        if child.is_group:
            yield from iter_leaves(child, child_path)
        else:
            yield key, child, child_path
