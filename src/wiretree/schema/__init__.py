"""
Schema walking for wiretree.

This package discovers the variables a schema declares: tag parsing, name
composition, visibility resolution, node inspection and the walker itself.
"""

from wiretree.schema.collector import (
    DiscoveredVariable,
    VariableCollector,
    collect_variables,
)
from wiretree.schema.inspection import (
    ElementRef,
    FieldRef,
    NodeKind,
    SchemaInspector,
)
from wiretree.schema.naming import append_name
from wiretree.schema.tags import Tag, TagOptions, is_valid_tag_name, parse_tag
from wiretree.schema.visibility import (
    resolve_field_visibility,
    resolve_leaf_visibility,
)
from wiretree.schema.walker import SchemaWalker, walk_schema

__all__ = [
    "SchemaWalker",
    "walk_schema",
    "SchemaInspector",
    "NodeKind",
    "FieldRef",
    "ElementRef",
    "Tag",
    "TagOptions",
    "parse_tag",
    "is_valid_tag_name",
    "append_name",
    "resolve_field_visibility",
    "resolve_leaf_visibility",
    "VariableCollector",
    "DiscoveredVariable",
    "collect_variables",
]
