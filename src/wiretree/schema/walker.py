"""
Recursive schema walker.

Walks a user-authored schema depth-first, pre-order and left-to-right,
naming every reachable `Variable` and resolving its visibility on the way
down. The walker performs no assignment itself: it hands each variable to a
caller-supplied leaf handler. An exception raised by the handler ends the walk
and propagates to the caller unchanged.
"""

import logging
from typing import Any

from wiretree.config import WalkConfig
from wiretree.core.types import LeafHandler, Visibility
from wiretree.core.variable import Variable
from wiretree.exceptions import SchemaWalkError
from wiretree.schema.inspection import FieldRef, NodeKind, SchemaInspector
from wiretree.schema.naming import append_name
from wiretree.schema.tags import OPT_OMIT, is_valid_tag_name, parse_tag
from wiretree.schema.visibility import resolve_field_visibility

logger = logging.getLogger(__name__)


class SchemaWalker:
    """Discovers the variables declared by a schema.

    Responsibilities:
    - Dispatch each node on its shape: leaf, skip-type, struct, sequence, map
    - Compose fully-qualified names from field names, tag names and indices
    - Propagate visibility from tags and ancestors
    - Report unreachable variables, empty sequences and maps as warnings

    Usage:
        walker = SchemaWalker()
        walker.walk(circuit, handler)
    """

    def __init__(
        self,
        config: WalkConfig | None = None,
        inspector: SchemaInspector | None = None,
    ):
        self.config = config or WalkConfig()
        self.inspector = inspector or SchemaInspector(self.config)

    def walk(
        self,
        node: Any,
        handler: LeafHandler,
        base_name: str = "",
        parent_visibility: Visibility = Visibility.UNSET,
    ) -> None:
        """Walk `node`, calling `handler(visibility, name, variable)` per leaf.

        Params:
            node: Root of the schema
            handler: Called once per reachable variable, in traversal order
            base_name: Prefix of every discovered name
            parent_visibility: Visibility imposed on the whole schema

        Raises:
            SchemaWalkError: If `handler` is not callable
        """
        if not callable(handler):
            raise SchemaWalkError(base_name, "leaf handler is not callable")
        self._walk_node(node, base_name, parent_visibility, handler)

    def _walk_node(
        self,
        node: Any,
        base_name: str,
        parent_visibility: Visibility,
        handler: LeafHandler,
    ) -> None:
        kind = self.inspector.kind(node)

        if kind == NodeKind.LEAF:
            handler(parent_visibility, base_name, node)
        elif kind == NodeKind.STRUCT:
            for field_ref in self.inspector.iter_fields(node):
                self._walk_field(field_ref, base_name, parent_visibility, handler)
        elif kind == NodeKind.SEQUENCE:
            if len(node) == 0:
                logger.warning(
                    "Got an empty sequence at '%s', ignoring it", base_name
                )
                return
            for element in self.inspector.iter_elements(node):
                if element.addressable:
                    self._walk_node(
                        element.value,
                        append_name(
                            base_name, str(element.index), self.config.separator
                        ),
                        parent_visibility,
                        handler,
                    )
        elif kind == NodeKind.MAP:
            logger.warning(
                "Map values are not addressable, ignoring '%s'", base_name
            )
        # SKIP and OTHER nodes hold no variables

    def _walk_field(
        self,
        field_ref: FieldRef,
        base_name: str,
        parent_visibility: Visibility,
        handler: LeafHandler,
    ) -> None:
        tag = field_ref.tag
        if tag == OPT_OMIT:
            return

        name = field_ref.name
        if tag:
            name, _ = parse_tag(tag)
            if not is_valid_tag_name(name):
                if name:
                    logger.debug(
                        "Invalid tag name %r on field '%s', using the field name",
                        name,
                        field_ref.name,
                    )
                name = field_ref.name

        forced_name, visibility = resolve_field_visibility(parent_visibility, tag)
        if forced_name is not None:
            name = forced_name

        full_name = append_name(base_name, name, self.config.separator)

        if field_ref.addressable:
            self._walk_node(field_ref.value, full_name, visibility, handler)
        elif isinstance(field_ref.value, Variable):
            logger.warning(
                "Variable '%s' is private or otherwise not reachable, ignoring it",
                full_name,
            )


def walk_schema(
    schema: Any,
    handler: LeafHandler,
    base_name: str = "",
    parent_visibility: Visibility = Visibility.UNSET,
    config: WalkConfig | None = None,
) -> None:
    """Walk `schema` with a default-configured `SchemaWalker`."""
    SchemaWalker(config).walk(schema, handler, base_name, parent_visibility)
