"""
Runtime inspection of schema nodes.

The walker never looks at Pydantic or dataclass internals itself. It asks a
`SchemaInspector` what kind of node it holds and which fields or elements sit
below it. Every child comes back with an addressability flag: a child that is
not addressable is visible to inspection but must not be walked into.
"""

import dataclasses
import inspect
import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, get_args, get_origin, get_type_hints

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from wiretree.config import WalkConfig
from wiretree.core.variable import Variable
from wiretree.schema.tags import Tag

logger = logging.getLogger(__name__)


class NodeKind(Enum):
    """Shape of a schema node, as far as the walker is concerned."""

    LEAF = "leaf"  # A Variable
    SKIP = "skip"  # Inert scaffolding, never descended into
    STRUCT = "struct"  # Pydantic model or dataclass instance
    SEQUENCE = "sequence"  # list or tuple
    MAP = "map"
    OTHER = "other"  # Scalars, None, callables, ...


@dataclass
class FieldRef:
    """A declared field of a struct node."""

    name: str
    tag: str | None
    value: Any
    addressable: bool


@dataclass
class ElementRef:
    """An element of a sequence node."""

    index: int
    value: Any
    addressable: bool = True


class SchemaInspector:
    """Classifies schema nodes and enumerates their children."""

    def __init__(self, config: WalkConfig | None = None):
        self.config = config or WalkConfig()

    def kind(self, node: Any) -> NodeKind:
        if isinstance(node, Variable):
            return NodeKind.LEAF
        if type(node) in self.config.skip_types:
            return NodeKind.SKIP
        if isinstance(node, BaseModel):
            return NodeKind.STRUCT
        if dataclasses.is_dataclass(node) and not isinstance(node, type):
            return NodeKind.STRUCT
        if isinstance(node, (list, tuple)):
            return NodeKind.SEQUENCE
        if isinstance(node, Mapping):
            return NodeKind.MAP
        return NodeKind.OTHER

    def iter_fields(self, node: Any) -> Iterator[FieldRef]:
        """
        Enumerate the fields of a struct node in declaration order.

        Pydantic private attributes are reported in place among the declared
        fields, as non-addressable fields without a tag. Private attributes
        declared without an annotation have no position and come last.
        Dataclass fields whose name starts with an underscore are reported in
        place, also non-addressable.

        Params:
            node: A node of kind STRUCT

        Returns:
            An iterator of field references
        """
        if isinstance(node, BaseModel):
            yield from self._iter_model_fields(node)
        else:
            yield from self._iter_dataclass_fields(node)

    def iter_elements(self, node: list | tuple) -> Iterator[ElementRef]:
        for index, value in enumerate(node):
            yield ElementRef(index=index, value=value)

    def _iter_model_fields(self, node: BaseModel) -> Iterator[FieldRef]:
        model_fields = type(node).model_fields
        private = node.__pydantic_private__ or {}

        for name in self._model_declaration_order(type(node), model_fields, private):
            if name in model_fields:
                yield FieldRef(
                    name=name,
                    tag=self._model_field_tag(model_fields[name]),
                    value=getattr(node, name, None),
                    addressable=True,
                )
            else:
                yield FieldRef(
                    name=name, tag=None, value=private[name], addressable=False
                )

    def _model_declaration_order(
        self, model: type[BaseModel], model_fields: dict, private: dict
    ) -> list[str]:
        order = []
        for klass in reversed(model.__mro__):
            if not issubclass(klass, BaseModel) or klass is BaseModel:
                continue
            for name in inspect.get_annotations(klass):
                if name not in order and (name in model_fields or name in private):
                    order.append(name)

        order.extend(name for name in model_fields if name not in order)
        order.extend(name for name in private if name not in order)
        return order

    def _iter_dataclass_fields(self, node: Any) -> Iterator[FieldRef]:
        hints = self._dataclass_type_hints(type(node))
        for field_def in dataclasses.fields(node):
            yield FieldRef(
                name=field_def.name,
                tag=self._dataclass_field_tag(
                    field_def, hints.get(field_def.name, field_def.type)
                ),
                # init=False fields may never have been set
                value=getattr(node, field_def.name, None),
                addressable=not field_def.name.startswith("_"),
            )

    def _dataclass_type_hints(self, klass: type) -> dict[str, Any]:
        try:
            return get_type_hints(klass, include_extras=True)
        except NameError as e:
            logger.debug(
                "Cannot resolve annotations of %s, Annotated tags ignored: %s",
                klass.__name__,
                e,
            )
            return {}

    def _model_field_tag(self, field_info: FieldInfo) -> str | None:
        for item in field_info.metadata:
            if isinstance(item, Tag):
                return item.value

        extra = field_info.json_schema_extra
        if isinstance(extra, dict) and self.config.tag_key in extra:
            return str(extra[self.config.tag_key])
        return None

    def _dataclass_field_tag(
        self, field_def: dataclasses.Field, annotation: Any
    ) -> str | None:
        if self.config.tag_key in field_def.metadata:
            return str(field_def.metadata[self.config.tag_key])

        if get_origin(annotation) is Annotated:
            for item in get_args(annotation)[1:]:
                if isinstance(item, Tag):
                    return item.value
        return None
