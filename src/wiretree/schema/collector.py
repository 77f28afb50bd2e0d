"""
Leaf handler that records the variables a schema declares.
"""

from dataclasses import dataclass, field
from typing import Any

from wiretree.config import WalkConfig
from wiretree.core.types import Visibility
from wiretree.core.variable import Variable
from wiretree.exceptions import DuplicateVariableNameError
from wiretree.schema.visibility import resolve_leaf_visibility
from wiretree.schema.walker import SchemaWalker


@dataclass
class DiscoveredVariable:
    """A variable found by the walker, with its name and final visibility."""

    name: str
    visibility: Visibility
    variable: Variable


@dataclass
class VariableCollector:
    """Collects discovered variables in traversal order.

    A leaf still UNSET when it reaches the collector gets
    `default_visibility`. Two leaves flattening to the same name are rejected.
    """

    default_visibility: Visibility = Visibility.SECRET
    variables: list[DiscoveredVariable] = field(default_factory=list)
    _seen: set[str] = field(default_factory=set, repr=False)

    def __call__(self, visibility: Visibility, name: str, variable: Variable) -> None:
        if name in self._seen:
            raise DuplicateVariableNameError(name)
        self._seen.add(name)
        self.variables.append(
            DiscoveredVariable(
                name=name,
                visibility=resolve_leaf_visibility(
                    visibility, self.default_visibility
                ),
                variable=variable,
            )
        )

    @property
    def public(self) -> list[DiscoveredVariable]:
        return [v for v in self.variables if v.visibility == Visibility.PUBLIC]

    @property
    def secret(self) -> list[DiscoveredVariable]:
        return [v for v in self.variables if v.visibility == Visibility.SECRET]

    def names(self) -> list[str]:
        return [v.name for v in self.variables]


def collect_variables(
    schema: Any, config: WalkConfig | None = None
) -> list[DiscoveredVariable]:
    """
    Walk `schema` and return every reachable variable in traversal order.

    Params:
        schema: Root of the schema
        config: Walk configuration, defaults when omitted

    Returns:
        The discovered variables, each with a definite visibility

    Raises:
        DuplicateVariableNameError: If two variables share a fully-qualified name
    """
    config = config or WalkConfig()
    collector = VariableCollector(default_visibility=config.default_visibility)
    SchemaWalker(config).walk(schema, collector)
    return collector.variables
