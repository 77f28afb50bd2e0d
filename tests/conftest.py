"""
Shared test fixtures and schemas for the wiretree test suite.
"""

from dataclasses import dataclass, field
from typing import Annotated

import pytest
from pydantic import Field, PrivateAttr

from wiretree import Circuit, ConstraintSystem, Tag, Variable, Visibility


class Point(Circuit):
    """Nested struct with one public and one untagged coordinate."""

    x: Annotated[Variable, Tag(",public")] = Field(default_factory=Variable)
    y: Variable = Field(default_factory=Variable)


class MixedCircuit(Circuit):
    """Circuit exercising every kind of field the walker distinguishes."""

    cs: ConstraintSystem = Field(
        default_factory=lambda: ConstraintSystem(public_variables=[Variable()])
    )
    a: Variable = Field(default_factory=Variable)
    b: Annotated[Variable, Tag("beta,public")] = Field(default_factory=Variable)
    alias: Annotated[Variable, Tag("-")] = Field(default_factory=Variable)
    point: Point = Field(default_factory=Point)
    flat: Annotated[Point, Tag(",embed")] = Field(default_factory=Point)
    items: list[Variable] = Field(
        default_factory=lambda: [Variable(), Variable(), Variable()]
    )
    lookup: dict[str, Variable] = Field(
        default_factory=lambda: {"k": Variable()}
    )
    label: str = "mixed"
    _hidden: Variable = PrivateAttr(default_factory=Variable)


@dataclass
class DataclassPoint:
    """Dataclass counterpart of `Point`."""

    x: Variable = field(default_factory=Variable, metadata={"wiretree": ",public"})
    y: Variable = field(default_factory=Variable)
    _hidden: Variable = field(default_factory=Variable)


@pytest.fixture
def recorder():
    """Leaf handler recording (visibility, name, variable) calls in order.

    Usage:
        def test_something(recorder):
            walk_schema(schema, recorder)
            assert recorder.calls[0][1] == "a"
    """

    class Recorder:
        def __init__(self):
            self.calls: list[tuple[Visibility, str, Variable]] = []

        def __call__(self, visibility, name, variable):
            self.calls.append((visibility, name, variable))

        def names(self) -> list[str]:
            return [name for _, name, _ in self.calls]

        def visibilities(self) -> dict[str, Visibility]:
            return {name: visibility for visibility, name, _ in self.calls}

    return Recorder()


@pytest.fixture
def mixed_circuit() -> MixedCircuit:
    return MixedCircuit()


@pytest.fixture
def point() -> Point:
    return Point()


@pytest.fixture
def dataclass_point() -> DataclassPoint:
    return DataclassPoint()
