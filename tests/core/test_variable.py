"""
Tests for the Variable single-assignment contract and the Circuit base class.
"""

import pytest
from pydantic import Field

from wiretree import Circuit, ConstraintSystem, Variable
from wiretree.exceptions import VariableAlreadyAssignedError, WireTreeError


class TestVariableAssignment:
    """Tests for Variable.assign."""

    def test_new_variable_is_unassigned(self):
        variable = Variable()
        assert not variable.is_assigned
        assert variable.value is None

    def test_assign_once(self):
        """Test the first assignment stores the value."""
        variable = Variable()
        variable.assign(42)
        assert variable.is_assigned
        assert variable.value == 42

    def test_second_assignment_rejected(self):
        """Test re-assignment raises and keeps the first value."""
        variable = Variable()
        variable.assign(1)
        with pytest.raises(VariableAlreadyAssignedError):
            variable.assign(2)
        assert variable.value == 1

    def test_none_counts_as_assignment(self):
        """Test assigning None still consumes the single assignment."""
        variable = Variable()
        variable.assign(None)
        assert variable.is_assigned
        with pytest.raises(VariableAlreadyAssignedError):
            variable.assign(0)

    def test_error_carries_name(self):
        variable = Variable()
        variable.assign(1)
        with pytest.raises(VariableAlreadyAssignedError, match="'pub_x'") as exc_info:
            variable.assign(2, name="pub_x")
        assert exc_info.value.name == "pub_x"
        assert isinstance(exc_info.value, WireTreeError)

    def test_assignment_state_is_per_instance(self):
        first, second = Variable(), Variable()
        first.assign(1)
        assert not second.is_assigned


class TestCircuit:
    """Tests for the Circuit base class."""

    def test_holds_constraint_system(self):
        """Test arbitrary scaffolding types are accepted as fields."""

        class WithSystem(Circuit):
            cs: ConstraintSystem = Field(default_factory=ConstraintSystem)
            v: Variable = Field(default_factory=Variable)

        circuit = WithSystem()
        assert isinstance(circuit.cs, ConstraintSystem)

    def test_keeps_variable_identity(self):
        """Test variables passed in are stored, not copied."""

        class Single(Circuit):
            v: Variable

        variable = Variable()
        assert Single(v=variable).v is variable


class TestVariableConstruction:
    """Tests for variables built with a value."""

    def test_value_at_construction_counts_as_assignment(self):
        variable = Variable(value=7)
        assert variable.is_assigned
        with pytest.raises(VariableAlreadyAssignedError):
            variable.assign(8)
