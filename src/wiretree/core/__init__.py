"""
Core wiretree components.

This package provides the circuit base class, the leaf variable type, the
inert constraint system marker and the shared type definitions.
"""

from wiretree.core.circuit import Circuit
from wiretree.core.types import LeafHandler, Visibility
from wiretree.core.variable import ConstraintSystem, Variable

__all__ = [
    "Circuit",
    "Variable",
    "ConstraintSystem",
    "Visibility",
    "LeafHandler",
]
