"""
wiretree exception classes.

This package provides all exception types used throughout wiretree for
consistent error handling and reporting.
"""

from wiretree.exceptions.core import (
    DuplicateVariableNameError,
    SchemaWalkError,
    VariableAlreadyAssignedError,
    WireTreeError,
)

__all__ = [
    "WireTreeError",
    "VariableAlreadyAssignedError",
    "DuplicateVariableNameError",
    "SchemaWalkError",
]
