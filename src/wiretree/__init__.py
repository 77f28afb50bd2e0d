"""
wiretree - Collect the variables declared by a nested circuit schema

wiretree walks a user-authored schema of Pydantic models, dataclasses and
lists, and reports every `Variable` it declares under a fully-qualified name
together with its secret/public visibility.
"""

from importlib.metadata import version

from wiretree.config import WalkConfig
from wiretree.core import Circuit, ConstraintSystem, Variable, Visibility
from wiretree.schema import Tag, collect_variables, walk_schema

__version__ = version("wiretree")

__all__ = [
    "__version__",
    "Circuit",
    "Variable",
    "ConstraintSystem",
    "Visibility",
    "Tag",
    "WalkConfig",
    "walk_schema",
    "collect_variables",
]
