"""
Core type definitions for wiretree.

This module contains the visibility enumeration and the type aliases shared
by the schema walker and the handlers it drives.
"""

from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from wiretree.core.variable import Variable


class Visibility(Enum):
    """Visibility of a circuit variable."""

    UNSET = "unset"  # Not decided yet, resolved further down the tree
    SECRET = "secret"
    PUBLIC = "public"


LeafHandler = Callable[[Visibility, str, "Variable"], Any]
