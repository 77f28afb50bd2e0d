"""
Exception classes for wiretree.

This module defines the exception types raised while walking a schema and
while assigning the variables it declares.
"""


class WireTreeError(Exception):
    """Base exception for all wiretree errors."""

    pass


class VariableAlreadyAssignedError(WireTreeError):
    """Raised when a variable is assigned a second time."""

    def __init__(self, name: str | None = None):
        """
        Initialize the exception.

        Params:
            name: Fully-qualified name of the variable, when known
        """
        self.name = name
        if name:
            super().__init__(f"Variable '{name}' already assigned")
        else:
            super().__init__("Variable already assigned")


class DuplicateVariableNameError(WireTreeError):
    """Raised when two leaves of one schema resolve to the same name."""

    def __init__(self, name: str):
        """
        Initialize the exception.

        Params:
            name: The fully-qualified name declared more than once
        """
        self.name = name
        super().__init__(
            f"Variable name '{name}' is declared more than once; "
            "use a tag name or drop ',embed' to disambiguate"
        )


class SchemaWalkError(WireTreeError):
    """Raised when a schema walk cannot be started."""

    def __init__(self, path: str, reason: str):
        """
        Initialize the exception.

        Params:
            path: Name prefix the walk was started with
            reason: Why the walk was rejected
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot walk schema at '{path}': {reason}")
