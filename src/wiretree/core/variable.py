"""
Leaf and marker types recognized by the schema walker.

`Variable` is the leaf a schema declares; `ConstraintSystem` is inert
scaffolding that may sit next to variables in a schema but is never walked.
"""

from typing import Any

from pydantic import BaseModel, Field, PrivateAttr

from wiretree.exceptions import VariableAlreadyAssignedError


class Variable(BaseModel):
    """
    Single-assignment circuit variable.

    Declared as a field (or list element) of a schema. The walker hands each
    reachable instance to a leaf handler, which typically assigns it a
    witness value.
    """

    value: Any = None
    _assigned: bool = PrivateAttr(default=False)

    def model_post_init(self, __context: Any) -> None:
        # A value given at construction counts as the single assignment
        self._assigned = "value" in self.model_fields_set

    @property
    def is_assigned(self) -> bool:
        return self._assigned

    def assign(self, value: Any, name: str | None = None) -> None:
        """
        Assign the variable's value.

        Params:
            value: The value to store, `None` included
            name: Optional fully-qualified name, used in the error message

        Raises:
            VariableAlreadyAssignedError: If the variable already holds a value
        """
        if self._assigned:
            raise VariableAlreadyAssignedError(name)
        self.value = value
        self._assigned = True


class ConstraintSystem(BaseModel):
    """
    Constraint system scaffolding that may sit inside a schema.

    It holds the variables already allocated as wires. They belong to the
    system, not to the schema, so the walker never descends into it.
    """

    public_variables: list[Variable] = Field(default_factory=list)
    secret_variables: list[Variable] = Field(default_factory=list)
