"""
Base class for circuit schemas.
"""

from pydantic import BaseModel, ConfigDict


class Circuit(BaseModel):
    """
    Base class for circuit schema definitions.

    Fields typed `Variable`, lists of variables and nested `Circuit` models
    declare the circuit's variables. Arbitrary types are allowed so that a
    schema can hold a `ConstraintSystem` or other scaffolding next to them.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)
