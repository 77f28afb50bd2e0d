"""
Configuration for schema walks.
"""

from dataclasses import dataclass, field

from wiretree.core.types import Visibility
from wiretree.core.variable import ConstraintSystem

TAG_KEY = "wiretree"
NAME_SEPARATOR = "_"


@dataclass
class WalkConfig:
    """Configuration for schema walking behavior."""

    tag_key: str = TAG_KEY  # Key looked up in dict-style field metadata
    separator: str = NAME_SEPARATOR
    skip_types: tuple[type, ...] = field(default=(ConstraintSystem,))
    default_visibility: Visibility = Visibility.SECRET  # Leaves left UNSET

    @classmethod
    def from_dict(cls, config: dict | None = None) -> "WalkConfig":
        """Factory method to create config from dict with defaults."""
        if config is None:
            config = {}
        return cls(**config)
