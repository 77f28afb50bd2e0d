"""
Hierarchical variable names.
"""

from wiretree.config import NAME_SEPARATOR


def append_name(base_name: str, name: str, separator: str = NAME_SEPARATOR) -> str:
    """
    Append a segment to a fully-qualified name.

    An empty base name yields the segment alone and an empty segment (an
    embedded field) leaves the base name unchanged.
    """
    if not base_name:
        return name
    if not name:
        return base_name
    return f"{base_name}{separator}{name}"
