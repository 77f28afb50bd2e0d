"""
Visibility resolution for schema fields.

A field is secret unless its tag says otherwise. Visibility is a subtree-wide
policy: once an ancestor has decided, the tags below it no longer matter.
"""

from wiretree.core.types import Visibility
from wiretree.schema.tags import OPT_EMBED, OPT_PUBLIC, OPT_SECRET, parse_tag


def resolve_field_visibility(
    parent_visibility: Visibility, tag: str | None
) -> tuple[str | None, Visibility]:
    """
    Compute the effective visibility of a field.

    Params:
        parent_visibility: Visibility inherited from the enclosing field
        tag: The field's raw tag, or None when it carries none

    Returns:
        The local name forced by the tag (``""`` for an embedded field, None
        when the tag leaves the name alone) and the resolved visibility
    """
    name = None
    visibility = Visibility.SECRET

    if tag:
        _, options = parse_tag(tag)
        if options.contains(OPT_SECRET):
            visibility = Visibility.SECRET
        elif options.contains(OPT_PUBLIC):
            visibility = Visibility.PUBLIC
        elif options.contains(OPT_EMBED):
            name = ""
            visibility = Visibility.UNSET

    if parent_visibility != Visibility.UNSET:
        visibility = parent_visibility  # parent visibility overrides

    return name, visibility


def resolve_leaf_visibility(
    visibility: Visibility, default: Visibility = Visibility.SECRET
) -> Visibility:
    """Map a visibility still UNSET at a leaf to the default one."""
    if visibility == Visibility.UNSET:
        return default
    return visibility
