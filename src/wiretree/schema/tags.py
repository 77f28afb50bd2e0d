"""
Field tag parsing.

A tag is attached to a schema field and has the form ``name,opt1,opt2``,
in the manner of ``encoding/json`` struct tags:

    class MyCircuit(Circuit):
        y: Annotated[Variable, Tag("name,public")]

An empty name falls back to the declared field name, so ``",public"`` is the
usual spelling. A tag of exactly ``"-"`` drops the field and everything below
it from the walk; this is how a schema declares aliases of variables that are
already reachable elsewhere.
"""

from dataclasses import dataclass

OPT_PUBLIC = "public"
OPT_SECRET = "secret"
OPT_EMBED = "embed"
OPT_OMIT = "-"

# Backslash and quote characters are reserved
_TAG_NAME_PUNCTUATION = "!#$%&()*+-./:<=>?@[]^_{|}~ "


@dataclass(frozen=True)
class Tag:
    """Field annotation carrying a raw tag string, for use in `Annotated`."""

    value: str


class TagOptions(str):
    """The comma-separated options following the name in a tag."""

    def contains(self, option: str) -> bool:
        """Return whether `option` is one of the comma-separated options."""
        if not self:
            return False
        return any(item.strip() == option for item in self.split(","))


def parse_tag(tag: str) -> tuple[str, TagOptions]:
    """
    Split a tag into its name and its options.

    Params:
        tag: Raw tag string

    Returns:
        The text before the first comma and the verbatim text after it
    """
    name, _, options = tag.partition(",")
    return name, TagOptions(options)


def is_valid_tag_name(name: str) -> bool:
    """Check that a tag name is non-empty and free of reserved characters."""
    if not name:
        return False
    for char in name:
        if char in _TAG_NAME_PUNCTUATION:
            continue
        if not char.isalpha() and not char.isdecimal():
            return False
    return True
