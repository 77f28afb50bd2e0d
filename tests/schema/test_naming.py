"""
Tests for fully-qualified name composition.
"""

from wiretree.schema.naming import append_name


class TestAppendName:
    """Test joining name segments."""

    def test_empty_base_is_identity(self):
        """Test a segment under the empty base is used as is."""
        assert append_name("", "Y") == "Y"

    def test_segments_joined_with_underscore(self):
        """Test the default separator."""
        assert append_name("A", "Y") == "A_Y"
        assert append_name("B_2", "Y") == "B_2_Y"

    def test_empty_segment_keeps_base(self):
        """Test an embedded (empty) segment leaves the base unchanged."""
        assert append_name("P", "") == "P"
        assert append_name("", "") == ""

    def test_custom_separator(self):
        """Test an explicit separator."""
        assert append_name("a", "b", separator=".") == "a.b"
