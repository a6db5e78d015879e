"""Tests for escaping and indentation helpers."""

import pytest

from html_tree_dump.dump.text import escape_default, indent, indent_unit, indent_units


class TestEscapeDefault:
    """Test single-line escaping of text and comment contents."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("", ""),
            ("foo", "foo"),
            (" foo ", " foo "),
            ("a\tb", "a\\tb"),
            ("line1\nline2", "line1\\nline2"),
            ("\r\n", "\\r\\n"),
            ("back\\slash", "back\\\\slash"),
            ("it's", "it\\'s"),
            ('say "hi"', 'say \\"hi\\"'),
            ("~!@#$%^&*()<>", "~!@#$%^&*()<>"),
        ],
    )
    def test_ascii(self, raw, expected):
        assert escape_default(raw) == expected

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("caf\xe9", "caf\\u{e9}"),
            ("\xa0", "\\u{a0}"),
            ("\x00", "\\u{0}"),
            ("\x7f", "\\u{7f}"),
            ("\x0b", "\\u{b}"),
            ("\u2603", "\\u{2603}"),
            ("\U0001f600", "\\u{1f600}"),
        ],
    )
    def test_non_printable_and_non_ascii(self, raw, expected):
        """Test that everything outside printable ASCII uses the hex form."""
        assert escape_default(raw) == expected

    def test_output_is_single_printable_line(self):
        raw = "".join(chr(code) for code in range(0, 300))
        escaped = escape_default(raw)
        assert "\n" not in escaped
        assert all(" " <= char <= "~" for char in escaped)


class TestIndentation:
    """Test indentation helpers."""

    def test_indent_unit(self):
        assert indent_unit() == "  "

    @pytest.mark.parametrize("depth", [0, 1, 2, 5])
    def test_indent_units(self, depth):
        assert indent_units(depth) == indent_unit() * depth
        assert len(indent_units(depth)) == 2 * depth

    def test_indent(self):
        assert indent(0, "") == ""
        assert indent(0, "foo") == "foo"
        assert indent(1, "") == "  "
        assert indent(1, "foo") == "  foo"
        assert indent(3, "foo") == "      foo"

    def test_negative_depth(self):
        with pytest.raises(ValueError):
            indent_units(-1)
        with pytest.raises(ValueError):
            indent(-1, "foo")
