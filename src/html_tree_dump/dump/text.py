"""Text utilities for the tree dump: content escaping and indentation."""

_INDENT_UNIT = "  "

_NAMED_ESCAPES = {
    "\t": "\\t",
    "\r": "\\r",
    "\n": "\\n",
    "\\": "\\\\",
    "'": "\\'",
    '"': '\\"',
}


def _escape_char(char: str) -> str:
    escaped = _NAMED_ESCAPES.get(char)
    if escaped is not None:
        return escaped
    if " " <= char <= "~":
        return char
    return "\\u{%x}" % ord(char)


def escape_default(s: str) -> str:
    """Escape ``s`` into a single printable ASCII line.

    Tab, carriage return, line feed, backslash and both quote characters get
    their backslash forms, other printable ASCII passes through unchanged, and
    every remaining code point becomes ``\\u{hex}``.

    >>> escape_default('a\\tb')
    'a\\\\tb'
    >>> escape_default('caf\\xe9')
    'caf\\\\u{e9}'
    """
    return "".join(_escape_char(char) for char in s)


def indent_unit() -> str:
    """One level of indentation."""
    return _INDENT_UNIT


def indent_units(depth: int) -> str:
    """Indentation for ``depth`` levels of nesting."""
    if depth < 0:
        raise ValueError("depth must be >= 0")
    return indent_unit() * depth


def indent(depth: int, s: str) -> str:
    """Prefix ``s`` with the indentation for ``depth``."""
    return indent_units(depth) + s
