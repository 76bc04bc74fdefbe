# src/task_cli/storage/escaping.py

"""
Escaping for quoted text values.

Only a fixed set is handled: double quote, backslash and the single-letter
control escapes. Everything else (including non-ASCII text) is written as-is;
there are no \\uXXXX escapes.
"""

from __future__ import annotations

_ESCAPES: dict[str, str] = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

# Character following a backslash -> decoded character.
_UNESCAPES: dict[str, str] = {
    '"': '"',
    "\\": "\\",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


def escape_text(text: str) -> str:
    return "".join(_ESCAPES.get(ch, ch) for ch in text)


def unescape_char(ch: str) -> str:
    """Decode the character that follows a backslash (unknown escapes decode to themselves)."""
    return _UNESCAPES.get(ch, ch)


def unescape_text(raw: str) -> str:
    """
    Inverse of escape_text() for the body of a quoted value (without the quotes).

    Raises ValueError on a trailing lone backslash.
    """
    out: list[str] = []
    i = 0
    n = len(raw)
    while i < n:
        ch = raw[i]
        if ch != "\\":
            out.append(ch)
            i += 1
            continue
        if i + 1 >= n:
            raise ValueError("dangling backslash at end of text")
        out.append(unescape_char(raw[i + 1]))
        i += 2
    return "".join(out)
