# src/task_cli/storage/cursor.py

from __future__ import annotations

WHITESPACE = " \t\n\r"
DIGITS = "0123456789"


class Cursor:
    """A position index walked over an immutable string."""

    __slots__ = ("text", "pos")

    def __init__(self, text: str, pos: int = 0) -> None:
        self.text = text
        self.pos = pos

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        """Current character, or "" at end of input."""
        if self.pos >= len(self.text):
            return ""
        return self.text[self.pos]

    def advance(self, n: int = 1) -> None:
        self.pos = min(self.pos + n, len(self.text))

    def skip_whitespace(self) -> None:
        text = self.text
        while self.pos < len(text) and text[self.pos] in WHITESPACE:
            self.pos += 1

    def seek(self, ch: str) -> bool:
        """Move to the next occurrence of `ch` (inclusive). False, at end, if there is none."""
        idx = self.text.find(ch, self.pos)
        if idx < 0:
            self.pos = len(self.text)
            return False
        self.pos = idx
        return True

    def read_digits(self) -> str:
        start = self.pos
        text = self.text
        while self.pos < len(text) and text[self.pos] in DIGITS:
            self.pos += 1
        return text[start : self.pos]

    def read_quoted_raw(self) -> str | None:
        """
        Read a double-quoted value starting at the current `"`.

        Returns the body still escaped and leaves the cursor after the closing
        quote. Returns None (cursor at end) if the value is unterminated.
        """
        text = self.text
        i = self.pos + 1
        while i < len(text):
            ch = text[i]
            if ch == "\\":
                i += 2
                continue
            if ch == '"':
                body = text[self.pos + 1 : i]
                self.pos = i + 1
                return body
            i += 1
        self.pos = len(text)
        return None
