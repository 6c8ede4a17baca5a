"""
In-memory surface adapter.

A string-backed editable surface with a caret offset. Used by scripts
and tests; counts writes so callers can check the caret contract.
"""

from __future__ import annotations


class InMemorySurface:
    """Editable surface backed by a plain string."""

    def __init__(self, content: str = "", caret: int | None = None) -> None:
        self._content = content
        self._caret = len(content) if caret is None else max(0, min(caret, len(content)))
        self.write_count = 0
        self.insert_count = 0

    @property
    def caret(self) -> int:
        return self._caret

    def read_raw_content(self) -> str:
        return self._content

    def write_raw_content(self, text: str) -> None:
        # Writing resets the caret to the end, as a DOM host would
        self._content = text
        self._caret = len(text)
        self.write_count += 1

    def insert_plain_text_at_caret(self, text: str) -> None:
        self._content = self._content[: self._caret] + text + self._content[self._caret :]
        self._caret += len(text)
        self.insert_count += 1

    # --- User simulation ---

    def type_text(self, text: str) -> None:
        """Simulate the user typing at the caret (not a controller write)."""
        self._content = self._content[: self._caret] + text + self._content[self._caret :]
        self._caret += len(text)

    def set_user_content(self, text: str, caret: int | None = None) -> None:
        """Simulate the user replacing content directly (not a controller write)."""
        self._content = text
        self._caret = len(text) if caret is None else max(0, min(caret, len(text)))

    def move_caret(self, offset: int) -> None:
        self._caret = max(0, min(offset, len(self._content)))
