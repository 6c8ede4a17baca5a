"""
Editor component port definitions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import EditorEvent


class SurfacePort(Protocol):
    """Port for the editable surface's raw content."""

    def read_raw_content(self) -> str:
        """Current text exactly as the user sees it."""
        ...

    def write_raw_content(self, text: str) -> None:
        """Replace the surface's content (may move the caret)."""
        ...

    def insert_plain_text_at_caret(self, text: str) -> None:
        """Insert unformatted text at the caret."""
        ...


class ClipboardPort(Protocol):
    """Port for reading plain text out of a paste event."""

    def get_plain_text(self, event: EditorEvent) -> str:
        """Plain-text clipboard content, or "" when unavailable."""
        ...


class KeyRulesPort(Protocol):
    """Port for key classification rules."""

    def get_extra_allowed_keys(self) -> frozenset[str]:
        """Keys allowed even when the surface is full."""
        ...
