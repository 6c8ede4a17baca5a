"""
Clipboard adapters.
"""

from __future__ import annotations

from sane_editable.components.editor import EditorEvent, plain_text_from_payload


class PayloadClipboard:
    """Reads plain text from the clipboard payload carried by the event."""

    def get_plain_text(self, event: EditorEvent) -> str:
        return plain_text_from_payload(event.clipboard_data)


class StaticClipboard:
    """Clipboard holding fixed text; ignores the event payload."""

    def __init__(self, text: str = "") -> None:
        self.text = text

    def get_plain_text(self, event: EditorEvent) -> str:
        return self.text
