import flet as ft

from sane_editable.components.editor import EditorEvent, plain_text_from_payload


class FletTextSurface:
    """Editable surface over a flet TextField."""

    def __init__(self, field: ft.TextField, page: ft.Page | None = None) -> None:
        self._field = field
        self._page = page

    def read_raw_content(self) -> str:
        value = self._field.value
        return value if isinstance(value, str) else ""

    def write_raw_content(self, text: str) -> None:
        self._field.value = text
        self._refresh()

    def insert_plain_text_at_caret(self, text: str) -> None:
        # TextField does not report its caret offset back, so paste appends
        self._field.value = self.read_raw_content() + text
        self._refresh()

    def _refresh(self) -> None:
        if self._page is not None:
            self._page.update()


class FletClipboard:
    """Clipboard port backed by the page clipboard."""

    def __init__(self, page: ft.Page | None = None) -> None:
        self._page = page

    def get_plain_text(self, event: EditorEvent) -> str:
        text = plain_text_from_payload(event.clipboard_data)
        if text or self._page is None:
            return text
        value = self._page.get_clipboard()
        return value if isinstance(value, str) else ""
