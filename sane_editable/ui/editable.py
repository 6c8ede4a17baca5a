import logging

import flet as ft

from sane_editable.components.editor import (
    EditController,
    EditorEvent,
    EditorProps,
    EventOutput,
    EventType,
    KeyRulesPort,
    create_controller,
)
from sane_editable.ui.surface import FletClipboard, FletTextSurface

logger = logging.getLogger(__name__)


def keyboard_event_to_editor(e: ft.KeyboardEvent) -> EditorEvent:
    return EditorEvent(
        type=EventType.KEY_DOWN.value,
        key=e.key,
        ctrl=bool(e.ctrl),
        meta=bool(e.meta),
        alt=bool(e.alt),
        shift=bool(e.shift),
        native=e,
    )


class SaneEditable(ft.Column):  # type: ignore
    """
    A TextField whose content is reconciled by an EditController.

    flet cannot cancel a key-press, so a vetoed key still reaches the
    field; the input max_length guard then trims it back.
    """

    def __init__(
        self,
        props: EditorProps,
        page: ft.Page | None = None,
        keys: KeyRulesPort | None = None,
        label: str | None = None,
    ) -> None:
        super().__init__()

        self.field = ft.TextField(
            label=label,
            multiline=props.multi_line,
            read_only=not props.editable,
            on_focus=self._on_focus,
            on_blur=self._on_blur,
            on_change=self._on_change,
        )
        self.surface = FletTextSurface(self.field, page)
        self.controller: EditController = create_controller(
            props,
            surface=self.surface,
            clipboard=FletClipboard(page),
            keys=keys,
        )
        self.paste_button = ft.TextButton("Paste as plain text", on_click=self._on_paste)
        self.controls = [self.field, self.paste_button]

    @property
    def value(self) -> str:
        return self.controller.value

    def set_props(self, props: EditorProps) -> None:
        result = self.controller.receive_props(props)
        if not result.skipped:
            self.field.multiline = props.multi_line
            self.field.read_only = not props.editable

    def handle_keyboard(self, e: ft.KeyboardEvent) -> EventOutput | None:
        """Forward a page-level keyboard event while this field has focus."""
        if not self.controller.is_focused:
            return None
        return self.controller.handle(keyboard_event_to_editor(e))

    def _on_focus(self, e: ft.ControlEvent) -> None:
        self.controller.handle(EditorEvent(type=EventType.FOCUS.value, native=e))

    def _on_blur(self, e: ft.ControlEvent) -> None:
        self.controller.handle(EditorEvent(type=EventType.BLUR.value, native=e))

    def _on_change(self, e: ft.ControlEvent) -> None:
        self.controller.handle(EditorEvent(type=EventType.INPUT.value, native=e))

    def _on_paste(self, e: ft.ControlEvent) -> None:
        result = self.controller.handle(EditorEvent(type=EventType.PASTE.value, native=e))
        logger.debug("Plain-text paste handled (inserted=%s)", result.surface_written)
        if result.surface_written:
            # A DOM host fires input after insertText; TextField does not
            self.controller.handle(EditorEvent(type=EventType.INPUT.value, native=e))
