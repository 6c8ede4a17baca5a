"""
EditController - Edit reconciliation for an editable surface.

Owns the authoritative value and decides, per surface event, whether to
read or rewrite the surface, whether to sanitize, which observer to call
and whether to veto the event.

States:
- Idle: not focused, value sanitized and authoritative
- Editing: focused, surface content may be transiently unsanitized

Key behaviors:
- Input never sanitizes; the surface is only rewritten when it overflows
  max_length (paste/IME guard), otherwise the caret stays put
- Blur sanitizes, writes back and stores the clean value
- Key-press is vetoed at max_length unless it is a navigation key
- Paste is always intercepted and re-inserted as plain text
- External props changes are skipped when shallow-equal; a new content
  value only rewrites the surface when idle and is held until blur
  while the surface is focused
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import fields, replace
from typing import Any

from sane_editable.components.sanitizer import SanitizeConfig, is_sanitized, sanitize, truncate

from .models import (
    DEFAULT_STYLE,
    EditableState,
    EditorEvent,
    EditorProps,
    EventOutput,
    EventType,
    ReceivePropsOutput,
    RenderProps,
)
from .ports import ClipboardPort, SurfacePort

logger = logging.getLogger(__name__)

# --- Key Classification ---

NAVIGATION_KEYS: frozenset[str] = frozenset(
    [
        "ArrowLeft",
        "ArrowRight",
        "ArrowUp",
        "ArrowDown",
        "Backspace",
        "Delete",
        "Home",
        "End",
        "PageUp",
        "PageDown",
        "Tab",
        "Escape",
    ]
)

MODIFIER_KEYS: frozenset[str] = frozenset(
    [
        "Shift",
        "Control",
        "Alt",
        "Meta",
        "CapsLock",
        "ShiftLeft",
        "ShiftRight",
        "ControlLeft",
        "ControlRight",
        "AltLeft",
        "AltRight",
        "MetaLeft",
        "MetaRight",
    ]
)

ENTER_KEY = "Enter"

PLAIN_TEXT_MIME_TYPES = ("text/plain", "text", "Text")


def normalize_key(key: str | None) -> str:
    """Map host key names ("Arrow Left", "Page Up") onto DOM-style names."""
    if not key:
        return ""
    return key.replace(" ", "")


def is_control_key(
    event: EditorEvent,
    extra_allowed: frozenset[str] = frozenset(),
) -> bool:
    """Navigation, deletion and modifier combinations never insert text."""
    if event.has_modifier:
        return True
    key = normalize_key(event.key)
    return key in NAVIGATION_KEYS or key in MODIFIER_KEYS or key in extra_allowed


# --- Clipboard ---


def plain_text_from_payload(payload: Any) -> str:
    """
    Extract plain text from a clipboard payload.

    Accepts a str, a {mime: data} mapping, or an object exposing
    get_data(mime) / getData(mime). Anything else yields "".
    """
    if payload is None:
        return ""
    if isinstance(payload, str):
        return payload
    if isinstance(payload, Mapping):
        for mime in PLAIN_TEXT_MIME_TYPES:
            value = payload.get(mime)
            if isinstance(value, str):
                return value
        return ""

    for attr in ("get_data", "getData"):
        getter = getattr(payload, attr, None)
        if callable(getter):
            try:
                value = getter(PLAIN_TEXT_MIME_TYPES[0])
            except (KeyError, TypeError, ValueError):
                logger.debug("Clipboard payload rejected %s lookup", PLAIN_TEXT_MIME_TYPES[0])
                return ""
            return value if isinstance(value, str) else ""
    return ""


# --- Props Helpers ---


def props_equal(current: EditorProps, nxt: EditorProps) -> bool:
    """Shallow equality over every props field."""
    if current is nxt:
        return True
    for f in fields(EditorProps):
        a = getattr(current, f.name)
        b = getattr(nxt, f.name)
        if a is not b and a != b:
            return False
    return True


def config_from_props(props: EditorProps) -> SanitizeConfig:
    """Derive the sanitize config carried by a props set."""
    return SanitizeConfig(
        multi_line=props.multi_line,
        max_length=props.max_length,
        sanitise_enabled=props.sanitise,
    )


def merge_style(style: Mapping[str, Any] | None) -> dict[str, Any]:
    """Default pre-wrap style overlaid with caller style."""
    merged = dict(DEFAULT_STYLE)
    if style:
        merged.update(style)
    return merged


# --- Controller ---


class EditController:
    """
    Edit controller for one editing session.

    The surface is external and may be written by the user at any time
    while focused; the controller only reconciles on specific events.
    """

    def __init__(
        self,
        props: EditorProps,
        surface: SurfacePort,
        clipboard: ClipboardPort | None = None,
        extra_allowed_keys: frozenset[str] = frozenset(),
    ) -> None:
        """
        Start a session and seed the surface.

        Args:
            props: Initial configuration and observers.
            surface: The editable surface this controller owns.
            clipboard: Optional clipboard port; defaults to reading the
                event's clipboard payload.
            extra_allowed_keys: Keys always allowed besides navigation keys.
        """
        self._props = props
        self._config = config_from_props(props)
        self._surface = surface
        self._clipboard = clipboard
        self._extra_allowed_keys = extra_allowed_keys
        self._focused = False
        self._pending_content: str | None = None
        self._edited_since_pending = False

        self._state = EditableState(value=sanitize(props.content, self._config))
        self._surface.write_raw_content(self._state.value)

    # --- Accessors ---

    @property
    def props(self) -> EditorProps:
        return self._props

    @property
    def config(self) -> SanitizeConfig:
        return self._config

    @property
    def value(self) -> str:
        return self._state.value

    @property
    def state(self) -> EditableState:
        return EditableState(value=self._state.value)

    @property
    def is_focused(self) -> bool:
        return self._focused

    @property
    def has_deferred_change(self) -> bool:
        return self._pending_content is not None

    def render_props(self) -> RenderProps:
        """Description for a presentational layer; renders nothing."""
        return RenderProps(
            tag_name=self._props.tag_name,
            content_editable=self._props.editable,
            style=merge_style(self._props.style),
            value=self._state.value,
        )

    # --- Reconfiguration ---

    def should_update(self, next_props: EditorProps) -> bool:
        return not props_equal(self._props, next_props)

    def receive_props(self, next_props: EditorProps) -> ReceivePropsOutput:
        """
        Apply an external props change.

        Shallow-equal props are skipped. Otherwise the new props and config
        are adopted at once. The surface is rewritten only for a new
        ``content`` value, or when the current value is no longer clean
        under the new config. A new ``content`` arriving while focused is
        held back until blur so the caret does not jump.
        """
        if self._pending_content is not None and next_props.content == self._props.content:
            logger.debug("External content reverted; cancelling deferred change")
            self._pending_content = None

        if not self.should_update(next_props):
            return ReceivePropsOutput(value=self._state.value, skipped=True)

        content_changed = next_props.content != self._props.content
        self._config = config_from_props(next_props)

        if self._focused:
            if not content_changed:
                self._props = next_props
                return ReceivePropsOutput(value=self._state.value, applied=True)

            logger.debug("Surface focused; deferring external content change")
            self._props = replace(next_props, content=self._props.content)
            self._pending_content = next_props.content
            self._edited_since_pending = False
            return ReceivePropsOutput(value=self._state.value, deferred=True)

        self._props = next_props
        if content_changed:
            value = sanitize(next_props.content, self._config)
        elif not is_sanitized(self._state.value, self._config):
            value = sanitize(self._state.value, self._config)
        else:
            return ReceivePropsOutput(value=self._state.value, applied=True)

        self._surface.write_raw_content(value)
        self._state.value = value
        return ReceivePropsOutput(value=value, applied=True, surface_written=True)

    # --- Event Handlers ---

    def handle(self, event: EditorEvent) -> EventOutput:
        """Dispatch a surface event to its handler."""
        if event.type == EventType.FOCUS:
            return self.handle_focus(event)
        elif event.type == EventType.BLUR:
            return self.handle_blur(event)
        elif event.type == EventType.INPUT:
            return self.handle_input(event)
        elif event.type == EventType.KEY_DOWN:
            return self.handle_key_down(event)
        elif event.type == EventType.PASTE:
            return self.handle_paste(event)

        logger.debug("Ignoring unsupported surface event %r", event.type)
        return EventOutput(event_type=event.type, value=self._state.value)

    def handle_focus(self, event: EditorEvent) -> EventOutput:
        self._focused = True
        return EventOutput(event_type=EventType.FOCUS.value, value=self._state.value)

    def handle_key_down(self, event: EditorEvent) -> EventOutput:
        """
        Report the key-press, then veto it if it would insert text into a
        full, single-line-Enter or read-only surface.

        Below max_length a printable key is still vetoed when it is Enter on
        a single-line surface, or when the surface is not editable.
        """
        raw = self._read()
        self._props.on_key_down(event, raw)

        if is_control_key(event, self._extra_allowed_keys):
            return self._key_output(vetoed=False)

        if not self._props.editable:
            return self._veto(event, "surface not editable")

        if not self._config.multi_line and normalize_key(event.key) == ENTER_KEY:
            return self._veto(event, "single-line surface")

        max_length = self._config.max_length
        if max_length is not None and len(raw) >= max_length:
            return self._veto(event, f"at max_length {max_length}")

        return self._key_output(vetoed=False)

    def handle_input(self, event: EditorEvent) -> EventOutput:
        """
        Track live content without sanitizing it.

        The surface is written only when content overflows max_length.
        """
        raw = self._read()
        value = raw
        written = False
        self._edited_since_pending = True

        max_length = self._config.max_length
        if max_length is not None and len(raw) > max_length:
            value = truncate(raw, max_length)
            logger.debug("Input overflowed max_length %d; truncating surface", max_length)
            self._surface.write_raw_content(value)
            written = True

        self._state.value = value
        self._props.on_change(event, value)
        return EventOutput(
            event_type=EventType.INPUT.value,
            value=value,
            surface_written=written,
            notified=True,
        )

    def handle_blur(self, event: EditorEvent) -> EventOutput:
        """
        Sanitize, write back and store the clean value.

        Content deferred while focused lands here unless the user edited
        after it arrived; then the edit wins and the props keep the old
        content so the same change can be sent again.
        """
        source = self._read()
        if self._pending_content is not None:
            if self._edited_since_pending:
                logger.debug("Dropping deferred external content in favour of edited value")
            else:
                logger.debug("Applying deferred external content")
                source = self._pending_content
                self._props = replace(self._props, content=self._pending_content)
            self._pending_content = None
            self._edited_since_pending = False

        value = sanitize(source, self._config)
        logger.debug("Blur sanitized %d chars to %d", len(source), len(value))

        self._surface.write_raw_content(value)
        self._state.value = value
        self._focused = False

        self._props.on_blur(event)
        return EventOutput(
            event_type=EventType.BLUR.value,
            value=value,
            surface_written=True,
            notified=True,
        )

    def handle_paste(self, event: EditorEvent) -> EventOutput:
        """Replace the host's formatted paste with a plain-text insert."""
        event.prevent_default()

        if not self._props.editable:
            return EventOutput(
                event_type=EventType.PASTE.value,
                value=self._state.value,
                vetoed=True,
            )

        if self._clipboard is not None:
            text = self._clipboard.get_plain_text(event)
        else:
            text = plain_text_from_payload(event.clipboard_data)
        if not isinstance(text, str):
            text = ""

        self._surface.insert_plain_text_at_caret(text)
        self._edited_since_pending = True
        self._props.on_paste(event)
        return EventOutput(
            event_type=EventType.PASTE.value,
            value=self._state.value,
            vetoed=True,
            surface_written=bool(text),
            notified=True,
        )

    # --- Internals ---

    def _read(self) -> str:
        raw = self._surface.read_raw_content()
        return raw if isinstance(raw, str) else ""

    def _key_output(self, vetoed: bool) -> EventOutput:
        return EventOutput(
            event_type=EventType.KEY_DOWN.value,
            value=self._state.value,
            vetoed=vetoed,
            notified=True,
        )

    def _veto(self, event: EditorEvent, reason: str) -> EventOutput:
        logger.debug("Vetoed key %r: %s", event.key, reason)
        event.prevent_default()
        return self._key_output(vetoed=True)
