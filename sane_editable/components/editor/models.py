"""
Editor component input/output models.

Events are mutable (a handler may veto them); everything else is frozen.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any


class EventType(str, Enum):
    """Surface event types the controller understands."""

    FOCUS = "focus"
    BLUR = "blur"
    INPUT = "input"
    KEY_DOWN = "keydown"
    PASTE = "paste"


# --- Observer Callbacks ---


def _ignore_value(event: EditorEvent, value: str) -> None:
    return None


def _ignore(event: EditorEvent) -> None:
    return None


# --- Host Event ---


@dataclass
class EditorEvent:
    """
    Event delivered by the host surface.

    The native object, if any, is passed through untouched so observers
    can reach host-specific details.
    """

    type: str
    key: str | None = None
    ctrl: bool = False
    meta: bool = False
    alt: bool = False
    shift: bool = False
    clipboard_data: Any = None
    native: Any = None
    default_prevented: bool = False

    def prevent_default(self) -> None:
        """Suppress the host's default action for this event."""
        self.default_prevented = True

    @property
    def has_modifier(self) -> bool:
        """Ctrl, Meta or Alt held (Shift alone still inserts text)."""
        return self.ctrl or self.meta or self.alt


# --- State ---


@dataclass
class EditableState:
    """Authoritative value owned by the edit controller."""

    value: str = ""


# --- Configuration Surface ---


@dataclass(frozen=True)
class EditorProps:
    """External configuration and observers for one editable surface."""

    content: str = ""
    tag_name: str = "div"
    editable: bool = True
    multi_line: bool = False
    max_length: int | None = None
    sanitise: bool = True
    style: Mapping[str, Any] | None = None
    on_change: Callable[[EditorEvent, str], None] = _ignore_value
    on_blur: Callable[[EditorEvent], None] = _ignore
    on_key_down: Callable[[EditorEvent, str], None] = _ignore_value
    on_paste: Callable[[EditorEvent], None] = _ignore


@dataclass(frozen=True)
class RenderProps:
    """What a presentational layer needs to draw the surface."""

    tag_name: str
    content_editable: bool
    style: dict[str, Any]
    value: str


# --- Input Models ---


@dataclass(frozen=True)
class HandleEventInput:
    """Input for processing one surface event."""

    event: EditorEvent


@dataclass(frozen=True)
class ReceivePropsInput:
    """Input for an external reconfiguration or content change."""

    props: EditorProps


# --- Output Models ---


@dataclass(frozen=True)
class EventOutput:
    """Outcome of processing one surface event."""

    event_type: str
    value: str
    vetoed: bool = False
    surface_written: bool = False
    notified: bool = False
    success: bool = True


@dataclass(frozen=True)
class ReceivePropsOutput:
    """Outcome of an external props change."""

    value: str
    applied: bool = False
    deferred: bool = False
    skipped: bool = False
    surface_written: bool = False
    success: bool = True


DEFAULT_STYLE: Mapping[str, Any] = MappingProxyType({"white_space": "pre-wrap"})
