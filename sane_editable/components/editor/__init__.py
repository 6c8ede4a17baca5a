"""
Editor component - Edit reconciliation for an editable surface.
"""

from ._impl import (
    ENTER_KEY,
    MODIFIER_KEYS,
    NAVIGATION_KEYS,
    EditController,
    config_from_props,
    is_control_key,
    merge_style,
    normalize_key,
    plain_text_from_payload,
    props_equal,
)
from .component import (
    create_controller,
    props_from_defaults,
    run,
    run_event,
    run_receive_props,
)
from .models import (
    DEFAULT_STYLE,
    EditableState,
    EditorEvent,
    EditorProps,
    EventOutput,
    EventType,
    HandleEventInput,
    ReceivePropsInput,
    ReceivePropsOutput,
    RenderProps,
)
from .ports import ClipboardPort, KeyRulesPort, SurfacePort

__all__ = [
    # Entry points
    "run",
    "run_event",
    "run_receive_props",
    "create_controller",
    "props_from_defaults",
    # Input models
    "HandleEventInput",
    "ReceivePropsInput",
    # Output models
    "EventOutput",
    "ReceivePropsOutput",
    "RenderProps",
    # State / events / config
    "EditableState",
    "EditorEvent",
    "EditorProps",
    "EventType",
    "DEFAULT_STYLE",
    # Ports
    "SurfacePort",
    "ClipboardPort",
    "KeyRulesPort",
    # Controller
    "EditController",
    "config_from_props",
    "is_control_key",
    "merge_style",
    "normalize_key",
    "plain_text_from_payload",
    "props_equal",
    # Constants
    "ENTER_KEY",
    "MODIFIER_KEYS",
    "NAVIGATION_KEYS",
]
