"""
Editor component - Edit reconciliation for an editable surface.

Wires an EditController to its surface and clipboard ports and exposes
run-style entry points for hosts that deliver events as input models.

Invariants:
- I1: Input events never rewrite the surface except to enforce max_length
- I2: After blur the value is sanitized and the surface shows it
- I3: A key-press at or beyond max_length is vetoed unless navigational
- I4: Shallow-equal props changes are skipped entirely
- I5: Only a new content value, or a config change that leaves the value
  unsanitized, rewrites the surface
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from ._impl import EditController
from .models import (
    EditorProps,
    EventOutput,
    HandleEventInput,
    ReceivePropsInput,
    ReceivePropsOutput,
)
from .ports import ClipboardPort, KeyRulesPort, SurfacePort

# Fields a rules file may default; everything else comes from the caller
RULE_DEFAULT_FIELDS = ("tag_name", "editable", "multi_line", "max_length", "sanitise")


def props_from_defaults(defaults: dict[str, Any], **overrides: Any) -> EditorProps:
    """
    Build EditorProps from rule defaults plus caller overrides.

    Args:
        defaults: Mapping of rule-configured prop defaults.
        **overrides: Explicit props (content, observers, ...).

    Returns:
        EditorProps with overrides taking precedence.
    """
    base = {k: v for k, v in defaults.items() if k in RULE_DEFAULT_FIELDS}
    return replace(EditorProps(), **{**base, **overrides})


def create_controller(
    props: EditorProps,
    *,
    surface: SurfacePort,
    clipboard: ClipboardPort | None = None,
    keys: KeyRulesPort | None = None,
) -> EditController:
    """
    Start an editing session.

    Args:
        props: Initial configuration and observers.
        surface: Editable surface port.
        clipboard: Optional clipboard port.
        keys: Optional key rules port for extra allowed keys.

    Returns:
        EditController with the surface seeded from props.content.
    """
    extra = keys.get_extra_allowed_keys() if keys is not None else frozenset()
    return EditController(props, surface, clipboard, extra_allowed_keys=extra)


# --- Component Entry Points ---


def run_event(
    inp: HandleEventInput,
    *,
    controller: EditController,
) -> EventOutput:
    """
    Process one surface event.

    Args:
        inp: Input containing the host event.
        controller: Controller owning the session.

    Returns:
        EventOutput describing what the controller did.
    """
    return controller.handle(inp.event)


def run_receive_props(
    inp: ReceivePropsInput,
    *,
    controller: EditController,
) -> ReceivePropsOutput:
    """
    Apply an external props change.

    Args:
        inp: Input containing the next props set.
        controller: Controller owning the session.

    Returns:
        ReceivePropsOutput saying whether it was applied, deferred or skipped.
    """
    return controller.receive_props(inp.props)


def run(
    inp: HandleEventInput | ReceivePropsInput,
    *,
    controller: EditController,
) -> EventOutput | ReceivePropsOutput:
    """
    Main entry point for the editor component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, HandleEventInput):
        return run_event(inp, controller=controller)
    elif isinstance(inp, ReceivePropsInput):
        return run_receive_props(inp, controller=controller)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
