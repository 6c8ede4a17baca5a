"""
Sanitizer component - Whitespace and layout normalization.

Provides the pure text transform used when an editable surface loses focus.

Invariants:
- I1: Output never contains NBSP or listed Unicode spaces when enabled
- I2: Single-line output never contains line terminators when enabled
- I3: At most two consecutive line feeds in multi-line output
- I4: Output length never exceeds max_length
"""

from __future__ import annotations

from dataclasses import replace

from ._impl import (
    DEFAULT_CONFIG,
    SanitizeConfig,
    is_sanitized,
    sanitize,
)
from .models import (
    CheckTextInput,
    CheckTextOutput,
    SanitizeTextInput,
    SanitizeTextOutput,
)
from .ports import RulesPort


def build_config(rules: RulesPort | None) -> SanitizeConfig:
    """Build sanitize config from rules port."""
    if rules is None:
        return DEFAULT_CONFIG

    return SanitizeConfig(
        multi_line=rules.get_multi_line(),
        max_length=rules.get_max_length(),
        sanitise_enabled=rules.get_sanitise_enabled(),
    )


def _apply_overrides(
    config: SanitizeConfig,
    inp: SanitizeTextInput | CheckTextInput,
) -> SanitizeConfig:
    """Per-call overrides win over the rules-derived config."""
    updates: dict[str, object] = {}
    if inp.multi_line is not None:
        updates["multi_line"] = inp.multi_line
    if inp.max_length is not None:
        updates["max_length"] = inp.max_length
    if inp.sanitise is not None:
        updates["sanitise_enabled"] = inp.sanitise
    return replace(config, **updates) if updates else config


# --- Component Entry Points ---


def run_sanitize(
    inp: SanitizeTextInput,
    *,
    rules: RulesPort | None = None,
) -> SanitizeTextOutput:
    """
    Sanitize surface text.

    Args:
        inp: Input containing the raw text and optional overrides.
        rules: Optional rules port for configuration.

    Returns:
        SanitizeTextOutput with the normalized text.
    """
    config = _apply_overrides(build_config(rules), inp)
    raw = inp.text if isinstance(inp.text, str) else ""
    text = sanitize(raw, config)

    truncated = config.max_length is not None and len(
        sanitize(raw, replace(config, max_length=None))
    ) > len(text)

    return SanitizeTextOutput(
        text=text,
        changed=text != raw,
        truncated=truncated,
        success=True,
    )


def run_check(
    inp: CheckTextInput,
    *,
    rules: RulesPort | None = None,
) -> CheckTextOutput:
    """Check whether text is already sanitized for the config."""
    config = _apply_overrides(build_config(rules), inp)
    return CheckTextOutput(is_clean=is_sanitized(inp.text, config))


def run(
    inp: SanitizeTextInput | CheckTextInput,
    *,
    rules: RulesPort | None = None,
) -> SanitizeTextOutput | CheckTextOutput:
    """
    Main entry point for the sanitizer component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, SanitizeTextInput):
        return run_sanitize(inp, rules=rules)
    elif isinstance(inp, CheckTextInput):
        return run_check(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
