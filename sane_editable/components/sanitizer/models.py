"""
Sanitizer component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

# --- Input Models ---


@dataclass(frozen=True)
class SanitizeTextInput:
    """Input for sanitizing a single piece of surface text."""

    text: str | None
    multi_line: bool | None = None
    max_length: int | None = None
    sanitise: bool | None = None


@dataclass(frozen=True)
class CheckTextInput:
    """Input for checking whether text is already sanitized."""

    text: str
    multi_line: bool | None = None
    max_length: int | None = None
    sanitise: bool | None = None


# --- Output Models ---


@dataclass(frozen=True)
class SanitizeTextOutput:
    """Output for sanitized text."""

    text: str
    changed: bool
    truncated: bool = False
    success: bool = True


@dataclass(frozen=True)
class CheckTextOutput:
    """Output for a sanitized-at-rest check."""

    is_clean: bool
    success: bool = True
