"""
Sanitizer - Whitespace and layout normalization for editable text.

Turns whatever a user typed or pasted into an editable surface into a
clean, predictable string.

Key behaviors:
- NBSP (entity and character) becomes an ordinary space
- Unicode space separators, zero-width space and U+202E become spaces
- Multi-line keeps line feeds (max two in a row), single-line drops them
- Runs of spaces collapse to one; leading/trailing spaces and newlines trimmed
- Optional prefix truncation to max_length, applied last

Invariants:
- I1: sanitize() never raises and always returns a str
- I2: sanitize(sanitize(s)) == sanitize(s) for a fixed config
- I3: len(sanitize(s)) <= max_length when max_length is set
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# --- Normalization Tables ---

NBSP_ENTITY = "&nbsp;"
NBSP = "\u00a0"

UNICODE_SPACES: frozenset[str] = frozenset(
    [
        NBSP,
        "\u2000",
        "\u2001",
        "\u2002",
        "\u2003",
        "\u2004",
        "\u2005",
        "\u2006",
        "\u2007",
        "\u2008",
        "\u2009",
        "\u200a",
        "\u200b",  # zero-width space
        "\u2028",  # line separator
        "\u2029",  # paragraph separator
        "\u202e",  # right-to-left override
        "\u202f",
        "\u3000",
    ]
)

# Replaced in multi-line mode; "\n" survives as a paragraph break
LAYOUT_CHARS: frozenset[str] = frozenset(["\r", "\f", "\v", "\t"])

# Replaced in single-line mode
LINE_CHARS: frozenset[str] = LAYOUT_CHARS | frozenset(["\n"])

_UNICODE_SPACES_RE = re.compile("[" + "".join(sorted(UNICODE_SPACES)) + "]")
_LAYOUT_RE = re.compile("[\r\f\v\t]")
_LINE_RE = re.compile("[\n\r\f\v\t]")
_NEWLINE_RUN_RE = re.compile("\n{3,}")
_SPACE_RUN_RE = re.compile(" {2,}")

MAX_CONSECUTIVE_NEWLINES = 2


# --- Configuration ---


@dataclass(frozen=True)
class SanitizeConfig:
    """Sanitization settings for one edit session."""

    multi_line: bool = False
    max_length: int | None = None
    sanitise_enabled: bool = True


DEFAULT_CONFIG = SanitizeConfig()


# --- Steps ---


def replace_unicode_spaces(text: str) -> str:
    """Replace NBSP and the Unicode whitespace table with ordinary spaces."""
    text = text.replace(NBSP_ENTITY, " ")
    return _UNICODE_SPACES_RE.sub(" ", text)


def normalize_line_breaks(text: str, multi_line: bool) -> str:
    """
    Normalize line terminators and layout characters.

    Multi-line keeps "\\n" but caps runs at two; single-line flattens
    every line terminator into a space.
    """
    if multi_line:
        text = _LAYOUT_RE.sub(" ", text)
        return _NEWLINE_RUN_RE.sub("\n" * MAX_CONSECUTIVE_NEWLINES, text)
    return _LINE_RE.sub(" ", text)


def collapse_spaces(text: str) -> str:
    """Collapse runs of spaces and trim spaces/newlines at both ends."""
    return _SPACE_RUN_RE.sub(" ", text).strip(" \n")


def truncate(text: str, max_length: int | None) -> str:
    """Prefix-truncate to max_length code points (not grapheme-aware)."""
    if max_length is None:
        return text
    if max_length <= 0:
        return ""
    return text[:max_length]


# --- Entry Point ---


def sanitize(raw: str | None, config: SanitizeConfig = DEFAULT_CONFIG) -> str:
    """
    Sanitize raw surface text.

    Args:
        raw: Text read from the editable surface. None is treated as "".
        config: Sanitization settings.

    Returns:
        Normalized text. Never raises.
    """
    text = raw if isinstance(raw, str) else ""

    if config.sanitise_enabled:
        text = replace_unicode_spaces(text)
        text = normalize_line_breaks(text, config.multi_line)
        text = collapse_spaces(text)

    result = truncate(text, config.max_length)
    if len(result) != len(text):
        logger.debug("Truncated sanitized text from %d to %d chars", len(text), len(result))
        if config.sanitise_enabled:
            # A cut can land right after a space or newline
            result = result.rstrip(" \n")
    return result


def is_sanitized(text: str, config: SanitizeConfig = DEFAULT_CONFIG) -> bool:
    """Check whether text is already at rest for the given config."""
    return sanitize(text, config) == text
