"""
Sanitizer component - Whitespace and layout normalization for editable text.
"""

from ._impl import (
    DEFAULT_CONFIG,
    LAYOUT_CHARS,
    LINE_CHARS,
    NBSP,
    NBSP_ENTITY,
    UNICODE_SPACES,
    SanitizeConfig,
    collapse_spaces,
    is_sanitized,
    normalize_line_breaks,
    replace_unicode_spaces,
    sanitize,
    truncate,
)
from .component import (
    build_config,
    run,
    run_check,
    run_sanitize,
)
from .models import (
    CheckTextInput,
    CheckTextOutput,
    SanitizeTextInput,
    SanitizeTextOutput,
)
from .ports import RulesPort

__all__ = [
    # Entry points
    "run",
    "run_check",
    "run_sanitize",
    "build_config",
    # Input models
    "SanitizeTextInput",
    "CheckTextInput",
    # Output models
    "SanitizeTextOutput",
    "CheckTextOutput",
    # Ports
    "RulesPort",
    # Core
    "DEFAULT_CONFIG",
    "SanitizeConfig",
    "sanitize",
    "is_sanitized",
    "replace_unicode_spaces",
    "normalize_line_breaks",
    "collapse_spaces",
    "truncate",
    # Tables
    "NBSP",
    "NBSP_ENTITY",
    "UNICODE_SPACES",
    "LAYOUT_CHARS",
    "LINE_CHARS",
]
