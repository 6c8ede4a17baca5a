"""
Sanitizer component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class RulesPort(Protocol):
    """Port for accessing editor sanitization rules."""

    def get_multi_line(self) -> bool:
        """Whether line feeds are kept as paragraph breaks."""
        ...

    def get_max_length(self) -> int | None:
        """Maximum length of the sanitized value, or None for unlimited."""
        ...

    def get_sanitise_enabled(self) -> bool:
        """Whether whitespace normalization runs at all."""
        ...
