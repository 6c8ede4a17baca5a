"""
Rules adapters - expose loaded Rules through component ports.
"""

from __future__ import annotations

from sane_editable.rules.models import Rules


class EditorRulesAdapter:
    """Implements the sanitizer RulesPort and editor KeyRulesPort."""

    def __init__(self, rules: Rules) -> None:
        self._rules = rules

    def get_multi_line(self) -> bool:
        return self._rules.editor.multi_line

    def get_max_length(self) -> int | None:
        return self._rules.editor.max_length

    def get_sanitise_enabled(self) -> bool:
        return self._rules.editor.sanitise

    def get_extra_allowed_keys(self) -> frozenset[str]:
        return frozenset(key.replace(" ", "") for key in self._rules.keys.extra_allowed)

    def get_prop_defaults(self) -> dict[str, object]:
        return self._rules.editor.as_defaults()
