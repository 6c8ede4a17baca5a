from pathlib import Path

import pytest

from sane_editable.adapters.memory_surface import InMemorySurface
from sane_editable.components.editor import EditorEvent, EditorProps


class ObserverRecorder:
    """Records every observer call the controller makes."""

    def __init__(self) -> None:
        self.changes: list[tuple[EditorEvent, str]] = []
        self.blurs: list[EditorEvent] = []
        self.key_downs: list[tuple[EditorEvent, str]] = []
        self.pastes: list[EditorEvent] = []

    def on_change(self, event: EditorEvent, value: str) -> None:
        self.changes.append((event, value))

    def on_blur(self, event: EditorEvent) -> None:
        self.blurs.append(event)

    def on_key_down(self, event: EditorEvent, value: str) -> None:
        self.key_downs.append((event, value))

    def on_paste(self, event: EditorEvent) -> None:
        self.pastes.append(event)

    def props(self, **kwargs: object) -> EditorProps:
        return EditorProps(
            on_change=self.on_change,
            on_blur=self.on_blur,
            on_key_down=self.on_key_down,
            on_paste=self.on_paste,
            **kwargs,  # type: ignore[arg-type]
        )


@pytest.fixture
def recorder() -> ObserverRecorder:
    return ObserverRecorder()


@pytest.fixture
def surface() -> InMemorySurface:
    return InMemorySurface()


@pytest.fixture
def rules_file(tmp_path: Path) -> Path:
    path = tmp_path / "rules.yaml"
    path.write_text(
        "project:\n"
        "  slug: test\n"
        "  rules_version: '1'\n"
        "editor:\n"
        "  multi_line: true\n"
        "  max_length: 20\n"
        "  sanitise: true\n"
        "keys:\n"
        "  extra_allowed:\n"
        "    - Insert\n"
        "    - Context Menu\n"
        "logging:\n"
        "  level: DEBUG\n"
    )
    return path


@pytest.fixture
def project_rules_path() -> Path:
    return Path(__file__).resolve().parent.parent / "rules.yaml"
