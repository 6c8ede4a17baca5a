import logging
from pathlib import Path

import flet as ft

from sane_editable.adapters.rules import EditorRulesAdapter
from sane_editable.components.editor import EditorEvent, props_from_defaults
from sane_editable.rules.loader import default_rules, load_rules, resolve_rules_path
from sane_editable.rules.models import Rules
from sane_editable.ui.editable import SaneEditable

# Logging setup
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def load_app_rules(path: Path) -> Rules:
    if not path.exists():
        logger.warning(f"Rules file {path} not found, using built-in defaults")
        return default_rules()
    rules = load_rules(path)
    logger.info(f"Rules loaded from {path}")
    return rules


def main(page: ft.Page) -> None:
    page.title = "Sane Editable"

    rules = load_app_rules(resolve_rules_path())
    logging.getLogger("sane_editable").setLevel(rules.logging.level)
    adapter = EditorRulesAdapter(rules)

    status = ft.Text("", selectable=True)

    def show(label: str, value: str) -> None:
        status.value = f"{label}: {value!r}"
        page.update()

    def on_change(e: EditorEvent, value: str) -> None:
        show("live", value)

    def on_blur(e: EditorEvent) -> None:
        show("saved", editable.value)

    props = props_from_defaults(
        adapter.get_prop_defaults(),
        content="",
        on_change=on_change,
        on_blur=on_blur,
    )
    editable = SaneEditable(props, page=page, keys=adapter, label="Type here")

    page.on_keyboard_event = editable.handle_keyboard
    page.add(editable, status)


if __name__ == "__main__":
    ft.app(target=main)
