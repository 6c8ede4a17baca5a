import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from sane_editable.rules.models import ProjectRules, Rules

RULES_PATH_ENV = "SANE_EDITABLE_RULES_PATH"
DEFAULT_RULES_PATH = "rules.yaml"


def resolve_rules_path(path: str | Path | None = None) -> Path:
    """Explicit path, else $SANE_EDITABLE_RULES_PATH, else ./rules.yaml."""
    if path is not None:
        return Path(path)
    return Path(os.environ.get(RULES_PATH_ENV, DEFAULT_RULES_PATH))


def default_rules() -> Rules:
    """Rules used when no rules file is configured."""
    return Rules(project=ProjectRules(slug="sane-editable", rules_version="1"))


def load_rules(path: Path) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    if data is None:
        raise ValueError(f"Rules file is empty: {path}")

    try:
        return Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e
