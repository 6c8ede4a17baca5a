from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator


class ProjectRules(BaseModel):
    slug: str
    rules_version: str

class EditorRules(BaseModel):
    tag_name: str = "div"
    editable: bool = True
    multi_line: bool = False
    max_length: int | None = None
    sanitise: bool = True

    @field_validator("tag_name")
    @classmethod
    def _tag_name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("tag_name must not be blank")
        return value.strip()

    def as_defaults(self) -> dict[str, Any]:
        return self.model_dump()

class KeyRules(BaseModel):
    extra_allowed: list[str] = Field(default_factory=list)

class LoggingRules(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

class Rules(BaseModel):
    project: ProjectRules
    editor: EditorRules = Field(default_factory=EditorRules)
    keys: KeyRules = Field(default_factory=KeyRules)
    logging: LoggingRules = Field(default_factory=LoggingRules)
