"""Pydantic models describing a declarative form document.

The JSON documents use camelCase keys (``helpText``, ``visibleIf``,
``showSectionNumbers``); the models expose snake_case attributes and accept
either spelling on input.  All models are frozen: a loaded configuration is
never mutated during a render session.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .enums import FieldType

DEFAULT_SUBMIT_LABEL = "Submit Incident"


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class FieldPermissions(_FrozenModel):
    roles: Optional[List[str]] = None


class VisibleIf(_FrozenModel):
    field: str
    equals: str


class FieldSpec(_FrozenModel):
    id: str
    label: str = ""
    type: FieldType = FieldType.TEXT
    required: bool = False
    placeholder: Optional[str] = None
    help_text: Optional[str] = Field(default=None, alias="helpText")
    options: List[str] = Field(default_factory=list)
    rows: Optional[int] = None
    permissions: Optional[FieldPermissions] = None
    visible_if: Optional[VisibleIf] = Field(default=None, alias="visibleIf")

    @field_validator("type", mode="before")
    @classmethod
    def default_to_text(cls, value: Any) -> FieldType:
        # Unknown input kinds render as plain text inputs.
        if isinstance(value, FieldType):
            return value
        if isinstance(value, str) and FieldType.has_value(value):
            return FieldType(value)
        return FieldType.TEXT

    @field_validator("id")
    @classmethod
    def id_not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("Field id is required")
        return value


class Section(_FrozenModel):
    label: str = ""
    order: int = 0
    help_text: Optional[str] = Field(default=None, alias="helpText")
    fields: List[FieldSpec] = Field(default_factory=list)

    @field_validator("order", mode="before")
    @classmethod
    def null_order_is_zero(cls, value: Any) -> Any:
        return 0 if value is None else value


class FormLayout(_FrozenModel):
    show_section_numbers: bool = Field(default=False, alias="showSectionNumbers")


class LanguageOverride(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    title: Optional[str] = None


class FormConfig(_FrozenModel):
    title: str = ""
    description: str = ""
    languages: Dict[str, LanguageOverride] = Field(default_factory=dict)
    layout: FormLayout = Field(default_factory=FormLayout)
    sections: List[Section] = Field(default_factory=list)
    submit_label: str = Field(default=DEFAULT_SUBMIT_LABEL, alias="submitLabel")

    @model_validator(mode="after")
    def check_field_references(self) -> "FormConfig":
        seen: set[str] = set()
        for spec in self.iter_fields():
            if spec.id in seen:
                raise ValueError(f"Duplicate field id {spec.id!r}")
            seen.add(spec.id)
        for spec in self.iter_fields():
            if spec.visible_if is not None and spec.visible_if.field not in seen:
                raise ValueError(
                    f"Field {spec.id!r} depends on unknown field {spec.visible_if.field!r}"
                )
        return self

    def iter_fields(self):
        """Yield every field in configuration order, across all sections."""

        for section in self.sections:
            yield from section.fields

    def field_by_id(self, field_id: str) -> Optional[FieldSpec]:
        return next((f for f in self.iter_fields() if f.id == field_id), None)

    def sorted_sections(self) -> List[Section]:
        """Sections by ascending ``order``; ties keep configuration order."""

        return sorted(self.sections, key=lambda s: s.order)

    def localized(self, lang: str) -> "FormConfig":
        """Return a copy with the title replaced by the ``lang`` override.

        A missing language entry, or one without a title, leaves the base
        title unchanged.
        """

        override = self.languages.get(lang)
        if override is None or not override.title:
            return self
        return self.model_copy(update={"title": override.title})


__all__ = [
    "DEFAULT_SUBMIT_LABEL",
    "FieldPermissions",
    "VisibleIf",
    "FieldSpec",
    "Section",
    "FormLayout",
    "LanguageOverride",
    "FormConfig",
]
