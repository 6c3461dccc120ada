"""Data models for dynamic forms."""

from .enums import FieldType, RenderDecision, SubmissionState, Visibility
from .schema import (
    DEFAULT_SUBMIT_LABEL,
    FieldPermissions,
    FieldSpec,
    FormConfig,
    FormLayout,
    LanguageOverride,
    Section,
    VisibleIf,
)
from .context import RenderContext, SubmissionSnapshot

__all__ = [
    "FieldType",
    "RenderDecision",
    "SubmissionState",
    "Visibility",
    "DEFAULT_SUBMIT_LABEL",
    "FieldPermissions",
    "FieldSpec",
    "FormConfig",
    "FormLayout",
    "LanguageOverride",
    "Section",
    "VisibleIf",
    "RenderContext",
    "SubmissionSnapshot",
]
