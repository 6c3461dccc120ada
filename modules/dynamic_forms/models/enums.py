"""Enumerations used throughout the dynamic forms module."""

from __future__ import annotations

from enum import Enum
from typing import Set


class _StrEnum(str, Enum):
    """Enum subclass that compares/serialises as its value."""

    def __str__(self) -> str:  # pragma: no cover - trivial
        return str(self.value)

    @classmethod
    def values(cls) -> Set[str]:
        return {member.value for member in cls}

    @classmethod
    def has_value(cls, value: str) -> bool:
        return value in cls.values()


class FieldType(_StrEnum):
    TEXT = "text"
    TEXTAREA = "textarea"
    SELECT = "select"
    DATE = "date"
    TIME = "time"


class RenderDecision(_StrEnum):
    RENDER = "RENDER"
    SUPPRESS = "SUPPRESS"


class Visibility(_StrEnum):
    VISIBLE = "VISIBLE"
    HIDDEN = "HIDDEN"


class SubmissionState(_StrEnum):
    IDLE = "IDLE"
    VALIDATING = "VALIDATING"
    REJECTED = "REJECTED"
    ACCEPTED = "ACCEPTED"
