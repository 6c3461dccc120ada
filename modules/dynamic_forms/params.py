"""Launch parameters: which form, which language, which role."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import parse_qs

from utils.app_settings import DEFAULT_FORM_KIND, DEFAULT_LANGUAGE, DEFAULT_ROLE


@dataclass(frozen=True)
class LaunchParams:
    form_kind: str = DEFAULT_FORM_KIND
    language: str = DEFAULT_LANGUAGE
    role: str = DEFAULT_ROLE

    @classmethod
    def create(
        cls,
        form_kind: Optional[str] = None,
        language: Optional[str] = None,
        role: Optional[str] = None,
    ) -> "LaunchParams":
        """Build from optional strings; missing or blank values use defaults."""

        return cls(
            form_kind=form_kind or DEFAULT_FORM_KIND,
            language=language or DEFAULT_LANGUAGE,
            role=role or DEFAULT_ROLE,
        )

    @classmethod
    def from_query(cls, query: str) -> "LaunchParams":
        """Parse ``?form=audit&lang=es&role=admin`` style strings."""

        parsed = parse_qs(query.lstrip("?"))

        def first(key: str) -> Optional[str]:
            values = parsed.get(key)
            return values[0] if values else None

        return cls.create(first("form"), first("lang"), first("role"))


__all__ = ["LaunchParams"]
