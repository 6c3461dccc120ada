"""Per-session state for a rendered form and the snapshot it produces."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Dict, Iterable, Iterator, List, Optional, Tuple

from .schema import FormConfig

if TYPE_CHECKING:  # pragma: no cover - typing only
    from PySide6.QtWidgets import QPushButton, QWidget

    from ..widgets.field_factory import FieldWidget


@dataclass
class RenderContext:
    """State owned by one render session.

    Attributes
    ----------
    config:
        The (localized) configuration that was rendered.
    role:
        Role in effect for permission decisions.  Advisory only.
    form_root:
        The form body widget the sections were attached to.
    field_widgets:
        Every field wrapper, suppressed placeholders included, in the order
        they were added to the tree.
    controls:
        Field id to live control.  Filled by :meth:`index_controls`;
        suppressed fields have no entry.
    """

    config: FormConfig
    role: str
    form_root: Optional["QWidget"] = None
    field_widgets: List["FieldWidget"] = field(default_factory=list)
    controls: Dict[str, "QWidget"] = field(default_factory=dict)
    submit_button: Optional["QPushButton"] = None

    def index_controls(self) -> Dict[str, "QWidget"]:
        self.controls = {
            w.field_id: w.control for w in self.field_widgets if w.control is not None
        }
        return self.controls

    def wrapper_for(self, field_id: str) -> Optional["FieldWidget"]:
        return next((w for w in self.field_widgets if w.field_id == field_id), None)


class SubmissionSnapshot(Mapping):
    """Read-only capture of field id to value, in encounter order."""

    __slots__ = ("_values",)

    def __init__(self, pairs: Iterable[Tuple[str, str]] = ()) -> None:
        values: Dict[str, str] = {}
        for name, value in pairs:
            # Repeated names keep their first position, last value wins.
            values[name] = value
        self._values = MappingProxyType(values)

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"SubmissionSnapshot({dict(self._values)!r})"

    def to_dict(self) -> Dict[str, str]:
        return dict(self._values)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)


__all__ = ["RenderContext", "SubmissionSnapshot"]
