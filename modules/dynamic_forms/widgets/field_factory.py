"""Build one labelled input widget per :class:`FieldSpec`."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, Tuple

from PySide6.QtCore import QRegularExpression
from PySide6.QtGui import QRegularExpressionValidator
from PySide6.QtWidgets import (
    QComboBox,
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPlainTextEdit,
    QVBoxLayout,
    QWidget,
)

from .. import permissions
from ..models import FieldSpec, FieldType

logger = logging.getLogger(__name__)

REQUIRED_MARKER = "*"

_DATE_PATTERN = r"\d{4}-\d{2}-\d{2}"
_TIME_PATTERN = r"\d{2}:\d{2}"


class FieldWidget(QFrame):
    """Wrapper holding a field's label, control and help text.

    Suppressed fields keep an empty wrapper so the field id still has a
    place in the tree.  The ``visibleIfField``/``visibleIfEquals``
    properties are what the visibility engine reads.
    """

    def __init__(self, field_id: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setProperty("class", "field")
        self.setProperty("fieldId", field_id)
        self.field_id = field_id
        self.control: QWidget | None = None
        self.label: QLabel | None = None
        self.required_marker: QLabel | None = None
        self.help_label: QLabel | None = None
        self.body_layout = QVBoxLayout(self)
        self.body_layout.setContentsMargins(0, 4, 0, 4)
        self.body_layout.setSpacing(2)

    # ------------------------------------------------------------------
    @property
    def suppressed(self) -> bool:
        return bool(self.property("suppressed"))

    def mark_suppressed(self) -> None:
        self.setProperty("suppressed", True)

    # ------------------------------------------------------------------
    def set_visibility_rule(self, controller_id: str, target: str) -> None:
        self.setProperty("visibleIfField", controller_id)
        self.setProperty("visibleIfEquals", target)

    def visibility_rule(self) -> Optional[Tuple[str, str]]:
        """Return ``(controller_id, target)`` when this field is dependent."""

        controller_id = self.property("visibleIfField")
        if not controller_id:
            return None
        target = self.property("visibleIfEquals")
        return str(controller_id), "" if target is None else str(target)


class FieldFactory:
    """Create :class:`FieldWidget` instances from field specifications."""

    def __init__(self) -> None:
        self._builders: Dict[FieldType, Callable[[FieldSpec], QWidget]] = {
            FieldType.TEXT: self._build_text,
            FieldType.TEXTAREA: self._build_textarea,
            FieldType.SELECT: self._build_select,
            FieldType.DATE: self._build_date,
            FieldType.TIME: self._build_time,
        }

    def build(self, field: FieldSpec, role: str, parent: QWidget | None = None) -> FieldWidget:
        wrapper = FieldWidget(field.id, parent)
        if permissions.is_suppressed(field, role):
            logger.debug("Suppressing field %s for role %r", field.id, role)
            wrapper.mark_suppressed()
            return wrapper

        builder = self._builders.get(field.type, self._build_text)
        control = builder(field)
        control.setObjectName(field.id)
        if field.placeholder:
            control.setPlaceholderText(field.placeholder)
        if field.required:
            control.setProperty("required", True)

        layout = wrapper.body_layout
        layout.addLayout(self._label_row(wrapper, field, control))
        layout.addWidget(control)
        wrapper.control = control

        if field.help_text:
            help_label = QLabel(field.help_text)
            help_label.setObjectName("fieldHelp")
            help_label.setWordWrap(True)
            layout.addWidget(help_label)
            wrapper.help_label = help_label

        if field.visible_if is not None:
            wrapper.set_visibility_rule(field.visible_if.field, field.visible_if.equals)
        return wrapper

    # ------------------------------------------------------------------
    def _label_row(self, wrapper: FieldWidget, field: FieldSpec, control: QWidget) -> QHBoxLayout:
        row = QHBoxLayout()
        row.setSpacing(2)
        label = QLabel(field.label)
        label.setObjectName("fieldLabel")
        label.setBuddy(control)
        row.addWidget(label)
        wrapper.label = label
        if field.required:
            marker = QLabel(REQUIRED_MARKER)
            marker.setObjectName("requiredMarker")
            row.addWidget(marker)
            wrapper.required_marker = marker
        row.addStretch(1)
        return row

    # ------------------------------------------------------------------
    @staticmethod
    def _line_edit(kind: FieldType, pattern: str | None = None) -> QLineEdit:
        edit = QLineEdit()
        edit.setProperty("inputKind", kind.value)
        if pattern:
            edit.setValidator(QRegularExpressionValidator(QRegularExpression(pattern), edit))
        return edit

    def _build_text(self, field: FieldSpec) -> QWidget:
        return self._line_edit(FieldType.TEXT)

    def _build_date(self, field: FieldSpec) -> QWidget:
        edit = self._line_edit(FieldType.DATE, _DATE_PATTERN)
        if not field.placeholder:
            edit.setPlaceholderText("YYYY-MM-DD")
        return edit

    def _build_time(self, field: FieldSpec) -> QWidget:
        edit = self._line_edit(FieldType.TIME, _TIME_PATTERN)
        if not field.placeholder:
            edit.setPlaceholderText("HH:MM")
        return edit

    def _build_textarea(self, field: FieldSpec) -> QWidget:
        edit = QPlainTextEdit()
        edit.setProperty("inputKind", FieldType.TEXTAREA.value)
        edit.setTabChangesFocus(True)
        if field.rows:
            edit.setProperty("visibleRows", field.rows)
            margin = int(edit.document().documentMargin() * 2)
            frame = edit.frameWidth() * 2
            edit.setFixedHeight(edit.fontMetrics().lineSpacing() * field.rows + margin + frame)
        return edit

    def _build_select(self, field: FieldSpec) -> QWidget:
        combo = QComboBox()
        combo.setProperty("inputKind", FieldType.SELECT.value)
        for option in field.options:
            combo.addItem(option, option)
        return combo


__all__ = ["REQUIRED_MARKER", "FieldWidget", "FieldFactory"]
