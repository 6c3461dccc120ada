"""Uniform access to the Qt controls produced by the field factory.

Each field type maps onto a different Qt class with its own API for reading
the current text and announcing edits.  These helpers give the visibility
engine and the submission handler one way to ask for a control's value,
its change signal and whether it currently satisfies its constraints.
"""

from __future__ import annotations

from PySide6.QtCore import QDate, QTime, SignalInstance
from PySide6.QtWidgets import QComboBox, QLineEdit, QPlainTextEdit, QWidget

from ..models import FieldType

DATE_FORMAT = "yyyy-MM-dd"
TIME_FORMAT = "HH:mm"


def control_value(control: QWidget) -> str:
    """Return the current string value of ``control``."""

    if isinstance(control, QComboBox):
        return control.currentText()
    if isinstance(control, QPlainTextEdit):
        return control.toPlainText()
    if isinstance(control, QLineEdit):
        return control.text()
    raise TypeError(f"Unsupported control type: {type(control).__name__}")


def value_changed_signal(control: QWidget) -> SignalInstance:
    if isinstance(control, QComboBox):
        return control.currentTextChanged
    if isinstance(control, (QPlainTextEdit, QLineEdit)):
        return control.textChanged
    raise TypeError(f"Unsupported control type: {type(control).__name__}")


def is_required(control: QWidget) -> bool:
    return bool(control.property("required"))


def control_is_valid(control: QWidget) -> bool:
    """Required and format checks for a single control.

    An empty value is valid unless the control is required.  Non-empty date
    and time inputs must parse as ``YYYY-MM-DD`` and ``HH:MM``.
    """

    value = control_value(control)
    if not value:
        return not is_required(control)
    kind = control.property("inputKind")
    if kind == FieldType.DATE.value:
        return QDate.fromString(value, DATE_FORMAT).isValid()
    if kind == FieldType.TIME.value:
        return QTime.fromString(value, TIME_FORMAT).isValid()
    return True


__all__ = [
    "DATE_FORMAT",
    "TIME_FORMAT",
    "control_value",
    "value_changed_signal",
    "is_required",
    "control_is_valid",
]
