"""Qt widgets for dynamic forms."""

from .controls import control_is_valid, control_value, value_changed_signal
from .field_factory import REQUIRED_MARKER, FieldFactory, FieldWidget

__all__ = [
    "control_is_valid",
    "control_value",
    "value_changed_signal",
    "REQUIRED_MARKER",
    "FieldFactory",
    "FieldWidget",
]
