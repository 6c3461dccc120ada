"""Show and hide dependent fields from their controller's live value.

A dependent field carries a ``(controller_id, target)`` rule.  It is visible
exactly when the controller's current value equals ``target`` as a string.
The decision lives in :func:`compute_visibility`; :class:`VisibilityEngine`
only wires Qt change signals to a full re-evaluation.

Policies for fields removed by the permission filter:

* a suppressed controller has no control, so its dependents are evaluated
  against the empty string;
* a suppressed dependent has no rule recorded and is never toggled.

Only one controller per dependent is supported.  Chained dependencies are
re-evaluated independently, never in dependency order.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from PySide6.QtCore import QObject, Signal

from .models import RenderContext, Visibility
from .widgets.controls import control_value, value_changed_signal
from .widgets.field_factory import FieldWidget

logger = logging.getLogger(__name__)


def compute_visibility(target: str, current_value: Optional[str]) -> Visibility:
    """Return the visibility of a dependent bound to ``target``.

    ``current_value`` is ``None`` when the controller has no live control.
    """

    value = "" if current_value is None else current_value
    return Visibility.VISIBLE if value == target else Visibility.HIDDEN


class VisibilityEngine(QObject):
    """Keeps every dependent field's display state in sync."""

    visibilityChanged = Signal(str, bool)  # field id, visible

    def __init__(self, context: RenderContext, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._context = context
        self._dependents: List[Tuple[FieldWidget, str, str]] = []
        self._states: Dict[str, Visibility] = {}
        self._mounted = False

    @property
    def dependents(self) -> List[str]:
        return [wrapper.field_id for wrapper, _, _ in self._dependents]

    def mount(self) -> Dict[str, Visibility]:
        """Index controls, subscribe to controllers, then evaluate once."""

        if self._mounted:
            raise RuntimeError("VisibilityEngine is already mounted")
        controls = self._context.index_controls()

        self._dependents = []
        for wrapper in self._context.field_widgets:
            rule = wrapper.visibility_rule()
            if rule is None:
                continue
            controller_id, target = rule
            self._dependents.append((wrapper, controller_id, target))

        subscribed = set()
        for _, controller_id, _ in self._dependents:
            control = controls.get(controller_id)
            if control is None or controller_id in subscribed:
                continue
            value_changed_signal(control).connect(lambda *_args: self.refresh())
            subscribed.add(controller_id)

        self._mounted = True
        logger.debug(
            "Visibility engine mounted: %d dependent(s), %d controller(s)",
            len(self._dependents),
            len(subscribed),
        )
        return self.refresh()

    def refresh(self) -> Dict[str, Visibility]:
        """Re-evaluate every dependent field and apply the result."""

        states: Dict[str, Visibility] = {}
        controls = self._context.controls
        for wrapper, controller_id, target in self._dependents:
            control = controls.get(controller_id)
            current = control_value(control) if control is not None else None
            state = compute_visibility(target, current)
            states[wrapper.field_id] = state
            visible = state is Visibility.VISIBLE
            wrapper.setVisible(visible)
            if self._states.get(wrapper.field_id) is not state:
                logger.debug("Field %s -> %s", wrapper.field_id, state.value)
                self.visibilityChanged.emit(wrapper.field_id, visible)
        self._states = states
        return states


__all__ = ["compute_visibility", "VisibilityEngine"]
