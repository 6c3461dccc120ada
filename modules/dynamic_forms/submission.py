"""Validate a rendered form and capture its values on submit.

Submission runs through ``IDLE -> VALIDATING -> REJECTED | ACCEPTED -> IDLE``.
A rejected submission shows the validation summary and leaves any previously
displayed output untouched.  An accepted one hides the summary, captures a
:class:`SubmissionSnapshot` and writes it as indented JSON into the output
area.

By default hidden dependent fields are validated and captured like any
other field.  ``include_hidden=False`` leaves them out of both.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from PySide6.QtCore import QEvent, QObject, Qt, Signal
from PySide6.QtWidgets import QLabel, QLineEdit, QPlainTextEdit, QWidget

from .models import RenderContext, SubmissionSnapshot, SubmissionState
from .widgets.controls import control_is_valid, control_value
from .widgets.field_factory import FieldWidget

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "Please fix the errors above before submitting."


class SubmissionHandler(QObject):
    accepted = Signal(object)  # SubmissionSnapshot
    rejected = Signal(list)  # ids of invalid fields

    def __init__(
        self,
        context: RenderContext,
        output_container: QWidget,
        output_content: QPlainTextEdit,
        *,
        include_hidden: bool = True,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._context = context
        self._output_container = output_container
        self._output_content = output_content
        self.include_hidden = include_hidden
        self.state = SubmissionState.IDLE
        self.last_outcome: Optional[SubmissionState] = None
        self.validation_summary: Optional[QLabel] = None

    def attach(self) -> None:
        """Connect the submit button and Return in single-line inputs."""

        if self._context.submit_button is not None:
            self._context.submit_button.clicked.connect(lambda *_args: self.submit())
        for wrapper in self._context.field_widgets:
            if isinstance(wrapper.control, QLineEdit):
                wrapper.control.installEventFilter(self)

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        # Return submits even while a validator holds the text as intermediate.
        if (
            event.type() == QEvent.KeyPress
            and event.key() in (Qt.Key_Return, Qt.Key_Enter)
            and isinstance(watched, QLineEdit)
        ):
            self.submit()
            return True
        return super().eventFilter(watched, event)

    # ------------------------------------------------------------------
    def _participating(self) -> List[FieldWidget]:
        fields = []
        for wrapper in self._context.field_widgets:
            if wrapper.control is None:
                continue
            if not self.include_hidden and wrapper.isHidden():
                continue
            fields.append(wrapper)
        return fields

    def invalid_fields(self) -> List[str]:
        return [w.field_id for w in self._participating() if not control_is_valid(w.control)]

    def collect(self) -> SubmissionSnapshot:
        return SubmissionSnapshot(
            (w.control.objectName(), control_value(w.control)) for w in self._participating()
        )

    # ------------------------------------------------------------------
    def submit(self) -> Optional[SubmissionSnapshot]:
        """Run one submission.  Returns the snapshot when accepted."""

        self._transition(SubmissionState.VALIDATING)
        invalid = self.invalid_fields()
        if invalid:
            self._show_summary()
            self._transition(SubmissionState.REJECTED)
            self.rejected.emit(invalid)
            self._transition(SubmissionState.IDLE)
            return None

        self._hide_summary()
        snapshot = self.collect()
        self._output_content.setPlainText(snapshot.to_json())
        self._output_container.setVisible(True)
        self._transition(SubmissionState.ACCEPTED)
        logger.info("Form submitted with %d value(s)", len(snapshot))
        self.accepted.emit(snapshot)
        self._transition(SubmissionState.IDLE)
        return snapshot

    def _transition(self, state: SubmissionState) -> None:
        logger.debug("Submission %s -> %s", self.state.value, state.value)
        if state in (SubmissionState.ACCEPTED, SubmissionState.REJECTED):
            self.last_outcome = state
        self.state = state

    def _show_summary(self) -> None:
        if self.validation_summary is None:
            summary = QLabel()
            summary.setObjectName("validationSummary")
            summary.setWordWrap(True)
            form_root = self._context.form_root
            if form_root is not None and form_root.layout() is not None:
                form_root.layout().addWidget(summary)
            self.validation_summary = summary
        self.validation_summary.setText(VALIDATION_MESSAGE)
        self.validation_summary.setProperty("show", True)
        self.validation_summary.setVisible(True)

    def _hide_summary(self) -> None:
        if self.validation_summary is None:
            return
        self.validation_summary.setProperty("show", False)
        self.validation_summary.setVisible(False)


__all__ = ["VALIDATION_MESSAGE", "SubmissionHandler"]
