"""Host panel for one dynamic form render session.

The panel supplies the four mount points the renderer fills in: a metadata
region for title and description, the form body, and an output container
wrapping a read-only output area for the submitted JSON.
"""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtWidgets import (
    QGroupBox,
    QLabel,
    QPlainTextEdit,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from utils.styles import form_stylesheet, subscribe_theme

from ..models import FormConfig, RenderContext
from ..submission import SubmissionHandler
from ..visibility import VisibilityEngine
from .section_assembler import SectionAssembler

logger = logging.getLogger(__name__)


class DynamicFormPanel(QWidget):
    def __init__(
        self,
        parent: QWidget | None = None,
        *,
        assembler: SectionAssembler | None = None,
        include_hidden: bool = True,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Dynamic Form")
        self._assembler = assembler or SectionAssembler()
        self._include_hidden = include_hidden
        self.context: Optional[RenderContext] = None
        self.visibility: Optional[VisibilityEngine] = None
        self.submission: Optional[SubmissionHandler] = None
        self.load_error: Optional[QLabel] = None

        layout = QVBoxLayout(self)

        self.metadata_region = QWidget()
        self.metadata_region.setObjectName("formMetadata")
        QVBoxLayout(self.metadata_region).setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.metadata_region)

        self.form_body = QWidget()
        self.form_body.setObjectName("dynamicForm")
        QVBoxLayout(self.form_body)
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self.form_body)
        layout.addWidget(scroll, 1)

        self.output_container = QGroupBox("Submitted Data")
        self.output_container.setObjectName("formOutput")
        out_layout = QVBoxLayout(self.output_container)
        self.output_content = QPlainTextEdit()
        self.output_content.setObjectName("outputJson")
        self.output_content.setReadOnly(True)
        out_layout.addWidget(self.output_content)
        self.output_container.setVisible(False)
        layout.addWidget(self.output_container)

        subscribe_theme(self, lambda *_: self.setStyleSheet(form_stylesheet()))

    # ------------------------------------------------------------------
    def render(self, config: FormConfig, role: str) -> RenderContext:
        """Render ``config`` for ``role`` and wire visibility and submission."""

        if self.context is not None:
            raise RuntimeError("DynamicFormPanel already rendered a form")
        self.setWindowTitle(config.title or "Dynamic Form")
        context = self._assembler.assemble(config, role, self.metadata_region, self.form_body)
        self.form_body.layout().addStretch(1)

        self.visibility = VisibilityEngine(context, self)
        self.visibility.mount()

        self.submission = SubmissionHandler(
            context,
            self.output_container,
            self.output_content,
            include_hidden=self._include_hidden,
            parent=self,
        )
        self.submission.attach()
        self.context = context
        logger.info("Rendered form %r for role %r", config.title, role)
        return context

    def show_load_error(self, message: str) -> None:
        """Show a visible error in place of a form that failed to load."""

        if self.load_error is None:
            self.load_error = QLabel()
            self.load_error.setObjectName("loadError")
            self.load_error.setWordWrap(True)
            self.metadata_region.layout().addWidget(self.load_error)
        self.load_error.setText(message)
        self.load_error.setVisible(True)


__all__ = ["DynamicFormPanel"]
