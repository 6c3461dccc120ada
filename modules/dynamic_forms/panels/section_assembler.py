"""Compose the widget tree for a :class:`FormConfig`."""

from __future__ import annotations

import logging

from PySide6.QtWidgets import QFrame, QLabel, QPushButton, QVBoxLayout, QWidget

from ..models import FormConfig, RenderContext, Section
from ..widgets.field_factory import FieldFactory

logger = logging.getLogger(__name__)


def section_heading(section: Section, index: int, numbered: bool) -> str:
    """Heading text for the section at 0-based ``index``."""

    return f"{index + 1}. {section.label}" if numbered else section.label


def _region_layout(region: QWidget) -> QVBoxLayout:
    layout = region.layout()
    if layout is None:
        layout = QVBoxLayout(region)
    return layout


class SectionAssembler:
    """Render title, ordered sections, fields and the submit button."""

    def __init__(self, factory: FieldFactory | None = None) -> None:
        self.factory = factory or FieldFactory()

    def assemble(
        self,
        config: FormConfig,
        role: str,
        metadata: QWidget,
        body: QWidget,
    ) -> RenderContext:
        context = RenderContext(config=config, role=role, form_root=body)

        meta_layout = _region_layout(metadata)
        title = QLabel(config.title)
        title.setObjectName("formTitle")
        description = QLabel(config.description)
        description.setObjectName("formDescription")
        description.setWordWrap(True)
        meta_layout.addWidget(title)
        meta_layout.addWidget(description)

        body_layout = _region_layout(body)
        numbered = config.layout.show_section_numbers
        for index, section in enumerate(config.sorted_sections()):
            body_layout.addWidget(self._build_section(context, section, index, numbered, role))

        submit = QPushButton(config.submit_label)
        submit.setObjectName("submitButton")
        submit.setDefault(True)
        body_layout.addWidget(submit)
        context.submit_button = submit

        logger.debug(
            "Assembled %d section(s), %d field(s) for role %r",
            len(config.sections),
            len(context.field_widgets),
            role,
        )
        return context

    def _build_section(
        self,
        context: RenderContext,
        section: Section,
        index: int,
        numbered: bool,
        role: str,
    ) -> QFrame:
        frame = QFrame()
        frame.setProperty("class", "section")
        layout = QVBoxLayout(frame)

        heading = QLabel(section_heading(section, index, numbered))
        heading.setObjectName("sectionTitle")
        layout.addWidget(heading)

        if section.help_text:
            help_label = QLabel(section.help_text)
            help_label.setObjectName("sectionHelp")
            help_label.setWordWrap(True)
            layout.addWidget(help_label)

        for spec in section.fields:
            wrapper = self.factory.build(spec, role, frame)
            layout.addWidget(wrapper)
            context.field_widgets.append(wrapper)
        return frame


__all__ = ["section_heading", "SectionAssembler"]
