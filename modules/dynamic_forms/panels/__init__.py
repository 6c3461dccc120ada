from .form_panel import DynamicFormPanel
from .section_assembler import SectionAssembler, section_heading

__all__ = ["DynamicFormPanel", "SectionAssembler", "section_heading"]
