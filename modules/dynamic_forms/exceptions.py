"""Exceptions raised while loading dynamic form definitions."""

from __future__ import annotations


class DynamicFormError(Exception):
    """Base class for dynamic form failures."""


class ConfigFetchError(DynamicFormError):
    """Raised when a form document cannot be located, read or parsed."""


class FormConfigError(DynamicFormError):
    """Raised when a parsed form document does not satisfy the schema."""


__all__ = ["DynamicFormError", "ConfigFetchError", "FormConfigError"]
