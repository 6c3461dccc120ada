from __future__ import annotations

import os
from typing import Any, Dict, List

import pytest

# Qt widgets require a platform plugin.  Offscreen avoids libGL dependencies
# inside the test container.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from modules.dynamic_forms.models import FormConfig  # noqa: E402


@pytest.fixture(scope="session")
def qt_app():
    try:
        from PySide6 import QtWidgets
    except ImportError as exc:  # pragma: no cover - environment-specific
        pytest.skip(f"PySide6 unavailable: {exc}")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def make_config():
    """Return a builder for :class:`FormConfig` from plain section dicts."""

    def _build(sections: List[Dict[str, Any]], **extra: Any) -> FormConfig:
        data: Dict[str, Any] = {
            "title": "Test Form",
            "description": "A form used in tests",
            "sections": sections,
        }
        data.update(extra)
        return FormConfig.model_validate(data)

    return _build
