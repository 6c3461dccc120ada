"""Theme palettes and stylesheets shared by the form panels.

The active theme lives in `THEME_NAME`; `set_theme` switches it and notifies
subscribers through `style_bus`. `form_stylesheet` renders the QSS for
dynamic form panels from the active palette.
"""

from __future__ import annotations

from typing import Callable, Dict, Literal

from PySide6.QtCore import QObject, Signal
from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QApplication, QWidget

THEME_NAME: Literal["light", "dark"] = "light"


class StyleBus(QObject):
    """Signal bus for style/theme changes."""

    THEME_CHANGED = Signal(str)


style_bus = StyleBus()


_LIGHT_PALETTE: Dict[str, QColor] = {
    "bg": QColor("#f5f5f5"),
    "fg": QColor("#000000"),
    "muted": QColor("#666666"),
    "accent": QColor("#003a67"),
    "success": QColor("#388e3c"),
    "warning": QColor("#ffa000"),
    "error": QColor("#d32f2f"),
}

_DARK_PALETTE: Dict[str, QColor] = {
    "bg": QColor("#2c2c2c"),
    "fg": QColor("#B4B4B4"),
    "muted": QColor("#888888"),
    "accent": QColor("#90caf9"),
    "success": QColor("#4caf50"),
    "warning": QColor("#ffb300"),
    "error": QColor("#ef5350"),
}


def get_palette() -> Dict[str, QColor]:
    """Return the active palette colors."""
    return _LIGHT_PALETTE if THEME_NAME == "light" else _DARK_PALETTE


def apply_app_palette(app: QApplication) -> None:
    """Apply the current palette to the application."""
    pal = QPalette()
    p = get_palette()
    pal.setColor(QPalette.Window, p["bg"])
    pal.setColor(QPalette.Base, p["bg"])
    pal.setColor(QPalette.AlternateBase, p["muted"])
    pal.setColor(QPalette.WindowText, p["fg"])
    pal.setColor(QPalette.Text, p["fg"])
    pal.setColor(QPalette.ButtonText, p["fg"])
    pal.setColor(QPalette.Button, p["bg"])
    pal.setColor(QPalette.Highlight, p["accent"])
    pal.setColor(QPalette.BrightText, p["fg"])
    app.setPalette(pal)


def set_theme(name: str) -> None:
    """Set the current theme and emit change signal."""
    global THEME_NAME
    name = name.lower()
    if name not in {"light", "dark"}:
        return
    if name == THEME_NAME:
        return
    THEME_NAME = name
    style_bus.THEME_CHANGED.emit(name)


def subscribe_theme(widget: QWidget, callback: Callable[[str], None]) -> None:
    """Subscribe to theme changes and auto-disconnect on widget destruction."""
    style_bus.THEME_CHANGED.connect(callback)
    widget.destroyed.connect(lambda: style_bus.THEME_CHANGED.disconnect(callback))
    callback(THEME_NAME)


def form_stylesheet() -> str:
    """QSS for dynamic form panels using the active palette."""
    p = {key: color.name() for key, color in get_palette().items()}
    return f"""
        QLabel#formTitle {{ font-size: 18px; font-weight: bold; color: {p['accent']}; }}
        QLabel#sectionTitle {{ font-size: 15px; font-weight: bold; color: {p['accent']}; }}
        QLabel#sectionHelp, QLabel#fieldHelp {{ color: {p['muted']}; font-size: 11px; }}
        QLabel#requiredMarker {{ color: {p['error']}; font-weight: bold; }}
        QLabel#validationSummary {{ color: {p['error']}; border: 1px solid {p['error']}; padding: 6px; }}
        QLabel#loadError {{ color: {p['error']}; font-weight: bold; }}
    """


__all__ = [
    "THEME_NAME",
    "StyleBus",
    "style_bus",
    "get_palette",
    "apply_app_palette",
    "set_theme",
    "subscribe_theme",
    "form_stylesheet",
]
