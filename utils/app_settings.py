"""Simple application settings switches used by various modules.

Provides a `DEV_MODE` flag that is True when either the environment variable
`SARAPP_DEV=1` is set or a config INI in the data directory contains a
matching key, the launch defaults for dynamic forms, and the directory the
form documents are read from.
"""

from __future__ import annotations

import os
import configparser
from pathlib import Path
from typing import Optional

ROOT = Path(__file__).resolve().parents[1]

DEFAULT_FORM_KIND = "incident"
DEFAULT_LANGUAGE = "en"
DEFAULT_ROLE = "user"


def _data_dir() -> Path:
    return Path(os.environ.get("FORMS_DATA_DIR", "data"))


def _read_ini(section: str, key: str) -> Optional[str]:
    """Read ``key`` from ``section`` of `<data>/app.ini` if present."""
    ini_path = _data_dir() / "app.ini"
    if not ini_path.exists():
        return None
    try:
        cp = configparser.ConfigParser()
        cp.read(ini_path)
        return cp.get(section, key, fallback=None)
    except configparser.Error:
        return None


def _read_ini_flag() -> bool:
    """Read `DEV_MODE` from `data/app.ini` if present.

    The INI may contain a section `[app]` with `dev = true/false/1/0`.
    """
    raw = (_read_ini("app", "dev") or "0").strip().lower()
    return raw in {"1", "true", "yes", "on"}


def forms_dir() -> Path:
    """Directory holding the form documents.

    `DYNAMIC_FORMS_DIR` wins over `[forms] dir` in the INI; relative paths
    resolve against the repository root.
    """
    raw = os.environ.get("DYNAMIC_FORMS_DIR") or _read_ini("forms", "dir")
    if not raw:
        return ROOT / "data" / "forms"
    p = Path(raw.strip())
    if not p.is_absolute():
        p = ROOT / p
    return p


DEV_MODE: bool = (
    str(os.environ.get("SARAPP_DEV", "0")).strip() in {"1", "true", "True"}
    or _read_ini_flag()
)


__all__ = [
    "DEV_MODE",
    "DEFAULT_FORM_KIND",
    "DEFAULT_LANGUAGE",
    "DEFAULT_ROLE",
    "forms_dir",
]
