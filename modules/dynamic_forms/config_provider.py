"""Locate, parse and validate form documents.

A form kind resolves to a document stem (``audit`` to ``audit-form``,
anything else to ``incident-form``) inside the forms directory.  JSON is the
usual format; YAML documents with the same stem are accepted as well.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from utils.app_settings import DEFAULT_FORM_KIND, DEFAULT_LANGUAGE, forms_dir

from .exceptions import ConfigFetchError, FormConfigError
from .models import FormConfig

logger = logging.getLogger(__name__)

FORM_DOCUMENTS: Dict[str, str] = {
    "incident": "incident-form",
    "audit": "audit-form",
}
SUFFIXES = (".json", ".yaml", ".yml")


class ConfigProvider:
    """Loads :class:`FormConfig` objects from a directory of documents."""

    def __init__(self, directory: Optional[Path] = None) -> None:
        self.directory = Path(directory) if directory is not None else forms_dir()

    def document_for(self, form_kind: str) -> Path:
        """Return the document path for ``form_kind``."""

        stem = FORM_DOCUMENTS.get(form_kind, FORM_DOCUMENTS[DEFAULT_FORM_KIND])
        for suffix in SUFFIXES:
            candidate = self.directory / f"{stem}{suffix}"
            if candidate.exists():
                return candidate
        raise ConfigFetchError(f"No form document {stem!r} in {self.directory}")

    def load(self, form_kind: str = DEFAULT_FORM_KIND, lang: str = DEFAULT_LANGUAGE) -> FormConfig:
        path = self.document_for(form_kind)
        data = self._read(path)
        try:
            config = FormConfig.model_validate(data)
        except ValidationError as exc:
            raise FormConfigError(f"{path.name}: {exc}") from exc
        config = config.localized(lang)
        logger.info("Loaded %s config in %s from %s", form_kind, lang, path)
        return config

    @staticmethod
    def _read(path: Path) -> Any:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigFetchError(f"Failed to read {path}: {exc}") from exc
        try:
            if path.suffix == ".json":
                return json.loads(text)
            return yaml.safe_load(text)
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise ConfigFetchError(f"Failed to parse {path}: {exc}") from exc


__all__ = ["FORM_DOCUMENTS", "ConfigProvider"]
