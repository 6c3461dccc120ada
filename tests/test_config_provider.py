from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from modules.dynamic_forms.config_provider import ConfigProvider
from modules.dynamic_forms.exceptions import ConfigFetchError, DynamicFormError, FormConfigError
from modules.dynamic_forms.models import FieldType
from utils.app_settings import ROOT

INCIDENT = {
    "title": "Incident",
    "description": "Incident form",
    "languages": {"es": {"title": "Incidente"}},
    "sections": [{"label": "Main", "fields": [{"id": "what", "label": "What"}]}],
}


def _write(directory: Path, name: str, data) -> Path:
    path = directory / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_incident_document(tmp_path, caplog):
    _write(tmp_path, "incident-form.json", INCIDENT)
    provider = ConfigProvider(tmp_path)
    with caplog.at_level(logging.INFO):
        config = provider.load("incident", "en")
    assert config.title == "Incident"
    assert config.sections[0].fields[0].id == "what"
    assert "Loaded incident config in en" in caplog.text


def test_language_override_applied(tmp_path):
    _write(tmp_path, "incident-form.json", INCIDENT)
    assert ConfigProvider(tmp_path).load("incident", "es").title == "Incidente"
    assert ConfigProvider(tmp_path).load("incident", "de").title == "Incident"


def test_audit_and_unknown_kinds(tmp_path):
    _write(tmp_path, "incident-form.json", INCIDENT)
    _write(tmp_path, "audit-form.json", {**INCIDENT, "title": "Audit"})
    provider = ConfigProvider(tmp_path)
    assert provider.load("audit").title == "Audit"
    assert provider.load("something-else").title == "Incident"
    assert provider.document_for("something-else").name == "incident-form.json"


def test_yaml_document_accepted(tmp_path):
    (tmp_path / "audit-form.yaml").write_text(
        "title: Audit\nsections:\n  - label: One\n    fields:\n      - id: a\n        type: date\n",
        encoding="utf-8",
    )
    config = ConfigProvider(tmp_path).load("audit")
    assert config.sections[0].fields[0].type is FieldType.DATE


def test_missing_document_raises_fetch_error(tmp_path):
    with pytest.raises(ConfigFetchError):
        ConfigProvider(tmp_path).load("incident")


def test_malformed_json_raises_fetch_error(tmp_path):
    (tmp_path / "incident-form.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigFetchError, match="Failed to parse"):
        ConfigProvider(tmp_path).load()


def test_undecodable_document_raises_fetch_error(tmp_path):
    (tmp_path / "incident-form.json").write_bytes(b'{"title": "\xff\xfe bad"}')
    with pytest.raises(ConfigFetchError, match="Failed to read"):
        ConfigProvider(tmp_path).load()


def test_schema_violation_raises_config_error(tmp_path):
    bad = {"sections": [{"label": "S", "fields": [{"id": "a"}, {"id": "a"}]}]}
    _write(tmp_path, "incident-form.json", bad)
    with pytest.raises(FormConfigError) as excinfo:
        ConfigProvider(tmp_path).load()
    assert isinstance(excinfo.value, DynamicFormError)
    assert "Duplicate field id" in str(excinfo.value)


def test_non_mapping_document_raises_config_error(tmp_path):
    _write(tmp_path, "incident-form.json", ["not", "a", "form"])
    with pytest.raises(FormConfigError):
        ConfigProvider(tmp_path).load()


def test_default_directory_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("DYNAMIC_FORMS_DIR", str(tmp_path))
    assert ConfigProvider().directory == tmp_path


@pytest.mark.parametrize("kind", ["incident", "audit"])
def test_shipped_documents_are_valid(kind):
    provider = ConfigProvider(ROOT / "data" / "forms")
    config = provider.load(kind)
    assert config.sections
    assert list(config.iter_fields())
