from __future__ import annotations

import pytest
from pydantic import ValidationError

from modules.dynamic_forms.models import (
    DEFAULT_SUBMIT_LABEL,
    FieldType,
    FormConfig,
)


def test_defaults_and_camel_case_keys(make_config):
    config = make_config(
        [
            {
                "label": "Details",
                "helpText": "Section help",
                "fields": [
                    {
                        "id": "kind",
                        "label": "Kind",
                        "type": "select",
                        "options": ["a", "b"],
                        "helpText": "Pick one",
                        "visibleIf": None,
                    },
                    {
                        "id": "notes",
                        "label": "Notes",
                        "visibleIf": {"field": "kind", "equals": "b"},
                    },
                ],
            }
        ],
        layout={"showSectionNumbers": True},
    )
    section = config.sections[0]
    assert section.order == 0
    assert section.help_text == "Section help"
    kind, notes = section.fields
    assert kind.type is FieldType.SELECT
    assert kind.help_text == "Pick one"
    assert kind.required is False
    assert notes.type is FieldType.TEXT
    assert notes.visible_if.field == "kind"
    assert notes.visible_if.equals == "b"
    assert config.layout.show_section_numbers is True
    assert config.submit_label == DEFAULT_SUBMIT_LABEL


@pytest.mark.parametrize("raw_type", ["checkbox", "Date", "", None, 5])
def test_unknown_type_falls_back_to_text(make_config, raw_type):
    config = make_config([{"label": "S", "fields": [{"id": "f", "type": raw_type}]}])
    assert config.sections[0].fields[0].type is FieldType.TEXT


def test_duplicate_ids_across_sections_rejected(make_config):
    with pytest.raises(ValidationError, match="Duplicate field id 'a'"):
        make_config(
            [
                {"label": "One", "fields": [{"id": "a"}]},
                {"label": "Two", "fields": [{"id": "a"}]},
            ]
        )


def test_visible_if_must_reference_existing_field(make_config):
    with pytest.raises(ValidationError, match="unknown field 'missing'"):
        make_config(
            [{"label": "S", "fields": [{"id": "a", "visibleIf": {"field": "missing", "equals": "x"}}]}]
        )


def test_visible_if_may_reference_other_section(make_config):
    config = make_config(
        [
            {"label": "One", "fields": [{"id": "c", "visibleIf": {"field": "b", "equals": "y"}}]},
            {"label": "Two", "fields": [{"id": "b", "type": "select", "options": ["x", "y"]}]},
        ]
    )
    assert config.field_by_id("c").visible_if.field == "b"


def test_visible_if_equals_is_not_coerced(make_config):
    with pytest.raises(ValidationError):
        make_config(
            [{"label": "S", "fields": [{"id": "a"}, {"id": "b", "visibleIf": {"field": "a", "equals": 1}}]}]
        )


def test_sorted_sections_is_stable(make_config):
    config = make_config(
        [
            {"label": "B", "order": 1},
            {"label": "A", "order": 0},
            {"label": "C", "order": 1},
            {"label": "D"},
        ]
    )
    assert [s.label for s in config.sorted_sections()] == ["A", "D", "B", "C"]
    assert [s.label for s in config.sections] == ["B", "A", "C", "D"]


def test_null_order_sorts_as_zero(make_config):
    config = make_config([{"label": "B", "order": 1}, {"label": "A", "order": None}])
    assert config.sections[1].order == 0
    assert [s.label for s in config.sorted_sections()] == ["A", "B"]


def test_localized_title_override(make_config):
    config = make_config(
        [],
        title="Incident Report",
        languages={"es": {"title": "Informe"}, "de": {"subtitle": "x"}},
    )
    assert config.localized("es").title == "Informe"
    assert config.localized("de").title == "Incident Report"
    assert config.localized("fr").title == "Incident Report"
    assert config.title == "Incident Report"


def test_config_is_frozen(make_config):
    config = make_config([])
    with pytest.raises(ValidationError):
        config.title = "changed"


def test_iter_fields_preserves_configuration_order():
    config = FormConfig.model_validate(
        {
            "sections": [
                {"label": "Second", "order": 2, "fields": [{"id": "z"}, {"id": "y"}]},
                {"label": "First", "order": 1, "fields": [{"id": "x"}]},
            ]
        }
    )
    assert [f.id for f in config.iter_fields()] == ["z", "y", "x"]
