from modules.dynamic_forms.models import FieldSpec, RenderDecision
from modules.dynamic_forms.permissions import decide, is_suppressed


def _field(**kwargs) -> FieldSpec:
    return FieldSpec.model_validate({"id": "f", "label": "F", **kwargs})


def test_field_without_permissions_is_rendered_for_any_role():
    field = _field()
    for role in ("user", "admin", ""):
        assert decide(field, role) is RenderDecision.RENDER


def test_role_in_list_is_rendered():
    field = _field(permissions={"roles": ["admin", "supervisor"]})
    assert decide(field, "supervisor") is RenderDecision.RENDER


def test_role_not_in_list_is_suppressed():
    field = _field(permissions={"roles": ["admin"]})
    assert decide(field, "user") is RenderDecision.SUPPRESS
    assert is_suppressed(field, "user")


def test_role_match_is_case_sensitive():
    field = _field(permissions={"roles": ["admin"]})
    assert decide(field, "Admin") is RenderDecision.SUPPRESS
    assert decide(field, "admin ") is RenderDecision.SUPPRESS


def test_permissions_without_roles_admit_nobody():
    assert decide(_field(permissions={}), "admin") is RenderDecision.SUPPRESS
    assert decide(_field(permissions={"roles": []}), "admin") is RenderDecision.SUPPRESS
