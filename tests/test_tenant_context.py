import pytest
from flask import Flask, g
from assessment_reports.exceptions.exceptions import MissingTenantError
from assessment_reports.middleware.tenant_context import resolve_tenant_id, tenant_required


@pytest.mark.parametrize("path_value, header_value, expected", [
    ("acme", None, "acme"),
    ("  acme  ", "other", "acme"),
    (None, " globex ", "globex"),
    ("   ", "globex", "globex"),
])
def test_resolve_prefers_path_then_header(path_value, header_value, expected):
    assert resolve_tenant_id(path_value, header_value) == expected


@pytest.mark.parametrize("path_value, header_value", [(None, None), ("", ""), ("  ", "\t")])
def test_resolve_rejects_missing_tenant(path_value, header_value):
    with pytest.raises(MissingTenantError):
        resolve_tenant_id(path_value, header_value)


def test_decorator_passes_tenant_and_sets_request_context():
    app = Flask(__name__)
    calls = []

    @tenant_required
    def view(tenant_id, assessment_id):
        calls.append((tenant_id, assessment_id, g.tenant_id))
        return {"ok": True}, 200

    with app.test_request_context(headers={"x-tenant-id": "from-header"}):
        assert view(tenant_id=" acme ", assessment_id="a1") == ({"ok": True}, 200)
        assert view(assessment_id="a2") == ({"ok": True}, 200)

    assert calls == [("acme", "a1", "acme"), ("from-header", "a2", "from-header")]


def test_decorator_short_circuits_without_tenant():
    app = Flask(__name__)
    calls = []

    @tenant_required
    def view(tenant_id):
        calls.append(tenant_id)

    with app.test_request_context():
        body, status = view(tenant_id="  ")

    assert status == 400
    assert body["error"]["code"] == "missing_tenant"
    assert calls == []
