"""Error Hierarchy — response envelopes and HTTP status mapping."""

from vyral.core.errors import (
    DatabaseError, ErrorCategory, InvalidActionError, ModuleCatalogError,
    ResourceNotFoundError, VyralError,
)


def test_invalid_action_envelope():
    err = InvalidActionError("zone", "add_post", "unknown tag 'Party'")
    body = err.to_response()["error"]
    assert err.http_status == 400
    assert body["code"] == "INVALID_ACTION"
    assert body["category"] == ErrorCategory.VALIDATION.value
    assert "zone/add_post" in body["message"]


def test_not_found_carries_resource_id():
    err = ResourceNotFoundError("Note", "9")
    assert err.http_status == 404
    assert err.context.resource_id == "9"
    assert err.to_response()["error"]["message"] == "Note '9' not found"


def test_infrastructure_errors_are_503():
    assert DatabaseError("boom", "commit").http_status == 503
    catalog = ModuleCatalogError("slow", "rate_limit", retry_after_ms=2000)
    assert catalog.http_status == 503
    assert catalog.to_response()["error"]["context"]["retry_after_ms"] == 2000


def test_all_errors_share_base():
    for err in (
        InvalidActionError("a", "b", "c"), ResourceNotFoundError("x", "y"),
        DatabaseError("m", "op"), ModuleCatalogError("m", "r"),
    ):
        assert isinstance(err, VyralError)
