"""Tests for the variables API client, against a mock transport."""
from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from variantkit.config import RemoteConfig
from variantkit.remote import (
    AccessDeniedError,
    AuthenticationError,
    ColorVariable,
    ExtensionMode,
    FloatVariable,
    InvalidRequestError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    RemoteAPIError,
    RequestTimeoutError,
    ResponseFormatError,
    ServerError,
    VariablePlan,
    VariablesClient,
    build_sync_payload,
    error_from_status_code,
    mode_id,
    variable_id,
)
from variantkit.remote._http import HttpClient
from variantkit.theme import RGBA

EXISTING = {
    "variables": {
        "VariableID:1": {"id": "VariableID:1", "name": "color-old", "variableCollectionId": "C:1"},
        "VariableID:2": {"id": "VariableID:2", "name": "text-old", "variableCollectionId": "C:1"},
    },
    "variableCollections": {
        "C:1": {"id": "C:1", "name": "kumo-colors", "modes": [{"modeId": "1:0", "name": "Light"}]},
    },
}

PLAN = VariablePlan(
    colors=[
        ColorVariable(name="color-kumo-brand", light=RGBA(0, 0, 1), dark=RGBA(0, 0, 0.5)),
        ColorVariable(name="color-kumo-brand/50", light=RGBA(0, 0, 1, 0.5), dark=RGBA(0, 0, 0.5, 0.5)),
    ],
    extensions=[ExtensionMode(name="FedRAMP", overrides={"color-kumo-brand": RGBA(1, 0, 0)})],
    typography=[FloatVariable(name="text-sm", value=13)],
)


class FakeFigma:
    """Records requests and answers like the variables endpoints."""

    def __init__(self, meta: dict[str, Any] | None = None, post_status: int = 200) -> None:
        self.meta = meta if meta is not None else {"variables": {}, "variableCollections": {}}
        self.post_status = post_status
        self.requests: list[httpx.Request] = []

    def posted(self) -> list[dict[str, Any]]:
        return [json.loads(r.content) for r in self.requests if r.method == "POST"]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.method == "GET":
            return httpx.Response(200, json={"status": 200, "error": False, "meta": self.meta})
        if self.post_status >= 300:
            return httpx.Response(self.post_status, json={"status": self.post_status, "error": True, "message": "nope"})
        return httpx.Response(200, json={"status": 200, "error": False, "meta": {"tempIdToRealId": {"var_a": "1:2"}}})


def _client(handler) -> VariablesClient:
    config = RemoteConfig(token="secret", file_key="FILE")
    return VariablesClient(config, transport=httpx.MockTransport(handler))


# ---------------------------------------------------------------------------
# Error mapping
# ---------------------------------------------------------------------------


class TestErrorFromStatusCode:
    @pytest.mark.parametrize(
        "status, error_type",
        [
            (400, InvalidRequestError),
            (401, AuthenticationError),
            (403, AccessDeniedError),
            (404, NotFoundError),
            (429, RateLimitError),
            (503, ServerError),
            (418, RemoteAPIError),
        ],
    )
    def test_mapping(self, status, error_type):
        error = error_from_status_code(status, "message")
        assert type(error) is error_type
        assert error.status_code == status
        assert str(error) == "message"


# ---------------------------------------------------------------------------
# HTTP wrapper
# ---------------------------------------------------------------------------


class TestHttpClient:
    def _http(self, handler) -> HttpClient:
        return HttpClient("https://api.test.com/v1", "secret", transport=httpx.MockTransport(handler))

    def test_token_header_sent(self):
        seen = {}

        def handler(request):
            seen.update(request.headers)
            return httpx.Response(200, json={})

        self._http(handler).get("/files/x")
        assert seen["x-figma-token"] == "secret"

    def test_message_field_preferred(self):
        def handler(request):
            return httpx.Response(403, json={"status": 403, "error": True, "message": "Invalid scope"})

        with pytest.raises(AccessDeniedError) as info:
            self._http(handler).get("/files/x")
        assert info.value.message == "Invalid scope"
        assert info.value.raw["status"] == 403

    def test_error_string_field(self):
        def handler(request):
            return httpx.Response(404, json={"status": 404, "error": "Not found"})

        with pytest.raises(NotFoundError, match="Not found"):
            self._http(handler).get("/files/x")

    def test_non_json_error_uses_text(self):
        def handler(request):
            return httpx.Response(502, text="Bad Gateway")

        with pytest.raises(ServerError, match="Bad Gateway"):
            self._http(handler).get("/files/x")

    def test_non_json_success(self):
        def handler(request):
            return httpx.Response(200, text="<html>")

        with pytest.raises(ResponseFormatError, match="Failed to parse response"):
            self._http(handler).get("/files/x")

    def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(RequestTimeoutError):
            self._http(handler).get("/files/x")

    def test_connection_failure(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(NetworkError) as info:
            self._http(handler).post("/files/x", json={})
        assert isinstance(info.value.cause, httpx.ConnectError)


# ---------------------------------------------------------------------------
# Reading
# ---------------------------------------------------------------------------


class TestGetLocalVariables:
    def test_parses_meta(self):
        fake = FakeFigma(EXISTING)
        local = _client(fake).get_local_variables()
        assert set(local.variables) == {"VariableID:1", "VariableID:2"}
        assert local.collections["C:1"].name == "kumo-colors"
        assert local.collections["C:1"].modes == ["Light"]
        assert [v.name for v in local.in_collection("C:1")] == ["color-old", "text-old"]

    def test_request_path(self):
        fake = FakeFigma()
        _client(fake).get_local_variables()
        assert fake.requests[0].url.path == "/v1/files/FILE/variables/local"

    def test_missing_meta_is_empty(self):
        def handler(request):
            return httpx.Response(200, json={"status": 200})

        assert _client(handler).get_local_variables().is_empty()


# ---------------------------------------------------------------------------
# Purge and sync
# ---------------------------------------------------------------------------


class TestPurge:
    def test_deletes_variables_then_collections(self):
        fake = FakeFigma(EXISTING)
        assert _client(fake).purge_all() == (2, 1)
        (payload,) = fake.posted()
        assert payload == {
            "variables": [
                {"action": "DELETE", "id": "VariableID:1"},
                {"action": "DELETE", "id": "VariableID:2"},
            ],
            "variableCollections": [{"action": "DELETE", "id": "C:1"}],
        }

    def test_empty_file_posts_nothing(self):
        fake = FakeFigma()
        assert _client(fake).purge_all() == (0, 0)
        assert fake.posted() == []


class TestSync:
    def test_purges_before_creating(self):
        fake = FakeFigma(EXISTING)
        result = _client(fake).sync(PLAN)
        methods = [r.method for r in fake.requests]
        assert methods == ["GET", "POST", "POST"]
        purge, create = fake.posted()
        assert all(v["action"] == "DELETE" for v in purge["variables"])
        assert all(v["action"] == "CREATE" for v in create["variables"])
        assert result.purged_variables == 2
        assert result.created_variables == 3
        assert result.temp_id_to_real_id == {"var_a": "1:2"}

    def test_failure_surfaces_status(self):
        fake = FakeFigma(EXISTING, post_status=403)
        with pytest.raises(AccessDeniedError) as info:
            _client(fake).sync(PLAN)
        assert info.value.status_code == 403
        assert len(fake.posted()) == 1

    def test_empty_plan_rejected(self):
        fake = FakeFigma(EXISTING)
        with pytest.raises(ValueError, match="No tokens"):
            _client(fake).sync(VariablePlan(colors=[], extensions=[], typography=[]))
        assert fake.requests == []


class TestSyncPayload:
    def test_ids(self):
        assert variable_id("color-kumo-brand") == "var_color_kumo_brand"
        assert mode_id("Light") == "mode_light"
        assert mode_id("Big Screen") == "mode_big_screen"

    def test_color_collection_and_modes(self):
        payload = build_sync_payload(PLAN)
        base = payload["variableCollections"][0]
        assert base == {"action": "CREATE", "id": "kumo_collection", "name": "kumo-colors", "initialModeId": "mode_light"}
        assert payload["variableModes"][:2] == [
            {"action": "UPDATE", "id": "mode_light", "name": "Light", "variableCollectionId": "kumo_collection"},
            {"action": "CREATE", "id": "mode_dark", "name": "Dark", "variableCollectionId": "kumo_collection"},
        ]

    def test_color_values(self):
        payload = build_sync_payload(PLAN)
        values = [v for v in payload["variableModeValues"] if v["variableId"] == "var_color_kumo_brand/50"]
        assert values == [
            {"variableId": "var_color_kumo_brand/50", "modeId": "mode_light", "value": {"r": 0, "g": 0, "b": 1, "a": 0.5}},
            {"variableId": "var_color_kumo_brand/50", "modeId": "mode_dark", "value": {"r": 0, "g": 0, "b": 0.5, "a": 0.5}},
        ]

    def test_extension_collection(self):
        payload = build_sync_payload(PLAN)
        ext = payload["variableCollections"][1]
        assert ext == {
            "action": "CREATE",
            "id": "ext_fedramp",
            "name": "FedRAMP",
            "parentVariableCollectionId": "kumo_collection",
            "initialModeIdToInitialParentModeIdMap": {
                "ext_fedramp_light": "mode_light",
                "ext_fedramp_dark": "mode_dark",
            },
        }
        overrides = [v for v in payload["variableModeValues"] if v["modeId"].startswith("ext_fedramp")]
        assert [v["modeId"] for v in overrides] == ["ext_fedramp_light", "ext_fedramp_dark"]
        assert all(v["value"] == {"r": 1, "g": 0, "b": 0, "a": 1.0} for v in overrides)

    def test_typography_collection(self):
        payload = build_sync_payload(PLAN)
        assert payload["variableCollections"][-1]["id"] == "typography_collection"
        assert payload["variableModes"][-1] == {
            "action": "UPDATE",
            "id": "mode_desktop",
            "name": "Desktop",
            "variableCollectionId": "typography_collection",
        }
        float_var = payload["variables"][-1]
        assert float_var["id"] == "var_typography_text_sm"
        assert float_var["resolvedType"] == "FLOAT"
        assert payload["variableModeValues"][-1] == {
            "variableId": "var_typography_text_sm",
            "modeId": "mode_desktop",
            "value": 13,
        }

    def test_no_typography_collection_when_empty(self):
        plan = VariablePlan(colors=PLAN.colors, extensions=[], typography=[])
        payload = build_sync_payload(plan)
        assert [c["id"] for c in payload["variableCollections"]] == ["kumo_collection"]
