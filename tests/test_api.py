from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

import scripts.sq1_api as sq1_api
from sq1vis.compiler import CompilerConfig


def _build_client(separator: str = "|") -> TestClient:
    sq1_api.config = CompilerConfig(separator=separator)
    return TestClient(sq1_api.app)


def test_api_state_for_scramble_and_hex() -> None:
    client = _build_client()

    response = client.post("/api/state", json={"input": "/"})
    assert response.status_code == 200
    payload = response.json()
    assert payload["ok"] is True
    assert payload["data"]["state"] == "011233998bba|455677ddcffe"
    assert payload["data"]["mode"] == "scramble"

    hex_resp = client.post("/api/state", json={"input": "011233455677998bbaddcffe", "mode": "hex"})
    assert hex_resp.status_code == 200
    assert hex_resp.json()["data"]["top"] == "011233455677"


def test_api_state_uses_configured_separator() -> None:
    client = _build_client(separator="/")
    response = client.post("/api/state", json={"input": "(3,0)", "mode": "inverse"})
    assert response.status_code == 200
    assert response.json()["data"]["state"] == "677011233455/998bbaddcffe"
    _build_client()


def test_api_rejects_bad_input() -> None:
    client = _build_client()

    unknown = client.post("/api/state", json={"input": "bpj"})
    assert unknown.status_code == 400
    assert "bpj" in unknown.json()["detail"]

    malformed = client.post("/api/state", json={"input": "0112", "mode": "hex"})
    assert malformed.status_code == 400

    invalid_mode = client.post("/api/state", json={"input": "/", "mode": "svg"})
    assert invalid_mode.status_code == 422


def test_api_expand_and_invert() -> None:
    client = _build_client()

    expanded = client.post("/api/expand", json={"scramble": "-23 / bpj"})
    assert expanded.status_code == 200
    assert expanded.json()["data"]["expanded"] == "-2,3/-1,2/-2,-2/3,0/"

    inverted = client.post("/api/invert", json={"scramble": "(3,0)/(0,3)"})
    assert inverted.status_code == 200
    assert inverted.json()["data"]["inverted"] == "0,-3/-3,0"

    too_long = client.post("/api/expand", json={"scramble": "123456"})
    assert too_long.status_code == 400


def test_api_pieces() -> None:
    client = _build_client()

    response = client.get("/api/pieces", params={"state": "011233455677|998bbaddcffe"})
    assert response.status_code == 200
    data = response.json()["data"]
    assert len(data["top"]) == 8
    assert data["bottom"][0] == {"piece": "9", "kind": "corner", "position": 1}

    bad = client.get("/api/pieces", params={"state": "nope"})
    assert bad.status_code == 400


def test_health() -> None:
    client = _build_client()
    assert client.get("/health").json() == {"ok": True}


def test_state_request_only_accepts_known_modes() -> None:
    from pydantic import ValidationError

    assert sq1_api.StateRequest(input="/").mode == "scramble"
    with pytest.raises(ValidationError):
        sq1_api.StateRequest(input="/", mode="svg")
