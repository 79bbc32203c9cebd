from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from api.main import app


@pytest.fixture(scope="module")
def client() -> TestClient:
    with TestClient(app) as c:
        yield c


# ---------------------------------------------------------------------------
# /health
# ---------------------------------------------------------------------------


def test_health(client: TestClient) -> None:
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


# ---------------------------------------------------------------------------
# /check
# ---------------------------------------------------------------------------


def test_check_valid(client: TestClient) -> None:
    r = client.post("/check", json={"jurisdiction": "IT", "code": "00154189997"})
    assert r.status_code == 200
    assert r.json() == {
        "jurisdiction": "IT",
        "code": "00154189997",
        "valid": True,
        "supported": True,
        "reason": None,
    }


def test_check_checksum_failure(client: TestClient) -> None:
    r = client.post("/check", json={"jurisdiction": "IT", "code": "01573850514"})
    data = r.json()
    assert data["valid"] is False
    assert data["reason"] == "CHECKSUM"


def test_check_unknown_jurisdiction(client: TestClient) -> None:
    r = client.post("/check", json={"jurisdiction": "ZZ", "code": "anything"})
    data = r.json()
    assert data["valid"] is True
    assert data["supported"] is False


def test_check_unknown_jurisdiction_strict(client: TestClient) -> None:
    r = client.post(
        "/check", json={"jurisdiction": "ZZ", "code": "anything", "strict": True}
    )
    data = r.json()
    assert data["valid"] is False
    assert data["reason"] == "UNSUPPORTED"


def test_check_code_not_trimmed(client: TestClient) -> None:
    r = client.post("/check", json={"jurisdiction": "AT", "code": " U12345678"})
    assert r.json()["valid"] is False


def test_check_missing_field(client: TestClient) -> None:
    r = client.post("/check", json={"jurisdiction": "AT"})
    assert r.status_code == 422


# ---------------------------------------------------------------------------
# /check/batch
# ---------------------------------------------------------------------------


def test_batch(client: TestClient) -> None:
    r = client.post(
        "/check/batch",
        json={
            "items": [
                {"jurisdiction": "AT", "code": "U12345678"},
                {"jurisdiction": "AT", "code": "A12345678"},
                {"jurisdiction": "XX", "code": "1"},
                {"jurisdiction": "YY", "code": "1", "strict": False},
            ],
            "strict": True,
        },
    )
    assert r.status_code == 200
    results = r.json()["results"]
    assert [res["valid"] for res in results] == [True, False, False, True]
    assert results[1]["reason"] == "FORMAT"


def test_batch_too_large(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    import api.main as api_main

    monkeypatch.setattr(api_main, "_MAX_BATCH_SIZE", 2)
    items = [{"jurisdiction": "DE", "code": "123456789"}] * 3
    r = client.post("/check/batch", json={"items": items})
    assert r.status_code == 422


# ---------------------------------------------------------------------------
# /jurisdictions
# ---------------------------------------------------------------------------


def test_jurisdictions(client: TestClient) -> None:
    r = client.get("/jurisdictions")
    assert r.status_code == 200
    data = {j["code"]: j for j in r.json()}
    assert len(data) == 49
    assert data["LT"]["allowed_lengths"] == [9, 12]
    assert data["RO"]["min_length"] == 2
    assert data["RO"]["max_length"] == 10
    assert data["RO"]["allowed_lengths"] is None


# ---------------------------------------------------------------------------
# API key protection
# ---------------------------------------------------------------------------


def test_api_key_not_required_when_unset(client: TestClient) -> None:
    # Default env has no API_KEY, so requests without header must pass
    r = client.post("/check", json={"jurisdiction": "DE", "code": "123456789"})
    assert r.status_code == 200


def test_api_key_enforced_when_set(monkeypatch: pytest.MonkeyPatch) -> None:
    import api.main as api_main

    monkeypatch.setattr(api_main, "_API_KEY", "secret123")
    with TestClient(api_main.app) as c:
        body = {"jurisdiction": "DE", "code": "123456789"}
        r = c.post("/check", json=body)
        assert r.status_code == 401

        r = c.post("/check", json=body, headers={"X-API-Key": "secret123"})
        assert r.status_code == 200

        # Health stays open
        assert c.get("/health").status_code == 200


def test_batch_too_large_detail(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    import api.main as api_main

    monkeypatch.setattr(api_main, "_MAX_BATCH_SIZE", 1)
    items = [{"jurisdiction": "DE", "code": "123456789"}] * 2
    r = client.post("/check/batch", json={"items": items})
    assert r.status_code == 422
    assert "max 1" in r.json()["detail"]


# ---------------------------------------------------------------------------
# Without lifespan
# ---------------------------------------------------------------------------


def test_check_without_lifespan() -> None:
    # No `with` block: the app's lifespan never runs
    c = TestClient(app)
    r = c.post("/check", json={"jurisdiction": "AT", "code": "U12345678"})
    assert r.status_code == 200
    assert r.json()["valid"] is True

    r = c.post("/check", json={"jurisdiction": "ZZ", "code": "1", "strict": True})
    assert r.json()["valid"] is False
