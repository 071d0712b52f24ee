import pytest

JSON_UTF8 = "application/json; charset=utf-8"


def test_get_rate_after_put_returns_inverse(client, auth_headers):
    resp = client.put("/rate/usd/eur/0.9", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.headers["content-type"] == JSON_UTF8
    body = resp.json()
    assert body["from"] == "USD" and body["to"] == "EUR"
    assert body["rate"] == 0.9
    assert body["inverse_rate"] == pytest.approx(1 / 0.9)

    resp = client.get("/rate/eur/usd")
    assert resp.status_code == 200
    assert resp.json()["rate"] == pytest.approx(1.1111111)


def test_conversion_uses_registered_rate(client, auth_headers):
    client.put("/rate/USD/eur/0.9", headers=auth_headers)
    resp = client.get("/conversion/usd/EUR/100")
    assert resp.status_code == 200
    assert resp.headers["content-type"] == JSON_UTF8
    body = resp.json()
    assert body["amount"] == 100
    assert body["converted"] == pytest.approx(90.0)


def test_conversion_without_rate_is_not_found(client):
    resp = client.get("/conversion/usd/eur/100")
    assert resp.status_code == 404
    assert resp.json() == {"message": "NOT FOUND"}
    assert resp.headers["content-type"] == JSON_UTF8


def test_put_without_token_is_unauthorized(client, store):
    resp = client.put("/rate/usd/eur/0.9")
    assert resp.status_code == 401
    assert resp.json() == {"message": "UNAUTHORIZED"}
    assert len(store) == 0

    resp = client.put("/rate/usd/eur/0.9", headers={"Authorization": "Bearer wrong"})
    assert resp.status_code == 401
    assert len(store) == 0


def test_delete_removes_both_directions(client, auth_headers):
    client.put("/rate/usd/eur/0.9", headers=auth_headers)
    resp = client.delete("/rate/usd/eur", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json() == {"from": "USD", "to": "EUR", "status": "deleted"}
    assert client.get("/rate/eur/usd").json() == {"message": "NOT FOUND"}
    assert client.get("/rate/usd/eur").status_code == 404


def test_delete_absent_pair_is_idempotent(client, auth_headers):
    assert client.delete("/rate/usd/eur", headers=auth_headers).status_code == 200
    assert client.delete("/rate/usd/eur", headers=auth_headers).status_code == 200


def test_delete_requires_token(client, auth_headers, store):
    client.put("/rate/usd/eur/0.9", headers=auth_headers)
    resp = client.delete("/rate/usd/eur")
    assert resp.status_code == 401
    assert store.get_rate("usd", "eur") == 0.9


def test_unknown_method_is_not_found(client):
    resp = client.post("/rate/usd/eur")
    assert resp.status_code == 404
    assert resp.json() == {"message": "NOT FOUND"}


@pytest.mark.parametrize(
    "path",
    [
        "/rate/usd/eu",
        "/rate/us1/eur",
        "/rate/usd/eur/",
        "/conversion/usd/eur/-5",
        "/conversion/usd/eur/1.",
        "/conversion/usd/eur/1e5",
        "/conversion/usd/eur",
        "/",
    ],
)
def test_malformed_paths_are_not_found(client, path):
    resp = client.get(path)
    assert resp.status_code == 404
    assert resp.json() == {"message": "NOT FOUND"}


@pytest.mark.parametrize("path", ["/rate/usd/eur/0", "/rate/usd/usd/2", "/rate/usd/eur/" + "9" * 400])
def test_rejected_rate_values_leave_store_untouched(client, auth_headers, store, path):
    resp = client.put(path, headers=auth_headers)
    assert resp.status_code == 404
    assert len(store) == 0


def test_decimal_value_forms(client, auth_headers):
    assert client.put("/rate/usd/eur/.5", headers=auth_headers).json()["rate"] == 0.5
    assert client.get("/conversion/eur/usd/3").json()["converted"] == pytest.approx(6.0)


def test_request_id_header_echoed(client):
    resp = client.get("/rate/usd/eur", headers={"X-Request-ID": "abc"})
    assert resp.headers["x-request-id"] == "abc"


def test_no_token_configured_refuses_writes(settings):
    from fastapi.testclient import TestClient
    from app.main import create_app

    settings.api_token = "   "
    settings.init_post_load()
    assert settings.api_token is None
    with TestClient(create_app(settings_override=settings)) as c:
        resp = c.put("/rate/usd/eur/0.9", headers={"Authorization": "Bearer "})
        assert resp.status_code == 401


SUBNORMAL_RATE = "0." + "0" * 309 + "1"  # 1e-310, inverse overflows
HUGE_AMOUNT = "1" + "0" * 200  # 1e200


def test_rate_without_finite_inverse_is_not_found(client, auth_headers, store):
    resp = client.put(f"/rate/usd/eur/{SUBNORMAL_RATE}", headers=auth_headers)
    assert resp.status_code == 404
    assert resp.json() == {"message": "NOT FOUND"}
    assert len(store) == 0
    assert client.get("/rate/eur/usd").status_code == 404


def test_conversion_overflow_is_not_found(client, auth_headers):
    resp = client.put(f"/rate/usd/eur/{HUGE_AMOUNT}", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["inverse_rate"] == pytest.approx(1e-200)

    resp = client.get(f"/conversion/usd/eur/{HUGE_AMOUNT}")
    assert resp.status_code == 404
    assert resp.json() == {"message": "NOT FOUND"}
    assert client.get("/conversion/usd/eur/2").json()["converted"] == pytest.approx(2e200)


@pytest.mark.parametrize("code", ["u\u017fd", "\u212arw", "\u00e9ur"])
def test_non_ascii_letters_are_not_currency_codes(client, auth_headers, store, code):
    resp = client.put(f"/rate/{code}/eur/2", headers=auth_headers)
    assert resp.status_code == 404
    assert len(store) == 0
    assert client.get(f"/rate/{code}/eur").status_code == 404
