from datetime import timedelta

import pytest

from app.core.time import now_utc
from app.infrastructure.email import email_client
from app.repositories import auth_repo


@pytest.fixture
def outbox(monkeypatch):
    """Captura los correos de código en lugar de usar SMTP."""
    sent = []

    def _fake_send(to_email, code, expires_in_minutes):
        sent.append({"to": to_email, "code": code, "minutes": expires_in_minutes})

    monkeypatch.setattr(email_client, "send_login_code_email", _fake_send)
    return sent


def _request_code(client, email):
    r = client.post("/api/auth/otp/request", json={"email": email})
    assert r.status_code == 200
    return r.json()


def _wrong_code(code):
    return "1" * 6 if code != "1" * 6 else "2" * 6


def test_otp_login_flow_for_new_user(client, outbox):
    body = _request_code(client, "New.Student@University.edu")
    assert body["expires_in_minutes"] == 10
    assert "email_notice" not in body or body["email_notice"] is None
    assert outbox[0]["to"] == "new.student@university.edu"
    code = outbox[0]["code"]
    assert len(code) == 6 and code[0] != "0"

    user = auth_repo.find_user_by_email("new.student@university.edu")
    assert user is not None and not user.is_active

    r = client.post("/api/auth/otp/verify", json={"verification_token": body["verification_token"], "code": code})
    assert r.status_code == 200
    token = r.json()["access_token"]

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["email"] == "new.student@university.edu"
    assert me.json()["email_verified"] is True

    # El código es de un solo uso
    r = client.post("/api/auth/otp/verify", json={"verification_token": body["verification_token"], "code": code})
    assert r.status_code == 401


def test_wrong_code_is_rejected(client, outbox):
    body = _request_code(client, "alex@cognitia.app")
    wrong = _wrong_code(outbox[0]["code"])
    r = client.post("/api/auth/otp/verify", json={"verification_token": body["verification_token"], "code": wrong})
    assert r.status_code == 401
    assert "Código inválido" in r.json()["message"]


def test_expired_code_is_rejected(client, outbox):
    body = _request_code(client, "alex@cognitia.app")
    user = auth_repo.find_user_by_email("alex@cognitia.app")
    auth_repo.set_email_code(user.id, user.email_code_hash, now_utc() - timedelta(minutes=1))
    r = client.post(
        "/api/auth/otp/verify",
        json={"verification_token": body["verification_token"], "code": outbox[0]["code"]},
    )
    assert r.status_code == 401
    assert "expirado" in r.json()["message"]


def test_garbage_verification_token(client):
    r = client.post("/api/auth/otp/verify", json={"verification_token": "not-a-jwt", "code": "123456"})
    assert r.status_code == 401


def test_smtp_not_configured_still_returns_token(client):
    body = _request_code(client, "sam@cognitia.app")
    assert body["verification_token"]
    assert "SMTP" in body["email_notice"]


def test_invalid_email_is_validation_error(client):
    r = client.post("/api/auth/otp/request", json={"email": "not-an-email"})
    assert r.status_code == 422
    assert r.json()["message"] == "Validation error"


def test_otp_request_is_rate_limited(client, outbox):
    codes = [client.post("/api/auth/otp/request", json={"email": "alex@cognitia.app"}).status_code for _ in range(6)]
    assert codes[:5] == [200] * 5
    assert codes[5] == 429
    r = client.post("/api/auth/otp/request", json={"email": "alex@cognitia.app"})
    assert 1 <= int(r.headers["Retry-After"]) <= 60


def test_code_is_invalidated_after_too_many_misses(client, outbox):
    body = _request_code(client, "alex@cognitia.app")
    code = outbox[0]["code"]
    payload = {"verification_token": body["verification_token"], "code": _wrong_code(code)}

    messages = [client.post("/api/auth/otp/verify", json=payload).json()["message"] for _ in range(5)]
    assert all("Código inválido" in m for m in messages[:4])
    assert "Demasiados intentos" in messages[4]

    # el código correcto ya no sirve: hay que pedir uno nuevo
    r = client.post("/api/auth/otp/verify", json={**payload, "code": code})
    assert r.status_code == 401
    assert "No hay código activo" in r.json()["message"]

    body = _request_code(client, "alex@cognitia.app")
    r = client.post("/api/auth/otp/verify", json={"verification_token": body["verification_token"], "code": outbox[1]["code"]})
    assert r.status_code == 200


def test_otp_verify_is_rate_limited(client):
    payload = {"verification_token": "not-a-jwt", "code": "123456"}
    codes = [client.post("/api/auth/otp/verify", json=payload).status_code for _ in range(11)]
    assert codes[:10] == [401] * 10
    assert codes[10] == 429
    r = client.post("/api/auth/otp/verify", json=payload)
    assert 1 <= int(r.headers["Retry-After"]) <= 60


def test_logout_all_invalidates_tokens(client, auth_headers):
    assert client.get("/api/auth/me", headers=auth_headers).status_code == 200
    assert client.post("/api/auth/logout-all", headers=auth_headers).status_code == 200
    r = client.get("/api/auth/me", headers=auth_headers)
    assert r.status_code == 401
    assert r.json()["message"] == "Token expirado"


def test_access_token_rejects_bad_signature(client):
    r = client.get("/api/auth/me", headers={"Authorization": "Bearer abc.def.ghi"})
    assert r.status_code == 401
    assert r.json()["message"] == "Token inválido"
