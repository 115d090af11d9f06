from __future__ import annotations

import logging

from office_service.core.enums import ErrorCode
from office_service.core.exceptions import DomainError


def _create(client, username="jdoe", email="j@x.com", roles=({"id": 1},)):
    payload = {"username": username, "email": email, "name": "John", "lastName": "Doe", "roles": list(roles)}
    return client.post("/api/users", json=payload)


def test_create_then_get_user(client):
    created = _create(client)

    assert created.status_code == 200
    body = created.get_json()
    assert body["header"] is None
    user_id = body["body"]["id"]
    assert isinstance(user_id, int)

    fetched = client.get(f"/api/users/{user_id}")
    assert fetched.status_code == 200
    user = fetched.get_json()["body"]
    assert user["username"] == "jdoe"
    assert user["lastName"] == "Doe"
    assert [r["name"] for r in user["roles"]] == ["ADMIN"]


def test_get_missing_user_returns_404_without_envelope(client):
    resp = client.get("/api/users/999")

    assert resp.status_code == 404
    assert resp.data == b""


def test_duplicate_username_comes_back_in_header(client):
    _create(client)

    resp = _create(client, email="other@x.com")

    assert resp.status_code == 200
    data = resp.get_json()
    assert data["header"]["code"] == ErrorCode.USERNAME_ALREADY_EXISTS.code
    assert data["body"] is None


def test_create_with_unknown_role(client):
    resp = _create(client, roles=({"id": 42},))

    assert resp.get_json()["header"]["code"] == ErrorCode.ROLE_NOT_FOUND.code
    assert client.get("/api/users").get_json()["totalElements"] == 0


def test_create_missing_username_is_required_field(client):
    resp = client.post("/api/users", json={"email": "j@x.com", "roles": [{"id": 1}]})

    assert resp.status_code == 400
    assert resp.get_json()["header"]["code"] == ErrorCode.REQUIRED_FIELD.code


def test_create_blank_username_is_required_field(client):
    resp = _create(client, username="   ")

    assert resp.status_code == 400
    assert resp.get_json()["header"]["code"] == ErrorCode.REQUIRED_FIELD.code


def test_create_too_long_username(client):
    resp = _create(client, username="x" * 51)

    assert resp.status_code == 400
    assert resp.get_json()["header"]["code"] == ErrorCode.EXCEEDS_MAX_LENGTH.code


def test_list_users_paginates(client):
    for n in range(3):
        _create(client, username=f"user{n}", email=f"user{n}@x.com")

    resp = client.get("/api/users?offset=2&limit=2")

    assert resp.status_code == 200
    data = resp.get_json()
    assert data["page"] == 1
    assert data["size"] == 2
    assert data["totalElements"] == 3
    assert [u["username"] for u in data["data"]] == ["user2"]


def test_list_users_rejects_zero_limit(client):
    resp = client.get("/api/users?limit=0")

    assert resp.status_code == 400
    header = resp.get_json()["header"]
    assert header["code"] == ErrorCode.UNKNOWN_ERROR.code
    assert header["message"].startswith("limit:")


def test_update_user(client):
    user_id = _create(client).get_json()["body"]["id"]

    resp = client.put(
        f"/api/users/{user_id}",
        json={"username": "jdoe2", "email": "j2@x.com", "name": "Jon", "lastName": "Doe"},
    )

    assert resp.status_code == 200
    assert resp.get_json()["body"] is True
    user = client.get(f"/api/users/{user_id}").get_json()["body"]
    assert user["username"] == "jdoe2"
    assert [r["id"] for r in user["roles"]] == [1]


def test_update_missing_user_is_not_found(client):
    resp = client.put("/api/users/77", json={"username": "a", "email": "a@x.com"})

    assert resp.status_code == 404
    assert resp.get_json()["header"]["code"] == ErrorCode.USER_NOT_FOUND.code


def test_delete_user(client):
    keep = _create(client, username="keep", email="keep@x.com").get_json()["body"]["id"]
    gone = _create(client, username="gone", email="gone@x.com").get_json()["body"]["id"]

    resp = client.delete(f"/api/users/{gone}")

    assert resp.status_code == 200
    assert resp.get_json()["body"] is True
    assert client.get(f"/api/users/{gone}").status_code == 404
    assert client.get(f"/api/users/{keep}").status_code == 200


def test_delete_missing_user_is_not_found(client):
    resp = client.delete("/api/users/5")

    assert resp.status_code == 404
    assert resp.get_json()["header"]["code"] == ErrorCode.USER_NOT_FOUND.code


def test_existence_endpoints(client):
    _create(client)

    assert client.get("/api/users/username/jdoe/exists").get_json() == {"exists": True}
    assert client.get("/api/users/username/nobody/exists").get_json() == {"exists": False}
    assert client.get("/api/users/email/j@x.com/exists").get_json() == {"exists": True}
    assert client.get("/api/roles/1/exists").get_json() == {"exists": True}
    assert client.get("/api/roles/99/exists").get_json() == {"exists": False}


def test_unexpected_error_is_logged_and_returns_500(app, client, monkeypatch, caplog):
    def broken(user_id):
        raise RuntimeError("connection lost")

    monkeypatch.setattr(app.extensions["container"].user_service, "find", broken)

    with caplog.at_level(logging.ERROR, logger="office_service.common.http"):
        resp = client.get("/api/users/1")

    assert resp.status_code == 500
    data = resp.get_json()
    assert data["header"]["code"] == ErrorCode.UNKNOWN_ERROR.code
    assert data["body"] is None
    assert any(r.exc_info and r.exc_info[0] is RuntimeError for r in caplog.records)


def test_domain_error_returns_400_with_its_code(app, client, monkeypatch):
    def rejected(user_id):
        raise DomainError("Request cannot be processed")

    monkeypatch.setattr(app.extensions["container"].user_service, "delete", rejected)

    resp = client.delete("/api/users/1")

    assert resp.status_code == 400
    assert resp.get_json()["header"] == {"code": ErrorCode.UNKNOWN_ERROR.code, "message": "Request cannot be processed"}
