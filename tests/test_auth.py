from jose import jwt

from core.config import Config


def register(client, email="sagar@example.com", password="secret"):
    return client.post(
        "/user/register_user",
        json={"username": "sagar", "email": email, "password": password},
    )


def test_register_user(client):
    res = register(client)
    assert res.status_code == 200
    body = res.json()
    assert body["message"] == "User Added Successfully..."
    assert body["user"]["id"]
    assert body["user"]["email"] == "sagar@example.com"
    assert "password" not in body["user"]


def test_login_issues_token(client):
    user_id = register(client).json()["user"]["id"]

    res = client.post("/user/login", json={"email": "sagar@example.com", "password": "secret"})
    assert res.status_code == 200
    body = res.json()
    assert body["token_type"] == "bearer"
    payload = jwt.decode(body["access_token"], Config.JWT_SECRET_KEY, algorithms=["HS256"])
    assert payload["sub"] == user_id


def test_login_unknown_email(client):
    res = client.post("/user/login", json={"email": "nobody@example.com", "password": "x"})
    assert res.status_code == 404
    assert res.json() == {"message": "User not found"}


def test_login_wrong_password(client):
    register(client)
    res = client.post("/user/login", json={"email": "sagar@example.com", "password": "wrong"})
    assert res.status_code == 401


def test_logout(client):
    res = client.post("/user/logout")
    assert res.status_code == 200
    assert res.json() == {"message": "Logged out successfully"}


def test_register_requires_credentials(client):
    res = client.post("/user/register_user", json={})
    assert res.status_code == 400
    res = client.post("/user/register_user", json={"username": "x", "email": "x@example.com"})
    assert res.status_code == 400


def test_login_without_credentials(client):
    register(client)
    res = client.post("/user/login", json={})
    assert res.status_code == 400
    assert "access_token" not in res.json()
