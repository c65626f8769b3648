import pytest


@pytest.fixture
def ana(register_user):
    res = register_user()
    assert res.status_code == 201, res.text


def test_login_sets_session_cookie(ana, login_user):
    res = login_user()
    assert res.status_code == 200, res.text

    body = res.json()
    assert body["success"] is True
    assert body["message"] == "Welcome back Ana"

    cookie = res.headers["set-cookie"]
    assert cookie.startswith("token=")
    assert "HttpOnly" in cookie
    assert "Max-Age=86400" in cookie
    assert "samesite=strict" in cookie.lower()
    assert res.cookies.get("token")


def test_login_returns_sanitized_user(ana, login_user):
    user = login_user().json()["user"]
    assert set(user) == {"_id", "fullname", "email", "phoneNumber", "role", "profile"}
    assert user["fullname"] == "Ana"
    assert user["email"] == "a@x.com"
    assert user["phoneNumber"] == "1234567890"
    assert user["role"] == "seeker"
    assert user["profile"]["profilePhotoUrl"] == "https://media.test/image/1/photo.png"
    assert user["profile"]["skills"] == []


def test_wrong_password_and_unknown_email_look_the_same(ana, login_user):
    wrong_password = login_user(password="secret2")
    unknown_email = login_user(email="nobody@x.com")

    assert wrong_password.status_code == unknown_email.status_code == 400
    assert wrong_password.json() == unknown_email.json() == {
        "message": "Incorrect email or password.",
        "success": False,
    }
    assert "set-cookie" not in wrong_password.headers
    assert "set-cookie" not in unknown_email.headers


def test_role_mismatch_is_rejected(ana, login_user):
    res = login_user(role="recruiter")
    assert res.status_code == 400
    assert res.json() == {"message": "Account doesn't exist with current role.", "success": False}
    assert "set-cookie" not in res.headers


@pytest.mark.parametrize("field", ["email", "password", "role"])
def test_missing_field_is_rejected(field, client):
    payload = {"email": "a@x.com", "password": "secret1", "role": "seeker"}
    payload.pop(field)
    res = client.post("/api/v1/users/login", json=payload)
    assert res.status_code == 400
    assert res.json() == {"message": "Something is missing", "success": False}


def test_short_password_is_rejected(ana, login_user):
    res = login_user(password="123")
    assert res.status_code == 400
    assert res.json()["message"] == "Password must be at least 6 characters"


def test_malformed_email_is_rejected(login_user):
    res = login_user(email="a-at-x.com")
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid email format"


def test_logout_clears_cookie(ana, login_user, client):
    login_user()
    res = client.post("/api/v1/users/logout")
    assert res.status_code == 200
    assert res.json() == {"message": "Logged out successfully.", "success": True}

    cookie = res.headers["set-cookie"]
    assert cookie.startswith("token=")
    assert "Max-Age=0" in cookie

    res = client.post("/api/v1/users/profile/update", data={"bio": "hi"})
    assert res.status_code == 401


def test_logout_is_idempotent(client):
    first = client.post("/api/v1/users/logout")
    second = client.post("/api/v1/users/logout")
    assert first.status_code == second.status_code == 200
    assert first.json() == second.json()
