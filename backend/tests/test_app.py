from fastapi.testclient import TestClient

from app.main import app


def test_root_and_health(client):
    assert client.get("/").json()["success"] is True
    assert client.get("/health").json() == {"status": "healthy"}


def test_unexpected_errors_are_hidden(client, uploader):
    uploader.fail_with(RuntimeError("disk on fire at /var/secret"))
    safe_client = TestClient(app, raise_server_exceptions=False)

    res = safe_client.post(
        "/api/v1/users/register",
        data={
            "fullname": "Ana",
            "email": "a@x.com",
            "phoneNumber": "1234567890",
            "password": "secret1",
            "role": "seeker",
        },
        files={"file": ("photo.png", b"png", "image/png")},
    )
    assert res.status_code == 500
    assert res.json() == {"message": "Internal server error", "success": False}
    assert "disk on fire" not in res.text


def test_malformed_json_body_uses_envelope(client):
    res = client.post(
        "/api/v1/users/login",
        content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["success"] is False
