from app.services.auth_service import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)
from app.services.store import EntityKind


def test_password_hashing():
    hashed = get_password_hash("s3cret")
    assert hashed != "s3cret"
    assert verify_password("s3cret", hashed)
    assert not verify_password("wrong", hashed)


def test_verify_rejects_malformed_hash():
    assert not verify_password("s3cret", "not-a-bcrypt-hash")


def test_token_roundtrip_and_expiry():
    assert decode_access_token(create_access_token({"sub": "user1"})) == "user1"
    assert decode_access_token(create_access_token({"sub": "user1"}, expires_minutes=-1)) is None
    assert decode_access_token("garbage") is None


def test_login_and_act_with_token(client, store):
    response = client.post("/auth/login", json={"username": "admin", "password": "admin"})
    assert response.status_code == 200
    token = response.json()["access_token"]
    assert response.json()["token_type"] == "bearer"

    purchase = client.post(
        "/themes/purchase",
        json={"id": "theme1"},
        headers={"Authorization": f"Bearer {token}", "X-User-Id": "ignored"},
    )
    assert purchase.status_code == 200
    assert store.get(EntityKind.USER, "user1").purchased_themes == ["theme1"]
    assert store.list(EntityKind.LOG)[-1].username == "admin"


def test_login_with_bad_password(client):
    response = client.post("/auth/login", json={"username": "admin", "password": "nope"})
    assert response.status_code == 401
    assert response.json() == {"message": "Incorrect username or password"}


def test_invalid_token_is_401(client):
    response = client.post("/themes/purchase", json={"id": "theme1"}, headers={"Authorization": "Bearer broken"})
    assert response.status_code == 401
    assert response.json() == {"message": "Could not validate credentials"}
