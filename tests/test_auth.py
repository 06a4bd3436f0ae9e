import jwt
import pytest
from court_booking.core.config import settings
from court_booking.core.exceptions import AuthError, InternalError, InvalidTokenError
from court_booking.core.security import create_access_token, extract_token


async def _signup(client, **overrides):
    data = {"name": "Carol", "email": "carol@example.com", "password": "s3cret-pass"}
    data.update(overrides)
    return await client.post("/signup", json=data)


@pytest.mark.asyncio
async def test_signup(client):
    response = await _signup(client)
    assert response.status_code == 201
    assert response.json() == {"message": "User registered successfully"}


@pytest.mark.asyncio
@pytest.mark.parametrize("missing", ["name", "email", "password"])
async def test_signup_missing_field(client, missing):
    response = await _signup(client, **{missing: ""})
    assert response.status_code == 400
    assert response.json()["detail"] == "All fields are required"


@pytest.mark.asyncio
async def test_signup_duplicate_email(client):
    assert (await _signup(client)).status_code == 201

    response = await _signup(client, name="Other Carol")
    assert response.status_code == 400
    assert response.json()["detail"] == "Email already registered."


@pytest.mark.asyncio
async def test_login_issues_signed_token(client):
    await _signup(client)

    response = await client.post(
        "/login", json={"email": "carol@example.com", "password": "s3cret-pass"}
    )
    assert response.status_code == 200
    body = response.json()
    assert body["auth"] is True

    claims = jwt.decode(body["token"], settings.SECRET_KEY, algorithms=["HS256"])
    assert claims["name"] == "Carol"
    assert claims["email"] == "carol@example.com"
    assert claims["role"] == "customer"
    assert claims["id"]
    assert claims["exp"] - claims["iat"] == 86400


@pytest.mark.asyncio
async def test_login_wrong_password(client):
    await _signup(client)

    response = await client.post(
        "/login", json={"email": "carol@example.com", "password": "wrong"}
    )
    assert response.status_code == 401
    assert response.json() == {"auth": False, "token": None}


@pytest.mark.asyncio
async def test_login_unknown_email(client):
    response = await client.post(
        "/login", json={"email": "nobody@example.com", "password": "whatever"}
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Email or password incorrect"


@pytest.mark.asyncio
async def test_login_external_account_without_password(client):
    # Seeded users have no password hash
    response = await client.post(
        "/login", json={"email": "alice@example.com", "password": "anything"}
    )
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_profile_round_trip(client):
    await _signup(client)
    token = (
        await client.post("/login", json={"email": "carol@example.com", "password": "s3cret-pass"})
    ).json()["token"]

    expected = {"name": "Carol", "email": "carol@example.com", "role": "customer"}

    raw = await client.get("/profile", headers={"Authorization": token})
    assert raw.status_code == 200
    assert raw.json() == expected

    bearer = await client.get("/profile", headers={"Authorization": f"Bearer {token}"})
    assert bearer.status_code == 200
    assert bearer.json() == expected


@pytest.mark.asyncio
async def test_profile_without_token(client):
    response = await client.get("/profile")
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_profile_with_garbage_token(client):
    response = await client.get("/profile", headers={"Authorization": "Bearer not.a.token"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid Token"


@pytest.mark.asyncio
async def test_profile_with_expired_token(client):
    token = create_access_token(
        {"id": "1", "name": "Alice", "email": "alice@example.com", "role": "customer"},
        expires_in=-60,
    )
    response = await client.get("/profile", headers={"Authorization": token})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_profile_with_token_signed_by_other_key(client):
    token = jwt.encode(
        {"id": "1", "name": "Mallory", "email": "m@example.com", "role": "admin", "exp": 4102444800},
        "some-other-secret-0123456789abcdef0123456789",
        algorithm="HS256",
    )
    response = await client.get("/profile", headers={"Authorization": token})
    assert response.status_code == 400


def test_extract_token():
    assert extract_token("abc.def.ghi") == "abc.def.ghi"
    assert extract_token("Bearer abc.def.ghi") == "abc.def.ghi"
    assert extract_token("bearer  abc.def.ghi ") == "abc.def.ghi"
    with pytest.raises(AuthError):
        extract_token(None)
    with pytest.raises(AuthError):
        extract_token("   ")


def test_invalid_token_error_is_an_auth_error_with_400():
    assert issubclass(InvalidTokenError, AuthError)
    assert InvalidTokenError().status_code == 400
    assert AuthError().status_code == 401
    assert InternalError().status_code == 500
    assert InternalError().message == "Internal server error"


@pytest.mark.asyncio
async def test_sync_user_creates_then_returns_existing(client):
    payload = {"id": "firebase-uid-123", "name": "Dana", "email": "dana@example.com"}

    created = await client.post("/users", json=payload)
    assert created.status_code == 201
    assert created.json() == {
        "message": "User added",
        "user": {"id": "firebase-uid-123", "name": "Dana", "email": "dana@example.com", "role": "customer"},
    }

    existing = await client.post("/users", json=payload)
    assert existing.status_code == 200
    assert existing.json()["message"] == "User already exists"
    assert existing.json()["user"]["id"] == "firebase-uid-123"
    assert "password" not in existing.json()["user"]


@pytest.mark.asyncio
async def test_synced_user_can_book(client):
    await client.post("/users", json={"id": "firebase-uid-9", "name": "Eve", "email": "eve@example.com"})

    response = await client.post(
        "/bookings",
        json={
            "user_id": "firebase-uid-9",
            "court_id": 5,
            "booking_date": "2024-07-01",
            "start_time": "18:00:00",
            "end_time": "19:00:00",
        },
    )
    assert response.status_code == 201


@pytest.mark.asyncio
@pytest.mark.parametrize("missing", ["id", "email"])
async def test_sync_user_missing_field(client, missing):
    payload = {"id": "uid-1", "name": "Dana", "email": "dana@example.com"}
    del payload[missing]

    response = await client.post("/users", json=payload)
    assert response.status_code == 400
    assert response.json()["detail"] == "Missing required fields (id, email)"
