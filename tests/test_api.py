import jwt
import pytest
from court_booking.core.config import settings
from court_booking.core.database import get_db
from court_booking.main import app
from sqlalchemy.exc import OperationalError


@pytest.mark.asyncio
async def test_root(client):
    response = await client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Booking API is running"}


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


@pytest.mark.asyncio
async def test_version_reports_database(client):
    response = await client.get("/version")
    assert response.status_code == 200
    assert response.json()["version"].startswith("sqlite")


@pytest.mark.asyncio
async def test_api_docs(client):
    response = await client.get("/docs")
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_cors_preflight_for_frontend_origin(client):
    response = await client.options(
        "/bookings",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"


@pytest.mark.asyncio
async def test_list_courts(client):
    response = await client.get("/courts")
    assert response.status_code == 200
    courts = response.json()["courts"]
    assert [c["court_no"] for c in courts] == [1, 1, 2]
    assert {c["id"] for c in courts} == {5, 6, 7}


@pytest.mark.asyncio
async def test_list_courts_by_sport(client):
    response = await client.get("/courts", params={"sport_type": "badminton"})
    assert response.status_code == 200
    courts = response.json()["courts"]
    assert courts == [
        {"id": 6, "sport_type": "badminton", "court_no": 1},
        {"id": 5, "sport_type": "badminton", "court_no": 2},
    ]


@pytest.mark.asyncio
async def test_list_courts_unknown_sport(client):
    response = await client.get("/courts", params={"sport_type": "curling"})
    assert response.json() == {"courts": []}


@pytest.mark.asyncio
async def test_stream_token(client):
    response = await client.get("/stream-token", params={"userId": "1"})
    assert response.status_code == 200

    token = response.json()["token"]
    claims = jwt.decode(token, settings.STREAM_API_SECRET, algorithms=["HS256"])
    assert claims["user_id"] == "1"


@pytest.mark.asyncio
async def test_stream_token_requires_user_id(client):
    response = await client.get("/stream-token")
    assert response.status_code == 400
    assert response.json()["detail"] == "Missing userId"


class BrokenSession:
    async def execute(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("could not connect to 10.0.0.5:5432"))


@pytest.mark.asyncio
async def test_store_failure_is_opaque_500(client):
    async def broken_db():
        yield BrokenSession()

    app.dependency_overrides[get_db] = broken_db

    for path in ("/courts", "/bookings", "/bookings/currentUser/1"):
        response = await client.get(path)
        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}
        assert "10.0.0.5" not in response.text
