"""
API tests - the dashboards' actions over HTTP, status codes and payload shape.
"""

import pytest
from httpx import AsyncClient

LOGO = {
    "title": "Logo Design",
    "description": "A clean vector logo",
    "category": "Design",
    "price": 50,
    "deliveryDays": 3,
}


async def _register(client: AsyncClient, email: str, name: str, user_type: str) -> dict:
    response = await client.post(
        "/api/v1/auth/register",
        json={"email": email, "password": "pw", "fullName": name, "userType": user_type},
    )
    assert response.status_code == 201
    return response.json()


async def _login(client: AsyncClient, email: str) -> None:
    response = await client.post("/api/v1/auth/login", json={"email": email, "password": "anything"})
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_register_returns_camel_case_user(client: AsyncClient):
    user = await _register(client, "alice@x.com", "Alice", "client")
    assert user["fullName"] == "Alice"
    assert user["userType"] == "client"
    assert user["skills"] == []
    assert "password" not in user

    me = await client.get("/api/v1/auth/me")
    assert me.json()["id"] == user["id"]


@pytest.mark.asyncio
async def test_register_errors(client: AsyncClient):
    await _register(client, "alice@x.com", "Alice", "client")
    duplicate = await client.post(
        "/api/v1/auth/register",
        json={"email": "alice@x.com", "password": "pw", "fullName": "Other", "userType": "client"},
    )
    assert duplicate.status_code == 409
    assert duplicate.json()["detail"] == "Email already registered. Please login."

    missing = await client.post("/api/v1/auth/register", json={"email": "b@x.com", "fullName": "B"})
    assert missing.status_code == 422


@pytest.mark.asyncio
async def test_login_logout(client: AsyncClient):
    assert (await client.post("/api/v1/auth/login", json={"email": "nobody@x.com"})).status_code == 404

    await _register(client, "alice@x.com", "Alice", "client")
    assert (await client.post("/api/v1/auth/logout")).status_code == 204
    assert (await client.get("/api/v1/auth/me")).status_code == 401
    await _login(client, "alice@x.com")
    assert (await client.get("/api/v1/auth/me")).status_code == 200


@pytest.mark.asyncio
async def test_actions_require_session(client: AsyncClient):
    assert (await client.post("/api/v1/services", json=LOGO)).status_code == 401
    assert (await client.get("/api/v1/bookings")).status_code == 401


@pytest.mark.asyncio
async def test_booking_flow_over_http(client: AsyncClient):
    await _register(client, "alice@x.com", "Alice", "client")
    await _register(client, "bob@x.com", "Bob", "freelancer")

    created = await client.post("/api/v1/services", json=LOGO)
    assert created.status_code == 201
    service = created.json()
    assert service["isActive"] is True

    await _login(client, "alice@x.com")
    browse = await client.get("/api/v1/services", params={"category": "Design", "q": "logo"})
    assert [s["id"] for s in browse.json()] == [service["id"]]

    booked = await client.post("/api/v1/bookings", json={"serviceId": service["id"], "message": "need by Friday"})
    assert booked.status_code == 201
    booking = booked.json()
    assert booking["status"] == "pending"
    assert booking["price"] == 50

    # Clients cannot move their own bookings
    assert (await client.post(f"/api/v1/bookings/{booking['id']}/accept")).status_code == 403

    await _login(client, "bob@x.com")
    assert (await client.post(f"/api/v1/bookings/{booking['id']}/complete")).status_code == 409
    accepted = await client.post(f"/api/v1/bookings/{booking['id']}/accept")
    assert accepted.json()["status"] == "accepted"
    assert accepted.json()["updatedAt"] != booking["updatedAt"]
    completed = await client.post(f"/api/v1/bookings/{booking['id']}/complete")
    assert completed.json()["status"] == "completed"

    mine = await client.get("/api/v1/bookings")
    assert [b["status"] for b in mine.json()] == ["completed"]


@pytest.mark.asyncio
async def test_service_management(client: AsyncClient):
    await _register(client, "bob@x.com", "Bob", "freelancer")
    service = (await client.post("/api/v1/services", json=LOGO)).json()

    updated = await client.put(f"/api/v1/services/{service['id']}", json={"price": 65})
    assert updated.json()["price"] == 65

    toggled = await client.post(f"/api/v1/services/{service['id']}/toggle")
    assert toggled.json()["isActive"] is False
    assert (await client.get("/api/v1/services")).json() == []
    assert len((await client.get("/api/v1/services/mine")).json()) == 1

    assert (await client.delete(f"/api/v1/services/{service['id']}")).status_code == 204
    assert (await client.get("/api/v1/services/mine")).json() == []
    assert (await client.delete(f"/api/v1/services/{service['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_invalid_service_payload(client: AsyncClient):
    await _register(client, "bob@x.com", "Bob", "freelancer")
    response = await client.post("/api/v1/services", json={**LOGO, "price": 0})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_profile_update(client: AsyncClient):
    await _register(client, "bob@x.com", "Bob", "freelancer")
    response = await client.put(
        "/api/v1/profile",
        json={"fullName": "Bob B.", "bio": "Logos", "skills": "Figma, Illustrator", "hourlyRate": "not a number"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["skills"] == ["Figma", "Illustrator"]
    assert body["hourlyRate"] == 0
    assert (await client.get("/api/v1/auth/me")).json()["fullName"] == "Bob B."


@pytest.mark.asyncio
async def test_categories(client: AsyncClient):
    response = await client.get("/api/v1/services/categories")
    assert "Design" in response.json()
