"""
BDD step definitions for the booking lifecycle (pytest-bdd).
Challenge: Express the marketplace flow in Gherkin; map each step to HTTP calls.
"""

import pytest
from fastapi.testclient import TestClient
from pytest_bdd import given, parsers, scenarios, then, when

from freelancehub.db.repositories import Repository
from freelancehub.db.store import InMemoryStore
from freelancehub.main import create_app

scenarios("../features/booking_lifecycle.feature")


@pytest.fixture
def http():
    return TestClient(create_app(Repository(InMemoryStore())))


@pytest.fixture
def context():
    """Ids and last response shared between steps."""
    return {"services": {}}


def _login(http: TestClient, email: str) -> None:
    response = http.post("/api/v1/auth/login", json={"email": email})
    assert response.status_code == 200


def _register(http: TestClient, email: str, name: str, user_type: str) -> None:
    response = http.post(
        "/api/v1/auth/register",
        json={"email": email, "password": "pw", "fullName": name, "userType": user_type},
    )
    assert response.status_code == 201


@given(parsers.parse('a client "{email}" named "{name}" is registered'))
def register_client(http, email, name):
    _register(http, email, name, "client")


@given(parsers.parse('a freelancer "{email}" named "{name}" is registered'))
def register_freelancer(http, email, name):
    _register(http, email, name, "freelancer")


@given(parsers.parse('"{email}" publishes "{title}" for {price:d} with delivery in {days:d} days'))
def publish(http, context, email, title, price, days):
    _login(http, email)
    response = http.post(
        "/api/v1/services",
        json={"title": title, "description": f"{title} service", "category": "Design", "price": price, "deliveryDays": days},
    )
    assert response.status_code == 201
    assert response.json()["isActive"] is True
    context["services"][title] = response.json()["id"]


def _book(http, context, email, title, message=""):
    _login(http, email)
    response = http.post(
        "/api/v1/bookings",
        json={"serviceId": context["services"][title], "message": message},
    )
    assert response.status_code == 201
    context["booking"] = response.json()


@when(parsers.parse('"{email}" books "{title}" with message "{message}"'))
def book_with_message(http, context, email, title, message):
    _book(http, context, email, title, message)


@when(parsers.re(r'"(?P<email>[^"]+)" books "(?P<title>[^"]+)"$'))
def book(http, context, email, title):
    _book(http, context, email, title)


@when(parsers.parse('"{email}" {action} the booking'))
def move_booking(http, context, email, action):
    verb = {"accepts": "accept", "declines": "decline", "completes": "complete"}[action]
    _login(http, email)
    context["last"] = http.post(f"/api/v1/bookings/{context['booking']['id']}/{verb}")


@when(parsers.parse('"{email}" deletes "{title}"'))
def delete_service(http, context, email, title):
    _login(http, email)
    response = http.delete(f"/api/v1/services/{context['services'][title]}")
    assert response.status_code == 204


def _current_booking(http, context) -> dict:
    response = http.get("/api/v1/bookings")
    assert response.status_code == 200
    return next(b for b in response.json() if b["id"] == context["booking"]["id"])


@then(parsers.parse('the booking status is "{status}" and its price is {price:d}'))
def booking_status_and_price(http, context, status, price):
    booking = _current_booking(http, context)
    assert booking["status"] == status
    assert booking["price"] == price


@then(parsers.parse('the booking status is "{status}"'))
def booking_status(http, context, status):
    assert _current_booking(http, context)["status"] == status


@then(parsers.parse("the last request is rejected with status {code:d}"))
def last_rejected(context, code):
    assert context["last"].status_code == code


@then(parsers.parse("there is exactly {service_count:d} service and {booking_count:d} booking"))
def counts(http, service_count, booking_count):
    assert len(http.get("/api/v1/services").json()) == service_count
    assert len(http.get("/api/v1/bookings").json()) == booking_count


@then(parsers.parse('"{email}" has no services'))
def no_services(http, email):
    _login(http, email)
    assert http.get("/api/v1/services/mine").json() == []
