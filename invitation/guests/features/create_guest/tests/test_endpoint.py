import pytest

from invitation.guests.features.create_guest.router import get_guest_create_write_model
from invitation.guests.tests.inmemory_models import InMemoryGuestStore
from invitation.guests.urls import GUESTS_URL


@pytest.mark.asyncio
async def test_create_guest(client_factory):
    """Test creating a guest returns the stored record."""
    store = InMemoryGuestStore()
    overrides = {get_guest_create_write_model: lambda: store}

    async with client_factory(overrides) as client:
        response = await client.post(
            GUESTS_URL,
            json={"name": "John Doe", "email": "john@example.com", "phone": "+1234567890"},
        )

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == 1
    assert data["name"] == "John Doe"
    assert data["email"] == "john@example.com"
    assert data["phone"] == "+1234567890"
    assert "created_at" in data
    assert len(store.guests) == 1


@pytest.mark.asyncio
async def test_create_guest_name_only(client_factory):
    store = InMemoryGuestStore()
    overrides = {get_guest_create_write_model: lambda: store}

    async with client_factory(overrides) as client:
        response = await client.post(GUESTS_URL, json={"name": "Jane"})

    assert response.status_code == 200
    data = response.json()
    assert data["email"] is None
    assert data["phone"] is None


@pytest.mark.asyncio
async def test_create_guest_same_name_twice(client_factory):
    """Test two submissions with one name give two distinct guests."""
    store = InMemoryGuestStore()
    overrides = {get_guest_create_write_model: lambda: store}

    async with client_factory(overrides) as client:
        first = await client.post(GUESTS_URL, json={"name": "Alice"})
        second = await client.post(GUESTS_URL, json={"name": "Alice"})

    assert first.status_code == 200
    assert second.status_code == 200
    assert first.json()["id"] != second.json()["id"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"name": ""},
        {"name": "Bob", "email": "not-an-email"},
    ],
)
async def test_create_guest_invalid_payload(client_factory, payload):
    store = InMemoryGuestStore()
    overrides = {get_guest_create_write_model: lambda: store}

    async with client_factory(overrides) as client:
        response = await client.post(GUESTS_URL, json=payload)

    assert response.status_code == 422
    assert store.guests == {}


@pytest.mark.asyncio
async def test_create_guest_blank_name(client_factory):
    """Test whitespace-only names pass the schema but are refused by the model."""
    store = InMemoryGuestStore()
    overrides = {get_guest_create_write_model: lambda: store}

    async with client_factory(overrides) as client:
        response = await client.post(GUESTS_URL, json={"name": "   "})

    assert response.status_code == 422
    assert "name" in response.json()["detail"]
