import pytest
import pytest_asyncio

from invitation.guests.features.create_rsvp.router import get_rsvp_write_model
from invitation.guests.tests.inmemory_models import InMemoryGuestStore
from invitation.guests.urls import RSVPS_URL


@pytest_asyncio.fixture
async def store():
    store = InMemoryGuestStore()
    await store.create_guest(name="John Doe")
    return store


@pytest.mark.asyncio
async def test_create_rsvp(client_factory, store):
    """Test submitting an RSVP with every field."""
    overrides = {get_rsvp_write_model: lambda: store}
    rsvp_data = {"guest_id": 1, "will_attend": True, "number_of_guests": 2, "message": "Yay"}

    async with client_factory(overrides) as client:
        response = await client.post(RSVPS_URL, json=rsvp_data)

    assert response.status_code == 200
    data = response.json()
    assert data["guest_id"] == 1
    assert data["will_attend"] is True
    assert data["number_of_guests"] == 2
    assert data["message"] == "Yay"
    assert data["created_at"] == data["updated_at"]


@pytest.mark.asyncio
async def test_create_rsvp_defaults(client_factory, store):
    overrides = {get_rsvp_write_model: lambda: store}

    async with client_factory(overrides) as client:
        response = await client.post(RSVPS_URL, json={"guest_id": 1, "will_attend": False})

    assert response.status_code == 200
    data = response.json()
    assert data["number_of_guests"] == 1
    assert data["message"] is None


@pytest.mark.asyncio
async def test_create_rsvp_twice_is_conflict(client_factory, store):
    """Test the second submission for a guest is refused and the first one is kept."""
    overrides = {get_rsvp_write_model: lambda: store}

    async with client_factory(overrides) as client:
        first = await client.post(RSVPS_URL, json={"guest_id": 1, "will_attend": True})
        second = await client.post(
            RSVPS_URL, json={"guest_id": 1, "will_attend": False, "number_of_guests": 4}
        )

    assert first.status_code == 200
    assert second.status_code == 409
    assert "guest 1" in second.json()["detail"]
    assert len(store.rsvps) == 1
    assert store.rsvps[1].will_attend is True


@pytest.mark.asyncio
async def test_create_rsvp_unknown_guest(client_factory, store):
    overrides = {get_rsvp_write_model: lambda: store}

    async with client_factory(overrides) as client:
        response = await client.post(RSVPS_URL, json={"guest_id": 999, "will_attend": True})

    assert response.status_code == 422
    assert "999" in response.json()["detail"]
    assert store.rsvps == {}


@pytest.mark.asyncio
@pytest.mark.parametrize("number_of_guests", [1, 10])
async def test_create_rsvp_accepts_boundary_counts(client_factory, store, number_of_guests):
    overrides = {get_rsvp_write_model: lambda: store}
    rsvp_data = {"guest_id": 1, "will_attend": True, "number_of_guests": number_of_guests}

    async with client_factory(overrides) as client:
        response = await client.post(RSVPS_URL, json=rsvp_data)

    assert response.status_code == 200
    assert response.json()["number_of_guests"] == number_of_guests


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "rsvp_data",
    [
        {"guest_id": 1, "will_attend": True, "number_of_guests": 0},
        {"guest_id": 1, "will_attend": True, "number_of_guests": 11},
        {"guest_id": 1},
        {"will_attend": True},
    ],
)
async def test_create_rsvp_invalid_payload(client_factory, store, rsvp_data):
    overrides = {get_rsvp_write_model: lambda: store}

    async with client_factory(overrides) as client:
        response = await client.post(RSVPS_URL, json=rsvp_data)

    assert response.status_code == 422
    assert store.rsvps == {}
