import pytest
import pytest_asyncio

from invitation.wedding.features.update_wedding_info.router import get_wedding_info_write_model
from invitation.wedding.tests.inmemory_models import InMemoryWeddingStore, make_wedding_info
from invitation.wedding.urls import WEDDING_INFO_URL


@pytest_asyncio.fixture
async def store():
    store = InMemoryWeddingStore()
    await store.create_wedding_info(make_wedding_info())
    return store


@pytest.mark.asyncio
async def test_update_wedding_info(client_factory, store):
    """Test supplied fields change and the rest are kept."""
    overrides = {get_wedding_info_write_model: lambda: store}

    async with client_factory(overrides) as client:
        response = await client.patch(
            WEDDING_INFO_URL,
            json={"ceremony_location": "Masjid Raya", "ceremony_time_start": "09:00"},
        )

    assert response.status_code == 200
    data = response.json()
    assert data["ceremony_location"] == "Masjid Raya"
    assert data["ceremony_time_start"] == "09:00"
    assert data["bride_full_name"] == "Siti Aisyah"
    assert data["updated_at"] > data["created_at"]


@pytest.mark.asyncio
async def test_update_wedding_info_clears_maps_url(client_factory, store):
    overrides = {get_wedding_info_write_model: lambda: store}

    async with client_factory(overrides) as client:
        response = await client.patch(WEDDING_INFO_URL, json={"reception_maps_url": None})

    assert response.status_code == 200
    assert response.json()["reception_maps_url"] is None


@pytest.mark.asyncio
async def test_update_wedding_info_empty_body(client_factory, store):
    """Test an empty update still refreshes updated_at."""
    before = store.wedding_info
    overrides = {get_wedding_info_write_model: lambda: store}

    async with client_factory(overrides) as client:
        response = await client.patch(WEDDING_INFO_URL, json={})

    assert response.status_code == 200
    assert store.wedding_info.updated_at > before.updated_at
    assert store.wedding_info.bride_full_name == before.bride_full_name


@pytest.mark.asyncio
async def test_update_wedding_info_not_seeded(client_factory):
    overrides = {get_wedding_info_write_model: lambda: InMemoryWeddingStore()}

    async with client_factory(overrides) as client:
        response = await client.patch(WEDDING_INFO_URL, json={"bank_name": "Other Bank"})

    assert response.status_code == 404


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "update_data",
    [
        {"bride_full_name": None},
        {"ceremony_date": None},
        {"ceremony_date": "not a date"},
        {"reception_maps_url": "not a url"},
    ],
)
async def test_update_wedding_info_invalid_payload(client_factory, store, update_data):
    before = store.wedding_info
    overrides = {get_wedding_info_write_model: lambda: store}

    async with client_factory(overrides) as client:
        response = await client.patch(WEDDING_INFO_URL, json=update_data)

    assert response.status_code == 422
    assert store.wedding_info == before
