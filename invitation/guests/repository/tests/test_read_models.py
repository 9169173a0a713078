"""Tests for the guest and RSVP SQL read models."""

from invitation.config.database import async_session_manager
from invitation.guests.repository.orm_models import RSVP, Guest
from invitation.guests.repository.read_models import SqlGuestReadModel, SqlRSVPReadModel


async def seed_guest(name: str, email: str | None = None) -> int:
    async with async_session_manager() as session:
        guest = Guest(name=name, email=email)
        session.add(guest)
        await session.flush()
        return guest.id


async def seed_rsvp(guest_id: int, will_attend: bool = True, number_of_guests: int = 1) -> int:
    async with async_session_manager() as session:
        rsvp = RSVP(guest_id=guest_id, will_attend=will_attend, number_of_guests=number_of_guests)
        session.add(rsvp)
        await session.flush()
        return rsvp.id


async def test_get_guest_by_name_exact_match():
    guest_id = await seed_guest("John Doe", "john@example.com")

    result = await SqlGuestReadModel().get_guest_by_name("John Doe")

    assert result is not None
    assert result.id == guest_id
    assert result.email == "john@example.com"


async def test_get_guest_by_name_is_case_sensitive():
    await seed_guest("John Doe")

    assert await SqlGuestReadModel().get_guest_by_name("john doe") is None
    assert await SqlGuestReadModel().get_guest_by_name(" John Doe") is None


async def test_get_guest_by_name_duplicate_names_returns_first_created():
    """Test the oldest guest wins when a name is shared."""
    first_id = await seed_guest("Alice")
    await seed_guest("Alice")

    result = await SqlGuestReadModel().get_guest_by_name("Alice")

    assert result.id == first_id


async def test_get_guests_empty():
    assert await SqlGuestReadModel().get_guests() == []


async def test_get_guests_attaches_rsvps():
    """Test each guest appears once, with their RSVP or None."""
    responded_id = await seed_guest("Responded")
    silent_id = await seed_guest("Silent")
    rsvp_id = await seed_rsvp(responded_id, will_attend=False, number_of_guests=3)

    guests = await SqlGuestReadModel().get_guests()

    assert [guest.id for guest in guests] == [responded_id, silent_id]
    assert guests[0].rsvp is not None
    assert guests[0].rsvp.id == rsvp_id
    assert guests[0].rsvp.will_attend is False
    assert guests[0].rsvp.number_of_guests == 3
    assert guests[1].rsvp is None


async def test_get_rsvp_by_guest():
    guest_id = await seed_guest("John Doe")
    rsvp_id = await seed_rsvp(guest_id)

    result = await SqlRSVPReadModel().get_rsvp_by_guest(guest_id)

    assert result is not None
    assert result.id == rsvp_id
    assert result.guest_id == guest_id
    assert result.message is None


async def test_get_rsvp_by_guest_without_rsvp():
    guest_id = await seed_guest("John Doe")

    assert await SqlRSVPReadModel().get_rsvp_by_guest(guest_id) is None


async def test_get_rsvp_by_unknown_guest():
    assert await SqlRSVPReadModel().get_rsvp_by_guest(12345) is None
