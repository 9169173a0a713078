"""CLI commands for wedding invitation management."""

import asyncio
import json
from pathlib import Path

import typer
from pydantic import TypeAdapter, ValidationError

from invitation.config.logging import setup_logging
from invitation.errors import InvitationError
from invitation.guests.features.create_guest.write_model import SqlGuestCreateWriteModel
from invitation.guests.repository.read_models import SqlGuestReadModel
from invitation.wedding.dtos import WeddingInfoCreateDTO
from invitation.wedding.repository.write_models import (
    SqlWeddingInfoWriteModel,
    SqlWeddingPhotoWriteModel,
)

app = typer.Typer(help="CLI commands for wedding invitation management")

# Placeholder profile so the invitation renders before the couple fills it in
# through PATCH /api/v1/wedding-info.
DEFAULT_WEDDING_INFO = {
    "bride_full_name": "Sarah Amelia W",
    "bride_nickname": "Sarah",
    "bride_father": "Mr. David W",
    "bride_mother": "Mrs. Emily W",
    "groom_full_name": "Michael John S",
    "groom_nickname": "Mike",
    "groom_father": "Mr. Robert S",
    "groom_mother": "Mrs. Laura S",
    "ceremony_date": "2026-12-12T00:00:00Z",
    "ceremony_time_start": "10:00 AM",
    "ceremony_time_end": "11:00 AM",
    "ceremony_location": "Grand Mosque, Jalan Raya No. 123, Jakarta",
    "reception_date": "2026-12-12T00:00:00Z",
    "reception_time_start": "01:00 PM",
    "reception_time_end": "04:00 PM",
    "reception_location": "The Majestic Ballroom, Hotel Indah, Jakarta",
    "reception_maps_url": "https://maps.google.com/?q=The+Majestic+Ballroom+Hotel+Indah+Jakarta",
    "bank_name": "Bank Example",
    "account_holder": "Sarah Amelia W",
    "account_number": "1234567890",
    "rsvp_message": "Your presence is our greatest gift. Please let us know if you can make it.",
    "rsvp_deadline": "2026-11-30T00:00:00Z",
    "co_invitation_message": "We humbly invite our relatives, friends and colleagues to celebrate with us.",
    "quran_verse": "And of His signs is that He created for you from yourselves mates. (Ar-Rum 30:21)",
}

_wedding_info_adapter = TypeAdapter(WeddingInfoCreateDTO)


def _fail(message: str):
    typer.secho(message, fg=typer.colors.RED)
    raise typer.Exit(1)


@app.callback()
def main():
    setup_logging()


@app.command()
def create_guest(
    name: str = typer.Argument(..., help="Guest name as typed on the envelope screen"),
    email: str = typer.Option(None, "--email", "-e", help="Guest email"),
    phone: str = typer.Option(None, "--phone", "-p", help="Guest phone number"),
):
    """Create a guest."""
    try:
        guest = asyncio.run(
            SqlGuestCreateWriteModel().create_guest(name=name, email=email, phone=phone)
        )
    except InvitationError as e:
        _fail(str(e))

    typer.secho("Guest created!", fg=typer.colors.GREEN)
    typer.secho(f"  ID: {guest.id}", fg=typer.colors.CYAN)
    typer.secho(f"  Name: {guest.name}", fg=typer.colors.BLUE)
    if guest.email:
        typer.secho(f"  Email: {guest.email}", fg=typer.colors.BLUE)
    if guest.phone:
        typer.secho(f"  Phone: {guest.phone}", fg=typer.colors.BLUE)


@app.command()
def list_guests():
    """List every guest with their RSVP status."""
    guests = asyncio.run(SqlGuestReadModel().get_guests())

    if not guests:
        typer.secho("No guests yet", fg=typer.colors.YELLOW)
        return

    for guest in guests:
        if guest.rsvp is None:
            status, color = "no response", typer.colors.YELLOW
        elif guest.rsvp.will_attend:
            status, color = f"attending ({guest.rsvp.number_of_guests})", typer.colors.GREEN
        else:
            status, color = "declined", typer.colors.MAGENTA
        typer.secho(f"{guest.id:>4}  {guest.name:<30} {status}", fg=color)


@app.command()
def seed_wedding_info(
    from_file: Path = typer.Option(
        None,
        "--from-file",
        "-f",
        exists=True,
        dir_okay=False,
        help="JSON file with wedding profile fields; missing fields use placeholders",
    ),
):
    """Create the wedding profile. Fails if it already exists."""
    data = dict(DEFAULT_WEDDING_INFO)
    if from_file:
        data.update(json.loads(from_file.read_text()))

    try:
        info = _wedding_info_adapter.validate_python(data)
    except ValidationError as e:
        _fail(f"Invalid wedding information:\n{e}")

    try:
        wedding_info = asyncio.run(SqlWeddingInfoWriteModel().create_wedding_info(info))
    except InvitationError as e:
        _fail(str(e))

    typer.secho("Wedding information seeded!", fg=typer.colors.GREEN)
    typer.secho(
        f"  {wedding_info.bride_nickname} & {wedding_info.groom_nickname}",
        fg=typer.colors.BLUE,
    )
    typer.secho(f"  Ceremony: {wedding_info.ceremony_date:%Y-%m-%d}", fg=typer.colors.CYAN)


@app.command()
def add_photo(
    url: str = typer.Argument(..., help="Public URL of the photo"),
    alt_text: str = typer.Option(None, "--alt-text", "-a", help="Alternative text"),
    main: bool = typer.Option(False, "--main", help="Use as the main photo"),
    order: int = typer.Option(None, "--order", "-o", help="Position in the gallery"),
):
    """Add a photo to the catalog."""
    try:
        photo = asyncio.run(
            SqlWeddingPhotoWriteModel().create_wedding_photo(
                url=url,
                alt_text=alt_text,
                is_main_photo=main,
                gallery_order=order,
            )
        )
    except InvitationError as e:
        _fail(str(e))

    typer.secho("Photo added!", fg=typer.colors.GREEN)
    typer.secho(f"  ID: {photo.id}", fg=typer.colors.CYAN)
    typer.secho(f"  URL: {photo.url}", fg=typer.colors.BLUE)
    if photo.is_main_photo:
        typer.secho("  Main photo", fg=typer.colors.MAGENTA)


if __name__ == "__main__":
    app()
