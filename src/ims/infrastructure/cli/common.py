"""Helpers shared by the CLI command modules."""

from __future__ import annotations

from datetime import datetime, time, timezone
from uuid import UUID

import click

from ims.domain.exceptions import UnauthorizedError
from ims.domain.repository.user_repository import UserRepository
from ims.logging_config import LogContext

user_option = click.option(
    "--user",
    "acting_user",
    envvar="IMS_USER",
    default=None,
    help="E-mail of the user performing the action (or set IMS_USER).",
)


def resolve_actor(user_repo: UserRepository, email: str | None) -> UUID | None:
    """Map the acting user's e-mail to their id.

    No e-mail means no actor; handlers that need one will refuse.  An
    e-mail that matches no active user is rejected here.
    """
    if email is None or not email.strip():
        return None
    user = user_repo.get_by_email(email.strip().lower())
    if user is None or not user.is_active:
        raise UnauthorizedError(f"Unknown or inactive user '{email}'")

    ctx = click.get_current_context(silent=True)
    if ctx is not None:
        ctx.with_resource(LogContext.bind(actor=str(user.id)))
    return user.id


def parse_when(value: str | None, end_of_day: bool = False) -> datetime | None:
    """Parse an ISO date or datetime given on the command line as UTC.

    A bare date means the start of that day, or its last instant when
    ``end_of_day`` is set, so date ranges are inclusive.
    """
    if value is None:
        return None
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        raise click.BadParameter(f"Invalid date '{value}'. Expected YYYY-MM-DD[THH:MM].")
    if end_of_day and len(value.strip()) == 10:
        parsed = datetime.combine(parsed.date(), time.max)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def echo_fields(pairs: list[tuple[str, object]]) -> None:
    """Print label/value lines, skipping empty values."""
    for label, value in pairs:
        if value is None or value == "":
            continue
        click.echo(f"{label + ':':<18} {value}")
