"""CLI commands for database setup."""

from __future__ import annotations

import click

from ims.domain.exceptions import DomainException
from ims.infrastructure.bootstrap import password_hasher, settings, unit_of_work
from ims.infrastructure.seed import ADMIN_EMAIL, seed_admin


@click.command("init")
def db_init() -> None:
    """Create the tables and the default administrator."""
    try:
        url = settings().database_url
        with unit_of_work() as repos:
            created = seed_admin(repos.users, password_hasher())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Database ready at {url}")
    if created:
        click.echo(f"Administrator created: {ADMIN_EMAIL} (change the default password)")
    else:
        click.echo("Administrator already present.")
