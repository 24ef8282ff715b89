"""CLI commands for operator accounts."""

from __future__ import annotations

from uuid import UUID

import click

from ims.application.create_user import CreateUserHandler
from ims.application.dto import UserDTO
from ims.application.list_users import ListUsersHandler
from ims.application.login_user import LoginUserHandler
from ims.application.set_user_status import ActivateUserHandler, DeactivateUserHandler
from ims.application.show_user import CurrentUserHandler, ShowUserHandler
from ims.application.update_user import UpdateUserHandler
from ims.domain.exceptions import DomainException
from ims.infrastructure.bootstrap import password_hasher, unit_of_work
from ims.infrastructure.cli.common import echo_fields, resolve_actor, user_option


def _display_user(dto: UserDTO) -> None:
    echo_fields([
        ("ID", dto.id),
        ("Name", dto.full_name),
        ("E-mail", dto.email),
        ("Active", "yes" if dto.is_active else "no"),
        ("Created", dto.created_at),
        ("Updated", dto.updated_at),
    ])


@click.command("create")
@click.option("--first-name", required=True, help="First name.")
@click.option("--last-name", required=True, help="Last name.")
@click.option("--email", required=True, help="Sign-in e-mail.")
@click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True,
              help="Initial password (prompted when omitted).")
@user_option
def user_create(
    first_name: str, last_name: str, email: str, password: str, acting_user: str | None
) -> None:
    """Create an operator account."""
    try:
        with unit_of_work() as repos:
            actor_id = resolve_actor(repos.users, acting_user)
            handler = CreateUserHandler(user_repo=repos.users, hasher=password_hasher())
            dto = handler.handle(first_name, last_name, email, password, actor_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User '{dto.full_name}' <{dto.email}> created with ID {dto.id}")


@click.command("update")
@click.option("--id", "user_id", required=True, type=click.UUID, help="User ID.")
@click.option("--first-name", required=True, help="First name.")
@click.option("--last-name", required=True, help="Last name.")
@click.option("--email", required=True, help="Sign-in e-mail.")
@user_option
def user_update(
    user_id: UUID, first_name: str, last_name: str, email: str, acting_user: str | None
) -> None:
    """Change an operator's name or e-mail."""
    try:
        with unit_of_work() as repos:
            actor_id = resolve_actor(repos.users, acting_user)
            dto = UpdateUserHandler(user_repo=repos.users).handle(
                user_id, first_name, last_name, email, actor_id
            )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User '{dto.full_name}' updated")


@click.command("activate")
@click.option("--id", "user_id", required=True, type=click.UUID, help="User ID.")
@user_option
def user_activate(user_id: UUID, acting_user: str | None) -> None:
    """Allow an operator to sign in again."""
    try:
        with unit_of_work() as repos:
            actor_id = resolve_actor(repos.users, acting_user)
            dto = ActivateUserHandler(user_repo=repos.users).handle(user_id, actor_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User '{dto.full_name}' activated")


@click.command("deactivate")
@click.option("--id", "user_id", required=True, type=click.UUID, help="User ID.")
@user_option
def user_deactivate(user_id: UUID, acting_user: str | None) -> None:
    """Block an operator from signing in."""
    try:
        with unit_of_work() as repos:
            actor_id = resolve_actor(repos.users, acting_user)
            dto = DeactivateUserHandler(user_repo=repos.users).handle(user_id, actor_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User '{dto.full_name}' deactivated")


@click.command("show")
@click.option("--id", "user_id", required=True, type=click.UUID, help="User ID.")
def user_show(user_id: UUID) -> None:
    """Show details of an operator."""
    try:
        with unit_of_work() as repos:
            dto = ShowUserHandler(user_repo=repos.users).handle(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_user(dto)


@click.command("list")
def user_list() -> None:
    """List operator accounts."""
    try:
        with unit_of_work() as repos:
            users = ListUsersHandler(user_repo=repos.users).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not users:
        click.echo("No users found.")
        return

    click.echo(f"{'ID':<36}  {'Name':<30} {'E-mail':<32} Active")
    click.echo("-" * 108)
    for u in users:
        click.echo(
            f"{str(u.id):<36}  {u.full_name[:30]:<30} {u.email[:32]:<32} "
            f"{'yes' if u.is_active else 'no'}"
        )


@click.command("login")
@click.option("--email", required=True, help="Sign-in e-mail.")
@click.option("--password", prompt=True, hide_input=True, help="Password (prompted when omitted).")
def user_login(email: str, password: str) -> None:
    """Check an operator's credentials."""
    try:
        with unit_of_work() as repos:
            handler = LoginUserHandler(user_repo=repos.users, hasher=password_hasher())
            result = handler.handle(email, password)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Signed in as {result.user.full_name} <{result.user.email}>")
    click.echo(f"Run commands as this user with: export IMS_USER={result.user.email}")


@click.command("whoami")
@user_option
def user_whoami(acting_user: str | None) -> None:
    """Show the user commands are run as."""
    try:
        with unit_of_work() as repos:
            actor_id = resolve_actor(repos.users, acting_user)
            dto = CurrentUserHandler(user_repo=repos.users).handle(actor_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_user(dto)
