"""CLI commands for clients."""

from __future__ import annotations

import click

from ims.application.create_client import (
    CreateBusinessClientHandler,
    CreateIndividualClientHandler,
)
from ims.application.delete_client import DeleteClientHandler
from ims.application.dto import (
    BusinessClientDTO,
    BusinessClientSpec,
    ClientDTO,
    IndividualClientDTO,
    IndividualClientSpec,
)
from ims.application.list_clients import ListClientsHandler
from ims.application.search_clients import SearchClientsHandler
from ims.application.show_client import ShowClientHandler
from ims.application.update_client import (
    UpdateBusinessClientHandler,
    UpdateIndividualClientHandler,
)
from ims.domain.exceptions import DomainException
from ims.domain.model.enums import ClientType
from ims.infrastructure.bootstrap import unit_of_work
from ims.infrastructure.cli.common import echo_fields, resolve_actor, user_option

CLIENT_TYPE_NAMES = [t.label.lower() for t in ClientType]


def _client_type_id(name: str | None) -> int | None:
    if name is None:
        return None
    return int(next(t for t in ClientType if t.label.lower() == name.lower()))


def _options(func, options):
    for option in reversed(options):
        func = option(func)
    return func


def contact_options(func):
    return _options(func, [
        click.option("--address", default=None, help="Postal address."),
        click.option("--email", default=None, help="E-mail address."),
        click.option("--phone", "phone_number", default=None, help="Phone number."),
        click.option("--notes", default=None, help="Free-text notes."),
    ])


def individual_options(func):
    return _options(func, [
        click.option("--first-name", required=True, help="First name."),
        click.option("--last-name", required=True, help="Last name."),
    ])


def business_options(func):
    return _options(func, [
        click.option("--nipt", required=True, help="10-character tax id."),
        click.option("--contact-first-name", required=True, help="Contact person's first name."),
        click.option("--contact-last-name", required=True, help="Contact person's last name."),
        click.option("--contact-phone", default=None, help="Contact person's phone."),
        click.option("--owner-first-name", default=None, help="Owner's first name."),
        click.option("--owner-last-name", default=None, help="Owner's last name."),
        click.option("--owner-phone", default=None, help="Owner's phone."),
    ])


def _individual_spec(opts: dict) -> IndividualClientSpec:
    return IndividualClientSpec(
        first_name=opts["first_name"],
        last_name=opts["last_name"],
        address=opts["address"],
        email=opts["email"],
        phone_number=opts["phone_number"],
        notes=opts["notes"],
    )


def _business_spec(opts: dict) -> BusinessClientSpec:
    return BusinessClientSpec(
        nipt=opts["nipt"],
        contact_person_first_name=opts["contact_first_name"],
        contact_person_last_name=opts["contact_last_name"],
        contact_person_phone_number=opts["contact_phone"],
        owner_first_name=opts["owner_first_name"],
        owner_last_name=opts["owner_last_name"],
        owner_phone_number=opts["owner_phone"],
        address=opts["address"],
        email=opts["email"],
        phone_number=opts["phone_number"],
        notes=opts["notes"],
    )


def _display_client(dto: ClientDTO) -> None:
    pairs: list[tuple[str, object]] = [
        ("ID", dto.id),
        ("Type", dto.client_type),
    ]
    if isinstance(dto, IndividualClientDTO):
        pairs.append(("Name", dto.full_name))
    elif isinstance(dto, BusinessClientDTO):
        pairs += [
            ("NIPT", dto.nipt),
            ("Contact", dto.contact_person_full_name),
            ("Contact phone", dto.contact_person_phone_number),
            ("Owner", dto.owner_full_name),
            ("Owner phone", dto.owner_phone_number),
        ]
    pairs += [
        ("Address", dto.address),
        ("E-mail", dto.email),
        ("Phone", dto.phone_number),
        ("Notes", dto.notes),
        ("Active", "yes" if dto.is_active else "no"),
        ("Created", f"{dto.created_at} by {dto.created_by}"),
        ("Updated", f"{dto.updated_at} by {dto.updated_by}" if dto.updated_by else dto.updated_at),
    ]
    echo_fields(pairs)


def _display_table(clients: list[ClientDTO]) -> None:
    click.echo(f"{'ID':<36}  {'Type':<10} {'Name':<32} {'E-mail':<28} Phone")
    click.echo("-" * 120)
    for c in clients:
        click.echo(
            f"{c.id:<36}  {c.client_type:<10} {c.display_name[:32]:<32} "
            f"{(c.email or '')[:28]:<28} {c.phone_number or ''}"
        )


@click.command("create-individual")
@individual_options
@contact_options
@user_option
def client_create_individual(acting_user: str | None, **opts) -> None:
    """Register a private person as a client."""
    spec = _individual_spec(opts)
    try:
        with unit_of_work() as repos:
            actor_id = resolve_actor(repos.users, acting_user)
            dto = CreateIndividualClientHandler(client_repo=repos.clients).handle(spec, actor_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Client '{dto.display_name}' created with ID {dto.id}")


@click.command("create-business")
@business_options
@contact_options
@user_option
def client_create_business(acting_user: str | None, **opts) -> None:
    """Register a company as a client."""
    spec = _business_spec(opts)
    try:
        with unit_of_work() as repos:
            actor_id = resolve_actor(repos.users, acting_user)
            dto = CreateBusinessClientHandler(client_repo=repos.clients).handle(spec, actor_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Client '{dto.display_name}' created with ID {dto.id}")


@click.command("update-individual")
@click.option("--id", "client_id", required=True, help="Client ID.")
@individual_options
@contact_options
@user_option
def client_update_individual(client_id: str, acting_user: str | None, **opts) -> None:
    """Replace an individual client's details."""
    spec = _individual_spec(opts)
    try:
        with unit_of_work() as repos:
            actor_id = resolve_actor(repos.users, acting_user)
            handler = UpdateIndividualClientHandler(client_repo=repos.clients)
            dto = handler.handle(client_id, spec, actor_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Client '{dto.display_name}' updated")


@click.command("update-business")
@click.option("--id", "client_id", required=True, help="Client ID.")
@business_options
@contact_options
@user_option
def client_update_business(client_id: str, acting_user: str | None, **opts) -> None:
    """Replace a business client's details."""
    spec = _business_spec(opts)
    try:
        with unit_of_work() as repos:
            actor_id = resolve_actor(repos.users, acting_user)
            handler = UpdateBusinessClientHandler(client_repo=repos.clients)
            dto = handler.handle(client_id, spec, actor_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Client '{dto.display_name}' updated")


@click.command("delete")
@click.option("--id", "client_id", required=True, help="Client ID.")
@user_option
def client_delete(client_id: str, acting_user: str | None) -> None:
    """Deactivate a client."""
    try:
        with unit_of_work() as repos:
            actor_id = resolve_actor(repos.users, acting_user)
            DeleteClientHandler(client_repo=repos.clients).handle(client_id, actor_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Client {client_id} deleted")


@click.command("show")
@click.option("--id", "client_id", required=True, help="Client ID.")
def client_show(client_id: str) -> None:
    """Show details of a client."""
    try:
        with unit_of_work() as repos:
            dto = ShowClientHandler(client_repo=repos.clients).handle(client_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_client(dto)


@click.command("list")
@click.option("--type", "type_name", default=None,
              type=click.Choice(CLIENT_TYPE_NAMES, case_sensitive=False),
              help="Only this kind of client.")
@click.option("--include-inactive", is_flag=True, default=False, help="Include deleted clients.")
def client_list(type_name: str | None, include_inactive: bool) -> None:
    """List clients, newest first."""
    try:
        with unit_of_work() as repos:
            clients = ListClientsHandler(client_repo=repos.clients).handle(
                client_type_id=_client_type_id(type_name),
                include_inactive=include_inactive,
            )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not clients:
        click.echo("No clients found.")
        return
    _display_table(clients)


@click.command("search")
@click.argument("term", required=False)
@click.option("--type", "type_name", default=None,
              type=click.Choice(CLIENT_TYPE_NAMES, case_sensitive=False),
              help="Only this kind of client.")
@click.option("--include-inactive", is_flag=True, default=False, help="Include deleted clients.")
def client_search(term: str | None, type_name: str | None, include_inactive: bool) -> None:
    """Find clients by name, e-mail, phone or NIPT."""
    try:
        with unit_of_work() as repos:
            clients = SearchClientsHandler(client_repo=repos.clients).handle(
                term=term,
                client_type_id=_client_type_id(type_name),
                include_inactive=include_inactive,
            )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not clients:
        click.echo("No clients matched.")
        return
    _display_table(clients)
