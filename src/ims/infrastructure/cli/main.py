import click

from ims.infrastructure.cli.client_commands import (
    client_create_business,
    client_create_individual,
    client_delete,
    client_list,
    client_search,
    client_show,
    client_update_business,
    client_update_individual,
)
from ims.infrastructure.cli.db_commands import db_init
from ims.infrastructure.cli.product_commands import (
    product_create,
    product_delete,
    product_list,
    product_low_stock,
    product_show,
    product_update,
)
from ims.infrastructure.cli.stock_commands import stock_add, stock_history, stock_remove
from ims.infrastructure.cli.user_commands import (
    user_activate,
    user_create,
    user_deactivate,
    user_list,
    user_login,
    user_show,
    user_update,
    user_whoami,
)
from ims.logging_config import LogContext


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """IMS: Inventory Management System"""
    ctx.with_resource(LogContext.bind(command=ctx.invoked_subcommand))


@cli.group()
def db() -> None:
    """Set up the database."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def stock() -> None:
    """Move stock in and out."""


@cli.group()
def client() -> None:
    """Manage clients."""


@cli.group()
def user() -> None:
    """Manage operator accounts."""


# Register subcommands
db.add_command(db_init)
product.add_command(product_create)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_low_stock)
product.add_command(product_show)
product.add_command(product_update)
stock.add_command(stock_add)
stock.add_command(stock_history)
stock.add_command(stock_remove)
client.add_command(client_create_business)
client.add_command(client_create_individual)
client.add_command(client_delete)
client.add_command(client_list)
client.add_command(client_search)
client.add_command(client_show)
client.add_command(client_update_business)
client.add_command(client_update_individual)
user.add_command(user_activate)
user.add_command(user_create)
user.add_command(user_deactivate)
user.add_command(user_list)
user.add_command(user_login)
user.add_command(user_show)
user.add_command(user_update)
user.add_command(user_whoami)
