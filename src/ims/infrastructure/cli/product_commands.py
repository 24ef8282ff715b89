"""CLI commands for the Product aggregate."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from uuid import UUID

import click

from ims.application.create_product import CreateProductHandler
from ims.application.delete_product import DeleteProductHandler
from ims.application.dto import (
    AromaBombelProductDTO,
    AromaBombelSpec,
    AromaBottleProductDTO,
    AromaBottleSpec,
    AromaDeviceProductDTO,
    AromaDeviceSpec,
    BatteryProductDTO,
    BatterySpec,
    ProductDTO,
    ProductSpec,
    SanitizingDeviceProductDTO,
    SanitizingDeviceSpec,
)
from ims.application.list_low_stock import ListLowStockHandler
from ims.application.list_products import ListProductsHandler
from ims.application.show_product import ShowProductHandler
from ims.application.update_product import UpdateProductHandler
from ims.domain.exceptions import DomainException
from ims.domain.model.enums import ProductType
from ims.infrastructure.bootstrap import settings, unit_of_work
from ims.infrastructure.cli.common import echo_fields

PRODUCT_TYPE_NAMES = [t.label for t in ProductType]


def _product_type(label: str) -> ProductType:
    return next(t for t in ProductType if t.label.lower() == label.lower())


def _decimal(value: str | None, option: str) -> Decimal | None:
    if value is None:
        return None
    try:
        return Decimal(value)
    except InvalidOperation:
        raise click.BadParameter(f"Invalid number '{value}'.", param_hint=option)


def product_details_options(func):
    """Options shared by ``create`` and ``update``."""
    options = [
        click.option("--type", "type_name", required=True,
                     type=click.Choice(PRODUCT_TYPE_NAMES, case_sensitive=False),
                     help="Product category."),
        click.option("--name", required=True, help="Product name."),
        click.option("--price", required=True, help="Price (e.g. 15.00)."),
        click.option("--currency", default="ALL", show_default=True, help="3-letter currency code."),
        click.option("--description", default=None, help="Free-text description."),
        click.option("--photo-url", default=None, help="http(s) URL of a product photo."),
        click.option("--taste", "taste_id", type=int, default=None,
                     help="Taste id (aroma bombel / bottle): 1 Flower, 2 Sweet, 3 Fresh, 4 Fruit."),
        click.option("--color", "color_id", type=int, default=None, help="Color id 1-11 (devices)."),
        click.option("--format", "fmt", default=None, help="Device format."),
        click.option("--programs", default=None, help="Device programs."),
        click.option("--plug-type", "plug_type_id", type=int, default=None,
                     help="Plug type id (devices): 1 WithPlug, 2 WithoutPlug."),
        click.option("--square-meter", default=None, help="Coverage in m2 (aroma device)."),
        click.option("--battery-type", default=None, help="Battery type."),
        click.option("--size", "size_id", type=int, default=None, help="Battery size id: 1 LR6, 2 LR9."),
        click.option("--brand", default=None, help="Battery brand."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _build_spec(type_name: str, **opts) -> ProductSpec:
    common = dict(
        name=opts["name"],
        price=opts["price"],
        currency=opts["currency"],
        description=opts["description"],
        photo_url=opts["photo_url"],
    )
    product_type = _product_type(type_name)

    if product_type is ProductType.AROMA_BOMBEL:
        return AromaBombelSpec(**common, taste_id=opts["taste_id"])
    if product_type is ProductType.AROMA_BOTTLE:
        return AromaBottleSpec(**common, taste_id=opts["taste_id"])
    if product_type is ProductType.AROMA_DEVICE:
        return AromaDeviceSpec(
            **common,
            plug_type_id=opts["plug_type_id"],
            color_id=opts["color_id"],
            format=opts["fmt"],
            programs=opts["programs"],
            square_meter=_decimal(opts["square_meter"], "--square-meter"),
        )
    if product_type is ProductType.SANITIZING_DEVICE:
        return SanitizingDeviceSpec(
            **common,
            plug_type_id=opts["plug_type_id"],
            color_id=opts["color_id"],
            format=opts["fmt"],
            programs=opts["programs"],
        )
    return BatterySpec(
        **common,
        type=opts["battery_type"],
        size_id=opts["size_id"],
        brand=opts["brand"],
    )


def _display_product(dto: ProductDTO) -> None:
    """Shared formatting for displaying one product."""
    pairs: list[tuple[str, object]] = [
        ("ID", dto.id),
        ("Name", dto.name),
        ("Type", dto.product_type),
        ("Price", dto.display_price),
        ("Stock", f"{dto.stock_quantity}{'  (low)' if dto.is_low_stock else ''}"),
        ("Active", "yes" if dto.is_active else "no"),
        ("Description", dto.description),
        ("Photo", dto.photo_url),
    ]
    match dto:
        case AromaBombelProductDTO() | AromaBottleProductDTO():
            pairs.append(("Taste", dto.taste))
        case AromaDeviceProductDTO():
            pairs += [
                ("Plug type", dto.plug_type),
                ("Color", dto.color),
                ("Format", dto.format),
                ("Programs", dto.programs),
                ("Square meters", dto.square_meter),
            ]
        case SanitizingDeviceProductDTO():
            pairs += [
                ("Plug type", dto.plug_type),
                ("Color", dto.color),
                ("Format", dto.format),
                ("Programs", dto.programs),
            ]
        case BatteryProductDTO():
            pairs += [("Battery type", dto.type), ("Size", dto.size), ("Brand", dto.brand)]
    pairs += [("Created", dto.created_at), ("Updated", dto.updated_at)]
    echo_fields(pairs)


def _display_table(products: list[ProductDTO]) -> None:
    click.echo(f"{'ID':<36}  {'Name':<24} {'Type':<17} {'Price':>14} {'Stock':>6}")
    click.echo("-" * 102)
    for p in products:
        click.echo(
            f"{str(p.id):<36}  {p.name[:24]:<24} {p.product_type:<17} "
            f"{p.display_price:>14} {p.stock_quantity:>6}"
        )


@click.command("create")
@product_details_options
def product_create(type_name: str, **opts) -> None:
    """Add a new product to the catalog."""
    spec = _build_spec(type_name, **opts)

    try:
        with unit_of_work() as repos:
            handler = CreateProductHandler(
                product_repo=repos.products,
                low_stock_threshold=settings().low_stock_threshold,
            )
            dto = handler.handle(spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product '{dto.name}' ({dto.product_type}) created with ID {dto.id}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=click.UUID, help="Product ID.")
@product_details_options
def product_update(product_id: UUID, type_name: str, **opts) -> None:
    """Replace a product's catalog details (stock is untouched)."""
    spec = _build_spec(type_name, **opts)

    try:
        with unit_of_work() as repos:
            handler = UpdateProductHandler(
                product_repo=repos.products,
                low_stock_threshold=settings().low_stock_threshold,
            )
            dto = handler.handle(product_id, spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product '{dto.name}' updated")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=click.UUID, help="Product ID.")
def product_delete(product_id: UUID) -> None:
    """Remove a product from the catalog (it must have no stock)."""
    try:
        with unit_of_work() as repos:
            DeleteProductHandler(product_repo=repos.products).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} deleted")


@click.command("show")
@click.option("--id", "product_id", required=True, type=click.UUID, help="Product ID.")
def product_show(product_id: UUID) -> None:
    """Show details of a product."""
    try:
        with unit_of_work() as repos:
            handler = ShowProductHandler(
                product_repo=repos.products,
                low_stock_threshold=settings().low_stock_threshold,
            )
            dto = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(dto)


@click.command("list")
@click.option("--type", "type_name", default=None,
              type=click.Choice(PRODUCT_TYPE_NAMES, case_sensitive=False),
              help="Only this category.")
@click.option("--include-inactive", is_flag=True, default=False, help="Include deleted products.")
def product_list(type_name: str | None, include_inactive: bool) -> None:
    """List products in the catalog."""
    type_id = int(_product_type(type_name)) if type_name else None

    try:
        with unit_of_work() as repos:
            handler = ListProductsHandler(
                product_repo=repos.products,
                low_stock_threshold=settings().low_stock_threshold,
            )
            products = handler.handle(product_type_id=type_id, include_inactive=include_inactive)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return
    _display_table(products)


@click.command("low-stock")
@click.option("--threshold", type=int, default=None,
              help="Stock level at or below which a product is listed (default from IMS_LOW_STOCK_THRESHOLD).")
def product_low_stock(threshold: int | None) -> None:
    """List active products that are running low."""
    try:
        with unit_of_work() as repos:
            handler = ListLowStockHandler(
                product_repo=repos.products,
                low_stock_threshold=settings().low_stock_threshold,
            )
            products = handler.handle(threshold)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products are low on stock.")
        return
    _display_table(products)
