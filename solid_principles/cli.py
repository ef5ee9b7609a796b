"""Command line entry point that runs each SOLID demo."""

from __future__ import annotations

from typing import Optional, Tuple

import click

from solid_principles.core import config
from solid_principles.core.exceptions import (
    InvalidArgumentError,
    UnsupportedOperationError,
)
from solid_principles.core.logging_config import get_logger, setup_logging
from solid_principles.domain.entities import (
    Color,
    Document,
    Journal,
    Product,
    Rectangle,
    Size,
    Square,
)
from solid_principles.domain.specifications import (
    AndSpecification,
    ColorSpecification,
    SizeSpecification,
)
from solid_principles.repositories.journal_repository import JournalFileRepository
from solid_principles.services.geometry_service import describe
from solid_principles.services.machines import (
    FaxMachine,
    MultiFunctionMachine,
    MultiFunctionPrinter,
    OldFashionPrinter,
    PhotoCopier,
    Printer,
    Scanner,
)
from solid_principles.services.product_filter import BetterFilter, ProductFilter

logger = get_logger(__name__)

DEFAULT_ENTRIES = ("Today I started one big change", "I fixed the build")


def sample_products() -> Tuple[Product, ...]:
    return (
        Product("Apple", Color.GREEN, Size.SMALL),
        Product("Tree", Color.GREEN, Size.LARGE),
        Product("House", Color.BLUE, Size.LARGE),
    )


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(config.VALID_LOG_LEVELS, case_sensitive=False),
    help="Overrides the SOLID_LOG_LEVEL environment variable.",
)
def cli(log_level: Optional[str]) -> None:
    """Run small demos of the SOLID design principles."""
    setup_logging(
        log_level=log_level or config.get_log_level(),
        log_to_file=config.get_log_to_file(),
        use_json_format=config.get_log_json(),
    )


@cli.command("journal")
@click.argument("entries", nargs=-1)
@click.option(
    "--path",
    "path",
    default=None,
    help="File to save the journal to. Overrides SOLID_JOURNAL_PATH.",
)
@click.option("--save/--no-save", default=False, help="Write the journal to disk.")
@click.option(
    "--overwrite/--no-overwrite",
    default=False,
    help="Replace the file if it already exists.",
)
def journal_command(
    entries: Tuple[str, ...], path: Optional[str], save: bool, overwrite: bool
) -> None:
    """Single responsibility: a journal plus a separate persistence object."""
    journal = Journal()
    for text in entries or DEFAULT_ENTRIES:
        journal.add_entry(text)
    click.echo(str(journal))

    if not save:
        return

    target = path or config.get_journal_path()
    if JournalFileRepository().save_to_file(journal, target, overwrite=overwrite):
        click.echo(f"Saved to {target}")
    else:
        raise click.ClickException(
            f"{target} already exists. Use --overwrite to replace it."
        )


@cli.command("liskov")
def liskov_command() -> None:
    """Liskov substitution: a Square used through a Rectangle reference."""
    rc = Rectangle(2, 3)
    click.echo(describe(rc))

    sq: Rectangle = Square()
    sq.width = 4
    click.echo(describe(sq))


@cli.command("filters")
def filters_command() -> None:
    """Open/closed: filtering products with composable specifications."""
    products = sample_products()

    click.echo("Green products (old):")
    for p in ProductFilter().filter_by_color(products, Color.GREEN):
        click.echo(f" - {p.name} is green")

    bf = BetterFilter()
    click.echo("Green products (new):")
    for p in bf.filter(products, ColorSpecification(Color.GREEN)):
        click.echo(f" - {p.name} is green")

    click.echo("Large blue items:")
    large_blue = AndSpecification(
        ColorSpecification(Color.BLUE), SizeSpecification(Size.LARGE)
    )
    for p in bf.filter(products, large_blue):
        click.echo(f" - {p.name} is big and blue")


@cli.command("machines")
@click.option("--title", default="Quarterly report", help="Title of the document.")
def machines_command(title: str) -> None:
    """Interface segregation: devices implementing only what they support."""
    document = Document(title=title)
    devices = {
        "MultiFunctionPrinter": MultiFunctionPrinter(),
        "OldFashionPrinter": OldFashionPrinter(),
        "Printer": Printer(),
        "Scanner": Scanner(),
        "FaxMachine": FaxMachine(),
        "PhotoCopier": PhotoCopier(),
        "MultiFunctionMachine": MultiFunctionMachine(Printer(), Scanner()),
    }

    for name, device in devices.items():
        for operation in ("print", "scan", "fax"):
            action = getattr(device, operation, None)
            if action is None:
                continue
            try:
                click.echo(f"{name}: {action(document)}")
            except UnsupportedOperationError as e:
                click.echo(f"{name}: {e}")


def main() -> None:
    try:
        cli()
    except InvalidArgumentError as e:
        logger.error("Invalid argument", extra={"context": {"field": e.field}})
        raise SystemExit(f"Error: {e}")


if __name__ == "__main__":
    main()
