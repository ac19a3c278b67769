"""SEPA credit transfer CLI application using Typer.

Builds pain.001 XML from a JSON input file, validates existing files
against the pain.001 schemas and checks IBANs.
"""

from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sepa_config import get_settings
from sepa_ct.application.services import CreditTransferService
from sepa_ct.domain.payments import CreditTransferSummary, SchemaVersion
from sepa_ct.domain.payments.validators import validate_iban
from sepa_ct.domain.shared.exceptions import DomainException
from sepa_ct.domain.shared.iban import normalize_iban
from sepa_ct.infrastructure.loaders import load_message_file
from sepa_ct.infrastructure.xml import XmlSerializer, XsdSchemaValidator
from sepa_ct.logging_config import configure_logging

app = typer.Typer(
    name="sepa-ct",
    help="SEPA Credit Transfer (pain.001) message builder",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Override the SEPA_LOG_LEVEL setting",
    ),
) -> None:
    configure_logging(log_level)


def _fail(exc: DomainException) -> NoReturn:
    err_console.print(f"[bold red]Error:[/bold red] {escape(exc.message)}")
    raise typer.Exit(code=1)


def _summary_table(summary: CreditTransferSummary) -> Table:
    table = Table(title=f"Message {summary.message_id}")
    table.add_column("Batch")
    table.add_column("Type")
    table.add_column("Execution date")
    table.add_column("Transactions", justify="right")
    table.add_column("Amount (minor units)", justify="right")

    for batch in summary.batches:
        table.add_row(
            batch.batch_id,
            batch.type or "-",
            batch.execution_date,
            str(batch.transactions),
            batch.amount,
        )
    table.add_row(
        "[bold]Total[/bold]",
        "",
        "",
        f"[bold]{summary.total_transactions}[/bold]",
        f"[bold]{summary.total_amount}[/bold]",
    )
    return table


@app.command("build")
def build(
    input_file: Path = typer.Argument(..., help="JSON file with config and payments"),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the XML here instead of stdout",
    ),
    validate_schema: bool = typer.Option(
        False,
        "--validate/--no-validate",
        help="Validate the result against the pain.001 XSD",
    ),
) -> None:
    """Build a pain.001 message from a JSON input file."""
    settings = get_settings()
    service = CreditTransferService(
        serializer=XmlSerializer(pretty_print=settings.pretty_print),
        validator=XsdSchemaValidator(settings.schema_dir),
    )

    try:
        message_input = load_message_file(input_file)
        result = service.build(
            message_input.config,
            message_input.payments,
            validate_schema=validate_schema,
        )
    except DomainException as exc:
        _fail(exc)

    if output is None:
        typer.echo(result.xml.decode("utf-8"))
    else:
        output.write_bytes(result.xml)
        console.print(f"[green]Wrote[/green] {escape(str(output))}")

    err_console.print(_summary_table(result.summary))

    if result.validation is not None:
        if result.validation.is_valid:
            err_console.print(
                f"[green]Valid against {result.validation.schema_file}[/green]"
            )
        else:
            for error in result.validation.errors:
                err_console.print(f"[red]{escape(error)}[/red]")
            raise typer.Exit(code=1)


@app.command("validate")
def validate(
    xml_file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="pain.001 XML file to validate",
    ),
    version: Optional[str] = typer.Option(
        None,
        "--version",
        help="Schema version (2 or 3); defaults to SEPA_DEFAULT_VERSION",
    ),
) -> None:
    """Validate an existing pain.001 XML file against its XSD."""
    settings = get_settings()
    try:
        schema_version = SchemaVersion(version or settings.default_version)
    except ValueError:
        err_console.print(f"[bold red]Error:[/bold red] unsupported version {version}")
        raise typer.Exit(code=2) from None

    validator = XsdSchemaValidator(settings.schema_dir)
    try:
        result = validator.validate(xml_file.read_bytes(), schema_version)
    except DomainException as exc:
        _fail(exc)

    if result.is_valid:
        console.print(
            f"[green]Valid against {result.schema_file}:[/green] {escape(str(xml_file))}"
        )
        return
    for error in result.errors:
        console.print(f"[red]{escape(error)}[/red]")
    raise typer.Exit(code=1)


@app.command("check-iban")
def check_iban(iban: str = typer.Argument(..., help="IBAN to check")) -> None:
    """Check IBAN format and checksum."""
    reason = validate_iban(normalize_iban(iban) or "")
    if reason is None:
        console.print(f"[green]{escape(iban)} is valid[/green]")
        return
    console.print(f"[red]{escape(reason)}[/red]")
    raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
