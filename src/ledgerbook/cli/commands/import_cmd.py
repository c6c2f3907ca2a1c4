"""QIF import command."""

import click
from ledgerbook.cli.resolution import resolve_account_or_exit, resolve_book_or_exit
from ledgerbook.domain.qif_import import QIFImportService


@click.command("import")
@click.argument("qif_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--book", required=True, help="Account book name or ID")
@click.option("--account", required=True, help="Account name or ID")
@click.pass_context
def import_qif(ctx, qif_file: str, book: str, account: str):
    """Import transactions from a QIF file.

    Uncategorized transactions are categorized with the account book's rules.

    Examples:
        ledgerbook import statement.qif --book Household --account Everyday
    """
    db = ctx.obj["db"]
    service = QIFImportService(db)
    book_id = resolve_book_or_exit(ctx, book)
    account_id = resolve_account_or_exit(ctx, book_id, account)

    try:
        result = service.import_qif_file(qif_file, account_id=account_id, account_book_id=book_id)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    click.echo("\nImport complete:")
    click.echo(f"  Imported: {result.imported} of {result.parsed} transactions")
    if result.errors:
        click.echo(f"  Errors: {len(result.errors)}")
        for error in result.errors:
            click.echo(f"    {error}", err=True)
        ctx.exit(1)


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_qif)
