"""Add transaction command."""

import click
from decimal import Decimal
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.cli.resolution import resolve_account_or_exit, resolve_book_or_exit
from ledgerbook.domain.transaction import TransactionService
from ledgerbook.utils.date_parser import parse_date
from ledgerbook.utils.amount_parser import parse_amount


@click.command("add")
@click.option("--book", required=True, help="Account book name or ID")
@click.option("--account", required=True, help="Account name or ID")
@click.option(
    "--date",
    required=True,
    help="Transaction date (YYYY-MM-DD, DD/MM/YYYY or relative like 'today', 'yesterday')",
)
@click.option("--description", required=True, help="Transaction description")
@click.option("--debit", help="Amount of money going out (e.g., 42.50)")
@click.option("--credit", help="Amount of money coming in (e.g., 1000.00)")
@click.option("--category", help="Category (defaults to 'Uncategorized')")
@click.option("--sub-category", help="Sub-category")
@click.pass_context
def add_transaction(
    ctx,
    book: str,
    account: str,
    date: str,
    description: str,
    debit: str | None,
    credit: str | None,
    category: str | None,
    sub_category: str | None,
):
    """Add a transaction manually.

    Exactly one of --debit or --credit is required.

    Examples:
        ledgerbook add --book Household --account Everyday --date 2024-01-15 --debit 50.00 --description "Grocery store"
        ledgerbook add --book 1 --account 2 --date today --credit 1000 --description Payroll --category Income --sub-category Salary
    """
    if (debit is None) == (credit is None):
        click.echo("Error: Specify exactly one of --debit or --credit.", err=True)
        ctx.exit(1)

    service = TransactionService(ctx.obj["db"])
    book_id = resolve_book_or_exit(ctx, book)
    account_id = resolve_account_or_exit(ctx, book_id, account)

    try:
        txn_date = parse_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        txn_amount = parse_amount(debit if debit is not None else credit)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        txn = service.create_transaction(
            account_id=account_id,
            account_book_id=book_id,
            transaction_date=txn_date,
            description=description,
            debit_amount=txn_amount if debit is not None else Decimal("0"),
            credit_amount=txn_amount if credit is not None else Decimal("0"),
            category=category,
            sub_category=sub_category,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created transaction {txn.id}")
    click.echo(f"  Date: {txn.transaction_date.isoformat()}")
    if debit is not None:
        click.echo(f"  Debit: {txn.debit_amount:,.2f}")
    else:
        click.echo(f"  Credit: {txn.credit_amount:,.2f}")
    click.echo(f"  Description: {txn.description}")
    click.echo(f"  Category: {txn.category}" + (f" > {txn.sub_category}" if txn.sub_category else ""))


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
