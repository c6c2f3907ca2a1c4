"""Transaction viewing commands."""

import click
from datetime import date
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.cli.resolution import resolve_account_or_exit, resolve_book_or_exit
from ledgerbook.domain.transaction import TransactionService
from ledgerbook.utils.date_parser import format_month


@click.group()
def transaction_group():
    """View transactions."""
    pass


@transaction_group.command("list")
@click.argument("book", metavar="BOOK")
@click.argument("account", metavar="ACCOUNT")
@click.option("--month", help="Month to list (YYYY-MM, defaults to the current month)")
@click.pass_context
def list_transactions(ctx, book: str, account: str, month: str | None) -> None:
    """List an account's transactions for one month.

    Examples:
        ledgerbook transaction list Household Everyday --month 2024-03
    """
    service = TransactionService(ctx.obj["db"])
    book_id = resolve_book_or_exit(ctx, book)
    account_id = resolve_account_or_exit(ctx, book_id, account)
    month = month or format_month(date.today())

    try:
        transactions = service.list_month(account_id, month)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not transactions:
        click.echo(f"No transactions found for {month}.")
        return

    click.echo(
        f"\n{'ID':>5}  {'Date':<10}  {'Description':<30}  {'Category':<25}  {'Debit':>10}  {'Credit':>10}"
    )
    click.echo("-" * 100)
    for txn in transactions:
        category = txn.category + (f" > {txn.sub_category}" if txn.sub_category else "")
        click.echo(
            f"{txn.id:>5}  {txn.transaction_date.isoformat():<10}  {txn.description[:30]:<30}  "
            f"{category[:25]:<25}  {txn.debit_amount:>10,.2f}  {txn.credit_amount:>10,.2f}"
        )
    click.echo(f"\nTotal: {len(transactions)} transaction{'s' if len(transactions) != 1 else ''}")


@transaction_group.command("categories")
@click.argument("book", metavar="BOOK")
@click.pass_context
def list_categories(ctx, book: str) -> None:
    """List the categories used by an account book's transactions."""
    service = TransactionService(ctx.obj["db"])
    book_id = resolve_book_or_exit(ctx, book)

    categories = service.distinct_categories(book_id)
    if not categories:
        click.echo("No categories found.")
        return
    for category in categories:
        click.echo(category)


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
