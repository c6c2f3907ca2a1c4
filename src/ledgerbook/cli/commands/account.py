"""Account management commands."""

import click
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.cli.resolution import resolve_account_or_exit, resolve_book_or_exit
from ledgerbook.domain.account import AccountService


@click.group()
def account_group():
    """Manage accounts."""
    pass


@account_group.command("create")
@click.argument("book", metavar="BOOK")
@click.argument("name", metavar="ACCOUNT_NAME")
@click.pass_context
def create_account(ctx, book: str, name: str):
    """Create a new account in an account book.

    Examples:
        ledgerbook account create Household "Everyday"
    """
    service = AccountService(ctx.obj["db"])
    book_id = resolve_book_or_exit(ctx, book)

    try:
        account_id = service.create_account(book_id, name)
        click.echo(f"Created account '{name.strip()}' (ID: {account_id})")
    except ValueError as e:
        handle_domain_error(ctx, e)


@account_group.command("list")
@click.argument("book", metavar="BOOK")
@click.pass_context
def list_accounts(ctx, book: str):
    """List the accounts of an account book with this month's totals."""
    service = AccountService(ctx.obj["db"])
    book_id = resolve_book_or_exit(ctx, book)

    accounts = service.list_accounts(book_id)
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 80)
    for acc in accounts:
        click.echo(
            f"ID: {acc.id:3d} | {acc.name:20s} | "
            f"Balance: {acc.total_monthly_balance:>12,.2f} | "
            f"Debits: {acc.total_monthly_debits:>10,.2f} | "
            f"Credits: {acc.total_monthly_credits:>10,.2f}"
        )


@account_group.command("show")
@click.argument("book", metavar="BOOK")
@click.argument("account", metavar="ACCOUNT")
@click.pass_context
def show_account(ctx, book: str, account: str):
    """Show an account's month-by-month history.

    ACCOUNT can be an account name or ID.
    """
    service = AccountService(ctx.obj["db"])
    book_id = resolve_book_or_exit(ctx, book)
    account_id = resolve_account_or_exit(ctx, book_id, account)
    acc = service.get_account(account_id)

    click.echo(f"\n{acc.name} (ID: {acc.id})")
    click.echo(
        f"This month: balance {acc.total_monthly_balance:,.2f}, "
        f"debits {acc.total_monthly_debits:,.2f}, credits {acc.total_monthly_credits:,.2f}"
    )
    if not acc.historical_balance:
        click.echo("No transactions yet.")
        return

    click.echo(f"\n{'Month':<8} {'Debits':>14} {'Credits':>14} {'Balance':>14}")
    click.echo("-" * 53)
    for entry in acc.historical_balance:
        click.echo(
            f"{entry.month:<8} {entry.debits:>14,.2f} {entry.credits:>14,.2f} {entry.balance:>14,.2f}"
        )


@account_group.command("delete")
@click.argument("book", metavar="BOOK")
@click.argument("account", metavar="ACCOUNT")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_account(ctx, book: str, account: str, yes: bool) -> None:
    """Delete an account and all of its transactions.

    ACCOUNT can be an account name or ID.

    Examples:
        ledgerbook account delete Household "Everyday"
        ledgerbook account delete 1 3 --yes
    """
    service = AccountService(ctx.obj["db"])
    book_id = resolve_book_or_exit(ctx, book)
    account_id = resolve_account_or_exit(ctx, book_id, account)
    account_obj = service.get_account(account_id)

    if not yes and not click.confirm(
        f"Are you sure you want to delete account '{account_obj.name}' (ID: {account_id}) and all its data?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_account(account_id)
        click.echo(f"Deleted account '{account_obj.name}'")
    except ValueError as e:
        handle_domain_error(ctx, e)


@account_group.command("clear")
@click.argument("book", metavar="BOOK")
@click.argument("account", metavar="ACCOUNT")
@click.option("--month", help="Clear one month (YYYY-MM)")
@click.option("--last-month", is_flag=True, help="Clear the previous calendar month")
@click.option("--all", "clear_all", is_flag=True, help="Clear every transaction")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def clear_account(
    ctx, book: str, account: str, month: str | None, last_month: bool, clear_all: bool, yes: bool
) -> None:
    """Delete an account's transactions for a month, last month or all time.

    Account totals are recomputed afterwards.

    Examples:
        ledgerbook account clear Household Everyday --month 2024-03
        ledgerbook account clear Household Everyday --last-month
        ledgerbook account clear Household Everyday --all --yes
    """
    chosen = sum(1 for is_set in (month is not None, last_month, clear_all) if is_set)
    if chosen != 1:
        click.echo("Error: Specify exactly one of --month, --last-month or --all.", err=True)
        ctx.exit(1)

    service = AccountService(ctx.obj["db"])
    book_id = resolve_book_or_exit(ctx, book)
    account_id = resolve_account_or_exit(ctx, book_id, account)
    account_obj = service.get_account(account_id)

    scope = f"month {month}" if month else ("last month" if last_month else "all time")
    if not yes and not click.confirm(
        f"Remove transactions of '{account_obj.name}' for {scope}? This cannot be undone"
    ):
        click.echo("Clear cancelled.")
        return

    try:
        if month:
            deleted = service.clear_month(account_id, month)
        elif last_month:
            deleted = service.clear_last_month(account_id)
        else:
            deleted = service.clear_all(account_id)
        click.echo(f"Removed {deleted} transaction{'s' if deleted != 1 else ''} from '{account_obj.name}'")
    except ValueError as e:
        handle_domain_error(ctx, e)


@account_group.command("recompute")
@click.argument("book", metavar="BOOK")
@click.argument("account", metavar="ACCOUNT")
@click.pass_context
def recompute_account(ctx, book: str, account: str) -> None:
    """Rebuild an account's monthly totals from its transactions."""
    service = AccountService(ctx.obj["db"])
    book_id = resolve_book_or_exit(ctx, book)
    account_id = resolve_account_or_exit(ctx, book_id, account)

    series = service.recompute(account_id)
    click.echo(f"Recomputed {len(series)} month{'s' if len(series) != 1 else ''}")


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
