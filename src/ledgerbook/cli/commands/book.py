"""Account book management commands."""

import click
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.cli.resolution import resolve_book_or_exit
from ledgerbook.domain.account_book import AccountBookService


@click.group()
def book_group():
    """Manage account books."""
    pass


@book_group.command("create")
@click.argument("name", metavar="BOOK_NAME")
@click.pass_context
def create_book(ctx, name: str):
    """Create a new account book.

    Examples:
        ledgerbook book create "Household"
    """
    service = AccountBookService(ctx.obj["db"])

    try:
        book_id = service.create_account_book(name)
        click.echo(f"Created account book '{name.strip()}' (ID: {book_id})")
    except ValueError as e:
        handle_domain_error(ctx, e)


@book_group.command("list")
@click.pass_context
def list_books(ctx):
    """List all account books."""
    service = AccountBookService(ctx.obj["db"])

    books = service.list_account_books()
    if not books:
        click.echo("No account books found.")
        return

    click.echo("\nAccount books:")
    click.echo("-" * 60)
    for book in books:
        click.echo(f"ID: {book.id:3d} | {book.name:30s} | Updated: {book.updated_at:%Y-%m-%d}")


@book_group.command("delete")
@click.argument("book", metavar="BOOK")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_book(ctx, book: str, yes: bool) -> None:
    """Delete an account book with all its accounts, transactions and rules.

    BOOK can be an account book name or ID.
    """
    service = AccountBookService(ctx.obj["db"])
    book_id = resolve_book_or_exit(ctx, book)
    book_obj = service.get_account_book(book_id)

    if not yes and not click.confirm(
        f"Delete account book '{book_obj.name}' and everything in it? This cannot be undone"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_account_book(book_id)
        click.echo(f"Deleted account book '{book_obj.name}'")
    except ValueError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register account book commands with main CLI."""
    cli.add_command(book_group, name="book")
