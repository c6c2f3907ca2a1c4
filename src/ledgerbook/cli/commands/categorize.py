"""Category assignment command."""

import click
from ledgerbook.domain.transaction import TransactionService


@click.command("categorize")
@click.argument("transaction_ids", nargs=-1, required=True, type=int)
@click.argument("category", nargs=1)
@click.option("--sub-category", default="", help="Sub-category")
@click.pass_context
def categorize_transactions(ctx, transaction_ids: tuple[int, ...], category: str, sub_category: str):
    """Assign a category to one or more transactions.

    Examples:
        ledgerbook categorize 1 Groceries
        ledgerbook categorize 1 2 3 Food --sub-category Takeaway
    """
    service = TransactionService(ctx.obj["db"])

    updated = service.update_categories(list(transaction_ids), category, sub_category)
    requested = len(set(transaction_ids))
    label = category + (f" > {sub_category}" if sub_category else "")
    click.echo(f"Categorized {updated} transaction{'s' if updated != 1 else ''} as '{label}'")
    if updated < requested:
        click.echo(f"Error: {requested - updated} transaction(s) not found", err=True)
        ctx.exit(1)


def register_commands(cli):
    """Register categorize command with main CLI."""
    cli.add_command(categorize_transactions)
