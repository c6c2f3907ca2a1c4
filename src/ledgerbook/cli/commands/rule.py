"""Category rule commands."""

import click
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.cli.resolution import resolve_book_or_exit
from ledgerbook.domain.category_rule import CategoryRuleService


@click.group()
def rule_group():
    """Manage keyword categorization rules."""
    pass


@rule_group.command("create")
@click.argument("book", metavar="BOOK")
@click.argument("keyword")
@click.argument("category")
@click.option("--sub-category", default="", help="Sub-category assigned on match")
@click.pass_context
def create_rule(ctx, book: str, keyword: str, category: str, sub_category: str):
    """Create a rule: descriptions containing KEYWORD get CATEGORY.

    Matching ignores case. Rules are tried oldest first.

    Examples:
        ledgerbook rule create Household coles Groceries
        ledgerbook rule create Household netflix Subscriptions --sub-category Streaming
    """
    service = CategoryRuleService(ctx.obj["db"])
    book_id = resolve_book_or_exit(ctx, book)

    try:
        rule_id = service.create_rule(book_id, keyword, category, sub_category)
        click.echo(f"Created rule '{keyword}' -> '{category}' (ID: {rule_id})")
    except ValueError as e:
        handle_domain_error(ctx, e)


@rule_group.command("list")
@click.argument("book", metavar="BOOK")
@click.pass_context
def list_rules(ctx, book: str):
    """List an account book's rules in the order they are tried."""
    service = CategoryRuleService(ctx.obj["db"])
    book_id = resolve_book_or_exit(ctx, book)

    rules = service.list_rules(book_id)
    if not rules:
        click.echo("No rules found.")
        return

    click.echo("\nRules:")
    click.echo("-" * 60)
    for rule in rules:
        target = rule.category + (f" > {rule.sub_category}" if rule.sub_category else "")
        click.echo(f"ID: {rule.id:3d} | {rule.keyword:20s} | {target}")


@rule_group.command("delete")
@click.argument("rule_id", type=int)
@click.pass_context
def delete_rule(ctx, rule_id: int):
    """Delete a rule."""
    service = CategoryRuleService(ctx.obj["db"])

    try:
        service.delete_rule(rule_id)
        click.echo(f"Deleted rule {rule_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@rule_group.command("apply")
@click.argument("book", metavar="BOOK")
@click.pass_context
def apply_rules(ctx, book: str):
    """Apply the rules to every uncategorized transaction of an account book."""
    service = CategoryRuleService(ctx.obj["db"])
    book_id = resolve_book_or_exit(ctx, book)

    updated = service.apply_rules_to_uncategorized(book_id)
    click.echo(f"Updated {updated} transaction{'s' if updated != 1 else ''}")


def register_commands(cli):
    """Register rule commands with main CLI."""
    cli.add_command(rule_group, name="rule")
