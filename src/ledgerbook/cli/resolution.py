"""CLI helpers for account book and account resolution."""

from __future__ import annotations

import click
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.domain.account import AccountService
from ledgerbook.domain.account_book import AccountBookService
from ledgerbook.utils.account_resolver import resolve_account, resolve_account_book


def resolve_book_or_exit(ctx: click.Context, book: str | int) -> int:
    """Resolve account book name or ID, or exit with a CLI error."""
    try:
        return resolve_account_book(AccountBookService(ctx.obj["db"]), book)
    except ValueError as exc:
        handle_domain_error(ctx, exc)


def resolve_account_or_exit(
    ctx: click.Context, account_book_id: int, account: str | int
) -> int:
    """Resolve account name or ID inside an account book, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_account(AccountService(ctx.obj["db"]), account_book_id, account)
    except ValueError as exc:
        handle_domain_error(ctx, exc)
