"""Main CLI entry point."""

import click
from ledgerbook.database.factories import DB_PATH_ENV, create_sqlite_database
from ledgerbook.logging_setup import LOG_LEVEL_ENV, configure_logging

# Import and register all commands at module level
from ledgerbook.cli.commands import (
    account,
    add,
    book,
    categorize,
    import_cmd,
    rule,
    transaction,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help=f"Path to database file (overrides {DB_PATH_ENV} environment variable)",
    envvar=DB_PATH_ENV,
)
@click.option(
    "--log-level",
    help="Log level, e.g. INFO or DEBUG (default: WARNING)",
    envvar=LOG_LEVEL_ENV,
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str | None):
    """Ledgerbook - personal finance books.

    Group accounts into account books, import QIF bank exports, categorize
    transactions with keyword rules and follow monthly balances.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
book.register_commands(cli)
account.register_commands(cli)
import_cmd.register_commands(cli)
add.register_commands(cli)
transaction.register_commands(cli)
categorize.register_commands(cli)
rule.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
