"""Main CLI entry point."""

import logging

import click
from finledger.database.factories import DB_PATH_ENV, create_sqlite_store

# Import and register all commands at module level
from finledger.cli.commands import (
    account,
    add,
    transfer,
    view,
    summary,
    check,
    demo,
)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbosity: int) -> None:
    """Send log records to stderr at a level chosen by -v flags."""
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help=f"Path to ledger database file (overrides {DB_PATH_ENV} environment variable)",
    envvar=DB_PATH_ENV,
)
@click.option("--verbose", "-v", count=True, help="Increase log output (-v info, -vv debug)")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: int):
    """Finledger - personal finance ledger.

    Track accounts, income, expenses and transfers, and report balances,
    monthly totals, category breakdowns and budget recommendations.
    """
    ctx.ensure_object(dict)
    configure_logging(verbose)

    # Open the store only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is not None:
        store = create_sqlite_store(database_path=db_path)
        store.connect()
        store.initialize_schema()
        ctx.obj["store"] = store
        ctx.obj["ledger"] = store.load_ledger()
        ctx.call_on_close(store.disconnect)


# Register all commands
account.register_commands(cli)
add.register_commands(cli)
transfer.register_commands(cli)
view.register_commands(cli)
summary.register_commands(cli)
check.register_commands(cli)
demo.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
