"""pif2pass CLI entry point."""

from pathlib import Path
from typing import Literal

import click

from pif2pass import __version__
from pif2pass.core.config import DEFAULT_INSERT_COMMAND, ImportConfig
from pif2pass.core.errors import ParseError, UnsupportedFormatError, handle_error
from pif2pass.core.logging import configure_logging
from pif2pass.models.metrics import ImportResult
from pif2pass.parsers.pif import check_extension, extract_credentials, read_pif
from pif2pass.store.pass_store import PassStore
from pif2pass.store.writer import StoreWriter

# Exit codes
EXIT_ERROR = 1
EXIT_PARSE_ERROR = 4

FORCE_ADVICE = (
    "Check the errors. Make sure these passwords do not already exist. "
    "If you're sure you want to overwrite them with the new import, "
    "try again with --force."
)

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _echo_result(result: ImportResult, quiet: bool = False) -> None:
    if not result.success:
        click.echo(f"ERROR: Failed to import {result.title}", err=True)
    elif not quiet:
        click.echo(f"Imported {result.title}")


@click.command(context_settings=CONTEXT_SETTINGS)
@click.argument(
    "filename",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--force",
    "-f",
    is_flag=True,
    default=False,
    help="Overwrite existing passwords",
)
@click.option(
    "--parallel",
    "-p",
    is_flag=True,
    default=False,
    help="Run in multiple threads.",
)
@click.option(
    "--workers",
    type=click.IntRange(1, 64),
    default=8,
    show_default=True,
    help="Thread count for --parallel",
)
@click.option(
    "--store-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="PASSWORD_STORE_DIR",
    default=None,
    help="Password store directory (default: $PASSWORD_STORE_DIR or ~/.password-store)",
)
@click.option(
    "--insert-command",
    default=DEFAULT_INSERT_COMMAND,
    show_default=True,
    help="Command that inserts a multiline entry read from stdin",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose logging to stderr",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    default=False,
    help="Only report failures",
)
@click.option(
    "--log-format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Log format for stderr (default: text)",
)
@click.version_option(version=__version__, prog_name="pif2pass")
def cli(
    filename: Path,
    force: bool,
    parallel: bool,
    workers: int,
    store_dir: Path | None,
    insert_command: str,
    verbose: bool,
    quiet: bool,
    log_format: Literal["text", "json"],
) -> None:
    """Import a 1Password export (.1pif) into a pass/gopass store.

    Web form logins are stored as <domain>/<username>, the layout
    browserpass looks up. Logins saved for several domains get symlinked
    aliases under each extra domain.
    """
    configure_logging(log_format=log_format, quiet=quiet, verbose=verbose)

    try:
        check_extension(filename)
    except UnsupportedFormatError as e:
        raise click.UsageError(str(e)) from e

    settings = {
        "force": force,
        "parallel": parallel,
        "max_workers": workers,
        "insert_command": insert_command,
    }
    if store_dir is not None:
        settings["store_dir"] = store_dir
    config = ImportConfig(**settings)

    try:
        credentials = extract_credentials(read_pif(filename))
    except ParseError as e:
        handle_error(e, EXIT_PARSE_ERROR)

    if not quiet:
        click.echo(f"Read {len(credentials)} passwords.")

    writer = StoreWriter(
        PassStore(config),
        config,
        reporter=lambda result: _echo_result(result, quiet=quiet),
    )
    summary = writer.write(credentials)

    if not summary.ok:
        click.echo(f"Failed to import {', '.join(summary.failed_titles)}", err=True)
        click.echo(FORCE_ADVICE, err=True)


def main() -> None:
    """Main entry point."""
    try:
        cli()
    except Exception as e:
        handle_error(e, EXIT_ERROR)


if __name__ == "__main__":
    main()
