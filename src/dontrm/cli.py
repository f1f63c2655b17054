"""dontrm CLI - Main entry point."""

from __future__ import annotations

import sys

import typer

from dontrm.config import load_config
from dontrm.core.delegate import DelegateError, RmDelegate
from dontrm.safety.classifier import BlockedOperationError, check_args
from dontrm.safety.expansion import GlobSyntaxError, expand, is_glob
from dontrm.safety.flags import split_arguments
from dontrm.ui.console import (
    configure_logging,
    create_console,
    print_error,
    print_notice,
    print_version,
)

VERSION_KEYWORD = "version"

app = typer.Typer(
    name="dontrm",
    help="A safe wrapper around rm that refuses to delete system directories.",
    add_completion=False,
)
console = create_console()
err_console = create_console(stderr=True)


def _print_dry_run_preview(delegate: RmDelegate, args: list[str]) -> None:
    """Show what would have been deleted.

    Operands that still contain wildcards (quoted, or unmatched by the
    shell) are expanded against the filesystem for display.

    Raises:
        typer.Exit: If an operand is not a valid glob pattern.
    """
    print_notice(err_console, f"Dry run - would run: {delegate.describe(args)}")

    _, operands = split_arguments(args)
    for operand in operands:
        if not is_glob(operand):
            continue
        try:
            matches = expand(operand)
        except GlobSyntaxError as e:
            print_error(err_console, str(e))
            raise typer.Exit(1) from e
        shown = " ".join(matches) if matches else "(no matches)"
        print_notice(err_console, f"  {operand} -> {shown}")


@app.command(context_settings={"ignore_unknown_options": True, "allow_extra_args": True})
def rm(
    args: list[str] | None = typer.Argument(
        None,
        help="Arguments passed through to rm unchanged",
        metavar="[RM ARGS]...",
    ),
) -> None:
    """Delete files with rm, unless that would wipe out a system directory."""
    args = list(args or [])

    if args and args[0] == VERSION_KEYWORD:
        print_version(console)
        raise typer.Exit(0)

    try:
        config = load_config()
    except ValueError as e:
        print_error(err_console, f"Config error: {e}")
        raise typer.Exit(1) from e

    configure_logging(err_console, config.logging.level_number)

    try:
        check_args(args)
    except BlockedOperationError as e:
        print_error(err_console, str(e))
        raise typer.Exit(1) from e

    delegate = RmDelegate(config.defaults.rm_path)

    if config.defaults.dry_run:
        _print_dry_run_preview(delegate, args)
        raise typer.Exit(0)

    try:
        exit_code = delegate.run(args)
    except DelegateError as e:
        print_error(err_console, str(e))
        raise typer.Exit(1) from e

    raise typer.Exit(exit_code)


def main() -> None:
    """Console script entry point."""
    # Leading "--" keeps click from parsing rm's options or eating its "--"
    app(args=["--", *sys.argv[1:]], prog_name="dontrm")


if __name__ == "__main__":
    main()
