"""Root typer application."""

import logging

import typer

from a11yfix.api.config.A11yConfig import A11yConfig
from a11yfix.cli._handle_stage_result import DISPLAY_FORMATS
from a11yfix.cli.apply import apply
from a11yfix.cli.config import config
from a11yfix.cli.diff import diff
from a11yfix.cli.retarget import retarget
from a11yfix.utils.logger import configure_logging


def _create_app() -> typer.Typer:
    """Build the ``a11yfix`` command tree: diff, apply, retarget and config."""
    app = typer.Typer(
        help="Reconcile model-suggested accessibility fixes with HTML sources",
        invoke_without_command=True,
        context_settings={"help_option_names": ["-h", "--help"]},
        pretty_exceptions_enable=False,
        pretty_exceptions_show_locals=False,
    )

    for name, command in (("diff", diff), ("apply", apply), ("retarget", retarget)):
        app.command(name=name)(command)
    app.add_typer(config(), name="config")

    @app.callback(invoke_without_command=True)
    def root(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format for results: json or yaml"),
        verbose: bool = typer.Option(False, "--verbose", help="Log at DEBUG level and mirror logs to stderr"),
    ) -> None:
        if display not in DISPLAY_FORMATS:
            typer.echo(f"Error: --display must be one of {', '.join(DISPLAY_FORMATS)} (found: {display!r})", err=True)
            raise typer.Exit(1)
        ctx.ensure_object(dict)["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()
        _setup_logging(verbose)

    return app


def _setup_logging(verbose: bool) -> None:
    """Configure logging from the config file, DEBUG to stderr when verbose."""
    try:
        log_config = A11yConfig.load().log
    except ValueError:
        # Commands report the invalid config themselves
        log_config = A11yConfig().log
    configure_logging(
        level=logging.DEBUG if verbose else log_config.logging_level,
        max_bytes=log_config.max_bytes,
        backup_count=log_config.backup_count,
        stderr=verbose,
    )
