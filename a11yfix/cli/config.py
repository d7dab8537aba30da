"""Config Typer app factory."""

import typer

from a11yfix.api.config.cmd_set import cmd_set
from a11yfix.api.config.cmd_show import cmd_show
from a11yfix.cli._handle_stage_result import _handle_stage_result


def config() -> typer.Typer:
    """Create and configure the config Typer app."""
    app = typer.Typer(
        name="config",
        help="Configuration operations",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Show help when no subcommand is provided."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=False)
            raise typer.Exit()

    @app.command(name="show")
    def show_cmd(
        section: str = typer.Argument("", help="Configuration section name (empty for all)"),
    ) -> None:
        """Show the effective configuration."""
        _handle_stage_result(cmd_show)(section)

    @app.command(name="set")
    def set_cmd(
        key: str = typer.Argument(..., help="Dotted key, e.g. patch.fuzz_factor"),
        value: str = typer.Argument("", help="New value, read as JSON when possible"),
        delete: bool = typer.Option(False, "--delete", help="Reset the key to its default"),
    ) -> None:
        """Change one configuration value."""
        if not delete and not value:
            typer.echo("Error: VALUE is required unless --delete is given", err=True)
            raise typer.Exit(1)
        _handle_stage_result(cmd_set)(key, value, delete)

    return app
