"""Main CLI entry point for envguard."""

from typing import Optional

import typer

from envguard.cli.utils import console, report_error, report_startup_error
from envguard.utils.errors import ConfigurationError, EnvGuardError

app = typer.Typer(
    name="envguard",
    help="Count arguments, check FOO against its allow-list and answer the stdin sentinel.",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        from envguard import __version__

        console.print(f"envguard version {__version__}")
        raise typer.Exit()


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the envguard version and exit",
    ),
) -> None:
    """
    Run the envguard checks.

    Accepts at most one argument. [bold]--bad-flag[/bold] is rejected;
    [bold]--check-env[/bold] validates [bold]FOO[/bold] against its
    allowed values. One line is then read from stdin.

    Example:
        echo pink | FOO=bar envguard --check-env
    """
    from envguard.core.driver import GuardDriver
    from envguard.utils.config import load_config
    from envguard.utils.logging import configure_logging

    try:
        config = load_config()
    except ConfigurationError as e:
        report_startup_error(e)
        return

    configure_logging(level=config.log_level, structured=config.structured_logs)

    driver = GuardDriver()
    try:
        driver.run(list(ctx.args))
    except EnvGuardError as e:
        report_error(e)


if __name__ == "__main__":
    app()
