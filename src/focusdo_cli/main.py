"""Main entry point for Focusdo CLI."""

import typer
from pydantic import ValidationError

from focusdo_cli import __version__
from focusdo_cli.config import load_config
from focusdo_cli.exceptions import TerminalError
from focusdo_cli.ui.console import get_console
from focusdo_cli.ui.display import FocusApp
from focusdo_cli.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_TERMINAL,
    SUCCESS,
    get_exit_code_description,
    get_exit_code_name,
)
from focusdo_cli.utils.logger import get_logger, log_file_path

app = typer.Typer(
    name="focusdo",
    help="Focus and break stopwatches with a todo list, in one terminal screen",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        get_console().print(f"[bold]Focusdo CLI[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()


@app.command()
def run(
    alt_screen: bool = typer.Option(
        True, "--alt-screen/--no-alt-screen", help="Start in the alternate screen"
    ),
    tick_ms: int | None = typer.Option(
        None, "--tick-ms", help="Timer tick interval in milliseconds (1-100)"
    ),
    fps: int | None = typer.Option(
        None, "--fps", help="Maximum redraws per second while timers run"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        envvar="FOCUSDO_LOG_LEVEL",
        help="Log file level: DEBUG, INFO, WARNING or ERROR",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Start the focus/break stopwatches and todo list.

    Press ? inside the app for the full list of keys.
    """
    err_console = get_console(stderr=True)

    try:
        config = load_config(
            {
                "ui.alt_screen": alt_screen,
                "ui.tick_interval_ms": tick_ms,
                "ui.refresh_per_second": fps,
                "log.level": log_level,
            }
        )
    except ValidationError as e:
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            err_console.print(f"[red]Invalid value for {field}: {error['msg']}[/red]")
        raise typer.Exit(ERROR_INVALID_ARGS) from None

    logger = get_logger(config.log.level)
    logger.info(
        "focusdo %s (tick=%sms, fps=%s)",
        __version__,
        config.get("ui.tick_interval_ms"),
        config.get("ui.refresh_per_second"),
    )

    try:
        FocusApp(config=config).run()
    except TerminalError as e:
        logger.error("terminal failure: %s", e)
        err_console.print(f"[red]Something broke: {e}[/red]")
        err_console.print(f"[dim]{get_exit_code_description(ERROR_TERMINAL)}[/dim]")
        _exit(logger, ERROR_TERMINAL)
    except Exception as e:
        logger.exception("unexpected error")
        err_console.print(f"[red]✗ Unexpected error: {e}[/red]")
        err_console.print(f"[dim]Details in {log_file_path()}[/dim]")
        _exit(logger, ERROR_GENERAL)

    _exit(logger, SUCCESS)


def _exit(logger, code: int) -> None:
    logger.info("exit %d (%s)", code, get_exit_code_name(code))
    raise typer.Exit(code)


# Main entry point
def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
