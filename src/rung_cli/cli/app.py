"""CLI application entry point and command routing for rung-cli.

This module is the **sole error boundary** for the entire application.
It catches :class:`~rung_cli.exceptions.RungCliError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core/service
  and infrastructure layers.
* ``print()`` is forbidden outside the CLI layer; Rich console is used
  exclusively.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from rung_cli.cli import exit_codes
from rung_cli.cli.console import (
    console,
    emit_error,
    emit_info,
    emit_success,
    emit_warning,
)
from rung_cli.exceptions import EnvironmentError, RungCliError
from rung_cli.version import __version__

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION_FILE = "index.py"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``rung boilerplate``       — generate a starter extension project
    * ``rung run [--file PATH]`` — interview the user for an extension's params
    * ``rung --version``
    """
    parser = argparse.ArgumentParser(
        prog="rung",
        description="Scaffold Rung extensions and prompt for their parameters.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging.",
    )
    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser(
        "boilerplate",
        help="Generate a starter extension project in a new folder.",
    )
    run_parser = subparsers.add_parser(
        "run",
        help="Ask for the parameters of an extension and run it.",
    )
    run_parser.add_argument(
        "--file",
        default=DEFAULT_EXTENSION_FILE,
        help=f"Extension module declaring 'params' (default: {DEFAULT_EXTENSION_FILE}).",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    from rung_cli.config import get_settings
    from rung_cli.utils.log import configure_logging

    configure_logging("DEBUG" if verbose else get_settings().log_level)


# ---------------------------------------------------------------------------
# Presentation helpers
# ---------------------------------------------------------------------------

def _import_rich_table() -> type[Any]:
    """Import rich table lazily for answer rendering."""
    try:
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table


def _format_answer(value: Any) -> str:
    """Render a resolved answer for display."""
    if value is None:
        return "—"
    if isinstance(value, bytes):
        return f"<{len(value)} bytes>"
    return str(value)


def _display_answers(answers: Mapping[str, Any]) -> None:
    table_class = _import_rich_table()
    table = table_class(
        title="Parameters",
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("Name", style="bold")
    table.add_column("Value")
    for name, value in answers.items():
        table.add_row(name, _format_answer(value))
    console.print()
    console.print(table)
    console.print()


def _display_alerts(result: Any) -> None:
    alerts = result.get("alerts", []) if isinstance(result, Mapping) else []
    for alert in alerts:
        title = alert.get("title", "") if isinstance(alert, Mapping) else alert
        console.print(f"[bold cyan]Alert:[/bold cyan] {title}")


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_boilerplate() -> int:
    """Interview the user and write a starter project under the working directory."""
    from rung_cli.cli.prompt_engine import QuestionaryPromptEngine
    from rung_cli.config import get_settings
    from rung_cli.core.boilerplate_service import BoilerplateService
    from rung_cli.infra.categories import HttpCategoryProvider
    from rung_cli.infra.filesystem import DiskProjectWriter

    settings = get_settings()
    service = BoilerplateService(
        QuestionaryPromptEngine(),
        HttpCategoryProvider(settings.api_url, timeout=settings.request_timeout),
        DiskProjectWriter(),
        settings.sdk_version,
    )
    name = service.generate(Path.cwd().name)
    emit_success(f"project generated in {name}/")
    return exit_codes.SUCCESS


def _handle_run(file: str) -> int:
    """Load an extension, ask for its parameters and call its ``main``."""
    from rung_cli.cli.prompt_engine import QuestionaryPromptEngine
    from rung_cli.core.interview_service import InterviewService
    from rung_cli.infra.autocomplete import load_autocomplete_sources
    from rung_cli.infra.extension_loader import extension_params, load_extension
    from rung_cli.infra.filesystem import WorkingDirectoryFileReader

    path = Path(file).resolve()
    logger.debug("Loading extension from %s", path)
    module = load_extension(path)
    service = InterviewService(
        QuestionaryPromptEngine(),
        WorkingDirectoryFileReader(),
        load_autocomplete_sources(path.parent),
    )
    answers = service.ask(extension_params(module))
    _display_answers(answers)

    main_function = getattr(module, "main", None)
    if not callable(main_function):
        emit_warning(f"{path.name} defines no main(context); nothing to run.")
        return exit_codes.SUCCESS

    emit_info(f"Running {path.name}")
    _display_alerts(main_function({"params": answers}))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the rung CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    _configure_logging(args.verbose)

    if args.command == "boilerplate":
        return _handle_boilerplate()

    return _handle_run(args.file)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except RungCliError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except OSError as exc:
        emit_error(str(exc))
        sys.exit(exit_codes.GENERAL_ERROR)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
