"""CLI application entry point for timelog.

This module is the **sole error boundary** for the entire application.
It catches :class:`~timelog.exceptions.TimelogError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages and
returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — timing, formatting and persistence
  are delegated to the core and infrastructure layers.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import csv
import io
import logging
import sys
from pathlib import Path

from timelog.cli import exit_codes
from timelog.cli.console import console, escape
from timelog.config import Settings
from timelog.exceptions import LogWriteError, TimelogError
from timelog.logging_setup import setup_logging
from timelog.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="timelog",
        description=(
            "Simple command-line timer that logs time spent on tasks "
            "to a CSV file. Press Ctrl+C to stop and log."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-t",
        "--task",
        metavar="TASK_NAME",
        default=None,
        help="Name of the task being tracked. Prompted for if omitted.",
    )
    parser.add_argument(
        "-c",
        "--code",
        metavar="CODE",
        default=None,
        help="Code to associate with the log entry. Prompted for if omitted.",
    )
    parser.add_argument(
        "-f",
        "--log-file",
        metavar="PATH",
        type=Path,
        default=None,
        help="CSV log to append to (default: $TIMELOG_FILE or ~/time_log.csv).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print debug diagnostics to stderr.",
    )
    return parser


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _format_duration(seconds: float) -> str:
    """Render *seconds* as ``"1h 2m 3s"`` for the stop summary."""
    whole = int(seconds)
    hours, rem = divmod(whole, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{hours}h {minutes}m {secs}s"


def _csv_line(row: tuple[str, ...]) -> str:
    buffer = io.StringIO()
    csv.writer(buffer, lineterminator="").writerow(row)
    return buffer.getvalue()


def _resolve_log_path(cli_path: Path | None, settings: Settings) -> Path:
    from timelog.infra.csv_log import default_log_path

    if cli_path is not None:
        return cli_path.expanduser()
    if settings.log_file is not None:
        return settings.log_file
    return default_log_path()


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------

def _handle_track(
    task: str | None,
    code: str | None,
    log_path: Path,
    settings: Settings,
) -> int:
    """Time one task and append it to the log.

    Flow:
    1. Resolve task name and code (prompting if needed).
    2. Start the stopwatch and the live display.
    3. On SIGINT/SIGTERM, stop at the handled instant.
    4. Append the entry to the CSV log.
    """
    from timelog.cli.prompts import resolve_task_inputs
    from timelog.cli.ticker import ElapsedTicker
    from timelog.core.stopwatch import Stopwatch
    from timelog.core.tracking_service import TrackingService
    from timelog.infra.csv_log import CsvLogWriter
    from timelog.infra.signals import StopRequested, stop_on_signals

    task, code = resolve_task_inputs(task, code)

    console.print(
        f"Tracking task '{task}' with code '{code}'. Press Ctrl+C to stop.",
        markup=False,
    )

    stopwatch = Stopwatch()
    ticker = ElapsedTicker(stopwatch, task, code, interval=settings.refresh_interval)
    service = TrackingService(CsvLogWriter(log_path))

    with stop_on_signals(stopwatch):
        try:
            stopwatch.start()
            ticker.run()
        except StopRequested as stop:
            logger.debug("Tracking loop ended by signal %d", stop.signum)
        elapsed = stopwatch.stop()

        console.print(
            f"\nStopped. Time spent on task '{task}' (Code: {code}): "
            f"{_format_duration(elapsed)}",
            markup=False,
        )

        try:
            service.record(elapsed, task=task, code=code)
        except LogWriteError as exc:
            if exc.entry is not None:
                console.print("Unsaved entry (copy it into your log):")
                console.print(_csv_line(exc.entry.to_row()), markup=False)
            raise

    console.print(f"Logged to {log_path}", markup=False)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the timelog CLI.

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

    settings = Settings.from_env()
    setup_logging(logging.DEBUG if args.verbose else settings.log_level)

    log_path = _resolve_log_path(args.log_file, settings)
    logger.debug("Logging entries to %s", log_path)

    return _handle_track(args.task, args.code, log_path, settings)


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
    except TimelogError as exc:
        console.print_error(str(exc), hint=exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
