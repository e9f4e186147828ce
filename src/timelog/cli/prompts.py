"""Interactive resolution of the task name and code.

Values given on the command line are used as-is.  Missing values are
asked for with ``questionary`` text prompts.  Blank answers fall back
to a placeholder instead of re-prompting.
"""

from __future__ import annotations

from typing import Any

from timelog.cli.console import console
from timelog.exceptions import EnvironmentError, InputError

DEFAULT_TASK = "Unnamed Task"
DEFAULT_CODE = "NA"

TASK_PROMPT = "Enter task name:"
CODE_PROMPT = "Enter code for this task:"


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _ask(message: str) -> str:
    """Prompt for one line of text and return it stripped.

    Raises
    ------
    InputError
        If the prompt is cancelled or the input stream is unusable.
    """
    questionary = _import_questionary()
    try:
        answer: str | None = questionary.text(message).ask()  # None on Ctrl+C
    except (EOFError, OSError) as exc:
        raise InputError(
            f"Could not read input: {str(exc) or type(exc).__name__}",
            hint="Pass --task and --code to run without prompts.",
        ) from exc

    if answer is None:
        raise InputError(
            "Input cancelled.",
            hint="Pass --task and --code to run without prompts.",
        )
    return answer.strip()


def _or_default(value: str, default: str, label: str) -> str:
    if value.strip():
        return value
    console.print(f"{label} cannot be empty, using '{default}'.", markup=False)
    return default


def resolve_task_inputs(task: str | None, code: str | None) -> tuple[str, str]:
    """Return the ``(task, code)`` pair for this run.

    Parameters
    ----------
    task, code:
        Values from the command line, or ``None`` when the flag was
        omitted.  Only omitted values are prompted for, task first.

    Raises
    ------
    InputError
        If a prompt is cancelled or input cannot be read.
    EnvironmentError
        If a prompt is needed but questionary is not installed.
    """
    if task is None:
        task = _ask(TASK_PROMPT)
    task = _or_default(task, DEFAULT_TASK, "Task name")

    if code is None:
        code = _ask(CODE_PROMPT)
    code = _or_default(code, DEFAULT_CODE, "Code")

    return task, code
