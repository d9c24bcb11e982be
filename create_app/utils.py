"""Shared utility functions for create-app.

Provides async command execution, JSON I/O for the generated manifest and
the Rich-based console helpers every stage reports through.
"""

from __future__ import annotations

import asyncio
import json
import shutil
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

console = Console()

# Shell convention for "command not found".
COMMAND_NOT_FOUND = 127

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    *,
    quiet: bool = False,
) -> int:
    """Run a command asynchronously and wait for it to exit.

    The executable is looked up on ``PATH`` first so that wrappers such as
    ``npm.cmd`` resolve on Windows.  There is no timeout.

    Args:
        cmd: Program and arguments.
        cwd: Working directory for the child process.  The parent's own
            working directory is never changed.
        quiet: Discard the child's stdio instead of inheriting the parent's
            streams.

    Returns:
        The child's exit code, or ``COMMAND_NOT_FOUND`` if the program does
        not exist.
    """
    program = shutil.which(cmd[0]) or cmd[0]
    stream = asyncio.subprocess.DEVNULL if quiet else None

    try:
        process = await asyncio.create_subprocess_exec(
            program,
            *cmd[1:],
            stdin=stream,
            stdout=stream,
            stderr=stream,
            cwd=str(cwd) if cwd else None,
        )
    except FileNotFoundError:
        return COMMAND_NOT_FOUND

    returncode = await process.wait()
    return returncode or 0


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> Any:
    """Load and parse a JSON file.

    Args:
        path: Path to the JSON file.

    Returns:
        The parsed document.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    raw = Path(path).read_text(encoding="utf-8")
    return json.loads(raw)


def save_json(data: dict[str, Any] | list[Any], path: str | Path) -> None:
    """Save data as JSON with two-space indentation and a trailing newline."""
    content = json.dumps(data, indent=2, ensure_ascii=False)
    Path(path).write_text(content + "\n", encoding="utf-8")


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


STEP_NAMES: dict[int, str] = {
    1: "VALIDATE",
    2: "DIRECTORY",
    3: "TEMPLATE",
    4: "MANIFEST",
    5: "INSTALL",
}

STEP_COLORS: dict[int, str] = {
    1: "bright_cyan",
    2: "bright_green",
    3: "bright_yellow",
    4: "bright_magenta",
    5: "bright_blue",
}


def print_step_header(step: int, name: str) -> None:
    """Print a full-width rule naming the pipeline step."""
    color = STEP_COLORS.get(step, "white")
    console.print(
        Rule(
            f"[bold {color}] Step {step}: {name.upper()} [/bold {color}]",
            style=color,
        )
    )


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a label/value table.  Values are plain text, never markup."""
    table = Table(title=title, show_header=False, box=None, padding=(0, 2))
    table.add_column(style="dim", no_wrap=True)
    table.add_column()

    for label, value in data.items():
        table.add_row(label, Text(str(value)))

    console.print(table)
    console.print()


def _print_status(message: str, color: str) -> None:
    console.print(f"[bold {color}]{message}[/bold {color}]")


def print_success(message: str) -> None:
    _print_status(message, "green")


def print_error(message: str) -> None:
    """Print *message* in bold red; *message* may contain Rich markup."""
    _print_status(message, "red")


def print_warning(message: str) -> None:
    _print_status(message, "yellow")
