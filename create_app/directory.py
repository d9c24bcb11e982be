"""Target directory resolution.

Creates the project directory, or asks the user before scaffolding into one
that already exists.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from pathlib import Path

from rich.markup import escape

from create_app.errors import DirectoryConflictError, OverwriteDeclinedError
from create_app.utils import console

AFFIRMATIVE = "y"


def ask_overwrite(display_name: str) -> bool:
    """Prompt once on stdin; only the exact answer ``y`` counts as yes."""
    try:
        answer = console.input(
            f"The directory [green]{escape(display_name)}[/green] already exists. "
            "Files in it may be overwritten. Continue? (y/N) "
        )
    except EOFError:
        return False
    return answer == AFFIRMATIVE


async def resolve_directory(
    root: Path,
    display_name: str,
    *,
    confirm: Callable[[str], bool] = ask_overwrite,
) -> bool:
    """Make sure *root* is a directory the pipeline may write into.

    Args:
        root: Absolute target path.
        display_name: Name shown to the user in the prompt.
        confirm: Yes/no callback used when *root* already exists.

    Returns:
        ``True`` if the directory was created, ``False`` if an existing one
        is being reused.

    Raises:
        DirectoryConflictError: *root* exists and is not a directory.
        OverwriteDeclinedError: The user did not confirm reuse.
    """
    if not root.exists():
        await asyncio.to_thread(root.mkdir, parents=True)
        return True

    if not root.is_dir():
        raise DirectoryConflictError(root)

    # Blocks the event loop on stdin; nothing else is in flight here.
    if not confirm(display_name):
        raise OverwriteDeclinedError(root)
    return False
