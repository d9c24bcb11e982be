"""Dependency installation for the generated project.

Chooses between yarn and npm and runs the installer in the project root with
the terminal attached, so its progress output is shown live.
"""

from __future__ import annotations

from pathlib import Path

from create_app.errors import InstallError
from create_app.utils import run_command

DEFAULT_INSTALLER = "npm"
ALTERNATE_INSTALLER = "yarn"


async def command_available(program: str) -> bool:
    """Return ``True`` if ``<program> --version`` runs and exits 0.

    Output is discarded; only success or failure matters.
    """
    returncode = await run_command([program, "--version"], quiet=True)
    return returncode == 0


async def should_use_yarn() -> bool:
    return await command_available(ALTERNATE_INSTALLER)


def install_command(use_yarn: bool) -> list[str]:
    """Return the install command line for the chosen package manager."""
    program = ALTERNATE_INSTALLER if use_yarn else DEFAULT_INSTALLER
    return [program, "install"]


async def install_dependencies(root: Path, command: list[str]) -> None:
    """Run *command* inside *root* and wait for it to finish.

    Args:
        root: Project directory, used as the child's working directory.
        command: Installer command line, e.g. ``["npm", "install"]``.

    Raises:
        InstallError: If the installer exits non-zero or cannot be found.
    """
    returncode = await run_command(command, cwd=root)
    if returncode != 0:
        raise InstallError(command, returncode)
