"""Template materialisation.

Copies the bundled template tree into the project root.  With ``init_git``
the root is turned into a git repository first and the template's
``.npmignore`` becomes ``.gitignore`` afterwards.  (npm strips ``.gitignore``
files when publishing, which is why the template ships the other name.)
"""

from __future__ import annotations

import asyncio
import json
import shutil
from pathlib import Path

from create_app.config import RunConfig
from create_app.errors import CommandError, TemplateError
from create_app.utils import load_json, run_command

MANIFEST_NAME = "package.json"
TEMPLATE_IGNORE_FILE = ".npmignore"
GIT_IGNORE_FILE = ".gitignore"


def list_template_files(template_dir: Path) -> list[Path]:
    """Return every file under *template_dir*, relative and sorted."""
    return sorted(
        p.relative_to(template_dir) for p in template_dir.rglob("*") if p.is_file()
    )


def template_dependencies(template_dir: Path) -> set[str]:
    """Names the template manifest depends on (runtime and dev)."""
    manifest = template_dir / MANIFEST_NAME
    if not manifest.is_file():
        return set()
    try:
        data = load_json(manifest)
    except json.JSONDecodeError as exc:
        raise TemplateError(f"Template manifest is not valid JSON: {manifest}") from exc
    if not isinstance(data, dict):
        return set()
    names: set[str] = set()
    for section in ("dependencies", "devDependencies"):
        names.update(data.get(section) or {})
    return names


async def init_git_repository(root: Path) -> None:
    command = ["git", "init"]
    returncode = await run_command(command, cwd=root, quiet=True)
    if returncode != 0:
        raise CommandError(command, returncode)


async def materialize_template(config: RunConfig) -> list[Path]:
    """Copy the template tree into ``config.root``.

    Existing files in the root are overwritten without diffing.  Any I/O
    error propagates unchanged; nothing is rolled back.

    Returns:
        The copied files, relative to the root, after any renames.

    Raises:
        TemplateError: The template directory does not exist.
        CommandError: ``git init`` failed.
    """
    template_dir = config.template_dir
    if not template_dir.is_dir():
        raise TemplateError(f"Template directory not found: {template_dir}")

    if config.init_git:
        await init_git_repository(config.root)

    files = list_template_files(template_dir)
    await asyncio.to_thread(
        shutil.copytree, template_dir, config.root, dirs_exist_ok=True
    )

    if config.init_git:
        ignore_file = config.root / TEMPLATE_IGNORE_FILE
        if ignore_file.exists():
            await asyncio.to_thread(ignore_file.replace, config.root / GIT_IGNORE_FILE)
            files = sorted(
                Path(GIT_IGNORE_FILE) if f == Path(TEMPLATE_IGNORE_FILE) else f
                for f in files
            )

    return files
