"""Shared pytest fixtures for the create-app test suite.

Provides reusable fixtures for:
- A small on-disk template tree
- RunConfig construction rooted in a temporary directory
- Mock subprocess helpers
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from create_app.config import RunConfig
from create_app.utils import console


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer-level overrides out of the tests."""
    for var in ("CREATE_APP_TEMPLATE_DIR", "CREATE_APP_USE_NPM", "CREATE_APP_GIT"):
        monkeypatch.delenv(var, raising=False)


# ---------------------------------------------------------------------------
# Template tree
# ---------------------------------------------------------------------------

TEMPLATE_MANIFEST = {
    "name": "template-placeholder",
    "version": "0.1.0",
    "private": True,
    "scripts": {"start": "node src/index.js"},
    "dependencies": {"left-pad": "^1.3.0"},
    "devDependencies": {"prettier": "^3.0.0"},
}


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """A minimal template tree with a manifest, a dotfile and a nested file."""
    root = tmp_path / "template"
    (root / "src" / "components").mkdir(parents=True)
    (root / "package.json").write_text(
        json.dumps(TEMPLATE_MANIFEST, indent=2) + "\n", encoding="utf-8"
    )
    (root / ".npmignore").write_text("node_modules/\n", encoding="utf-8")
    (root / "README.md").write_text("# Template\n", encoding="utf-8")
    (root / "src" / "index.js").write_text("console.log('hi');\n", encoding="utf-8")
    (root / "src" / "components" / "Button.js").write_bytes(
        b"export const Button = () => null;\r\n"
    )
    return root


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Directory the target projects are created in."""
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def make_config(workspace: Path, template_dir: Path):
    """Factory for a RunConfig whose root lives under ``workspace``."""

    def factory(name: str = "my-app", **overrides) -> RunConfig:
        values = {
            "project_name": name,
            "root": workspace / name,
            "use_yarn": False,
            "init_git": False,
            "template_dir": template_dir,
        }
        values.update(overrides)
        return RunConfig(**values)

    return factory


# ---------------------------------------------------------------------------
# Mock Subprocess
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_subprocess():
    """Factory for mock asyncio processes with a configurable exit code.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(returncode=0)
            with patch("asyncio.create_subprocess_exec", return_value=proc):
                ...
    """

    def factory(returncode: int = 0) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        mock_proc.kill = MagicMock()
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory


@pytest.fixture
def fake_exec(mock_subprocess):
    """Patch ``asyncio.create_subprocess_exec`` for the duration of a test.

    ``PATH`` lookup is disabled so the recorded program is the bare name
    (``npm``, ``yarn``, ``git``).  Set the exit code of every spawned process
    with ``fake_exec.return_value.wait.return_value = <code>``.
    """
    proc = mock_subprocess(returncode=0)
    with patch(
        "asyncio.create_subprocess_exec", new=AsyncMock(return_value=proc)
    ) as exec_mock, patch("shutil.which", return_value=None):
        yield exec_mock


@pytest.fixture(autouse=True)
def _no_console_wrap(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep long tmp paths on one line so output assertions are stable."""
    monkeypatch.setattr(console, "soft_wrap", True)
