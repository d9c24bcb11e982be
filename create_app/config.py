"""create-app run configuration.

A single immutable ``RunConfig`` is built at start-up and passed explicitly to
every pipeline stage.  It is a Pydantic v2 model so the paths and flags are
validated at construction time.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "template"

_TRUTHY = {"1", "true", "yes", "on"}


def env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


def npm_forced(use_npm: bool = False) -> bool:
    """True for ``--use-npm`` or a truthy ``CREATE_APP_USE_NPM``."""
    return use_npm or env_flag("CREATE_APP_USE_NPM")


class RunConfig(BaseModel):
    """Configuration for one scaffolding run.

    Attributes:
        project_name: The raw ``<project-directory>`` argument.
        root: Absolute path of the directory being created.
        use_yarn: Install with yarn instead of npm.
        init_git: Run ``git init`` and rename ``.npmignore`` to ``.gitignore``.
        template_dir: Template tree copied into ``root``.
    """

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., min_length=1)
    root: Path
    use_yarn: bool = Field(default=False)
    init_git: bool = Field(default=False)
    template_dir: Path = Field(default=DEFAULT_TEMPLATE_DIR)

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def app_name(self) -> str:
        """Base name of the target directory, written into package.json."""
        return self.root.name

    @property
    def manifest_path(self) -> Path:
        return self.root / "package.json"

    @property
    def installer(self) -> str:
        return "yarn" if self.use_yarn else "npm"

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def create(
        cls,
        project_name: str,
        *,
        use_yarn: bool,
        init_git: bool = False,
        template_dir: str | Path | None = None,
    ) -> "RunConfig":
        """Build a config, resolving *project_name* against the current directory."""
        return cls(
            project_name=project_name,
            root=Path(project_name).resolve(),
            use_yarn=use_yarn,
            init_git=init_git,
            template_dir=Path(template_dir) if template_dir else DEFAULT_TEMPLATE_DIR,
        )

    @classmethod
    def from_env(
        cls,
        project_name: str,
        *,
        use_yarn: bool,
        init_git: bool = False,
        template_dir: str | Path | None = None,
    ) -> "RunConfig":
        """Like :meth:`create`, with environment overrides applied.

        Recognised variables (all optional):
            CREATE_APP_TEMPLATE_DIR  used when *template_dir* is not given.
            CREATE_APP_GIT           truthy value enables ``git init``.
        """
        if template_dir is None and os.environ.get("CREATE_APP_TEMPLATE_DIR"):
            template_dir = os.environ["CREATE_APP_TEMPLATE_DIR"]
        if env_flag("CREATE_APP_GIT"):
            init_git = True

        return cls.create(
            project_name,
            use_yarn=use_yarn,
            init_git=init_git,
            template_dir=template_dir,
        )
