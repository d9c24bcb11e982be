"""create-app pipeline orchestrator.

Runs the scaffolding steps in order:

Step 1: VALIDATE  -- Check the project name against npm naming rules.
Step 2: DIRECTORY -- Create the target directory or confirm reuse of it.
Step 3: TEMPLATE  -- Copy the bundled template tree into the target.
Step 4: MANIFEST  -- Write the project name into package.json.
Step 5: INSTALL   -- Run the package manager in the target directory.

The first step that raises stops the run; the error is reported once by
``Pipeline.run``.

Usage::

    create-app my-app
    python -m create_app my-app --use-npm
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from rich.markup import escape
from rich.panel import Panel

from create_app import __version__
from create_app.config import RunConfig, npm_forced
from create_app.directory import resolve_directory
from create_app.errors import (
    CommandError,
    DirectoryConflictError,
    InvalidNameError,
    OverwriteDeclinedError,
    ScaffoldError,
)
from create_app.installer import install_command, install_dependencies, should_use_yarn
from create_app.manifest import patch_manifest
from create_app.template import materialize_template, template_dependencies
from create_app.utils import (
    STEP_NAMES,
    console,
    print_error,
    print_step_header,
    print_success,
    print_summary_table,
    print_warning,
)
from create_app.validator import check_app_name

PROG = "create-app"


class Pipeline:
    """Drives one scaffolding run for a fixed ``RunConfig``.

    Attributes:
        config: The immutable run configuration.
        created: Whether step 2 created the root (``False`` when reusing one).
        files: Files copied by step 3, relative to the root.
    """

    def __init__(self, config: RunConfig) -> None:
        self.config = config
        self.created = False
        self.files: list[Path] = []

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    async def validate(self) -> None:
        reserved = template_dependencies(self.config.template_dir)
        check_app_name(self.config.app_name, reserved)
        console.print(f"  [green]+[/green] [bold]{self.config.app_name}[/bold] is a valid name")

    async def prepare_directory(self) -> None:
        self.created = await resolve_directory(self.config.root, self.config.project_name)
        verb = "Created" if self.created else "Reusing"
        console.print(f"  [green]+[/green] {verb} {escape(str(self.config.root))}")

    async def copy_template(self) -> None:
        self.files = await materialize_template(self.config)
        console.print(f"  [green]+[/green] Copied {len(self.files)} file(s)")

    async def write_manifest(self) -> None:
        patch_manifest(self.config.root, self.config.app_name)
        console.print(f'  [green]+[/green] package.json name set to "{self.config.app_name}"')

    async def install(self) -> None:
        command = install_command(self.config.use_yarn)
        console.print(
            f"  Installing packages with [cyan]{' '.join(command)}[/cyan]. "
            "This might take a couple of minutes."
        )
        console.print()
        await install_dependencies(self.config.root, command)

    # ------------------------------------------------------------------
    # Orchestration
    # ------------------------------------------------------------------

    _STEP_METHODS: dict[int, str] = {
        1: "validate",
        2: "prepare_directory",
        3: "copy_template",
        4: "write_manifest",
        5: "install",
    }

    async def run(self) -> int:
        """Execute every step in order.

        Returns:
            Process exit code: 0 on success, 1 on any failure.
        """
        console.print(
            f"Creating a new app in [green]{escape(str(self.config.root))}[/green].",
            highlight=False,
        )
        console.print()

        for step in sorted(self._STEP_METHODS):
            print_step_header(step, STEP_NAMES[step])
            try:
                await getattr(self, self._STEP_METHODS[step])()
            except (ScaffoldError, OSError) as exc:
                self._report_failure(exc)
                return 1

        self._print_final_summary()
        return 0

    def _report_failure(self, exc: Exception) -> None:
        """Terminal handler: one report per failed run."""
        console.print()
        if isinstance(exc, InvalidNameError):
            print_error(
                f'Could not create a project called "{escape(exc.name)}" because of '
                "npm naming restrictions:"
            )
            for message in exc.violations:
                console.print(f"  [red]*[/red] {escape(message)}", highlight=False)
        elif isinstance(exc, DirectoryConflictError):
            print_error(f"{escape(str(exc.path))} already exists and is not a directory.")
        elif isinstance(exc, OverwriteDeclinedError):
            print_warning(f"Aborted: not overwriting {escape(str(exc.path))}.")
        elif isinstance(exc, CommandError):
            print_error("Aborting installation.")
            console.print(f"  [cyan]{exc.command_line}[/cyan] has failed.", highlight=False)
        else:
            print_error("Aborting installation.")
            console.print(f"  {exc}", highlight=False, markup=False)

    def _print_final_summary(self) -> None:
        cfg = self.config
        console.print()
        print_summary_table(
            {
                "Name": cfg.app_name,
                "Location": str(cfg.root),
                "Files": str(len(self.files)),
                "Installer": cfg.installer,
                "Git": "initialized" if cfg.init_git else "no",
            },
            title="Project",
        )
        run = "yarn" if cfg.use_yarn else "npm run"
        console.print(
            Panel(
                f"Success! Created [bold]{cfg.app_name}[/bold] at {escape(str(cfg.root))}\n\n"
                "We suggest that you begin by typing:\n\n"
                f"  [cyan]cd[/cyan] {escape(cfg.project_name)}\n"
                f"  [cyan]{run} start[/cyan]",
                border_style="green",
            )
        )
        print_success("Happy hacking!")


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def _print_usage_banner() -> None:
    print_error("Please specify the project directory:")
    console.print(f"  [cyan]{PROG}[/cyan] [green]<project-directory>[/green]")
    console.print()
    console.print("For example:")
    console.print(f"  [cyan]{PROG}[/cyan] [green]my-react-app[/green]")
    console.print()
    console.print(f"Run [cyan]{PROG} --help[/cyan] to see all options.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Create a new app from the bundled template.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            f"  {PROG} my-app\n"
            f"  {PROG} my-app --use-npm\n"
            f"  {PROG} my-app --git\n"
        ),
    )
    parser.add_argument(
        "project_directory",
        nargs="?",
        metavar="project-directory",
        help="Directory to create; its base name becomes the package name",
    )
    parser.add_argument(
        "-V", "--version",
        action="version",
        version=__version__,
    )
    parser.add_argument(
        "--use-npm",
        action="store_true",
        help="Install with npm even if yarn is available",
    )
    parser.add_argument(
        "--git",
        action="store_true",
        help="Initialize a git repository and add a .gitignore",
    )
    parser.add_argument(
        "--template",
        default=None,
        help="Template directory to copy instead of the bundled one",
    )
    return parser


async def _main(args: argparse.Namespace) -> int:
    use_yarn = False if npm_forced(args.use_npm) else await should_use_yarn()
    config = RunConfig.from_env(
        args.project_directory,
        use_yarn=use_yarn,
        init_git=args.git,
        template_dir=args.template,
    )
    return await Pipeline(config).run()


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``create-app`` and ``python -m create_app``."""
    args = build_parser().parse_args(argv)

    if not args.project_directory:
        _print_usage_banner()
        sys.exit(1)

    sys.exit(asyncio.run(_main(args)))
