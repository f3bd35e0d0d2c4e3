"""Command-line interface for goscaffold.

Usage::

    goscaffold new                      (interactive mode)
    goscaffold new myapp
    goscaffold new myapp --type cli --module-path github.com/user/myapp
    goscaffold new myapp --dry-run
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from goscaffold import __version__
from goscaffold.config import (
    ProjectConfig,
    ProjectType,
    ScaffoldSettings,
    parse_project_type,
    validate_project_name,
)
from goscaffold.errors import ScaffoldError
from goscaffold.prompts import fill_config
from goscaffold.scaffolder import ProjectGenerator
from goscaffold.utils import console, print_error, print_summary_table


def build_parser(settings: ScaffoldSettings | None = None) -> argparse.ArgumentParser:
    """Build the argument parser; *settings* supply the option defaults."""
    settings = settings or ScaffoldSettings()

    parser = argparse.ArgumentParser(
        prog="goscaffold",
        description=(
            "Create new Go projects following the golang-standards/project-layout "
            "structure."
        ),
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    new = subparsers.add_parser(
        "new",
        help="Create a new Go project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=(
            "Create a new Go project with the standard project layout.\n\n"
            "If no project name is provided, interactive mode will be used."
        ),
        epilog=(
            "Examples:\n"
            "  goscaffold new                  (interactive mode)\n"
            "  goscaffold new myapp\n"
            "  goscaffold new myapp --type cli --module-path github.com/user/myapp\n"
            "  goscaffold new myapp --dry-run\n"
        ),
    )
    new.add_argument("project_name", nargs="?", default=None, help="Name of the project")
    new.add_argument(
        "--module-path", "-m",
        default="",
        help="Go module path (e.g., github.com/user/project)",
    )
    new.add_argument("--author", "-a", default=settings.default_author, help="Author name")
    new.add_argument(
        "--license", "-l",
        default=settings.default_license,
        help=f"License type (default: {settings.default_license})",
    )
    new.add_argument(
        "--type", "-t",
        dest="project_type",
        default=settings.default_type,
        help="Project type (cli, library, service)",
    )
    new.add_argument(
        "--output", "-o",
        default=str(settings.output_dir),
        help="Directory in which the project folder is created (default: current directory)",
    )
    new.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview what would be created without creating anything",
    )
    new.add_argument(
        "--interactive", "-i",
        action="store_true",
        help="Use interactive mode to configure the project",
    )
    new.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print every created path",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> ProjectConfig:
    """Turn parsed ``new`` arguments into a validated, default-filled config.

    Raises:
        ValidationError: For a bad project name, or a bad project type in
            non-interactive mode.
        PromptCancelledError: If the interactive form is aborted.
    """
    project_name = args.project_name or ""
    interactive = args.interactive or not project_name

    if project_name:
        validate_project_name(project_name)

    if interactive:
        # The form always asks for a type, so an unknown flag value is not fatal here.
        try:
            project_type = ProjectType(args.project_type)
        except ValueError:
            project_type = ProjectType.CLI
        partial = ProjectConfig(
            project_name=project_name,
            module_path=args.module_path,
            author=args.author,
            license=args.license,
            project_type=project_type,
        )
        config = fill_config(partial)
        if not project_name:
            validate_project_name(config.project_name)
        return config

    config = ProjectConfig(
        project_name=project_name,
        module_path=args.module_path,
        author=args.author,
        license=args.license,
        project_type=parse_project_type(args.project_type),
    )
    return config.with_defaults()


def run_new(args: argparse.Namespace) -> int:
    """Execute the ``new`` command.  Returns the process exit code."""
    try:
        config = resolve_config(args)
        if args.verbose:
            print_summary_table(
                {
                    "Project": config.project_name,
                    "Module Path": config.module_path,
                    "Author": config.author,
                    "License": config.license,
                    "Type": config.project_type.value,
                },
                title="Project configuration",
            )
        generator = ProjectGenerator(
            config,
            Path(args.output),
            dry_run=args.dry_run,
            verbose=args.verbose,
        )
        project_root = generator.generate()
    except ScaffoldError as exc:
        print_error(str(exc))
        return 1

    if not args.dry_run:
        console.print()
        console.print("Next steps:")
        console.print(f"  cd {project_root}", markup=False, soft_wrap=True)
        console.print("  make deps")
        console.print("  make build")
        console.print("  make run")
    return 0


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``goscaffold`` / ``python -m goscaffold``."""
    parser = build_parser(ScaffoldSettings.from_env())
    args = parser.parse_args(argv)

    if args.command == "new":
        sys.exit(run_new(args))


if __name__ == "__main__":
    main()
