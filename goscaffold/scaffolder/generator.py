"""Main scaffolding orchestrator.

Turns a validated ``ProjectConfig`` into a Go project skeleton following the
golang-standards project layout.  ``build_plan`` computes everything that
will be created; ``ProjectGenerator`` either prints that plan (dry run) or
materializes it on disk, in a fixed order, stopping at the first failure.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path, PurePosixPath

from rich.console import Console
from rich.markup import escape

from goscaffold.config import ProjectConfig, ProjectType
from goscaffold.errors import PreconditionError, ResourceError, TemplateError
from goscaffold.utils import console as default_console

from .layout import (
    CONTENT_DIRECTORIES,
    CORE_FILES,
    ENTRY_POINT_FILE,
    ENTRY_POINT_TEMPLATE,
    PLACEHOLDER_FILE,
    TEST_WORKFLOW,
    container_files,
    directory_structure,
    makefile_template,
    release_workflow,
)
from .templates import PackageTemplateSource, TemplateSource

WORKFLOWS_DIR = ".github/workflows"


# ---------------------------------------------------------------------------
# Generation plan
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PlannedFile:
    """A file to create: *destination* is relative to the project root."""

    destination: str
    source: str


@dataclass(frozen=True)
class GenerationPlan:
    """Everything a single ``generate`` call creates below ``project_root``.

    All paths are POSIX-style and relative to the project root.
    """

    project_root: Path
    directories: list[str] = field(default_factory=list)
    rendered_files: list[PlannedFile] = field(default_factory=list)
    static_files: list[PlannedFile] = field(default_factory=list)
    placeholder_files: list[str] = field(default_factory=list)

    @property
    def files(self) -> list[str]:
        """Every file in creation order."""
        return (
            [f.destination for f in self.rendered_files]
            + [f.destination for f in self.static_files]
            + list(self.placeholder_files)
        )

    def all_paths(self) -> set[str]:
        """Return every relative path (files and directories) the plan creates."""
        paths: set[str] = set()
        for entry in [*self.directories, *self.files]:
            path = PurePosixPath(entry)
            paths.add(path.as_posix())
            for parent in path.parents:
                if parent != PurePosixPath("."):
                    paths.add(parent.as_posix())
        return paths


def build_plan(config: ProjectConfig, base_dir: str | Path) -> GenerationPlan:
    """Compute the generation plan for *config* under *base_dir*.

    Pure: reads nothing from and writes nothing to the filesystem.
    """
    name = config.project_name
    policy_dirs = directory_structure(config.project_type)
    entry_dir = f"cmd/{name}"

    directories = [*policy_dirs, entry_dir, WORKFLOWS_DIR]

    rendered: list[PlannedFile] = [
        PlannedFile("README.md", CORE_FILES["README.md"]),
        PlannedFile("Makefile", makefile_template(config.project_type)),
        PlannedFile(".gitignore", CORE_FILES[".gitignore"]),
        PlannedFile("go.mod", CORE_FILES["go.mod"]),
    ]
    for output_name, template_name in container_files(config.project_type).items():
        rendered.append(PlannedFile(output_name, template_name))
    rendered.append(PlannedFile(f"{entry_dir}/{ENTRY_POINT_FILE}", ENTRY_POINT_TEMPLATE))

    static = [
        PlannedFile(f"{WORKFLOWS_DIR}/test.yml", TEST_WORKFLOW),
        PlannedFile(f"{WORKFLOWS_DIR}/release.yml", release_workflow(config.project_type)),
    ]

    placeholders = [
        f"{d}/{PLACEHOLDER_FILE}" for d in policy_dirs if d not in CONTENT_DIRECTORIES
    ]

    return GenerationPlan(
        project_root=Path(base_dir) / name,
        directories=directories,
        rendered_files=rendered,
        static_files=static,
        placeholder_files=placeholders,
    )


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class GenerationState(str, Enum):
    """Lifecycle of a single ``ProjectGenerator.generate`` call."""

    IDLE = "idle"
    PLAN_VALIDATED = "plan_validated"
    DIRECTORIES_CREATED = "directories_created"
    FILES_GENERATED = "files_generated"
    PREVIEW_EMITTED = "preview_emitted"
    DONE = "done"
    FAILED = "failed"


class ProjectGenerator:
    """Scaffolds a Go project from a ``ProjectConfig``.

    The configuration must already be validated and have its defaults
    applied; the generator trusts the project name to be filesystem-safe.

    In dry-run mode ``generate`` prints the plan and never touches the
    filesystem beyond checking that the target does not exist.  Otherwise it
    creates, in order: the project root, the layout directories, every
    rendered file, the workflow files, and the ``.gitkeep`` placeholders.
    There is no rollback: a failure leaves whatever was written in place.
    """

    def __init__(
        self,
        config: ProjectConfig,
        base_dir: str | Path,
        *,
        dry_run: bool = False,
        source: TemplateSource | None = None,
        console: Console | None = None,
        verbose: bool = False,
    ) -> None:
        self.config = config
        self.base_dir = Path(base_dir)
        self.dry_run = dry_run
        self.source = source if source is not None else PackageTemplateSource()
        self.console = console if console is not None else default_console
        self.verbose = verbose
        self.state = GenerationState.IDLE

    # -- Public API --------------------------------------------------------

    def plan(self) -> GenerationPlan:
        """Return the plan ``generate`` would execute."""
        return build_plan(self.config, self.base_dir)

    def generate(self) -> Path:
        """Generate the project (or print its plan in dry-run mode).

        Returns:
            Path to the project root.

        Raises:
            PreconditionError: If the project directory already exists.
            ResourceError: If a directory or file cannot be created.
            TemplateError: If a template or static file cannot be resolved
                or rendered.
        """
        try:
            return self._generate()
        except Exception:
            self.state = GenerationState.FAILED
            raise

    # -- Orchestration -----------------------------------------------------

    def _generate(self) -> Path:
        plan = self.plan()
        root = plan.project_root

        # lexists also catches dangling symlinks.
        if os.path.lexists(root):
            raise PreconditionError(root)

        if self.dry_run:
            self._preview(plan)
            self.state = GenerationState.PREVIEW_EMITTED
            self.state = GenerationState.DONE
            return root

        self.state = GenerationState.PLAN_VALIDATED

        self._create_directories(plan)
        self.state = GenerationState.DIRECTORIES_CREATED

        self._render_files(plan)
        self._copy_static_files(plan)
        self.state = GenerationState.FILES_GENERATED

        self._write_placeholders(plan)

        self.console.print(
            f"[bold green]✓[/bold green] Project {escape(self.config.project_name)} "
            f"created successfully at {escape(str(root))}"
        )
        self.state = GenerationState.DONE
        return root

    def _create_directories(self, plan: GenerationPlan) -> None:
        root = plan.project_root
        try:
            root.mkdir(parents=True)
        except OSError as exc:
            raise ResourceError("create project directory", root, exc.strerror or str(exc)) from exc
        self._report(root)

        for directory in plan.directories:
            path = root / directory
            try:
                path.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise ResourceError("create directory", path, exc.strerror or str(exc)) from exc
            self._report(path)

    def _render_files(self, plan: GenerationPlan) -> None:
        for planned in plan.rendered_files:
            path = plan.project_root / planned.destination
            # Render fully before opening the destination.
            try:
                content = self.source.resolve_template(planned.source).render(self.config)
            except TemplateError as exc:
                exc.destination = path
                raise
            self._write(path, content)

    def _copy_static_files(self, plan: GenerationPlan) -> None:
        for planned in plan.static_files:
            path = plan.project_root / planned.destination
            try:
                content = self.source.resolve_static_file(planned.source)
            except TemplateError as exc:
                exc.destination = path
                raise
            self._write(path, content)

    def _write_placeholders(self, plan: GenerationPlan) -> None:
        for placeholder in plan.placeholder_files:
            path = plan.project_root / placeholder
            try:
                path.write_bytes(b"")
            except OSError:
                continue
            self._report(path)

    def _write(self, path: Path, content: bytes) -> None:
        try:
            path.write_bytes(content)
        except OSError as exc:
            raise ResourceError("write file", path, exc.strerror or str(exc)) from exc
        self._report(path)

    def _report(self, path: Path) -> None:
        if self.verbose:
            self.console.print(f"  [green]+[/green] {escape(str(path))}")

    # -- Dry run -----------------------------------------------------------

    def _preview(self, plan: GenerationPlan) -> None:
        """Print *plan* without touching the filesystem."""
        project_type = self.config.project_type
        if isinstance(project_type, ProjectType):
            project_type = project_type.value

        out = self.console
        out.print("[bold yellow]Dry run mode - no files will be created[/bold yellow]")
        out.print()
        out.print(f"Project: {escape(self.config.project_name)}")
        out.print(f"Location: {escape(str(plan.project_root))}")
        out.print(f"Module Path: {escape(self.config.module_path)}")
        out.print(f"Type: {escape(str(project_type))}")
        out.print()

        out.print("[bold]Directories to be created:[/bold]")
        for directory in plan.directories:
            out.print(f"  {escape(directory)}/")
        out.print()

        out.print("[bold]Files to be created:[/bold]")
        for file_path in plan.files:
            out.print(f"  {escape(file_path)}")
