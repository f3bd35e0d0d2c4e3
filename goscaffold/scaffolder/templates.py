"""Jinja2 template sources for project scaffolding.

A template source resolves names to one of two things:

- a ``TemplateHandle`` whose ``render(config)`` substitutes project values
  into the template text (README, Makefile, go.mod, main.go, ...), or
- the raw bytes of a static file that is copied unmodified (the GitHub
  Actions workflows, whose ``${{ ... }}`` expressions must survive intact).

``PackageTemplateSource`` reads the files shipped in
``goscaffold/scaffolder/templates/``; ``InMemoryTemplateSource`` serves a
dict of templates and is what the tests inject.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Protocol

from jinja2 import (
    BaseLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateError as JinjaTemplateError,
    TemplateNotFound,
    TemplateSyntaxError,
)

from goscaffold.config import ProjectConfig, ProjectType
from goscaffold.errors import RenderError, TemplateError, TemplateNotFoundError


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

# Go toolchain version written to go.mod and the Dockerfile base image.
GO_VERSION = "1.22"


# ---------------------------------------------------------------------------
# Render context
# ---------------------------------------------------------------------------


def build_context(config: ProjectConfig) -> dict[str, Any]:
    """Build the Jinja2 template context from the project config."""
    project_type = config.project_type
    if isinstance(project_type, ProjectType):
        project_type = project_type.value
    return {
        "project_name": config.project_name,
        "module_path": config.module_path,
        "author": config.author,
        "license": config.license,
        "project_type": project_type,
        "binary_name": config.project_name,
        "year": datetime.now(timezone.utc).year,
        "go_version": GO_VERSION,
    }


# ---------------------------------------------------------------------------
# Template handles and sources
# ---------------------------------------------------------------------------


class TemplateHandle:
    """A parsed template that renders against a ``ProjectConfig``."""

    def __init__(self, name: str, template: Template) -> None:
        self.name = name
        self._template = template

    def render(self, config: ProjectConfig) -> bytes:
        """Render the template and return UTF-8 encoded content.

        Raises:
            TemplateNotFoundError: If an included or imported template is missing.
            RenderError: If the template references an undefined variable or
                an expression in it fails.
        """
        try:
            text = self._template.render(**build_context(config))
        except TemplateNotFound as exc:
            raise TemplateNotFoundError(exc.name) from exc
        except JinjaTemplateError as exc:
            raise RenderError(self.name, exc.message or str(exc)) from exc
        except (ArithmeticError, TypeError, ValueError) as exc:
            raise RenderError(self.name, str(exc)) from exc
        return text.encode("utf-8")


class TemplateSource(Protocol):
    """Resolves template and static-file names for the generator."""

    def resolve_template(self, name: str) -> TemplateHandle: ...

    def resolve_static_file(self, name: str) -> bytes: ...


class JinjaTemplateSource:
    """Template source backed by a Jinja2 loader.

    Substitutable templates come from *loader*.  Static files are looked up
    in *static_files* first and then, if *static_root* is given, read from
    disk below that directory.
    """

    def __init__(
        self,
        loader: BaseLoader,
        *,
        static_root: str | Path | None = None,
        static_files: dict[str, bytes] | None = None,
    ) -> None:
        self.env = Environment(
            loader=loader,
            autoescape=False,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self.static_root = Path(static_root) if static_root is not None else None
        self.static_files = dict(static_files or {})

    def resolve_template(self, name: str) -> TemplateHandle:
        """Load and parse the template called *name*.

        Raises:
            TemplateNotFoundError: If no such template exists.
            TemplateError: If the template text does not parse.
        """
        try:
            template = self.env.get_template(name)
        except TemplateNotFound as exc:
            raise TemplateNotFoundError(name) from exc
        except TemplateSyntaxError as exc:
            raise TemplateError(
                name, f"failed to parse template {name}: {exc.message}"
            ) from exc
        return TemplateHandle(name, template)

    def resolve_static_file(self, name: str) -> bytes:
        """Return the raw bytes of the static file called *name*.

        Raises:
            TemplateNotFoundError: If no such file exists.
        """
        if name in self.static_files:
            return self.static_files[name]
        if self.static_root is None:
            raise TemplateNotFoundError(name)

        root = self.static_root.resolve()
        path = (root / name).resolve()
        if not path.is_relative_to(root) or not path.is_file():
            raise TemplateNotFoundError(name)
        try:
            return path.read_bytes()
        except OSError as exc:
            raise TemplateError(name, f"failed to read static file {name}: {exc}") from exc


class PackageTemplateSource(JinjaTemplateSource):
    """Template source for the templates shipped with goscaffold."""

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        super().__init__(
            FileSystemLoader(str(self.template_dir)),
            static_root=self.template_dir,
        )

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return a sorted list of all ``.j2`` template paths under *prefix*.

        Paths are relative to the template root directory.
        """
        search_dir = self.template_dir / prefix if prefix else self.template_dir
        if not search_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in search_dir.rglob("*.j2")
        )


class InMemoryTemplateSource(JinjaTemplateSource):
    """Template source that serves templates and static files from dicts."""

    def __init__(
        self,
        templates: dict[str, str] | None = None,
        static_files: dict[str, bytes] | None = None,
    ) -> None:
        super().__init__(DictLoader(dict(templates or {})), static_files=static_files)
