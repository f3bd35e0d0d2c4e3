"""Per-project-type layout tables.

Each artifact that varies by project type (top-level directories, Makefile
variant, release workflow, container files) is a single table keyed by
``ProjectType`` plus an explicit default row.  Lookups never fail: a value
outside the enumeration gets the CLI row.
"""

from __future__ import annotations

from goscaffold.config import ProjectType

# ---------------------------------------------------------------------------
# Top-level directories (golang-standards/project-layout)
# ---------------------------------------------------------------------------

_CLI_DIRECTORIES: tuple[str, ...] = (
    "cmd",       # main application(s)
    "internal",  # private application code
    "pkg",       # public libraries
    "api",       # API definitions the CLI talks to
    "configs",   # configuration templates
    "scripts",   # build/install/analysis scripts
    "build",     # packaging and CI
    "test",      # external test apps and data
    "docs",
    "examples",
)

DIRECTORY_STRUCTURES: dict[ProjectType, tuple[str, ...]] = {
    ProjectType.CLI: _CLI_DIRECTORIES,
    ProjectType.LIBRARY: (
        "internal",
        "pkg",       # public library code, the main focus
        "cmd",       # example tools/utilities
        "scripts",
        "test",
        "docs",
        "examples",
    ),
    ProjectType.SERVICE: (
        "cmd",
        "internal",
        "pkg",
        "api",       # OpenAPI, protobuf, ...
        "web",       # web application components
        "configs",
        "scripts",
        "build",
        "test",
        "docs",
        "examples",
    ),
}
DEFAULT_DIRECTORIES = _CLI_DIRECTORIES

# ---------------------------------------------------------------------------
# Template selection
# ---------------------------------------------------------------------------

MAKEFILE_TEMPLATES: dict[ProjectType, str] = {
    ProjectType.CLI: "Makefile-cli.j2",
    ProjectType.LIBRARY: "Makefile-library.j2",
    ProjectType.SERVICE: "Makefile-service.j2",
}
DEFAULT_MAKEFILE_TEMPLATE = "Makefile-cli.j2"

RELEASE_WORKFLOWS: dict[ProjectType, str] = {
    ProjectType.CLI: "workflows/release-cli.yml",
    ProjectType.LIBRARY: "workflows/release-library.yml",
    ProjectType.SERVICE: "workflows/release-service.yml",
}
DEFAULT_RELEASE_WORKFLOW = "workflows/release-cli.yml"

TEST_WORKFLOW = "workflows/test.yml"

# Output file name -> template name
CONTAINER_FILES: dict[ProjectType, dict[str, str]] = {
    ProjectType.SERVICE: {"Dockerfile": "Dockerfile-service.j2"},
}

# Output file name -> template name, rendered for every project type.
CORE_FILES: dict[str, str] = {
    "README.md": "README.md.j2",
    ".gitignore": "gitignore.j2",
    "go.mod": "go.mod.j2",
}

ENTRY_POINT_TEMPLATE = "main.go.j2"
ENTRY_POINT_FILE = "main.go"
PLACEHOLDER_FILE = ".gitkeep"

# Policy directories that receive generated content instead of a placeholder.
CONTENT_DIRECTORIES: frozenset[str] = frozenset({"cmd"})


def _known_type(project_type: ProjectType | str) -> ProjectType | None:
    try:
        return ProjectType(project_type)
    except ValueError:
        return None


def directory_structure(project_type: ProjectType | str) -> list[str]:
    """Return the ordered top-level directories for *project_type*.

    Unknown values fall back to the CLI layout.  A new list is returned on
    every call.
    """
    return list(DIRECTORY_STRUCTURES.get(_known_type(project_type), DEFAULT_DIRECTORIES))


def makefile_template(project_type: ProjectType | str) -> str:
    """Return the Makefile template name for *project_type*."""
    return MAKEFILE_TEMPLATES.get(_known_type(project_type), DEFAULT_MAKEFILE_TEMPLATE)


def release_workflow(project_type: ProjectType | str) -> str:
    """Return the static release workflow file for *project_type*."""
    return RELEASE_WORKFLOWS.get(_known_type(project_type), DEFAULT_RELEASE_WORKFLOW)


def container_files(project_type: ProjectType | str) -> dict[str, str]:
    """Return ``{output_name: template_name}`` for container build files."""
    return dict(CONTAINER_FILES.get(_known_type(project_type), {}))
