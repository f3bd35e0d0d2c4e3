"""Shared pytest fixtures for the goscaffold test suite.

Provides reusable fixtures for:
- Project configurations for each project type
- An in-memory template source with small, recognisable templates
- A recording Rich console for asserting on printed output
- A clean environment (no ``SCAFFOLD_*`` variables leaking in)
"""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from goscaffold.config import ProjectConfig, ProjectType
from goscaffold.scaffolder import InMemoryTemplateSource


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def clean_scaffold_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove user-level defaults so tests see the built-in ones."""
    for var in ("SCAFFOLD_AUTHOR", "SCAFFOLD_LICENSE", "SCAFFOLD_TYPE", "SCAFFOLD_OUTPUT_DIR"):
        monkeypatch.delenv(var, raising=False)


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------


def make_config(project_type: ProjectType = ProjectType.CLI, name: str = "demo") -> ProjectConfig:
    """A default-filled config for *project_type*."""
    return ProjectConfig(
        project_name=name,
        module_path=f"github.com/acme/{name}",
        author="Ada Lovelace",
        license="MIT",
        project_type=project_type,
    )


@pytest.fixture
def cli_config() -> ProjectConfig:
    return make_config(ProjectType.CLI)


@pytest.fixture
def library_config() -> ProjectConfig:
    return make_config(ProjectType.LIBRARY)


@pytest.fixture
def service_config() -> ProjectConfig:
    return make_config(ProjectType.SERVICE)


# ---------------------------------------------------------------------------
# Template source
# ---------------------------------------------------------------------------

FAKE_TEMPLATES: dict[str, str] = {
    "README.md.j2": "# {{ project_name }}\n\nby {{ author }} ({{ license }})\n",
    "Makefile-cli.j2": "# cli makefile\nBINARY_NAME={{ binary_name }}\n",
    "Makefile-library.j2": "# library makefile\nBINARY_NAME={{ binary_name }}\n",
    "Makefile-service.j2": "# service makefile\nBINARY_NAME={{ binary_name }}\n",
    "gitignore.j2": "/bin/\n/{{ binary_name }}\n",
    "go.mod.j2": "module {{ module_path }}\n\ngo {{ go_version }}\n",
    "main.go.j2": "package main\n\n// {{ project_name }} ({{ project_type }})\nfunc main() {}\n",
    "Dockerfile-service.j2": "FROM golang:{{ go_version }}\n",
}

FAKE_STATIC_FILES: dict[str, bytes] = {
    "workflows/test.yml": b"name: Test\nruns-on: ${{ matrix.os }}\n",
    "workflows/release-cli.yml": b"name: Release CLI\n",
    "workflows/release-library.yml": b"name: Release Library\n",
    "workflows/release-service.yml": b"name: Release Service\nimage: ${{ env.IMAGE_NAME }}\n",
}


@pytest.fixture
def fake_source() -> InMemoryTemplateSource:
    """An in-memory template source covering every name the generator uses."""
    return InMemoryTemplateSource(dict(FAKE_TEMPLATES), dict(FAKE_STATIC_FILES))


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


@pytest.fixture
def record_console() -> Console:
    """A wide, colourless console whose output can be read back with export_text()."""
    return Console(file=io.StringIO(), record=True, width=240, color_system=None)


@pytest.fixture
def base_dir(tmp_path: Path) -> Path:
    """An empty directory to generate projects into."""
    directory = tmp_path / "workspace"
    directory.mkdir()
    return directory


@pytest.fixture
def config_factory():
    """Factory building a default-filled config: ``config_factory(type, name)``."""
    return make_config
