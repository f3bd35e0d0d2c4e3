"""goscaffold configuration.

Typed configuration for a scaffolding run.  ``ProjectConfig`` describes the
project to generate; ``ScaffoldSettings`` holds the user-level defaults the
CLI falls back to, read from environment variables.  Both are Pydantic v2
models so they validate at construction time.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from goscaffold.errors import ValidationError

DEFAULT_AUTHOR = "Your Name"
DEFAULT_LICENSE = "MIT"

# Characters that are unsafe in a directory name on at least one platform.
RESERVED_NAME_CHARS = ' /\\:*?"<>|'


class ProjectType(str, Enum):
    """The kind of Go project to scaffold."""

    CLI = "cli"
    LIBRARY = "library"
    SERVICE = "service"


class ProjectConfig(BaseModel):
    """Immutable description of the project to scaffold."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., description="Directory and binary name")
    module_path: str = Field(default="", description="Go module path; defaults to the project name")
    author: str = Field(default="", description="Author or organisation")
    license: str = Field(default=DEFAULT_LICENSE, description="License identifier, e.g. MIT")
    project_type: ProjectType = Field(default=ProjectType.CLI)

    def with_defaults(self) -> "ProjectConfig":
        """Return a copy with an empty module path and author filled in."""
        updates: dict[str, str] = {}
        if not self.module_path:
            updates["module_path"] = self.project_name
        if not self.author:
            updates["author"] = DEFAULT_AUTHOR
        if not updates:
            return self
        return self.model_copy(update=updates)


def validate_project_name(name: str) -> None:
    """Check that *name* is usable as a directory name.

    Raises:
        ValidationError: If the name is empty or contains a reserved character.
    """
    if not name:
        raise ValidationError("project name cannot be empty")
    if any(ch in RESERVED_NAME_CHARS for ch in name):
        raise ValidationError("project name contains invalid characters")


def parse_project_type(value: str) -> ProjectType:
    """Strictly convert *value* to a ``ProjectType``.

    Raises:
        ValidationError: If *value* is not one of the known project types.
    """
    try:
        return ProjectType(value)
    except ValueError:
        raise ValidationError(
            f"invalid project type: {value} (must be cli, library, or service)"
        ) from None


class ScaffoldSettings(BaseModel):
    """User-level defaults applied before command-line flags."""

    default_author: str = Field(default="")
    default_license: str = Field(default=DEFAULT_LICENSE)
    default_type: str = Field(default=ProjectType.CLI.value)
    output_dir: Path = Field(default=Path("."))

    @classmethod
    def from_env(cls) -> "ScaffoldSettings":
        """Build ``ScaffoldSettings`` from environment variables.

        Recognised variables (all optional):
            SCAFFOLD_AUTHOR, SCAFFOLD_LICENSE, SCAFFOLD_TYPE, SCAFFOLD_OUTPUT_DIR.
        """
        return cls(
            default_author=os.environ.get("SCAFFOLD_AUTHOR", ""),
            default_license=os.environ.get("SCAFFOLD_LICENSE") or DEFAULT_LICENSE,
            default_type=os.environ.get("SCAFFOLD_TYPE") or ProjectType.CLI.value,
            output_dir=Path(os.environ.get("SCAFFOLD_OUTPUT_DIR") or "."),
        )
