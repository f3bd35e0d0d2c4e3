"""Exception hierarchy for goscaffold.

Every error raised while configuring or generating a project derives from
``ScaffoldError`` so the CLI entry point can report it on a single line and
exit non-zero.  The subclasses carry the context (path, operation, template
name) needed to build a useful message.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all goscaffold errors."""


class ValidationError(ScaffoldError):
    """Raised for bad user input: project name or project type."""


class PromptCancelledError(ScaffoldError):
    """Raised when the interactive form is aborted by the user."""

    def __init__(self, message: str = "form cancelled or failed") -> None:
        super().__init__(message)


class PreconditionError(ScaffoldError):
    """Raised when the target project directory already exists."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"directory {path} already exists")


class ResourceError(ScaffoldError):
    """Raised when creating or writing a path on disk fails."""

    def __init__(self, operation: str, path: Path, reason: str = "") -> None:
        self.operation = operation
        self.path = path
        self.reason = reason
        message = f"failed to {operation} {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class TemplateError(ScaffoldError):
    """Raised when a template cannot be loaded, parsed, or rendered.

    ``destination`` is set by the generator to the project file that was
    being produced when the error occurred.
    """

    def __init__(self, name: str, message: str) -> None:
        self.name = name
        self.message = message
        self.destination: Path | None = None
        super().__init__(message)

    def __str__(self) -> str:
        if self.destination is None:
            return self.message
        return f"{self.message} (while generating {self.destination})"


class TemplateNotFoundError(TemplateError):
    """Raised when a named template or static file does not exist."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"template {name} not found")


class RenderError(TemplateError):
    """Raised when a template references a variable that is not defined."""

    def __init__(self, name: str, reason: str) -> None:
        self.reason = reason
        super().__init__(name, f"failed to render template {name}: {reason}")
