"""goscaffold scaffolder -- plans and generates Go project skeletons.

Takes a validated ``ProjectConfig`` and renders a project directory following
the golang-standards project layout: type-specific top-level directories,
README, Makefile, ``.gitignore``, ``go.mod``, ``cmd/<name>/main.go`` and
GitHub Actions workflows.

Quick usage::

    from goscaffold.config import ProjectConfig, ProjectType
    from goscaffold.scaffolder import ProjectGenerator

    config = ProjectConfig(
        project_name="myapp",
        module_path="github.com/me/myapp",
        project_type=ProjectType.SERVICE,
    ).with_defaults()
    generator = ProjectGenerator(config, "/tmp/output")
    project_path = generator.generate()
"""

from goscaffold.scaffolder.generator import (
    GenerationPlan,
    GenerationState,
    PlannedFile,
    ProjectGenerator,
    build_plan,
)
from goscaffold.scaffolder.layout import directory_structure
from goscaffold.scaffolder.templates import (
    InMemoryTemplateSource,
    JinjaTemplateSource,
    PackageTemplateSource,
    TemplateHandle,
    TemplateSource,
)

__all__ = [
    "GenerationPlan",
    "GenerationState",
    "InMemoryTemplateSource",
    "JinjaTemplateSource",
    "PackageTemplateSource",
    "PlannedFile",
    "ProjectGenerator",
    "TemplateHandle",
    "TemplateSource",
    "build_plan",
    "directory_structure",
]
