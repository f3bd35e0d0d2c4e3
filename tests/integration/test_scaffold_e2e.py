"""Integration tests for the command line against the shipped templates.

These tests run ``goscaffold new`` end-to-end with the real template set and
verify that the generated project is well-formed: valid workflow YAML,
tab-indented Makefiles, a consistent ``go.mod`` and entry point.

No Go toolchain is required; nothing is compiled.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
import yaml

from goscaffold.cli import main
from goscaffold.config import ProjectType
from goscaffold.scaffolder import PackageTemplateSource, directory_structure

pytestmark = pytest.mark.integration


def _scaffold(base_dir: Path, *argv: str) -> Path:
    with pytest.raises(SystemExit) as exc_info:
        main(["new", *argv, "--output", str(base_dir)])
    assert exc_info.value.code == 0
    return base_dir


@pytest.mark.parametrize("project_type", [t.value for t in ProjectType])
class TestGeneratedProject:
    def test_layout(self, base_dir, project_type):
        _scaffold(base_dir, "demo", "--type", project_type)
        root = base_dir / "demo"

        for directory in directory_structure(project_type):
            assert (root / directory).is_dir(), f"Missing {directory}/"
        for name in ("README.md", "Makefile", ".gitignore", "go.mod"):
            assert (root / name).is_file(), f"Missing {name}"
        assert (root / "cmd" / "demo" / "main.go").is_file()
        assert (root / "Dockerfile").exists() == (project_type == "service")

    def test_workflows_are_valid_yaml(self, base_dir, project_type):
        _scaffold(base_dir, "demo", "--type", project_type)
        workflows = base_dir / "demo" / ".github" / "workflows"

        assert sorted(p.name for p in workflows.iterdir()) == ["release.yml", "test.yml"]
        for workflow in workflows.iterdir():
            data = yaml.safe_load(workflow.read_text(encoding="utf-8"))
            assert isinstance(data, dict)
            assert "jobs" in data, f"{workflow.name} has no jobs"

    def test_release_workflow_variant(self, base_dir, project_type):
        _scaffold(base_dir, "demo", "--type", project_type)
        release = (base_dir / "demo" / ".github/workflows/release.yml").read_bytes()
        shipped = PackageTemplateSource().resolve_static_file(f"workflows/release-{project_type}.yml")
        assert release == shipped

    def test_go_files(self, base_dir, project_type):
        _scaffold(base_dir, "demo", "--type", project_type, "-m", "github.com/acme/demo")
        root = base_dir / "demo"

        go_mod = (root / "go.mod").read_text(encoding="utf-8")
        assert go_mod.splitlines()[0] == "module github.com/acme/demo"

        main_go = (root / "cmd" / "demo" / "main.go").read_text(encoding="utf-8")
        assert main_go.startswith("// Copyright")
        assert "package main" in main_go
        assert "Hello from demo!" in main_go

    def test_makefile_recipes(self, base_dir, project_type):
        _scaffold(base_dir, "demo", "--type", project_type)
        makefile = (base_dir / "demo" / "Makefile").read_text(encoding="utf-8")
        recipe_lines = [
            line for line in makefile.splitlines()
            if line and not line.startswith((".", "#")) and ":" not in line and "=" not in line
        ]
        assert recipe_lines
        assert all(line.startswith("\t") for line in recipe_lines)


class TestDefaultsScenario:
    def test_cli_defaults(self, base_dir):
        _scaffold(base_dir, "demo")
        root = base_dir / "demo"

        assert (root / "go.mod").read_text(encoding="utf-8").startswith("module demo\n")
        readme = (root / "README.md").read_text(encoding="utf-8")
        assert "Your Name" in readme
        assert "MIT" in readme
        top_level = {p.name for p in root.iterdir() if p.is_dir()}
        assert top_level == set(directory_structure(ProjectType.CLI)) | {".github"}
        assert not (root / "Dockerfile").exists()

    def test_dry_run_then_real_run(self, base_dir):
        _scaffold(base_dir, "demo", "--dry-run")
        assert os.listdir(base_dir) == []

        _scaffold(base_dir, "demo")
        assert os.listdir(base_dir) == ["demo"]

    def test_second_run_fails(self, base_dir, capsys):
        _scaffold(base_dir, "demo")
        capsys.readouterr()

        with pytest.raises(SystemExit) as exc_info:
            main(["new", "demo", "--output", str(base_dir)])
        assert exc_info.value.code == 1
        assert "already exists" in capsys.readouterr().err
