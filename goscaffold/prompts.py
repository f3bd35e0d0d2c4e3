"""Interactive configuration form.

Asks the user for whatever the command line did not provide and returns a
completed ``ProjectConfig``.  Built on ``rich.prompt`` so it shares the
console used for the rest of the output.
"""

from __future__ import annotations

from typing import TextIO

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from goscaffold.config import DEFAULT_AUTHOR, DEFAULT_LICENSE, ProjectConfig, ProjectType
from goscaffold.errors import PromptCancelledError
from goscaffold.utils import console as default_console

LICENSE_CHOICES: list[str] = ["MIT", "Apache-2.0", "GPL-3.0", "BSD-3-Clause", "None"]
TYPE_CHOICES: list[str] = [t.value for t in ProjectType]


def fill_config(
    config: ProjectConfig,
    *,
    console: Console | None = None,
    stream: TextIO | None = None,
) -> ProjectConfig:
    """Prompt for missing values and return a new, completed config.

    The project name is only asked for when *config* has none.  Module path
    and author default to the project name and ``"Your Name"``.  The project
    name is not validated here; the caller does that once the form is done.

    Args:
        config: Partially filled configuration from the command line.
        console: Console to prompt on (defaults to the shared console).
        stream: Optional input stream instead of stdin.

    Raises:
        PromptCancelledError: If the user aborts the form (Ctrl-C / Ctrl-D).
    """
    out = console if console is not None else default_console
    try:
        return _run_form(config, out, stream)
    except (KeyboardInterrupt, EOFError) as exc:
        raise PromptCancelledError() from exc


def _run_form(config: ProjectConfig, out: Console, stream: TextIO | None) -> ProjectConfig:
    name_kwargs = {}
    if stream is not None:
        # readline() returns "" only once the stream is exhausted; rich hands
        # back the default in that case, so None marks end of input.
        name_kwargs = {"default": None, "show_default": False}

    project_name = config.project_name
    while not project_name:
        out.print("[dim]The name of your project (used for directory and binary name)[/dim]")
        answer = Prompt.ask("Project Name", console=out, stream=stream, **name_kwargs)
        if answer is None:
            raise EOFError("input ended before a project name was given")
        project_name = answer.strip()
        if not project_name:
            out.print("[bold red]project name cannot be empty[/bold red]")

    module_path = Prompt.ask(
        "Module Path [dim](e.g. github.com/user/project)[/dim]",
        console=out,
        default=config.module_path or project_name,
        stream=stream,
    )
    author = Prompt.ask(
        "Author",
        console=out,
        default=config.author or DEFAULT_AUTHOR,
        stream=stream,
    )

    license_default = config.license if config.license in LICENSE_CHOICES else DEFAULT_LICENSE
    license_id = Prompt.ask(
        "License",
        console=out,
        choices=LICENSE_CHOICES,
        default=license_default,
        stream=stream,
    )

    # An unrecognised incoming type is offered as cli.
    current_type = getattr(config.project_type, "value", config.project_type)
    type_default = current_type if current_type in TYPE_CHOICES else ProjectType.CLI.value
    project_type = Prompt.ask(
        "Project Type",
        console=out,
        choices=TYPE_CHOICES,
        default=type_default,
        stream=stream,
    )

    out.print(f"[green]+[/green] Configured {escape(project_name)}")
    filled = config.model_copy(
        update={
            "project_name": project_name,
            "module_path": module_path.strip(),
            "author": author.strip(),
            "license": license_id,
            "project_type": ProjectType(project_type),
        }
    )
    return filled.with_defaults()
