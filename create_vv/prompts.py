"""Interactive question flow that produces an ``AnswerSet``.

Only the questions whose answers cannot be inferred are asked: the project
name when no directory was given, the overwrite confirmation when the
target is not empty, the package name when the directory name is not a
valid one, and the template when ``--template`` is missing or unknown.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from rich.markup import escape
from rich.prompt import Confirm, Prompt

from create_vv.config import Config
from create_vv.errors import FatalAbort
from create_vv.scaffolder.catalog import TEMPLATES, TemplateRef, find_template
from create_vv.scaffolder.filesystem import TargetState, classify_directory
from create_vv.scaffolder.generator import AnswerSet
from create_vv.scaffolder.naming import (
    derive_project_name,
    is_valid_package_name,
    normalize_target_dir,
    to_valid_package_name,
)
from create_vv.utils import console, print_error, print_warning


def collect_answers(
    arg_target_dir: str | None,
    arg_template: str | None,
    config: Config,
    cwd: str | Path,
) -> AnswerSet:
    """Ask whatever is still unknown and return the resulting answers.

    Args:
        arg_target_dir: Directory given on the command line, if any.
        arg_template: ``--template`` value, if any.
        config: Active configuration (default directory name).
        cwd: Invocation directory.

    Raises:
        FatalAbort: The user declined to overwrite or interrupted a prompt.
        FilesystemError: The target path is occupied by something that is
            not a readable directory.
    """
    try:
        return _collect(arg_target_dir, arg_template, config, Path(cwd))
    except (KeyboardInterrupt, EOFError):
        raise FatalAbort() from None


def ask_package_name(default: str = "") -> str:
    """Ask for a package name until a valid one is entered."""
    while True:
        kwargs: dict[str, Any] = {"console": console}
        if default:
            kwargs["default"] = default
        answer = Prompt.ask("Package name", **kwargs).strip()
        if is_valid_package_name(answer):
            return answer
        print_error("Invalid package.json name")


def ask_template(arg_template: str | None = None) -> TemplateRef:
    """Let the user pick one of the bundled templates."""
    if arg_template:
        print_warning(f'"{arg_template}" isn\'t a valid template. Please choose from below:')

    for index, template in enumerate(TEMPLATES, start=1):
        console.print(f"  {index}. [{template.color}]{template.display}[/{template.color}]")

    choices = [str(i) for i in range(1, len(TEMPLATES) + 1)]
    choice = Prompt.ask("Select a framework", choices=choices, default="1", console=console)
    return TEMPLATES[int(choice) - 1]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _collect(
    arg_target_dir: str | None,
    arg_template: str | None,
    config: Config,
    cwd: Path,
) -> AnswerSet:
    target_dir = normalize_target_dir(arg_target_dir)
    if target_dir is None:
        answer = Prompt.ask("Project name", default=config.default_target_dir, console=console)
        target_dir = normalize_target_dir(answer) or config.default_target_dir

    overwrite: bool | None = None
    if classify_directory(cwd / target_dir) is TargetState.NON_EMPTY:
        label = "Current directory" if target_dir == "." else f'Target directory "{escape(target_dir)}"'
        overwrite = Confirm.ask(
            f"{label} is not empty. Remove existing files and continue?",
            default=False,
            console=console,
        )
        if not overwrite:
            raise FatalAbort()

    package_name: str | None = None
    project_name = derive_project_name(target_dir, cwd)
    if not is_valid_package_name(project_name):
        package_name = ask_package_name(to_valid_package_name(project_name))

    template = find_template(arg_template)
    if template is None:
        template = ask_template(arg_template)

    return AnswerSet(
        template=template,
        target_dir_raw=target_dir,
        overwrite=overwrite,
        package_name=package_name,
    )
