"""Main scaffolding orchestrator.

Takes an ``AnswerSet`` (the decisions collected from the user) and turns it
into a project directory built from one of the bundled templates:

    resolve target -> inspect target -> clear / create / keep
        -> copy template tree -> patch package.json -> report next steps

Every step runs to completion before the next one starts.  Nothing is
rolled back on failure; a partially written tree is left as is.
"""

from __future__ import annotations

import asyncio
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from create_vv.config import Config
from create_vv.errors import FatalAbort, NameValidationError, OverwriteRequiredError

from .catalog import RENAME_FILES, TemplateRef
from .filesystem import TargetState, classify_directory, empty_dir, ensure_dir, materialize_template
from .manifest import patch_manifest
from .naming import (
    derive_project_name,
    is_valid_package_name,
    normalize_target_dir,
    to_valid_package_name,
)


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class AnswerSet(BaseModel):
    """Resolved user decisions driving a single scaffold run.

    ``overwrite`` only matters when the target directory is non-empty and
    ``package_name`` only when the name derived from the directory is not a
    valid package name.
    """

    model_config = ConfigDict(frozen=True)

    template: TemplateRef
    target_dir_raw: str | None = Field(default=None, description="Directory as typed")
    overwrite: bool | None = Field(default=None, description="Clear a non-empty target")
    package_name: str | None = Field(default=None, description="Explicit package.json name")


class PackageManagerInfo(BaseModel):
    """Package manager parsed from a ``<name>/<version> ...`` user agent."""

    name: str
    version: str | None = None


class ScaffoldReport(BaseModel):
    """Outcome of a successful scaffold run."""

    root: Path
    template: str
    package_name: str
    package_manager: str
    state_before: TargetState
    files_written: list[Path] = Field(default_factory=list)
    commands: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Materialises a template onto a target directory.

    One instance may serve several runs; it holds only configuration.
    """

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or Config()

    # -- Public API --------------------------------------------------------

    def resolve_target_dir(self, answers: AnswerSet) -> str:
        """Normalised target directory, falling back to the default name."""
        return normalize_target_dir(answers.target_dir_raw) or self.config.default_target_dir

    def resolve_root(self, answers: AnswerSet, cwd: str | Path | None = None) -> Path:
        """Absolute path of the project root for *answers*."""
        base = Path(os.path.abspath(cwd if cwd is not None else os.getcwd()))
        return Path(os.path.normpath(base / self.resolve_target_dir(answers)))

    def resolve_package_name(self, answers: AnswerSet, cwd: str | Path | None = None) -> str:
        """Package name to write into the manifest.

        An explicit name is used as given; otherwise the name is derived
        from the target directory and normalised.

        Raises:
            NameValidationError: If the resulting name is still invalid.
        """
        if answers.package_name is not None:
            if not is_valid_package_name(answers.package_name):
                raise NameValidationError(answers.package_name)
            return answers.package_name

        base = cwd if cwd is not None else os.getcwd()
        project_name = derive_project_name(self.resolve_target_dir(answers), base)
        if is_valid_package_name(project_name):
            return project_name

        candidate = to_valid_package_name(project_name)
        if not is_valid_package_name(candidate):
            raise NameValidationError(candidate)
        return candidate

    async def generate(
        self, answers: AnswerSet, cwd: str | Path | None = None
    ) -> ScaffoldReport:
        """Scaffold the project described by *answers*.

        Args:
            answers: Collected user decisions.
            cwd: Invocation directory; relative targets resolve against it.
                Defaults to the process working directory.

        Returns:
            A ``ScaffoldReport`` with the written files and next commands.

        Raises:
            OverwriteRequiredError: Target is non-empty and
                ``answers.overwrite`` is ``None``.
            FatalAbort: Target is non-empty and overwrite was declined.
            NameValidationError: No valid package name could be determined.
            FilesystemError: The target cannot be inspected or written.
            ManifestParseError: The template manifest is malformed.
        """
        base = Path(os.path.abspath(cwd if cwd is not None else os.getcwd()))
        root = self.resolve_root(answers, base)
        package_name = self.resolve_package_name(answers, base)
        template_dir = self.config.template_path(answers.template)

        # 1. Inspect and prepare the target directory
        state = await asyncio.to_thread(classify_directory, root)
        await self._prepare_target(root, state, answers.overwrite)

        # 2. Copy every template entry except the manifest
        files_written = await asyncio.to_thread(
            materialize_template,
            template_dir,
            root,
            rename_files=RENAME_FILES,
            exclude=(self.config.manifest_name,),
        )

        # 3. Write the manifest with the chosen name
        await asyncio.to_thread(
            patch_manifest,
            template_dir,
            root,
            package_name,
            manifest_name=self.config.manifest_name,
        )
        files_written.append(root / self.config.manifest_name)

        # 4. Work out what the user should run next
        pkg_info = pkg_from_user_agent(self.config.detected_user_agent())
        package_manager = pkg_info.name if pkg_info else self.config.default_package_manager

        return ScaffoldReport(
            root=root,
            template=answers.template.name,
            package_name=package_name,
            package_manager=package_manager,
            state_before=state,
            files_written=files_written,
            commands=next_steps(root, base, package_manager),
        )

    # -- Internal steps ----------------------------------------------------

    async def _prepare_target(
        self, root: Path, state: TargetState, overwrite: bool | None
    ) -> None:
        if state is TargetState.NON_EMPTY:
            if overwrite is None:
                raise OverwriteRequiredError(root)
            if not overwrite:
                raise FatalAbort()

        if state is TargetState.ABSENT:
            await asyncio.to_thread(ensure_dir, root)
        elif overwrite:
            await asyncio.to_thread(empty_dir, root)


# ---------------------------------------------------------------------------
# Completion report helpers
# ---------------------------------------------------------------------------


def pkg_from_user_agent(user_agent: str | None) -> PackageManagerInfo | None:
    """Parse the package manager out of a ``npm_config_user_agent`` value.

    Best effort: anything that does not start with a ``<name>/<version>``
    token yields ``None``.

    Examples::

        pkg_from_user_agent("pnpm/8.6.0 npm/? node/v18.16.0") -> name="pnpm", version="8.6.0"
        pkg_from_user_agent("") -> None
    """
    if not user_agent or not user_agent.strip():
        return None
    spec = user_agent.split()[0]
    name, sep, version = spec.partition("/")
    if not name or not sep:
        return None
    return PackageManagerInfo(name=name, version=version or None)


def next_steps(root: Path, cwd: Path, package_manager: str) -> list[str]:
    """Shell commands to run after scaffolding.

    The ``cd`` step is omitted when the project was generated in *cwd*.
    Relative paths containing a space are double-quoted.
    """
    commands: list[str] = []
    if Path(root) != Path(cwd):
        rel = os.path.relpath(root, cwd)
        commands.append(f'cd "{rel}"' if " " in rel else f"cd {rel}")

    if package_manager == "yarn":
        commands.extend(["yarn", "yarn dev"])
    else:
        commands.extend([f"{package_manager} install", f"{package_manager} run dev"])
    return commands
