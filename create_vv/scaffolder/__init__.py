"""create-vv scaffolder -- materialises a bundled template onto disk.

This package takes an ``AnswerSet`` (target directory, overwrite decision,
package name and template) and produces a ready-to-install project directory
with a patched ``package.json``.

Quick usage::

    from create_vv.scaffolder import AnswerSet, ProjectGenerator, get_template

    answers = AnswerSet(template=get_template("vue-ts"), target_dir_raw="my-app")
    report = await ProjectGenerator().generate(answers)
"""

from create_vv.scaffolder.catalog import RENAME_FILES, TEMPLATES, TemplateRef, find_template, get_template
from create_vv.scaffolder.filesystem import TargetState, classify_directory
from create_vv.scaffolder.generator import (
    AnswerSet,
    PackageManagerInfo,
    ProjectGenerator,
    ScaffoldReport,
    next_steps,
    pkg_from_user_agent,
)

__all__ = [
    "AnswerSet",
    "PackageManagerInfo",
    "ProjectGenerator",
    "RENAME_FILES",
    "ScaffoldReport",
    "TEMPLATES",
    "TargetState",
    "TemplateRef",
    "classify_directory",
    "find_template",
    "get_template",
    "next_steps",
    "pkg_from_user_agent",
]
