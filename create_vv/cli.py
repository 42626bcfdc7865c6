"""Command-line entry point for create-vv.

Usage::

    create-vv my-app --template vue-ts
    python -m create_vv .
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from create_vv import __version__
from create_vv.config import Config
from create_vv.errors import FatalAbort, NameValidationError, ScaffoldError
from create_vv.prompts import ask_package_name, collect_answers
from create_vv.scaffolder.catalog import TEMPLATE_NAMES
from create_vv.scaffolder.generator import AnswerSet, ProjectGenerator, ScaffoldReport
from create_vv.utils import (
    print_error,
    print_next_steps,
    print_scaffolding,
    print_summary_table,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-vv",
        description="Scaffold a new Vue project from a bundled template",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-vv\n"
            "  create-vv my-app --template vue-ts\n"
            "  create-vv . -t vue\n"
            f"\nTemplates: {', '.join(TEMPLATE_NAMES)}\n"
        ),
    )
    parser.add_argument(
        "target_dir",
        nargs="?",
        default=None,
        help="Directory to create the project in (prompted for if omitted)",
    )
    parser.add_argument(
        "--template", "-t",
        default=None,
        help="Template to use (prompted for if omitted or unknown)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


async def scaffold(
    generator: ProjectGenerator, answers: AnswerSet, cwd: Path
) -> ScaffoldReport:
    """Run the generator, asking for an explicit package name if needed.

    The package name is resolved before anything touches the disk, so a
    rejected name can be replaced and the run started again safely.
    """
    try:
        generator.resolve_package_name(answers, cwd)
    except NameValidationError as exc:
        print_error(str(exc))
        try:
            package_name = ask_package_name()
        except (KeyboardInterrupt, EOFError):
            raise FatalAbort() from None
        answers = answers.model_copy(update={"package_name": package_name})

    print_scaffolding(generator.resolve_root(answers, cwd))
    return await generator.generate(answers, cwd)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``create-vv`` and ``python -m create_vv``."""
    args = build_parser().parse_args(argv)

    config = Config.from_env()
    cwd = Path.cwd()
    generator = ProjectGenerator(config)

    try:
        answers = collect_answers(args.target_dir, args.template, config, cwd)
        report = asyncio.run(scaffold(generator, answers, cwd))
    except FatalAbort as exc:
        print_error(f"✖ {exc}")
        return
    except KeyboardInterrupt:
        print_error("✖ Operation cancelled")
        return
    except ScaffoldError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)

    print_summary_table(
        {
            "Template": report.template,
            "Package name": report.package_name,
            "Files written": str(len(report.files_written)),
        },
        title="Project",
    )
    print_next_steps(report.commands)


if __name__ == "__main__":
    main()
