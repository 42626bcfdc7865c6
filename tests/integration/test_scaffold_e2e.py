"""End-to-end scaffolding runs against the bundled templates.

These tests use the real ``create_vv/templates`` trees and exercise the
whole pipeline: resolve target, inspect, clear/create, copy, patch
``package.json`` and report next steps.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from create_vv.config import Config
from create_vv.scaffolder import AnswerSet, ProjectGenerator, TargetState, get_template


def _template_files(template_dir: Path) -> dict[str, bytes]:
    """Map output-relative path -> bytes for every non-manifest template file."""
    files: dict[str, bytes] = {}
    for src in template_dir.rglob("*"):
        if src.is_dir() or src.name == "package.json":
            continue
        rel = src.relative_to(template_dir).as_posix()
        if rel == "_gitignore":
            rel = ".gitignore"
        files[rel] = src.read_bytes()
    return files


@pytest.mark.integration
class TestScaffoldScenarios:
    """The three scenarios a user runs into most often."""

    async def test_new_directory_with_space(self, tmp_path: Path):
        cwd = tmp_path / "work"
        cwd.mkdir()
        config = Config()
        answers = AnswerSet(template=get_template("vue-ts"), target_dir_raw="My App/")

        report = await ProjectGenerator(config).generate(answers, cwd)

        root = cwd / "My App"
        assert report.root == root
        assert report.state_before is TargetState.ABSENT
        assert report.package_name == "my-app"
        assert report.commands == ['cd "My App"', "npm install", "npm run dev"]

        expected = _template_files(config.template_path(get_template("vue-ts")))
        for rel, content in expected.items():
            assert (root / rel).read_bytes() == content, rel
        assert not (root / "_gitignore").exists()

        manifest_text = (root / "package.json").read_text(encoding="utf-8")
        assert manifest_text.endswith("}\n")
        manifest = json.loads(manifest_text)
        assert manifest["name"] == "my-app"
        assert manifest["scripts"]["dev"] == "vite"

    async def test_overwrite_current_directory(self, tmp_path: Path):
        cwd = tmp_path / "existing-app"
        (cwd / ".git").mkdir(parents=True)
        (cwd / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
        (cwd / "unrelated.txt").write_text("old")
        answers = AnswerSet(template=get_template("vue"), target_dir_raw=".", overwrite=True)

        report = await ProjectGenerator(Config()).generate(answers, cwd)

        assert report.state_before is TargetState.NON_EMPTY
        assert not (cwd / "unrelated.txt").exists()
        assert (cwd / ".git" / "HEAD").read_text() == "ref: refs/heads/main\n"
        assert (cwd / "src" / "main.js").exists()
        assert json.loads((cwd / "package.json").read_text())["name"] == "existing-app"
        assert report.commands == ["npm install", "npm run dev"]

    async def test_git_only_directory(self, tmp_path: Path):
        cwd = tmp_path / "work"
        git_dir = cwd / "checkout" / ".git"
        git_dir.mkdir(parents=True)
        (git_dir / "config").write_text("[core]\n")
        answers = AnswerSet(template=get_template("vue-ts"), target_dir_raw="checkout")

        report = await ProjectGenerator(Config()).generate(answers, cwd)

        assert report.state_before is TargetState.EMPTY_OR_GIT_ONLY
        assert (git_dir / "config").read_text() == "[core]\n"
        assert (cwd / "checkout" / "index.html").exists()
        assert (cwd / "checkout" / ".gitignore").exists()

    async def test_rerun_is_deterministic(self, tmp_path: Path):
        cwd = tmp_path / "work"
        cwd.mkdir()
        generator = ProjectGenerator(Config())
        answers = AnswerSet(template=get_template("vue-ts"), target_dir_raw="app")

        await generator.generate(answers, cwd)
        first = {p.relative_to(cwd): p.read_bytes() for p in cwd.rglob("*") if p.is_file()}

        await generator.generate(answers.model_copy(update={"overwrite": True}), cwd)
        second = {p.relative_to(cwd): p.read_bytes() for p in cwd.rglob("*") if p.is_file()}

        assert first == second

    async def test_yarn_report(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("npm_config_user_agent", "yarn/1.22.19 npm/? node/v18.16.0")
        cwd = tmp_path / "work"
        cwd.mkdir()
        answers = AnswerSet(template=get_template("vue"), target_dir_raw="shop")

        report = await ProjectGenerator(Config()).generate(answers, cwd)

        assert report.package_manager == "yarn"
        assert report.commands == ["cd shop", "yarn", "yarn dev"]
