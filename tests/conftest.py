"""Shared pytest fixtures for the create-vv test suite.

Provides reusable fixtures for:
- A small template tree with nested directories, a binary file and a
  ``_gitignore`` that must be renamed
- A ``Config`` pointing at that tree
- A clean environment (no package manager user agent)
- A recording Rich console
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from rich.console import Console

from create_vv.config import Config


BINARY_PAYLOAD = bytes(range(256)) * 4

SAMPLE_MANIFEST = {
    "name": "vite-vue-typescript-starter",
    "private": True,
    "version": "0.0.0",
    "type": "module",
    "scripts": {"dev": "vite", "build": "vue-tsc && vite build"},
    "dependencies": {"vue": "^3.3.4"},
}


# ---------------------------------------------------------------------------
# Template trees
# ---------------------------------------------------------------------------

def _write_template(template_dir: Path) -> Path:
    template_dir.mkdir(parents=True)
    (template_dir / "package.json").write_text(
        json.dumps(SAMPLE_MANIFEST, indent=2) + "\n", encoding="utf-8"
    )
    (template_dir / "_gitignore").write_text("node_modules\ndist\n", encoding="utf-8")
    (template_dir / "index.html").write_text("<div id=\"app\"></div>\n", encoding="utf-8")
    nested = template_dir / "src" / "components" / "deep"
    nested.mkdir(parents=True)
    (template_dir / "src" / "main.ts").write_text("createApp(App)\n", encoding="utf-8")
    (nested / "Widget.vue").write_text("<template />\n", encoding="utf-8")
    (template_dir / "public").mkdir()
    (template_dir / "public" / "logo.bin").write_bytes(BINARY_PAYLOAD)
    return template_dir


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    """Root holding ``template-vue-ts`` and ``template-vue`` test trees."""
    root = tmp_path / "templates"
    _write_template(root / "template-vue-ts")
    _write_template(root / "template-vue")
    return root


@pytest.fixture
def binary_payload() -> bytes:
    """Bytes stored in every test template at ``public/logo.bin``."""
    return BINARY_PAYLOAD


@pytest.fixture
def template_dir(templates_dir: Path) -> Path:
    """The ``template-vue-ts`` test tree."""
    return templates_dir / "template-vue-ts"


@pytest.fixture
def config(templates_dir: Path) -> Config:
    """Config that scaffolds from the test template trees."""
    return Config(templates_dir=templates_dir)


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """Empty invocation directory."""
    cwd = tmp_path / "work"
    cwd.mkdir()
    return cwd


# ---------------------------------------------------------------------------
# Environment & output
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove variables that change package manager or config detection."""
    for name in (
        "npm_config_user_agent",
        "CREATE_VV_DEFAULT_DIR",
        "CREATE_VV_TEMPLATES_DIR",
        "CREATE_VV_PACKAGE_MANAGER",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def recording_console():
    """Replace the shared console with one that records output.

    Usage:
        def test_output(recording_console):
            print_success("ok")
            assert "ok" in recording_console.export_text()
    """
    console = Console(record=True, width=120, force_terminal=False)
    with patch("create_vv.utils.console", console), patch(
        "create_vv.prompts.console", console
    ):
        yield console
