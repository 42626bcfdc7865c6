"""``package.json`` rewriting.

The manifest is the only template file whose content changes: its ``name``
is replaced and the document is re-serialised with two-space indentation,
original key order and a trailing newline.
"""

from __future__ import annotations

import json
from pathlib import Path

from create_vv.errors import FilesystemError, ManifestParseError


MANIFEST_NAME = "package.json"


def render_manifest(raw: str, name: str) -> str:
    """Return *raw* manifest JSON with its ``name`` set to *name*.

    Raises:
        ManifestParseError: If *raw* is not a JSON object.
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ManifestParseError(f"Template manifest is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ManifestParseError(
            f"Template manifest must be a JSON object, got {type(data).__name__}"
        )

    data["name"] = name
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def patch_manifest(
    template_dir: str | Path,
    root: str | Path,
    name: str,
    *,
    manifest_name: str = MANIFEST_NAME,
) -> bytes:
    """Write the template's manifest into *root* with its name replaced.

    Args:
        template_dir: Template root holding the source manifest.
        root: Output project root; must already exist.
        name: Package name to store in the manifest.
        manifest_name: File name of the manifest in both trees.

    Returns:
        The bytes written to ``root / manifest_name``.
    """
    source = Path(template_dir) / manifest_name
    target = Path(root) / manifest_name

    try:
        raw = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise FilesystemError(source, f"Cannot read template manifest ({exc.strerror})") from exc
    except UnicodeDecodeError as exc:
        raise ManifestParseError(f"Template manifest is not UTF-8: {source}") from exc

    content = render_manifest(raw, name).encode("utf-8")
    try:
        target.write_bytes(content)
    except OSError as exc:
        raise FilesystemError(target, f"Cannot write manifest ({exc.strerror})") from exc
    return content
