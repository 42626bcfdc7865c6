"""Disk operations for scaffolding: inspect, clear and copy directory trees.

Every function here is synchronous and blocking.  ``OSError`` raised by the
underlying calls is converted to :class:`~create_vv.errors.FilesystemError`
so the generator only has to deal with one failure type.
"""

from __future__ import annotations

import enum
import shutil
from collections.abc import Collection, Mapping
from pathlib import Path

from create_vv.errors import FilesystemError


GIT_DIR = ".git"


# ---------------------------------------------------------------------------
# Inspection
# ---------------------------------------------------------------------------


class TargetState(str, enum.Enum):
    """What currently occupies a target directory path."""

    ABSENT = "absent"
    EMPTY_OR_GIT_ONLY = "empty_or_git_only"
    NON_EMPTY = "non_empty"


def classify_directory(path: str | Path) -> TargetState:
    """Classify *path* for scaffolding.

    A directory holding nothing, or nothing but a ``.git`` entry, counts as
    empty so that a fresh checkout can be scaffolded into without prompting.

    Raises:
        FilesystemError: If something other than a readable directory
            exists at *path*.
    """
    target = Path(path)
    if not target.exists() and not target.is_symlink():
        return TargetState.ABSENT
    if not target.is_dir():
        raise FilesystemError(target, "Target path exists and is not a directory")

    try:
        names = [entry.name for entry in target.iterdir()]
    except OSError as exc:
        raise FilesystemError(target, f"Cannot read target directory ({exc.strerror})") from exc

    if not names or names == [GIT_DIR]:
        return TargetState.EMPTY_OR_GIT_ONLY
    return TargetState.NON_EMPTY


# ---------------------------------------------------------------------------
# Destructive reset
# ---------------------------------------------------------------------------


def empty_dir(path: str | Path) -> None:
    """Remove everything inside *path* except ``.git``.

    Does nothing if *path* does not exist.  Entries that disappear while
    this runs are treated as already removed.
    """
    target = Path(path)
    if not target.is_dir():
        return

    try:
        entries = list(target.iterdir())
    except FileNotFoundError:
        return
    except OSError as exc:
        raise FilesystemError(target, f"Cannot read target directory ({exc.strerror})") from exc

    for entry in entries:
        if entry.name == GIT_DIR:
            continue
        try:
            if entry.is_dir() and not entry.is_symlink():
                shutil.rmtree(entry)
            else:
                entry.unlink(missing_ok=True)
        except FileNotFoundError:
            continue
        except OSError as exc:
            raise FilesystemError(entry, f"Cannot remove existing entry ({exc.strerror})") from exc


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Returns:
        The ``Path`` object.
    """
    dir_path = Path(path)
    try:
        dir_path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemError(dir_path, f"Cannot create directory ({exc.strerror})") from exc
    return dir_path


# ---------------------------------------------------------------------------
# Tree copy
# ---------------------------------------------------------------------------


def copy_entry(src: str | Path, dest: str | Path) -> list[Path]:
    """Copy a file or a whole directory tree from *src* to *dest*.

    Directories are walked with an explicit stack, so deeply nested
    templates do not hit the recursion limit.  File contents are copied
    byte for byte.  A failure part-way through leaves whatever was already
    written in place.

    Returns:
        Every file written, in copy order.
    """
    written: list[Path] = []
    stack: list[tuple[Path, Path]] = [(Path(src), Path(dest))]

    while stack:
        src_path, dest_path = stack.pop()
        try:
            if src_path.is_dir():
                dest_path.mkdir(parents=True, exist_ok=True)
                # Reversed so entries are popped in sorted order.
                children = sorted(src_path.iterdir(), key=lambda p: p.name, reverse=True)
                stack.extend((child, dest_path / child.name) for child in children)
            else:
                dest_path.parent.mkdir(parents=True, exist_ok=True)
                shutil.copy(src_path, dest_path)
                written.append(dest_path)
        except OSError as exc:
            raise FilesystemError(
                dest_path, f"Failed to copy {src_path} ({exc.strerror or exc})"
            ) from exc

    return written


def materialize_template(
    template_dir: str | Path,
    root: str | Path,
    *,
    rename_files: Mapping[str, str] | None = None,
    exclude: Collection[str] = (),
) -> list[Path]:
    """Copy every top-level entry of *template_dir* into *root*.

    Top-level names found in *rename_files* are written under their mapped
    name.  Names in *exclude* (the manifest) are skipped so they can be
    written separately.

    Returns:
        Every file written.
    """
    rename_files = rename_files or {}
    template_path = Path(template_dir)
    root_path = Path(root)

    if not template_path.is_dir():
        raise FilesystemError(template_path, "Template directory not found")

    written: list[Path] = []
    for entry in sorted(template_path.iterdir(), key=lambda p: p.name):
        if entry.name in exclude:
            continue
        target_name = rename_files.get(entry.name, entry.name)
        written.extend(copy_entry(entry, root_path / target_name))
    return written
