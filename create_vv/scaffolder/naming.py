"""Target-directory and package-name helpers.

Pure functions with no I/O: normalising the raw directory the user typed,
checking names against the ``package.json`` naming grammar, and deriving a
usable name from a directory.
"""

from __future__ import annotations

import os
import re
from pathlib import Path


# ---------------------------------------------------------------------------
# Package name grammar
# ---------------------------------------------------------------------------

_PACKAGE_NAME_RE = re.compile(
    r"(?:@[a-z0-9\-~][a-z0-9\-._~]*/)?[a-z0-9\-~][a-z0-9\-._~]*"
)
_WHITESPACE_RE = re.compile(r"\s+")
_LEADING_DOT_OR_UNDERSCORE_RE = re.compile(r"^[._]")
_DISALLOWED_RUN_RE = re.compile(r"[^a-z0-9\-~]+")


def normalize_target_dir(raw: str | None) -> str | None:
    """Trim whitespace and trailing slashes from a user-supplied directory.

    Returns ``None`` when nothing usable is left, in which case the caller
    falls back to the configured default directory.

    Examples::

        normalize_target_dir("  my-app/ ") -> "my-app"
        normalize_target_dir("///")        -> None
    """
    if raw is None:
        return None
    result = raw.strip()
    # "app/ /" must not leave "app/ " behind.
    while result.endswith("/"):
        result = result.rstrip("/").rstrip()
    return result or None


def is_valid_package_name(name: str) -> bool:
    """Return ``True`` if *name* is acceptable as a ``package.json`` name."""
    return _PACKAGE_NAME_RE.fullmatch(name) is not None


def to_valid_package_name(name: str) -> str:
    """Lossily convert *name* into something close to a valid package name.

    Lowercases, turns whitespace runs into ``-``, drops one leading ``.`` or
    ``_`` and replaces every other run of characters outside ``[a-z0-9-~]``
    with a single ``-``.  Applying it twice gives the same result as once.

    The result is not guaranteed to be valid: a name made only of leading
    dots/underscores or whitespace collapses to ``""``.  Callers must check
    with :func:`is_valid_package_name` before using it.
    """
    result = name.strip().lower()
    result = _WHITESPACE_RE.sub("-", result)
    result = _LEADING_DOT_OR_UNDERSCORE_RE.sub("", result, count=1)
    return _DISALLOWED_RUN_RE.sub("-", result)


def derive_project_name(target_dir: str, cwd: str | Path) -> str:
    """Name of the project living in *target_dir*.

    The leaf of the normalised absolute target path, so ``"."`` and
    ``"./."`` both give the basename of the invocation directory.
    """
    root = os.path.normpath(os.path.join(os.path.abspath(cwd), target_dir))
    return os.path.basename(root) or target_dir
