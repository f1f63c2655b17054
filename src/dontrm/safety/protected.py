"""Protected path definitions to prevent catastrophic deletion."""

from __future__ import annotations

import posixpath
from typing import FrozenSet, Optional

# Top-level system paths that must never be handed to rm
PROTECTED_PATHS: FrozenSet[str] = frozenset({
    "/",
    "/bin",
    "/boot",
    "/dev",
    "/etc",
    "/home",
    "/lib",
    "/lib64",
    "/media",
    "/mnt",
    "/opt",
    "/proc",
    "/root",
    "/run",
    "/sbin",
    "/srv",
    "/sys",
    "/tmp",
    "/usr",
    "/usr/bin",
    "/usr/sbin",
    "/var",
})


def normalize_path(path: str) -> str:
    """
    Clean a path lexically, without touching the filesystem.

    Collapses repeated separators, resolves ``.`` and ``..`` segments and
    drops any trailing slash, so ``/usr//bin/`` and ``/usr/lib/../bin``
    both become ``/usr/bin``.
    """
    cleaned = posixpath.normpath(path)
    # POSIX lets normpath keep a leading "//"
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def is_top_level_system_path(path: str) -> Optional[str]:
    """Return the protected entry ``path`` normalizes to, or None."""
    cleaned = normalize_path(path)
    if cleaned in PROTECTED_PATHS:
        return cleaned
    return None
