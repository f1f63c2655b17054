"""Safety checks that stand between the user and rm."""

from __future__ import annotations

from .classifier import BlockedOperationError, Classification, check_args, classify
from .expansion import GlobSyntaxError, MemoryLister, expand, is_glob
from .protected import PROTECTED_PATHS, is_top_level_system_path, normalize_path

__all__ = [
    "BlockedOperationError",
    "Classification",
    "check_args",
    "classify",
    "GlobSyntaxError",
    "MemoryLister",
    "expand",
    "is_glob",
    "PROTECTED_PATHS",
    "is_top_level_system_path",
    "normalize_path",
]
