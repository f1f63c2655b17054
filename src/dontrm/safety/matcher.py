"""Detect operand lists that amount to "everything inside a system directory"."""

from __future__ import annotations

import logging
import posixpath
from collections.abc import Iterable
from typing import Optional

from dontrm.safety.expansion import DirectoryLister, GlobSyntaxError, expand
from dontrm.safety.protected import PROTECTED_PATHS

logger = logging.getLogger(__name__)


def canonicalize(values: Iterable[str]) -> str:
    """Sort values and join them with spaces. Duplicates are kept."""
    return " ".join(sorted(values))


def find_destructive_match(
    tail: str,
    lister: Optional[DirectoryLister] = None,
    protected_paths: Optional[Iterable[str]] = None,
) -> Optional[str]:
    """
    Compare a canonical operand list against ``<protected>/*`` expansions.

    By the time rm sees ``/etc/*`` the shell has already turned it into a list
    of file names, so the question is whether that list is exactly what the
    wildcard would produce right now.

    Args:
        tail: Canonical form of the operands (see canonicalize)
        lister: Directory view used for expansion (default: live filesystem)
        protected_paths: Directories to check (default: PROTECTED_PATHS)

    Returns:
        The matching ``<protected>/*`` pattern, or None
    """
    if protected_paths is None:
        protected_paths = PROTECTED_PATHS

    for protected in sorted(protected_paths):
        candidate = posixpath.join(protected, "*")
        try:
            contents = expand(candidate, lister)
        except GlobSyntaxError as e:
            logger.warning("Skipping protected entry %s: %s", protected, e)
            continue

        # Nothing to lose in an empty directory
        if not contents:
            continue

        if canonicalize(contents) == tail:
            logger.debug("Operands match all contents of %s", protected)
            return candidate

    return None
