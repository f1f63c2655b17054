"""Decide whether an rm invocation is obviously catastrophic."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal, Optional

from dontrm.safety.expansion import DirectoryLister
from dontrm.safety.flags import split_arguments
from dontrm.safety.matcher import canonicalize, find_destructive_match
from dontrm.safety.protected import is_top_level_system_path

logger = logging.getLogger(__name__)

BlockKind = Literal["top_level_path", "top_level_child_all_contents"]

BLOCK_MESSAGES: dict[BlockKind, str] = {
    "top_level_path": "⛔ Blocked dangerous operation: Cannot delete system directory",
    "top_level_child_all_contents": (
        "⛔ Blocked dangerous operation: Cannot delete all contents of system directory"
    ),
}


class BlockedOperationError(Exception):
    """An rm invocation that would destroy a system directory."""

    def __init__(self, kind: BlockKind, matched: str):
        self.kind = kind
        self.matched = matched
        super().__init__(f"{BLOCK_MESSAGES[kind]}: {matched}")


@dataclass(frozen=True)
class Classification:
    """Outcome of classifying an argument list."""

    kind: Optional[BlockKind] = None
    matched: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.kind is None) != (self.matched is None):
            raise ValueError("kind and matched must be given together")

    @property
    def allowed(self) -> bool:
        return self.kind is None

    @property
    def error(self) -> Optional[BlockedOperationError]:
        """The error to report, or None when the operation is allowed."""
        if self.kind is None:
            return None
        return BlockedOperationError(self.kind, self.matched)


ALLOWED = Classification()


def classify(args: Sequence[str], lister: Optional[DirectoryLister] = None) -> Classification:
    """
    Classify the arguments of an rm invocation.

    Flags are ignored. The first operand that names a protected path
    blocks the call outright. Otherwise the remaining operands are
    compared, as a set, against the current contents of every protected
    directory.

    Args:
        args: Arguments following the program name
        lister: Directory view for wildcard expansion (default: live filesystem)

    Returns:
        Classification, allowed or blocked with the matched path/pattern
    """
    _, operands = split_arguments(args)

    tail: list[str] = []
    for operand in operands:
        protected = is_top_level_system_path(operand)
        if protected is not None:
            logger.debug("Operand %r is protected path %s", operand, protected)
            return Classification("top_level_path", protected)
        tail.append(operand)

    if not tail:
        return ALLOWED

    pattern = find_destructive_match(canonicalize(tail), lister)
    if pattern is not None:
        return Classification("top_level_child_all_contents", pattern)

    return ALLOWED


def check_args(args: Sequence[str], lister: Optional[DirectoryLister] = None) -> None:
    """
    Raise if the arguments describe a catastrophic deletion.

    Raises:
        BlockedOperationError: With the kind of block and the matched path
    """
    error = classify(args, lister).error
    if error is not None:
        raise error
