"""Glob detection and expansion against a directory listing."""

from __future__ import annotations

import fnmatch
import os
import posixpath
from collections.abc import Iterable
from typing import Optional, Protocol

from dontrm.safety.protected import normalize_path

GLOB_CHARS = frozenset("*?[")


class GlobSyntaxError(ValueError):
    """A glob pattern that cannot be expanded."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid glob pattern {pattern!r}: {reason}")


class DirectoryLister(Protocol):
    """Read-only view of a directory tree used to expand globs."""

    def list_dir(self, path: str) -> list[str]: ...
    def exists(self, path: str) -> bool: ...


class FilesystemLister:
    """Lists the live filesystem."""

    def list_dir(self, path: str) -> list[str]:
        with os.scandir(path) as entries:
            return [entry.name for entry in entries]

    def exists(self, path: str) -> bool:
        return os.path.lexists(path)


class MemoryLister:
    """
    Directory tree built from a fixed list of absolute paths.

    Every parent of a listed path is a directory, so
    ``MemoryLister(["/usr/bin/bash"])`` holds ``/``, ``/usr`` and ``/usr/bin``.
    A trailing slash declares an empty directory, e.g. ``"/tmp/"``.
    """

    def __init__(self, paths: Iterable[str]):
        self._children: dict[str, set[str]] = {"/": set()}
        self._entries: set[str] = {"/"}

        for raw in paths:
            path = normalize_path(raw)
            if not path.startswith("/"):
                raise ValueError(f"MemoryLister paths must be absolute: {raw!r}")
            if raw.endswith("/"):
                self._children.setdefault(path, set())

            self._entries.add(path)
            child = path
            while child != "/":
                parent = posixpath.dirname(child)
                self._children.setdefault(parent, set()).add(posixpath.basename(child))
                self._entries.add(parent)
                child = parent

    def list_dir(self, path: str) -> list[str]:
        key = normalize_path(path)
        if key in self._children:
            return sorted(self._children[key])
        if key in self._entries:
            raise NotADirectoryError(path)
        raise FileNotFoundError(path)

    def exists(self, path: str) -> bool:
        return normalize_path(path) in self._entries


def is_glob(path: str) -> bool:
    """Return True if the path contains any globbing character."""
    return any(char in GLOB_CHARS for char in path)


def expand(pattern: str, lister: Optional[DirectoryLister] = None) -> list[str]:
    """
    Expand a glob pattern into the entries it currently matches.

    Strings without globbing characters are returned as-is and never touch
    the lister. Results are sorted; a pattern matching nothing yields an
    empty list.

    Args:
        pattern: Path or glob pattern
        lister: Directory view to match against (default: live filesystem)

    Returns:
        Sorted list of matching paths

    Raises:
        GlobSyntaxError: If the pattern is malformed
    """
    if not is_glob(pattern):
        return [pattern]

    # Validate every segment before listing anything
    segments = [_compile_segment(pattern, part) for part in pattern.split("/") if part]

    if lister is None:
        lister = FilesystemLister()

    matches = ["/" if pattern.startswith("/") else ""]
    for fn_pattern, literal in segments:
        matches = _expand_segment(lister, matches, fn_pattern, literal)
        if not matches:
            break

    return sorted(matches)


def _bracket_end(segment: str, start: int) -> int:
    """Return the index of the ``]`` closing the class opened at ``start``, or -1."""
    index = start + 1
    if index < len(segment) and segment[index] in "!^":
        index += 1
    # A leading "]" is part of the class
    if index < len(segment) and segment[index] == "]":
        index += 1
    return segment.find("]", index)


def _compile_segment(pattern: str, segment: str) -> tuple[str, Optional[str]]:
    """
    Translate one path segment into an fnmatch pattern.

    Returns:
        (fnmatch pattern, literal name); the literal is None when the
        segment contains wildcards
    """
    parts: list[str] = []
    literal: list[str] = []
    magic = False
    index = 0

    while index < len(segment):
        char = segment[index]

        if char == "\\":
            if index + 1 == len(segment):
                raise GlobSyntaxError(pattern, "trailing backslash escape")
            escaped = segment[index + 1]
            parts.append(f"[{escaped}]" if escaped in GLOB_CHARS else escaped)
            literal.append(escaped)
            index += 2
            continue

        if char == "[":
            end = _bracket_end(segment, index)
            if end < 0:
                raise GlobSyntaxError(pattern, "unterminated or empty bracket expression")
            body = segment[index + 1:end]
            if body.startswith("^"):
                body = "!" + body[1:]
            parts.append(f"[{body}]")
            magic = True
            index = end + 1
            continue

        if char in GLOB_CHARS:
            magic = True
        parts.append(char)
        literal.append(char)
        index += 1

    return "".join(parts), None if magic else "".join(literal)


def _join(base: str, name: str) -> str:
    if not base:
        return name
    if base.endswith("/"):
        return base + name
    return f"{base}/{name}"


def _expand_segment(
    lister: DirectoryLister,
    bases: list[str],
    fn_pattern: str,
    literal: Optional[str],
) -> list[str]:
    """Match one segment under each base path."""
    found: list[str] = []

    for base in bases:
        if literal is not None:
            candidate = _join(base, literal)
            if lister.exists(candidate):
                found.append(candidate)
            continue

        try:
            names = lister.list_dir(base or os.curdir)
        except OSError:
            # Missing, unreadable or not a directory: no matches here
            continue

        for name in names:
            # Hidden entries only match an explicit leading dot
            if name.startswith(".") and not fn_pattern.startswith("."):
                continue
            if fnmatch.fnmatchcase(name, fn_pattern):
                found.append(_join(base, name))

    return found
