"""Execution of allowed rm invocations."""

from __future__ import annotations

from .delegate import DelegateError, RmDelegate

__all__ = ["RmDelegate", "DelegateError"]
