"""dontrm - a safe wrapper around rm that refuses catastrophic deletions."""

from __future__ import annotations

__version__ = "0.1.0"
