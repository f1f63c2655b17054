"""UI components for console output."""

from __future__ import annotations

from .console import configure_logging, create_console, print_error, print_notice, print_version

__all__ = ["create_console", "configure_logging", "print_error", "print_notice", "print_version"]
