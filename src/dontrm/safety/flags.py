"""Separate rm option flags from the operands they apply to."""

from __future__ import annotations

from collections.abc import Sequence

OPTIONS_TERMINATOR = "--"


def split_arguments(args: Sequence[str]) -> tuple[list[str], list[str]]:
    """
    Split an rm argument list into flags and operands.

    Anything starting with ``-`` is a flag until the first literal ``--``.
    That terminator is consumed; every token after it is an operand, even
    ``-foo`` or another ``--``.

    Args:
        args: Arguments following the program name

    Returns:
        Tuple of (flags, operands), each in original order
    """
    flags: list[str] = []
    operands: list[str] = []
    stop_parsing_options = False

    for arg in args:
        if stop_parsing_options:
            operands.append(arg)
        elif arg == OPTIONS_TERMINATOR:
            stop_parsing_options = True
        elif arg.startswith("-"):
            flags.append(arg)
        else:
            operands.append(arg)

    return flags, operands
