"""
Ratcliff/Obershelp Similarity — Interactive CLI
===============================================
Thin wrapper around the obershelp library.

Usage:
    obershelp                      # interactive mode
    obershelp "hello" "world"      # single comparison

Settings are read from environment variables:
    OBERSHELP_MAX_LENGTH   Longest accepted input, per string (0 = no cap)
    OBERSHELP_LOG_LEVEL    Logging level name, e.g. DEBUG

Matching cost grows steeply with input length, so long inputs are
refused rather than left to run unbounded.
"""

import logging
import os
import sys

from obershelp import compare

# ── Default settings ──────────────────────────────────────────
_DEFAULT_MAX_LENGTH = "10000"
_DEFAULT_LOG_LEVEL = "WARNING"

_BANNER = """\
╔══════════════════════════════════════╗
║   Ratcliff/Obershelp Similarity      ║
║    Two strings → Similarity score    ║
╚══════════════════════════════════════╝
Type 'q' to quit.
"""

_USAGE = "Usage: obershelp [FIRST SECOND]"


class _SettingsError(ValueError):
    """An environment setting holds an unusable value."""


def _read_max_length() -> int:
    raw = os.environ.get("OBERSHELP_MAX_LENGTH", _DEFAULT_MAX_LENGTH)
    try:
        value = int(raw)
    except ValueError:
        value = -1
    if value < 0:
        raise _SettingsError(
            "OBERSHELP_MAX_LENGTH must be a non-negative integer, "
            f"got '{raw}'"
        )
    return value


def _read_log_level() -> int:
    raw = os.environ.get("OBERSHELP_LOG_LEVEL", _DEFAULT_LOG_LEVEL)
    # getLevelName maps known names to their number, anything else to a str
    level = logging.getLevelName(raw.strip().upper())
    if not isinstance(level, int):
        raise _SettingsError(
            f"OBERSHELP_LOG_LEVEL is not a level name: '{raw}'"
        )
    return level


def _too_long(text: str, max_length: int) -> bool:
    return max_length > 0 and len(text) > max_length


def _run_interactive(max_length: int) -> None:
    print(_BANNER)

    while True:
        # -- First string -----------------------------------------------
        try:
            first = input("\nFirst string:    ")
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break

        if first.strip().lower() in ("q", "quit", "exit"):
            print("Bye!")
            break

        # -- Second string ----------------------------------------------
        try:
            second = input("Second string:   ")
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break

        if _too_long(first, max_length) or _too_long(second, max_length):
            print(f"  ✗ Inputs are limited to {max_length} characters.")
            continue

        # -- Compare ----------------------------------------------------
        result = compare(first, second)

        # -- Display ----------------------------------------------------
        matches = ", ".join(repr(m.text) for m in result.matches) or "-"
        print()
        print(f"  Similarity   {result.similarity:.3f}")
        print(f"  Distance     {result.distance:.3f}")
        print(f"  Matched      {result.matched_characters} chars")
        print(f"  Blocks       {matches}")


def main() -> None:
    """Entry point — supports both CLI args and interactive mode."""
    try:
        max_length = _read_max_length()
        log_level = _read_log_level()
    except _SettingsError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)

    logging.basicConfig(level=log_level)

    if len(sys.argv) == 1:
        _run_interactive(max_length)
        return
    if len(sys.argv) != 3:
        print(_USAGE, file=sys.stderr)
        sys.exit(2)

    # Single-shot mode
    first, second = sys.argv[1], sys.argv[2]
    if _too_long(first, max_length) or _too_long(second, max_length):
        print(
            f"Inputs are limited to {max_length} characters "
            "(set OBERSHELP_MAX_LENGTH to change).",
            file=sys.stderr,
        )
        sys.exit(1)
    result = compare(first, second)
    for key, val in result.to_dict().items():
        print(f"{key:>20}: {val}")


if __name__ == "__main__":
    main()
