#!/usr/bin/env python3
"""
typedprompt — Interactive Demo
══════════════════════════════════════════════════════════════════════
Pick a target type, type some text, and watch it get converted.  Bad
input earns a fresh prompt on the same line; nothing is returned until
the text converts.

Run:
    python -m typedprompt.main
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Tuple

from typedprompt import config
from typedprompt.engine.reader import read_input
from typedprompt.logging_utils import setup_console_logging

logger = logging.getLogger(__name__)

# ─────────────────────────────────────────────────────────────────── #
#  UI strings                                                          #
# ─────────────────────────────────────────────────────────────────── #

BANNER = r"""
  ╔══════════════════════════════════════════════════════════╗
  ║   t y p e d p r o m p t                                  ║
  ║   read a line, trim it, convert it, or ask again         ║
  ╚══════════════════════════════════════════════════════════╝
"""

DEMO_TARGETS: Tuple[Tuple[str, str], ...] = (
    ("i32",    "32-bit signed integer"),
    ("u32",    "32-bit unsigned integer"),
    ("i64",    "64-bit signed integer"),
    ("u8",     "8-bit unsigned integer"),
    ("f32",    "32-bit float"),
    ("f64",    "64-bit float"),
    ("bool",   "true / false"),
    ("char",   "single character"),
    ("String", "any text"),
)


def build_menu(targets: Tuple[Tuple[str, str], ...] = DEMO_TARGETS) -> str:
    bar = "─" * 54
    lines = [
        "",
        f"  ┌─────┬{bar}┐",
        f"  │     │  {'TARGET TYPE':<52}│",
    ]
    for i, (alias, label) in enumerate(targets, 1):
        lines.append(f"  │ {i:>3} │  {alias:<7}{label:<45}│")
    lines.append(f"  ├─────┼{bar}┤")
    lines.append(f"  │ {0:>3} │  {'Exit':<52}│")
    lines.append(f"  └─────┴{bar}┘")
    return "\n".join(lines)


# ─────────────────────────────────────────────────────────────────── #
#  Actions                                                             #
# ─────────────────────────────────────────────────────────────────── #

def convert_once(alias: str) -> Any:
    """Read one value of `alias` with the configured prompt and echo it."""
    value = read_input(config.DEFAULT_PROMPT, alias, show_errors=config.SHOW_ERRORS)
    print(f"\n  ✔  {alias}: {value!r}  ({type(value).__name__})\n")
    logger.info("converted a %s value", alias)
    return value


# ─────────────────────────────────────────────────────────────────── #
#  Main loop                                                           #
# ─────────────────────────────────────────────────────────────────── #

def main() -> None:
    setup_console_logging(config.LOG_LEVEL)
    print(BANNER)

    actions: Dict[str, str] = {
        str(i): alias for i, (alias, _) in enumerate(DEMO_TARGETS, 1)
    }
    menu = build_menu()

    while True:
        print(menu)
        choice = read_input("  Enter choice: ")

        if choice == "0":
            print("\n  ✔  Goodbye!\n")
            break

        alias = actions.get(choice)
        if alias is None:
            print(f"  ⚠  Invalid choice. Please enter 0–{len(DEMO_TARGETS)}.\n")
            continue

        try:
            convert_once(alias)
        except KeyboardInterrupt:
            print("\n\n  Interrupted. Returning to menu…\n")


if __name__ == "__main__":
    main()
