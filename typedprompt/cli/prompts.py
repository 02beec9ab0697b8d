"""
Reusable CLI prompt helpers — validated input, no crashes.
"""

from __future__ import annotations

import math
from typing import List, Optional

from typedprompt.engine.reader import read_input
from typedprompt.models.target import ConversionError, TargetType


def prompt_float(
    prompt:     str,
    min_val:    float = 0.0,
    max_val:    Optional[float] = None,
    allow_zero: bool  = False,
) -> float:
    """Prompt for a float, re-asking on bad input."""
    def check(value: float) -> None:
        if not math.isfinite(value):
            raise ConversionError("Please enter a finite number.")
        if not allow_zero and value <= min_val:
            raise ConversionError(f"Value must be greater than {min_val}.")
        if allow_zero and value < min_val:
            raise ConversionError(f"Value must be at least {min_val}.")
        if max_val is not None and value > max_val:
            raise ConversionError(f"Value must be at most {max_val}.")

    return read_input(prompt, float, validate=check, show_errors=True)


def prompt_int(prompt: str, min_val: int = 1, max_val: Optional[int] = None) -> int:
    """Prompt for an integer within an optional range."""
    def check(value: int) -> None:
        if value < min_val:
            raise ConversionError(f"Value must be at least {min_val}.")
        if max_val is not None and value > max_val:
            raise ConversionError(f"Value must be at most {max_val}.")

    return read_input(prompt, int, validate=check, show_errors=True)


def prompt_str(prompt: str, allow_empty: bool = False) -> str:
    """Prompt for a non-empty string."""
    def check(value: str) -> None:
        if not value and not allow_empty:
            raise ConversionError("Input cannot be empty.")

    return read_input(prompt, str, validate=check, show_errors=True)


def _parse_yes_no(text: str) -> Optional[bool]:
    answer = text.lower()
    if answer in ("y", "yes"):
        return True
    if answer in ("n", "no"):
        return False
    if answer == "":
        return None
    raise ConversionError("Please enter y or n.")


YES_NO = TargetType("yes/no", _parse_yes_no)


def prompt_confirm(prompt: str, default: bool = True) -> bool:
    """Yes/No confirmation. Returns True for yes."""
    hint = "[Y/n]" if default else "[y/N]"
    answer = read_input(f"{prompt} {hint}: ", YES_NO, show_errors=True)
    return default if answer is None else answer


def prompt_choice(prompt: str, options: List[str]) -> int:
    """Display a numbered list and return the chosen 0-based index."""
    if not options:
        raise ValueError("prompt_choice needs at least one option.")
    for i, opt in enumerate(options, 1):
        print(f"    {i}. {opt}")

    def check(number: int) -> None:
        if not 1 <= number <= len(options):
            raise ConversionError(f"Please enter 1–{len(options)}.")

    return read_input(prompt, int, validate=check, show_errors=True) - 1
