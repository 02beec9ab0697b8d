"""
Target type model — what a line of text is converted into, and the two
ways an attempt can fail.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


class ConversionError(ValueError):
    """
    The trimmed text does not satisfy the target type's construction rule.
    Recoverable: the reader discards the attempt and prompts again.
    """

    def __init__(self, reason: str, text: str = "", target: str = "") -> None:
        super().__init__(reason)
        self.reason = reason
        self.text   = text
        self.target = target

    def __str__(self) -> str:
        return self.reason


class StreamError(Exception):
    """The input or output stream is closed or faulted. Never retried."""


@dataclass(frozen=True)
class TargetType:
    """
    A named conversion from a string slice to a value.
    parse may raise ConversionError, or any ValueError or ArithmeticError,
    which convert() reports as a ConversionError.
    """
    name:  str
    parse: Callable[[str], Any]

    def convert(self, text: str) -> Any:
        try:
            return self.parse(text)
        except ConversionError as exc:
            if not exc.target:
                exc.target = self.name
            if not exc.text:
                exc.text = text
            raise
        except (ValueError, ArithmeticError) as exc:
            reason = str(exc) or f"invalid {self.name}"
            raise ConversionError(reason, text=text, target=self.name) from exc
