"""
typedprompt — Prompted Input Reader
────────────────────────────────────
Obtain one validated, type-converted value from an interactive stream.

Each attempt:
  PROMPTING   write the prompt verbatim (no newline), flush, block on one line
  CONVERTING  strip the line, convert it, run the optional validator
  DONE        conversion succeeded: return the value

A failed conversion loops back to PROMPTING with no limit on attempts.
A closed or faulted stream is never retried: read_value raises StreamError,
read_input reports it and exits the process.
"""

from __future__ import annotations

import enum
import logging
import sys
from typing import Any, Callable, Optional, TextIO

from typedprompt.engine.converters import resolve_target
from typedprompt.models.target import StreamError

logger = logging.getLogger(__name__)


class ReaderState(enum.Enum):
    PROMPTING  = "prompting"
    CONVERTING = "converting"
    DONE       = "done"


def _await_line(prompt: str, stdin: TextIO, stdout: TextIO) -> str:
    try:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
    except (OSError, ValueError) as exc:
        raise StreamError(f"stream failed: {exc}") from exc
    if not line:
        raise StreamError("input stream closed before a line was read")
    return line


def read_value(
    prompt:      str,
    target:      Any = str,
    *,
    validate:    Optional[Callable[[Any], None]] = None,
    show_errors: bool = False,
    stdin:       Optional[TextIO] = None,
    stdout:      Optional[TextIO] = None,
) -> Any:
    """
    Prompt until the trimmed line converts to `target`, then return it.

    validate(value) may raise ConversionError or ValueError to reject a
    value that converted fine but is otherwise unacceptable.  With
    show_errors the rejection reason is printed before the next prompt;
    by default a bad line just earns a fresh prompt.

    Raises StreamError when the input is exhausted or a stream faults.
    """
    converter = resolve_target(target)
    stdin  = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    attempt = 0
    state   = ReaderState.PROMPTING
    while True:
        attempt += 1
        logger.debug("attempt %d: %s", attempt, state.value)
        line = _await_line(prompt, stdin, stdout)

        state = ReaderState.CONVERTING
        text  = line.strip()
        try:
            value = converter.convert(text)
            if validate is not None:
                validate(value)
        except ValueError as exc:  # ConversionError included
            reason = str(exc)
            logger.debug(
                "attempt %d: rejected %r as %s: %s",
                attempt, text, converter.name, reason,
            )
            if show_errors:
                try:
                    print(f"  ⚠  {reason}", file=stdout)
                except (OSError, ValueError) as write_exc:
                    raise StreamError(f"output stream failed: {write_exc}") from write_exc
            state = ReaderState.PROMPTING
            continue

        state = ReaderState.DONE
        logger.debug("attempt %d: %s, got %r", attempt, state.value, value)
        return value


def read_input(prompt: str, target: Any = str, **kwargs: Any) -> Any:
    """
    read_value() for interactive programs: a stream failure prints a
    diagnostic to stderr and exits with status 1 instead of raising.
    """
    try:
        return read_value(prompt, target, **kwargs)
    except StreamError as exc:
        logger.error("Aborting on stream failure: %s", exc)
        print(f"\n  ✗  Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
