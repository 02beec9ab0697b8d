"""
typedprompt — prompt for a line of text until it converts to the type you asked for.

    from typedprompt import read_input
    age = read_input("Enter a value: ", "u32")
"""

import logging

from typedprompt.engine.converters import FromText, available_targets, register_target, resolve_target
from typedprompt.engine.reader import ReaderState, read_input, read_value
from typedprompt.models.target import ConversionError, StreamError, TargetType

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "ConversionError",
    "FromText",
    "ReaderState",
    "StreamError",
    "TargetType",
    "available_targets",
    "read_input",
    "read_value",
    "register_target",
    "resolve_target",
]
