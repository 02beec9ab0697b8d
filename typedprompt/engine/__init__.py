from .converters import (
    FromText,
    available_targets,
    register_target,
    resolve_target,
)
from .reader import ReaderState, read_input, read_value

__all__ = [
    "FromText",
    "available_targets",
    "register_target",
    "resolve_target",
    "ReaderState",
    "read_input",
    "read_value",
]
