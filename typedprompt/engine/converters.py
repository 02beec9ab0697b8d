"""
typedprompt — Text Converters
──────────────────────────────
Everything a trimmed line of text can be turned into.  A target is
"constructible from text" once it resolves to a TargetType:

  • a TargetType                          →  used as-is
  • a registered alias ("i32", "u8", …)   →  built-in strict converter
  • int / float / bool / str, numpy scalar types (np.int32, np.float32, …)
  • a class exposing a from_text() classmethod (the FromText protocol)
  • any other one-argument callable (Decimal, Fraction, ip_address, …)

Built-in grammar is strict and deterministic: integers are an optional
sign followed by ASCII digits, nothing else; floats are ASCII only.
Fixed-width integers are range checked against numpy.iinfo and come
back as numpy scalars.

Public API
──────────
    target = resolve_target("u32")
    target.convert("5")     → numpy.uint32(5)
    target.convert("-5")    → raises ConversionError
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Protocol, runtime_checkable

import numpy as np

from typedprompt.models.target import ConversionError, TargetType

_INT_RE = re.compile(r"[+-]?[0-9]+")


@runtime_checkable
class FromText(Protocol):
    """Opt-in for user types: build an instance from a string or raise."""

    @classmethod
    def from_text(cls, text: str) -> Any:
        ...


# ─────────────────────────────────────────────────────────────────── #
#  Primitive parsers                                                   #
# ─────────────────────────────────────────────────────────────────── #

def _parse_integer(text: str, name: str, signed: bool = True) -> int:
    if not text:
        raise ConversionError("cannot parse integer from empty string")
    if not _INT_RE.fullmatch(text):
        raise ConversionError(f"'{text}' is not a valid whole number")
    if not signed and text.startswith("-"):
        raise ConversionError(f"'{text}' is negative, {name} takes no sign")
    return int(text)


def _parse_float(text: str) -> float:
    if not text:
        raise ConversionError("cannot parse float from empty string")
    # float() also takes "1_000" and non-ASCII digits
    if "_" in text or not text.isascii():
        raise ConversionError(f"'{text}' is not a valid number")
    try:
        return float(text)
    except ValueError:
        raise ConversionError(f"'{text}' is not a valid number") from None


def _parse_f32(text: str) -> np.float32:
    value = _parse_float(text)
    # out-of-range literals saturate to ±inf
    with np.errstate(over="ignore"):
        return np.float32(value)


def _parse_bool(text: str) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    raise ConversionError(f"'{text}' is not 'true' or 'false'")


def _parse_char(text: str) -> str:
    if len(text) != 1:
        raise ConversionError(f"expected exactly one character, got {len(text)}")
    return text


def _parse_str(text: str) -> str:
    return text


def _fixed_int(dtype: Any) -> TargetType:
    """Signed or unsigned integer of one numpy width, e.g. np.int32 → i32."""
    info = np.iinfo(dtype)
    name = f"{info.kind}{info.bits}"
    signed = info.kind == "i"

    def parse(text: str) -> Any:
        value = _parse_integer(text, name, signed=signed)
        if value < info.min or value > info.max:
            raise ConversionError(
                f"{value} is out of range for {name} ({info.min} to {info.max})"
            )
        return info.dtype.type(value)

    return TargetType(name, parse)


# ─────────────────────────────────────────────────────────────────── #
#  Registry                                                            #
# ─────────────────────────────────────────────────────────────────── #

INT    = TargetType("int",    lambda text: _parse_integer(text, "int"))
F64    = TargetType("f64",    _parse_float)
F32    = TargetType("f32",    _parse_f32)
BOOL   = TargetType("bool",   _parse_bool)
CHAR   = TargetType("char",   _parse_char)
STRING = TargetType("String", _parse_str)

FIXED_WIDTH_INTS = (np.int8, np.int16, np.int32, np.int64,
                    np.uint8, np.uint16, np.uint32, np.uint64)

_REGISTRY: Dict[Any, TargetType] = {}
_ALIASES:  List[str] = []


def register_target(key: Any, target: TargetType) -> TargetType:
    """
    Make `target` resolvable by `key` (an alias string or a type object).
    Re-registering a key replaces the previous converter.
    """
    if not isinstance(target, TargetType):
        raise TypeError(f"Expected a TargetType, got {type(target).__name__}.")
    _REGISTRY[key] = target
    if isinstance(key, str) and key not in _ALIASES:
        _ALIASES.append(key)
    return target


def _register_builtins() -> None:
    for dtype in FIXED_WIDTH_INTS:
        target = _fixed_int(dtype)
        register_target(target.name, target)
        register_target(dtype, target)
    for key in ("f32", np.float32):
        register_target(key, F32)
    for key in ("f64", "float", float, np.float64):
        register_target(key, F64)
    for key in ("int", int):
        register_target(key, INT)
    for key in ("bool", bool):
        register_target(key, BOOL)
    register_target("char", CHAR)
    for key in ("String", "str", str):
        register_target(key, STRING)


_register_builtins()


def available_targets() -> List[str]:
    """Alias names in registration order."""
    return list(_ALIASES)


def _display_name(target: Any) -> str:
    return getattr(target, "__name__", None) or type(target).__name__


def resolve_target(target: Any) -> TargetType:
    """
    Turn whatever the caller passed as a target type into a TargetType.
    Raises KeyError for an unknown alias and TypeError for a target that
    cannot be called with a string.
    """
    if isinstance(target, TargetType):
        return target
    try:
        found = _REGISTRY.get(target)
    except TypeError:  # unhashable
        found = None
    if found is not None:
        return found
    if isinstance(target, str):
        raise KeyError(f"Unknown target type '{target}'.")
    if isinstance(target, FromText):
        return TargetType(_display_name(target), target.from_text)
    if callable(target):
        return TargetType(_display_name(target), target)
    raise TypeError(f"Cannot build a value of {target!r} from text.")
