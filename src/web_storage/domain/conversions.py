from __future__ import annotations

import math

from .errors import ArgumentError

# Explicit coercions applied at the facade boundary. Every input kind has a
# documented result so stored keys and values are always str.

_UINT32 = 2**32


class _Missing:
    # Absent-value marker: what a dynamic read of a missing key yields.
    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "MISSING"


MISSING = _Missing()


def required_arguments(length: int, required: int, prefix: str) -> None:
    if length != required:
        noun = "argument" if required == 1 else "arguments"
        raise ArgumentError(f"{prefix}: {required} {noun} required, but {length} present.")


def to_dom_string(value: object, prefix: str, context: str) -> str:
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if value is MISSING:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        raise ArgumentError(f"{prefix}: {context} is a byte sequence and cannot be converted to a string.")
    return str(value)


def to_unsigned_long(value: object, prefix: str, context: str) -> int:
    number = _to_number(value, prefix, context)
    if math.isnan(number) or math.isinf(number):
        return 0
    return int(number) % _UINT32


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    # Integral values below 1e21 print without exponent or trailing ".0".
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def _to_number(value: object, prefix: str, context: str) -> float | int:
    if value is None:
        return 0
    if value is MISSING:
        return math.nan
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        # Python accepts digit separators; numeric strings here do not.
        if "_" in text:
            return math.nan
        try:
            return int(text, 0) if text[:2].lower() in {"0x", "0o", "0b"} else float(text)
        except ValueError:
            return math.nan
    if hasattr(value, "__index__"):
        return value.__index__()
    if hasattr(value, "__float__"):
        return float(value)
    raise ArgumentError(f"{prefix}: {context} cannot be converted to an unsigned long.")
