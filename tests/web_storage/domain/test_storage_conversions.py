from __future__ import annotations

import math
from decimal import Decimal

import pytest

from web_storage.domain.conversions import MISSING, required_arguments, to_dom_string, to_unsigned_long
from web_storage.domain.errors import ArgumentError

_PREFIX = "Failed to execute 'setItem' on 'Storage'"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("plain", "plain"),
        ("", ""),
        (None, "null"),
        (MISSING, "undefined"),
        (True, "true"),
        (False, "false"),
        (42, "42"),
        (-7, "-7"),
        (1.0, "1"),
        (1.5, "1.5"),
        (math.nan, "NaN"),
        (math.inf, "Infinity"),
        (-math.inf, "-Infinity"),
        (1e21, "1e+21"),
    ],
)
def test_to_dom_string_documented_inputs(value: object, expected: str) -> None:
    # Every documented input kind has a fixed string form.
    assert to_dom_string(value, _PREFIX, "Argument 2") == expected


def test_to_dom_string_uses_str_for_other_objects() -> None:
    # Arbitrary objects fall back to their str() form.
    class Theme:
        def __str__(self) -> str:
            return "dark"

    assert to_dom_string(Theme(), _PREFIX, "Argument 2") == "dark"
    assert to_dom_string(Decimal("2.50"), _PREFIX, "Argument 2") == "2.50"


def test_to_dom_string_rejects_bytes_naming_argument() -> None:
    # Byte sequences have no implied encoding; the error names the operation and position.
    with pytest.raises(ArgumentError) as excinfo:
        to_dom_string(b"raw", _PREFIX, "Argument 2")
    assert "setItem" in str(excinfo.value)
    assert "Argument 2" in str(excinfo.value)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, 0),
        (3, 3),
        (-1, 2**32 - 1),
        (2**32, 0),
        (2**32 + 5, 5),
        (1.9, 1),
        (-1.9, 2**32 - 1),
        (math.nan, 0),
        (math.inf, 0),
        (None, 0),
        (MISSING, 0),
        (True, 1),
        ("7", 7),
        ("  7  ", 7),
        ("", 0),
        ("abc", 0),
        ("0x10", 16),
        ("1_000", 0),
        ("0x_10", 0),
        ("1.5", 1),
        (Decimal("2.5"), 2),
    ],
)
def test_to_unsigned_long_wraps_modulo_2_32(value: object, expected: int) -> None:
    # Numeric conversion truncates toward zero and wraps into the uint32 range.
    assert to_unsigned_long(value, "Failed to execute 'key' on 'Storage'", "Argument 1") == expected


def test_to_unsigned_long_rejects_non_numeric_objects() -> None:
    # Objects without a numeric protocol cannot become an index.
    with pytest.raises(ArgumentError):
        to_unsigned_long(object(), "Failed to execute 'key' on 'Storage'", "Argument 1")


def test_required_arguments_is_exact() -> None:
    # Both missing and surplus arguments are rejected.
    required_arguments(1, 1, "Failed to execute 'getItem' on 'Storage'")
    with pytest.raises(ArgumentError, match="1 argument required, but 0 present"):
        required_arguments(0, 1, "Failed to execute 'getItem' on 'Storage'")
    with pytest.raises(ArgumentError, match="2 arguments required, but 3 present"):
        required_arguments(3, 2, "Failed to execute 'setItem' on 'Storage'")


def test_missing_marker_is_falsy_singleton() -> None:
    # The absent-value marker is distinct from None and never truthy.
    assert MISSING is not None
    assert not MISSING
    assert repr(MISSING) == "MISSING"
    assert type(MISSING)() is MISSING
