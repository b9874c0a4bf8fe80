"""FieldValue — the like-count field as it comes back from the CMS.

The stored value may be a number, a numeric string, or missing entirely
(null, absent, or some other JSON shape). It is modelled here as a small
tagged union so the coercion rule can be a pure, total function over it.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Union

from app.domain.value_objects.enums import CoercionMode

_LENIENT_INT = re.compile(r"\s*([+-]?[0-9]+)")
_STRICT_INT = re.compile(r"\s*([+-]?[0-9]+)\s*")


@dataclass(frozen=True)
class NumberValue:
    value: int | float


@dataclass(frozen=True)
class TextValue:
    text: str


@dataclass(frozen=True)
class MissingValue:
    pass


FieldValue = Union[NumberValue, TextValue, MissingValue]


def field_value_from_raw(raw: Any) -> FieldValue:
    """Classify a decoded JSON value.

    ``bool`` is an ``int`` subclass in Python but never counts as a number here.
    """
    if isinstance(raw, bool):
        return MissingValue()
    if isinstance(raw, (int, float)):
        return NumberValue(raw)
    if isinstance(raw, str):
        return TextValue(raw)
    return MissingValue()


def coerce_like_count(value: FieldValue, mode: CoercionMode = CoercionMode.LENIENT) -> int:
    """Convert a FieldValue into a non-negative integer like count.

    - NumberValue: ints as-is, floats truncated; NaN/inf → 0.
    - TextValue: base-10 integer parse; anything unparseable → 0.
      LENIENT accepts a numeric prefix ("42abc" → 42), STRICT requires
      the whole string to be the number.
    - MissingValue → 0.

    Negative results are clamped to 0. Never raises.
    """
    if isinstance(value, NumberValue):
        number = value.value
        if isinstance(number, float):
            if not math.isfinite(number):
                return 0
            number = int(number)
        return max(number, 0)

    if isinstance(value, TextValue):
        return max(_parse_int(value.text, mode), 0)

    return 0


def _parse_int(text: str, mode: CoercionMode) -> int:
    if mode == CoercionMode.STRICT:
        match = _STRICT_INT.fullmatch(text)
    else:
        match = _LENIENT_INT.match(text)
    if not match:
        return 0
    try:
        return int(match.group(1))
    except ValueError:
        # digit strings past the interpreter's int conversion limit
        return 0
