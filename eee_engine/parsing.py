"""
Strict numeric parsing for line-oriented user input.

A line is accepted only when a single decimal number consumes it completely,
apart from leading whitespace and trailing spaces/tabs. Anything else
("12abc", "3.3.3", "1 2", "") is rejected, so a typo never silently turns
into a partial value.

Behaviour mirrors a C-style strtol/strtod conversion with an end-pointer
check:
    - leading whitespace is skipped
    - at least one character must be converted
    - only ' ' and '\\t' may follow the number
    - out-of-range values are rejected rather than clamped
"""

import math
import re

import numpy as np


# Whitespace a C conversion skips before the number (isspace in the "C" locale)
_LEADING_WS = r'[ \t\n\v\f\r]*'
# Only horizontal whitespace may follow the number
_TRAILING_WS = r'[ \t]*'

_INT_RE = re.compile(_LEADING_WS + r'([+-]?[0-9]+)' + _TRAILING_WS + r'\Z')

_FLOAT_RE = re.compile(
    _LEADING_WS
    + r'([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+))'  # mantissa
    + r'([eE][+-]?[0-9]+)?'                    # exponent
    + _TRAILING_WS + r'\Z'
)

# Menu codes and counts must fit a signed 32-bit int
INT_MIN = int(np.iinfo(np.int32).min)
INT_MAX = int(np.iinfo(np.int32).max)

# Smallest normal double; anything non-zero below it has underflowed
FLOAT_TINY = float(np.finfo(np.float64).tiny)


class NumberFormatError(ValueError):
    """Raised when a line of text is not exactly one valid number."""


def parse_int(text: str) -> int:
    """
    Parse a base-10 integer.

    Args:
        text: One line of user input, without its line terminator.

    Returns:
        The integer value.

    Raises:
        NumberFormatError: empty input, trailing junk, or a value outside
            the signed 32-bit range.
    """
    if text is None or not text.strip():
        raise NumberFormatError("empty input")

    match = _INT_RE.match(text)
    if not match:
        raise NumberFormatError(f"not an integer: {text!r}")

    value = int(match.group(1))
    if value < INT_MIN or value > INT_MAX:
        raise NumberFormatError(f"integer out of range: {match.group(1)}")

    return value


def parse_float(text: str) -> float:
    """
    Parse a decimal real number (fixed or exponent notation).

    'inf', 'nan', hexadecimal floats and '_' digit separators are not
    accepted even though Python's float() would take them.

    Raises:
        NumberFormatError: empty input, trailing junk, or a literal that
            overflows to infinity / underflows below the smallest normal double.
    """
    if text is None or not text.strip():
        raise NumberFormatError("empty input")

    match = _FLOAT_RE.match(text)
    if not match:
        raise NumberFormatError(f"not a number: {text!r}")

    mantissa, exponent = match.group(1), match.group(2) or ''
    value = float(mantissa + exponent)

    if math.isinf(value):
        raise NumberFormatError(f"number out of range: {mantissa}{exponent}")

    # A non-zero literal that rounds to 0.0 or to a subnormal has underflowed
    if abs(value) < FLOAT_TINY and any(c in '123456789' for c in mantissa):
        raise NumberFormatError(f"number out of range: {mantissa}{exponent}")

    return value
