"""Truncation and textual representation of coordinates"""

from __future__ import annotations

import math
from decimal import ROUND_DOWN, Decimal
from typing import Union

import numpy as np

from glif2svg.common import InvalidPrecisionError

PRECISION_MIN: int = 0
PRECISION_MAX: int = 255
DEFAULT_PRECISION: int = 16


class NumberFormatter:
    """
    Static methods to truncate a number to a given count of decimal digits
    and to render it as the shortest decimal text.

    Truncation always goes toward zero, so a truncated coordinate never lies
    further away from the origin than the exact one.
    """

    @staticmethod
    def validate_precision(precision: Union[int, str]) -> int:
        """Check and convert a precision given as int or as decimal string.

        Args:
            precision (Union[int, str]): number of decimal digits to keep

        Raises:
            InvalidPrecisionError: if precision is not an integer within 0..255

        Returns:
            int: the precision
        """
        if isinstance(precision, bool):
            raise InvalidPrecisionError(f"Precision must be {PRECISION_MIN}…{PRECISION_MAX}, got {precision!r}")
        if isinstance(precision, str):
            text = precision.strip()
            if not text.isdigit():
                raise InvalidPrecisionError(f"Precision must be {PRECISION_MIN}…{PRECISION_MAX}, got {precision!r}")
            precision = int(text)
        if not isinstance(precision, (int, np.integer)) or not PRECISION_MIN <= precision <= PRECISION_MAX:
            raise InvalidPrecisionError(f"Precision must be {PRECISION_MIN}…{PRECISION_MAX}, got {precision!r}")
        return int(precision)

    @staticmethod
    def truncate(value: Union[int, float], precision: int = DEFAULT_PRECISION) -> float:
        """Truncate _value_ toward zero keeping _precision_ decimal digits.

        The digits are cut from the shortest decimal text of _value_, so
        numbers written exactly in a source file (like 0.29) keep all their digits.

            truncate(1.23456, 2) == 1.23
            truncate(-1.23456, 2) == -1.23
            truncate(4.35, 2) == 4.35

        Args:
            value (Union[int, float]): the number to truncate
            precision (int, optional): decimal digits to keep. Defaults to 16.

        Returns:
            float: the truncated number
        """
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"Cannot truncate non-finite value {value}")
        exact = Decimal(repr(value))
        if exact.as_tuple().exponent >= -precision:
            # no digits beyond the precision
            return value if value != 0.0 else 0.0
        result = float(exact.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_DOWN))
        if result == 0.0:
            return 0.0  # no negative zero
        return result

    @staticmethod
    def to_string(value: Union[int, float]) -> str:
        """Shortest positional text of _value_, without a trailing ".0" for integral values."""
        value = float(value)
        if value == 0.0:
            return "0"
        return np.format_float_positional(value, unique=True, trim="-")

    @staticmethod
    def format(value: Union[int, float], precision: int = DEFAULT_PRECISION) -> str:
        """Truncate _value_ to _precision_ decimal digits and render it as text.

        Args:
            value (Union[int, float]): the number to format
            precision (int, optional): decimal digits to keep. Defaults to 16.

        Returns:
            str: e.g. "12", "-3.5", "0.125"
        """
        return NumberFormatter.to_string(NumberFormatter.truncate(value, precision))
