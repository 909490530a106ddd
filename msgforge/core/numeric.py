"""
Numeric formatting with explicit rounding policies.

NumericFormatter turns a number into a display string with a fixed number of
decimal places (0-3). The three rounding modes are directional, not
"nearest": ROUND_UP is a ceiling and ROUND_DOWN is a floor, so for negative
values ROUND_UP moves toward zero and ROUND_DOWN moves away from it.

    >>> NumericFormatter(2, RoundingMode.TRUNCATE).format(Decimal("33.9334"), INVARIANT)
    '33.93'
    >>> NumericFormatter(0, RoundingMode.ROUND_DOWN).format(Decimal("-33.938"), INVARIANT)
    '-34'
"""

import logging
import numbers
from decimal import Decimal, ROUND_CEILING, ROUND_DOWN, ROUND_FLOOR, localcontext
from enum import Enum
from typing import Optional, Union

from .errors import InvalidArgumentError, InvalidRangeError, require
from .locale import Locale

logger = logging.getLogger(__name__)

MIN_DECIMAL_PLACES = 0
MAX_DECIMAL_PLACES = 3

# Largest magnitude of a 96-bit scaled decimal; anything at or past it is
# emitted unscaled
DECIMAL_EXTREME = Decimal("79228162514264337593543950335")

Number = Union[Decimal, int, float]


class RoundingMode(Enum):
    """Policy for discarding digits beyond the retained precision."""
    TRUNCATE = "truncate"
    ROUND_UP = "round_up"
    ROUND_DOWN = "round_down"


_DECIMAL_ROUNDING = {
    RoundingMode.TRUNCATE: ROUND_DOWN,
    RoundingMode.ROUND_UP: ROUND_CEILING,
    RoundingMode.ROUND_DOWN: ROUND_FLOOR,
}


def to_decimal(value: Number) -> Decimal:
    """
    Convert a supported number to Decimal.

    Floats go through their shortest repr so 2.9 becomes Decimal("2.9")
    rather than its binary expansion.

    Raises:
        InvalidArgumentError: If value is not a number (bools are rejected)
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise InvalidArgumentError("Boolean is not a numeric value", param="value")
    if isinstance(value, numbers.Integral):
        return Decimal(int(value))
    if isinstance(value, float):
        return Decimal(repr(value))
    if isinstance(value, numbers.Real):
        return Decimal(repr(float(value)))
    raise InvalidArgumentError(
        f"Expected a numeric value, got {type(value).__name__}", param="value"
    )


def render_decimal(
    value: Decimal,
    places: Optional[int],
    locale: Locale,
    grouping: bool = False
) -> str:
    """
    Render a Decimal in positional notation using the locale separators.

    Args:
        value: Value to render (not rounded here beyond `places`)
        places: Fixed number of fractional digits, or None to keep the
            value's own exponent
        locale: Locale providing decimal and group separators
        grouping: Whether to insert group separators

    Returns:
        Text such as "1234.50" or, for de, "1.234,50" with grouping
    """
    if not value.is_finite():
        return str(value)

    spec = "," if grouping else ""
    spec += f".{places}f" if places is not None else "f"
    text = format(value, spec)

    return text.translate(str.maketrans({",": locale.group, ".": locale.decimal}))


class NumericFormatter:
    """
    Formats numbers with a fixed count of decimal places and a rounding mode.

    Instances are immutable and safe to share between renderers and threads.
    """

    def __init__(
        self,
        decimal_places: int,
        rounding_mode: RoundingMode = RoundingMode.TRUNCATE,
        grouping: bool = False
    ):
        """
        Initialize numeric formatter.

        Args:
            decimal_places: Number of decimal places (0-3)
            rounding_mode: Rounding mode to apply
            grouping: Insert the locale group separator in the integer part

        Raises:
            InvalidRangeError: If decimal_places is outside 0-3
        """
        require(decimal_places, "decimal_places")
        require(rounding_mode, "rounding_mode")

        if isinstance(decimal_places, bool) or not isinstance(decimal_places, int):
            raise InvalidRangeError(
                "Decimal places must be an integer between 0 and 3.",
                param="decimal_places"
            )
        if decimal_places < MIN_DECIMAL_PLACES or decimal_places > MAX_DECIMAL_PLACES:
            raise InvalidRangeError(
                "Decimal places must be between 0 and 3.",
                param="decimal_places"
            )

        self._decimal_places = decimal_places
        self._rounding_mode = RoundingMode(rounding_mode)
        self._grouping = grouping
        self._quantum = Decimal(1).scaleb(-decimal_places)

        logger.debug(
            f"NumericFormatter initialized: decimal_places={decimal_places}, "
            f"rounding_mode={self._rounding_mode.value}"
        )

    @property
    def decimal_places(self) -> int:
        return self._decimal_places

    @property
    def rounding_mode(self) -> RoundingMode:
        return self._rounding_mode

    @property
    def grouping(self) -> bool:
        return self._grouping

    def format(self, value: Number, locale: Locale) -> str:
        """
        Format a number according to the decimal places and rounding mode.

        Args:
            value: Number to format (Decimal, int or float)
            locale: Locale whose decimal separator is used

        Returns:
            Text with exactly `decimal_places` fractional digits

        Raises:
            NullInputError: If value or locale is None
        """
        require(locale, "locale")
        number = to_decimal(require(value, "value"))

        rounded = self.apply_rounding(number)
        return render_decimal(rounded, self._decimal_places, locale, self._grouping)

    def apply_rounding(self, value: Decimal) -> Decimal:
        """Round value at the configured resolution without rendering it."""
        # Extreme and non-finite values are passed through unscaled
        if not value.is_finite() or value.copy_abs() >= DECIMAL_EXTREME:
            return value

        with localcontext() as ctx:
            ctx.prec = 64
            rounded = value.quantize(
                self._quantum,
                rounding=_DECIMAL_ROUNDING[self._rounding_mode]
            )

        if rounded.is_zero():
            rounded = rounded.copy_abs()
        return rounded

    def __eq__(self, other) -> bool:
        if not isinstance(other, NumericFormatter):
            return NotImplemented
        return (
            self._decimal_places == other._decimal_places
            and self._rounding_mode == other._rounding_mode
            and self._grouping == other._grouping
        )

    def __hash__(self) -> int:
        return hash((self._decimal_places, self._rounding_mode, self._grouping))

    def __repr__(self) -> str:
        return (
            f"NumericFormatter(decimal_places={self._decimal_places}, "
            f"rounding_mode={self._rounding_mode})"
        )
