"""
Number, file size and badge count formatting.
"""

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Mapping, Optional, Union

from ..core.values import ValueKind, classify, number_to_str
from .consts import BADGE_COUNT_MAX, FILE_SIZE_THRESHOLD, FILE_SIZE_UNITS


@dataclass(frozen=True)
class NumberFormatConfig:
    """
    Options for prettify_number.

    Fields:
        minimum_fraction_digits: Decimals always shown (zero padded)
        maximum_fraction_digits: Decimals kept after rounding
        prefix: Text placed before the number (e.g. "$")
        suffix: Text placed after the number (e.g. " BTC")
    """
    minimum_fraction_digits: int = 0
    maximum_fraction_digits: int = 2
    prefix: str = ""
    suffix: str = ""

    def __post_init__(self) -> None:
        if self.minimum_fraction_digits < 0 or self.maximum_fraction_digits < 0:
            raise ValueError("fraction digits must not be negative")
        if self.maximum_fraction_digits < self.minimum_fraction_digits:
            raise ValueError("maximum_fraction_digits must be >= minimum_fraction_digits")


def build_number_format_config(config: Optional[Mapping[str, Any]] = None) -> NumberFormatConfig:
    """
    Fill in the defaults of a partial config.

    A minimum above the default maximum raises the maximum along with it.
    """
    config = config or {}
    minimum = config.get("minimum_fraction_digits", 0)
    maximum = config.get("maximum_fraction_digits", max(2, minimum))
    return NumberFormatConfig(
        minimum_fraction_digits=minimum,
        maximum_fraction_digits=maximum,
        prefix=config.get("prefix", ""),
        suffix=config.get("suffix", ""),
    )


def prettify_number(
    value: float,
    config: Union[NumberFormatConfig, Mapping[str, Any], None] = None,
) -> str:
    """
    Format a number with en-US grouping.

    Rounds half away from zero to maximum_fraction_digits, then trims
    trailing zeros down to minimum_fraction_digits.

    Example:
        prettify_number(1000.58) -> "1,000.58"
        prettify_number(1000.5, {"minimum_fraction_digits": 2, "prefix": "$"}) -> "$1,000.50"
    """
    cfg = config if isinstance(config, NumberFormatConfig) else build_number_format_config(config)
    if isinstance(value, float) and not math.isfinite(value):
        body = "NaN" if math.isnan(value) else ("∞" if value > 0 else "-∞")
        return f"{cfg.prefix}{body}{cfg.suffix}"

    d = Decimal(repr(value)) if isinstance(value, float) else Decimal(value)
    q = d.quantize(Decimal(1).scaleb(-cfg.maximum_fraction_digits), rounding=ROUND_HALF_UP)
    if q == 0:
        q = abs(q)
    text = format(q, ",f")

    whole, _, frac = text.partition(".")
    frac = frac.rstrip("0").ljust(cfg.minimum_fraction_digits, "0")
    body = f"{whole}.{frac}" if frac else whole
    return f"{cfg.prefix}{body}{cfg.suffix}"


def _round_half_up(value: float, places: int) -> float:
    r = 10 ** places
    return math.floor(value * r + 0.5) / r


def prettify_file_size(value: Any, decimal_places: int = 2) -> str:
    """
    Format a byte count using 1024-based units.

    Example:
        prettify_file_size(2785) -> "2.72 kB"
        prettify_file_size(1000) -> "1000 B"
    """
    if classify(value) is not ValueKind.NUMBER or not value > 0 or not math.isfinite(value):
        return "0 B"
    if value < FILE_SIZE_THRESHOLD:
        return f"{number_to_str(value)} B"

    size = float(value)
    unit = -1
    while True:
        size /= FILE_SIZE_THRESHOLD
        unit += 1
        if _round_half_up(size, decimal_places) < FILE_SIZE_THRESHOLD or unit >= len(FILE_SIZE_UNITS) - 1:
            break
    return f"{size:.{decimal_places}f} {FILE_SIZE_UNITS[unit]}"


def prettify_badge_count(value: Any, max_value: int = BADGE_COUNT_MAX) -> str:
    """
    Format a notification count for a badge.

    Non-positive or non-numeric counts render empty, counts above max_value
    render as "<max_value>+".
    """
    if classify(value) is not ValueKind.NUMBER or not value > 0:
        return ""
    if value > max_value:
        return f"{max_value}+"
    return number_to_str(value)
