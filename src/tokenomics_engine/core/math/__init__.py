"""
Core math modules для tokenomics_engine

Целочисленные примитивы: fixed-point конверсия, basis points, длительности.
"""

# Errors
from tokenomics_engine.core.math.errors import (
    DivisionByZero,
    EmptyInput,
    InvalidNumber,
)

# Fixed-Point Conversion
from tokenomics_engine.core.math.fixed_point import (
    DEFAULT_DISPLAY_DECIMALS,
    ONE_E18,
    PRICE_DECIMALS,
    digits_to_int,
    format_amount,
    format_compact,
    format_token_price,
    from_price_scale,
    parse_amount,
    renormalize,
    require_int,
    require_non_negative,
    split_decimal,
    to_price_scale,
)

# Basis Points
from tokenomics_engine.core.math.basis_points import (
    BPS_DENOMINATOR,
    PERCENT_DECIMALS,
    apply_rate,
    format_bps,
    format_percentage,
    parse_percentage,
    validate_rate,
)

# Durations
from tokenomics_engine.core.math.durations import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    days_to_seconds,
    format_duration,
)

__all__ = [
    # Errors
    "DivisionByZero",
    "EmptyInput",
    "InvalidNumber",
    # Fixed-Point: Constants
    "DEFAULT_DISPLAY_DECIMALS",
    "ONE_E18",
    "PRICE_DECIMALS",
    # Fixed-Point: Functions
    "digits_to_int",
    "format_amount",
    "format_compact",
    "format_token_price",
    "from_price_scale",
    "parse_amount",
    "renormalize",
    "require_int",
    "require_non_negative",
    "split_decimal",
    "to_price_scale",
    # Basis Points: Constants
    "BPS_DENOMINATOR",
    "PERCENT_DECIMALS",
    # Basis Points: Functions
    "apply_rate",
    "format_bps",
    "format_percentage",
    "parse_percentage",
    "validate_rate",
    # Durations
    "SECONDS_PER_DAY",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_MINUTE",
    "days_to_seconds",
    "format_duration",
]
