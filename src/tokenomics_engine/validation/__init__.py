"""Validation — кросс-валидация токеномики и проверки параметров продажи."""

from .sale_parameters import (
    collect_failures,
    validate_caps,
    validate_contribution,
    validate_liquidity_percentage,
    validate_lock_duration,
    validate_sale_schedule,
    validate_token_decimals,
    validate_token_price,
    validate_vesting,
)
from .tokenomics import (
    TokenomicsValidatorConfig,
    tokenomics_input_from_form,
    validate_tokenomics,
    validate_tokenomics_form,
)

__all__ = [
    # Tokenomics
    "TokenomicsValidatorConfig",
    "tokenomics_input_from_form",
    "validate_tokenomics",
    "validate_tokenomics_form",
    # Sale parameters
    "collect_failures",
    "validate_caps",
    "validate_contribution",
    "validate_liquidity_percentage",
    "validate_lock_duration",
    "validate_sale_schedule",
    "validate_token_decimals",
    "validate_token_price",
    "validate_vesting",
]
