"""AMM — разбивка комиссий свапа и slippage-хелперы."""

from .swap_fees import (
    BASE_SLIPPAGE_BP,
    MAX_PRICE_IMPACT_BP,
    MAX_RECOMMENDED_SLIPPAGE_BP,
    PriceImpactLevel,
    compute_swap_fees,
    compute_swap_fees_for_config,
    fee_config_from_payload,
    minimum_amount_out,
    price_impact_level,
    recommended_slippage_bp,
)

__all__ = [
    # Constants
    "BASE_SLIPPAGE_BP",
    "MAX_PRICE_IMPACT_BP",
    "MAX_RECOMMENDED_SLIPPAGE_BP",
    # Types
    "PriceImpactLevel",
    # Functions
    "compute_swap_fees",
    "compute_swap_fees_for_config",
    "fee_config_from_payload",
    "minimum_amount_out",
    "price_impact_level",
    "recommended_slippage_bp",
]
