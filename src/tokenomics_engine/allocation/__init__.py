"""Allocation — сплит собранных средств и математика продажи."""

from .splitter import (
    calculate_minimum_contribution,
    calculate_net_after_fee,
    calculate_platform_fee,
    calculate_progress_bp,
    calculate_tokens_due,
    simulate_contribution,
    split_raised_funds,
)

__all__ = [
    "calculate_minimum_contribution",
    "calculate_net_after_fee",
    "calculate_platform_fee",
    "calculate_progress_bp",
    "calculate_tokens_due",
    "simulate_contribution",
    "split_raised_funds",
]
