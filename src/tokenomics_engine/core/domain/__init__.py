"""
Domain models and value objects.

Contains result and input entities: AllocationResult, FeeConfig, FeeBreakdown,
TokenomicsInput, TokenomicsReport, SaleLimits.
"""

from tokenomics_engine.core.domain.allocation import AllocationResult, ContributionPreview
from tokenomics_engine.core.domain.fees import FeeBreakdown, FeeConfig
from tokenomics_engine.core.domain.sale import DEFAULT_SALE_LIMITS, CheckResult, SaleLimits
from tokenomics_engine.core.domain.tokenomics import (
    Finding,
    FindingCode,
    FindingKind,
    TokenomicsInput,
    TokenomicsReport,
)

__all__ = [
    # Allocation
    "AllocationResult",
    "ContributionPreview",
    # Fees
    "FeeBreakdown",
    "FeeConfig",
    # Sale limits
    "DEFAULT_SALE_LIMITS",
    "CheckResult",
    "SaleLimits",
    # Tokenomics
    "Finding",
    "FindingCode",
    "FindingKind",
    "TokenomicsInput",
    "TokenomicsReport",
]
