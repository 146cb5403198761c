"""
Swap Fee Calculator — Разбивка комиссий AMM свапа

    total_fee = apply_rate(amount_in, trading_fee_bp + protocol_fee_bp, denominator)
    protocol_fee = apply_rate(amount_in, protocol_fee_bp, denominator)
    lp_fee = total_fee - protocol_fee
    amount_after_fees = amount_in - total_fee

protocol_fee_bp должен быть не больше trading_fee_bp, но калькулятор этого
не проверяет и ничего не clamp'ает: некорректную конфигурацию отклоняет
вызывающая сторона (см. FeeConfig.lp_fee_bp). При сумме ставок больше
знаменателя amount_after_fees становится отрицательным.

Также содержит slippage-хелперы для построения minAmountOut и
классификацию price impact.
"""

from enum import Enum
from typing import Any, Dict, Final

from loguru import logger

from tokenomics_engine.core.contracts.validators import validate_fee_config_payload
from tokenomics_engine.core.domain.fees import FeeBreakdown, FeeConfig
from tokenomics_engine.core.math.basis_points import BPS_DENOMINATOR, apply_rate, validate_rate
from tokenomics_engine.core.math.fixed_point import PRICE_DECIMALS, require_non_negative

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Базовый рекомендуемый slippage (0.5%)
BASE_SLIPPAGE_BP: Final[int] = 50

# Верхняя граница рекомендуемого slippage (15%)
MAX_RECOMMENDED_SLIPPAGE_BP: Final[int] = 1_500

# Price impact выше этого порога блокирует свап на стороне UI (15%)
MAX_PRICE_IMPACT_BP: Final[int] = 1_500

# (порог impact, надбавка к slippage), от большего к меньшему
_SLIPPAGE_STEPS: Final[tuple[tuple[int, int], ...]] = (
    (500, 100),
    (200, 50),
    (50, 20),
)


class PriceImpactLevel(str, Enum):
    """Уровень price impact для отображения."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# =============================================================================
# FEE BREAKDOWN
# =============================================================================


def compute_swap_fees(
    amount_in: int,
    trading_fee_bp: int,
    protocol_fee_bp: int,
    denominator_bp: int = BPS_DENOMINATOR,
    decimals: int = PRICE_DECIMALS,
) -> FeeBreakdown:
    """
    Разбивка комиссии для входной суммы свапа.

    Args:
        amount_in: Входная сумма (base units)
        trading_fee_bp: Trading fee (bp)
        protocol_fee_bp: Protocol fee (bp)
        denominator_bp: Знаменатель комиссий AMM
        decimals: Decimals входного токена (для отображения)

    Returns:
        FeeBreakdown

    Raises:
        DivisionByZero: Если denominator_bp == 0
    """
    total_fee = apply_rate(amount_in, trading_fee_bp + protocol_fee_bp, denominator_bp)
    protocol_fee = apply_rate(amount_in, protocol_fee_bp, denominator_bp)
    lp_fee = total_fee - protocol_fee
    amount_after_fees = amount_in - total_fee

    if protocol_fee_bp > trading_fee_bp:
        logger.debug(
            "Inconsistent fee config: protocol_fee_bp={} exceeds trading_fee_bp={}",
            protocol_fee_bp,
            trading_fee_bp,
        )

    return FeeBreakdown(
        amount_in=amount_in,
        total_fee=total_fee,
        protocol_fee=protocol_fee,
        lp_fee=lp_fee,
        amount_after_fees=amount_after_fees,
        decimals=decimals,
    )


def compute_swap_fees_for_config(
    amount_in: int,
    config: FeeConfig,
    decimals: int = PRICE_DECIMALS,
) -> FeeBreakdown:
    """Разбивка комиссии по FeeConfig; при выключенных комиссиях все нули."""
    if not config.fees_enabled:
        return compute_swap_fees(amount_in, 0, 0, config.fee_denominator, decimals)

    return compute_swap_fees(
        amount_in,
        config.trading_fee_bp,
        config.protocol_fee_bp,
        config.fee_denominator,
        decimals,
    )


def fee_config_from_payload(data: Dict[str, Any]) -> FeeConfig:
    """
    FeeConfig из декодированного чтения контракта.

    Raises:
        ValidationError: Если payload не соответствует fee_config.json
    """
    validate_fee_config_payload(data)
    return FeeConfig(
        trading_fee_bp=data["tradingFee"],
        protocol_fee_bp=data["protocolFee"],
        fee_denominator=data["feeDenominator"],
        fees_enabled=data.get("feesEnabled", True),
    )


# =============================================================================
# SLIPPAGE
# =============================================================================


def minimum_amount_out(amount_out: int, slippage_bp: int) -> int:
    """
    Минимальный выход свапа с учётом допустимого slippage.

        min_out = amount_out - floor(amount_out * slippage_bp / 10_000)
    """
    require_non_negative(amount_out, "amount_out")
    validate_rate(slippage_bp, "slippage_bp")
    return amount_out - apply_rate(amount_out, slippage_bp)


def recommended_slippage_bp(price_impact_bp: int) -> int:
    """
    Рекомендуемый slippage по price impact.

    0.5% базово; +0.2% при impact > 0.5%, +0.5% при > 2%, +1% при > 5%.
    """
    require_non_negative(price_impact_bp, "price_impact_bp")

    recommended = BASE_SLIPPAGE_BP
    for threshold_bp, extra_bp in _SLIPPAGE_STEPS:
        if price_impact_bp > threshold_bp:
            recommended += extra_bp
            break

    return min(recommended, MAX_RECOMMENDED_SLIPPAGE_BP)


def price_impact_level(price_impact_bp: int) -> PriceImpactLevel:
    """LOW до 1%, MEDIUM до 5%, HIGH выше."""
    require_non_negative(price_impact_bp, "price_impact_bp")

    if price_impact_bp <= 100:
        return PriceImpactLevel.LOW
    if price_impact_bp <= 500:
        return PriceImpactLevel.MEDIUM
    return PriceImpactLevel.HIGH
