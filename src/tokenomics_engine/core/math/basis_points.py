"""
BasisPoints — Процентная арифметика в basis points

Проценты и ставки комиссий представлены целыми basis points (1 bp = 0.01%)
над фиксированным знаменателем BPS_DENOMINATOR = 10_000 (8000 bp = 80.00%).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. apply_rate: сначала умножение, затем floor division (никогда не делим заранее)
2. Умножение выполняется с произвольной точностью (int Python), без переполнения
3. Разбор процентов — по строке цифр, без float
"""

from typing import Final

from loguru import logger

from tokenomics_engine.core.math.errors import DivisionByZero, InvalidNumber
from tokenomics_engine.core.math.fixed_point import (
    parse_amount,
    require_int,
    require_non_negative,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Знаменатель basis points (100.00%)
BPS_DENOMINATOR: Final[int] = 10_000

# Дробные разряды процента, представимые в bp ("80.55" → 8055)
PERCENT_DECIMALS: Final[int] = 2


# =============================================================================
# РАЗБОР И ВАЛИДАЦИЯ
# =============================================================================


def parse_percentage(text: str) -> int:
    """
    Конверсия процента из строки в basis points.

    Лишние дробные разряды отбрасываются: "80.555" → 8055.

    Args:
        text: Процент как строка (например, "80" или "80.5")

    Returns:
        Basis points (например, 8050 для "80.5")

    Raises:
        EmptyInput: Если значение не введено
        InvalidNumber: Если текст некорректен, отрицателен или больше 100%

    Examples:
        >>> parse_percentage("80")
        8000
        >>> parse_percentage("80.5")
        8050
    """
    rate_bp = parse_amount(text, PERCENT_DECIMALS)

    if rate_bp > BPS_DENOMINATOR:
        logger.debug("parse_percentage rejected {!r}: above 100%", text)
        raise InvalidNumber(text, "percentage must be between 0 and 100")

    return rate_bp


def validate_rate(
    rate_bp: int,
    name: str,
    denominator_bp: int = BPS_DENOMINATOR,
) -> int:
    """
    Проверка ставки: 0 <= rate_bp <= denominator_bp.

    Raises:
        TypeError: Если ставка не int
        ValueError: Если ставка вне диапазона
    """
    require_non_negative(rate_bp, name)
    if rate_bp > denominator_bp:
        raise ValueError(f"{name} must be <= {denominator_bp} bp, got {rate_bp}")
    return rate_bp


# =============================================================================
# ПРИМЕНЕНИЕ СТАВКИ
# =============================================================================


def apply_rate(
    amount: int,
    rate_bp: int,
    denominator_bp: int = BPS_DENOMINATOR,
) -> int:
    """
    Применение ставки к сумме: floor(amount * rate_bp / denominator_bp).

    Args:
        amount: Сумма в base units (может превышать 64-битный диапазон)
        rate_bp: Ставка в basis points
        denominator_bp: Знаменатель (default: 10_000)

    Returns:
        Доля суммы в тех же base units

    Raises:
        DivisionByZero: Если denominator_bp == 0
        ValueError: Если amount или rate_bp отрицательные

    Examples:
        >>> apply_rate(1_000_000, 500)
        50000
        >>> apply_rate(999, 3333)
        332
    """
    require_non_negative(amount, "amount")
    require_non_negative(rate_bp, "rate_bp")
    require_int(denominator_bp, "denominator_bp")

    if denominator_bp == 0:
        raise DivisionByZero("denominator_bp")
    if denominator_bp < 0:
        raise ValueError(f"denominator_bp must be positive, got {denominator_bp}")

    return amount * rate_bp // denominator_bp


# =============================================================================
# ОТОБРАЖЕНИЕ
# =============================================================================


def format_percentage(rate_bp: int, decimals: int = 2) -> str:
    """
    Basis points в строку процента: 8000 → "80.00%".

    Разряды сверх точности bp дополняются нулями, недостающие обрезаются.
    """
    require_non_negative(rate_bp, "rate_bp")
    require_non_negative(decimals, "decimals")

    whole, fractional = divmod(rate_bp, 100)
    if decimals == 0:
        return f"{whole}%"

    fraction_str = str(fractional).rjust(PERCENT_DECIMALS, "0")
    fraction_str = fraction_str.ljust(decimals, "0")[:decimals]
    return f"{whole}.{fraction_str}%"


def format_bps(rate_bp: int) -> str:
    """Basis points для отображения: 30 → "30 bps"."""
    require_int(rate_bp, "rate_bp")
    return f"{rate_bp} bps"
