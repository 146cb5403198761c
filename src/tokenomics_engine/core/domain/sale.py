"""
Sale — Ограничения параметров продажи

Константы зеркалируют ограничения launchpad контракта; клиент проверяет
их заранее, чтобы не отправлять заведомо отклоняемую транзакцию.
"""

from dataclasses import dataclass
from typing import Final

from tokenomics_engine.core.math.durations import SECONDS_PER_DAY, SECONDS_PER_MINUTE


@dataclass(frozen=True)
class SaleLimits:
    """Ограничения launchpad контракта (все значения целые)."""

    # Цена (18-decimal): 0.000001 .. 1_000_000
    min_token_price: int = 10**12
    max_token_price: int = 10**24

    # Доля ликвидности (bp): 70% .. 100%
    min_liquidity_percentage_bp: int = 7_000
    max_liquidity_percentage_bp: int = 10_000

    # Время
    min_start_delay_seconds: int = 15 * SECONDS_PER_MINUTE
    max_project_duration_seconds: int = 7 * SECONDS_PER_DAY
    min_lock_duration_seconds: int = 14 * SECONDS_PER_DAY

    max_token_decimals: int = 30


DEFAULT_SALE_LIMITS: Final[SaleLimits] = SaleLimits()


@dataclass(frozen=True)
class CheckResult:
    """Результат проверки одного параметра."""

    is_valid: bool
    reason: str = ""

    @classmethod
    def ok(cls) -> "CheckResult":
        return cls(is_valid=True)

    @classmethod
    def fail(cls, reason: str) -> "CheckResult":
        return cls(is_valid=False, reason=reason)
