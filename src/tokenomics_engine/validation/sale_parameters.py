"""
Sale Parameters — Проверки отдельных параметров продажи

Каждая проверка возвращает CheckResult (is_valid + reason) и не бросает
исключений для бизнес-нарушений. Ограничения берутся из SaleLimits.
"""

from tokenomics_engine.core.domain.sale import DEFAULT_SALE_LIMITS, CheckResult, SaleLimits
from tokenomics_engine.core.math.basis_points import BPS_DENOMINATOR, format_percentage
from tokenomics_engine.core.math.durations import format_duration
from tokenomics_engine.core.math.fixed_point import PRICE_DECIMALS, format_amount


def validate_token_price(price: int, limits: SaleLimits = DEFAULT_SALE_LIMITS) -> CheckResult:
    """Цена (18-decimal) ненулевая и в пределах [min_token_price, max_token_price]."""
    if price == 0:
        return CheckResult.fail("Token price cannot be zero")

    if price < limits.min_token_price:
        return CheckResult.fail(
            f"Token price too low. Minimum: "
            f"{format_amount(limits.min_token_price, PRICE_DECIMALS)}"
        )

    if price > limits.max_token_price:
        return CheckResult.fail(
            f"Token price too high. Maximum: "
            f"{format_amount(limits.max_token_price, PRICE_DECIMALS)}"
        )

    return CheckResult.ok()


def validate_liquidity_percentage(
    rate_bp: int,
    limits: SaleLimits = DEFAULT_SALE_LIMITS,
) -> CheckResult:
    """Доля ликвидности в пределах [70%, 100%]."""
    if rate_bp < limits.min_liquidity_percentage_bp:
        return CheckResult.fail(
            f"Liquidity percentage must be at least "
            f"{format_percentage(limits.min_liquidity_percentage_bp)}"
        )

    if rate_bp > limits.max_liquidity_percentage_bp:
        return CheckResult.fail(
            f"Liquidity percentage cannot exceed "
            f"{format_percentage(limits.max_liquidity_percentage_bp)}"
        )

    return CheckResult.ok()


def validate_lock_duration(
    seconds: int,
    limits: SaleLimits = DEFAULT_SALE_LIMITS,
) -> CheckResult:
    """Lock ликвидности не короче минимального."""
    if seconds < limits.min_lock_duration_seconds:
        return CheckResult.fail(
            f"Lock duration must be at least "
            f"{format_duration(limits.min_lock_duration_seconds)}"
        )
    return CheckResult.ok()


def validate_sale_schedule(
    start_time: int,
    end_time: int,
    now: int,
    limits: SaleLimits = DEFAULT_SALE_LIMITS,
) -> CheckResult:
    """
    Окно продажи (unix timestamps, секунды).

    Старт не раньше now + min_start_delay, окончание после старта,
    длительность не больше max_project_duration.
    """
    if start_time < now + limits.min_start_delay_seconds:
        return CheckResult.fail(
            f"Start time must be at least "
            f"{format_duration(limits.min_start_delay_seconds)} in the future"
        )
    if end_time <= start_time:
        return CheckResult.fail("End time must be after start time")
    if end_time - start_time > limits.max_project_duration_seconds:
        return CheckResult.fail(
            f"Project duration cannot exceed "
            f"{format_duration(limits.max_project_duration_seconds)}"
        )
    return CheckResult.ok()


def validate_token_decimals(
    decimals: int,
    limits: SaleLimits = DEFAULT_SALE_LIMITS,
) -> CheckResult:
    """Decimals project token в пределах, поддерживаемых контрактом."""
    if decimals < 0 or decimals > limits.max_token_decimals:
        return CheckResult.fail(
            f"Token decimals must be between 0 and {limits.max_token_decimals}"
        )
    return CheckResult.ok()


def validate_caps(
    funding_goal: int,
    soft_cap: int,
    min_contribution: int,
    max_contribution: int,
    amount_tokens_for_sale: int,
    initial_total_supply: int,
) -> CheckResult:
    """
    Согласованность лимитов продажи.

    funding_goal/soft_cap/лимиты вклада — в decimals contribution token,
    sale amount/supply — в decimals project token.
    """
    if funding_goal <= 0:
        return CheckResult.fail("Funding goal must be greater than 0")
    if soft_cap <= 0:
        return CheckResult.fail("Soft cap must be greater than 0")
    if soft_cap > funding_goal:
        return CheckResult.fail("Soft cap cannot exceed funding goal")
    if min_contribution > max_contribution:
        return CheckResult.fail("Minimum contribution cannot exceed maximum contribution")
    if amount_tokens_for_sale <= 0:
        return CheckResult.fail("Amount for sale must be greater than 0")
    if amount_tokens_for_sale > initial_total_supply:
        return CheckResult.fail("Amount for sale cannot exceed total supply")
    return CheckResult.ok()


def validate_vesting(
    enabled: bool,
    cliff_seconds: int,
    duration_seconds: int,
    interval_seconds: int,
    initial_release_bp: int,
) -> CheckResult:
    """
    Параметры vesting до отправки в контракт.

    Выключенный vesting требует нулевых параметров.
    """
    if not enabled:
        if cliff_seconds or duration_seconds or interval_seconds or initial_release_bp:
            return CheckResult.fail(
                "When vesting is disabled, all vesting parameters must be zero"
            )
        return CheckResult.ok()

    if duration_seconds == 0:
        return CheckResult.fail("Vesting duration must be set when vesting is enabled")
    if cliff_seconds > duration_seconds:
        return CheckResult.fail("Vesting cliff cannot be longer than total duration")
    if interval_seconds == 0:
        return CheckResult.fail("Vesting interval must be set when vesting is enabled")
    if interval_seconds > duration_seconds:
        return CheckResult.fail("Vesting interval cannot be longer than vesting duration")
    if initial_release_bp > BPS_DENOMINATOR:
        return CheckResult.fail("Initial release percentage cannot exceed 100%")
    return CheckResult.ok()


def validate_contribution(
    amount: int,
    min_contribution: int,
    max_contribution: int,
    current_contribution: int = 0,
    decimals: int = PRICE_DECIMALS,
) -> CheckResult:
    """Вклад ненулевой, суммарный вклад участника в [min, max]."""
    if amount == 0:
        return CheckResult.fail("Contribution amount cannot be zero")

    new_total = current_contribution + amount
    if new_total < min_contribution:
        return CheckResult.fail(
            f"Total contribution must be at least {format_amount(min_contribution, decimals)}"
        )
    if new_total > max_contribution:
        return CheckResult.fail(
            f"Total contribution cannot exceed {format_amount(max_contribution, decimals)}"
        )
    return CheckResult.ok()


def collect_failures(*results: CheckResult) -> list[str]:
    """Причины проваленных проверок в исходном порядке."""
    return [r.reason for r in results if not r.is_valid]
