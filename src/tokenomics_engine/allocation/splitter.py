"""
Allocation Splitter — Распределение собранных средств

Сплит собранной суммы после завершения продажи:
    1. platform_fee = apply_rate(total_raised, platform_fee_rate_bp)
    2. net_after_fee = total_raised - platform_fee
    3. contribution_for_liquidity = apply_rate(net_after_fee, liquidity_rate_bp)
    4. remaining_for_owner = net_after_fee - contribution_for_liquidity
    5. project_tokens_for_liquidity = tokens_due(contribution_for_liquidity, price)

Ликвидность берётся от суммы ПОСЛЕ комиссии платформы: комиссия снимается
первой, остаток делится между пулом и владельцем. Шаги 2-4 — двусторонний
сплит net_after_fee, поэтому остаток деления никогда не теряется и
достаётся владельцу.

Также содержит вспомогательную математику продажи: tokens due,
минимальный вклад, прогресс сбора, предпросмотр вклада.
"""

from loguru import logger

from tokenomics_engine.core.domain.allocation import AllocationResult, ContributionPreview
from tokenomics_engine.core.math.basis_points import BPS_DENOMINATOR, apply_rate, validate_rate
from tokenomics_engine.core.math.errors import DivisionByZero
from tokenomics_engine.core.math.fixed_point import (
    ONE_E18,
    PRICE_DECIMALS,
    from_price_scale,
    renormalize,
    require_non_negative,
    to_price_scale,
)
from tokenomics_engine.validation.sale_parameters import validate_contribution


# =============================================================================
# SALE MATH
# =============================================================================


def calculate_tokens_due(
    contribution: int,
    token_price: int,
    contribution_decimals: int,
    project_decimals: int,
) -> int:
    """
    Количество project tokens за вклад по 18-decimal цене.

    contribution → 18 decimals → * 1e18 // price → decimals project token.

    Raises:
        DivisionByZero: Если token_price == 0
    """
    require_non_negative(contribution, "contribution")
    require_non_negative(token_price, "token_price")
    require_non_negative(contribution_decimals, "contribution_decimals")
    require_non_negative(project_decimals, "project_decimals")

    if token_price == 0:
        raise DivisionByZero("token_price")

    if contribution == 0:
        return 0

    contribution_18 = to_price_scale(contribution, contribution_decimals)
    tokens_18 = contribution_18 * ONE_E18 // token_price
    return from_price_scale(tokens_18, project_decimals)


def calculate_minimum_contribution(
    token_price: int,
    contribution_decimals: int,
    project_decimals: int,
) -> int:
    """
    Стоимость одного base unit project token в base units contribution token.

    Результат может быть 0, если цена одной минимальной единицы меньше
    точности contribution token.
    """
    require_non_negative(token_price, "token_price")

    one_unit_18 = renormalize(1, project_decimals, PRICE_DECIMALS)
    cost_18 = one_unit_18 * token_price // ONE_E18
    return from_price_scale(cost_18, contribution_decimals)


def calculate_platform_fee(total_raised: int, fee_bp: int) -> int:
    """Комиссия платформы от собранной суммы."""
    return apply_rate(total_raised, fee_bp)


def calculate_net_after_fee(total_raised: int, fee_bp: int) -> int:
    """Собранная сумма за вычетом комиссии платформы."""
    return total_raised - calculate_platform_fee(total_raised, fee_bp)


def calculate_progress_bp(total_raised: int, funding_goal: int) -> int:
    """
    Прогресс сбора в basis points (10_000 = 100%), не выше 100%.

    Returns:
        0 если funding_goal == 0
    """
    require_non_negative(total_raised, "total_raised")
    require_non_negative(funding_goal, "funding_goal")

    if funding_goal == 0:
        return 0

    return min(total_raised * BPS_DENOMINATOR // funding_goal, BPS_DENOMINATOR)


# =============================================================================
# ALLOCATION SPLIT
# =============================================================================


def split_raised_funds(
    total_raised: int,
    platform_fee_rate_bp: int,
    liquidity_rate_bp: int,
    token_price: int,
    contribution_decimals: int,
    project_decimals: int,
) -> AllocationResult:
    """
    Четырёхсторонний сплит собранной суммы.

    Args:
        total_raised: Собранная сумма (contribution base units)
        platform_fee_rate_bp: Комиссия платформы (bp)
        liquidity_rate_bp: Доля ликвидности от суммы после комиссии (bp)
        token_price: Цена project token (18-decimal)
        contribution_decimals: Decimals contribution token
        project_decimals: Decimals project token

    Returns:
        AllocationResult

    Raises:
        DivisionByZero: Если token_price == 0
        ValueError: Если ставки вне [0, 10_000], суммы или decimals отрицательные

    Examples:
        1_000_000 USDT (6 decimals), fee 5%, liquidity 80%, price 0.2:
            platform_fee = 50_000 USDT
            contribution_for_liquidity = 760_000 USDT
            remaining_for_owner = 190_000 USDT
            project_tokens_for_liquidity = 3_800_000 TKN
    """
    require_non_negative(total_raised, "total_raised")
    validate_rate(platform_fee_rate_bp, "platform_fee_rate_bp")
    validate_rate(liquidity_rate_bp, "liquidity_rate_bp")
    require_non_negative(token_price, "token_price")
    require_non_negative(contribution_decimals, "contribution_decimals")
    require_non_negative(project_decimals, "project_decimals")

    if token_price == 0:
        raise DivisionByZero("token_price")

    platform_fee = apply_rate(total_raised, platform_fee_rate_bp)
    net_after_fee = total_raised - platform_fee
    contribution_for_liquidity = apply_rate(net_after_fee, liquidity_rate_bp)
    remaining_for_owner = net_after_fee - contribution_for_liquidity

    project_tokens_for_liquidity = calculate_tokens_due(
        contribution_for_liquidity,
        token_price,
        contribution_decimals,
        project_decimals,
    )

    logger.debug(
        "Split {} raised: fee={} liquidity={} owner={} project_tokens={}",
        total_raised,
        platform_fee,
        contribution_for_liquidity,
        remaining_for_owner,
        project_tokens_for_liquidity,
    )

    return AllocationResult(
        total_raised=total_raised,
        platform_fee=platform_fee,
        net_after_fee=net_after_fee,
        contribution_for_liquidity=contribution_for_liquidity,
        remaining_for_owner=remaining_for_owner,
        project_tokens_for_liquidity=project_tokens_for_liquidity,
        contribution_decimals=contribution_decimals,
        project_decimals=project_decimals,
    )


# =============================================================================
# CONTRIBUTION PREVIEW
# =============================================================================


def simulate_contribution(
    amount: int,
    total_raised: int,
    funding_goal: int,
    soft_cap: int,
    token_price: int,
    min_contribution: int,
    max_contribution: int,
    contribution_decimals: int,
    project_decimals: int,
    current_contribution: int = 0,
) -> ContributionPreview:
    """
    Предпросмотр вклада до отправки транзакции.

    Вклад отклоняется, если нарушает лимиты участника (validate_contribution)
    или выводит сбор за funding goal. Отклонение — не исключение: отчёт
    содержит причину, токены 0, прогресс остаётся текущим.

    Args:
        amount: Вклад (contribution base units)
        total_raised: Уже собрано
        funding_goal: Hard cap
        soft_cap: Soft cap
        token_price: Цена project token (18-decimal)
        min_contribution: Минимальный суммарный вклад участника
        max_contribution: Максимальный суммарный вклад участника
        contribution_decimals: Decimals contribution token
        project_decimals: Decimals project token
        current_contribution: Уже внесено участником

    Returns:
        ContributionPreview

    Raises:
        DivisionByZero: Если вклад принят, а token_price == 0
        ValueError: Если суммы или decimals отрицательные
    """
    require_non_negative(amount, "amount")
    require_non_negative(soft_cap, "soft_cap")
    require_non_negative(current_contribution, "current_contribution")
    current_progress_bp = calculate_progress_bp(total_raised, funding_goal)

    check = validate_contribution(
        amount,
        min_contribution,
        max_contribution,
        current_contribution=current_contribution,
        decimals=contribution_decimals,
    )
    if not check.is_valid:
        return ContributionPreview(
            is_valid=False,
            tokens_received=0,
            new_progress_bp=current_progress_bp,
            error=check.reason,
        )

    new_total_raised = total_raised + amount
    if new_total_raised > funding_goal:
        logger.debug(
            "Contribution {} rejected: {} raised of {} goal",
            amount,
            total_raised,
            funding_goal,
        )
        return ContributionPreview(
            is_valid=False,
            tokens_received=0,
            new_progress_bp=current_progress_bp,
            error="Contribution would exceed funding goal",
        )

    tokens_received = calculate_tokens_due(
        amount, token_price, contribution_decimals, project_decimals
    )

    return ContributionPreview(
        is_valid=True,
        tokens_received=tokens_received,
        new_progress_bp=calculate_progress_bp(new_total_raised, funding_goal),
        would_reach_soft_cap=new_total_raised >= soft_cap,
        would_reach_hard_cap=new_total_raised >= funding_goal,
    )
