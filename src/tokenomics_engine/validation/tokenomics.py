"""
Tokenomics Validator — Кросс-валидация параметров продажи

Проверяет согласованность funding goal, soft cap, цены, supply, токенов на
продажу и доли ликвидности (с разными decimals у contribution и project token).

Нарушения бизнес-правил не бросают исключений — они собираются в отчёт,
так как пользователь может быть в процессе ввода. Исключение бросается
только для некорректного числового ввода (InvalidNumber).

Порядок проверок (все выполняются независимо от предыдущих):
1. Ожидаемые токены на продажу (HINT)
2. Токены для ликвидности
3. Несовпадение заявленных токенов на продажу (WARNING, допуск 0.1%)
4. Достаточность supply (WARNING, запас 1%)
5. Нижняя граница soft cap (WARNING, 51% funding goal)
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict

from loguru import logger

from tokenomics_engine.core.contracts.validators import validate_tokenomics_form_payload
from tokenomics_engine.core.domain.tokenomics import (
    Finding,
    FindingCode,
    FindingKind,
    TokenomicsInput,
    TokenomicsReport,
)
from tokenomics_engine.core.math.basis_points import apply_rate, format_percentage, parse_percentage
from tokenomics_engine.core.math.fixed_point import (
    ONE_E18,
    PRICE_DECIMALS,
    format_amount,
    from_price_scale,
    parse_amount,
    to_price_scale,
)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class TokenomicsValidatorConfig:
    """Пороги валидатора токеномики."""

    # Допуск несовпадения: expected // divisor (1000 → 0.1%), минимум 1 base unit
    mismatch_tolerance_divisor: int = 1_000

    # Запас supply: required // divisor (100 → 1%)
    supply_margin_divisor: int = 100

    # Минимальный soft cap в bp от funding goal (5100 → 51%)
    min_soft_cap_bp: int = 5_100


# =============================================================================
# CHECKS
# =============================================================================


def _tokens_for_contribution(contribution_18: int, token_price: int, project_decimals: int) -> int:
    return from_price_scale(contribution_18 * ONE_E18 // token_price, project_decimals)


def _sale_amount_mismatch(
    expected: int,
    declared: int,
    config: TokenomicsValidatorConfig,
) -> Finding | None:
    if expected <= 0 or declared <= 0:
        return None

    diff = abs(declared - expected)
    tolerance = max(expected // config.mismatch_tolerance_divisor, 1)
    if diff <= tolerance:
        return None

    return Finding(
        kind=FindingKind.WARNING,
        code=FindingCode.SALE_AMOUNT_MISMATCH,
        message="Tokens for Sale mismatch with funding goal & price",
    )


def _supply_insufficient(
    data: TokenomicsInput,
    liquidity_tokens: int,
    config: TokenomicsValidatorConfig,
) -> Finding | None:
    required = data.amount_tokens_for_sale + liquidity_tokens
    minimum = required + required // config.supply_margin_divisor

    if data.initial_total_supply <= 0 or data.initial_total_supply >= minimum:
        return None

    return Finding(
        kind=FindingKind.WARNING,
        code=FindingCode.SUPPLY_INSUFFICIENT,
        message="Total supply too low to cover sale + liquidity",
    )


def _soft_cap_too_low(
    data: TokenomicsInput,
    config: TokenomicsValidatorConfig,
) -> Finding | None:
    if data.soft_cap <= 0 or data.funding_goal <= 0:
        return None

    minimum = apply_rate(data.funding_goal, config.min_soft_cap_bp)
    if data.soft_cap >= minimum:
        return None

    return Finding(
        kind=FindingKind.WARNING,
        code=FindingCode.SOFT_CAP_TOO_LOW,
        message=(
            f"Soft cap must be at least {format_percentage(config.min_soft_cap_bp, 0)} "
            f"of funding goal"
        ),
    )


# =============================================================================
# VALIDATOR
# =============================================================================


def validate_tokenomics(
    data: TokenomicsInput,
    config: TokenomicsValidatorConfig | None = None,
) -> TokenomicsReport:
    """
    Кросс-валидация параметров продажи.

    Args:
        data: Параметры продажи в base units
        config: Пороги (опционально, используется default)

    Returns:
        TokenomicsReport; valid == True iff нет WARNING
    """
    config = config or TokenomicsValidatorConfig()
    findings: list[Finding] = []

    funding_goal_18 = to_price_scale(data.funding_goal, data.contribution_decimals)
    priced = data.funding_goal > 0 and data.token_price > 0

    # 1. Ожидаемые токены на продажу
    expected_tokens_for_sale = 0
    if priced:
        expected_tokens_for_sale = _tokens_for_contribution(
            funding_goal_18, data.token_price, data.project_decimals
        )
        findings.append(
            Finding(
                kind=FindingKind.HINT,
                code=FindingCode.EXPECTED_TOKENS_FOR_SALE,
                message=(
                    f"Suggestion: "
                    f"{format_amount(expected_tokens_for_sale, data.project_decimals)} "
                    f"tokens for sale"
                ),
            )
        )

    # 2. Токены для ликвидности
    liquidity_tokens = 0
    if priced:
        liquidity_contribution = apply_rate(funding_goal_18, data.liquidity_percentage_bp)
        liquidity_tokens = _tokens_for_contribution(
            liquidity_contribution, data.token_price, data.project_decimals
        )

    # 3-5. Предупреждения
    for finding in (
        _sale_amount_mismatch(expected_tokens_for_sale, data.amount_tokens_for_sale, config),
        _supply_insufficient(data, liquidity_tokens, config),
        _soft_cap_too_low(data, config),
    ):
        if finding is not None:
            findings.append(finding)

    report = TokenomicsReport(
        expected_tokens_for_sale=expected_tokens_for_sale,
        liquidity_tokens=liquidity_tokens,
        findings=tuple(findings),
    )
    logger.debug(
        "Tokenomics validated: valid={} warnings={}",
        report.valid,
        [code.value for code in report.codes(FindingKind.WARNING)],
    )
    return report


# =============================================================================
# FORM ENTRY POINT
# =============================================================================


def _parse_optional(form: Dict[str, Any], key: str, parser: Callable[[str], int]) -> int:
    """Необязательное поле: отсутствие или пустая строка означает "не введено" (0)."""
    text = form.get(key)
    if text is None or not text.strip():
        return 0
    return parser(text)


def tokenomics_input_from_form(
    form: Dict[str, Any],
    contribution_decimals: int,
    project_decimals: int = PRICE_DECIMALS,
) -> TokenomicsInput:
    """
    Разбор сырой формы в TokenomicsInput.

    Цена разбирается в 18-decimal шкале, funding goal и soft cap — в decimals
    contribution token, sale amount и supply — в decimals project token.

    Raises:
        ValidationError: Если форма не соответствует tokenomics_form.json
        InvalidNumber: Если числовое поле некорректно
    """
    validate_tokenomics_form_payload(form)

    return TokenomicsInput(
        funding_goal=parse_amount(form["fundingGoal"], contribution_decimals),
        soft_cap=_parse_optional(
            form, "softCap", lambda t: parse_amount(t, contribution_decimals)
        ),
        token_price=parse_amount(form["tokenPrice"], PRICE_DECIMALS),
        amount_tokens_for_sale=parse_amount(form["amountTokensForSale"], project_decimals),
        initial_total_supply=_parse_optional(
            form, "initialTotalSupply", lambda t: parse_amount(t, project_decimals)
        ),
        liquidity_percentage_bp=_parse_optional(form, "liquidityPercentage", parse_percentage),
        contribution_decimals=contribution_decimals,
        project_decimals=project_decimals,
    )


def validate_tokenomics_form(
    form: Dict[str, Any],
    contribution_decimals: int,
    project_decimals: int = PRICE_DECIMALS,
    config: TokenomicsValidatorConfig | None = None,
) -> TokenomicsReport:
    """
    Валидация токеномики прямо из состояния формы.

    Raises:
        ValidationError: Если форма не соответствует схеме
        InvalidNumber: Если числовое поле некорректно
    """
    data = tokenomics_input_from_form(form, contribution_decimals, project_decimals)
    return validate_tokenomics(data, config)
