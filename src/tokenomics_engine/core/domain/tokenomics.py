"""
Tokenomics — Модели входа и отчёта валидатора токеномики

Immutable Pydantic модели:
- TokenomicsInput: параметры продажи в base units (уже разобранные из формы)
- Finding: одно замечание валидатора (kind + code + сообщение)
- TokenomicsReport: результат validate_tokenomics
"""

from enum import Enum

from pydantic import BaseModel, Field, computed_field

from tokenomics_engine.core.math.basis_points import BPS_DENOMINATOR
from tokenomics_engine.core.math.fixed_point import PRICE_DECIMALS


# =============================================================================
# ENUMS
# =============================================================================


class FindingKind(str, Enum):
    """
    Серьёзность замечания.

    WARNING делает конфигурацию невалидной, HINT — только подсказка.
    """

    WARNING = "WARNING"
    HINT = "HINT"


class FindingCode(str, Enum):
    """Закрытый перечень замечаний валидатора токеномики."""

    EXPECTED_TOKENS_FOR_SALE = "EXPECTED_TOKENS_FOR_SALE"
    SALE_AMOUNT_MISMATCH = "SALE_AMOUNT_MISMATCH"
    SUPPLY_INSUFFICIENT = "SUPPLY_INSUFFICIENT"
    SOFT_CAP_TOO_LOW = "SOFT_CAP_TOO_LOW"


# =============================================================================
# MODELS
# =============================================================================


class Finding(BaseModel):
    """Замечание валидатора с человекочитаемым сообщением (English)."""

    kind: FindingKind = Field(..., description="WARNING / HINT")
    code: FindingCode = Field(..., description="Код замечания")
    message: str = Field(..., min_length=1, description="Сообщение для отображения")

    model_config = {"frozen": True}


class TokenomicsInput(BaseModel):
    """
    Параметры продажи для кросс-валидации.

    Суммы funding_goal и soft_cap — в decimals contribution token,
    amount_tokens_for_sale и initial_total_supply — в decimals project token,
    token_price — 18-decimal fixed-point (contribution за 1 project token).
    """

    funding_goal: int = Field(..., ge=0, description="Hard cap (contribution base units)")
    soft_cap: int = Field(0, ge=0, description="Soft cap (contribution base units)")
    token_price: int = Field(..., ge=0, description="Цена токена (18-decimal)")
    amount_tokens_for_sale: int = Field(..., ge=0, description="Токены на продажу")
    initial_total_supply: int = Field(0, ge=0, description="Начальный total supply")
    liquidity_percentage_bp: int = Field(
        0, ge=0, le=BPS_DENOMINATOR, description="Доля ликвидности (bp)"
    )
    contribution_decimals: int = Field(..., ge=0, description="Decimals contribution token")
    project_decimals: int = Field(PRICE_DECIMALS, ge=0, description="Decimals project token")

    model_config = {"frozen": True, "strict": True}


class TokenomicsReport(BaseModel):
    """
    Отчёт validate_tokenomics.

    valid == True тогда и только тогда, когда нет ни одного WARNING;
    подсказки (HINT) на валидность не влияют.
    """

    expected_tokens_for_sale: int = Field(
        ..., ge=0, description="Ожидаемое число токенов на продажу (project base units)"
    )
    liquidity_tokens: int = Field(
        ..., ge=0, description="Project tokens, нужные для ликвидности"
    )
    findings: tuple[Finding, ...] = Field(default=(), description="Замечания в порядке проверок")

    model_config = {"frozen": True}

    @property
    def warnings(self) -> list[str]:
        return [f.message for f in self.findings if f.kind is FindingKind.WARNING]

    @property
    def hints(self) -> list[str]:
        return [f.message for f in self.findings if f.kind is FindingKind.HINT]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def valid(self) -> bool:
        return not any(f.kind is FindingKind.WARNING for f in self.findings)

    def codes(self, kind: FindingKind | None = None) -> list[FindingCode]:
        """Коды замечаний (опционально только заданной серьёзности)."""
        return [f.code for f in self.findings if kind is None or f.kind is kind]
