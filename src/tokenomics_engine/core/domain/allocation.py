"""
AllocationResult — Распределение собранных средств

Immutable Pydantic модели: сплит собранной суммы и предпросмотр вклада.

AllocationResult:
- platform fee (снимается первым)
- contribution tokens для пула ликвидности
- project tokens для пула ликвидности (конверсия по цене, не часть сплита)
- остаток владельцу проекта
"""

from pydantic import BaseModel, Field, model_validator

from tokenomics_engine.core.math.basis_points import BPS_DENOMINATOR


class AllocationResult(BaseModel):
    """
    Результат split_raised_funds.

    Инвариант (точный, без потерь на остатке деления):
        platform_fee + contribution_for_liquidity + remaining_for_owner == total_raised

    project_tokens_for_liquidity — конверсия единиц, в инвариант не входит.
    """

    # Суммы в decimals contribution token
    total_raised: int = Field(..., ge=0, description="Собранная сумма (contribution base units)")
    platform_fee: int = Field(..., ge=0, description="Комиссия платформы")
    net_after_fee: int = Field(..., ge=0, description="Сумма после комиссии платформы")
    contribution_for_liquidity: int = Field(
        ..., ge=0, description="Contribution tokens для пула ликвидности"
    )
    remaining_for_owner: int = Field(..., ge=0, description="Остаток владельцу проекта")

    # Сумма в decimals project token
    project_tokens_for_liquidity: int = Field(
        ..., ge=0, description="Project tokens для пула ликвидности"
    )

    # Шкалы
    contribution_decimals: int = Field(..., ge=0, description="Decimals contribution token")
    project_decimals: int = Field(..., ge=0, description="Decimals project token")

    model_config = {"frozen": True, "strict": True}

    @model_validator(mode="after")
    def check_split_invariant(self) -> "AllocationResult":
        """Сумма частей сплита точно равна total_raised."""
        if self.platform_fee + self.net_after_fee != self.total_raised:
            raise ValueError("platform_fee + net_after_fee must equal total_raised")
        if self.contribution_for_liquidity + self.remaining_for_owner != self.net_after_fee:
            raise ValueError(
                "contribution_for_liquidity + remaining_for_owner must equal net_after_fee"
            )
        return self


class ContributionPreview(BaseModel):
    """
    Результат simulate_contribution: предпросмотр вклада до отправки.

    Отклонённый вклад не даёт токенов, progress остаётся текущим,
    error содержит причину отказа.
    """

    is_valid: bool = Field(..., description="Вклад будет принят контрактом")
    tokens_received: int = Field(..., ge=0, description="Project tokens за вклад")
    new_progress_bp: int = Field(
        ..., ge=0, le=BPS_DENOMINATOR, description="Прогресс сбора (bp)"
    )
    would_reach_soft_cap: bool = Field(False, description="Сбор достигнет soft cap")
    would_reach_hard_cap: bool = Field(False, description="Сбор достигнет funding goal")
    error: str = Field("", description="Причина отказа (пусто для валидного вклада)")

    model_config = {"frozen": True, "strict": True}

    @model_validator(mode="after")
    def check_rejection(self) -> "ContributionPreview":
        """Отклонённый вклад: без токенов, с причиной, без достижения caps."""
        if self.is_valid and self.error:
            raise ValueError("valid preview must not carry an error")
        if not self.is_valid:
            if not self.error:
                raise ValueError("rejected preview must carry an error")
            if self.tokens_received or self.would_reach_soft_cap or self.would_reach_hard_cap:
                raise ValueError("rejected preview must not report tokens or reached caps")
        return self
