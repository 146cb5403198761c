"""
Fees — Модели комиссий AMM

FeeConfig: конфигурация комиссий, прочитанная из AMM контракта (уже декодированные int).
FeeBreakdown: разбивка комиссии для конкретного свапа.
"""

from pydantic import BaseModel, Field, model_validator

from tokenomics_engine.core.math.basis_points import (
    BPS_DENOMINATOR,
    format_bps,
    format_percentage,
)
from tokenomics_engine.core.math.fixed_point import DEFAULT_DISPLAY_DECIMALS, format_amount


# =============================================================================
# FEE CONFIG
# =============================================================================


class FeeConfig(BaseModel):
    """
    Конфигурация комиссий AMM.

    protocol_fee_bp должен быть частью trading_fee_bp, но модель этого не
    требует: некорректную конфигурацию выявляет вызывающая сторона по
    отрицательному lp_fee_bp.
    """

    trading_fee_bp: int = Field(..., ge=0, description="Trading fee (bp)")
    protocol_fee_bp: int = Field(..., ge=0, description="Protocol fee (bp)")
    fee_denominator: int = Field(BPS_DENOMINATOR, gt=0, description="Знаменатель комиссий")
    fees_enabled: bool = Field(True, description="Комиссии включены")

    model_config = {"frozen": True, "strict": True}

    @property
    def total_fee_bp(self) -> int:
        return self.trading_fee_bp + self.protocol_fee_bp

    @property
    def lp_fee_bp(self) -> int:
        """Доля LP (может быть отрицательной при некорректной конфигурации)."""
        return self.trading_fee_bp - self.protocol_fee_bp

    def formatted(self) -> dict[str, str]:
        """Строки для отображения ("0.30%", "30 bps")."""
        return {
            "trading_fee": format_percentage(self.trading_fee_bp),
            "protocol_fee": format_percentage(self.protocol_fee_bp),
            "trading_fee_display": format_bps(self.trading_fee_bp),
            "protocol_fee_display": format_bps(self.protocol_fee_bp),
        }


# =============================================================================
# FEE BREAKDOWN
# =============================================================================


class FeeBreakdown(BaseModel):
    """
    Разбивка комиссии свапа.

    Инварианты:
        lp_fee == total_fee - protocol_fee
        amount_after_fees == amount_in - total_fee

    Калькулятор не делает clamp, поэтому lp_fee и amount_after_fees не
    ограничены снизу на уровне модели.
    """

    amount_in: int = Field(..., ge=0, description="Входная сумма (base units)")
    total_fee: int = Field(..., ge=0, description="Полная комиссия")
    protocol_fee: int = Field(..., ge=0, description="Доля протокола")
    lp_fee: int = Field(..., description="Доля LP (total_fee - protocol_fee)")
    amount_after_fees: int = Field(..., description="Сумма после комиссий")
    decimals: int = Field(18, ge=0, description="Decimals входного токена")

    model_config = {"frozen": True, "strict": True}

    @model_validator(mode="after")
    def check_fee_invariants(self) -> "FeeBreakdown":
        if self.lp_fee != self.total_fee - self.protocol_fee:
            raise ValueError("lp_fee must equal total_fee - protocol_fee")
        if self.amount_after_fees != self.amount_in - self.total_fee:
            raise ValueError("amount_after_fees must equal amount_in - total_fee")
        return self

    def formatted(self, max_display_decimals: int = DEFAULT_DISPLAY_DECIMALS) -> dict[str, str]:
        """Строки для отображения всех сумм разбивки."""
        return {
            "total_fee": format_amount(self.total_fee, self.decimals, max_display_decimals),
            "protocol_fee": format_amount(self.protocol_fee, self.decimals, max_display_decimals),
            "lp_fee": format_amount(self.lp_fee, self.decimals, max_display_decimals),
            "amount_after_fees": format_amount(
                self.amount_after_fees, self.decimals, max_display_decimals
            ),
        }
