"""
Тесты для модуля FixedPoint

Проверяет:
1. Разбор десятичных строк в base units (truncation, без float)
2. Пустой и некорректный ввод (EmptyInput / InvalidNumber)
3. Форматирование base units для отображения
4. Инварианты перенормировки между decimals
"""

import pytest

from tokenomics_engine.core.math import (
    EmptyInput,
    InvalidNumber,
    digits_to_int,
    format_amount,
    format_compact,
    format_token_price,
    from_price_scale,
    parse_amount,
    renormalize,
    to_price_scale,
)


# =============================================================================
# PARSE
# =============================================================================


class TestParseAmount:
    """Тесты для parse_amount"""

    def test_fractional_18_decimals(self) -> None:
        """100.5 при 18 decimals = 1005 * 10^17"""
        assert parse_amount("100.5", 18) == 100_500_000_000_000_000_000

    def test_whole_number(self) -> None:
        assert parse_amount("42", 6) == 42_000_000

    def test_extra_digits_truncated_not_rounded(self) -> None:
        """Разряды сверх decimals отбрасываются"""
        assert parse_amount("1.2399", 2) == 123
        assert parse_amount("0.999999999", 6) == 999_999

    def test_zero_decimals(self) -> None:
        """decimals=0 — целые токены"""
        assert parse_amount("42", 0) == 42
        assert parse_amount("42.9", 0) == 42

    def test_zero_is_zero(self) -> None:
        assert parse_amount("0", 18) == 0
        assert parse_amount("0.0", 18) == 0

    def test_leading_and_trailing_point(self) -> None:
        assert parse_amount(".5", 6) == 500_000
        assert parse_amount("100.", 2) == 10_000

    def test_whitespace_stripped(self) -> None:
        assert parse_amount("  7.25  ", 2) == 725

    def test_exact_at_large_scale(self) -> None:
        """Точность, недостижимая для float"""
        assert parse_amount("123456789.123456789123456789", 18) == (
            123_456_789_123_456_789_123_456_789
        )
        assert parse_amount("0.1", 18) + parse_amount("0.2", 18) == parse_amount("0.3", 18)

    @pytest.mark.parametrize("text", ["", "   ", "\t"])
    def test_empty_input_is_explicit_error(self, text: str) -> None:
        """Пустой ввод — ошибка EmptyInput, не ноль"""
        with pytest.raises(EmptyInput):
            parse_amount(text, 18)

    def test_empty_input_is_invalid_number(self) -> None:
        """EmptyInput — частный случай InvalidNumber"""
        with pytest.raises(InvalidNumber, match="empty"):
            parse_amount("", 6)

    def test_negative_rejected(self) -> None:
        with pytest.raises(InvalidNumber, match="negative"):
            parse_amount("-1", 18)

    @pytest.mark.parametrize(
        "text",
        ["abc", "1.2.3", "1e18", "+5", "1,000", ".", "1 000", "0x10", "١٢"],
    )
    def test_malformed_rejected(self, text: str) -> None:
        with pytest.raises(InvalidNumber):
            parse_amount(text, 18)

    def test_non_string_rejected(self) -> None:
        with pytest.raises(InvalidNumber):
            parse_amount(None, 18)  # type: ignore[arg-type]

    def test_invalid_decimals(self) -> None:
        with pytest.raises(TypeError):
            parse_amount("1", 1.5)  # type: ignore[arg-type]
        with pytest.raises(ValueError):
            parse_amount("1", -1)

    def test_error_carries_text(self) -> None:
        with pytest.raises(InvalidNumber) as exc_info:
            parse_amount("12abc", 6)
        assert exc_info.value.text == "12abc"


# =============================================================================
# FORMAT
# =============================================================================


class TestFormatAmount:
    """Тесты для format_amount"""

    def test_basic(self) -> None:
        assert format_amount(100_500_000_000_000_000_000, 18) == "100.5"

    def test_whole_value_has_no_point(self) -> None:
        assert format_amount(10**18, 18) == "1"
        assert format_amount(0, 18) == "0"

    def test_display_decimals_truncate(self) -> None:
        """Обрезка, а не округление"""
        assert format_amount(1_234_567, 6, max_display_decimals=2) == "1.23"
        assert format_amount(1_999_999, 6, max_display_decimals=2) == "1.99"

    def test_default_six_display_decimals(self) -> None:
        assert format_amount(1_234_567_891, 9) == "1.234567"

    def test_dust_below_display_precision(self) -> None:
        assert format_amount(1, 18) == "0"

    def test_zero_decimals(self) -> None:
        assert format_amount(42, 0) == "42"

    def test_negative_for_display(self) -> None:
        assert format_amount(-1_500_000, 6) == "-1.5"

    def test_float_rejected(self) -> None:
        with pytest.raises(TypeError):
            format_amount(1.5, 6)  # type: ignore[arg-type]

    def test_parse_then_format(self) -> None:
        for text in ["100.5", "0.000001", "42", "123456.75"]:
            assert format_amount(parse_amount(text, 18), 18) == text


class TestFormatCompact:
    """Тесты для format_compact"""

    def test_thousands(self) -> None:
        assert format_compact(1_500 * 10**18, 18) == "1.5K"

    def test_millions(self) -> None:
        assert format_compact(2_250_000 * 10**6, 6) == "2.25M"

    def test_billions_truncated(self) -> None:
        assert format_compact(12_345_678_900 * 10**18, 18) == "12.34B"

    def test_small_value(self) -> None:
        assert format_compact(999 * 10**18, 18) == "999"


def test_format_token_price() -> None:
    assert format_token_price(2 * 10**17, "TKN", "USDT") == "0.2 USDT per TKN"


# =============================================================================
# RENORMALIZE
# =============================================================================


class TestRenormalize:
    """Тесты для renormalize"""

    def test_upscale(self) -> None:
        assert renormalize(1_000_000, 6, 18) == 10**18

    def test_downscale_floors(self) -> None:
        assert renormalize(1_999_999_999_999, 18, 6) == 1

    def test_same_decimals(self) -> None:
        assert renormalize(12345, 8, 8) == 12345

    def test_upscale_then_downscale_is_lossless(self) -> None:
        """Инвариант: renormalize(renormalize(a, d1, d2), d2, d1) == a при d2 >= d1"""
        amounts = [0, 1, 7, 123_456_789, 10**30 + 17]
        pairs = [(0, 0), (0, 18), (6, 18), (6, 6), (18, 30), (2, 27)]
        for a in amounts:
            for d1, d2 in pairs:
                assert renormalize(renormalize(a, d1, d2), d2, d1) == a

    def test_downscale_then_upscale_never_increases(self) -> None:
        """Lossy направление может только уменьшить значение"""
        amounts = [0, 1, 999_999, 10**12 + 1, 10**30 + 17]
        pairs = [(18, 6), (18, 0), (30, 18), (6, 2)]
        for a in amounts:
            for d1, d2 in pairs:
                assert renormalize(renormalize(a, d1, d2), d2, d1) <= a

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            renormalize(-1, 6, 18)
        with pytest.raises(ValueError):
            renormalize(5, -1, 3)

    def test_price_scale_helpers(self) -> None:
        assert to_price_scale(1_000_000, 6) == 10**18
        assert from_price_scale(10**18, 6) == 10**6


class TestOverlongInput:
    """Числа длиннее лимита int(str) интерпретатора"""

    def test_overlong_whole_part(self) -> None:
        with pytest.raises(InvalidNumber, match="too many digits") as exc_info:
            parse_amount("1" * 5000, 18)
        assert exc_info.value.reason == "too many digits"

    def test_overlong_fraction_is_truncated_first(self) -> None:
        """Лишние дробные разряды отбрасываются до конверсии"""
        assert parse_amount("1." + "9" * 5000, 6) == 1_999_999

    def test_overlong_scale(self) -> None:
        with pytest.raises(InvalidNumber, match="too many digits"):
            parse_amount("1", 5000)

    def test_digits_to_int(self) -> None:
        assert digits_to_int("00123", "00123") == 123
        with pytest.raises(InvalidNumber) as exc_info:
            digits_to_int("7" * 5000, "source text")
        assert exc_info.value.text == "source text"
