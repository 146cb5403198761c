"""
FixedPoint — Конверсия десятичных строк в целые base units

Модуль переводит человекочитаемые суммы ("100.5") в целые base units токена
с заданным числом decimals и обратно, а также перенормирует суммы между
разными decimals (обычно к/от 18-decimal референсной шкалы цены).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. float не используется ни на одном шаге: разбор идёт по строке цифр
2. Лишние дробные разряды отбрасываются (truncation), а не округляются
3. Результат совпадает с on-chain fixed-point арифметикой бит-в-бит
4. Пустой ввод — отдельная ошибка EmptyInput, а не ноль
"""

import re
from typing import Final

from loguru import logger

from tokenomics_engine.core.math.errors import EmptyInput, InvalidNumber

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Decimals референсной шкалы цены (цена токена хранится как 18-decimal fixed-point)
PRICE_DECIMALS: Final[int] = 18

# 1.0 в 18-decimal шкале
ONE_E18: Final[int] = 10**PRICE_DECIMALS

# Число отображаемых дробных разрядов по умолчанию
DEFAULT_DISPLAY_DECIMALS: Final[int] = 6

# Допустимые формы: "100", "100.5", "100.", ".5"
_DECIMAL_RE: Final[re.Pattern[str]] = re.compile(r"^(\d*)(?:\.(\d*))?$")

# Пороги сокращённого отображения (K/M/B)
_COMPACT_UNITS: Final[tuple[tuple[int, str], ...]] = (
    (10**9, "B"),
    (10**6, "M"),
    (10**3, "K"),
)


# =============================================================================
# ПРОВЕРКИ АРГУМЕНТОВ
# =============================================================================


def require_int(value: int, name: str) -> int:
    """
    Проверка, что значение — целое число Python (не bool, не float).

    Raises:
        TypeError: Если значение не int
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    return value


def require_non_negative(value: int, name: str) -> int:
    """
    Проверка, что значение — неотрицательное целое.

    Raises:
        TypeError: Если значение не int
        ValueError: Если значение отрицательное
    """
    require_int(value, name)
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


# =============================================================================
# РАЗБОР ДЕСЯТИЧНЫХ СТРОК
# =============================================================================


def split_decimal(text: str) -> tuple[str, str]:
    """
    Разбор десятичной строки на целую и дробную части (строки цифр).

    Используется всеми парсерами модуля: суммами, процентами, днями.

    Args:
        text: Десятичная строка (пробелы по краям допустимы)

    Returns:
        (whole_digits, fraction_digits), например "100.5" → ("100", "5")

    Raises:
        EmptyInput: Если строка пустая
        InvalidNumber: Если строка отрицательная или некорректная
    """
    if not isinstance(text, str):
        raise InvalidNumber(repr(text), "expected a decimal string")

    clean = text.strip()
    if not clean:
        raise EmptyInput(text)

    if clean.startswith("-"):
        raise InvalidNumber(text, "negative values are not allowed")

    match = _DECIMAL_RE.match(clean)
    if match is None:
        raise InvalidNumber(text, "not a plain decimal number")

    whole, fraction = match.group(1), match.group(2) or ""
    if not whole and not fraction:
        # "." без цифр
        raise InvalidNumber(text, "no digits")

    # str.isdigit пропускает не-ASCII цифры, regex \d тоже; сужаем до ASCII
    if not (whole + fraction).isascii():
        raise InvalidNumber(text, "only ASCII digits are allowed")

    return whole or "0", fraction


def digits_to_int(digits: str, text: str) -> int:
    """
    Строка ASCII цифр в int.

    Raises:
        InvalidNumber: Если цифр больше лимита интерпретатора
            (sys.get_int_max_str_digits)
    """
    try:
        return int(digits)
    except ValueError as e:
        logger.debug("Rejected {} digit value: {}", len(digits), e)
        raise InvalidNumber(text, "too many digits") from e


def parse_amount(text: str, decimals: int) -> int:
    """
    Конверсия десятичной строки в base units: value * 10**decimals.

    Дробные разряды сверх decimals отбрасываются (truncation).

    Args:
        text: Человекочитаемая сумма (например, "100.5")
        decimals: Decimals токена (0 допустимо — целые токены)

    Returns:
        Сумма в base units (int)

    Raises:
        EmptyInput: Если значение не введено
        InvalidNumber: Если текст не является неотрицательным числом
            или содержит слишком много цифр

    Examples:
        >>> parse_amount("100.5", 18)
        100500000000000000000
        >>> parse_amount("1.2399", 2)
        123
    """
    require_non_negative(decimals, "decimals")

    try:
        whole, fraction = split_decimal(text)
    except InvalidNumber as e:
        logger.debug("parse_amount rejected {!r}: {}", text, e.reason)
        raise

    fraction = fraction[:decimals].ljust(decimals, "0")
    return digits_to_int(whole + fraction, text)


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_amount(
    amount: int,
    decimals: int,
    max_display_decimals: int = DEFAULT_DISPLAY_DECIMALS,
) -> str:
    """
    Отображение base units как десятичной строки.

    Дробная часть обрезается до max_display_decimals (без округления),
    хвостовые нули и точка удаляются.

    Args:
        amount: Сумма в base units (отрицательная допустима только для отображения)
        decimals: Decimals токена
        max_display_decimals: Максимум отображаемых дробных разрядов

    Returns:
        Строка вида "100.5", "0.000001", "42"

    Examples:
        >>> format_amount(100500000000000000000, 18)
        '100.5'
        >>> format_amount(1234567, 6, max_display_decimals=2)
        '1.23'
    """
    require_int(amount, "amount")
    require_non_negative(decimals, "decimals")
    require_non_negative(max_display_decimals, "max_display_decimals")

    sign = "-" if amount < 0 else ""
    abs_amount = abs(amount)

    whole, fractional = divmod(abs_amount, 10**decimals)
    if decimals == 0 or fractional == 0:
        return f"{sign}{whole}"

    fraction_str = str(fractional).rjust(decimals, "0")
    fraction_str = fraction_str[:max_display_decimals].rstrip("0")

    if not fraction_str:
        if whole == 0:
            # Значение меньше отображаемой точности
            return "0"
        return f"{sign}{whole}"

    return f"{sign}{whole}.{fraction_str}"


def format_compact(amount: int, decimals: int, precision: int = 2) -> str:
    """
    Сокращённое отображение больших сумм: 1.5K, 2.25M, 10B.

    Все вычисления целочисленные; дробная часть обрезается до precision.
    """
    require_int(amount, "amount")
    sign = "-" if amount < 0 else ""
    abs_amount = abs(amount)
    unit = 10**decimals

    for threshold, suffix in _COMPACT_UNITS:
        if abs_amount >= threshold * unit:
            scaled = abs_amount // threshold
            return f"{sign}{format_amount(scaled, decimals, precision)}{suffix}"

    return f"{sign}{format_amount(abs_amount, decimals, precision)}"


def format_token_price(
    price: int,
    project_symbol: str,
    contribution_symbol: str,
) -> str:
    """Цена (18-decimal) в виде '0.2 USDT per TKN'."""
    formatted = format_amount(price, PRICE_DECIMALS, DEFAULT_DISPLAY_DECIMALS)
    return f"{formatted} {contribution_symbol} per {project_symbol}"


# =============================================================================
# ПЕРЕНОРМИРОВКА
# =============================================================================


def renormalize(amount: int, from_decimals: int, to_decimals: int) -> int:
    """
    Перенормировка суммы между шкалами decimals.

    При to_decimals < from_decimals операция с потерями (floor division):
    обратную перенормировку можно использовать только для отображения,
    цепочки lossy перенормировок перед финансовым сплитом запрещены.

    Args:
        amount: Сумма в base units шкалы from_decimals
        from_decimals: Исходные decimals
        to_decimals: Целевые decimals

    Returns:
        Сумма в base units шкалы to_decimals

    Examples:
        >>> renormalize(1_000_000, 6, 18)
        1000000000000000000
        >>> renormalize(1_999_999_999_999, 18, 6)
        1
    """
    require_non_negative(amount, "amount")
    require_non_negative(from_decimals, "from_decimals")
    require_non_negative(to_decimals, "to_decimals")

    if from_decimals == to_decimals:
        return amount

    if from_decimals < to_decimals:
        return amount * 10 ** (to_decimals - from_decimals)

    return amount // 10 ** (from_decimals - to_decimals)


def to_price_scale(amount: int, decimals: int) -> int:
    """Перенормировка суммы к 18-decimal референсной шкале."""
    return renormalize(amount, decimals, PRICE_DECIMALS)


def from_price_scale(amount: int, decimals: int) -> int:
    """Перенормировка суммы из 18-decimal шкалы в decimals токена."""
    return renormalize(amount, PRICE_DECIMALS, decimals)
