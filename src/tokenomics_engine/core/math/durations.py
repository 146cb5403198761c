"""
Durations — Нормализация длительностей

Переводит ввод в днях ("14", "0.5") в целые секунды для on-chain
длительностей (vesting cliff/duration/interval, lock duration).

Политика округления: floor(days * 86_400), вычисляется по строке цифр без float.
Ноль допустим ("без cliff", "без lock").
"""

from typing import Final

from loguru import logger

from tokenomics_engine.core.math.errors import InvalidNumber
from tokenomics_engine.core.math.fixed_point import (
    digits_to_int,
    require_non_negative,
    split_decimal,
)

SECONDS_PER_MINUTE: Final[int] = 60
SECONDS_PER_HOUR: Final[int] = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: Final[int] = 24 * SECONDS_PER_HOUR


def days_to_seconds(days_text: str) -> int:
    """
    Конверсия дней в целые секунды: floor(days * 86_400).

    Args:
        days_text: Количество дней как строка (например, "14" или "0.5")

    Returns:
        Длительность в секундах

    Raises:
        EmptyInput: Если значение не введено
        InvalidNumber: Если значение отрицательное, некорректное
            или содержит слишком много цифр

    Examples:
        >>> days_to_seconds("14")
        1209600
        >>> days_to_seconds("0.5")
        43200
    """
    try:
        whole, fraction = split_decimal(days_text)
    except InvalidNumber as e:
        logger.debug("days_to_seconds rejected {!r}: {}", days_text, e.reason)
        raise

    scaled_days = digits_to_int(whole + fraction, days_text)
    seconds = scaled_days * SECONDS_PER_DAY // 10 ** len(fraction)

    logger.debug("Duration conversion: {} days -> {} seconds", days_text.strip(), seconds)
    return seconds


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def format_duration(seconds: int) -> str:
    """
    Человекочитаемая длительность: "1 day, 2 hours, and 3 minutes".

    Секунды показываются, только если старших единиц меньше двух.
    """
    require_non_negative(seconds, "seconds")

    days, rest = divmod(seconds, SECONDS_PER_DAY)
    hours, rest = divmod(rest, SECONDS_PER_HOUR)
    minutes, secs = divmod(rest, SECONDS_PER_MINUTE)

    parts: list[str] = []
    if days:
        parts.append(_plural(days, "day"))
    if hours:
        parts.append(_plural(hours, "hour"))
    if minutes:
        parts.append(_plural(minutes, "minute"))
    if secs and len(parts) < 2:
        parts.append(_plural(secs, "second"))

    if not parts:
        return "0 seconds"
    if len(parts) == 1:
        return parts[0]
    if len(parts) == 2:
        return f"{parts[0]} and {parts[1]}"
    return f"{', '.join(parts[:-1])}, and {parts[-1]}"
