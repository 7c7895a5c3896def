"""
Numerical Safeguards — проверки предусловий для курсов и балансов

Модуль собирает проверки, которые превращают нарушения предусловий
хост-модели в явный InvalidStateError:
- NaN/Inf в курсах
- нулевой курс (деление 1 / rate не определено)
- число десятичных знаков валюты вне поддерживаемого набора

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль никогда не происходит (InvalidStateError до деления)
2. NaN/Inf никогда не пропагируют в цены
3. Сравнение цен после округления — точное (без epsilon)
"""

import math
from typing import Final

from src.core.errors import InvalidStateError

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Поддерживаемые значения decimal places для валют хоста
SUPPORTED_DECIMAL_PLACES: Final[tuple[int, ...]] = (0, 1, 2, 3, 4)


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если value конечно

    Examples:
        >>> is_valid_float(1.5)
        True
        >>> is_valid_float(float('nan'))
        False
        >>> is_valid_float(float('inf'))
        False
    """
    try:
        return math.isfinite(value)
    except TypeError:
        return False


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_rate(rate: float, name: str = "rate") -> float:
    """
    Проверка курса перед обращением 1 / rate.

    Args:
        rate: Курс из хост-модели
        name: Имя параметра для сообщения об ошибке

    Returns:
        rate без изменений

    Raises:
        InvalidStateError: Если курс NaN/Inf или равен нулю
    """
    if not is_valid_float(rate):
        raise InvalidStateError(f"{name} must be a finite float (not NaN/Inf), got {rate}")

    if rate == 0.0:
        raise InvalidStateError(f"{name} must be non-zero to convert into a price")

    return rate


def validate_decimal_places(decimal_places: int) -> int:
    """
    Проверка числа десятичных знаков валюты.

    Raises:
        InvalidStateError: Если значение вне SUPPORTED_DECIMAL_PLACES
    """
    if decimal_places not in SUPPORTED_DECIMAL_PLACES:
        raise InvalidStateError(
            f"decimal_places must be one of {SUPPORTED_DECIMAL_PLACES}, got {decimal_places}"
        )
    return decimal_places
