"""
DecimalCodec — конверсия minor units ↔ десятичное значение

Хост хранит балансы целым числом минимальных единиц валюты (центы, копейки).
Для отображения баланс делится на 10^decimal_places валюты счёта.

Единственный допустимый способ преобразований между:
- minor units (int, хранение хоста)
- десятичным значением (float, отображение)
"""

from decimal import ROUND_HALF_EVEN, Context, Decimal
from typing import Final

from src.core.errors import InvalidStateError
from src.core.math.numerical_safeguards import is_valid_float, validate_decimal_places


# Делители по числу десятичных знаков: index = decimal_places
CENT_MULT: Final[tuple[float, ...]] = (1.0, 10.0, 100.0, 1000.0, 10000.0)

_DECIMAL_CONTEXT: Final[Context] = Context(prec=400)


def to_decimal(minor_units: int, decimal_places: int) -> float:
    """
    Конверсия: minor units → десятичное значение.

    Args:
        minor_units: Баланс в минимальных единицах валюты
        decimal_places: Число десятичных знаков валюты (0-4)

    Returns:
        minor_units / 10^decimal_places

    Raises:
        InvalidStateError: Если decimal_places вне {0, 1, 2, 3, 4}

    Examples:
        >>> to_decimal(12345, 2)
        123.45
        >>> to_decimal(-7, 0)
        -7.0
    """
    validate_decimal_places(decimal_places)
    return minor_units / CENT_MULT[decimal_places]


def to_minor_units(value: float, decimal_places: int) -> int:
    """
    Обратная конверсия: десятичное значение → minor units.

    Округление до целых minor units по правилу HALF_EVEN.

    Raises:
        InvalidStateError: Если value NaN/Inf или decimal_places не поддерживается
    """
    validate_decimal_places(decimal_places)
    if not is_valid_float(value):
        raise InvalidStateError(f"value must be a finite float (not NaN/Inf), got {value}")

    scaled = Decimal(repr(value)).scaleb(decimal_places, context=_DECIMAL_CONTEXT)
    return int(
        scaled.quantize(Decimal(1), rounding=ROUND_HALF_EVEN, context=_DECIMAL_CONTEXT)
    )
