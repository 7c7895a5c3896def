"""
PriceRounding — конверсия курса хоста в цену

Хост хранит курс ценной бумаги как rate = 1 / price. Цена для отображения
и сравнения получается обращением курса с округлением до 10 знаков после
запятой по правилу банковского округления (ROUND_HALF_EVEN).

Округление выполняется в decimal над кратчайшим десятичным представлением
float (repr), а не двоичным round(), поэтому половинные случаи
разрешаются так же, как в десятичной арифметике.
"""

from decimal import ROUND_HALF_EVEN, Context, Decimal
from typing import Final

from src.core.errors import InvalidStateError
from src.core.math.numerical_safeguards import is_valid_float, validate_rate


# Число знаков после запятой для цен
PRICE_SCALE: Final[int] = 10

# Точности хватает для любого конечного float после quantize
_DECIMAL_CONTEXT: Final[Context] = Context(prec=400)


def round_price(price: float, scale: int = PRICE_SCALE) -> float:
    """
    Округление цены до scale знаков (HALF_EVEN).

    Args:
        price: Цена
        scale: Число знаков после запятой (default: PRICE_SCALE)

    Returns:
        Округлённая цена

    Raises:
        InvalidStateError: Если price NaN/Inf

    Examples:
        >>> round_price(0.00000000005)
        0.0
        >>> round_price(0.00000000015)
        2e-10
    """
    if not is_valid_float(price):
        raise InvalidStateError(f"price must be a finite float (not NaN/Inf), got {price}")

    quantum = Decimal(1).scaleb(-scale)
    rounded = Decimal(repr(price)).quantize(
        quantum, rounding=ROUND_HALF_EVEN, context=_DECIMAL_CONTEXT
    )
    return float(rounded)


def rate_to_price(rate: float, scale: int = PRICE_SCALE) -> float:
    """
    Конверсия: курс хоста → цена.

    price = round(1 / rate, scale, HALF_EVEN)

    Args:
        rate: Курс (rate = 1 / price)
        scale: Число знаков после запятой

    Returns:
        Цена, округлённая до scale знаков

    Raises:
        InvalidStateError: Если rate равен нулю или NaN/Inf

    Examples:
        >>> rate_to_price(0.1)
        10.0
        >>> rate_to_price(0.5)
        2.0
    """
    validate_rate(rate)
    return round_price(1 / rate, scale)
