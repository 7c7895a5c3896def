"""
DateInt — календарная дата в виде целого YYYYMMDD

date_int = year * 10000 + month * 100 + day

Порядок на DateInt совпадает с хронологическим для валидных дат.
Round-trip с datetime.date точный.
"""

from datetime import date
from typing import Final

from src.core.errors import InvalidStateError


# Границы 8-значного DateInt
DATE_INT_MIN: Final[int] = 10000101
DATE_INT_MAX: Final[int] = 99991231


def date_int_to_local(date_int: int) -> date:
    """
    Конверсия: DateInt → datetime.date.

    Args:
        date_int: Дата в форме YYYYMMDD

    Returns:
        Соответствующая календарная дата

    Raises:
        InvalidStateError: Если date_int не кодирует существующую дату

    Examples:
        >>> date_int_to_local(20200815)
        datetime.date(2020, 8, 15)
    """
    year = date_int // 10000
    month = (date_int % 10000) // 100
    day_of_month = date_int % 100

    try:
        return date(year, month, day_of_month)
    except ValueError as e:
        raise InvalidStateError(f"Invalid date_int {date_int}: {e}") from e


def local_to_date_int(value: date) -> int:
    """
    Конверсия: datetime.date → DateInt.

    Examples:
        >>> local_to_date_int(date(2021, 12, 31))
        20211231
    """
    return value.year * 10000 + value.month * 100 + value.day


def validate_date_int(date_int: int) -> int:
    """
    Проверка, что date_int — 8-значная существующая дата.

    Raises:
        InvalidStateError: Если date_int вне диапазона или не календарная дата
    """
    if not DATE_INT_MIN <= date_int <= DATE_INT_MAX:
        raise InvalidStateError(
            f"date_int must be within [{DATE_INT_MIN}, {DATE_INT_MAX}], got {date_int}"
        )
    date_int_to_local(date_int)
    return date_int
