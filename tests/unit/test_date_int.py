"""
Тесты для DateInt (YYYYMMDD ↔ datetime.date)

Проверяет:
1. Точный round-trip для валидных дат
2. Порядок DateInt совпадает с хронологическим
3. InvalidStateError для несуществующих дат
"""

from datetime import date, timedelta

import pytest

from src.core.domain.date_int import (
    DATE_INT_MAX,
    DATE_INT_MIN,
    date_int_to_local,
    local_to_date_int,
    validate_date_int,
)
from src.core.errors import InvalidStateError


class TestConversions:
    """Тесты конверсий DateInt ↔ date"""

    def test_date_int_to_local(self) -> None:
        assert date_int_to_local(20200815) == date(2020, 8, 15)
        assert date_int_to_local(19991231) == date(1999, 12, 31)

    def test_local_to_date_int(self) -> None:
        assert local_to_date_int(date(2021, 12, 31)) == 20211231
        assert local_to_date_int(date(2020, 1, 1)) == 20200101

    def test_round_trip(self) -> None:
        """date_int_to_local(local_to_date_int(d)) == d"""
        for d in (date(2020, 2, 29), date(1, 1, 1), date(9999, 12, 31), date(2024, 7, 4)):
            assert date_int_to_local(local_to_date_int(d)) == d

    def test_ordering_matches_chronology(self) -> None:
        start = date(2019, 12, 25)
        days = [start + timedelta(days=i) for i in range(14)]
        date_ints = [local_to_date_int(d) for d in days]
        assert date_ints == sorted(date_ints)
        assert len(set(date_ints)) == len(date_ints)

    @pytest.mark.parametrize("date_int", [20200230, 20201301, 20200100, 20210229])
    def test_invalid_date_rejected(self, date_int: int) -> None:
        with pytest.raises(InvalidStateError, match="Invalid date_int"):
            date_int_to_local(date_int)


class TestValidateDateInt:
    """Тесты validate_date_int"""

    def test_valid(self) -> None:
        assert validate_date_int(20200101) == 20200101
        assert validate_date_int(DATE_INT_MAX) == DATE_INT_MAX
        assert validate_date_int(DATE_INT_MIN) == DATE_INT_MIN

    def test_out_of_range_rejected(self) -> None:
        with pytest.raises(InvalidStateError, match="within"):
            validate_date_int(2020101)

        with pytest.raises(InvalidStateError, match="within"):
            validate_date_int(-20200101)

    def test_non_calendar_rejected(self) -> None:
        with pytest.raises(InvalidStateError):
            validate_date_int(20200431)
