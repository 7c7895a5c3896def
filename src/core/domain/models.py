"""
Models — In-memory хост-модель на Pydantic

Эталонная реализация интерфейсов из host_model:
- CurrencySnapshot: immutable снапшот курса (frozen=True)
- Security: ценная бумага с изменяемым кэшированным курсом
- Currency: валюта счёта (decimal places)
- LedgerEntry: проводка по счёту в minor units на дату
- Account: узел дерева счетов с собственными проводками
- AccountBook: книга счетов (корень + запросы балансов на даты)

Используется хостами без собственной модели и как тестовый дублёр.
"""

from __future__ import annotations

from typing import Iterator, Sequence

from pydantic import BaseModel, Field, field_validator

from src.core.domain.date_int import validate_date_int
from src.core.domain.host_model import AccountType, walk_subtree
from src.core.math.numerical_safeguards import is_valid_float, validate_decimal_places


# =============================================================================
# SECURITIES
# =============================================================================


class CurrencySnapshot(BaseModel):
    """
    Исторический снапшот курса ценной бумаги.

    Immutable модель (frozen=True).
    """

    date_int: int = Field(..., description="Дата снапшота (YYYYMMDD)")
    user_rate: float = Field(..., gt=0, description="Курс на дату (rate = 1 / price)")

    model_config = {"frozen": True}

    @field_validator("date_int")
    @classmethod
    def validate_date(cls, v: int) -> int:
        """Дата должна быть существующей календарной датой."""
        return validate_date_int(v)

    @field_validator("user_rate")
    @classmethod
    def validate_rate_finite(cls, v: float) -> float:
        if not is_valid_float(v):
            raise ValueError(f"user_rate must be finite, got {v}")
        return v


class Security(BaseModel):
    """
    Ценная бумага с кэшированным курсом и историей снапшотов.

    user_rate изменяем (validate_assignment=True): его переписывает
    сверка курса. Снапшоты хранятся по возрастанию даты.
    """

    name: str = Field(..., min_length=1, description="Название бумаги")
    ticker_symbol: str = Field("", description="Тикер")
    user_rate: float = Field(..., gt=0, description="Кэшированный текущий курс")
    snapshots: list[CurrencySnapshot] = Field(
        default_factory=list, description="История курса по возрастанию даты"
    )

    model_config = {"validate_assignment": True}

    @field_validator("snapshots")
    @classmethod
    def validate_chronological(cls, v: list[CurrencySnapshot]) -> list[CurrencySnapshot]:
        """Снапшоты должны идти по неубыванию даты."""
        for prev, curr in zip(v, v[1:]):
            if curr.date_int < prev.date_int:
                raise ValueError(
                    f"snapshots must be in chronological order: "
                    f"{curr.date_int} follows {prev.date_int}"
                )
        return v

    def add_snapshot(self, date_int: int, user_rate: float) -> CurrencySnapshot:
        """Добавить снапшот в конец истории (append-only)."""
        snapshot = CurrencySnapshot(date_int=date_int, user_rate=user_rate)
        self.snapshots = [*self.snapshots, snapshot]
        return snapshot


# =============================================================================
# ACCOUNTS
# =============================================================================


class Currency(BaseModel):
    """Валюта счёта."""

    code: str = Field("USD", min_length=1, description="Код валюты")
    decimal_places: int = Field(2, description="Число десятичных знаков (0-4)")

    model_config = {"frozen": True}

    @field_validator("decimal_places")
    @classmethod
    def validate_places(cls, v: int) -> int:
        return validate_decimal_places(v)


class LedgerEntry(BaseModel):
    """Проводка по счёту: сумма в minor units на дату."""

    date_int: int = Field(..., description="Дата проводки (YYYYMMDD)")
    amount: int = Field(..., description="Сумма в minor units (со знаком)")

    model_config = {"frozen": True}

    @field_validator("date_int")
    @classmethod
    def validate_date(cls, v: int) -> int:
        return validate_date_int(v)


class Account(BaseModel):
    """
    Узел дерева счетов.

    Собственный баланс = start_balance + сумма проводок.
    Дерево должно быть конечным и ацикличным.
    """

    account_name: str = Field(..., min_length=1, description="Имя счёта")
    account_type: AccountType = Field(..., description="Тип счёта")
    currency: Currency = Field(default_factory=Currency, description="Валюта счёта")
    invest_account_number: str = Field("", description="Номер инвестиционного счёта")
    start_balance: int = Field(0, description="Начальный баланс (minor units)")
    entries: list[LedgerEntry] = Field(default_factory=list, description="Проводки")
    sub_accounts: list[Account] = Field(default_factory=list, description="Подсчета")

    def user_current_balance(self) -> int:
        """Собственный текущий баланс (minor units)."""
        return self.start_balance + sum(entry.amount for entry in self.entries)

    def recursive_user_current_balance(self) -> int:
        """Текущий баланс счёта и всех потомков (minor units)."""
        return sum(acct.user_current_balance() for acct in walk_subtree(self))

    def balance_as_of(self, date_int: int) -> int:
        """Собственный баланс на конец даты date_int (minor units)."""
        return self.start_balance + sum(
            entry.amount for entry in self.entries if entry.date_int <= date_int
        )

    def add_entry(self, date_int: int, amount: int) -> LedgerEntry:
        entry = LedgerEntry(date_int=date_int, amount=amount)
        self.entries.append(entry)
        return entry


class AccountBook(BaseModel):
    """Книга счетов: корневой счёт и запросы балансов на даты."""

    root: Account = Field(..., description="Корневой счёт книги")

    def balances_as_of_dates(self, account: Account, as_of_dates: Sequence[int]) -> list[int]:
        """Собственные балансы account на конец каждой даты (minor units)."""
        return [account.balance_as_of(date_int) for date_int in as_of_dates]

    def iter_accounts(self, account: Account) -> Iterator[Account]:
        """Счёт и все его потомки (сам счёт первым)."""
        return walk_subtree(account)


Account.model_rebuild()
