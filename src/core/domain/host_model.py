"""
HostModel — интерфейсы хост-модели счетов и ценных бумаг

Ядро не зависит от конкретных типов хоста. Всё, что ему нужно от хоста,
описано здесь как typing.Protocol:
- снапшот курса (дата + курс)
- ценная бумага (кэшированный курс + история снапшотов)
- валюта (число десятичных знаков)
- счёт (тип, валюта, подсчета, собственный баланс)
- книга счетов (балансы на даты + обход потомков)

Любой объект с такими атрибутами (включая тестовые дублёры) подходит.
"""

from enum import Enum
from typing import Iterable, Iterator, Protocol, Sequence, runtime_checkable

from src.core.errors import AccountCycleError


# =============================================================================
# ENUMS
# =============================================================================


class AccountType(str, Enum):
    """Тип счёта хоста. Поведение отличается только для ASSET."""

    ROOT = "root"
    BANK = "bank"
    CREDIT_CARD = "credit_card"
    INVESTMENT = "investment"
    SECURITY = "security"
    ASSET = "asset"
    LIABILITY = "liability"
    LOAN = "loan"
    EXPENSE = "expense"
    INCOME = "income"


# =============================================================================
# SECURITIES
# =============================================================================


@runtime_checkable
class SnapshotLike(Protocol):
    """Неизменяемый исторический снапшот курса."""

    @property
    def date_int(self) -> int: ...

    @property
    def user_rate(self) -> float: ...


@runtime_checkable
class SecurityLike(Protocol):
    """
    Ценная бумага / валюта хоста.

    user_rate — кэшированный курс, единственное поле, которое ядро меняет.
    snapshots упорядочены по возрастанию даты, последний — самый свежий.
    """

    name: str
    ticker_symbol: str
    user_rate: float

    @property
    def snapshots(self) -> Sequence[SnapshotLike]: ...


# =============================================================================
# ACCOUNTS
# =============================================================================


@runtime_checkable
class CurrencyLike(Protocol):
    """Валюта счёта."""

    @property
    def decimal_places(self) -> int: ...


@runtime_checkable
class AccountLike(Protocol):
    """Узел дерева счетов хоста."""

    @property
    def account_name(self) -> str: ...

    @property
    def account_type(self) -> AccountType: ...

    @property
    def currency(self) -> CurrencyLike: ...

    @property
    def invest_account_number(self) -> str: ...

    @property
    def sub_accounts(self) -> Sequence["AccountLike"]: ...

    def user_current_balance(self) -> int:
        """Собственный текущий баланс в minor units."""
        ...

    def recursive_user_current_balance(self) -> int:
        """Текущий баланс счёта и всех потомков в minor units."""
        ...


@runtime_checkable
class AccountBookLike(Protocol):
    """Книга счетов: запросы балансов на даты и обход дерева."""

    def balances_as_of_dates(
        self, account: AccountLike, as_of_dates: Sequence[int]
    ) -> Sequence[int]:
        """Собственные балансы счёта (minor units) на конец каждой даты."""
        ...

    def iter_accounts(self, account: AccountLike) -> Iterator[AccountLike]:
        """Счёт и все его потомки (сам счёт первым)."""
        ...


def iter_descendants(book: AccountBookLike, account: AccountLike) -> Iterable[AccountLike]:
    """Все потомки account из обхода книги, без самого account."""
    return (acct for acct in book.iter_accounts(account) if acct is not account)


def walk_subtree(account: AccountLike) -> Iterator[AccountLike]:
    """
    Обход поддерева по sub_accounts в глубину (pre-order), сам account первым.

    Явный стек вместо рекурсии: глубина дерева не ограничена
    recursion limit.

    Raises:
        AccountCycleError: Если счёт встречен повторно
    """
    seen: set[int] = set()
    stack: list[AccountLike] = [account]
    while stack:
        current = stack.pop()
        if id(current) in seen:
            raise AccountCycleError(
                f"Account {current.account_name!r} reached twice while walking "
                f"the tree of {account.account_name!r}"
            )
        seen.add(id(current))
        yield current
        stack.extend(reversed(current.sub_accounts))
