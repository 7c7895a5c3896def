"""
BalanceAggregator — балансы счетов с учётом иерархии

Хост хранит балансы в minor units. Агрегатор:
1. Запрашивает у книги собственные балансы счёта на каждую дату (один вызов)
2. Для ASSET-счетов прибавляет поэлементно собственные балансы каждого
   потомка (обход книги, сам счёт исключён; каждый потомок один раз)
3. Конвертирует итог в десятичные значения по decimal places валюты
   самого счёта (конверсии между валютами нет)

Счета других типов дают только собственный баланс.

Ошибки хоста (книга, обход дерева) пробрасываются как есть: без retry,
без частичных результатов.
"""

from typing import Sequence

from src.core.domain.host_model import (
    AccountBookLike,
    AccountLike,
    AccountType,
    iter_descendants,
)
from src.core.errors import AccountCycleError, InvalidStateError
from src.core.math.decimal_codec import to_decimal


def current_balance(account: AccountLike) -> float:
    """
    Текущий баланс счёта в десятичном виде.

    ASSET → рекурсивный баланс хоста (счёт + потомки),
    остальные типы → собственный баланс.
    """
    if account.account_type == AccountType.ASSET:
        cent_balance = account.recursive_user_current_balance()
    else:
        cent_balance = account.user_current_balance()

    return to_decimal(cent_balance, account.currency.decimal_places)


def _own_cent_balances(
    book: AccountBookLike, account: AccountLike, as_of_dates: Sequence[int]
) -> list[int]:
    balances = list(book.balances_as_of_dates(account, as_of_dates))
    if len(balances) != len(as_of_dates):
        raise InvalidStateError(
            f"Host returned {len(balances)} balances for {len(as_of_dates)} dates "
            f"(account {account.account_name!r})"
        )
    return balances


def cent_balances_as_of_dates(
    book: AccountBookLike, account: AccountLike, as_of_dates: Sequence[int]
) -> list[int]:
    """
    Балансы счёта в minor units на конец каждой даты.

    Args:
        book: Книга счетов хоста
        account: Счёт
        as_of_dates: Даты (YYYYMMDD)

    Returns:
        Список той же длины и порядка, что as_of_dates

    Raises:
        AccountCycleError: Если обход книги вернул счёт повторно
        InvalidStateError: Если хост вернул балансы не по числу дат
    """
    cent_balances = _own_cent_balances(book, account, as_of_dates)

    if account.account_type == AccountType.ASSET:
        seen = {id(account)}
        for sub_account in iter_descendants(book, account):
            if id(sub_account) in seen:
                raise AccountCycleError(
                    f"Account {sub_account.account_name!r} reached twice under "
                    f"{account.account_name!r}"
                )
            seen.add(id(sub_account))

            sub_balances = _own_cent_balances(book, sub_account, as_of_dates)
            for i, sub_balance in enumerate(sub_balances):
                cent_balances[i] += sub_balance

    return cent_balances


def balances_as_of_dates(
    book: AccountBookLike, account: AccountLike, as_of_dates: Sequence[int]
) -> list[float]:
    """
    Балансы счёта в десятичном виде на конец каждой даты.

    Args:
        book: Книга счетов хоста
        account: Счёт
        as_of_dates: Даты (YYYYMMDD)

    Returns:
        Список той же длины и порядка, что as_of_dates
    """
    cent_balances = cent_balances_as_of_dates(book, account, as_of_dates)
    decimal_places = account.currency.decimal_places

    return [to_decimal(cents, decimal_places) for cents in cent_balances]
