"""Поиск подсчетов по имени и по номеру инвестиционного счёта."""

from itertools import islice
from typing import Callable, Optional

from src.core.domain.host_model import AccountLike, walk_subtree


def _find_sub_account(
    account: AccountLike, matches: Callable[[AccountLike], bool]
) -> Optional[AccountLike]:
    # islice пропускает сам account: ищем только среди потомков
    sub_accounts = islice(walk_subtree(account), 1, None)
    return next((acct for acct in sub_accounts if matches(acct)), None)


def get_sub_account_by_name(account: AccountLike, security_name: str) -> Optional[AccountLike]:
    """
    Первый подсчёт с именем security_name (без учёта регистра).

    Returns:
        Подсчёт или None
    """
    wanted = security_name.casefold()
    return _find_sub_account(account, lambda acct: acct.account_name.casefold() == wanted)


def get_sub_account_by_invest_number(
    account: AccountLike, account_num: str
) -> Optional[AccountLike]:
    """
    Первый подсчёт с номером инвестиционного счёта account_num
    (без учёта регистра).

    Returns:
        Подсчёт или None
    """
    wanted = account_num.casefold()
    return _find_sub_account(
        account, lambda acct: (acct.invest_account_number or "").casefold() == wanted
    )
