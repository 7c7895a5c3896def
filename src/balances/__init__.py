"""Balances — агрегация балансов по дереву счетов и поиск подсчетов."""

from .account_lookup import get_sub_account_by_invest_number, get_sub_account_by_name
from .aggregator import balances_as_of_dates, cent_balances_as_of_dates, current_balance

__all__ = [
    "current_balance",
    "cent_balances_as_of_dates",
    "balances_as_of_dates",
    "get_sub_account_by_name",
    "get_sub_account_by_invest_number",
]
