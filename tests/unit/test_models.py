"""
Tests for Pydantic host models

Покрывает:
- Создание и валидация моделей
- Immutability снапшотов (frozen=True)
- validate_assignment для кэшированного курса
- Хронологический порядок снапшотов
- Балансы счетов в minor units
- Соответствие интерфейсам host_model
"""

import pytest
from pydantic import ValidationError

from src.core.domain.host_model import (
    AccountBookLike,
    AccountLike,
    AccountType,
    SecurityLike,
    SnapshotLike,
    iter_descendants,
)
from src.core.domain.models import (
    Account,
    AccountBook,
    Currency,
    CurrencySnapshot,
    LedgerEntry,
    Security,
)


# =============================================================================
# SNAPSHOTS & SECURITIES
# =============================================================================


class TestCurrencySnapshot:
    def test_valid(self) -> None:
        snapshot = CurrencySnapshot(date_int=20200101, user_rate=0.5)
        assert snapshot.date_int == 20200101
        assert snapshot.user_rate == 0.5
        assert isinstance(snapshot, SnapshotLike)

    def test_frozen(self) -> None:
        snapshot = CurrencySnapshot(date_int=20200101, user_rate=0.5)
        with pytest.raises(ValidationError):
            snapshot.user_rate = 1.0

    def test_invalid_date_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CurrencySnapshot(date_int=20200230, user_rate=0.5)

    @pytest.mark.parametrize("rate", [0.0, -1.0, float("nan"), float("inf")])
    def test_invalid_rate_rejected(self, rate: float) -> None:
        with pytest.raises(ValidationError):
            CurrencySnapshot(date_int=20200101, user_rate=rate)


class TestSecurity:
    def test_valid(self) -> None:
        security = Security(name="Acme", ticker_symbol="ACM", user_rate=0.5)
        assert security.snapshots == []
        assert isinstance(security, SecurityLike)

    def test_user_rate_assignment_validated(self) -> None:
        security = Security(name="Acme", ticker_symbol="ACM", user_rate=0.5)
        security.user_rate = 0.25
        assert security.user_rate == 0.25

        with pytest.raises(ValidationError):
            security.user_rate = -1.0

    def test_snapshots_must_be_chronological(self) -> None:
        with pytest.raises(ValidationError, match="chronological"):
            Security(
                name="Acme",
                user_rate=0.5,
                snapshots=[
                    CurrencySnapshot(date_int=20200601, user_rate=0.5),
                    CurrencySnapshot(date_int=20200101, user_rate=0.4),
                ],
            )

    def test_same_date_allowed(self) -> None:
        security = Security(
            name="Acme",
            user_rate=0.5,
            snapshots=[
                CurrencySnapshot(date_int=20200101, user_rate=0.5),
                CurrencySnapshot(date_int=20200101, user_rate=0.4),
            ],
        )
        assert len(security.snapshots) == 2

    def test_add_snapshot_appends(self) -> None:
        security = Security(name="Acme", user_rate=0.5)
        security.add_snapshot(20200101, 0.5)
        latest = security.add_snapshot(20200201, 0.4)
        assert security.snapshots[-1] == latest

    def test_add_snapshot_out_of_order_rejected(self) -> None:
        security = Security(name="Acme", user_rate=0.5)
        security.add_snapshot(20200201, 0.5)
        with pytest.raises(ValidationError):
            security.add_snapshot(20200101, 0.4)
        assert len(security.snapshots) == 1


# =============================================================================
# ACCOUNTS
# =============================================================================


class TestCurrency:
    def test_default(self) -> None:
        assert Currency().decimal_places == 2

    @pytest.mark.parametrize("places", [-1, 5])
    def test_unsupported_places_rejected(self, places: int) -> None:
        with pytest.raises(ValidationError):
            Currency(code="XXX", decimal_places=places)


class TestAccount:
    @pytest.fixture
    def tree(self):
        leaf = Account(
            account_name="Leaf",
            account_type=AccountType.BANK,
            start_balance=100,
            entries=[LedgerEntry(date_int=20200201, amount=50)],
        )
        middle = Account(
            account_name="Middle",
            account_type=AccountType.ASSET,
            start_balance=10,
            sub_accounts=[leaf],
        )
        sibling = Account(account_name="Sibling", account_type=AccountType.BANK, start_balance=1)
        return Account(
            account_name="Top",
            account_type=AccountType.ASSET,
            sub_accounts=[middle, sibling],
        )

    def test_protocol(self, tree) -> None:
        assert isinstance(tree, AccountLike)
        assert isinstance(AccountBook(root=tree), AccountBookLike)

    def test_own_and_recursive_balance(self, tree) -> None:
        assert tree.user_current_balance() == 0
        assert tree.recursive_user_current_balance() == 161

    def test_balance_as_of(self, tree) -> None:
        leaf = tree.sub_accounts[0].sub_accounts[0]
        assert leaf.balance_as_of(20200131) == 100
        assert leaf.balance_as_of(20200201) == 150

    def test_add_entry(self, tree) -> None:
        sibling = tree.sub_accounts[1]
        sibling.add_entry(20200301, -1)
        assert sibling.user_current_balance() == 0

    def test_book_iterates_pre_order(self, tree) -> None:
        book = AccountBook(root=tree)
        names = [acct.account_name for acct in book.iter_accounts(tree)]
        assert names == ["Top", "Middle", "Leaf", "Sibling"]

    def test_iter_descendants_excludes_self(self, tree) -> None:
        book = AccountBook(root=tree)
        names = [acct.account_name for acct in iter_descendants(book, tree)]
        assert names == ["Middle", "Leaf", "Sibling"]

    def test_book_balances_as_of_dates(self, tree) -> None:
        book = AccountBook(root=tree)
        leaf = tree.sub_accounts[0].sub_accounts[0]
        assert book.balances_as_of_dates(leaf, [20200101, 20200301]) == [100, 150]
