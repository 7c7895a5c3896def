"""
Domain models and host interfaces.

Contains the DateInt helpers, the host capability protocols and the
in-memory pydantic host model.
"""

from src.core.domain.date_int import (
    DATE_INT_MAX,
    DATE_INT_MIN,
    date_int_to_local,
    local_to_date_int,
    validate_date_int,
)
from src.core.domain.host_model import (
    AccountBookLike,
    AccountLike,
    AccountType,
    CurrencyLike,
    SecurityLike,
    SnapshotLike,
    iter_descendants,
    walk_subtree,
)
from src.core.domain.models import (
    Account,
    AccountBook,
    Currency,
    CurrencySnapshot,
    LedgerEntry,
    Security,
)

__all__ = [
    # DateInt
    "DATE_INT_MIN",
    "DATE_INT_MAX",
    "date_int_to_local",
    "local_to_date_int",
    "validate_date_int",
    # Host interfaces
    "AccountType",
    "SnapshotLike",
    "SecurityLike",
    "CurrencyLike",
    "AccountLike",
    "AccountBookLike",
    "iter_descendants",
    "walk_subtree",
    # In-memory models
    "CurrencySnapshot",
    "Security",
    "Currency",
    "LedgerEntry",
    "Account",
    "AccountBook",
]
