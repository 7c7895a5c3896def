"""Reconcile — сверка кэшированного курса и выбор снапшота на дату."""

from .rate_reconciler import (
    DEFAULT_RECONCILE_CONFIG,
    RateChangeNotice,
    ReconcileConfig,
    format_price,
    reconcile_current_rate,
)
from .snapshot_selector import (
    latest_snapshot,
    select_snapshot_for_date,
    snapshot_for_date,
)

__all__ = [
    "ReconcileConfig",
    "DEFAULT_RECONCILE_CONFIG",
    "RateChangeNotice",
    "format_price",
    "reconcile_current_rate",
    "latest_snapshot",
    "select_snapshot_for_date",
    "snapshot_for_date",
]
