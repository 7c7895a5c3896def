"""
SnapshotSelector — выбор снапшота курса на дату

Снапшоты бумаги упорядочены по возрастанию даты. Выбор идёт от самого
свежего назад, пока дата кандидата позже целевой и есть более старый
снапшот. Результат — первый снапшот с датой <= целевой, либо самый
старый, если целевая дата раньше всей истории.

Снапшоты с одинаковой датой не дедуплицируются: побеждает тот, на котором
остановился обратный проход (наименьший индекс среди одинаковых дат в
просмотренном диапазоне).

select_snapshot_for_date — чистый выбор без побочных эффектов.
snapshot_for_date — композиция по умолчанию: сначала сверка кэшированного
курса с последним снапшотом (мутация security.user_rate), затем выбор.
"""

from typing import Callable, Optional, Sequence

from src.core.domain.host_model import SecurityLike, SnapshotLike
from src.core.errors import InvalidStateError
from src.reconcile.rate_reconciler import (
    RateChangeNotice,
    ReconcileConfig,
    reconcile_current_rate,
)


def latest_snapshot(security: SecurityLike) -> SnapshotLike:
    """
    Последний (самый свежий) снапшот бумаги.

    Raises:
        InvalidStateError: Если история снапшотов пуста
    """
    snapshots = security.snapshots
    if not snapshots:
        raise InvalidStateError(f"Security {security.name!r} has no currency snapshots")

    return snapshots[-1]


def select_snapshot_for_date(snapshots: Sequence[SnapshotLike], date_int: int) -> SnapshotLike:
    """
    Снапшот, действующий на дату date_int.

    Args:
        snapshots: История по возрастанию даты
        date_int: Целевая дата (YYYYMMDD)

    Returns:
        Первый при обратном проходе снапшот с датой <= date_int,
        либо самый старый снапшот

    Raises:
        InvalidStateError: Если история пуста
    """
    if not snapshots:
        raise InvalidStateError("Cannot select a snapshot from an empty history")

    index = len(snapshots) - 1
    candidate = snapshots[index]

    while candidate.date_int > date_int and index > 0:
        # более старый снапшот
        index -= 1
        candidate = snapshots[index]

    return candidate


def snapshot_for_date(
    security: SecurityLike,
    date_int: int,
    config: Optional[ReconcileConfig] = None,
    on_change: Optional[Callable[[RateChangeNotice], None]] = None,
) -> SnapshotLike:
    """
    Снапшот на дату со сверкой текущего курса.

    Каждый вызов может перезаписать security.user_rate, даже если нужен
    только исторический снапшот. Для выбора без мутации —
    select_snapshot_for_date.

    Args:
        security: Бумага хоста
        date_int: Целевая дата (YYYYMMDD)
        config: Конфигурация сверки
        on_change: Callback для уведомления об изменении курса

    Raises:
        InvalidStateError: Если история пуста или курс невалиден
    """
    latest = latest_snapshot(security)
    reconcile_current_rate(security, latest, config=config, on_change=on_change)

    return select_snapshot_for_date(security.snapshots, date_int)
