"""
RateReconciler — сверка кэшированного курса с последним снапшотом

Кэшированный курс бумаги (security.user_rate) должен соответствовать курсу
последнего снапшота. Сравниваются цены (1 / rate, округлённые HALF_EVEN до
price_scale знаков) точным неравенством, без epsilon.

При расхождении:
1. security.user_rate перезаписывается курсом снапшота (мутация хоста)
2. пишется INFO-сообщение об изменении цены
3. вызывается on_change(RateChangeNotice), если передан

Расхождение — не ошибка. Повторная сверка с тем же снапшотом ничего не
меняет и ничего не сообщает (идемпотентность).

Синхронизации нет: одновременная сверка одной бумаги из нескольких
потоков требует внешней блокировки.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from src.core.domain.host_model import SecurityLike, SnapshotLike
from src.core.logger import get_logger
from src.core.math.price_rounding import PRICE_SCALE, rate_to_price

logger = get_logger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ReconcileConfig:
    """Конфигурация сверки курса и форматирования сообщения."""

    price_scale: int = PRICE_SCALE
    min_fraction_digits: int = 8
    currency_symbol: str = "$"


DEFAULT_RECONCILE_CONFIG = ReconcileConfig()


@dataclass(frozen=True)
class RateChangeNotice:
    """Уведомление об обновлении кэшированного курса."""

    security_name: str
    ticker_symbol: str
    old_price: float
    new_price: float
    old_rate: float
    new_rate: float
    snapshot_date_int: int

    def message(self, config: ReconcileConfig = DEFAULT_RECONCILE_CONFIG) -> str:
        """Человекочитаемое сообщение об изменении цены."""
        return (
            f"Changed security {self.security_name} ({self.ticker_symbol}) current price "
            f"from {format_price(self.old_price, config)} "
            f"to {format_price(self.new_price, config)}."
        )


# =============================================================================
# FORMATTING
# =============================================================================


def format_price(price: float, config: ReconcileConfig = DEFAULT_RECONCILE_CONFIG) -> str:
    """
    Цена в денежном формате: символ валюты, разделители тысяч,
    min_fraction_digits знаков после запятой.

    Examples:
        >>> format_price(1234.5)
        '$1,234.50000000'
        >>> format_price(-2.0)
        '-$2.00000000'
    """
    sign = "-" if price < 0 else ""
    return f"{sign}{config.currency_symbol}{abs(price):,.{config.min_fraction_digits}f}"


# =============================================================================
# RECONCILIATION
# =============================================================================


def reconcile_current_rate(
    security: SecurityLike,
    latest_snapshot: SnapshotLike,
    config: Optional[ReconcileConfig] = None,
    on_change: Optional[Callable[[RateChangeNotice], None]] = None,
) -> float:
    """
    Сверка кэшированного курса бумаги с последним снапшотом.

    Args:
        security: Бумага хоста (user_rate будет перезаписан при расхождении)
        latest_snapshot: Последний снапшот этой бумаги
        config: Конфигурация (default: DEFAULT_RECONCILE_CONFIG)
        on_change: Callback для уведомления об изменении

    Returns:
        Цена из latest_snapshot

    Raises:
        InvalidStateError: Если курс снапшота или кэшированный курс
            равен нулю или NaN/Inf
    """
    config = config or DEFAULT_RECONCILE_CONFIG

    price = rate_to_price(latest_snapshot.user_rate, config.price_scale)
    old_price = rate_to_price(security.user_rate, config.price_scale)

    if price != old_price:
        notice = RateChangeNotice(
            security_name=security.name,
            ticker_symbol=security.ticker_symbol,
            old_price=old_price,
            new_price=price,
            old_rate=security.user_rate,
            new_rate=latest_snapshot.user_rate,
            snapshot_date_int=latest_snapshot.date_int,
        )
        security.user_rate = latest_snapshot.user_rate

        logger.info(notice.message(config))
        if on_change is not None:
            on_change(notice)

    return price
