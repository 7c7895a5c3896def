"""
Errors — Исключения ядра

Нарушения предусловий хост-модели (пустая история снапшотов, нулевой или
не-конечный курс, неподдерживаемое число знаков валюты, невалидный DateInt)
выражаются явным InvalidStateError вместо тихой порчи данных.

Исключения хост-коллабораторов (дерево счетов, запросы балансов) ядро не
перехватывает и не оборачивает.
"""


class InvalidStateError(ValueError):
    """
    Нарушено предусловие хост-модели.

    Наследует ValueError, чтобы вызывающий код мог ловить его так же,
    как остальные ошибки валидации входных данных.
    """

    pass


class AccountCycleError(InvalidStateError):
    """Цикл в дереве счетов: счёт встречен повторно при обходе."""

    pass
