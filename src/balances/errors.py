"""
Исключения агрегации балансов

Все ошибки фатальны для обработки блока: блок отклоняется целиком,
частичный результат не возвращается, локального восстановления нет.
Повторная обработка (после исправления входа) — ответственность хоста.
"""


class BalanceAggregationError(Exception):
    """Базовое исключение агрегации балансов."""


class OrdinalOrderError(BalanceAggregationError):
    """
    Нарушение порядка ordinals: для ключа store ordinal не возрастает строго.

    Дефект входных данных (не транзиентная ошибка): накопленные балансы
    стали бы неоднозначными и невоспроизводимыми при переобработке.
    """

    def __init__(self, key: str, previous_ordinal: int, current_ordinal: int):
        self.key = key
        self.previous_ordinal = previous_ordinal
        self.current_ordinal = current_ordinal
        super().__init__(
            f"Invalid ordinal sequence for {key}: {previous_ordinal} >= {current_ordinal}"
        )


class BalanceEncodingError(BalanceAggregationError, ValueError):
    """
    Дефект кодирования: невалидный UTF-8 в component_id или ключе,
    невалидный hex токена, не-десятичное значение store.
    """


class MissingTransactionError(BalanceAggregationError):
    """У BalanceDelta отсутствует транзакция."""

    def __init__(self, index: int, ordinal: int):
        self.index = index
        self.ordinal = ordinal
        super().__init__(f"Missing transaction on delta #{index} (ord={ordinal})")


class StoreAlignmentError(BalanceAggregationError):
    """
    Change-log store и поток deltas разошлись.

    expected — значение, вычисленное из BalanceDelta;
    actual — значение из записи change-log.
    """

    def __init__(self, index: int, expected: object, actual: object, details: str):
        self.index = index
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Store deltas misaligned at #{index}: {details} "
            f"(expected {expected!r}, got {actual!r})"
        )
