"""
Summation: Вычисление значения римского числа

Позиционное суммирование с учётом вычитательной записи:
- цифра перед строго большей цифрой вычитается (IX = -1 + 10 = 9)
- иначе прибавляется (VIII = 5 + 1 + 1 + 1 = 8)
- последняя цифра прибавляется всегда

Предусловие: строка уже прошла NumeralValidator. Поведение на невалидной
строке не определено этим модулем.
"""

from src.core.domain.digits import value_of


def is_larger_numeral_next(current: str, next_: str) -> bool:
    """
    True если значение следующей цифры строго больше текущей (например 'V' после 'I').

    Args:
        current: Текущая цифра (слева направо)
        next_: Следующая цифра

    Raises:
        UnknownSymbolError: Если символ не является римской цифрой
    """
    return value_of(current) < value_of(next_)


def calculate_sum(numeral: str) -> int:
    """
    Сумма цифр валидного римского числа.

    Args:
        numeral: Римское число в верхнем регистре

    Returns:
        Целое значение (для пустой строки 0)

    Raises:
        UnknownSymbolError: Если строка содержит не римскую цифру
    """
    total = 0
    last = len(numeral) - 1

    for i, char in enumerate(numeral):
        if i < last and is_larger_numeral_next(char, numeral[i + 1]):
            total -= value_of(char)
        else:
            total += value_of(char)

    return total
