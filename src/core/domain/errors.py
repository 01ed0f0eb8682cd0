"""
Ошибки разбора римских чисел

Иерархия:
- RomanNumeralFormatError: базовая ошибка формата (ValueError)
  * IllegalCharacterError: символ вне алфавита IVXLCDM
  * InvalidConstructError: допустимые символы, но недопустимая конструкция
- UnknownSymbolError: промах поиска в таблице цифр (LookupError)

Ошибки формата всегда несут исходную строку (без нормализации регистра).
"""


class RomanNumeralFormatError(ValueError):
    """Базовая ошибка: строка не является корректным римским числом."""

    def __init__(self, numeral: str, message: str):
        super().__init__(message)
        self.numeral = numeral


class IllegalCharacterError(RomanNumeralFormatError):
    """Строка содержит символы вне алфавита IVXLCDM (без учёта регистра)."""

    def __init__(self, numeral: str):
        super().__init__(
            numeral,
            f'Input string: "{numeral}" contains illegal characters.',
        )


class InvalidConstructError(RomanNumeralFormatError):
    """
    Строка состоит из допустимых символов, но нарушает структурное правило.

    Attributes:
        reason: block_reason проверки, отклонившей строку
    """

    def __init__(self, numeral: str, reason: str = ""):
        super().__init__(
            numeral,
            f'Input string: "{numeral}" is not a well-formatted Roman numeral.',
        )
        self.reason = reason


class UnknownSymbolError(LookupError):
    """Символ не соответствует ни одной римской цифре."""

    def __init__(self, char: str):
        super().__init__(f"No Roman numeral matches character: {char}")
        self.char = char
