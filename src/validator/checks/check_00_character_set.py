"""CHECK 0: Допустимый набор символов

Первая проверка в цепочке (обязательная).
Каждый символ должен разрешаться через таблицу цифр (IVXLCDM).
Проверки 1-5 полагаются на то, что CHECK 0 пройдена.
"""

from src.core.domain.digits import is_roman_symbol
from src.validator.checks.result import CheckResult


class Check00CharacterSet:
    """CHECK 0: все символы: римские цифры."""

    name = "character_set"

    def evaluate(self, numeral: str) -> CheckResult:
        """
        Args:
            numeral: Строка в верхнем регистре

        Returns:
            CheckResult; position: индекс первого недопустимого символа
        """
        for i, char in enumerate(numeral):
            if not is_roman_symbol(char):
                return CheckResult(
                    passed=False,
                    block_reason="illegal_character",
                    position=i,
                    details=f"Illegal character {char!r} at position {i}",
                )

        return CheckResult(
            passed=True,
            block_reason="",
            position=None,
            details="PASS: all characters are Roman digits",
        )
