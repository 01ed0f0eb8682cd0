"""NumeralValidator: цепочка проверок римского числа

Порядок проверок фиксирован, первая неудачная прерывает цепочку:
- CHECK 0 → IllegalCharacterError
- CHECK 1-5 → InvalidConstructError

Порядок не влияет на итоговое решение (проверки независимы), но определяет,
какая причина будет сообщена первой.
"""

import logging
from typing import List, Optional

from src.core.domain.errors import IllegalCharacterError, InvalidConstructError
from src.validator.checks import (
    Check00CharacterSet,
    Check01RepeatingDigits,
    Check02RepeatingHalfMeasure,
    Check03DeductiveAndAdditive,
    Check04MultipleDeductive,
    Check05HalfMeasureDeductive,
    CheckResult,
)

logger = logging.getLogger(__name__)


class NumeralValidator:
    """Проверка корректности римского числа до любых вычислений.

    Stateless: один экземпляр можно разделять между потоками.
    """

    def __init__(self):
        self.character_check = Check00CharacterSet()
        self.construct_checks = (
            Check01RepeatingDigits(),
            Check02RepeatingHalfMeasure(),
            Check03DeductiveAndAdditive(),
            Check04MultipleDeductive(),
            Check05HalfMeasureDeductive(),
        )

    def validate(self, numeral: str, original: Optional[str] = None) -> None:
        """Проверка нормализованной строки.

        Args:
            numeral: Строка в верхнем регистре
            original: Исходная строка для сообщения об ошибке (default: numeral)

        Raises:
            IllegalCharacterError: Символ вне IVXLCDM
            InvalidConstructError: Нарушено структурное правило
        """
        original = numeral if original is None else original

        result = self.character_check.evaluate(numeral)
        if not result.passed:
            logger.debug("Rejected %r: %s", original, result.details)
            raise IllegalCharacterError(original)

        for check in self.construct_checks:
            result = check.evaluate(numeral)
            if not result.passed:
                logger.debug(
                    "Rejected %r by %s: %s", original, check.name, result.details
                )
                raise InvalidConstructError(original, reason=result.block_reason)

    def is_valid(self, numeral: str) -> bool:
        """Проверка без exception."""
        return all(result.passed for result in self.inspect(numeral))

    def inspect(self, numeral: str) -> List[CheckResult]:
        """Результаты всех проверок без прерывания цепочки.

        Если CHECK 0 не пройдена, возвращается только её результат:
        остальные проверки требуют допустимого алфавита.
        """
        first = self.character_check.evaluate(numeral)
        if not first.passed:
            return [first]
        return [first] + [check.evaluate(numeral) for check in self.construct_checks]
