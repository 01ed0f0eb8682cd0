"""RomanNumeralParser: преобразование римского числа в целое

Поток: строка → верхний регистр → NumeralValidator → calculate_sum → int.
Ошибки IllegalCharacterError / InvalidConstructError пробрасываются
вызывающему без перехвата.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from src.core.domain.conversion import ConversionResult
from src.core.domain.errors import InvalidConstructError
from src.core.math.summation import calculate_sum
from src.validator.validator import NumeralValidator

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ParserConfig:
    """Конфигурация парсера."""

    # Пустая строка: True → значение 0, False → InvalidConstructError
    allow_empty: bool = True


# =============================================================================
# PARSER
# =============================================================================


class RomanNumeralParser:
    """Парсер римских чисел (stateless)."""

    def __init__(
        self,
        config: Optional[ParserConfig] = None,
        validator: Optional[NumeralValidator] = None,
    ):
        """
        Args:
            config: Конфигурация (default: ParserConfig())
            validator: Цепочка проверок (default: NumeralValidator())
        """
        self.config = config or ParserConfig()
        self.validator = validator or NumeralValidator()

    def parse(self, numeral: str) -> int:
        """
        Проверка и вычисление значения римского числа.

        Args:
            numeral: Римское число (регистр не важен)

        Returns:
            Целое значение

        Raises:
            IllegalCharacterError: Символ вне IVXLCDM
            InvalidConstructError: Недопустимая конструкция
        """
        normalized = numeral.upper()

        if not normalized and not self.config.allow_empty:
            raise InvalidConstructError(numeral, reason="empty_numeral")

        self.validator.validate(normalized, original=numeral)

        value = calculate_sum(normalized)
        logger.debug("Parsed %r as %d", numeral, value)
        return value

    def convert(self, numeral: str) -> ConversionResult:
        """То же, что parse(), но возвращает ConversionResult."""
        value = self.parse(numeral)
        return ConversionResult(
            numeral=numeral,
            normalized=numeral.upper(),
            value=value,
        )


_DEFAULT_PARSER = RomanNumeralParser()


def parse(numeral: str) -> int:
    """
    Значение римского числа парсером с конфигурацией по умолчанию.

    Raises:
        IllegalCharacterError: Символ вне IVXLCDM
        InvalidConstructError: Недопустимая конструкция
    """
    return _DEFAULT_PARSER.parse(numeral)
