"""Parser: преобразование римских чисел в целые."""

from .numeral_parser import ParserConfig, RomanNumeralParser, parse

__all__ = [
    "ParserConfig",
    "RomanNumeralParser",
    "parse",
]
