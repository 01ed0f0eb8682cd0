"""
Domain models and value objects.

Contains the Roman digit table, conversion result model and error types.
"""

from src.core.domain.conversion import ConversionResult
from src.core.domain.digits import (
    DEDUCTIVE_AND_ADDITIVE_MIN_LENGTH,
    DEDUCTIVE_HALF_MEASURE_MIN_LENGTH,
    MULTIPLE_DEDUCTIVE_MIN_LENGTH,
    QUADRUPLE_DIGIT_MIN_LENGTH,
    VALID_SYMBOLS,
    RomanDigit,
    get_digit,
    is_half_measure,
    is_roman_symbol,
    value_of,
)
from src.core.domain.errors import (
    IllegalCharacterError,
    InvalidConstructError,
    RomanNumeralFormatError,
    UnknownSymbolError,
)

__all__ = [
    # Digits module
    "QUADRUPLE_DIGIT_MIN_LENGTH",
    "DEDUCTIVE_AND_ADDITIVE_MIN_LENGTH",
    "MULTIPLE_DEDUCTIVE_MIN_LENGTH",
    "DEDUCTIVE_HALF_MEASURE_MIN_LENGTH",
    "VALID_SYMBOLS",
    "RomanDigit",
    "get_digit",
    "value_of",
    "is_half_measure",
    "is_roman_symbol",
    # Conversion model
    "ConversionResult",
    # Errors
    "RomanNumeralFormatError",
    "IllegalCharacterError",
    "InvalidConstructError",
    "UnknownSymbolError",
]
