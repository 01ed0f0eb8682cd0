"""
Contract Validation Module

Валидация JSON контрактов (сериализованных результатов преобразования).
"""

from .validators import (
    ContractValidator,
    ConversionResultValidator,
    SchemaLoader,
    validate_conversion_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ConversionResultValidator",
    # Functions
    "validate_conversion_result",
]
