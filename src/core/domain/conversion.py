"""ConversionResult: Результат преобразования римского числа

Immutable Pydantic модель одного успешного преобразования.
Совместима с JSON Schema (src/core/contracts/schema/conversion_result.json).
"""

from pydantic import BaseModel, Field, field_validator

from src.core.domain.digits import VALID_SYMBOLS


class ConversionResult(BaseModel):
    """Результат успешного разбора римского числа."""

    numeral: str = Field(..., description="Исходная строка (как получена)")
    normalized: str = Field(
        ..., description="Строка в верхнем регистре, прошедшая валидацию"
    )
    value: int = Field(..., ge=0, description="Целое значение числа")

    model_config = {"frozen": True}

    @field_validator("normalized")
    @classmethod
    def validate_normalized(cls, v: str) -> str:
        """normalized содержит только символы IVXLCDM."""
        if any(ch not in VALID_SYMBOLS for ch in v):
            raise ValueError(f"normalized must contain only {VALID_SYMBOLS}, got {v!r}")
        return v
