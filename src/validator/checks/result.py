"""CheckResult: результат одной структурной проверки"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CheckResult:
    """Результат проверки римского числа."""

    passed: bool
    block_reason: str

    # Индекс символа, на котором обнаружено нарушение (None при PASS)
    position: Optional[int]

    # Детали
    details: str
