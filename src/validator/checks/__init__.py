"""Checks: структурные проверки римского числа.

Фиксированный порядок:
- CHECK 0: Character set (IllegalCharacterError)
- CHECK 1: Repeating digits
- CHECK 2: Repeating half measure
- CHECK 3: Same digit deductive and additive
- CHECK 4: Multiple deductive digits
- CHECK 5: Half measure as deductive
Проверки 1-5 приводят к InvalidConstructError.
"""

from .check_00_character_set import Check00CharacterSet
from .check_01_repeating_digits import Check01RepeatingDigits
from .check_02_repeating_half_measure import (
    DOUBLED_HALF_MEASURES,
    Check02RepeatingHalfMeasure,
)
from .check_03_deductive_and_additive import Check03DeductiveAndAdditive
from .check_04_multiple_deductive import Check04MultipleDeductive
from .check_05_half_measure_deductive import Check05HalfMeasureDeductive
from .result import CheckResult

__all__ = [
    "CheckResult",
    "Check00CharacterSet",
    "Check01RepeatingDigits",
    "Check02RepeatingHalfMeasure",
    "DOUBLED_HALF_MEASURES",
    "Check03DeductiveAndAdditive",
    "Check04MultipleDeductive",
    "Check05HalfMeasureDeductive",
]
