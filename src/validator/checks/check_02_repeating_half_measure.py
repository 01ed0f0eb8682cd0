"""CHECK 2: Повторяющиеся half-measure цифры

"VV", "LL", "DD" запрещены в любом месте строки (поиск подстроки):
их следует записывать как X, C, M.
"""

from typing import Final, Tuple

from src.core.domain.digits import RomanDigit
from src.validator.checks.result import CheckResult

# ("VV", "LL", "DD")
DOUBLED_HALF_MEASURES: Final[Tuple[str, ...]] = tuple(
    d.symbol * 2 for d in RomanDigit if d.half_measure
)


class Check02RepeatingHalfMeasure:
    """CHECK 2: half-measure цифра не удваивается."""

    name = "repeating_half_measure"

    def evaluate(self, numeral: str) -> CheckResult:
        found = [
            (numeral.find(pair), pair)
            for pair in DOUBLED_HALF_MEASURES
            if pair in numeral
        ]

        if found:
            position, pair = min(found)
            return CheckResult(
                passed=False,
                block_reason="repeating_half_measure",
                position=position,
                details=f"Repeating half measure {pair!r} at position {position}",
            )

        return CheckResult(
            passed=True,
            block_reason="",
            position=None,
            details="PASS: no repeating half measure",
        )
