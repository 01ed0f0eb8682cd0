"""CHECK 5: Half-measure в вычитаемой позиции

V, L, D никогда не стоят слева от большей цифры:
"VX" следует писать "V", "LC": "L", "DM": "D".
"""

from src.core.domain.digits import (
    DEDUCTIVE_HALF_MEASURE_MIN_LENGTH,
    is_half_measure,
    value_of,
)
from src.validator.checks.result import CheckResult


class Check05HalfMeasureDeductive:
    """CHECK 5: half-measure не вычитается."""

    name = "half_measure_deductive"

    def evaluate(self, numeral: str) -> CheckResult:
        # Однозначное число не имеет вычитаемых цифр
        if len(numeral) >= DEDUCTIVE_HALF_MEASURE_MIN_LENGTH:
            for i in range(len(numeral) - 1):
                if is_half_measure(numeral[i]) and value_of(numeral[i]) < value_of(numeral[i + 1]):
                    return CheckResult(
                        passed=False,
                        block_reason="half_measure_as_deductive",
                        position=i,
                        details=(
                            f"Half measure {numeral[i]!r} before larger digit "
                            f"{numeral[i + 1]!r} at position {i}"
                        ),
                    )

        return CheckResult(
            passed=True,
            block_reason="",
            position=None,
            details="PASS: no half measure in deductive position",
        )
