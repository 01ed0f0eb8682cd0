"""CHECK 3: Одна цифра в вычитаемой и прибавляемой позиции

Цифра не может стоять одновременно слева (вычитание) и справа (сложение)
от большей цифры: "IVI" (следует писать "V"), "XCX" (следует писать "C").
"""

from src.core.domain.digits import DEDUCTIVE_AND_ADDITIVE_MIN_LENGTH, value_of
from src.validator.checks.result import CheckResult


class Check03DeductiveAndAdditive:
    """CHECK 3: запрет конструкций вида a b a, где a < b."""

    name = "deductive_and_additive"

    def evaluate(self, numeral: str) -> CheckResult:
        if len(numeral) >= DEDUCTIVE_AND_ADDITIVE_MIN_LENGTH:
            for i in range(1, len(numeral) - 1):
                prev_val = value_of(numeral[i - 1])
                cur_val = value_of(numeral[i])
                next_val = value_of(numeral[i + 1])
                if prev_val < cur_val and prev_val == next_val:
                    return CheckResult(
                        passed=False,
                        block_reason="same_numeral_deductive_and_additive",
                        position=i - 1,
                        details=(
                            f"Digit {numeral[i - 1]!r} on both sides of larger digit "
                            f"{numeral[i]!r} at position {i}"
                        ),
                    )

        return CheckResult(
            passed=True,
            block_reason="",
            position=None,
            details="PASS: no digit both deductive and additive",
        )
