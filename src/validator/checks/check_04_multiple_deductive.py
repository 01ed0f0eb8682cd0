"""CHECK 4: Несколько цифр в вычитаемой позиции

Перед большей цифрой может стоять только одна вычитаемая цифра:
"IIV", "XIX" слева от C ("XIC") и т.п. запрещены.
"""

from src.core.domain.digits import MULTIPLE_DEDUCTIVE_MIN_LENGTH, value_of
from src.validator.checks.result import CheckResult


class Check04MultipleDeductive:
    """CHECK 4: две цифры подряд меньше следующей за ними."""

    name = "multiple_deductive"

    def evaluate(self, numeral: str) -> CheckResult:
        if len(numeral) >= MULTIPLE_DEDUCTIVE_MIN_LENGTH:
            for i in range(1, len(numeral) - 1):
                prev_val = value_of(numeral[i - 1])
                cur_val = value_of(numeral[i])
                next_val = value_of(numeral[i + 1])
                if prev_val < next_val and cur_val < next_val:
                    return CheckResult(
                        passed=False,
                        block_reason="multiple_numerals_in_same_deductive",
                        position=i - 1,
                        details=(
                            f"Digits {numeral[i - 1:i + 1]!r} both precede larger digit "
                            f"{numeral[i + 1]!r}"
                        ),
                    )

        return CheckResult(
            passed=True,
            block_reason="",
            position=None,
            details="PASS: at most one deductive digit per larger digit",
        )
