"""CHECK 1: Слишком много повторяющихся цифр

Цифра (кроме M) не может повторяться четыре и более раз подряд:
"IIII" записывается как "IV", "XXXX" как "XL".
"""

from src.core.domain.digits import QUADRUPLE_DIGIT_MIN_LENGTH, RomanDigit
from src.validator.checks.result import CheckResult


class Check01RepeatingDigits:
    """CHECK 1: не более трёх одинаковых цифр подряд (M без ограничения)."""

    name = "repeating_digits"

    def evaluate(self, numeral: str) -> CheckResult:
        # При длине меньше 4 четыре одинаковые цифры невозможны
        if len(numeral) >= QUADRUPLE_DIGIT_MIN_LENGTH:
            for i in range(3, len(numeral)):
                cur = numeral[i]
                if cur != RomanDigit.M.symbol and numeral[i - 3:i] == cur * 3:
                    return CheckResult(
                        passed=False,
                        block_reason="too_many_repeating_digits",
                        position=i - 3,
                        details=f"Digit {cur!r} repeats four or more times from position {i - 3}",
                    )

        return CheckResult(
            passed=True,
            block_reason="",
            position=None,
            details="PASS: no digit other than M repeats more than thrice",
        )
