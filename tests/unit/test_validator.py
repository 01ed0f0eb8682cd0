"""Тесты для NumeralValidator

Покрытие:
- порядок проверок и сообщаемая причина
- IllegalCharacterError vs InvalidConstructError
- inspect() / is_valid()
- DEBUG логирование отказов
"""

import logging

import pytest

from src.core.domain import IllegalCharacterError, InvalidConstructError
from src.validator import NumeralValidator


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def validator():
    """NumeralValidator instance."""
    return NumeralValidator()


# =============================================================================
# ТЕСТЫ: validate
# =============================================================================


@pytest.mark.parametrize("numeral", ["I", "IV", "XLII", "MCMXCIV", "MMMM", ""])
def test_validate_pass(validator, numeral):
    """PASS: корректные числа не вызывают исключений."""
    validator.validate(numeral)
    assert validator.is_valid(numeral) is True


@pytest.mark.parametrize(
    "numeral, reason",
    [
        ("IIII", "too_many_repeating_digits"),
        ("VV", "repeating_half_measure"),
        ("IVI", "same_numeral_deductive_and_additive"),
        ("IIV", "multiple_numerals_in_same_deductive"),
        ("VX", "half_measure_as_deductive"),
    ],
)
def test_validate_invalid_construct(validator, numeral, reason):
    """FAIL: каждая структурная проверка даёт InvalidConstructError со своей причиной."""
    with pytest.raises(InvalidConstructError) as excinfo:
        validator.validate(numeral)

    assert excinfo.value.reason == reason
    assert excinfo.value.numeral == numeral


def test_validate_first_failing_check_wins(validator):
    """VVX нарушает CHECK 2 и CHECK 5: сообщается CHECK 2."""
    with pytest.raises(InvalidConstructError) as excinfo:
        validator.validate("VVX")
    assert excinfo.value.reason == "repeating_half_measure"


def test_validate_character_set_before_constructs(validator):
    """IIIIA: недопустимый символ важнее повторения."""
    with pytest.raises(IllegalCharacterError):
        validator.validate("IIIIA")


def test_validate_uses_original_in_message(validator):
    """Сообщение содержит исходную строку, а не нормализованную."""
    with pytest.raises(InvalidConstructError, match='"iiii"'):
        validator.validate("IIII", original="iiii")


# =============================================================================
# ТЕСТЫ: inspect
# =============================================================================


def test_inspect_returns_all_results(validator):
    """Без прерывания: 6 результатов, ровно один FAIL для IIV."""
    results = validator.inspect("IIV")

    assert len(results) == 6
    failed = [r for r in results if not r.passed]
    assert [r.block_reason for r in failed] == ["multiple_numerals_in_same_deductive"]


def test_inspect_stops_after_illegal_character(validator):
    """Если CHECK 0 не пройдена, остальные проверки не выполняются."""
    results = validator.inspect("ABC")

    assert len(results) == 1
    assert results[0].block_reason == "illegal_character"
    assert validator.is_valid("ABC") is False


def test_inspect_reports_multiple_violations(validator):
    """VVX: CHECK 2, CHECK 4 и CHECK 5: FAIL."""
    reasons = {r.block_reason for r in validator.inspect("VVX") if not r.passed}
    assert reasons == {
        "repeating_half_measure",
        "multiple_numerals_in_same_deductive",
        "half_measure_as_deductive",
    }


# =============================================================================
# ТЕСТЫ: logging
# =============================================================================


def test_rejection_logged_at_debug(validator, caplog):
    caplog.set_level(logging.DEBUG, logger="src.validator.validator")

    with pytest.raises(InvalidConstructError):
        validator.validate("VV")

    assert "repeating_half_measure" in caplog.text
    assert "'VV'" in caplog.text
