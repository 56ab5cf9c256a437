"""
Unit tests for the division calculator.
Covers truncation toward zero, division by zero and 32-bit overflow.
"""
import pytest
from unittest.mock import Mock

from division_tool.exceptions import DivisionByZeroError, QuotientOverflowError
from division_tool.services.division_calculator import (
    DivisionCalculator,
    INT32_MAX,
    INT32_MIN,
    truncated_divide,
)


@pytest.fixture
def calculator(logger):
    return DivisionCalculator(logger)


class TestTruncatedDivide:
    """Test the pure truncating division helper."""

    @pytest.mark.parametrize("dividend,divisor,expected", [
        (10, 2, 5),
        (7, 2, 3),
        (-7, 2, -3),
        (7, -2, -3),
        (-7, -2, 3),
        (0, 5, 0),
        (1, 3, 0),
        (-1, 3, 0),
    ])
    def test_truncates_toward_zero(self, dividend, divisor, expected):
        """Quotient is truncated toward zero, not floored."""
        assert truncated_divide(dividend, divisor) == expected

    def test_matches_float_truncation_on_small_range(self):
        """Agrees with int(a / b) wherever the float is exact."""
        for dividend in range(-20, 21):
            for divisor in [d for d in range(-6, 7) if d != 0]:
                assert truncated_divide(dividend, divisor) == int(dividend / divisor)

    def test_large_operands_are_exact(self):
        """Exact integer arithmetic at the edges of the 32-bit range."""
        assert truncated_divide(INT32_MAX, 1) == INT32_MAX
        assert truncated_divide(INT32_MIN, 1) == INT32_MIN
        assert truncated_divide(INT32_MIN, 2) == -1073741824
        assert truncated_divide(INT32_MAX, -7) == -306783378


class TestDivisionCalculator:
    """Test DivisionCalculator.divide."""

    def test_divide_success(self, calculator):
        assert calculator.divide(10, 2) == 5

    def test_divide_negative_truncation(self, calculator):
        assert calculator.divide(-7, 2) == -3

    def test_divide_zero_dividend(self, calculator):
        assert calculator.divide(0, 5) == 0

    def test_divide_by_zero_raises(self, calculator):
        """Division by zero fails before dividing."""
        with pytest.raises(DivisionByZeroError) as exc_info:
            calculator.divide(5, 0)

        assert exc_info.value.context == {'dividend': 5}

    def test_divide_zero_by_zero_raises(self, calculator):
        with pytest.raises(DivisionByZeroError):
            calculator.divide(0, 0)

    def test_int32_min_by_minus_one_overflows(self, calculator):
        """The only 32-bit overflow case is rejected."""
        with pytest.raises(QuotientOverflowError) as exc_info:
            calculator.divide(INT32_MIN, -1)

        assert exc_info.value.context == {'dividend': INT32_MIN, 'divisor': -1}

    def test_int32_min_by_one_is_fine(self, calculator):
        assert calculator.divide(INT32_MIN, 1) == INT32_MIN

    def test_division_by_zero_is_logged(self):
        """A warning is logged when the divisor is zero."""
        mock_logger = Mock()
        calculator = DivisionCalculator(mock_logger)

        with pytest.raises(DivisionByZeroError):
            calculator.divide(3, 0)

        mock_logger.warning.assert_called_once()
