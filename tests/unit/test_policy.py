# ABOUTME: Unit tests for LoanPolicy due-date, late-day, and fine arithmetic.
# ABOUTME: Covers the due-date boundary and validation of configured values.

from datetime import date

import pytest

from lendery.core.policy import DEFAULT_POLICY, LoanPolicy


class TestDefaults:
    """The default policy matches the library's standing rules."""

    def test_default_values(self) -> None:
        """Seven-day loans, ten units per late day."""
        assert DEFAULT_POLICY.loan_period_days == 7
        assert DEFAULT_POLICY.fine_per_day == 10


class TestDueDate:
    """Tests for LoanPolicy.due_date."""

    def test_due_date_is_seven_days_later(self) -> None:
        assert DEFAULT_POLICY.due_date(date(2024, 3, 1)) == date(2024, 3, 8)

    def test_due_date_crosses_month_and_year(self) -> None:
        """Calendar arithmetic handles month and year rollover."""
        assert DEFAULT_POLICY.due_date(date(2023, 12, 28)) == date(2024, 1, 4)

    def test_custom_period(self) -> None:
        policy = LoanPolicy(loan_period_days=14)
        assert policy.due_date(date(2024, 2, 20)) == date(2024, 3, 5)


class TestLateDaysAndFine:
    """Tests for late_days and fine."""

    def test_return_on_due_date_is_not_late(self) -> None:
        due = date(2024, 3, 8)
        assert DEFAULT_POLICY.late_days(due, due) == 0

    def test_return_one_day_after_due_date(self) -> None:
        late = DEFAULT_POLICY.late_days(date(2024, 3, 8), date(2024, 3, 9))
        assert late == 1
        assert DEFAULT_POLICY.fine(late) == 10

    def test_early_return_is_never_negative(self) -> None:
        assert DEFAULT_POLICY.late_days(date(2024, 3, 8), date(2024, 3, 2)) == 0

    def test_fine_uses_configured_rate(self) -> None:
        policy = LoanPolicy(fine_per_day=25)
        assert policy.fine(3) == 75

    def test_zero_fine_rate_allowed(self) -> None:
        assert LoanPolicy(fine_per_day=0).fine(10) == 0


class TestValidation:
    """LoanPolicy rejects values that make no sense."""

    def test_zero_loan_period_rejected(self) -> None:
        with pytest.raises(ValueError, match="loan_period_days"):
            LoanPolicy(loan_period_days=0)

    def test_negative_fine_rejected(self) -> None:
        with pytest.raises(ValueError, match="fine_per_day"):
            LoanPolicy(fine_per_day=-1)
