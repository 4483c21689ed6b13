# ABOUTME: Loan policy configuration: loan period length and per-day late fine.
# ABOUTME: Computes due dates, late days, and fines using calendar-day arithmetic.

from dataclasses import dataclass
from datetime import date, timedelta

DEFAULT_LOAN_PERIOD_DAYS = 7
DEFAULT_FINE_PER_DAY = 10


@dataclass(frozen=True)
class LoanPolicy:
    """How long a loan lasts and what each late day costs.

    Fines are whole currency units; there is no rounding because both the
    day count and the rate are integers.
    """

    loan_period_days: int = DEFAULT_LOAN_PERIOD_DAYS
    fine_per_day: int = DEFAULT_FINE_PER_DAY

    def __post_init__(self) -> None:
        if self.loan_period_days < 1:
            raise ValueError(f"loan_period_days must be at least 1, got {self.loan_period_days}")
        if self.fine_per_day < 0:
            raise ValueError(f"fine_per_day must not be negative, got {self.fine_per_day}")

    def due_date(self, issued_on: date) -> date:
        """Due date for a loan issued on the given day."""
        return issued_on + timedelta(days=self.loan_period_days)

    def late_days(self, due: date, returned_on: date) -> int:
        """Whole days past the due date; the due date itself is not late."""
        return max(0, (returned_on - due).days)

    def fine(self, late_days: int) -> int:
        """Fine owed for the given number of late days."""
        return late_days * self.fine_per_day


DEFAULT_POLICY = LoanPolicy()
