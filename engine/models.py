from dataclasses import dataclass, field

from .interest import monthly_rate

PRINCIPAL_DEDUCTION_CAP = 150_000  # Sec 80C
INTEREST_DEDUCTION_CAP = 200_000  # Sec 24b


@dataclass(frozen=True)
class LoanParameters:
    principal: float
    annual_rate: float  # annual %
    total_months: int

    @property
    def monthly_rate(self):
        return monthly_rate(self.annual_rate)


@dataclass(frozen=True)
class PrepaymentPlan:
    monthly: float = 0
    annual: float = 0
    start_year: int = 1  # first loan-year with prepayments

    @property
    def is_active(self):
        return self.monthly > 0 or self.annual > 0


@dataclass(frozen=True)
class TaxPolicy:
    slab_percent: float = 30
    principal_cap: float = PRINCIPAL_DEDUCTION_CAP
    interest_cap: float = INTEREST_DEDUCTION_CAP


@dataclass(frozen=True)
class YearlySummary:
    year: int
    principal_paid: int
    interest_paid: int
    balance: int
    tax_saved: int


@dataclass(frozen=True)
class SimulationResult:
    emi: int
    total_months: int
    total_interest: float  # without prepayment
    total_amount: float
    prepay_total_interest: float
    prepay_total_amount: float
    prepay_months: int
    saved_interest: float
    saved_months: int
    saved_years: float
    schedule: tuple = field(default_factory=tuple)
    fully_amortized: bool = True


@dataclass(frozen=True)
class Trajectory:
    total_interest: float
    months: int
    schedule: tuple
    fully_amortized: bool
