import logging
import math

import pandas as pd

from .models import (
    LoanParameters,
    PrepaymentPlan,
    TaxPolicy,
    YearlySummary,
    SimulationResult,
    Trajectory,
)
from .interest import emi as fixed_emi, monthly_interest, round_rupees
from .tax import tax_saved

logger = logging.getLogger(__name__)

BALANCE_TOLERANCE = 0.1
MIN_ITERATIONS = 1200

SCHEDULE_COLUMNS = ["Year", "Principal Paid", "Interest Paid", "Balance", "Tax Saved"]


def iteration_ceiling(total_months):
    return max(2 * total_months, MIN_ITERATIONS)


def prepayment_for_month(i, plan: PrepaymentPlan):
    extra = 0
    if i >= plan.start_year * 12:
        extra += plan.monthly
    if i % 12 == 0 and i // 12 >= plan.start_year:
        extra += plan.annual
    return extra


def close_year(i, principal, interest, outstanding, tax: TaxPolicy):
    return YearlySummary(
        year=math.ceil(i / 12),
        principal_paid=round_rupees(principal),
        interest_paid=round_rupees(interest),
        balance=max(0, round_rupees(outstanding)),
        tax_saved=tax_saved(interest, principal, tax),
    )


def simulate_prepayment(
    loan: LoanParameters,
    plan: PrepaymentPlan,
    tax: TaxPolicy,
) -> Trajectory:

    rows = []
    outstanding = loan.principal
    rate = loan.monthly_rate
    emi = fixed_emi(loan.principal, rate, loan.total_months)

    total_interest = 0.0
    months = 0
    year_interest = 0.0
    year_principal = 0.0

    for i in range(1, iteration_ceiling(loan.total_months) + 1):
        if outstanding <= BALANCE_TOLERANCE:
            break

        interest = monthly_interest(outstanding, rate)
        payment = emi + prepayment_for_month(i, plan)
        principal_paid = payment - interest

        # last payment only clears what is left
        if payment > outstanding + interest:
            principal_paid = outstanding

        outstanding -= principal_paid
        total_interest += interest
        months += 1

        year_interest += interest
        year_principal += principal_paid

        if i % 12 == 0 or outstanding <= BALANCE_TOLERANCE:
            rows.append(close_year(i, year_principal, year_interest, outstanding, tax))
            year_interest = 0.0
            year_principal = 0.0

    fully_amortized = outstanding <= BALANCE_TOLERANCE

    if not fully_amortized:
        if months % 12:
            # ceiling fell mid-year, keep the partial year
            rows.append(close_year(months, year_principal, year_interest, outstanding, tax))
        logger.warning(
            "Loan of %s at %s%% does not amortize within %d months (balance %.2f)",
            loan.principal, loan.annual_rate, months, outstanding,
        )

    return Trajectory(
        total_interest=total_interest,
        months=months,
        schedule=tuple(rows),
        fully_amortized=fully_amortized,
    )


def baseline_totals(loan: LoanParameters):
    """
    Totals for the loan without any prepayment.

    Closed form: the EMI is constant, so interest is simply what the
    installments pay beyond the principal.
    """
    emi = fixed_emi(loan.principal, loan.monthly_rate, loan.total_months)
    total_interest = max(0, emi * loan.total_months - loan.principal)
    return emi, total_interest, loan.principal + total_interest


def compare(baseline_interest, baseline_months, trajectory: Trajectory):
    saved_interest = max(0, baseline_interest - trajectory.total_interest)
    saved_months = max(0, baseline_months - trajectory.months)
    # one decimal, halves up
    saved_years = math.floor(saved_months / 12 * 10 + 0.5) / 10
    return saved_interest, saved_months, saved_years


def simulate(
    principal,
    annual_rate,
    total_months,
    monthly_prepayment=0,
    annual_prepayment=0,
    prepayment_start_year=1,
    tax_slab_percent=30,
) -> SimulationResult:

    loan = LoanParameters(principal, annual_rate, int(total_months))
    plan = PrepaymentPlan(monthly_prepayment, annual_prepayment, int(prepayment_start_year))
    tax = TaxPolicy(slab_percent=tax_slab_percent)

    emi, total_interest, total_amount = baseline_totals(loan)
    trajectory = simulate_prepayment(loan, plan, tax)
    saved_interest, saved_months, saved_years = compare(
        total_interest, loan.total_months, trajectory
    )

    logger.debug(
        "Simulated %s over %d months: emi=%s prepay_months=%d saved=%.0f",
        principal, loan.total_months, emi, trajectory.months, saved_interest,
    )

    return SimulationResult(
        emi=emi,
        total_months=loan.total_months,
        total_interest=total_interest,
        total_amount=total_amount,
        prepay_total_interest=trajectory.total_interest,
        prepay_total_amount=loan.principal + trajectory.total_interest,
        prepay_months=trajectory.months,
        saved_interest=saved_interest,
        saved_months=saved_months,
        saved_years=saved_years,
        schedule=trajectory.schedule,
        fully_amortized=trajectory.fully_amortized,
    )


def schedule_frame(result: SimulationResult) -> pd.DataFrame:
    rows = [
        {
            "Year": s.year,
            "Principal Paid": s.principal_paid,
            "Interest Paid": s.interest_paid,
            "Balance": s.balance,
            "Tax Saved": s.tax_saved,
        }
        for s in result.schedule
    ]
    return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)
