from engine.interest import monthly_rate
from engine.models import LoanParameters, PrepaymentPlan, TaxPolicy


def test_loan_monthly_rate():
    loan = LoanParameters(5_000_000, 8.5, 240)
    assert loan.monthly_rate == monthly_rate(8.5)
    assert LoanParameters(5_000_000, 12, 240).monthly_rate == 0.01


def test_prepayment_plan_is_active():
    assert not PrepaymentPlan().is_active
    assert PrepaymentPlan(monthly=1_000).is_active
    assert PrepaymentPlan(annual=50_000, start_year=3).is_active


def test_tax_policy_caps():
    policy = TaxPolicy()
    assert policy.slab_percent == 30
    assert (policy.principal_cap, policy.interest_cap) == (150_000, 200_000)
