from .interest import round_rupees
from .models import TaxPolicy


def tax_saved(interest_paid, principal_paid, policy: TaxPolicy):
    """Old-regime deduction for one loan-year: Sec 24b on interest, Sec 80C on principal."""
    slab = policy.slab_percent / 100
    on_interest = min(interest_paid, policy.interest_cap) * slab
    on_principal = min(principal_paid, policy.principal_cap) * slab
    return round_rupees(on_interest + on_principal)


def max_tax_saved(policy: TaxPolicy):
    return round_rupees((policy.interest_cap + policy.principal_cap) * policy.slab_percent / 100)
