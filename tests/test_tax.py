from engine.models import TaxPolicy
from engine.tax import tax_saved, max_tax_saved


def test_caps_apply_to_both_deductions():
    assert tax_saved(300_000, 200_000, TaxPolicy(slab_percent=30)) == 105_000


def test_below_caps_uses_actual_amounts():
    assert tax_saved(100_000, 50_000, TaxPolicy(slab_percent=20)) == 30_000


def test_zero_slab_saves_nothing():
    assert tax_saved(400_000, 90_000, TaxPolicy(slab_percent=0)) == 0


def test_max_tax_saved():
    assert max_tax_saved(TaxPolicy(slab_percent=10)) == 35_000
