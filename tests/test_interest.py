from engine.interest import emi, monthly_rate, monthly_interest, round_rupees


def test_emi_for_fifty_lakh_loan():
    assert emi(5_000_000, monthly_rate(8.5), 240) == 43_391


def test_emi_zero_rate_is_zero():
    assert emi(5_000_000, 0, 240) == 0


def test_emi_zero_tenure_is_zero():
    assert emi(5_000_000, monthly_rate(8.5), 0) == 0


def test_emi_zero_principal():
    assert emi(0, monthly_rate(8.5), 240) == 0


def test_emi_is_whole_rupees():
    value = emi(1_234_567, monthly_rate(7.35), 137)
    assert isinstance(value, int)


def test_round_rupees_halves_go_up():
    assert round_rupees(2.5) == 3
    assert round_rupees(3.5) == 4
    assert round_rupees(2.49) == 2


def test_monthly_interest():
    assert monthly_interest(1_200_000, monthly_rate(12)) == 12_000
