import math


def round_rupees(amount):
    # halves go up, matching how EMI figures are usually quoted
    return int(math.floor(amount + 0.5))


def monthly_rate(annual_rate):
    return annual_rate / 12 / 100


def monthly_interest(outstanding, rate):
    return outstanding * rate


def emi(principal, rate, months):
    """
    Fixed monthly installment for `principal` over `months` at monthly `rate`.

    EMI = P * r * (1+r)^n / ((1+r)^n - 1), rounded to whole rupees.
    A zero rate or zero tenure has no defined installment and yields 0.
    """
    if rate <= 0 or months <= 0:
        return 0

    growth = (1 + rate) ** months
    return round_rupees(principal * rate * growth / (growth - 1))
