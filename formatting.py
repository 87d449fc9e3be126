import re

from engine.interest import round_rupees

CRORE = 10_000_000
LAKH = 100_000


def format_inr(amount):
    """Rupees with Indian digit grouping (12,34,567), no decimals."""
    rounded = round_rupees(amount)
    sign = "-" if rounded < 0 else ""
    digits = str(abs(rounded))
    last_three = digits[-3:]
    other = digits[:-3]
    if other:
        other = re.sub(r"(\d)(?=(\d{2})+(?!\d))", r"\1,", other)
        return f"{sign}₹{other},{last_three}"
    return f"{sign}₹{last_three}"


def format_inr_compact(amount):
    if amount >= CRORE:
        return f"₹ {amount / CRORE:.2f} Cr"
    if amount >= LAKH:
        return f"₹ {amount / LAKH:.2f} L"
    return format_inr(amount)
