import logging
import math

logger = logging.getLogger(__name__)

TAX_SLABS = (0, 10, 20, 30)

MAX_TENURE_YEARS = 30

# (min, max, step) for each slider
LOAN_AMOUNT_RANGE = (100_000, 50_000_000, 50_000)
RATE_RANGE = (1.0, 15.0, 0.1)
MONTHLY_PREPAY_RANGE = (0, 100_000, 1_000)
ANNUAL_PREPAY_RANGE = (0, 500_000, 10_000)


def to_number(value):
    """Coerce raw widget input to a non-negative finite number; anything else is 0."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.debug("Non-numeric input %r treated as 0", value)
        return 0
    if math.isnan(number) or math.isinf(number) or number < 0:
        return 0
    return int(number) if number.is_integer() else number


def clamp_slider(value, minimum, maximum):
    # typed values may go past the slider, up to twice its max
    value = to_number(value)
    if value < minimum:
        return minimum
    if value > maximum * 2:
        return maximum * 2
    return value


def clamp_tenure(years, months):
    years = min(int(to_number(years)), MAX_TENURE_YEARS)
    months = min(int(to_number(months)), 11)
    return years * 12 + months


def start_year_options(tenure_years):
    return list(range(1, max(1, int(to_number(tenure_years))) + 1))


def sanitize_slab(value):
    slab = to_number(value)
    if slab not in TAX_SLABS:
        logger.debug("Unknown tax slab %r, using 0", value)
        return 0
    return int(slab)
