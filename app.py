import streamlit as st

import config
from engine import PrepaymentPlan, TaxPolicy, simulate, schedule_frame
from engine.tax import max_tax_saved
from inputs import (
    TAX_SLABS,
    MAX_TENURE_YEARS,
    LOAN_AMOUNT_RANGE,
    RATE_RANGE,
    MONTHLY_PREPAY_RANGE,
    ANNUAL_PREPAY_RANGE,
    clamp_slider,
    clamp_tenure,
    start_year_options,
    sanitize_slab,
)
from formatting import format_inr, format_inr_compact
from charts import (
    PREPAY_INTEREST_COLOR,
    split_frame,
    split_chart,
    interest_share,
    tax_frame,
    tax_chart,
)

# --------------------------------------------------
# Setup
# --------------------------------------------------

config.configure_logging()

st.set_page_config(page_title="Home Loan EMI Calculator", layout="wide")
st.title("Home Loan EMI & Prepayment Planner")

# --------------------------------------------------
# Helpers
# --------------------------------------------------

def amount_input(label, value, bounds, key, show_range=True):
    low, high, step = bounds
    raw = st.sidebar.number_input(
        label,
        value=value,
        step=step,
        key=key,
        help=f"Range {format_inr_compact(low)} to {format_inr_compact(high)}" if show_range else None,
    )
    return clamp_slider(raw, low, high)


@st.cache_data(show_spinner=False)
def run_simulation(*args):
    return simulate(*args)


def slab_label(slab):
    return "0% (Exempt)" if slab == 0 else f"{slab}%"

# --------------------------------------------------
# Loan basics
# --------------------------------------------------

st.sidebar.header("Loan Details")

principal = amount_input("Loan Amount (₹)", config.DEFAULT_LOAN_AMOUNT, LOAN_AMOUNT_RANGE, "loan")
rate = amount_input("Interest Rate (%)", float(config.DEFAULT_RATE), RATE_RANGE, "rate", show_range=False)

c1, c2 = st.sidebar.columns(2)
tenure_years = c1.number_input(
    "Tenure (Years)", min_value=0, max_value=MAX_TENURE_YEARS,
    value=min(config.DEFAULT_TENURE_YEARS, MAX_TENURE_YEARS),
)
tenure_months = c2.number_input("Months", min_value=0, max_value=11, value=0)
total_months = clamp_tenure(tenure_years, tenure_months)

# --------------------------------------------------
# Prepayments
# --------------------------------------------------

st.sidebar.header("Smart Prepayment")

monthly_prepayment = amount_input("Extra Monthly (₹)", 0, MONTHLY_PREPAY_RANGE, "monthly")
annual_prepayment = amount_input("Extra Annual (₹)", 0, ANNUAL_PREPAY_RANGE, "annual")

start_year = 1
if PrepaymentPlan(monthly_prepayment, annual_prepayment).is_active:
    start_year = st.sidebar.selectbox(
        "Start prepaying from year",
        start_year_options(tenure_years),
    )

# --------------------------------------------------
# Tax
# --------------------------------------------------

st.sidebar.header("Tax Benefits")

default_slab = sanitize_slab(config.DEFAULT_TAX_SLAB)
tax_slab = st.sidebar.selectbox(
    "Income Tax Slab",
    TAX_SLABS,
    index=TAX_SLABS.index(default_slab),
    format_func=slab_label,
)

# --------------------------------------------------
# Compute
# --------------------------------------------------

result = run_simulation(
    principal,
    rate,
    total_months,
    monthly_prepayment,
    annual_prepayment,
    start_year,
    tax_slab,
)

if not result.fully_amortized:
    st.warning(
        "These inputs never pay the loan off: the EMI and prepayments do not "
        f"cover the interest. The schedule stops after {result.prepay_months} months."
    )

# --------------------------------------------------
# Summary
# --------------------------------------------------

c1, c2, c3 = st.columns(3)

c1.metric("Monthly EMI", format_inr(result.emi), help="Fixed Monthly Payment")
c2.metric(
    "Total Interest",
    format_inr_compact(result.total_interest),
    f"{interest_share(result):.1f}% of total",
    delta_color="off",
)
c3.metric("Total Amount", format_inr_compact(result.total_amount), "Principal + Interest", delta_color="off")

if result.saved_interest > 0:
    new_years, new_months = divmod(result.prepay_months, 12)
    st.success(
        f"**Smart Strategy Active!** Save {format_inr_compact(result.saved_interest)} in interest "
        f"and finish {result.saved_years} years ({result.saved_months} months) early. "
        f"New tenure: {new_years} years {new_months} months."
    )

# --------------------------------------------------
# Analysis tabs
# --------------------------------------------------

summary_tab, schedule_tab, tax_tab = st.tabs(["Visual Analysis", "Schedule", "Tax Savings"])

with summary_tab:
    left, right = st.columns(2)
    left.altair_chart(
        split_chart(split_frame(principal, result), "Without Prepayment"),
        width="stretch",
    )
    right.altair_chart(
        split_chart(
            split_frame(principal, result, with_prepayment=True),
            "With Prepayment",
            interest_color=PREPAY_INTEREST_COLOR,
        ),
        width="stretch",
    )

with schedule_tab:
    df = schedule_frame(result)
    st.dataframe(df, width="stretch", hide_index=True)
    st.download_button(
        "Download schedule (CSV)",
        df.to_csv(index=False).encode("utf-8"),
        file_name="emi_schedule.csv",
        mime="text/csv",
    )

with tax_tab:
    st.caption(
        "Based on Old Tax Regime. Saves tax under Section 80C "
        "(Principal, max ₹1.5L) and Section 24b (Interest, max ₹2L). "
        f"At your slab that is at most {format_inr(max_tax_saved(TaxPolicy(slab_percent=tax_slab)))} a year."
    )
    st.altair_chart(tax_chart(tax_frame(result)), width="stretch")
