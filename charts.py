import altair as alt
import pandas as pd

from engine.models import SimulationResult
from engine.schedule import schedule_frame

PRINCIPAL_COLOR = "#4F46E5"
INTEREST_COLOR = "#F87171"
PREPAY_INTEREST_COLOR = "#34D399"
TAX_COLOR = "#818CF8"

TAX_CHART_YEARS = 15


def split_frame(principal, result: SimulationResult, with_prepayment=False):
    interest = result.prepay_total_interest if with_prepayment else result.total_interest
    return pd.DataFrame([
        {"Part": "Principal", "Amount": principal},
        {"Part": "Interest", "Amount": interest},
    ])


def interest_share(result: SimulationResult):
    """Interest as a percentage of the total amount payable without prepayment."""
    return result.total_interest / (result.total_amount or 1) * 100


def split_chart(frame, title, interest_color=INTEREST_COLOR):
    return alt.Chart(frame).mark_arc(innerRadius=60, outerRadius=80).encode(
        theta="Amount:Q",
        color=alt.Color(
            "Part:N",
            scale=alt.Scale(
                domain=["Principal", "Interest"],
                range=[PRINCIPAL_COLOR, interest_color],
            ),
            legend=alt.Legend(title=None, orient="bottom"),
        ),
        tooltip=["Part:N", alt.Tooltip("Amount:Q", format=",.0f")],
    ).properties(
        height=220,
        title=title,
    )


def tax_frame(result: SimulationResult, years=TAX_CHART_YEARS):
    return schedule_frame(result).head(years)[["Year", "Tax Saved"]]


def tax_chart(frame):
    return alt.Chart(frame).mark_bar(color=TAX_COLOR, cornerRadiusTopLeft=4, cornerRadiusTopRight=4).encode(
        x="Year:O",
        y=alt.Y("Tax Saved:Q", title="Tax Saved (₹)"),
        tooltip=["Year:O", alt.Tooltip("Tax Saved:Q", format=",.0f")],
    ).properties(
        width="container",
        height=300,
        title="Estimated Tax Saved per Year",
    )
