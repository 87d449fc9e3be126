from .models import (
    LoanParameters,
    PrepaymentPlan,
    TaxPolicy,
    YearlySummary,
    SimulationResult,
)
from .schedule import simulate, schedule_frame

__all__ = [
    "LoanParameters",
    "PrepaymentPlan",
    "TaxPolicy",
    "YearlySummary",
    "SimulationResult",
    "simulate",
    "schedule_frame",
]
