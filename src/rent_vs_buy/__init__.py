"""
Rent vs. Buy comparison toolkit.

Projects the yearly cost of buying a home against renting and investing the
down payment, netting home equity and investment growth out of each side so
the two totals compare directly.
"""

import logging

from .schemas import (
    DEFAULT_INPUTS,
    INPUT_BOUNDS,
    InputBound,
    MortgagePayment,
    ProjectionInputs,
    ProjectionResult,
    YearlySnapshot,
)
from .model import amortization_schedule, monthly_mortgage_payment, project

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_INPUTS",
    "INPUT_BOUNDS",
    "InputBound",
    "MortgagePayment",
    "ProjectionInputs",
    "ProjectionResult",
    "YearlySnapshot",
    "amortization_schedule",
    "monthly_mortgage_payment",
    "project",
]
