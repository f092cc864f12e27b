"""Display helpers for projection results."""

from __future__ import annotations

from typing import List, Tuple

from .model import round_currency
from .schemas import ProjectionResult


def format_currency(value: float) -> str:
    """Whole dollars with thousands separators, e.g. ``-$1,234``."""
    sign = "-" if value < 0 else ""
    return f"{sign}${round_currency(abs(value)):,}"


def format_percent(value: float) -> str:
    return f"{value:g}%"


def verdict(result: ProjectionResult) -> str:
    return "Buying is Cheaper" if result.is_buying_cheaper else "Renting is Cheaper"


def savings_line(result: ProjectionResult) -> str:
    return (
        f"Over {result.years_to_compare} years, {result.cheaper_option} "
        f"will save you: {format_currency(result.difference)}"
    )


def snapshot_rows(result: ProjectionResult) -> List[Tuple[str, str, str]]:
    """Rows of (year, buying cost, renting cost) for the comparison table."""
    return [
        (str(snap.year), format_currency(snap.buy_cost), format_currency(snap.rent_cost))
        for snap in result.yearly_data
    ]
