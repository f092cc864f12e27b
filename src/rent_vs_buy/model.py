from __future__ import annotations

import logging
import math
from itertools import islice
from typing import Iterator, List, Optional, Union

from .schemas import (
    MortgagePayment,
    ProjectionInputs,
    ProjectionResult,
    YearlySnapshot,
)

logger = logging.getLogger(__name__)


def project(inputs: ProjectionInputs) -> ProjectionResult:
    """Project cumulative buy and rent costs for each year of the horizon.

    Each snapshot nets a wealth term out of the cash spent: home equity on the
    buying side, growth of the invested down payment on the renting side.
    """
    years = inputs.years_to_compare
    down_payment = inputs.down_payment
    loan_amount = inputs.loan_amount
    term_months = inputs.number_of_payments

    mortgage_payment = monthly_mortgage_payment(
        loan_amount, inputs.interest_rate, term_months
    )
    market_growth = 1 + inputs.market_growth_rate / 100
    investment_growth = 1 + inputs.investment_return / 100

    logger.debug(
        "Projecting %d years: price=%.2f down=%.2f loan=%.2f payment=%.2f",
        years,
        inputs.home_price,
        down_payment,
        loan_amount,
        mortgage_payment,
    )

    balance = max(loan_amount, 0.0)
    schedule = amortization_schedule(
        balance, inputs.interest_rate, term_months, payment=mortgage_payment
    )
    home_value = inputs.home_price
    current_rent = inputs.monthly_rent
    investment_balance = down_payment

    cumulative_buy_cost = down_payment
    cumulative_rent_cost = 0.0
    mortgage_paid = 0.0
    interest_paid = 0.0
    principal_paid = 0.0
    ownership_paid = 0.0
    equity = home_value - balance
    net_investment_gain = 0.0

    timeline: List[YearlySnapshot] = [
        YearlySnapshot(
            year=0,
            buy_cost=round_currency(down_payment),
            rent_cost=0,
            home_value=home_value,
            loan_balance=balance,
            equity=equity,
            investment_balance=investment_balance,
            rent_paid=0.0,
        )
    ]

    for year in range(1, years + 1):
        home_value *= market_growth

        year_mortgage = 0.0
        for row in islice(schedule, 12):
            year_mortgage += row.amount
            interest_paid += row.interest
            principal_paid += row.principal
            if balance > 0 and row.balance == 0:
                logger.debug("Loan paid off in year %d (month %d)", year, row.month)
            balance = row.balance

        ownership_costs = home_value * inputs.ownership_costs_rate / 100
        mortgage_paid += year_mortgage
        ownership_paid += ownership_costs
        cumulative_buy_cost += year_mortgage + ownership_costs

        cumulative_rent_cost += current_rent * 12

        investment_balance *= investment_growth
        current_rent *= market_growth

        equity = home_value - balance
        net_investment_gain = investment_balance - down_payment

        timeline.append(
            YearlySnapshot(
                year=year,
                buy_cost=round_currency(cumulative_buy_cost - equity),
                rent_cost=round_currency(cumulative_rent_cost - net_investment_gain),
                home_value=home_value,
                loan_balance=balance,
                equity=equity,
                investment_balance=investment_balance,
                rent_paid=cumulative_rent_cost,
            )
        )

    final = timeline[-1]
    return ProjectionResult(
        inputs=inputs,
        monthly_mortgage=mortgage_payment,
        final_buy_cost=final.buy_cost,
        final_rent_cost=final.rent_cost,
        difference=abs(final.buy_cost - final.rent_cost),
        # Ties go to renting.
        is_buying_cheaper=final.buy_cost < final.rent_cost,
        equity_built=equity,
        down_payment=down_payment,
        total_mortgage_paid=mortgage_paid,
        total_ownership_costs_paid=ownership_paid,
        total_buy_cash_out=down_payment + mortgage_paid + ownership_paid,
        total_rent_paid=cumulative_rent_cost,
        net_investment_gain=net_investment_gain,
        total_interest_paid=interest_paid,
        total_principal_paid=principal_paid,
        yearly_data=tuple(timeline),
    )


def amortization_schedule(
    principal: float,
    annual_rate_pct: float,
    term_months: int,
    payment: Optional[float] = None,
) -> Iterator[MortgagePayment]:
    """Yield one row per monthly payment until the loan is retired.

    The final scheduled payment clears whatever balance is left, so the
    balance lands on exactly zero at ``term_months``.
    """
    if payment is None:
        payment = monthly_mortgage_payment(principal, annual_rate_pct, term_months)
    monthly_rate = annual_to_monthly_rate(annual_rate_pct)

    balance = principal
    for month in range(1, term_months + 1):
        if balance <= 0:
            break
        interest_payment = balance * monthly_rate
        if month == term_months:
            principal_payment = balance
        else:
            principal_portion = max(payment - interest_payment, 0.0)
            principal_payment = min(principal_portion, balance)
        balance = max(balance - principal_payment, 0.0)
        yield MortgagePayment(
            month=month,
            interest=interest_payment,
            principal=principal_payment,
            balance=balance,
        )


def monthly_mortgage_payment(
    principal: float, annual_rate_pct: float, term_months: int
) -> float:
    if principal <= 0 or term_months <= 0:
        return 0.0
    monthly_rate = annual_to_monthly_rate(annual_rate_pct)
    if monthly_rate == 0:
        return principal / term_months
    if monthly_rate > -1:
        # 1 - (1 + r) ** -n, without cancellation for tiny rates
        denominator = -math.expm1(-term_months * math.log1p(monthly_rate))
    else:
        denominator = 1 - (1 + monthly_rate) ** (-term_months)
    return principal * monthly_rate / denominator


def annual_to_monthly_rate(annual_rate_pct: float) -> float:
    return annual_rate_pct / 100.0 / 12.0


def round_currency(value: float) -> Union[int, float]:
    """Round half up to a whole currency unit.

    Non-finite values (inf, nan) are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    return int(math.floor(value + 0.5))
