from __future__ import annotations

import json
import logging
import os

import typer

from .formatting import (
    format_currency,
    format_percent,
    savings_line,
    snapshot_rows,
    verdict,
)
from .model import project
from .schemas import DEFAULT_INPUTS, INPUT_BOUNDS, ProjectionInputs, snapshot_details

app = typer.Typer(help="Compare the cost of buying a home against renting and investing.")

logger = logging.getLogger(__name__)


def _default_log_level() -> str:
    return os.environ.get("RENT_VS_BUY_LOG_LEVEL", "WARNING")


def _bounded(field_name: str, help_text: str):
    bound = INPUT_BOUNDS[field_name]
    return typer.Option(
        getattr(DEFAULT_INPUTS, field_name),
        min=bound.minimum,
        max=bound.maximum,
        help=f"{help_text} [{bound.minimum:g} to {bound.maximum:g}]",
    )


def _configure_logging(log_level: str) -> None:
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(f"unknown log level '{log_level}'", param_hint="--log-level")
    logging.basicConfig(
        level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


@app.command()
def run(
    home_price: float = _bounded("home_price", "Purchase price of the home."),
    down_payment_percent: float = _bounded(
        "down_payment_percent", "Down payment as a percent of the price."
    ),
    interest_rate: float = _bounded("interest_rate", "Annual mortgage rate in percent."),
    loan_term: int = _bounded("loan_term", "Mortgage term in years."),
    monthly_rent: float = _bounded("monthly_rent", "Starting monthly rent."),
    ownership_costs_rate: float = _bounded(
        "ownership_costs_rate",
        "Property tax, HOA, insurance and maintenance as annual percent of home value.",
    ),
    market_growth_rate: float = _bounded(
        "market_growth_rate", "Annual home appreciation and rent increase in percent."
    ),
    investment_return: float = _bounded(
        "investment_return", "Annual return on the renter's invested down payment."
    ),
    years_to_compare: int = _bounded("years_to_compare", "Projection horizon in years."),
    as_json: bool = typer.Option(
        False, "--json", help="Print the projection as JSON instead of a report."
    ),
    show_timeline: bool = typer.Option(
        False, help="If set, dump every yearly snapshot with its detail as JSON."
    ),
    log_level: str = typer.Option(
        default_factory=_default_log_level,
        help="Logging level (env RENT_VS_BUY_LOG_LEVEL if omitted).",
    ),
) -> None:
    """
    Project yearly net costs of buying and renting and report which is cheaper.
    """
    _configure_logging(log_level)

    inputs = ProjectionInputs(
        home_price=home_price,
        down_payment_percent=down_payment_percent,
        interest_rate=interest_rate,
        loan_term=loan_term,
        monthly_rent=monthly_rent,
        ownership_costs_rate=ownership_costs_rate,
        market_growth_rate=market_growth_rate,
        investment_return=investment_return,
        years_to_compare=years_to_compare,
    )
    result = project(inputs)
    logger.info("%s after %d years", verdict(result), years_to_compare)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
        return

    typer.echo(verdict(result))
    typer.echo(savings_line(result))
    typer.echo("")
    typer.echo(f"Total buy cost: {format_currency(result.final_buy_cost)}")
    typer.echo(f"Total rent cost: {format_currency(result.final_rent_cost)}")
    typer.echo("")
    typer.echo(f"Monthly mortgage: {format_currency(result.monthly_mortgage)}")
    typer.echo(f"Monthly rent: {format_currency(inputs.monthly_rent)}")
    typer.echo(
        f"Down payment: {format_currency(result.down_payment)}"
        f" ({format_percent(inputs.down_payment_percent)})"
    )
    typer.echo(
        f"Ownership costs: {format_currency(inputs.annual_ownership_cost)}/yr"
        f" ({format_percent(inputs.ownership_costs_rate)})"
    )
    typer.echo(f"Total mortgage paid: {format_currency(result.total_mortgage_paid)}")
    typer.echo(
        f"Total ownership costs paid: {format_currency(result.total_ownership_costs_paid)}"
    )
    typer.echo(f"Total cash spent buying: {format_currency(result.total_buy_cash_out)}")
    typer.echo(f"Total rent paid: {format_currency(result.total_rent_paid)}")
    typer.echo(f"Equity built: {format_currency(result.equity_built)}")
    typer.echo(f"Net investment gain: {format_currency(result.net_investment_gain)}")
    typer.echo("")
    typer.echo(f"{'Year':>4}  {'Buying':>14}  {'Renting':>14}")
    for year, buy, rent in snapshot_rows(result):
        typer.echo(f"{year:>4}  {buy:>14}  {rent:>14}")

    if show_timeline:
        payload = [snapshot_details(snap) for snap in result.yearly_data]
        typer.echo(json.dumps(payload, indent=2))


if __name__ == "__main__":
    app()
