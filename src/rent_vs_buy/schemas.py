from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, Mapping, Tuple

# Input record field -> key used by the rendering layer's data contract.
CONTRACT_KEYS: Dict[str, str] = {
    "home_price": "homePrice",
    "down_payment_percent": "downPaymentPercent",
    "interest_rate": "interestRate",
    "loan_term": "loanTerm",
    "monthly_rent": "monthlyRent",
    "ownership_costs_rate": "ownershipCostsRate",
    "market_growth_rate": "marketGrowthRate",
    "investment_return": "investmentReturn",
    "years_to_compare": "yearsToCompare",
}


@dataclass(frozen=True)
class ProjectionInputs:
    """Financial assumptions for one buy-versus-rent projection.

    Rates are percentages (6.5 means 6.5 % per year). The record is frozen so
    it can key a cache of projections.
    """

    home_price: float
    down_payment_percent: float
    interest_rate: float  # nominal annual percentage, e.g., 6.5
    loan_term: int  # years
    monthly_rent: float
    ownership_costs_rate: float  # tax + HOA + insurance + upkeep, % of home value
    market_growth_rate: float  # home appreciation and rent inflation
    investment_return: float
    years_to_compare: int

    @property
    def down_payment(self) -> float:
        return self.home_price * self.down_payment_percent / 100

    @property
    def loan_amount(self) -> float:
        return self.home_price - self.down_payment

    @property
    def number_of_payments(self) -> int:
        return self.loan_term * 12

    @property
    def annual_ownership_cost(self) -> float:
        """Year-0 ownership costs at the purchase price."""
        return self.home_price * self.ownership_costs_rate / 100

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProjectionInputs":
        """Build from either snake_case field names or camelCase contract keys."""
        values = {}
        missing = []
        for name, key in CONTRACT_KEYS.items():
            if name in data:
                values[name] = data[name]
            elif key in data:
                values[name] = data[key]
            else:
                missing.append(key)
        if missing:
            raise ValueError(f"missing input keys: {', '.join(missing)}")
        for name in ("loan_term", "years_to_compare"):
            values[name] = int(values[name])
        return cls(**values)

    def to_dict(self) -> Dict[str, float]:
        return {CONTRACT_KEYS[f.name]: getattr(self, f.name) for f in fields(self)}


DEFAULT_INPUTS = ProjectionInputs(
    home_price=400_000,
    down_payment_percent=20,
    interest_rate=6.5,
    loan_term=30,
    monthly_rent=2_000,
    ownership_costs_rate=2.7,
    market_growth_rate=3,
    investment_return=7,
    years_to_compare=10,
)


@dataclass(frozen=True)
class InputBound:
    minimum: float
    maximum: float
    step: float


# Ranges of the interactive controls that feed the engine.
INPUT_BOUNDS: Dict[str, InputBound] = {
    "home_price": InputBound(100_000, 2_000_000, 10_000),
    "down_payment_percent": InputBound(0, 50, 1),
    "interest_rate": InputBound(2, 12, 0.1),
    "loan_term": InputBound(10, 30, 5),
    "monthly_rent": InputBound(500, 10_000, 100),
    "ownership_costs_rate": InputBound(0, 6, 0.1),
    "market_growth_rate": InputBound(-2, 10, 0.5),
    "investment_return": InputBound(0, 15, 0.5),
    "years_to_compare": InputBound(1, 30, 1),
}


@dataclass(frozen=True)
class MortgagePayment:
    month: int
    interest: float
    principal: float
    balance: float  # remaining after this payment

    @property
    def amount(self) -> float:
        return self.interest + self.principal


@dataclass(frozen=True)
class YearlySnapshot:
    year: int
    buy_cost: int  # cumulative cash spent buying, net of equity
    rent_cost: int  # cumulative rent paid, net of investment gain
    home_value: float = 0.0
    loan_balance: float = 0.0
    equity: float = 0.0
    investment_balance: float = 0.0
    rent_paid: float = 0.0

    def to_dict(self) -> Dict[str, int]:
        return {"year": self.year, "buyCost": self.buy_cost, "rentCost": self.rent_cost}


@dataclass(frozen=True)
class ProjectionResult:
    inputs: ProjectionInputs
    monthly_mortgage: float
    final_buy_cost: int
    final_rent_cost: int
    difference: int
    is_buying_cheaper: bool
    equity_built: float
    down_payment: float
    total_mortgage_paid: float
    total_ownership_costs_paid: float
    total_buy_cash_out: float
    total_rent_paid: float
    net_investment_gain: float
    total_interest_paid: float
    total_principal_paid: float
    yearly_data: Tuple[YearlySnapshot, ...] = field(default_factory=tuple)

    @property
    def years_to_compare(self) -> int:
        return self.inputs.years_to_compare

    @property
    def cheaper_option(self) -> str:
        return "buying" if self.is_buying_cheaper else "renting"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "inputs": self.inputs.to_dict(),
            "yearlyData": [snap.to_dict() for snap in self.yearly_data],
            "monthlyMortgage": self.monthly_mortgage,
            "finalBuyCost": self.final_buy_cost,
            "finalRentCost": self.final_rent_cost,
            "difference": self.difference,
            "isBuyingCheaper": self.is_buying_cheaper,
            "equityBuilt": self.equity_built,
            "downPayment": self.down_payment,
            "totalMortgagePaid": self.total_mortgage_paid,
            "totalOwnershipCostsPaid": self.total_ownership_costs_paid,
            "totalBuyCashOut": self.total_buy_cash_out,
            "totalRentPaid": self.total_rent_paid,
            "netInvestmentGain": self.net_investment_gain,
            "totalInterestPaid": self.total_interest_paid,
            "totalPrincipalPaid": self.total_principal_paid,
        }


def snapshot_details(snapshot: YearlySnapshot) -> Dict[str, Any]:
    """Every field of a snapshot, unrounded detail included."""
    return asdict(snapshot)
