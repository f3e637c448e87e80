"""Pricing calculator: aggregates itinerary costs and derives a selling price from a profit margin."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

ZERO = Decimal("0")
HUNDRED = Decimal("100")

PRICE_SOURCES = ("margin", "manual")


@dataclass
class PricedLine:
    """A priced unit outside the ORM, shaped like an ItineraryItem."""
    type: str
    cost_price: Decimal
    sales_price: Decimal = ZERO


@dataclass
class FinancialSummary:
    total_base_cost: Decimal
    breakdown: dict[str, Decimal]
    total_sales_value: Decimal
    profit_margin: Decimal
    recommended_price: Decimal
    final_selling_price: Decimal
    price_source: str
    net_profit: Decimal
    actual_margin: Decimal
    total_pax: int
    cost_per_pax: Decimal
    budget: Decimal
    over_budget_by: Decimal
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "total_base_cost": _money(self.total_base_cost),
            "breakdown": {k: _money(v) for k, v in self.breakdown.items()},
            "total_sales_value": _money(self.total_sales_value),
            "profit_margin": round(float(self.profit_margin), 2),
            "recommended_price": _money(self.recommended_price),
            "final_selling_price": _money(self.final_selling_price),
            "price_source": self.price_source,
            "net_profit": _money(self.net_profit),
            "actual_margin": round(float(self.actual_margin), 1),
            "total_pax": self.total_pax,
            "cost_per_pax": _money(self.cost_per_pax),
            "budget": _money(self.budget),
            "over_budget_by": _money(self.over_budget_by),
            "warnings": list(self.warnings),
        }


def to_decimal(value) -> Decimal:
    """Coerce form or ORM input to Decimal. Empty, malformed and non-finite values count as 0."""
    if value is None or isinstance(value, bool):
        return ZERO
    if isinstance(value, Decimal):
        return value if value.is_finite() else ZERO
    try:
        parsed = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return ZERO
    return parsed if parsed.is_finite() else ZERO


def resolve_price_source(last_edited: str | None, selling_price=ZERO) -> str:
    """
    Map the form's last-edited field to the stored price source.

    Without a last-edited hint a saved nonzero price is kept as typed.
    """
    if last_edited == "price":
        return "manual"
    if last_edited == "margin":
        return "margin"
    return "manual" if to_decimal(selling_price) > 0 else "margin"


def recommended_price(total_base_cost: Decimal, profit_margin: Decimal) -> Decimal:
    return total_base_cost * (1 + profit_margin / HUNDRED)


def calculate_financials(
    items: Iterable,
    profit_margin=ZERO,
    saved_selling_price=ZERO,
    price_source: str = "margin",
    total_pax: int | None = 0,
    budget=ZERO,
) -> FinancialSummary:
    """
    Price a tour from its itinerary items.

    `items` are ItineraryItem rows or PricedLine objects. A saved selling price
    is only honoured when the operator typed it last (price_source "manual");
    otherwise the margin owns the price and the recommendation is used.
    """
    margin = to_decimal(profit_margin)
    saved_price = to_decimal(saved_selling_price)
    budget_amount = to_decimal(budget)
    pax = total_pax or 0

    total_cost = ZERO
    total_sales = ZERO
    breakdown: dict[str, Decimal] = {}
    for item in items:
        cost = to_decimal(item.cost_price)
        total_cost += cost
        total_sales += to_decimal(item.sales_price)
        breakdown[item.type] = breakdown.get(item.type, ZERO) + cost

    recommended = recommended_price(total_cost, margin)

    if price_source == "manual" and saved_price > 0:
        final_price = saved_price
    else:
        price_source = "margin"
        final_price = recommended

    net_profit = final_price - total_cost
    actual_margin = net_profit / total_cost * HUNDRED if total_cost > 0 else ZERO
    cost_per_pax = final_price / pax if pax > 0 else ZERO

    warnings = []
    over_budget_by = ZERO
    if budget_amount > 0 and final_price > budget_amount:
        over_budget_by = final_price - budget_amount
        warnings.append(f"Price exceeds client budget by {_money(over_budget_by):,.2f}")
    if final_price < total_cost:
        warnings.append("Selling price is below total base cost")

    return FinancialSummary(
        total_base_cost=total_cost,
        breakdown=breakdown,
        total_sales_value=total_sales,
        profit_margin=margin,
        recommended_price=recommended,
        final_selling_price=final_price,
        price_source=price_source,
        net_profit=net_profit,
        actual_margin=actual_margin,
        total_pax=pax,
        cost_per_pax=cost_per_pax,
        budget=budget_amount,
        over_budget_by=over_budget_by,
        warnings=warnings,
    )


def _money(value: Decimal) -> float:
    return float(round(value, 2))
