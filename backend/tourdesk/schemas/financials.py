from pydantic import BaseModel, Field


class SaveFinancialsRequest(BaseModel):
    """Financials form fields; numerics arrive as typed by the operator and are coerced server-side."""
    tour_id: str | None = Field(None, alias="tourId")
    budget: str | float | None = None
    profit_margin: str | float | None = Field(None, alias="profitMargin")
    selling_price: str | float | None = Field(None, alias="sellingPrice")
    last_edited: str | None = Field(None, alias="lastEdited")  # margin | price

    model_config = {"populate_by_name": True}


class FinancialSummaryResponse(BaseModel):
    total_base_cost: float
    breakdown: dict[str, float]
    total_sales_value: float
    profit_margin: float
    recommended_price: float
    final_selling_price: float
    price_source: str
    net_profit: float
    actual_margin: float
    total_pax: int
    cost_per_pax: float
    budget: float
    over_budget_by: float
    warnings: list[str]
