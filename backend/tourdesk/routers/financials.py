"""Financials router: the pricing calculator and its save action."""

import logging
import uuid
from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tourdesk.database import get_db
from tourdesk.schemas.financials import FinancialSummaryResponse, SaveFinancialsRequest
from tourdesk.schemas.tour import TourFinancialsResponse
from tourdesk.services.financials_service import financials_service
from tourdesk.services.pricing import to_decimal

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/tours/{tour_id}/financials", response_model=FinancialSummaryResponse)
async def get_financials(
    tour_id: uuid.UUID,
    margin: float | None = Query(None, ge=0),
    db: AsyncSession = Depends(get_db),
):
    """Cost breakdown and pricing for a tour. `margin` previews a new profit margin without saving."""
    try:
        summary = await financials_service.get_summary(
            db, tour_id, margin=Decimal(str(margin)) if margin is not None else None
        )
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return summary.to_dict()


@router.post("/financials")
async def save_financials(req: SaveFinancialsRequest, db: AsyncSession = Depends(get_db)):
    """Persist budget, margin and selling price for a tour (upsert by tour)."""
    if not req.tour_id:
        raise HTTPException(status_code=400, detail="Missing Tour ID")
    try:
        tour_id = uuid.UUID(req.tour_id)
    except ValueError:
        raise HTTPException(status_code=404, detail="Tour not found")

    try:
        fin = await financials_service.save_financials(
            db,
            tour_id,
            budget=to_decimal(req.budget),
            profit_margin=to_decimal(req.profit_margin),
            selling_price=to_decimal(req.selling_price),
            last_edited=req.last_edited,
        )
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Database error")

    return {"success": True, "financials": TourFinancialsResponse.model_validate(fin)}
