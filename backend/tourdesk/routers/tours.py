import uuid

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from tourdesk.database import get_db
from tourdesk.models.tour import TOUR_STATUSES
from tourdesk.schemas.tour import CreateTourBrief, TourResponse, TourSummaryResponse, UpdateTourStatus
from tourdesk.services.pricing import to_decimal
from tourdesk.services.tour_service import tour_service

router = APIRouter()


@router.post("", status_code=201, response_model=TourResponse)
async def create_tour_brief(req: CreateTourBrief, db: AsyncSession = Depends(get_db)):
    """Step one of the tour wizard: name, dates and group size."""
    if not req.name.strip() or not req.start_date or not req.duration or not req.total_pax:
        raise HTTPException(status_code=422, detail="Missing required fields (Name, Date, Duration, Total Pax)")
    if req.duration < 1 or req.total_pax < 1:
        raise HTTPException(status_code=422, detail="Duration and Total Pax must be at least 1")

    tour = await tour_service.create_tour_brief(
        db,
        name=req.name.strip(),
        client_name=req.client_name,
        start_date=req.start_date,
        duration=req.duration,
        total_pax=req.total_pax,
        boys=req.boys,
        girls=req.girls,
        budget_per_pax=to_decimal(req.budget_per_pax),
    )
    return TourResponse.model_validate(tour)


@router.get("", response_model=list[TourSummaryResponse])
async def list_tours(
    status: str | None = Query(None),
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
):
    tours = await tour_service.list_tours(db, status=status, page=page, limit=limit)
    return [TourSummaryResponse.model_validate(t) for t in tours]


@router.get("/{tour_id}", response_model=TourResponse)
async def get_tour(tour_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    """Get a tour with its itinerary, financials and participants."""
    try:
        tour = await tour_service.get_tour(db, tour_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return TourResponse.model_validate(tour)


@router.patch("/{tour_id}/status", response_model=TourResponse)
async def update_tour_status(tour_id: uuid.UUID, req: UpdateTourStatus, db: AsyncSession = Depends(get_db)):
    if req.status not in TOUR_STATUSES:
        raise HTTPException(status_code=400, detail=f"Invalid status. Must be one of: {', '.join(TOUR_STATUSES)}")
    try:
        tour = await tour_service.update_status(db, tour_id, req.status)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return TourResponse.model_validate(tour)


@router.delete("/{tour_id}", status_code=204)
async def delete_tour(tour_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    """Delete a tour together with its itinerary and financials."""
    deleted = await tour_service.delete_tour(db, tour_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Tour not found")
