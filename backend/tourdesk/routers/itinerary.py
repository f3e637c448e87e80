"""Itinerary router: route generation and the day-by-day item builder."""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tourdesk.database import get_db
from tourdesk.models.tour import ITEM_TYPES
from tourdesk.schemas.itinerary import AddItemRequest, GenerateRouteRequest, RouteGenerationResponse
from tourdesk.schemas.tour import ItineraryItemResponse
from tourdesk.services.itinerary_service import itinerary_service
from tourdesk.services.route_generator import Stop, route_generator

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/{tour_id}/route", response_model=RouteGenerationResponse)
async def generate_route(tour_id: uuid.UUID, req: GenerateRouteRequest, db: AsyncSession = Depends(get_db)):
    """Replace the tour's itinerary with days generated from the planned stops."""
    if not req.stops:
        raise HTTPException(status_code=422, detail="Add at least one destination")
    if any(s.nights < 1 for s in req.stops):
        raise HTTPException(status_code=422, detail="Nights must be at least 1 for every stop")

    stops = [Stop(location_id=s.location_id, nights=s.nights) for s in req.stops]
    try:
        result = await route_generator.generate_route(db, tour_id, stops)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to generate itinerary.")
    except OverflowError:
        await db.rollback()
        raise HTTPException(status_code=422, detail="Itinerary dates fall outside the supported calendar")
    return result.to_dict()


@router.post("/days/{day_id}/items", status_code=201, response_model=ItineraryItemResponse)
async def add_item_to_day(day_id: uuid.UUID, req: AddItemRequest, db: AsyncSession = Depends(get_db)):
    """Add a hotel, activity, vehicle or restaurant to a day, priced from the resource."""
    if req.type not in ITEM_TYPES:
        raise HTTPException(status_code=422, detail=f"Invalid item type. Must be one of: {', '.join(ITEM_TYPES)}")
    try:
        item = await itinerary_service.add_item_to_day(db, day_id, req.type, req.resource_id, req.rate_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except SQLAlchemyError:
        logger.error(f"Failed to add item to day {day_id}", exc_info=True)
        await db.rollback()
        raise HTTPException(status_code=500, detail="Failed to add item")
    return ItineraryItemResponse.model_validate(item)


@router.delete("/items/{item_id}")
async def delete_item(item_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    deleted = await itinerary_service.delete_item(db, item_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Item not found")
    return {"deleted": True}


@router.post("/{tour_id}/complete-planning")
async def complete_planning(tour_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    """Close out itinerary planning; the tour moves to DESIGNED."""
    try:
        tour = await itinerary_service.complete_planning(db, tour_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"id": str(tour.id), "status": tour.status}
