"""Read-only reference data for the route planner and itinerary builder pickers."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from tourdesk.database import get_db
from tourdesk.models.location import Location, Route, RouteStopover
from tourdesk.models.resource import Activity, Hotel, Restaurant, Vehicle

router = APIRouter()


@router.get("/locations")
async def list_locations(
    type: str | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """Locations available as route stops, optionally filtered by DESTINATION / STOPOVER."""
    query = select(Location).options(selectinload(Location.country)).order_by(Location.name)
    if type:
        query = query.where(Location.type == type.upper())
    result = await db.execute(query)
    locations = result.scalars().all()

    return {
        "locations": [
            {
                "id": str(loc.id),
                "name": loc.name,
                "type": loc.type,
                "country": loc.country.name if loc.country else None,
                "altitude": loc.altitude,
                "description": loc.description,
            }
            for loc in locations
        ],
        "count": len(locations),
    }


@router.get("/routes")
async def list_routes(db: AsyncSession = Depends(get_db)):
    result = await db.execute(
        select(Route).options(
            selectinload(Route.origin),
            selectinload(Route.destination),
            selectinload(Route.stopovers).selectinload(RouteStopover.location),
        )
    )
    routes = result.scalars().all()

    return {
        "routes": [
            {
                "id": str(r.id),
                "origin_id": str(r.origin_id),
                "origin": r.origin.name,
                "destination_id": str(r.destination_id),
                "destination": r.destination.name,
                "distance_km": r.distance_km,
                "duration_mins": r.duration_mins,
                "description": r.description,
                "stopovers": [
                    {"location": s.location.name, "order": s.order, "is_lunch_stop": s.is_lunch_stop}
                    for s in r.stopovers
                ],
            }
            for r in routes
        ],
    }


@router.get("/resources")
async def list_resources(db: AsyncSession = Depends(get_db)):
    """Everything the itinerary builder can price: hotels with rates, vehicles, activities, restaurants."""
    hotels = (
        await db.execute(select(Hotel).options(selectinload(Hotel.rates)).order_by(Hotel.name))
    ).scalars().all()
    vehicles = (await db.execute(select(Vehicle).order_by(Vehicle.name))).scalars().all()
    activities = (await db.execute(select(Activity).order_by(Activity.name))).scalars().all()
    restaurants = (await db.execute(select(Restaurant).order_by(Restaurant.name))).scalars().all()

    return {
        "hotels": [
            {
                "id": str(h.id),
                "name": h.name,
                "location_id": str(h.location_id) if h.location_id else None,
                "rates": [
                    {
                        "id": str(r.id),
                        "room_type": r.room_type,
                        "meal_plan": r.meal_plan,
                        "inclusions": r.inclusions,
                        "cost_price": float(r.cost_price),
                        "sales_price": float(r.sales_price),
                    }
                    for r in h.rates
                ],
            }
            for h in hotels
        ],
        "vehicles": [
            {
                "id": str(v.id),
                "name": v.name,
                "type": v.type,
                "cost_per_day": float(v.cost_per_day),
                "sales_per_day": float(v.sales_per_day),
            }
            for v in vehicles
        ],
        "activities": [
            {
                "id": str(a.id),
                "name": a.name,
                "location_id": str(a.location_id) if a.location_id else None,
                "cost_price": float(a.cost_price),
                "sales_price": float(a.sales_price),
            }
            for a in activities
        ],
        "restaurants": [
            {
                "id": str(r.id),
                "name": r.name,
                "cuisine": r.cuisine,
                "cost_price": float(r.cost_price),
                "sales_price": float(r.sales_price),
            }
            for r in restaurants
        ],
    }
