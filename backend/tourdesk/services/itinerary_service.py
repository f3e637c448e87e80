"""Itinerary builder: adds priced items to days and closes out planning."""

import logging
import uuid
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from tourdesk.models.resource import Activity, Hotel, Restaurant, Vehicle
from tourdesk.models.tour import ItineraryDay, ItineraryItem, Tour

logger = logging.getLogger(__name__)


class ItineraryService:
    """Resolves resource pricing into itinerary items."""

    async def add_item_to_day(
        self,
        db: AsyncSession,
        day_id: uuid.UUID,
        item_type: str,
        resource_id: uuid.UUID,
        rate_id: uuid.UUID | None = None,
    ) -> ItineraryItem:
        day = await db.get(ItineraryDay, day_id)
        if not day:
            raise ValueError("Itinerary day not found")

        priced = await self._price_resource(db, item_type, resource_id, rate_id)
        if priced is None:
            raise ValueError("Resource not found")
        title, description, cost_price, sales_price = priced

        max_order = await db.scalar(
            select(func.max(ItineraryItem.order)).where(ItineraryItem.day_id == day_id)
        )

        item = ItineraryItem(
            day_id=day_id,
            type=item_type,
            title=title,
            description=description,
            cost_price=cost_price,
            sales_price=sales_price,
            order=(max_order + 1) if max_order is not None else 0,
            hotel_id=resource_id if item_type == "ACCOMMODATION" else None,
            activity_id=resource_id if item_type == "ACTIVITY" else None,
            vehicle_id=resource_id if item_type == "TRANSFER" else None,
            restaurant_id=resource_id if item_type == "MEAL" else None,
        )
        db.add(item)
        await db.commit()
        await db.refresh(item)
        logger.info(f"Added {item_type} '{title}' to day {day.day_number} of tour {day.tour_id}")
        return item

    async def delete_item(self, db: AsyncSession, item_id: uuid.UUID) -> bool:
        item = await db.get(ItineraryItem, item_id)
        if not item:
            return False
        await db.delete(item)
        await db.commit()
        return True

    async def complete_planning(self, db: AsyncSession, tour_id: uuid.UUID) -> Tour:
        """Mark the itinerary as designed."""
        tour = await db.get(Tour, tour_id)
        if not tour:
            raise ValueError("Tour not found")
        tour.status = "DESIGNED"
        await db.commit()
        await db.refresh(tour)
        return tour

    async def _price_resource(
        self,
        db: AsyncSession,
        item_type: str,
        resource_id: uuid.UUID,
        rate_id: uuid.UUID | None,
    ) -> tuple[str, str, Decimal, Decimal] | None:
        """Return (title, description, cost, sales) for the resource, or None if it does not exist."""
        if item_type == "ACCOMMODATION":
            result = await db.execute(
                select(Hotel).where(Hotel.id == resource_id).options(selectinload(Hotel.rates))
            )
            hotel = result.scalar_one_or_none()
            if not hotel:
                return None
            rate = next((r for r in hotel.rates if r.id == rate_id), None)
            if rate is None and hotel.rates:
                rate = hotel.rates[0]
            if rate is None:
                return hotel.name, "Standard Room", Decimal("0"), Decimal("0")
            description = f"{rate.room_type} ({rate.meal_plan})"
            if rate.inclusions:
                description += f" - {rate.inclusions}"
            return hotel.name, description, rate.cost_price, rate.sales_price

        if item_type == "ACTIVITY":
            activity = await db.get(Activity, resource_id)
            if not activity:
                return None
            return activity.name, activity.details or "", activity.cost_price, activity.sales_price

        if item_type == "TRANSFER":
            vehicle = await db.get(Vehicle, resource_id)
            if not vehicle:
                return None
            return vehicle.name, f"{vehicle.type} - Full Day Disposal", vehicle.cost_per_day, vehicle.sales_per_day

        if item_type == "MEAL":
            restaurant = await db.get(Restaurant, resource_id)
            if not restaurant:
                return None
            description = f"{restaurant.cuisine} Cuisine" if restaurant.cuisine else "Meal Stop"
            return restaurant.name, description, restaurant.cost_price, restaurant.sales_price

        return None


itinerary_service = ItineraryService()
