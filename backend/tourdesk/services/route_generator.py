"""Route generator: turns an ordered list of stops into itinerary days for a tour."""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import timedelta

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from tourdesk.models.location import Location, Route, RouteStopover
from tourdesk.models.tour import ItineraryDay, ItineraryItem, Tour

logger = logging.getLogger(__name__)


@dataclass
class Stop:
    location_id: uuid.UUID
    nights: int


@dataclass
class RouteGenerationResult:
    days_created: int
    skipped_location_ids: list[uuid.UUID] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "success": True,
            "days_created": self.days_created,
            "skipped_location_ids": [str(i) for i in self.skipped_location_ids],
            "warnings": self.warnings,
        }


def describe_transfer(route: Route, destination_name: str) -> str:
    """Text for the transfer item that opens a stop reached by a known route."""
    if route.description:
        description = route.description
    elif route.duration_mins:
        description = f"Travel to {destination_name} ({round(route.duration_mins / 60)} hrs)"
    else:
        description = f"Travel to {destination_name} (Direct)"

    if route.stopovers:
        via = ", ".join(
            f"{s.location.name} (lunch)" if s.is_lunch_stop else s.location.name
            for s in route.stopovers
        )
        description = f"{description} Via {via}"
    return description


def day_title(location_name: str, night_index: int) -> str:
    return f"Arrival in {location_name}" if night_index == 0 else f"Explore {location_name}"


class RouteGeneratorService:
    """Builds a tour's day-by-day skeleton from (location, nights) stops."""

    async def generate_route(
        self, db: AsyncSession, tour_id: uuid.UUID, stops: list[Stop]
    ) -> RouteGenerationResult:
        """
        Replace the tour's itinerary with one day per night across all stops.

        Unknown locations are skipped and reported; every other write happens
        in one transaction so a failure leaves the previous itinerary intact.
        """
        tour = await db.get(Tour, tour_id)
        if not tour:
            raise ValueError("Tour not found")

        result = RouteGenerationResult(days_created=0)
        total_nights = sum(s.nights for s in stops)
        if total_nights != tour.duration:
            result.warnings.append(
                f"Stops cover {total_nights} nights but the tour lasts {tour.duration} days"
            )

        try:
            locations = await self._load_locations(db, [s.location_id for s in stops])

            await db.execute(
                delete(ItineraryItem).where(
                    ItineraryItem.day_id.in_(select(ItineraryDay.id).where(ItineraryDay.tour_id == tour_id))
                )
            )
            await db.execute(delete(ItineraryDay).where(ItineraryDay.tour_id == tour_id))

            day_number = 1
            previous_id: uuid.UUID | None = None
            for stop in stops:
                location = locations.get(stop.location_id)
                if not location:
                    logger.warning(f"Route for tour {tour_id}: skipping unknown location {stop.location_id}")
                    result.skipped_location_ids.append(stop.location_id)
                    previous_id = stop.location_id
                    continue

                transfer_description = None
                if previous_id:
                    route = await self._find_route(db, previous_id, location.id)
                    if route:
                        transfer_description = describe_transfer(route, location.name)

                for night in range(stop.nights):
                    day = ItineraryDay(
                        tour_id=tour_id,
                        day_number=day_number,
                        date=tour.start_date + timedelta(days=day_number - 1),
                        title=day_title(location.name, night),
                    )
                    db.add(day)
                    await db.flush()

                    if night == 0 and transfer_description:
                        db.add(ItineraryItem(
                            day_id=day.id,
                            type="TRANSFER",
                            order=0,
                            title=f"Travel to {location.name}",
                            description=transfer_description,
                        ))
                    elif day_number == 1:
                        db.add(ItineraryItem(
                            day_id=day.id,
                            type="TRANSFER",
                            order=0,
                            title="Arrival & Pickup",
                            description="Airport pickup and transfer to hotel.",
                        ))
                    day_number += 1

                previous_id = location.id

            await db.commit()
        except SQLAlchemyError:
            await db.rollback()
            logger.error(f"Route generation failed for tour {tour_id}", exc_info=True)
            raise

        result.days_created = day_number - 1
        logger.info(
            f"Generated {result.days_created} days for tour {tour_id} "
            f"({len(result.skipped_location_ids)} stops skipped)"
        )
        return result

    async def _load_locations(self, db: AsyncSession, ids: list[uuid.UUID]) -> dict[uuid.UUID, Location]:
        rows = await db.execute(select(Location).where(Location.id.in_(list(set(ids)))))
        return {loc.id: loc for loc in rows.scalars().all()}

    async def _find_route(self, db: AsyncSession, origin_id: uuid.UUID, destination_id: uuid.UUID) -> Route | None:
        row = await db.execute(
            select(Route)
            .where(Route.origin_id == origin_id, Route.destination_id == destination_id)
            .options(selectinload(Route.stopovers).selectinload(RouteStopover.location))
        )
        return row.scalar_one_or_none()


route_generator = RouteGeneratorService()
