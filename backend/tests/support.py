"""Shared fixtures: an in-memory SQLite database per test and small record factories."""

import unittest
import uuid
from datetime import date, timedelta
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import tourdesk.models  # noqa: F401
from tourdesk.database import Base
from tourdesk.models.location import Location, Route, RouteStopover
from tourdesk.models.tour import ItineraryDay, ItineraryItem, ParticipantSummary, Tour, TourFinancials


class DatabaseTestCase(unittest.IsolatedAsyncioTestCase):

    async def asyncSetUp(self):
        self.engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        self.session_factory = async_sessionmaker(self.engine, expire_on_commit=False)

    async def asyncTearDown(self):
        await self.engine.dispose()

    async def create_tour(
        self,
        duration: int = 3,
        start_date: date = date(2024, 1, 1),
        total_pax: int = 2,
        financials: dict | None = None,
    ) -> uuid.UUID:
        async with self.session_factory() as db:
            tour = Tour(
                name="Annapurna Circuit",
                status="DRAFT",
                start_date=start_date,
                end_date=start_date + timedelta(days=duration),
                duration=duration,
            )
            tour.participant_summary = ParticipantSummary(total_pax=total_pax)
            if financials is not None:
                tour.financials = TourFinancials(**financials)
            db.add(tour)
            await db.commit()
            return tour.id

    async def create_location(self, name: str, loc_type: str = "DESTINATION") -> uuid.UUID:
        async with self.session_factory() as db:
            loc = Location(name=name, type=loc_type)
            db.add(loc)
            await db.commit()
            return loc.id

    async def create_route(
        self,
        origin_id: uuid.UUID,
        destination_id: uuid.UUID,
        duration_mins: int | None = None,
        description: str | None = None,
        stopovers: list[tuple[uuid.UUID, bool]] | None = None,
    ) -> uuid.UUID:
        async with self.session_factory() as db:
            route = Route(
                origin_id=origin_id,
                destination_id=destination_id,
                duration_mins=duration_mins,
                description=description,
            )
            for order, (location_id, is_lunch) in enumerate(stopovers or [], start=1):
                route.stopovers.append(RouteStopover(location_id=location_id, order=order, is_lunch_stop=is_lunch))
            db.add(route)
            await db.commit()
            return route.id

    async def create_day_with_items(
        self, tour_id: uuid.UUID, day_number: int, items: list[tuple[str, str]]
    ) -> uuid.UUID:
        """items: (type, cost_price) pairs."""
        async with self.session_factory() as db:
            day = ItineraryDay(tour_id=tour_id, day_number=day_number, title=f"Day {day_number}")
            for order, (item_type, cost) in enumerate(items):
                day.items.append(ItineraryItem(
                    type=item_type,
                    title=f"{item_type.title()} {order}",
                    cost_price=Decimal(cost),
                    sales_price=Decimal(cost) * 2,
                    order=order,
                ))
            db.add(day)
            await db.commit()
            return day.id

    async def fetch_days(self, tour_id: uuid.UUID) -> list[ItineraryDay]:
        async with self.session_factory() as db:
            result = await db.execute(
                select(ItineraryDay).where(ItineraryDay.tour_id == tour_id).order_by(ItineraryDay.day_number)
            )
            days = list(result.scalars().all())
            for day in days:
                await db.refresh(day, ["items"])
            return days

    async def count(self, model, *criteria) -> int:
        query = select(func.count()).select_from(model)
        if criteria:
            query = query.where(*criteria)
        async with self.session_factory() as db:
            return await db.scalar(query)


class ApiTestCase(DatabaseTestCase):
    """Drives the FastAPI app in-process with get_db bound to the test database."""

    async def asyncSetUp(self):
        await super().asyncSetUp()
        import httpx

        from tourdesk.database import get_db
        from tourdesk.main import app

        async def override_get_db():
            async with self.session_factory() as session:
                yield session

        app.dependency_overrides[get_db] = override_get_db
        self.app = app
        self.client = httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test")

    async def asyncTearDown(self):
        await self.client.aclose()
        self.app.dependency_overrides.clear()
        await super().asyncTearDown()
