"""Tour service: tour briefs and lifecycle status."""

import logging
import uuid
from datetime import date, timedelta
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from tourdesk.config import settings
from tourdesk.models.tour import ItineraryDay, ParticipantSummary, Tour, TourFinancials

logger = logging.getLogger(__name__)


def _tour_query():
    return select(Tour).options(
        selectinload(Tour.itinerary).selectinload(ItineraryDay.items),
        selectinload(Tour.financials),
        selectinload(Tour.participant_summary),
    )


class TourService:

    async def create_tour_brief(
        self,
        db: AsyncSession,
        name: str,
        start_date: date,
        duration: int,
        total_pax: int,
        client_name: str | None = None,
        boys: int | None = None,
        girls: int | None = None,
        budget_per_pax: Decimal = Decimal("0"),
    ) -> Tour:
        """Create a draft tour with its opening financials and participant summary."""
        tour = Tour(
            name=name,
            client_name=client_name,
            status="DRAFT",
            start_location=settings.default_start_location,
            destination=settings.default_destination,
            start_date=start_date,
            end_date=start_date + timedelta(days=duration),
            duration=duration,
        )
        tour.financials = TourFinancials(
            budget=budget_per_pax * total_pax,
            selling_price=Decimal("0"),
            profit_margin=Decimal(str(settings.default_profit_margin)),
            price_source="margin",
        )
        tour.participant_summary = ParticipantSummary(
            total_pax=total_pax,
            boys=boys,
            girls=girls,
            non_veg=total_pax,
        )
        db.add(tour)
        await db.commit()
        logger.info(f"Created tour brief '{name}' ({tour.id}) for {total_pax} pax")
        return await self.get_tour(db, tour.id)

    async def get_tour(self, db: AsyncSession, tour_id: uuid.UUID) -> Tour:
        result = await db.execute(_tour_query().where(Tour.id == tour_id))
        tour = result.scalar_one_or_none()
        if not tour:
            raise ValueError("Tour not found")
        return tour

    async def list_tours(
        self, db: AsyncSession, status: str | None = None, page: int = 1, limit: int = 20
    ) -> list[Tour]:
        query = select(Tour).order_by(Tour.updated_at.desc(), Tour.created_at.desc())
        if status:
            query = query.where(Tour.status == status)
        query = query.offset((page - 1) * limit).limit(limit)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def update_status(self, db: AsyncSession, tour_id: uuid.UUID, status: str) -> Tour:
        tour = await db.get(Tour, tour_id)
        if not tour:
            raise ValueError("Tour not found")
        previous = tour.status
        tour.status = status
        await db.commit()
        logger.info(f"Tour {tour_id} status {previous} -> {status}")
        return await self.get_tour(db, tour_id)

    async def delete_tour(self, db: AsyncSession, tour_id: uuid.UUID) -> bool:
        result = await db.execute(_tour_query().where(Tour.id == tour_id))
        tour = result.scalar_one_or_none()
        if not tour:
            return False
        await db.delete(tour)
        await db.commit()
        return True


tour_service = TourService()
