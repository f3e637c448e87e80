"""Financials service: prices a tour from its itinerary and persists the agreed figures."""

import logging
import uuid
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from tourdesk.config import settings
from tourdesk.models.tour import ItineraryDay, Tour, TourFinancials
from tourdesk.services.pricing import FinancialSummary, calculate_financials, resolve_price_source

logger = logging.getLogger(__name__)


class FinancialsService:

    async def get_summary(
        self, db: AsyncSession, tour_id: uuid.UUID, margin: Decimal | None = None
    ) -> FinancialSummary:
        """
        Price the tour from its current itinerary.

        Passing `margin` previews a slider change: the margin takes ownership
        of the price, so any manually entered selling price is ignored.
        """
        result = await db.execute(
            select(Tour)
            .where(Tour.id == tour_id)
            .options(
                selectinload(Tour.itinerary).selectinload(ItineraryDay.items),
                selectinload(Tour.financials),
                selectinload(Tour.participant_summary),
            )
        )
        tour = result.scalar_one_or_none()
        if not tour:
            raise ValueError("Tour not found")

        fin = tour.financials
        items = [item for day in tour.itinerary for item in day.items]
        total_pax = tour.participant_summary.total_pax if tour.participant_summary else 0

        if margin is not None:
            profit_margin, price_source = margin, "margin"
        elif fin:
            profit_margin, price_source = fin.profit_margin, fin.price_source
        else:
            profit_margin, price_source = Decimal(str(settings.default_profit_margin)), "margin"

        return calculate_financials(
            items,
            profit_margin=profit_margin,
            saved_selling_price=fin.selling_price if fin else 0,
            price_source=price_source,
            total_pax=total_pax,
            budget=fin.budget if fin else 0,
        )

    async def save_financials(
        self,
        db: AsyncSession,
        tour_id: uuid.UUID,
        budget: Decimal,
        profit_margin: Decimal,
        selling_price: Decimal,
        last_edited: str | None = None,
    ) -> TourFinancials:
        """Upsert the tour's financial record; one row per tour however often it is saved."""
        tour = await db.get(Tour, tour_id)
        if not tour:
            raise ValueError("Tour not found")

        logger.info(
            f"Saving financials for tour {tour_id}: budget={budget} "
            f"margin={profit_margin} price={selling_price}"
        )

        try:
            existing = await db.execute(select(TourFinancials).where(TourFinancials.tour_id == tour_id))
            fin = existing.scalar_one_or_none()
            if fin is None:
                fin = TourFinancials(tour_id=tour_id)
                db.add(fin)
            fin.budget = budget
            fin.profit_margin = profit_margin
            fin.selling_price = selling_price
            fin.price_source = resolve_price_source(last_edited, selling_price)
            await db.commit()
        except SQLAlchemyError:
            await db.rollback()
            logger.error(f"Financial save failed for tour {tour_id}", exc_info=True)
            raise

        await db.refresh(fin)
        return fin


financials_service = FinancialsService()
