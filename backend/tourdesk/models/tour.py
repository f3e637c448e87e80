import uuid
from datetime import date as date_type
from datetime import datetime
from decimal import Decimal

from sqlalchemy import Date, DateTime, ForeignKey, Integer, Numeric, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tourdesk.database import Base

TOUR_STATUSES = ("DRAFT", "DESIGNED", "CONFIRMED", "ACTIVE", "COMPLETED")
ITEM_TYPES = ("ACCOMMODATION", "ACTIVITY", "TRANSFER", "MEAL")


class Tour(Base):
    __tablename__ = "tours"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    client_name: Mapped[str | None] = mapped_column(String(255))
    status: Mapped[str] = mapped_column(String(20), default="DRAFT")
    start_location: Mapped[str | None] = mapped_column(String(100))
    destination: Mapped[str | None] = mapped_column(String(100))
    start_date: Mapped[date_type] = mapped_column(Date, nullable=False)
    end_date: Mapped[date_type | None] = mapped_column(Date)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    itinerary: Mapped[list["ItineraryDay"]] = relationship(
        back_populates="tour", cascade="all, delete-orphan", order_by="ItineraryDay.day_number"
    )
    financials: Mapped["TourFinancials"] = relationship(
        back_populates="tour", cascade="all, delete-orphan", uselist=False
    )
    participant_summary: Mapped["ParticipantSummary"] = relationship(
        back_populates="tour", cascade="all, delete-orphan", uselist=False
    )


class ParticipantSummary(Base):
    __tablename__ = "participant_summaries"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    tour_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("tours.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    total_pax: Mapped[int] = mapped_column(Integer, default=0)
    boys: Mapped[int | None] = mapped_column(Integer)
    girls: Mapped[int | None] = mapped_column(Integer)
    non_veg: Mapped[int | None] = mapped_column(Integer)

    tour: Mapped["Tour"] = relationship(back_populates="participant_summary")


class TourFinancials(Base):
    __tablename__ = "tour_financials"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    tour_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("tours.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    budget: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=0)
    profit_margin: Mapped[Decimal] = mapped_column(Numeric(6, 2), default=0)
    selling_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=0)
    total_collected: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=0)
    # Which field the operator edited last: "margin" derives the price, "manual" pins it
    price_source: Mapped[str] = mapped_column(String(10), default="margin")
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    tour: Mapped["Tour"] = relationship(back_populates="financials")


class ItineraryDay(Base):
    __tablename__ = "itinerary_days"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    tour_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("tours.id", ondelete="CASCADE"), nullable=False)
    day_number: Mapped[int] = mapped_column(Integer, nullable=False)
    date: Mapped[date_type | None] = mapped_column(Date)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)

    tour: Mapped["Tour"] = relationship(back_populates="itinerary")
    items: Mapped[list["ItineraryItem"]] = relationship(
        back_populates="day", cascade="all, delete-orphan", order_by="ItineraryItem.order"
    )


class ItineraryItem(Base):
    __tablename__ = "itinerary_items"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    day_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("itinerary_days.id", ondelete="CASCADE"), nullable=False
    )
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    cost_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=0)
    sales_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=0)
    order: Mapped[int] = mapped_column(Integer, default=0)
    hotel_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("hotels.id", ondelete="SET NULL"))
    activity_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("activities.id", ondelete="SET NULL"))
    vehicle_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("vehicles.id", ondelete="SET NULL"))
    restaurant_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("restaurants.id", ondelete="SET NULL")
    )

    day: Mapped["ItineraryDay"] = relationship(back_populates="items")
