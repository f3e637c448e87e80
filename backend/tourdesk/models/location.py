"""Geography reference data: countries, locations and the known routes between them."""

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tourdesk.database import Base


class Country(Base):
    __tablename__ = "countries"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    locations: Mapped[list["Location"]] = relationship(back_populates="country")


class Location(Base):
    __tablename__ = "locations"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    country_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("countries.id"))
    type: Mapped[str] = mapped_column(String(20), default="DESTINATION")  # DESTINATION | STOPOVER
    altitude: Mapped[int | None] = mapped_column(Integer)
    description: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    country: Mapped["Country"] = relationship(back_populates="locations")


class Route(Base):
    __tablename__ = "routes"
    __table_args__ = (UniqueConstraint("origin_id", "destination_id", name="uq_routes_origin_destination"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    origin_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("locations.id", ondelete="CASCADE"), nullable=False)
    destination_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("locations.id", ondelete="CASCADE"), nullable=False
    )
    distance_km: Mapped[int | None] = mapped_column(Integer)
    duration_mins: Mapped[int | None] = mapped_column(Integer)
    description: Mapped[str | None] = mapped_column(Text)

    origin: Mapped["Location"] = relationship(foreign_keys=[origin_id])
    destination: Mapped["Location"] = relationship(foreign_keys=[destination_id])
    stopovers: Mapped[list["RouteStopover"]] = relationship(
        back_populates="route", cascade="all, delete-orphan", order_by="RouteStopover.order"
    )


class RouteStopover(Base):
    __tablename__ = "route_stopovers"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    route_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("routes.id", ondelete="CASCADE"), nullable=False)
    location_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("locations.id"), nullable=False)
    order: Mapped[int] = mapped_column(Integer, nullable=False)
    is_lunch_stop: Mapped[bool] = mapped_column(Boolean, default=False)

    route: Mapped["Route"] = relationship(back_populates="stopovers")
    location: Mapped["Location"] = relationship()
