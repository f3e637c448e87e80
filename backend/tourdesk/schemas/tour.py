import uuid
from datetime import date as date_type
from datetime import datetime

from pydantic import BaseModel, Field


class CreateTourBrief(BaseModel):
    name: str = ""
    client_name: str | None = None
    start_date: date_type | None = None
    duration: int | None = None
    total_pax: int | None = None
    boys: int | None = Field(None, ge=0)
    girls: int | None = Field(None, ge=0)
    budget_per_pax: float | None = None


class UpdateTourStatus(BaseModel):
    status: str


class ItineraryItemResponse(BaseModel):
    id: uuid.UUID
    type: str
    title: str
    description: str | None
    cost_price: float
    sales_price: float
    order: int
    hotel_id: uuid.UUID | None = None
    activity_id: uuid.UUID | None = None
    vehicle_id: uuid.UUID | None = None
    restaurant_id: uuid.UUID | None = None

    model_config = {"from_attributes": True}


class ItineraryDayResponse(BaseModel):
    id: uuid.UUID
    day_number: int
    date: date_type | None
    title: str
    description: str | None
    items: list[ItineraryItemResponse]

    model_config = {"from_attributes": True}


class TourFinancialsResponse(BaseModel):
    budget: float
    profit_margin: float
    selling_price: float
    total_collected: float
    price_source: str

    model_config = {"from_attributes": True}


class ParticipantSummaryResponse(BaseModel):
    total_pax: int
    boys: int | None
    girls: int | None
    non_veg: int | None

    model_config = {"from_attributes": True}


class TourSummaryResponse(BaseModel):
    id: uuid.UUID
    name: str
    client_name: str | None
    status: str
    start_location: str | None
    destination: str | None
    start_date: date_type
    end_date: date_type | None
    duration: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class TourResponse(TourSummaryResponse):
    itinerary: list[ItineraryDayResponse]
    financials: TourFinancialsResponse | None
    participant_summary: ParticipantSummaryResponse | None
