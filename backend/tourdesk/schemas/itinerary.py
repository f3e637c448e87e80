import uuid

from pydantic import BaseModel, Field

MAX_NIGHTS_PER_STOP = 365
MAX_STOPS = 60


class StopRequest(BaseModel):
    location_id: uuid.UUID
    nights: int = Field(le=MAX_NIGHTS_PER_STOP)


class GenerateRouteRequest(BaseModel):
    stops: list[StopRequest] = Field(max_length=MAX_STOPS)


class RouteGenerationResponse(BaseModel):
    success: bool
    days_created: int
    skipped_location_ids: list[uuid.UUID]
    warnings: list[str]


class AddItemRequest(BaseModel):
    type: str
    resource_id: uuid.UUID
    rate_id: uuid.UUID | None = None
