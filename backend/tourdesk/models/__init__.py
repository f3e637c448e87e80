from tourdesk.models.location import Country, Location, Route, RouteStopover
from tourdesk.models.resource import Activity, Hotel, HotelRoomRate, Restaurant, Vehicle
from tourdesk.models.tour import (
    ItineraryDay,
    ItineraryItem,
    ParticipantSummary,
    Tour,
    TourFinancials,
)

__all__ = [
    "Activity",
    "Country",
    "Hotel",
    "HotelRoomRate",
    "ItineraryDay",
    "ItineraryItem",
    "Location",
    "ParticipantSummary",
    "Restaurant",
    "Route",
    "RouteStopover",
    "Tour",
    "TourFinancials",
    "Vehicle",
]
