"""Seed script for the TourDesk development database."""

import asyncio
from datetime import date, timedelta
from decimal import Decimal

from sqlalchemy import select

from tourdesk.database import async_session_factory
from tourdesk.models.location import Country, Location, Route, RouteStopover
from tourdesk.models.resource import Activity, Hotel, HotelRoomRate, Restaurant, Vehicle
from tourdesk.models.tour import ItineraryDay, ItineraryItem, ParticipantSummary, Tour, TourFinancials

# ── Locations ──────────────────────────────────────────────────────────────────

LOCATIONS = [
    # (name, type, altitude, description)
    ("Kathmandu", "DESTINATION", 1400, "Capital city rich in history and temples."),
    ("Pokhara", "DESTINATION", 822, "City of lakes and gateway to Annapurna."),
    ("Chitwan", "DESTINATION", 415, "Famous for wildlife safaris and Tharu culture."),
    ("Malekhu", "STOPOVER", 400, "Popular highway stop famous for local fish."),
    ("Mugling", "STOPOVER", 300, "Major transit junction connecting Kathmandu, Pokhara, and Chitwan."),
]

# ── Routes ─────────────────────────────────────────────────────────────────────

ROUTES = [
    {
        "origin": "Kathmandu",
        "destination": "Pokhara",
        "distance_km": 200,
        "duration_mins": 420,
        "description": "Prithvi Highway route offering scenic views of Trishuli river.",
        "stopovers": [("Malekhu", True), ("Mugling", False)],
    },
    {
        "origin": "Pokhara",
        "destination": "Chitwan",
        "distance_km": 150,
        "duration_mins": 300,
        "description": "Route via Mugling and Narayanghat.",
        "stopovers": [("Mugling", True)],
    },
]


async def seed():
    async with async_session_factory() as db:
        # Check if already seeded
        result = await db.execute(select(Location).limit(1))
        if result.scalar_one_or_none():
            print("Database already seeded. Skipping.")
            return

        nepal = Country(name="Nepal", description="The land of Himalayas and Buddha.")
        db.add(nepal)
        await db.flush()

        # ── Locations ──
        locations = {}
        for name, loc_type, altitude, description in LOCATIONS:
            loc = Location(
                name=name,
                country_id=nepal.id,
                type=loc_type,
                altitude=altitude,
                description=description,
            )
            db.add(loc)
            locations[name] = loc
        await db.flush()
        print(f"Created {len(LOCATIONS)} locations")

        # ── Routes ──
        for r in ROUTES:
            route = Route(
                origin_id=locations[r["origin"]].id,
                destination_id=locations[r["destination"]].id,
                distance_km=r["distance_km"],
                duration_mins=r["duration_mins"],
                description=r["description"],
            )
            for order, (stop_name, is_lunch) in enumerate(r["stopovers"], start=1):
                route.stopovers.append(RouteStopover(
                    location_id=locations[stop_name].id,
                    order=order,
                    is_lunch_stop=is_lunch,
                ))
            db.add(route)
        print(f"Created {len(ROUTES)} routes")

        # ── Resources ──
        shanker = Hotel(name="Hotel Shanker", location_id=locations["Kathmandu"].id, contact_info="01-4410151")
        shanker.rates.append(HotelRoomRate(
            room_type="Standard", meal_plan="BB", inclusions="Buffet Breakfast",
            cost_price=Decimal("8000"), sales_price=Decimal("10000"),
        ))
        temple_tree = Hotel(name="Temple Tree Resort", location_id=locations["Pokhara"].id, contact_info="061-460021")
        temple_tree.rates.append(HotelRoomRate(
            room_type="Standard", meal_plan="BB", inclusions="Welcome Drink, Breakfast",
            cost_price=Decimal("9000"), sales_price=Decimal("11500"),
        ))
        scorpio = Vehicle(
            name="Mahindra Scorpio", type="SUV", plate_number="Ba 12 Cha 3456",
            cost_per_day=Decimal("5000"), sales_per_day=Decimal("6500"), details="4WD SUV with AC.",
        )
        paragliding = Activity(
            name="Paragliding", location_id=locations["Pokhara"].id, details="30 min tandem flight.",
            cost_price=Decimal("6000"), sales_price=Decimal("8500"),
        )
        blue_heaven = Restaurant(
            name="Blue Heaven Restaurant", location_id=locations["Malekhu"].id, cuisine="Nepali, Fish",
            details="Famous for local river fish curry.",
            cost_price=Decimal("500"), sales_price=Decimal("700"),
        )
        db.add_all([shanker, temple_tree, scorpio, paragliding, blue_heaven])
        await db.flush()
        print("Created 2 hotels, 1 vehicle, 1 activity, 1 restaurant")

        # ── Demo tour ──
        start = date.today()
        tour = Tour(
            name="Nepal Golden Triangle - Demo",
            client_name="John Doe",
            status="DRAFT",
            start_location="Kathmandu",
            destination="Pokhara",
            start_date=start,
            end_date=start + timedelta(days=5),
            duration=5,
        )
        tour.financials = TourFinancials(
            budget=Decimal("50000"), selling_price=Decimal("65000"),
            profit_margin=Decimal("30"), price_source="manual",
        )
        tour.participant_summary = ParticipantSummary(total_pax=2, boys=2, non_veg=2)

        day1 = ItineraryDay(day_number=1, date=start, title="Arrival in Kathmandu")
        day1.items.extend([
            ItineraryItem(
                type="TRANSFER", order=0, title="Airport Pickup", description="Transfer to Hotel via Private Car",
                vehicle_id=scorpio.id, cost_price=Decimal("1500"), sales_price=Decimal("2000"),
            ),
            ItineraryItem(
                type="ACCOMMODATION", order=1, title="Overnight Stay", hotel_id=shanker.id,
                cost_price=Decimal("8000"), sales_price=Decimal("10000"),
            ),
        ])
        day2 = ItineraryDay(day_number=2, date=start + timedelta(days=1), title="Scenic Drive to Pokhara")
        day2.items.extend([
            ItineraryItem(
                type="TRANSFER", order=0, title="Kathmandu to Pokhara",
                description="7-hour scenic drive along Prithvi Highway",
                vehicle_id=scorpio.id, cost_price=Decimal("5000"), sales_price=Decimal("6500"),
            ),
            ItineraryItem(
                type="MEAL", order=1, title="Lunch Stop at Malekhu", description="Traditional Nepali Thali with Fish",
                restaurant_id=blue_heaven.id, cost_price=Decimal("1000"), sales_price=Decimal("1400"),
            ),
            ItineraryItem(
                type="ACCOMMODATION", order=2, title="Check-in at Resort", hotel_id=temple_tree.id,
                cost_price=Decimal("9000"), sales_price=Decimal("11500"),
            ),
        ])
        tour.itinerary.extend([day1, day2])
        db.add(tour)
        print(f"Created demo tour '{tour.name}'")

        await db.commit()
        print("Seed complete.")


if __name__ == "__main__":
    asyncio.run(seed())
