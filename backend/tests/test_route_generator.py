"""Tests for route generation: day numbering, dates, titles, transfers and overwrite semantics."""

import unittest
import uuid
from datetime import date
from unittest.mock import patch

from sqlalchemy.exc import SQLAlchemyError

from tests.support import DatabaseTestCase
from tourdesk.models.tour import ItineraryDay, ItineraryItem
from tourdesk.services.route_generator import RouteGeneratorService, Stop, route_generator


class TestGenerateRoute(DatabaseTestCase):

    async def asyncSetUp(self):
        await super().asyncSetUp()
        self.kathmandu = await self.create_location("Kathmandu")
        self.pokhara = await self.create_location("Pokhara")
        self.chitwan = await self.create_location("Chitwan")

    async def generate(self, tour_id, stops):
        async with self.session_factory() as db:
            return await route_generator.generate_route(db, tour_id, stops)

    async def test_days_dates_and_titles(self):
        tour_id = await self.create_tour(duration=3, start_date=date(2024, 1, 1))

        result = await self.generate(tour_id, [Stop(self.kathmandu, 2), Stop(self.pokhara, 1)])

        days = await self.fetch_days(tour_id)
        self.assertEqual(result.days_created, 3)
        self.assertEqual([d.day_number for d in days], [1, 2, 3])
        self.assertEqual([d.date for d in days], [date(2024, 1, 1), date(2024, 1, 2), date(2024, 1, 3)])
        self.assertEqual(
            [d.title for d in days],
            ["Arrival in Kathmandu", "Explore Kathmandu", "Arrival in Pokhara"],
        )
        self.assertEqual(result.warnings, [])

    async def test_first_day_gets_arrival_pickup(self):
        tour_id = await self.create_tour(duration=3)

        await self.generate(tour_id, [Stop(self.kathmandu, 2), Stop(self.pokhara, 1)])

        days = await self.fetch_days(tour_id)
        self.assertEqual(len(days[0].items), 1)
        pickup = days[0].items[0]
        self.assertEqual(pickup.type, "TRANSFER")
        self.assertEqual(pickup.title, "Arrival & Pickup")
        self.assertEqual(pickup.description, "Airport pickup and transfer to hotel.")
        self.assertEqual(pickup.order, 0)
        # No known route Kathmandu -> Pokhara, so no transfer on arrival
        self.assertEqual(days[1].items, [])
        self.assertEqual(days[2].items, [])

    async def test_known_route_adds_transfer_with_duration(self):
        await self.create_route(self.kathmandu, self.pokhara, duration_mins=420)
        tour_id = await self.create_tour(duration=3)

        await self.generate(tour_id, [Stop(self.kathmandu, 2), Stop(self.pokhara, 1)])

        days = await self.fetch_days(tour_id)
        self.assertEqual(len(days[2].items), 1)
        transfer = days[2].items[0]
        self.assertEqual(transfer.type, "TRANSFER")
        self.assertEqual(transfer.title, "Travel to Pokhara")
        self.assertEqual(transfer.description, "Travel to Pokhara (7 hrs)")
        self.assertEqual(transfer.order, 0)

    async def test_route_without_duration_is_direct(self):
        await self.create_route(self.kathmandu, self.pokhara)
        tour_id = await self.create_tour(duration=2)

        await self.generate(tour_id, [Stop(self.kathmandu, 1), Stop(self.pokhara, 1)])

        days = await self.fetch_days(tour_id)
        self.assertEqual(days[1].items[0].description, "Travel to Pokhara (Direct)")

    async def test_route_description_and_stopovers(self):
        malekhu = await self.create_location("Malekhu", "STOPOVER")
        mugling = await self.create_location("Mugling", "STOPOVER")
        await self.create_route(
            self.kathmandu,
            self.pokhara,
            duration_mins=420,
            description="Prithvi Highway.",
            stopovers=[(malekhu, True), (mugling, False)],
        )
        tour_id = await self.create_tour(duration=2)

        await self.generate(tour_id, [Stop(self.kathmandu, 1), Stop(self.pokhara, 1)])

        days = await self.fetch_days(tour_id)
        self.assertEqual(days[1].items[0].description, "Prithvi Highway. Via Malekhu (lunch), Mugling")

    async def test_route_is_directional(self):
        await self.create_route(self.pokhara, self.kathmandu, duration_mins=420)
        tour_id = await self.create_tour(duration=2)

        await self.generate(tour_id, [Stop(self.kathmandu, 1), Stop(self.pokhara, 1)])

        days = await self.fetch_days(tour_id)
        self.assertEqual(days[1].items, [])

    async def test_unknown_location_is_skipped(self):
        await self.create_route(self.kathmandu, self.chitwan, duration_mins=300)
        tour_id = await self.create_tour(duration=5)
        missing = uuid.uuid4()

        result = await self.generate(
            tour_id, [Stop(self.kathmandu, 1), Stop(missing, 2), Stop(self.chitwan, 2)]
        )

        days = await self.fetch_days(tour_id)
        self.assertEqual(result.days_created, 3)
        self.assertEqual(result.skipped_location_ids, [missing])
        self.assertEqual([d.day_number for d in days], [1, 2, 3])
        self.assertEqual([d.date for d in days], [date(2024, 1, 1), date(2024, 1, 2), date(2024, 1, 3)])
        # The transfer into Chitwan would start from the unknown stop, so there is none
        self.assertEqual(days[1].title, "Arrival in Chitwan")
        self.assertEqual(days[1].items, [])

    async def test_unknown_first_stop_still_gets_pickup(self):
        tour_id = await self.create_tour(duration=1)
        missing = uuid.uuid4()

        result = await self.generate(tour_id, [Stop(missing, 1), Stop(self.kathmandu, 1)])

        days = await self.fetch_days(tour_id)
        self.assertEqual(result.skipped_location_ids, [missing])
        self.assertEqual(days[0].title, "Arrival in Kathmandu")
        self.assertEqual(days[0].items[0].title, "Arrival & Pickup")

    async def test_location_lookup_failure_rolls_back(self):
        tour_id = await self.create_tour(duration=1)
        await self.create_day_with_items(tour_id, 1, [("ACTIVITY", "100")])

        with patch.object(RouteGeneratorService, "_load_locations", side_effect=SQLAlchemyError("timeout")):
            with self.assertLogs("tourdesk.services.route_generator", level="ERROR"):
                with self.assertRaises(SQLAlchemyError):
                    await self.generate(tour_id, [Stop(self.kathmandu, 1)])

        days = await self.fetch_days(tour_id)
        self.assertEqual([(d.day_number, d.title) for d in days], [(1, "Day 1")])

    async def test_duration_mismatch_is_a_warning(self):
        tour_id = await self.create_tour(duration=5)

        result = await self.generate(tour_id, [Stop(self.kathmandu, 2)])

        self.assertEqual(result.days_created, 2)
        self.assertEqual(result.warnings, ["Stops cover 2 nights but the tour lasts 5 days"])

    async def test_regeneration_replaces_existing_itinerary(self):
        tour_id = await self.create_tour(duration=3)
        await self.create_day_with_items(tour_id, 1, [("ACTIVITY", "100"), ("MEAL", "50")])
        await self.create_day_with_items(tour_id, 2, [("ACTIVITY", "100")])

        stops = [Stop(self.kathmandu, 2), Stop(self.pokhara, 1)]
        await self.generate(tour_id, stops)
        first = [(d.day_number, d.title, len(d.items)) for d in await self.fetch_days(tour_id)]
        await self.generate(tour_id, stops)
        second = [(d.day_number, d.title, len(d.items)) for d in await self.fetch_days(tour_id)]

        self.assertEqual(first, second)
        self.assertEqual(await self.count(ItineraryDay, ItineraryDay.tour_id == tour_id), 3)
        # Only the generated pickup remains; the hand-added items went with their days
        self.assertEqual(await self.count(ItineraryItem), 1)

    async def test_other_tours_are_untouched(self):
        tour_id = await self.create_tour(duration=1)
        other_id = await self.create_tour(duration=1)
        await self.create_day_with_items(other_id, 1, [("ACTIVITY", "100")])

        await self.generate(tour_id, [Stop(self.kathmandu, 1)])

        self.assertEqual(await self.count(ItineraryDay, ItineraryDay.tour_id == other_id), 1)

    async def test_unknown_tour(self):
        with self.assertRaisesRegex(ValueError, "Tour not found"):
            await self.generate(uuid.uuid4(), [Stop(self.kathmandu, 1)])

    async def test_database_failure_rolls_back_everything(self):
        tour_id = await self.create_tour(duration=2)
        await self.create_day_with_items(tour_id, 1, [("ACTIVITY", "100")])

        with patch.object(RouteGeneratorService, "_find_route", side_effect=SQLAlchemyError("connection lost")):
            with self.assertRaises(SQLAlchemyError):
                await self.generate(tour_id, [Stop(self.kathmandu, 1), Stop(self.pokhara, 1)])

        days = await self.fetch_days(tour_id)
        self.assertEqual([(d.day_number, d.title) for d in days], [(1, "Day 1")])
        self.assertEqual(len(days[0].items), 1)


if __name__ == "__main__":
    unittest.main()
