import unittest

import pytest

from garden.domain.GardenPlan import GardenPlan, GardenPlanItem
from garden.domain.Plant import Plant
from garden.utilities.seed import DEFAULT_PLANTS, seed_catalog


class TestPlant(unittest.TestCase):

    def test_defaults(self):
        plant = Plant.from_dict({"_id": "x", "name": "Okra", "yieldPerPlantLbs": 2})
        self.assertEqual(plant.category, "Vegetable")
        self.assertIsNone(plant.market_price_per_lb)
        self.assertEqual(plant.price_per_lb, 4.50)
        self.assertEqual(plant.image_name, "okra.jpg")

    def test_to_dict_round_trip(self):
        doc = {"_id": "b1", "name": "Basil", "category": "Herb", "spacingInches": 10,
               "yieldPerPlantLbs": 0.5, "daysToHarvest": 60, "marketPricePerLb": 20}
        self.assertEqual(Plant.from_dict(doc).to_dict(), doc)


class TestGardenPlanItem(unittest.TestCase):

    def test_from_stored_and_resolved_shapes(self):
        stored = GardenPlanItem.from_dict({"plantId": "t1", "quantity": 2})
        self.assertEqual((stored.plant_id, stored.quantity, stored.plant), ("t1", 2, None))
        resolved = GardenPlanItem.from_dict({"plantId": {"_id": "t1", "name": "Tomato"}, "quantity": 2})
        self.assertEqual(resolved.plant_id, "t1")
        self.assertEqual(resolved.plant_name, "Tomato")
        dangling = GardenPlanItem.from_dict({"plantId": None, "quantity": 1})
        self.assertFalse(dangling.is_resolved)
        self.assertEqual(str(dangling), "1x Plant")

    def test_plan_timestamp_parsing(self):
        plan = GardenPlan.from_dict({"_id": "p", "items": [], "totalEstimatedSavings": 1,
                                     "createdAt": "2026-05-01T10:00:00Z"})
        self.assertEqual(plan.created_at.isoformat(), "2026-05-01T10:00:00+00:00")
        self.assertEqual(plan.user_id, "guest")


def test_seed_replaces_catalog(plant_repo, catalog):
    seeded = seed_catalog(repo=plant_repo)
    assert [p.name for p in seeded] == [p["name"] for p in DEFAULT_PLANTS]
    assert all(p.id for p in seeded)
    assert len({p.id for p in seeded}) == len(seeded)
    assert [p.name for p in plant_repo.list_plants()][:3] == ["Tomato", "Carrot", "Cucumber"]
    assert "t1" not in plant_repo.index()


def test_seed_with_custom_list(plant_repo):
    seeded = seed_catalog([{"name": "Kale", "yieldPerPlantLbs": 2, "daysToHarvest": 50}], repo=plant_repo)
    assert len(seeded) == 1
    assert seeded[0].category == "Vegetable"
    assert plant_repo.list_plants() == seeded


def test_plants_are_hashable_by_id():
    a = Plant(id="t1", name="Tomato", yield_per_plant_lbs=15)
    b = Plant.from_dict(a.to_dict())
    assert a == b
    assert len({a, b}) == 1
    assert {a: "x"}[b] == "x"
