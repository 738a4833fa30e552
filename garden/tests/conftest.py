"""Pytest configuration and fixtures: an isolated data directory per test."""

import pytest
from fastapi.testclient import TestClient

from garden.api.api_run import app
from garden.api.dependencies import get_catalog_service, get_ledger_service
from garden.client.api_client import GardenApiClient
from garden.infra.Garden_Repository import GardenRepository
from garden.infra.Plant_Repository import PlantRepository
from garden.logic.ledger.catalog import CatalogService
from garden.logic.ledger.plan_ledger import PlanLedgerService

TEST_PLANTS = [
    {"_id": "t1", "name": "Tomato", "category": "Vegetable", "spacingInches": 18,
     "yieldPerPlantLbs": 15, "daysToHarvest": 80, "marketPricePerLb": 4},
    {"_id": "c1", "name": "Carrot", "category": "Vegetable", "spacingInches": 3,
     "yieldPerPlantLbs": 0.2, "daysToHarvest": 70},
    {"_id": "s1", "name": "Strawberry", "category": "Fruit", "spacingInches": 12,
     "yieldPerPlantLbs": 1, "daysToHarvest": 90, "marketPricePerLb": 5},
    {"_id": "b1", "name": "Basil", "category": "Herb", "spacingInches": 10,
     "yieldPerPlantLbs": 0.5, "daysToHarvest": 60, "marketPricePerLb": 20},
]


@pytest.fixture
def plant_repo(tmp_path):
    return PlantRepository(tmp_path / "plants.json")


@pytest.fixture
def garden_repo(tmp_path):
    return GardenRepository(tmp_path / "gardens.json")


@pytest.fixture
def catalog(plant_repo):
    return plant_repo.replace_all(TEST_PLANTS)


@pytest.fixture
def ledger(garden_repo, plant_repo, catalog):
    return PlanLedgerService(garden_repo, plant_repo)


@pytest.fixture
def client(garden_repo, plant_repo, catalog):
    """TestClient whose routes read and write the temporary data directory."""
    app.dependency_overrides[get_ledger_service] = lambda: PlanLedgerService(garden_repo, plant_repo)
    app.dependency_overrides[get_catalog_service] = lambda: CatalogService(plant_repo)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def api(client):
    """GardenApiClient talking to the app in-process (TestClient is an httpx.Client)."""
    return GardenApiClient(http=TestClient(app, base_url="http://testserver/api"))
