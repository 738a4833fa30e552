"""
Catalog seeding: replaces the plant catalog with the default plant list.

Run out of band, never from the API:
    python -m garden.utilities.seed [--file plants.json]
"""
import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional

from garden.infra.Plant_Repository import PlantRepository
from garden.logic.ledger.catalog import CatalogService

logger = logging.getLogger(__name__)

DEFAULT_PLANTS: List[dict] = [
    {"name": "Tomato", "category": "Vegetable", "spacingInches": 18, "yieldPerPlantLbs": 15, "daysToHarvest": 80, "marketPricePerLb": 3.99},
    {"name": "Carrot", "category": "Vegetable", "spacingInches": 3, "yieldPerPlantLbs": 0.2, "daysToHarvest": 70, "marketPricePerLb": 1.49},
    {"name": "Cucumber", "category": "Vegetable", "spacingInches": 12, "yieldPerPlantLbs": 10, "daysToHarvest": 60, "marketPricePerLb": 2.49},
    {"name": "Bell Pepper", "category": "Vegetable", "spacingInches": 18, "yieldPerPlantLbs": 5, "daysToHarvest": 75},
    {"name": "Zucchini", "category": "Vegetable", "spacingInches": 24, "yieldPerPlantLbs": 8, "daysToHarvest": 55, "marketPricePerLb": 2.29},
    {"name": "Strawberry", "category": "Fruit", "spacingInches": 12, "yieldPerPlantLbs": 1, "daysToHarvest": 90, "marketPricePerLb": 4.99},
    {"name": "Blueberry", "category": "Fruit", "spacingInches": 48, "yieldPerPlantLbs": 7, "daysToHarvest": 120, "marketPricePerLb": 6.99},
    {"name": "Basil", "category": "Herb", "spacingInches": 10, "yieldPerPlantLbs": 0.5, "daysToHarvest": 60, "marketPricePerLb": 28.0},
    {"name": "Mint", "category": "Herb", "spacingInches": 18, "yieldPerPlantLbs": 0.75, "daysToHarvest": 90},
]


def seed_catalog(plants: Optional[List[dict]] = None, repo: Optional[PlantRepository] = None):
    """Clear the catalog and insert the given (or default) plants."""
    service = CatalogService(repo or PlantRepository())
    return service.seed(DEFAULT_PLANTS if plants is None else plants)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    parser = argparse.ArgumentParser(description='Seed the Garden Planner plant catalog')
    parser.add_argument('--file', help='JSON list of plant documents to load instead of the defaults')
    args = parser.parse_args()

    plants = None
    if args.file:
        with open(Path(args.file), 'r', encoding='utf-8') as f:
            plants = json.load(f)

    seeded = seed_catalog(plants)
    print(f"Catalog seeded with {len(seeded)} plants")
