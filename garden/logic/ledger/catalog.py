"""Catalog service: read-only access to plant definitions, plus the out-of-band reseed."""
import logging
from typing import Iterable, List, Optional

from garden.domain.Plant import Plant
from garden.infra.Plant_Repository import PlantRepository

logger = logging.getLogger(__name__)


class CatalogService:
    def __init__(self, plants: Optional[PlantRepository] = None):
        self.plants = plants or PlantRepository()

    def list_plants(self) -> List[Plant]:
        return self.plants.list_plants()

    def seed(self, plants: Iterable[dict]) -> List[Plant]:
        """Replace the whole catalog. Not exposed over HTTP."""
        seeded = self.plants.replace_all(plants)
        logger.info(f"Catalog seeded: {', '.join(p.name for p in seeded)}")
        return seeded
