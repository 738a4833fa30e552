"""Catalog repository: plant documents in plants.json."""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional
from uuid import uuid4

from garden.domain.Plant import Plant
from garden.domain.errors import StorageError
from garden.infra.Document_Store import DocumentStore
from garden.infra.paths import PLANTS_FILE

logger = logging.getLogger(__name__)


class PlantRepository:
    def __init__(self, path: Optional[Path] = None):
        self.store = DocumentStore(path or PLANTS_FILE)

    def list_plants(self) -> List[Plant]:
        """Every catalog plant in storage order."""
        docs = self.store.load()
        try:
            return [Plant.from_dict(doc) for doc in docs]
        except (ValueError, TypeError) as e:
            logger.error(f"Malformed plant document: {e}")
            raise StorageError("Collection plants is corrupt", str(e)) from e

    def index(self) -> Dict[str, Plant]:
        """Plants keyed by id, for resolving plan items."""
        return {plant.id: plant for plant in self.list_plants()}

    def replace_all(self, plants: Iterable[dict]) -> List[Plant]:
        """Clear the catalog and insert the given plant documents, assigning missing ids."""
        docs = []
        for data in plants:
            plant = Plant.from_dict(data)
            if not plant.id:
                plant.id = uuid4().hex
            docs.append(plant.to_dict())
        with self.store.lock:
            self.store.save(docs)
        logger.info(f"Catalog replaced with {len(docs)} plants")
        return [Plant.from_dict(doc) for doc in docs]
