"""Plan ledger repository: garden plan documents in gardens.json."""

import logging
from pathlib import Path
from typing import List, Optional

from garden.domain.GardenPlan import GardenPlan
from garden.domain.errors import StorageError
from garden.infra.Document_Store import DocumentStore
from garden.infra.paths import GARDENS_FILE

logger = logging.getLogger(__name__)


class GardenRepository:
    def __init__(self, path: Optional[Path] = None):
        self.store = DocumentStore(path or GARDENS_FILE)

    def insert(self, plan: GardenPlan) -> GardenPlan:
        with self.store.lock:
            docs = self.store.load()
            docs.append(plan.to_dict())
            self.store.save(docs)
        return plan

    def find_all(self) -> List[GardenPlan]:
        """All plans, most recent first. Plans sharing a timestamp keep reverse insertion order."""
        docs = self.store.load()
        try:
            plans = [GardenPlan.from_dict(doc) for doc in docs]
        except (ValueError, TypeError) as e:
            logger.error(f"Malformed garden plan document: {e}")
            raise StorageError("Collection gardens is corrupt", str(e)) from e
        ordered = sorted(enumerate(plans), key=lambda pair: (pair[1].created_at, pair[0]), reverse=True)
        return [plan for _, plan in ordered]

    def delete_by_id(self, plan_id: str) -> bool:
        """Remove one plan; False when no document has that id."""
        with self.store.lock:
            docs = self.store.load()
            remaining = [d for d in docs if str(d.get("_id")) != plan_id]
            if len(remaining) == len(docs):
                return False
            self.store.save(remaining)
        return True

    def delete_all(self) -> int:
        with self.store.lock:
            docs = self.store.load()
            if docs:
                self.store.save([])
        return len(docs)
