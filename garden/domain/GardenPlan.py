"""GardenPlan domain entity: a saved set of plant quantities with its savings snapshot.

Items reference catalog plants by id only. Resolution against the catalog
happens at read time; an item whose plant no longer exists keeps ``plant``
set to None and is rendered with a placeholder name.
"""
from datetime import datetime, timezone
from typing import List, Optional

from garden.domain.Plant import Plant
from garden.utilities.constants import (
    GUEST_USER,
    DEFAULT_GARDEN_NAME,
    UNRESOLVED_PLANT_NAME,
)


def parse_timestamp(value) -> datetime:
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, str) and value:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)
    return datetime.now(timezone.utc)


class GardenPlanItem:
    def __init__(self, plant_id: str, quantity: int, plant: Optional[Plant] = None):
        self.plant_id = plant_id
        self.quantity = quantity
        self.plant = plant

    @property
    def is_resolved(self) -> bool:
        return self.plant is not None

    @property
    def plant_name(self) -> str:
        return self.plant.name if self.plant and self.plant.name else UNRESOLVED_PLANT_NAME

    def __str__(self) -> str:
        return f"{self.quantity}x {self.plant_name}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Accepts both the stored shape (plantId is an id) and the resolved API shape
        (plantId is the full plant document or null).'''
        d = dict(data) if isinstance(data, dict) else {}
        ref = d.get("plantId")
        plant = None
        if isinstance(ref, dict):
            plant = Plant.from_dict(ref)
            ref = plant.id
        return GardenPlanItem(plant_id=str(ref or ""), quantity=int(d.get("quantity", 0) or 0), plant=plant)

    def to_dict(self, resolved: bool = False):
        if resolved:
            return {"plantId": self.plant.to_dict() if self.plant else None, "quantity": self.quantity}
        return {"plantId": self.plant_id, "quantity": self.quantity}


class GardenPlan:
    def __init__(self, id: str = "", items: Optional[List[GardenPlanItem]] = None,
                 total_estimated_savings: float = 0, created_at: Optional[datetime] = None,
                 user_id: str = GUEST_USER, name: str = DEFAULT_GARDEN_NAME):
        self.id = id
        self.items = items[:] if items else []
        self.total_estimated_savings = total_estimated_savings
        self.created_at = created_at or datetime.now(timezone.utc)
        self.user_id = user_id
        self.name = name

    def __str__(self) -> str:
        plants = ", ".join(str(item) for item in self.items)
        return f"{self.created_at.date().isoformat()} - {plants} - ${self.total_estimated_savings:.2f}"

    __repr__ = __str__

    def resolve(self, catalog_index: dict) -> "GardenPlan":
        '''Attach catalog plants to items in place; unknown ids stay unresolved.'''
        for item in self.items:
            item.plant = catalog_index.get(item.plant_id)
        return self

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return GardenPlan(
            id=str(d.get("_id") or d.get("id") or ""),
            items=[GardenPlanItem.from_dict(i) for i in d.get("items", [])],
            total_estimated_savings=d.get("totalEstimatedSavings", 0) or 0,
            created_at=parse_timestamp(d.get("createdAt")),
            user_id=d.get("userId") or GUEST_USER,
            name=d.get("name") or DEFAULT_GARDEN_NAME,
        )

    def to_dict(self, resolved: bool = False):
        return {
            "_id": self.id,
            "userId": self.user_id,
            "name": self.name,
            "items": [item.to_dict(resolved=resolved) for item in self.items],
            "totalEstimatedSavings": self.total_estimated_savings,
            "createdAt": self.created_at.isoformat(),
        }
