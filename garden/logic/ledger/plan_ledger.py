"""Plan ledger service: create, list and delete garden plans.

The savings total is stored exactly as submitted by the client; it is a
snapshot of the prices the client saw and is never recomputed here.
"""
import logging
import math
from datetime import datetime, timezone
from numbers import Real
from typing import Iterable, List, Mapping, Optional
from uuid import uuid4

from garden.domain.GardenPlan import GardenPlan, GardenPlanItem
from garden.domain.errors import NotFoundError, ValidationError
from garden.infra.Garden_Repository import GardenRepository
from garden.infra.Plant_Repository import PlantRepository
from garden.utilities.constants import DEFAULT_GARDEN_NAME, GUEST_USER

logger = logging.getLogger(__name__)


def _build_items(items: Iterable[Mapping]) -> List[GardenPlanItem]:
    """Validate raw line items and drop zero quantities."""
    result = []
    for raw in items or []:
        plant_id = raw.get("plantId")
        quantity = raw.get("quantity")
        if not plant_id:
            raise ValidationError("Every item needs a plantId")
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValidationError(f"Quantity for plant {plant_id} must be a whole number")
        if quantity < 0:
            raise ValidationError(f"Quantity for plant {plant_id} cannot be negative")
        if quantity == 0:
            continue
        result.append(GardenPlanItem(plant_id=str(plant_id), quantity=quantity))
    return result


class PlanLedgerService:
    def __init__(self, gardens: Optional[GardenRepository] = None, plants: Optional[PlantRepository] = None):
        self.gardens = gardens or GardenRepository()
        self.plants = plants or PlantRepository()

    def create_plan(self, items: Iterable[Mapping], total_estimated_savings: Optional[float],
                    name: Optional[str] = None, user_id: str = GUEST_USER) -> GardenPlan:
        plan_items = _build_items(items)
        if not plan_items:
            raise ValidationError("Garden is empty")
        if total_estimated_savings is None:
            raise ValidationError("totalEstimatedSavings is required")
        if isinstance(total_estimated_savings, bool) or not isinstance(total_estimated_savings, Real):
            raise ValidationError("totalEstimatedSavings must be a number")
        if not math.isfinite(total_estimated_savings):
            raise ValidationError("totalEstimatedSavings must be a finite number")
        if total_estimated_savings < 0:
            raise ValidationError("totalEstimatedSavings cannot be negative")

        # Read the catalog before persisting
        index = self._catalog_index()
        plan = GardenPlan(
            id=uuid4().hex,
            items=plan_items,
            total_estimated_savings=total_estimated_savings,
            created_at=datetime.now(timezone.utc),
            user_id=user_id,
            name=(name or "").strip() or DEFAULT_GARDEN_NAME,
        )
        self.gardens.insert(plan)
        logger.info(f"Saved garden plan {plan.id} with {len(plan.items)} items")
        return plan.resolve(index)

    def list_plans(self) -> List[GardenPlan]:
        """Every plan, newest first, with plant references resolved."""
        index = self._catalog_index()
        return [plan.resolve(index) for plan in self.gardens.find_all()]

    def delete_plan(self, plan_id: str) -> None:
        if not self.gardens.delete_by_id(plan_id):
            raise NotFoundError("Garden plan not found")
        logger.info(f"Deleted garden plan {plan_id}")

    def delete_all_plans(self) -> int:
        count = self.gardens.delete_all()
        logger.info(f"Deleted all garden plans ({count})")
        return count

    def _catalog_index(self):
        return self.plants.index()
