from fastapi import APIRouter, Depends

from garden.api.dependencies import get_ledger_service
from garden.domain.errors import StorageError
from garden.logic.ledger.plan_ledger import PlanLedgerService
from garden.utilities.validators import GardenCreateInput

router = APIRouter(prefix="/api", tags=["gardens"])


@router.post("/gardens", status_code=201)
def save_garden(payload: GardenCreateInput, service: PlanLedgerService = Depends(get_ledger_service)):
    try:
        plan = service.create_plan(
            payload.item_dicts(),
            payload.total_estimated_savings,
            name=payload.name,
        )
    except StorageError as e:
        raise StorageError("Error saving garden", e.detail or e.message) from e
    return plan.to_dict(resolved=True)


@router.get("/gardens")
def garden_history(service: PlanLedgerService = Depends(get_ledger_service)):
    """Every saved plan, newest first, with plantId replaced by the plant document (or null)."""
    try:
        plans = service.list_plans()
    except StorageError as e:
        raise StorageError("Error fetching history", e.detail or e.message) from e
    return [plan.to_dict(resolved=True) for plan in plans]


@router.delete("/gardens/{plan_id}")
def delete_garden(plan_id: str, service: PlanLedgerService = Depends(get_ledger_service)):
    try:
        service.delete_plan(plan_id)
    except StorageError as e:
        raise StorageError("Error deleting plan", e.detail or e.message) from e
    return {"message": "Plan deleted successfully"}


@router.delete("/gardens")
def delete_all_gardens(service: PlanLedgerService = Depends(get_ledger_service)):
    try:
        count = service.delete_all_plans()
    except StorageError as e:
        raise StorageError("Error deleting plans", e.detail or e.message) from e
    return {"message": f"Deleted {count} plans", "count": count}
