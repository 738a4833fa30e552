"""Dependency injection for the garden API routes."""

from garden.infra.Garden_Repository import GardenRepository
from garden.infra.Plant_Repository import PlantRepository
from garden.logic.ledger.catalog import CatalogService
from garden.logic.ledger.plan_ledger import PlanLedgerService


def get_catalog_service() -> CatalogService:
    return CatalogService(PlantRepository())


def get_ledger_service() -> PlanLedgerService:
    """Ledger bound to the configured data directory; tests override this."""
    return PlanLedgerService(GardenRepository(), PlantRepository())
