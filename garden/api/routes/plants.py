from fastapi import APIRouter, Depends

from garden.api.dependencies import get_catalog_service
from garden.domain.errors import StorageError
from garden.logic.ledger.catalog import CatalogService

router = APIRouter(prefix="/api", tags=["plants"])


@router.get("/plants")
def list_plants(service: CatalogService = Depends(get_catalog_service)):
    """Return the whole plant catalog in storage order."""
    try:
        plants = service.list_plants()
    except StorageError as e:
        raise StorageError("Error fetching plants", e.detail or e.message) from e
    return [plant.to_dict() for plant in plants]
