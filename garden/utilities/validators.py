"""
Input validation schemas using Pydantic for request bodies.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional


class GardenItemInput(BaseModel):
    """Schema for a single garden plan line item."""
    model_config = ConfigDict(populate_by_name=True)

    plant_id: str = Field(..., alias="plantId", min_length=1)
    quantity: int = Field(..., ge=0)

    @field_validator('plant_id')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        return v.strip()


class GardenCreateInput(BaseModel):
    """Schema for saving a garden plan.

    Emptiness of ``items`` and a missing total are checked by the ledger
    service so they produce its messages rather than a schema error.
    """
    model_config = ConfigDict(populate_by_name=True)

    items: List[GardenItemInput] = Field(default_factory=list)
    total_estimated_savings: Optional[float] = Field(None, alias="totalEstimatedSavings", allow_inf_nan=False)
    name: Optional[str] = Field(None, max_length=200)

    def item_dicts(self) -> List[dict]:
        return [item.model_dump(by_alias=True) for item in self.items]
