"""Plant domain entity: a catalog entry with spacing, yield, harvest time and market price."""
from typing import Optional

from garden.utilities.constants import DEFAULT_CATEGORY, FALLBACK_PRICE_PER_LB


class Plant:
    def __init__(self, id: str = "", name: str = "", category: Optional[str] = None,
                 spacing_inches: float = 0, yield_per_plant_lbs: float = 0,
                 days_to_harvest: int = 0, market_price_per_lb: Optional[float] = None,
                 image: Optional[str] = None):
        self.id = id
        self.name = name
        self.category = category or DEFAULT_CATEGORY
        self.spacing_inches = spacing_inches
        self.yield_per_plant_lbs = yield_per_plant_lbs
        self.days_to_harvest = days_to_harvest
        self.market_price_per_lb = market_price_per_lb
        self.image = image

    def __str__(self) -> str:
        return (f"{self.name} ({self.category}) - {self.yield_per_plant_lbs} lbs/ea - "
                f"{self.days_to_harvest} days - ${self.price_per_lb:.2f}/lb")

    __repr__ = __str__

    def __eq__(self, other):
        if not isinstance(other, Plant):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self):
        return hash(self.id)

    @property
    def price_per_lb(self) -> float:
        '''Market price, or the fallback when the catalog entry has none.'''
        return self.market_price_per_lb or FALLBACK_PRICE_PER_LB

    @property
    def image_name(self) -> str:
        return self.image or (self.name.lower().replace(' ', '_') + '.jpg')

    @staticmethod
    def from_dict(data):
        '''Creates a Plant from a stored document. Unknown keys are ignored.'''
        d = dict(data) if isinstance(data, dict) else {}
        return Plant(
            id=str(d.get("_id") or d.get("id") or ""),
            name=d.get("name", ""),
            category=d.get("category"),
            spacing_inches=d.get("spacingInches", 0) or 0,
            yield_per_plant_lbs=d.get("yieldPerPlantLbs", 0) or 0,
            days_to_harvest=d.get("daysToHarvest", 0) or 0,
            market_price_per_lb=d.get("marketPricePerLb"),
            image=d.get("image"),
        )

    def to_dict(self):
        '''Converts the Plant to its stored document shape.'''
        doc = {
            "_id": self.id,
            "name": self.name,
            "category": self.category,
            "spacingInches": self.spacing_inches,
            "yieldPerPlantLbs": self.yield_per_plant_lbs,
            "daysToHarvest": self.days_to_harvest,
        }
        if self.market_price_per_lb is not None:
            doc["marketPricePerLb"] = self.market_price_per_lb
        if self.image:
            doc["image"] = self.image
        return doc
