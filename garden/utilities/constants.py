from typing import Final

# Valuation
FALLBACK_PRICE_PER_LB: Final[float] = 4.50
TREND_WINDOW: Final[int] = 7

# Catalog
DEFAULT_CATEGORY: Final[str] = "Vegetable"
CATEGORIES: Final[tuple[str, ...]] = ("Vegetable", "Fruit", "Herb")
ALL_CATEGORIES: Final[str] = "All"
UNRESOLVED_PLANT_NAME: Final[str] = "Plant"

# Ledger
GUEST_USER: Final[str] = "guest"
DEFAULT_GARDEN_NAME: Final[str] = "My Dream Garden"

# Formatting
DISPLAY_DATE_FORMAT: Final[str] = "%m/%d/%Y"
CSV_HEADER: Final[str] = "Date,Plants,Total Yield (lbs),Total Savings ($)"
PLANTS_SEPARATOR: Final[str] = " | "
