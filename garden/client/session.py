"""Planner session: the client's view-local state and the actions a user can take.

State (catalog, history, quantity selection, search term, category) belongs
to one session object. Everything displayed is derived from it through the
pure valuation and reporting functions, so a failed call never leaves
half-applied state behind: fields are only assigned after a call succeeds.
"""
import logging
from pathlib import Path
from typing import Dict, List, Optional

from garden.client.api_client import GardenApiClient
from garden.domain.GardenPlan import GardenPlan
from garden.domain.Plant import Plant
from garden.domain.errors import GardenError
from garden.logic.reporting.history import aggregate_stats, build_savings_trend
from garden.logic.valuation.savings import compute_total_savings, filter_catalog
from garden.utilities.constants import ALL_CATEGORIES
from garden.utilities.export_import import HistoryExporter, build_history_csv

logger = logging.getLogger(__name__)


class ActionFailed(Exception):
    """A user action did not complete; ``notice`` is the message to show."""

    def __init__(self, notice: str):
        super().__init__(notice)
        self.notice = notice


def parse_quantity(value) -> int:
    """Lenient integer parse for a quantity field: junk becomes 0, negatives clamp to 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(value, 0)
    try:
        qty = int(str(value).strip())
    except (TypeError, ValueError):
        try:
            qty = int(float(str(value).strip()))
        except (TypeError, ValueError, OverflowError):
            qty = 0
    return max(qty, 0)


class PlannerSession:
    def __init__(self, api: GardenApiClient):
        self.api = api
        self.catalog: List[Plant] = []
        self.history: List[GardenPlan] = []
        self.selection: Dict[str, int] = {}
        self.search_term: str = ""
        self.category: str = ALL_CATEGORIES

    # -------------------- Loading --------------------
    def load(self):
        self.refresh_catalog()
        self.refresh_history()

    def refresh_catalog(self) -> List[Plant]:
        try:
            plants = self.api.get_plants()
        except GardenError as e:
            logger.error(f"Error fetching plants: {e.message}")
            raise ActionFailed("Failed to load plants.") from e
        self.catalog = plants
        return plants

    def refresh_history(self) -> List[GardenPlan]:
        try:
            plans = self.api.get_gardens()
        except GardenError as e:
            logger.error(f"History error: {e.message}")
            raise ActionFailed("Failed to load garden history.") from e
        self.history = plans
        return plans

    # -------------------- Selection --------------------
    def set_quantity(self, plant_id: str, value) -> int:
        qty = parse_quantity(value)
        self.selection = {**self.selection, plant_id: qty}
        return qty

    def clear_selection(self):
        self.selection = {}

    def find_plant(self, key: str) -> Optional[Plant]:
        """Look a catalog plant up by id or by case-insensitive name."""
        lowered = key.strip().lower()
        for plant in self.catalog:
            if plant.id == key or plant.name.lower() == lowered:
                return plant
        return None

    # -------------------- Derived values --------------------
    @property
    def visible_plants(self) -> List[Plant]:
        return list(filter_catalog(self.catalog, self.search_term, self.category))

    @property
    def total_savings(self) -> float:
        return compute_total_savings(self.catalog, self.selection)

    @property
    def trend(self):
        return build_savings_trend(self.history)

    @property
    def stats(self):
        return aggregate_stats(self.history)

    def plan_items(self) -> List[dict]:
        return [{"plantId": plant_id, "quantity": qty} for plant_id, qty in self.selection.items() if qty > 0]

    # -------------------- Actions --------------------
    def save(self, name: Optional[str] = None) -> GardenPlan:
        """Submit the selection with the locally computed total.

        The selection is kept whether or not the save succeeds.
        """
        items = self.plan_items()
        if not items:
            raise ActionFailed("Please add at least one plant!")
        try:
            plan = self.api.save_garden(items, self.total_savings, name=name)
        except GardenError as e:
            logger.error(f"Save failed: {e.message} ({e.detail})")
            raise ActionFailed("Failed to save garden.") from e
        self._refresh_after("save")
        return plan

    def delete_plan(self, plan_id: str):
        try:
            self.api.delete_garden(plan_id)
        except GardenError as e:
            logger.error(f"Delete error: {e.message}")
            raise ActionFailed("Failed to delete the plan.") from e
        self._refresh_after("delete")

    def _refresh_after(self, action: str):
        """Reload history after a completed action; a failed reload keeps the old history."""
        try:
            self.refresh_history()
        except ActionFailed:
            logger.warning(f"History not refreshed after {action}; showing the previous list")

    def delete_all(self) -> int:
        try:
            count = self.api.delete_all_gardens()
        except GardenError as e:
            logger.error(f"Delete all error: {e.message}")
            raise ActionFailed("Failed to delete all plans.") from e
        self.history = []
        return count

    # -------------------- Export --------------------
    def history_csv(self) -> str:
        return build_history_csv(self.history)

    def export(self, fmt: str = "csv", output_path: Optional[Path] = None) -> Path:
        exporter = HistoryExporter(self.history)
        if fmt == "pdf":
            return exporter.export_pdf(output_path)
        return exporter.export_csv(output_path)
