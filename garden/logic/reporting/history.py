"""Plan history reporting: savings trend, aggregate stats and per-plan summaries."""
from typing import Dict, Iterable, List, Sequence, Tuple

from garden.domain.GardenPlan import GardenPlan
from garden.utilities.constants import DISPLAY_DATE_FORMAT, TREND_WINDOW

__all__ = ["format_plan_date", "plan_yield", "plan_summary", "build_savings_trend", "aggregate_stats"]


def format_plan_date(plan: GardenPlan) -> str:
    return plan.created_at.strftime(DISPLAY_DATE_FORMAT)


def plan_yield(plan: GardenPlan) -> float:
    """Pounds harvested by a plan; unresolved plants contribute nothing."""
    return sum(item.quantity * item.plant.yield_per_plant_lbs for item in plan.items if item.plant)


def plan_summary(plan: GardenPlan, separator: str = ", ") -> str:
    """Line items as "2x Tomato, 3x Carrot"."""
    return separator.join(str(item) for item in plan.items)


def build_savings_trend(plan_history: Sequence[GardenPlan], window: int = TREND_WINDOW) -> List[Tuple[str, float]]:
    """(date, savings) points for the savings chart, oldest first.

    plan_history is newest-first. It is reversed and the first ``window``
    entries are kept, so a history longer than the window charts its oldest
    plans rather than its latest ones.
    """
    chronological = list(reversed(plan_history))
    return [(format_plan_date(plan), plan.total_estimated_savings) for plan in chronological[:window]]


def aggregate_stats(plan_history: Iterable[GardenPlan]) -> Dict[str, float]:
    """Totals across the whole history.

    Returns structure:
    {
      'total_money': sum of recorded savings,
      'total_plans': number of plans,
      'total_pounds': sum of quantity x yield over resolved items
    }
    """
    total_money = 0.0
    total_plans = 0
    total_pounds = 0.0
    for plan in plan_history:
        total_plans += 1
        total_money += plan.total_estimated_savings
        total_pounds += plan_yield(plan)
    return {
        'total_money': total_money,
        'total_plans': total_plans,
        'total_pounds': total_pounds,
    }
