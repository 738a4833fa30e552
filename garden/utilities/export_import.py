"""
Export of the garden plan history as CSV or PDF.

Everything here works on plans already fetched by the client; no request is
made to the server.
"""
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence
import logging

from garden.domain.GardenPlan import GardenPlan
from garden.infra.pdf_utils import generate_pdf_for_history
from garden.logic.reporting.history import format_plan_date, plan_summary, plan_yield
from garden.utilities.constants import CSV_HEADER, PLANTS_SEPARATOR

logger = logging.getLogger(__name__)


def _quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def build_history_csv(plans: Sequence[GardenPlan]) -> str:
    """CSV text: header plus one row per plan, Plants always quoted and pipe-separated."""
    lines = [CSV_HEADER]
    for plan in plans:
        lines.append(",".join([
            format_plan_date(plan),
            _quote(plan_summary(plan, separator=PLANTS_SEPARATOR)),
            f"{plan_yield(plan):.2f}",
            f"{plan.total_estimated_savings:.2f}",
        ]))
    return "\n".join(lines) + "\n"


class HistoryExporter:
    """Write the plan history to disk in various formats."""

    def __init__(self, plans: Sequence[GardenPlan]):
        self.plans = list(plans)

    @staticmethod
    def _default_path(suffix: str) -> Path:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        return Path(f"garden_history_{timestamp}.{suffix}")

    def export_csv(self, output_path: Optional[Path] = None) -> Path:
        output_path = Path(output_path) if output_path else self._default_path("csv")
        with open(output_path, 'w', newline='', encoding='utf-8') as f:
            f.write(build_history_csv(self.plans))
        logger.info(f"Exported {len(self.plans)} plans to CSV: {output_path}")
        return output_path

    def export_pdf(self, output_path: Optional[Path] = None) -> Path:
        output_path = Path(output_path) if output_path else self._default_path("pdf")
        with open(output_path, 'wb') as f:
            f.write(generate_pdf_for_history(self.plans))
        logger.info(f"Exported {len(self.plans)} plans to PDF: {output_path}")
        return output_path
