"""Command-line planner: browse the catalog, estimate savings, save and manage plans.

Examples:
    garden-planner plants --category Herb
    garden-planner save tomato=2 basil=4 --name "Balcony"
    garden-planner history
    garden-planner export --format csv --file plans.csv
"""
import argparse
import sys
from typing import List, Optional

from garden.client.api_client import GardenApiClient
from garden.client.session import ActionFailed, PlannerSession
from garden.logic.reporting.history import format_plan_date, plan_summary
from garden.logic.valuation.savings import format_money
from garden.utilities.config import GARDEN_API_URL
from garden.utilities.constants import ALL_CATEGORIES, CATEGORIES



def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='garden-planner', description='Plan your harvest and track grocery savings')
    parser.add_argument('--api-url', default=GARDEN_API_URL, help='Base URL of the garden API')
    sub = parser.add_subparsers(dest='command', required=True)

    plants = sub.add_parser('plants', help='List catalog plants')
    plants.add_argument('--search', default='', help='Case-insensitive name filter')
    plants.add_argument('--category', default=ALL_CATEGORIES, choices=(ALL_CATEGORIES,) + CATEGORIES)

    save = sub.add_parser('save', help='Save a plan from plant=quantity pairs')
    save.add_argument('quantities', nargs='+', metavar='PLANT=QTY')
    save.add_argument('--name', help='Plan name')
    save.add_argument('--dry-run', action='store_true', help='Only show the estimate')

    sub.add_parser('history', help='List saved plans, newest first')

    delete = sub.add_parser('delete', help='Delete one saved plan')
    delete.add_argument('plan_id')
    delete.add_argument('--yes', action='store_true', help='Do not ask for confirmation')

    clear = sub.add_parser('clear', help='Delete every saved plan')
    clear.add_argument('--yes', action='store_true', help='Do not ask for confirmation')

    sub.add_parser('stats', help='Totals across all saved plans')
    sub.add_parser('trend', help='Savings per plan for the chart window')

    export = sub.add_parser('export', help='Export plan history')
    export.add_argument('--format', choices=['csv', 'pdf'], default='csv')
    export.add_argument('--file', help='Output file path')
    return parser


def _confirm(question: str) -> bool:
    return input(f"{question} [y/N] ").strip().lower() in ('y', 'yes')


def _cmd_plants(session: PlannerSession, args):
    session.refresh_catalog()
    session.search_term = args.search
    session.category = args.category
    for plant in session.visible_plants:
        print(f"{plant.id}  {plant}")


def _cmd_save(session: PlannerSession, args) -> int:
    session.refresh_catalog()
    for pair in args.quantities:
        key, sep, value = pair.partition('=')
        plant = session.find_plant(key)
        if not sep or plant is None:
            print(f"Unknown plant or bad pair: {pair}", file=sys.stderr)
            return 2
        session.set_quantity(plant.id, value)
    print(f"Estimated savings: {format_money(session.total_savings)}")
    if args.dry_run:
        return 0
    plan = session.save(name=args.name)
    print(f"Garden Plan Saved! ({plan.id})")
    return 0


def _cmd_history(session: PlannerSession, args):
    session.refresh_history()
    if not session.history:
        print("No saved gardens yet.")
    for plan in session.history:
        print(f"{plan.id}  {format_plan_date(plan)}  {plan_summary(plan)}  {format_money(plan.total_estimated_savings)}")


def _cmd_delete(session: PlannerSession, args):
    if args.yes or _confirm("Are you sure you want to delete this plan?"):
        session.delete_plan(args.plan_id)
        print("Plan deleted.")


def _cmd_clear(session: PlannerSession, args):
    if args.yes or _confirm("Delete ALL saved plans?"):
        count = session.delete_all()
        print(f"Deleted {count} plans.")


def _cmd_stats(session: PlannerSession, args):
    session.refresh_history()
    stats = session.stats
    print(f"Plans: {stats['total_plans']}")
    print(f"Total savings: {format_money(stats['total_money'])}")
    print(f"Total harvest: {stats['total_pounds']:.2f} lbs")


def _cmd_trend(session: PlannerSession, args):
    session.refresh_history()
    for day, savings in session.trend:
        print(f"{day}  {format_money(savings)}")


def _cmd_export(session: PlannerSession, args):
    session.refresh_history()
    path = session.export(args.format, args.file)
    print(f"Exported to: {path}")


COMMANDS = {
    'plants': _cmd_plants,
    'save': _cmd_save,
    'history': _cmd_history,
    'delete': _cmd_delete,
    'clear': _cmd_clear,
    'stats': _cmd_stats,
    'trend': _cmd_trend,
    'export': _cmd_export,
}


def main(argv: Optional[List[str]] = None, api: Optional[GardenApiClient] = None) -> int:
    args = _build_parser().parse_args(argv)
    session = PlannerSession(api or GardenApiClient(base_url=args.api_url))
    try:
        return COMMANDS[args.command](session, args) or 0
    except ActionFailed as e:
        print(e.notice, file=sys.stderr)
        return 1
    finally:
        if api is None:
            session.api.close()


if __name__ == "__main__":
    sys.exit(main())
