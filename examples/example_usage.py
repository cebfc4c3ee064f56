"""Example: take a day's attendance through AttendanceView.

By default the view talks to the service layer in-process (MySQL from the
active settings module); ``--http`` goes through the running API instead.
"""

import argparse
import asyncio
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.rollbook.rollbook.client.local_gateway import LocalAttendanceGateway
from src.rollbook.rollbook.common.logging_setup import init_logging
from src.rollbook.rollbook.container import build_container
from src.rollbook.rollbook.core.enums import AttendanceStatus
from src.rollbook.rollbook.engine.factory import build_http_view
from src.rollbook.rollbook.engine.view import AttendanceView


async def run(view: AttendanceView, group_id=None):
    groups = await view.list_groups()
    if not groups:
        print("No active groups, run scripts/seed_db.py first")
        return

    await view.select(group_id or groups[0].group_id)
    if view.last_error:
        print(f"Could not load roster: {view.last_error}")
        return

    print(f"{view.group_id} on {view.on_date}: page {view.page}/{view.window.total_pages}, {view.window.total_count} members")
    if view.window.has_next:
        print("Only the first page is marked below")

    view.mark_all(AttendanceStatus.PRESENT)
    first = view.working_set.members[0]
    view.mark(first.member_id, AttendanceStatus.LATE, notes="bus")

    counts = view.live_counts()
    print(f"Before save: present={counts.present} late={counts.late} ({counts.presence_percentage}%)")

    result = await view.save()
    print(f"Saved {result.affected_count} entries")

    if view.analytics:
        for row in view.analytics.ranking[:5]:
            flag = " (low)" if row.below_threshold else ""
            print(f"  #{row.rank} {row.member_name}: {row.percentage}%{flag}")


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--http", action="store_true", help="use the HTTP API from API_BASE_URL")
    parser.add_argument("--group", help="group id (defaults to the first group)")
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    init_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if args.http:
        view = build_http_view(settings)
    else:
        container = build_container(
            db_config=settings.DB_CONFIG,
            page_size=settings.PAGE_SIZE,
            edit_window_days=settings.EDIT_WINDOW_DAYS,
        )
        view = AttendanceView(LocalAttendanceGateway(container), page_size=container.page_size)

    asyncio.run(run(view, args.group))


if __name__ == "__main__":
    main()
