from __future__ import annotations

import asyncio
from datetime import date

from src.rollbook.rollbook.client.http_gateway import HttpAttendanceGateway
from src.rollbook.rollbook.client.local_gateway import LocalAttendanceGateway
from src.rollbook.rollbook.core.enums import AttendanceStatus, ViewState
from src.rollbook.rollbook.core.exceptions import ValidationError
from src.rollbook.rollbook.engine.view import AttendanceView

D = date(2024, 3, 1)


def test_view_over_http_commits_and_refreshes(store, flask_session):
    store.add_group("g1", "Grade 1", member_count=5)
    gateway = HttpAttendanceGateway("http://testserver", session=flask_session)
    view = AttendanceView(gateway, page_size=2, today=lambda: D)

    async def scenario():
        groups = await view.list_groups()
        await view.select(groups[0].group_id)
        assert view.window.total_pages == 3
        view.mark("m1", "present")
        view.mark("m2", "absent")
        result = await view.save()
        await view.go_to_page(3)
        return result

    result = asyncio.run(scenario())

    assert result.affected_count == 2
    assert view.page == 3
    assert [m.member_id for m in view.working_set.members] == ["m5"]
    assert store.ledger[("g1", "m1", D)].status == AttendanceStatus.PRESENT
    assert ("g1", "m3", D) not in store.ledger
    assert view.analytics.ranking[0].member_id == "m1"
    assert [c[1] for c in flask_session.sent].count("/api/groups/g1/analytics/ranking") == 2


def test_server_rejection_keeps_edits(store, flask_session):
    store.add_group("g1", "Grade 1", member_count=1)
    view = AttendanceView(HttpAttendanceGateway("http://testserver", session=flask_session), today=lambda: D)

    async def scenario():
        await view.select("g1")
        view.mark("m1", "late")
        store.members["g1"] = []
        try:
            await view.save()
        except ValidationError:
            return True
        return False

    assert asyncio.run(scenario()) is True
    assert view.dirty
    assert isinstance(view.last_error, ValidationError)


def test_local_gateway_drives_the_view(store, container):
    store.add_group("g1", "Grade 1", member_count=3)
    view = AttendanceView(LocalAttendanceGateway(container), today=lambda: D)

    async def scenario():
        await view.select("g1")
        view.mark_all(AttendanceStatus.PRESENT)
        await view.save()
        await view.step_date(1)

    asyncio.run(scenario())

    assert view.state is ViewState.READY
    assert view.on_date == date(2024, 3, 2)
    assert all(v.status == AttendanceStatus.UNMARKED for v in view.working_set.values())
    assert [r.percentage for r in view.analytics.ranking] == [100.0, 100.0, 100.0]
