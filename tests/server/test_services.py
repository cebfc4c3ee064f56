from __future__ import annotations

from datetime import date

import pytest

from src.rollbook.rollbook.analytics.model import MemberStats
from src.rollbook.rollbook.analytics.ranking import rank_members
from src.rollbook.rollbook.attendance.model import StatusValue
from src.rollbook.rollbook.attendance.policy import EditWindowPolicy
from src.rollbook.rollbook.attendance.service import LedgerService
from src.rollbook.rollbook.core.enums import AttendanceStatus
from src.rollbook.rollbook.core.exceptions import NotFoundError, ValidationError
from src.rollbook.rollbook.groups.service import GroupService
from src.rollbook.rollbook.roster.model import Member

D = date(2024, 3, 1)


def test_groups_are_listed_in_school_order(store, container):
    for gid, name in [
        ("a", "Grade 10"),
        ("b", "Art Club"),
        ("c", "U.K.G. Blue"),
        ("d", "Grade 2 - A"),
        ("e", "Nursery"),
        ("f", "L.K.G."),
    ]:
        store.add_group(gid, name)
    store.add_group("x", "Grade 1", active=False)

    names = [g.name for g in container.group_service.list_groups()]

    assert names == ["Nursery", "L.K.G.", "U.K.G. Blue", "Grade 2 - A", "Grade 10", "Art Club"]


def test_roster_page_defaults_to_unmarked_without_ledger_rows(store, container):
    store.add_group("g1", "Grade 1", member_count=3)

    page = container.roster_service.get_page(group_id="g1", on_date=D, page=1, page_size=2)

    assert page.total_count == 3
    assert [m.member_id for m in page.members] == ["m1", "m2"]
    assert {s.status for s in page.statuses} == {AttendanceStatus.UNMARKED}


def test_roster_unknown_group_is_not_found(container):
    with pytest.raises(NotFoundError):
        container.roster_service.get_page(group_id="nope", on_date=D)


@pytest.mark.parametrize("page,page_size", [(0, 100), (1, 0), ("x", 100), (1, 10_000)])
def test_roster_rejects_bad_paging(store, container, page, page_size):
    store.add_group("g1", "Grade 1", member_count=1)

    with pytest.raises(ValidationError):
        container.roster_service.get_page(group_id="g1", on_date=D, page=page, page_size=page_size)


def test_commit_upserts_only_given_members(store, container):
    store.add_group("g1", "Grade 1", member_count=3)
    store.ledger[("g1", "m3", D)] = StatusValue("m3", AttendanceStatus.LATE)

    result = container.ledger_service.commit(
        group_id="g1",
        on_date=D,
        entries=[{"member_id": "m1", "status": "present"}, {"member_id": "m2", "status": "absent", "notes": " flu "}],
    )

    assert result.affected_count == 2
    page = container.roster_service.get_page(group_id="g1", on_date=D)
    assert [(s.member_id, s.status) for s in page.statuses] == [
        ("m1", AttendanceStatus.PRESENT),
        ("m2", AttendanceStatus.ABSENT),
        ("m3", AttendanceStatus.LATE),
    ]
    assert page.statuses[1].notes == "flu"


def test_commit_is_repeatable_with_same_count(store, container):
    store.add_group("g1", "Grade 1", member_count=2)
    entries = [StatusValue("m1", AttendanceStatus.PRESENT), StatusValue("m2", AttendanceStatus.ABSENT)]

    first = container.ledger_service.commit(group_id="g1", on_date=D, entries=entries)
    second = container.ledger_service.commit(group_id="g1", on_date=D, entries=entries)

    assert first.affected_count == second.affected_count == 2


def test_commit_accepts_status_enums_in_dict_entries(store, container):
    store.add_group("g1", "Grade 1", member_count=1)

    container.ledger_service.commit(group_id="g1", on_date=D, entries=[{"member_id": "m1", "status": AttendanceStatus.LATE}])

    assert store.ledger[("g1", "m1", D)].status == AttendanceStatus.LATE


@pytest.mark.parametrize(
    "entries",
    [
        [{"member_id": "m1", "status": "unmarked"}],
        [{"member_id": "m1", "status": "sleeping"}],
        [{"member_id": "m1", "status": "present"}, {"member_id": "m1", "status": "absent"}],
        [{"member_id": "stranger", "status": "present"}],
        [{"status": "present"}],
        [],
        ["m1"],
    ],
)
def test_commit_rejects_bad_batches(store, container, entries):
    store.add_group("g1", "Grade 1", member_count=2)

    with pytest.raises(ValidationError):
        container.ledger_service.commit(group_id="g1", on_date=D, entries=entries)

    assert store.upsert_calls == 0


def test_commit_unknown_group_is_not_found(container):
    with pytest.raises(NotFoundError):
        container.ledger_service.commit(group_id="nope", on_date=D, entries=[{"member_id": "m1", "status": "present"}])


def test_past_dates_are_locked_by_default(store):
    store.add_group("g1", "Grade 1", member_count=1)
    policy = EditWindowPolicy(past_days=0, today=lambda: date(2024, 3, 5))
    svc = LedgerService(store, store, GroupService(store), policy=policy)

    with pytest.raises(ValidationError):
        svc.commit(group_id="g1", on_date=date(2024, 3, 4), entries=[{"member_id": "m1", "status": "present"}])

    result = svc.commit(group_id="g1", on_date=date(2024, 3, 5), entries=[{"member_id": "m1", "status": "present"}])
    assert result.affected_count == 1


def test_edit_window_setting():
    today = date(2024, 3, 5)

    assert EditWindowPolicy.from_setting(-1).earliest_editable() is None
    assert EditWindowPolicy(past_days=2, today=lambda: today).earliest_editable() == date(2024, 3, 3)
    EditWindowPolicy(past_days=2, today=lambda: today).ensure_editable(date(2024, 3, 3))


def test_analytics_percentages_and_ranking(store, container):
    store.add_group(
        "g1",
        "Grade 1",
        members=[Member("m1", "Ann"), Member("m2", "Ben"), Member("m3", "Cai")],
    )
    for day, statuses in [(1, ("present", "present", "absent")), (2, ("present", "late", "absent")), (3, ("absent", "present", "absent"))]:
        container.ledger_service.commit(
            group_id="g1",
            on_date=date(2024, 3, day),
            entries=[{"member_id": m, "status": s} for m, s in zip(("m1", "m2", "m3"), statuses)],
        )

    summary = container.analytics_service.daily_summary("g1")
    ranking = container.analytics_service.ranking("g1")

    assert [(r.member_name, r.percentage) for r in summary] == [("Ann", 66.67), ("Ben", 66.67), ("Cai", 0.0)]
    assert [(r.rank, r.member_id) for r in ranking] == [(1, "m1"), (2, "m2"), (3, "m3")]


def test_member_without_rows_has_zero_percent():
    ranking = rank_members([MemberStats("m1", "Ann", 0, 0), MemberStats("m2", "Ben", 4, 1)])

    assert [(r.member_id, r.percentage) for r in ranking] == [("m2", 25.0), ("m1", 0.0)]
