"""Tests for caseload and hearing projections"""

from datetime import timedelta

import pytest

from docket import queries
from docket.schemas import Case, Hearing
from docket.store import Collection
from tests.conftest import NOW


async def _case(store, case_id, judge_id=None, lawyer_ids=(), status="Open"):
    case = Case(
        id=case_id,
        case_number=f"CV-{case_id}",
        title=f"Case {case_id}",
        description="Dispute",
        status=status,
        judge_id=judge_id,
        lawyer_ids=list(lawyer_ids),
        created_at=NOW,
    )
    await store.put(Collection.CASES, case.id, case)
    return case


async def _hearing(store, hearing_id, case_id, judge_id, when):
    hearing = Hearing(
        id=hearing_id,
        case_id=case_id,
        judge_id=judge_id,
        date=when,
        location="Courtroom 4",
        description="Motion hearing",
        created_at=NOW,
    )
    await store.put(Collection.HEARINGS, hearing.id, hearing)
    return hearing


@pytest.mark.asyncio
async def test_judge_caseload_nests_hearings_and_counts(store):
    await _case(store, "c1", judge_id="j1")
    await _case(store, "c2", judge_id="j1", status="Closed")
    await _case(store, "c3", judge_id="j1", status="Adjourned")
    await _case(store, "c4", judge_id="j2")
    await _hearing(store, "h1", "c1", "j1", NOW + timedelta(days=1))
    await _hearing(store, "h2", "c1", "j1", NOW + timedelta(days=2))
    await _hearing(store, "h3", "c4", "j2", NOW + timedelta(days=1))

    caseload = await queries.judge_caseload(store, "j1")

    assert [c.id for c in caseload.cases] == ["c1", "c2", "c3"]
    assert [h.id for h in caseload.cases[0].hearings] == ["h1", "h2"]
    assert caseload.cases[1].hearings == []
    assert caseload.statistics.total == 3
    assert caseload.statistics.open_cases == 1
    assert caseload.statistics.closed_cases == 1


@pytest.mark.asyncio
async def test_judge_caseload_empty_is_zero_counts(store):
    caseload = await queries.judge_caseload(store, "nobody")

    assert caseload.cases == []
    assert caseload.statistics.model_dump() == {"total": 0, "open_cases": 0, "closed_cases": 0}


@pytest.mark.asyncio
async def test_lawyer_caseload_filters_by_membership(store):
    await _case(store, "c1", lawyer_ids=["l1", "l2"])
    await _case(store, "c2", lawyer_ids=["l2"])
    await _case(store, "c3")

    assert [c.id for c in await queries.lawyer_caseload(store, "l2")] == ["c1", "c2"]
    assert [c.id for c in await queries.lawyer_caseload(store, "l1")] == ["c1"]
    assert await queries.lawyer_caseload(store, "l9") == []


@pytest.mark.asyncio
async def test_judge_hearings(store):
    await _hearing(store, "h1", "c1", "j1", NOW)
    await _hearing(store, "h2", "c1", "j2", NOW)

    assert [h.id for h in await queries.judge_hearings(store, "j1")] == ["h1"]


@pytest.mark.asyncio
async def test_upcoming_hearings_strictly_after_now_sorted(store):
    await _hearing(store, "t3", "c1", "j1", NOW + timedelta(hours=3))
    await _hearing(store, "t1", "c1", "j1", NOW - timedelta(hours=1))
    await _hearing(store, "at-now", "c1", "j1", NOW)
    await _hearing(store, "t2", "c1", "j1", NOW + timedelta(hours=1))
    await _hearing(store, "other", "c1", "j2", NOW + timedelta(hours=2))

    upcoming = await queries.upcoming_hearings(store, "j1", NOW)

    assert [h.id for h in upcoming] == ["t2", "t3"]


@pytest.mark.asyncio
async def test_upcoming_hearings_ties_keep_scan_order(store):
    when = NOW + timedelta(days=1)
    await _hearing(store, "first", "c1", "j1", when)
    await _hearing(store, "earlier", "c1", "j1", NOW + timedelta(hours=1))
    await _hearing(store, "second", "c1", "j1", when)

    upcoming = await queries.upcoming_hearings(store, "j1", NOW)

    assert [h.id for h in upcoming] == ["earlier", "first", "second"]


@pytest.mark.asyncio
async def test_upcoming_hearings_accepts_naive_now(store):
    await _hearing(store, "h1", "c1", "j1", NOW + timedelta(minutes=1))

    upcoming = await queries.upcoming_hearings(store, "j1", NOW.replace(tzinfo=None))

    assert [h.id for h in upcoming] == ["h1"]


def test_case_statistics_ignores_free_text_statuses():
    cases = [
        Case(id=str(i), case_number="n", title="t", description="d", status=s, created_at=NOW)
        for i, s in enumerate(["Open", "Open", "Closed", "Stayed"])
    ]
    stats = queries.case_statistics(cases)
    assert (stats.total, stats.open_cases, stats.closed_cases) == (4, 2, 1)
