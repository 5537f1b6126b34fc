"""Read-side projections joining cases, hearings and users."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List

from docket.schemas.entities import Case, CaseStatus, Hearing
from docket.schemas.responses import CaseStatistics, CaseWithHearings
from docket.store.base import Collection, EntityStore
from docket.utils.clock import as_utc


@dataclass
class JudgeCaseload:
    cases: List[CaseWithHearings] = field(default_factory=list)
    statistics: CaseStatistics = field(default_factory=CaseStatistics)


def case_statistics(cases: List[Case]) -> CaseStatistics:
    return CaseStatistics(
        total=len(cases),
        open_cases=sum(1 for c in cases if c.status == CaseStatus.OPEN.value),
        closed_cases=sum(1 for c in cases if c.status == CaseStatus.CLOSED.value),
    )


async def judge_caseload(store: EntityStore, judge_id: str) -> JudgeCaseload:
    """Cases assigned to ``judge_id``, each with its hearings, plus counts."""
    cases = [c for c in await store.scan(Collection.CASES) if c.judge_id == judge_id]
    if not cases:
        return JudgeCaseload()

    case_ids = {c.id for c in cases}
    hearings = [h for h in await store.scan(Collection.HEARINGS) if h.case_id in case_ids]

    nested = [
        CaseWithHearings(
            **c.model_dump(),
            hearings=[h for h in hearings if h.case_id == c.id],
        )
        for c in cases
    ]
    return JudgeCaseload(cases=nested, statistics=case_statistics(cases))


async def lawyer_caseload(store: EntityStore, lawyer_id: str) -> List[Case]:
    return [c for c in await store.scan(Collection.CASES) if lawyer_id in c.lawyer_ids]


async def judge_hearings(store: EntityStore, judge_id: str) -> List[Hearing]:
    return [h for h in await store.scan(Collection.HEARINGS) if h.judge_id == judge_id]


async def upcoming_hearings(store: EntityStore, judge_id: str, now: datetime) -> List[Hearing]:
    """Hearings strictly after ``now``, earliest first; ties keep scan order."""
    now = as_utc(now)
    hearings = [h for h in await judge_hearings(store, judge_id) if h.date > now]
    return sorted(hearings, key=lambda h: h.date)


__all__ = [
    "JudgeCaseload",
    "case_statistics",
    "judge_caseload",
    "lawyer_caseload",
    "judge_hearings",
    "upcoming_hearings",
]
