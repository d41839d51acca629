"""
Project: GNSS Site Log Builder
Date: 10/17/26 10:58 AM
"""

from __future__ import annotations

from collections import defaultdict
from types import MappingProxyType
from typing import Dict, Iterable, Optional, Sequence, Tuple, TypeVar, Callable

# app
from ..core.interval import Interval
from ..core.data_classes import Session
from ..core.type_declarations import MatchPolicy

T = TypeVar('T')


def match_overlapping(candidates: Sequence[T],
                      intervals: Sequence[Interval],
                      policy: MatchPolicy = MatchPolicy.FIRST,
                      span: Callable[[T], Interval] = lambda c: c.span) -> Optional[T]:
    """
    Select the candidate whose span overlaps every interval. Candidates are scanned in stored
    order; FIRST returns the earliest hit, LAST the latest one.
    """
    matched = None
    for candidate in candidates:
        if all(span(candidate).overlaps(interval) for interval in intervals):
            if policy == MatchPolicy.FIRST:
                return candidate
            matched = candidate

    return matched


class SessionIndex:
    """
    Sessions grouped by mark code. Groups keep the input order, not the time order, because the
    first overlapping session in that order is the one a record gets attributed to.
    """

    def __init__(self, groups: Dict[str, Tuple[Session, ...]]):
        self._groups = MappingProxyType(dict(groups))

    @classmethod
    def from_records(cls, sessions: Iterable[Session]) -> SessionIndex:
        groups = defaultdict(list)
        for session in sessions:
            groups[session.mark_code].append(session)

        return cls({code: tuple(group) for code, group in groups.items()})

    def sessions_for(self, mark_code: str) -> Tuple[Session, ...]:
        return self._groups.get(mark_code, ())

    def match(self, mark_code: str, *intervals: Interval,
              policy: MatchPolicy = MatchPolicy.FIRST) -> Optional[Session]:
        """session of the mark overlapping all intervals, None if there is none"""
        return match_overlapping(self.sessions_for(mark_code), intervals, policy)

    def __contains__(self, mark_code: str) -> bool:
        return mark_code in self._groups

    def __len__(self) -> int:
        return len(self._groups)
