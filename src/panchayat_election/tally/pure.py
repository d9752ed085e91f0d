"""Side-effect-free vote tallying.

An alternative to the registry's internal ledger for callers that prefer to
fold votes into immutable snapshots (replaying a ballot box, merging booth
counts, undoing by keeping the previous tally).

Example
-------
>>> before = {"C1": 5, "C2": 3}
>>> after = tally_pure(before, "C1")
>>> after
{'C1': 6, 'C2': 3}
>>> before
{'C1': 5, 'C2': 3}
"""
from __future__ import annotations

import copy
import functools
from collections.abc import Iterable, Mapping

from panchayat_election._records import is_number


def tally_pure(current_tally: Mapping[str, int], candidate_id: str) -> dict[str, int]:
    """Return a new tally with *candidate_id* incremented by one.

    A candidate missing from *current_tally* starts at 1.  *current_tally*
    is never modified.  Anything that is not a mapping of numeric counts
    yields ``{}``.
    """
    if not isinstance(current_tally, Mapping) or not all(
        is_number(count) for count in current_tally.values()
    ):
        return {}
    updated = copy.deepcopy(dict(current_tally))
    updated[candidate_id] = updated.get(candidate_id, 0) + 1
    return updated


def fold_tally(
    candidate_ids: Iterable[str],
    initial: Mapping[str, int] | None = None,
) -> dict[str, int]:
    """Fold a stream of votes into a tally through ``tally_pure``.

    Parameters
    ----------
    candidate_ids:
        One candidate id per vote, in casting order.
    initial:
        Starting tally; an empty one when omitted.  It is not modified.
    """
    start: dict[str, int] = dict(initial) if isinstance(initial, Mapping) else {}
    return functools.reduce(tally_pure, candidate_ids, start)
