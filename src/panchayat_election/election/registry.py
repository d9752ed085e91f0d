"""In-memory election registry.

``ElectionRegistry`` owns the state of a single election: a fixed candidate
list, the voter roster and the append-only vote ledger.  All mutation goes
through ``register_voter`` and ``cast_vote``; results are always recomputed
from the ledger.

Example
-------
>>> election = create_election([
...     {"id": "C1", "name": "Sarpanch Ram", "party": "Janata"},
...     {"id": "C2", "name": "Pradhan Sita", "party": "Lok"},
... ])
>>> election.register_voter({"id": "V1", "name": "Mohan", "age": 25})
True
>>> election.cast_vote("V1", "C1", lambda r: "voted!", lambda e: "error: " + e)
'voted!'
>>> election.get_winner().id
'C1'
"""
from __future__ import annotations

import functools
import logging
import threading
from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Callable, TypeVar

from panchayat_election._records import get_field, is_number, is_record
from panchayat_election.election.schema import (
    Candidate,
    CandidateResult,
    VoteReceipt,
    VoteRejection,
    Voter,
)
from panchayat_election.errors import RegistryUnavailableError

if TYPE_CHECKING:
    from panchayat_election.config.loader import ElectionConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MIN_VOTER_AGE: int = 18

Comparator = Callable[[CandidateResult, CandidateResult], int]


def _by_votes_descending(left: CandidateResult, right: CandidateResult) -> int:
    return right.votes - left.votes


def _coerce_candidate(entry: object) -> Candidate | None:
    if isinstance(entry, Candidate):
        return entry
    if not is_record(entry):
        return None
    candidate_id = get_field(entry, "id")
    if not isinstance(candidate_id, str):
        return None
    return Candidate(
        id=candidate_id,
        name=str(get_field(entry, "name", "")),
        party=str(get_field(entry, "party", "")),
    )


class ElectionRegistry:
    """Registration, voting and results for one election.

    Parameters
    ----------
    candidates:
        Sequence of ``Candidate`` objects or mappings with ``id``, ``name``
        and ``party``.  Anything that is not a sequence leaves the registry
        in a degraded state where ``available`` is ``False`` and every
        operation raises ``RegistryUnavailableError``.
    min_voter_age:
        Minimum age accepted by ``register_voter``.
    """

    def __init__(
        self,
        candidates: Sequence[Candidate | Mapping[str, object]],
        min_voter_age: float = DEFAULT_MIN_VOTER_AGE,
    ) -> None:
        self._min_voter_age = min_voter_age
        self._voters: dict[str, Voter] = {}
        self._ledger: dict[str, str] = {}
        self._lock = threading.Lock()

        if not isinstance(candidates, Sequence) or isinstance(candidates, (str, bytes)):
            logger.warning(
                "Election registry built without a candidate sequence (got %s); "
                "no operations are available.",
                type(candidates).__name__,
            )
            self._available = False
            self._candidates: tuple[Candidate, ...] = ()
            return

        accepted: list[Candidate] = []
        for entry in candidates:
            candidate = _coerce_candidate(entry)
            if candidate is None:
                logger.warning("Skipping malformed candidate entry: %r", entry)
                continue
            accepted.append(candidate)

        self._available = True
        self._candidates = tuple(accepted)
        self._candidate_by_id = {c.id: c for c in accepted}

    @classmethod
    def from_config(
        cls,
        candidates: Sequence[Candidate | Mapping[str, object]],
        config: ElectionConfig,
    ) -> ElectionRegistry:
        """Build a registry using ``config.registry.min_voter_age``."""
        return cls(candidates, min_voter_age=config.registry.min_voter_age)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def available(self) -> bool:
        """``False`` when the registry was built from a non-sequence."""
        return self._available

    @property
    def candidates(self) -> tuple[Candidate, ...]:
        self._require("candidates")
        return self._candidates

    @property
    def roster_size(self) -> int:
        self._require("roster_size")
        return len(self._voters)

    @property
    def ledger_size(self) -> int:
        self._require("ledger_size")
        return len(self._ledger)

    def is_registered(self, voter_id: str) -> bool:
        self._require("is_registered")
        return voter_id in self._voters

    def has_voted(self, voter_id: str) -> bool:
        self._require("has_voted")
        voter = self._voters.get(voter_id)
        return voter is not None and voter.has_voted

    def ledger(self) -> dict[str, str]:
        """Return a copy of the ledger (voter id -> candidate id)."""
        self._require("ledger")
        with self._lock:
            return dict(self._ledger)

    # ------------------------------------------------------------------
    # Write API
    # ------------------------------------------------------------------

    def register_voter(self, voter: object) -> bool:
        """Add *voter* to the roster.

        Parameters
        ----------
        voter:
            Mapping or object with ``id`` (str), ``name`` (str) and ``age``
            (number).

        Returns
        -------
        bool
            ``True`` when the voter was registered.  ``False`` for a
            malformed record, an under-age voter or a duplicate ``id``;
            nothing is stored in that case.
        """
        self._require("register_voter")
        if not is_record(voter):
            logger.debug("Rejected voter registration: not a record (%r)", voter)
            return False

        voter_id = get_field(voter, "id")
        name = get_field(voter, "name")
        age = get_field(voter, "age")
        if not isinstance(voter_id, str) or not isinstance(name, str) or not is_number(age):
            logger.debug("Rejected voter registration: malformed fields in %r", voter)
            return False
        if age < self._min_voter_age:  # type: ignore[operator]
            logger.debug("Rejected voter %s: age %s below %s", voter_id, age, self._min_voter_age)
            return False

        with self._lock:
            if voter_id in self._voters:
                logger.debug("Rejected voter %s: already registered", voter_id)
                return False
            self._voters[voter_id] = Voter(id=voter_id, name=name, age=age)  # type: ignore[arg-type]

        logger.info("Registered voter %s", voter_id)
        return True

    def cast_vote(
        self,
        voter_id: str,
        candidate_id: str,
        on_success: Callable[[VoteReceipt], T],
        on_error: Callable[[str], T],
    ) -> T:
        """Record one vote and report the outcome through a callback.

        Exactly one of *on_success* / *on_error* is called, before this
        method returns, and its return value is passed back to the caller.

        Checks run in this order and the first failure wins:

        1. *candidate_id* must name a candidate (``"Candidate not found!!"``)
        2. *voter_id* must be registered (``"No voter found!!"``)
        3. the voter must not have voted yet (``"Already Voted"``)
        """
        self._require("cast_vote")
        rejection: VoteRejection | None = None

        with self._lock:
            voter = _lookup(self._voters, voter_id)
            if _lookup(self._candidate_by_id, candidate_id) is None:
                rejection = VoteRejection.CANDIDATE_NOT_FOUND
            elif voter is None:
                rejection = VoteRejection.VOTER_NOT_FOUND
            elif voter.has_voted:
                rejection = VoteRejection.ALREADY_VOTED
            else:
                voter.has_voted = True
                self._ledger[voter_id] = candidate_id

        if rejection is not None:
            logger.debug(
                "Vote rejected for voter %r / candidate %r: %s",
                voter_id,
                candidate_id,
                rejection.value,
            )
            return on_error(rejection.value)

        logger.info("Recorded vote from %s", voter_id)
        return on_success(VoteReceipt(voter_id=voter_id, candidate_id=candidate_id))

    # ------------------------------------------------------------------
    # Read API
    # ------------------------------------------------------------------

    def get_results(self, compare: Comparator | None = None) -> list[CandidateResult]:
        """Count votes per candidate from the ledger.

        Parameters
        ----------
        compare:
            Optional two-argument comparator (negative / zero / positive).
            Defaults to votes descending.  The sort is stable, so ties keep
            the original candidate order.

        Returns
        -------
        list[CandidateResult]
            One fresh record per candidate, zero-vote candidates included.
        """
        self._require("get_results")
        with self._lock:
            counts = _count(self._ledger.values())

        results = [
            CandidateResult(id=c.id, name=c.name, party=c.party, votes=counts.get(c.id, 0))
            for c in self._candidates
        ]
        comparator = compare if callable(compare) else _by_votes_descending
        return sorted(results, key=functools.cmp_to_key(comparator))

    def get_winner(self) -> CandidateResult | None:
        """Return the leading candidate, or ``None`` when no vote was cast.

        Ties go to the candidate listed first at construction.
        """
        self._require("get_winner")
        results = self.get_results()
        if not results or results[0].votes == 0:
            return None
        return results[0]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _require(self, operation: str) -> None:
        if not self._available:
            raise RegistryUnavailableError(operation)

    def __repr__(self) -> str:
        if not self._available:
            return "ElectionRegistry(available=False)"
        return (
            f"ElectionRegistry(candidates={len(self._candidates)}, "
            f"voters={len(self._voters)}, votes={len(self._ledger)})"
        )


def _lookup(table: Mapping[str, T], key: object) -> T | None:
    """``table.get(key)`` that treats an unhashable key as absent."""
    try:
        return table.get(key)  # type: ignore[call-overload]
    except TypeError:
        return None


def _count(candidate_ids: Iterable[str]) -> dict[str, int]:
    counts: dict[str, int] = {}
    for candidate_id in candidate_ids:
        counts[candidate_id] = counts.get(candidate_id, 0) + 1
    return counts


def create_election(
    candidates: Sequence[Candidate | Mapping[str, object]],
) -> ElectionRegistry:
    """Factory for ``ElectionRegistry`` with the default minimum voter age."""
    return ElectionRegistry(candidates)
