"""Election value objects.

Provides ``Candidate``, ``Voter``, ``VoteReceipt`` and ``CandidateResult``
plus the ``VoteRejection`` reasons reported through ``on_error``.

Example
-------
>>> from panchayat_election.election.schema import Candidate
>>> Candidate.from_dict({"id": "C1", "name": "Sarpanch Ram", "party": "Janata"})
Candidate(id='C1', name='Sarpanch Ram', party='Janata')
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from enum import Enum


class VoteRejection(str, Enum):
    """Reason strings handed to ``on_error`` when a vote is refused."""

    CANDIDATE_NOT_FOUND = "Candidate not found!!"
    VOTER_NOT_FOUND = "No voter found!!"
    ALREADY_VOTED = "Already Voted"


# ---------------------------------------------------------------------------
# Value objects
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Candidate:
    """A candidate standing in the election.

    Attributes
    ----------
    id:
        Unique identifier; the candidate's identity.
    name:
        Display name.
    party:
        Party the candidate represents.
    """

    id: str
    name: str
    party: str

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Candidate:
        return cls(
            id=str(data["id"]),
            name=str(data.get("name", "")),
            party=str(data.get("party", "")),
        )


@dataclass
class Voter:
    """A registered voter.

    ``has_voted`` starts ``False`` and is flipped exactly once by
    ``ElectionRegistry.cast_vote``.
    """

    id: str
    name: str
    age: float
    has_voted: bool = False


@dataclass(frozen=True)
class VoteReceipt:
    """Payload passed to ``on_success`` after a vote is recorded."""

    voter_id: str
    candidate_id: str


@dataclass
class CandidateResult:
    """Vote count for one candidate, as returned by ``get_results``."""

    id: str
    name: str
    party: str
    votes: int = 0

    def to_dict(self) -> dict[str, object]:
        return asdict(self)
