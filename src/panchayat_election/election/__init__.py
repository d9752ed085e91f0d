"""Election package — registry and value objects for a single election.

Public API
----------
- ``ElectionRegistry`` — owns candidates, roster and vote ledger
- ``create_election`` — factory for ``ElectionRegistry``
- ``Candidate`` — a candidate standing in the election
- ``Voter`` — a registered voter
- ``VoteReceipt`` — payload handed to ``on_success``
- ``CandidateResult`` — per-candidate vote count
- ``VoteRejection`` — reasons handed to ``on_error``
"""
from __future__ import annotations

from panchayat_election.election.registry import (
    DEFAULT_MIN_VOTER_AGE,
    ElectionRegistry,
    create_election,
)
from panchayat_election.election.schema import (
    Candidate,
    CandidateResult,
    VoteReceipt,
    VoteRejection,
    Voter,
)

__all__ = [
    "DEFAULT_MIN_VOTER_AGE",
    "ElectionRegistry",
    "create_election",
    "Candidate",
    "CandidateResult",
    "VoteReceipt",
    "VoteRejection",
    "Voter",
]
