"""panchayat-election — In-memory election registry for village panchayat polls.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
>>> import panchayat_election as pe
>>> election = pe.create_election([
...     {"id": "C1", "name": "Sarpanch Ram", "party": "Janata"},
...     {"id": "C2", "name": "Pradhan Sita", "party": "Lok"},
... ])
>>> election.register_voter({"id": "V1", "name": "Mohan", "age": 25})
True
>>> election.cast_vote("V1", "C1", lambda r: "voted!", lambda e: "error: " + e)
'voted!'
"""
from __future__ import annotations

__version__: str = "0.1.0"

# ---------------------------------------------------------------------------
# Election
# ---------------------------------------------------------------------------
from panchayat_election.election.registry import ElectionRegistry, create_election
from panchayat_election.election.schema import (
    Candidate,
    CandidateResult,
    VoteReceipt,
    VoteRejection,
    Voter,
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
from panchayat_election.validation.validator import (
    ValidationDecision,
    ValidationRules,
    create_vote_validator,
)
from panchayat_election.regions.tally import RegionNode, count_votes_in_regions
from panchayat_election.tally.pure import fold_tally, tally_pure

# ---------------------------------------------------------------------------
# Config and errors
# ---------------------------------------------------------------------------
from panchayat_election.config.loader import ConfigLoader, ElectionConfig
from panchayat_election.errors import (
    ElectionConfigError,
    ElectionError,
    RegistryUnavailableError,
)

__all__ = [
    "__version__",
    # Election
    "Candidate",
    "CandidateResult",
    "ElectionRegistry",
    "VoteReceipt",
    "VoteRejection",
    "Voter",
    "create_election",
    # Helpers
    "RegionNode",
    "ValidationDecision",
    "ValidationRules",
    "count_votes_in_regions",
    "create_vote_validator",
    "fold_tally",
    "tally_pure",
    # Config and errors
    "ConfigLoader",
    "ElectionConfig",
    "ElectionConfigError",
    "ElectionError",
    "RegistryUnavailableError",
]
