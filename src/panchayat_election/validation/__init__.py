"""Validation package — advisory voter eligibility checks."""
from __future__ import annotations

from panchayat_election.validation.validator import (
    ValidationDecision,
    ValidationRules,
    VoteValidator,
    create_vote_validator,
)

__all__ = [
    "ValidationDecision",
    "ValidationRules",
    "VoteValidator",
    "create_vote_validator",
]
