"""Tally package — functional, non-mutating vote counters."""
from __future__ import annotations

from panchayat_election.tally.pure import fold_tally, tally_pure

__all__ = ["fold_tally", "tally_pure"]
