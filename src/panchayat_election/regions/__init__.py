"""Regions package — vote totals across nested region trees."""
from __future__ import annotations

from panchayat_election.regions.tally import RegionNode, count_votes_in_regions

__all__ = ["RegionNode", "count_votes_in_regions"]
