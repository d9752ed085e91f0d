#!/usr/bin/env python3
"""Example: Quickstart — panchayat-election

Minimal working example: set up a ward election, screen and register
voters, cast votes, and total booth counts across a block.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install panchayat-election
"""
from __future__ import annotations

import panchayat_election as pe


def main() -> None:
    print(f"panchayat-election version: {pe.__version__}")

    # Step 1: Create the election with a fixed candidate list
    election = pe.create_election([
        {"id": "C1", "name": "Sarpanch Ram", "party": "Janata"},
        {"id": "C2", "name": "Pradhan Sita", "party": "Lok"},
    ])

    # Step 2: Screen applicants, then register the eligible ones
    validate = pe.create_vote_validator({"min_age": 18, "required_fields": ["id", "name", "age"]})
    applicants = [
        {"id": "V1", "name": "Mohan", "age": 25},
        {"id": "V2", "name": "Kid", "age": 15},
        {"id": "V3", "name": "Geeta", "age": 52},
    ]
    for applicant in applicants:
        decision = validate(applicant)
        registered = decision.valid and election.register_voter(applicant)
        print(f"  {applicant['id']}: {decision.reason} (registered={registered})")

    # Step 3: Cast votes
    for voter_id, candidate_id in [("V1", "C1"), ("V3", "C2"), ("V1", "C2"), ("V2", "C1")]:
        message = election.cast_vote(
            voter_id,
            candidate_id,
            lambda receipt: f"vote recorded for {receipt.candidate_id}",
            lambda reason: f"rejected: {reason}",
        )
        print(f"  {voter_id} -> {candidate_id}: {message}")

    # Step 4: Count booth totals across the block
    block = pe.RegionNode(
        name="Block",
        votes=0,
        sub_regions=[pe.RegionNode(name="Booth 1", votes=1), pe.RegionNode(name="Booth 2", votes=1)],
    )
    print(f"\nBlock total: {pe.count_votes_in_regions(block)}")
    print(f"Ledger size: {election.ledger_size}")


if __name__ == "__main__":
    main()
