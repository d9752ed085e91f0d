"""Voter eligibility validator factory.

``create_vote_validator`` turns a set of ``ValidationRules`` into a plain
function that answers ``ValidationDecision(valid, reason)`` for a voter-like
record.  The validator is advisory: ``ElectionRegistry.register_voter`` never
calls it, so callers compose the two themselves.

Example
-------
>>> validate = create_vote_validator({"min_age": 18, "required_fields": ["id", "name", "age"]})
>>> validate({"id": "V1", "name": "Mohan", "age": 25})
ValidationDecision(valid=True, reason='Allowed to vote')
>>> validate({"id": "V2", "age": 25}).reason
'name is missing'
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Callable

from pydantic import BaseModel, Field, ValidationError, field_validator

from panchayat_election._records import get_field, has_field, is_number, is_record

logger = logging.getLogger(__name__)

INVALID_RULES_REASON = "Invalid validation rules"
INVALID_VOTER_REASON = "Invalid voter object"
AGE_NOT_NUMBER_REASON = "Age must be a number"
ALLOWED_REASON = "Allowed to vote"

_RULE_KEYS: frozenset[str] = frozenset({"min_age", "minAge", "required_fields", "requiredFields"})


class ValidationRules(BaseModel):
    """Rules applied by a vote validator.

    Attributes
    ----------
    min_age:
        Youngest age allowed to vote.  Accepts the ``minAge`` alias.
    required_fields:
        Field names every voter record must carry, checked in order.
        Accepts the ``requiredFields`` alias.

    Unknown keys are rejected.
    """

    model_config = {"extra": "forbid", "populate_by_name": True}

    min_age: int = Field(default=18, ge=0, alias="minAge")
    required_fields: list[str] = Field(
        default_factory=lambda: ["id", "name", "age"], alias="requiredFields"
    )

    @field_validator("required_fields")
    @classmethod
    def fields_must_be_named(cls, values: list[str]) -> list[str]:
        for value in values:
            if not value:
                raise ValueError("required_fields entries must be non-empty strings")
        return values


@dataclass(frozen=True)
class ValidationDecision:
    """Outcome of validating one voter record."""

    valid: bool
    reason: str


VoteValidator = Callable[[object], ValidationDecision]


def _reject_everything(_voter: object = None) -> ValidationDecision:
    return ValidationDecision(valid=False, reason=INVALID_RULES_REASON)


def _parse_rules(rules: object) -> ValidationRules | None:
    if isinstance(rules, ValidationRules):
        return rules
    if not isinstance(rules, Mapping):
        logger.warning("Vote validator rules must be a mapping, got %s", type(rules).__name__)
        return None
    if not _RULE_KEYS.intersection(rules):
        logger.warning("Vote validator rules name no rule: %s", sorted(map(str, rules)))
        return None
    try:
        return ValidationRules.model_validate(dict(rules))
    except ValidationError as exc:
        logger.warning("Invalid vote validator rules: %s", exc)
        return None


def create_vote_validator(rules: ValidationRules | Mapping[str, object] | None) -> VoteValidator:
    """Build a validator function from *rules*.

    The factory never raises.  Rules that are not a mapping, that name
    neither ``min_age`` nor ``required_fields``, that carry unknown keys or
    that fail validation produce a validator rejecting every record with
    ``"Invalid validation rules"``.  A rule left out takes its default.

    Parameters
    ----------
    rules:
        A ``ValidationRules`` instance or a mapping with ``min_age`` and
        ``required_fields`` (camelCase aliases accepted).

    Returns
    -------
    Callable[[object], ValidationDecision]
        Checks, in order: the record is an object, each required field is
        present, ``age`` is numeric, ``age >= min_age``.
    """
    parsed = _parse_rules(rules)
    if parsed is None:
        return _reject_everything

    required_fields = tuple(parsed.required_fields)
    min_age = parsed.min_age

    def validate(voter: object) -> ValidationDecision:
        if not is_record(voter):
            return ValidationDecision(valid=False, reason=INVALID_VOTER_REASON)

        for field_name in required_fields:
            if not has_field(voter, field_name):
                return ValidationDecision(valid=False, reason=f"{field_name} is missing")

        age = get_field(voter, "age")
        if not is_number(age):
            return ValidationDecision(valid=False, reason=AGE_NOT_NUMBER_REASON)
        if age < min_age:  # type: ignore[operator]
            return ValidationDecision(valid=False, reason=f"Min age is {min_age}")

        return ValidationDecision(valid=True, reason=ALLOWED_REASON)

    return validate
