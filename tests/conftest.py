"""Shared test helpers."""

import json
from pathlib import Path

import pytest
from faker import Faker

from polltally.models import Ballot, PollResult, ProposalSet, build_ballot, build_proposal_set

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def make_ballots(
    proposals: list[str], rankings: list[list[str]]
) -> tuple[ProposalSet, list[Ballot]]:
    """Build a validated proposal set and ballots from plain label lists.

    Args:
        proposals: Proposal labels in declaration order
        rankings: One ranked list of labels per voter, most preferred first

    Returns:
        (ProposalSet, list of Ballots)
    """
    proposal_set = build_proposal_set(proposals)
    return proposal_set, [build_ballot(proposal_set, r) for r in rankings]


def ranking_names(result: PollResult) -> list[str]:
    """Proposal labels of a result's final ranking, 1st to last."""
    return [p.name for p in result.final_ranking]


@pytest.fixture
def poll_document():
    """Anonymized exported poll (see scripts/anonymize_poll.py)."""
    path = FIXTURES_DIR / "poll.json"
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture
def fake():
    fake = Faker()
    fake.seed_instance(20260201)
    return fake
