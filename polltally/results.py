"""Orchestrator: validate poll data and run the tally method for its type."""

import logging
from collections.abc import Iterable, Sequence

from polltally.models import (
    DEFAULT_POLL_TYPE,
    InvalidInputError,
    Poll,
    PollResult,
    build_ballot,
    build_proposal_set,
)
from polltally.tally import get_tally_method

# Import tally methods to register them
from polltally.tally import condorcet  # noqa: F401

logger = logging.getLogger(__name__)


def tally(
    proposals: Sequence[str],
    ballots: Iterable[Sequence[str]],
    poll_type: str = DEFAULT_POLL_TYPE,
) -> PollResult:
    """Validate raw proposal and ballot labels, then tally them.

    Args:
        proposals: Proposal labels in declaration order
        ballots: One ranked list of labels per voter, most preferred first
        poll_type: Key of the tally method to use

    Returns:
        PollResult with the scores, final ranking and calculation details

    Raises:
        UnsupportedPollTypeError: If no tally method is registered for poll_type
        InvalidInputError: If the proposals or any ballot are invalid. Nothing
            is scored in that case.
    """
    method = get_tally_method(poll_type)

    proposal_set = build_proposal_set(proposals)
    if not len(proposal_set):
        raise InvalidInputError("Cannot tally a poll with no proposals")
    validated = [build_ballot(proposal_set, ballot) for ballot in ballots]

    logger.info(
        "tallying %s poll: %d proposals, %d ballots",
        poll_type, len(proposal_set), len(validated),
    )
    return method.calculate(proposal_set, validated)


def calculate_poll(poll: Poll) -> PollResult:
    """Compute the full result of a poll document using its poll type."""
    return tally(poll.proposals, poll.ballots, poll.poll_type)


def get_vote_results(poll: Poll) -> dict[str, int]:
    """Return the score of every proposal in a poll document."""
    return calculate_poll(poll).scores
