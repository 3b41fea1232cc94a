"""Condorcet-style pairwise tally (Copeland count)."""

import logging
from collections.abc import Sequence
from itertools import combinations

from polltally.models import Ballot, InvalidInputError, Placement, PollResult, ProposalSet
from polltally.tally import register_tally_method
from polltally.tally.base import TallyMethod

logger = logging.getLogger(__name__)


@register_tally_method
class CondorcetTally(TallyMethod):
    """Copeland-style count of pairwise wins.

    Algorithm:
    1. For every unordered pair {A, B}, count the ballots ranking A above B
       and the ballots ranking B above A. A ballot only counts towards a pair
       if it ranks both proposals; unranked proposals are not assumed to be
       last.
    2. A is credited against B if prefers_A >= prefers_B, and B against A if
       prefers_B >= prefers_A. Equal counts (including 0-0 on a pair nobody
       voted on) credit BOTH sides with a full win, not half a win each.
    3. A proposal's score is the number of pairs it was credited in, so it
       lies between 0 and n-1. With no ballots at all, every proposal
       scores n-1.

    The mutual credit on ties is the observable contract of this poll type
    and must not be changed to split points or strict majorities.

    Complexity: O(b * n³) for b ballots and n proposals, since each ballot
    looks up the position of both proposals of every pair.
    """

    poll_type = "condorcet"

    @property
    def name(self) -> str:
        return "Condorcet (Copeland count)"

    @property
    def description(self) -> str:
        return (
            "Counts the head-to-head comparisons each proposal wins or ties; "
            "a tie credits both proposals"
        )

    def calculate(self, proposals: ProposalSet, ballots: Sequence[Ballot]) -> PollResult:
        if not len(proposals):
            raise InvalidInputError("Cannot tally a poll with no proposals")

        labels = list(proposals)
        n = len(labels)

        # Step 1: Build pairwise preference matrix
        # d[A][B] = number of ballots ranking A above B
        d = {a: {b: 0 for b in labels if b != a} for a in labels}
        pairs = list(combinations(labels, 2))

        for ballot in ballots:
            ranking = list(ballot)
            for label in ranking:
                if label not in proposals:
                    raise InvalidInputError(
                        f"Ballot references unknown proposal: {label!r}"
                    )
            if len(set(ranking)) != len(ranking):
                raise InvalidInputError(f"Ballot ranks a proposal more than once: {ranking}")
            for a, b in pairs:
                pos_a = ballot.position(a)
                pos_b = ballot.position(b)
                if pos_a is None or pos_b is None:
                    # Silent on pairs it does not rank both of
                    continue
                if pos_a < pos_b:
                    d[a][b] += 1
                else:
                    d[b][a] += 1

        # Step 2: Credit pairwise wins, ties credit both sides
        credits: dict[str, list[str]] = {label: [] for label in labels}
        ties = []
        for a, b in pairs:
            prefers_a = d[a][b]
            prefers_b = d[b][a]
            if prefers_a >= prefers_b:
                credits[a].append(b)
            if prefers_b >= prefers_a:
                credits[b].append(a)
            if prefers_a == prefers_b:
                ties.append([a, b])
            logger.debug("pair %r vs %r: %d-%d", a, b, prefers_a, prefers_b)

        # Step 3: Score is the number of pairs credited
        scores = {label: len(credits[label]) for label in labels}
        logger.debug("pairwise scores: %s", scores)

        return PollResult(
            system_name=self.name,
            scores=scores,
            final_ranking=Placement.build_ranking(scores),
            details={
                "pairwise_preferences": d,
                "pairwise_credits": credits,
                "ties": ties,
                "num_ballots": len(ballots),
                "max_possible": n - 1,
                "explanation": (
                    "Each cell d[A][B] shows ballots ranking A above B; a ballot "
                    "that ranks only one of the two says nothing about the pair. "
                    "A proposal is credited against another if at least as many "
                    "ballots prefer it. Equal counts, including pairs nobody "
                    "ranked, credit both proposals with a full win."
                ),
            },
        )
