"""Core data models for polls, ballots and tally results."""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Self

DEFAULT_POLL_TYPE = "condorcet"


class InvalidInputError(ValueError):
    """Malformed or inconsistent proposal/ballot data."""
    pass


@dataclass(frozen=True)
class ProposalSet:
    """Ordered set of unique proposal labels.

    Declaration order is kept for output ordering only; it carries no
    ranking meaning. Build instances with :func:`build_proposal_set`.
    """
    labels: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.labels)

    def __iter__(self) -> Iterator[str]:
        return iter(self.labels)

    def __contains__(self, label: object) -> bool:
        return label in self.labels


@dataclass(frozen=True)
class Ballot:
    """One voter's ranking, most preferred first.

    A ballot may rank only some of the proposals. Proposals it leaves out are
    unranked, not implicitly last. Build instances with :func:`build_ballot`.
    """
    ranking: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.ranking)

    def __iter__(self) -> Iterator[str]:
        return iter(self.ranking)

    def __contains__(self, label: object) -> bool:
        return label in self.ranking

    def position(self, label: str) -> int | None:
        """Get the 0-indexed rank of a proposal, or None if it is unranked."""
        try:
            return self.ranking.index(label)
        except ValueError:
            return None


def build_proposal_set(labels: Iterable[str]) -> ProposalSet:
    """Validate proposal labels and return them as an ordered set.

    Raises:
        InvalidInputError: If labels is a bare string, or any label is not
            a non-empty string or is duplicated
    """
    if isinstance(labels, str):
        raise InvalidInputError(f"Proposals must be a list of labels, not a string: {labels!r}")
    seen: set[str] = set()
    ordered = []
    for label in labels:
        if not isinstance(label, str) or not label:
            raise InvalidInputError(f"Invalid proposal label: {label!r}")
        if label in seen:
            raise InvalidInputError(f"Duplicate proposal label: {label!r}")
        seen.add(label)
        ordered.append(label)
    return ProposalSet(labels=tuple(ordered))


def build_ballot(proposals: ProposalSet, ranked_labels: Iterable[str]) -> Ballot:
    """Validate one voter's ranking against the proposal set.

    Partial rankings are accepted; every proposal does not need to appear.

    Raises:
        InvalidInputError: If ranked_labels is a bare string, or a label is
            not in the proposal set or appears more than once
    """
    if isinstance(ranked_labels, str):
        raise InvalidInputError(f"Ballot must be a list of labels, not a string: {ranked_labels!r}")
    seen: set[str] = set()
    ranking = []
    for label in ranked_labels:
        if label not in proposals:
            raise InvalidInputError(f"Ballot references unknown proposal: {label!r}")
        if label in seen:
            raise InvalidInputError(f"Ballot ranks proposal {label!r} more than once")
        seen.add(label)
        ranking.append(label)
    return Ballot(ranking=tuple(ranking))


@dataclass
class Poll:
    """A poll document as handed over by the poll store.

    Attributes:
        name: Human-readable poll name
        proposals: Proposal labels in declaration order
        ballots: One ranked list of labels per voter, most preferred first
        poll_type: Key of the tally method used to compute results

    Example:
        >>> poll = Poll.from_dict({
        ...     "name": "Team lunch",
        ...     "type": "condorcet",
        ...     "proposals": ["Pizza", "Sushi", "Tacos"],
        ...     "votes": [
        ...         {"user": "XWiki.Alice", "votes": ["Sushi", "Pizza"]},
        ...         {"user": "XWiki.Bob", "votes": ["Tacos", "Sushi", "Pizza"]},
        ...     ],
        ... })
    """
    name: str
    proposals: list[str]
    ballots: list[list[str]]
    poll_type: str = DEFAULT_POLL_TYPE

    @property
    def num_proposals(self) -> int:
        return len(self.proposals)

    @property
    def num_ballots(self) -> int:
        return len(self.ballots)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Build a Poll from its stored document form.

        Each entry of ``votes`` is either ``{"user": ..., "votes": [...]}``
        or a bare list of labels. Voter identities are dropped.

        Raises:
            InvalidInputError: If the document does not have the expected shape
        """
        try:
            if isinstance(data["proposals"], str):
                raise TypeError("proposals must be a list of labels")
            proposals = list(data["proposals"])
            ballots = []
            for vote in data.get("votes", []):
                ranking = vote["votes"] if isinstance(vote, dict) else vote
                if isinstance(ranking, str):
                    raise TypeError("a ballot must be a list of proposal labels")
                ballots.append(list(ranking))
        except (KeyError, TypeError) as e:
            raise InvalidInputError(f"Malformed poll document: {e}") from e

        return cls(
            name=data.get("name", "Untitled poll"),
            proposals=proposals,
            ballots=ballots,
            poll_type=data.get("type") or DEFAULT_POLL_TYPE,
        )


@dataclass
class Placement:
    """A proposal's placement in a tally result.

    Attributes:
        name: Proposal label
        rank: 1-indexed placement (tied proposals share the same rank)
        tied: Whether this proposal is tied with others at this rank
    """
    name: str
    rank: int
    tied: bool

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "rank": self.rank, "tied": self.tied}

    @classmethod
    def build_ranking(cls, scores: Mapping[str, int]) -> list[Self]:
        """Rank proposals by descending score.

        Proposals with equal scores share a rank and are flagged as tied; the
        next rank skips past the whole group. Within a group the proposals keep
        the iteration order of ``scores``.
        """
        placements = []
        rank = 1
        for score in sorted(set(scores.values()), reverse=True):
            group = [name for name, s in scores.items() if s == score]
            tied = len(group) > 1
            placements.extend(cls(name=name, rank=rank, tied=tied) for name in group)
            rank += len(group)
        return placements


@dataclass
class PollResult:
    """Result from a tally method.

    Attributes:
        system_name: Human-readable name of the tally method
        scores: Score per proposal label, in proposal declaration order
        final_ranking: Proposals in order from 1st to last place
        details: Method-specific details for transparency/debugging
                 (e.g., pairwise counts, tied pairs)
    """
    system_name: str
    scores: dict[str, int]
    final_ranking: list[Placement]
    details: dict[str, Any] = field(default_factory=dict)

    def get_score(self, proposal: str) -> int:
        return self.scores[proposal]

    def get_place(self, proposal: str) -> int | None:
        """Get the 1-indexed placement for a proposal, or None if not found."""
        for p in self.final_ranking:
            if p.name == proposal:
                return p.rank
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "system_name": self.system_name,
            "scores": dict(self.scores),
            "final_ranking": [p.to_dict() for p in self.final_ranking],
            "details": self.details,
        }
