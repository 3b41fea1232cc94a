"""Abstract base class for tally methods."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from polltally.models import Ballot, PollResult, ProposalSet


class TallyMethod(ABC):
    """Abstract base class for tally methods.

    Each tally method computes per-proposal scores and a final ranking from
    a set of ballots using its own algorithm. Methods are registered under
    their ``poll_type`` key via the @register_tally_method decorator in
    polltally/tally/__init__.py.

    Subclasses set ``poll_type`` as a plain class attribute so the registry
    can read it without instantiating the class.
    """

    poll_type: str

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of this tally method."""
        pass

    @property
    def description(self) -> str:
        """Optional description of how this tally method works."""
        return ""

    @abstractmethod
    def calculate(self, proposals: ProposalSet, ballots: Sequence[Ballot]) -> PollResult:
        """Calculate scores and the final ranking using this tally method.

        Args:
            proposals: The validated proposal set
            ballots: Validated ballots, one per voter

        Returns:
            PollResult with the scores, final ranking and calculation details
        """
        pass
