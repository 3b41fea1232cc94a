"""Shared fixtures for tally method tests."""

import pytest
from tests.conftest import make_ballots


@pytest.fixture
def no_ballots():
    """Dataset 1: Three proposals, nobody has voted yet.

    Every pair is 0-0, so every proposal is credited against every other.
    """
    return make_ballots(["P1", "P2", "P3"], [])


@pytest.fixture
def reference_poll():
    """Dataset 2: Three proposals, five full ballots.

         B1  B2  B3  B4  B5
    P1    1   2   2   2   2
    P2    3   1   1   1   3
    P3    2   3   3   3   1

    P2 beats P1 (3-2) and P3 (3-2), P1 beats P3 (4-1).
    Scores: P1=1, P2=2, P3=0.
    """
    return make_ballots(["P1", "P2", "P3"], [
        ["P1", "P3", "P2"],
        ["P2", "P1", "P3"],
        ["P2", "P1", "P3"],
        ["P2", "P1", "P3"],
        ["P3", "P1", "P2"],
    ])


@pytest.fixture
def perfect_cycle():
    """Dataset 3: Perfect cycle, 3 ballots, 3 proposals.

         B1  B2  B3
    A     1   3   2
    B     2   1   3
    C     3   2   1

    A beats B, B beats C, C beats A, all 2-1. Every proposal scores 1.
    """
    return make_ballots(["A", "B", "C"], [
        ["A", "B", "C"],
        ["B", "C", "A"],
        ["C", "A", "B"],
    ])


@pytest.fixture
def two_way_tie():
    """Dataset 4: Two proposals, evenly split.

         B1  B2
    A     1   2
    B     2   1

    1-1 tie: both proposals are credited and score 1.
    """
    return make_ballots(["A", "B"], [
        ["A", "B"],
        ["B", "A"],
    ])


@pytest.fixture
def partial_ballots():
    """Dataset 5: Partial rankings, 4 ballots, 3 proposals.

         B1  B2  B3  B4
    A     1   1   -   2
    B     -   2   1   1
    C     -   -   2   -

    B1 ranks only A and says nothing about any pair.
    A vs B: 1-1 (B2 vs B4), tie. B vs C: 1-0 (B3). A vs C: 0-0, tie.
    Scores: A=2, B=2, C=1.
    """
    return make_ballots(["A", "B", "C"], [
        ["A"],
        ["A", "B"],
        ["B", "C"],
        ["B", "A"],
    ])
