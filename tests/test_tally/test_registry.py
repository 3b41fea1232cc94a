"""Tests for the tally method registry."""

import pytest

from polltally.tally import (
    UnsupportedPollTypeError,
    get_supported_poll_types,
    get_tally_method,
    register_tally_method,
)
from polltally.tally.condorcet import CondorcetTally


class TestRegistry:
    def test_condorcet_registered(self):
        assert "condorcet" in get_supported_poll_types()
        assert isinstance(get_tally_method("condorcet"), CondorcetTally)

    def test_fresh_instance_per_lookup(self):
        assert get_tally_method("condorcet") is not get_tally_method("condorcet")

    def test_unsupported_poll_type(self):
        with pytest.raises(UnsupportedPollTypeError, match="borda"):
            get_tally_method("borda")

    def test_unsupported_poll_type_lists_supported(self):
        with pytest.raises(UnsupportedPollTypeError, match="condorcet"):
            get_tally_method("instant-runoff")

    def test_unsupported_is_lookup_error(self):
        with pytest.raises(LookupError):
            get_tally_method("")

    def test_duplicate_registration(self):
        class AnotherCondorcet(CondorcetTally):
            pass

        with pytest.raises(ValueError, match="already registered"):
            register_tally_method(AnotherCondorcet)
