"""Tally methods for computing poll results, keyed by poll type."""

from .base import TallyMethod

# Tally method registry - import methods here to register them
_tally_methods: dict[str, type[TallyMethod]] = {}


class UnsupportedPollTypeError(LookupError):
    """No tally method is registered for the requested poll type."""
    pass


def register_tally_method(method_class: type[TallyMethod]) -> type[TallyMethod]:
    """Decorator to register a tally method class under its poll type."""
    poll_type = method_class.poll_type
    if poll_type in _tally_methods:
        raise ValueError(f"Tally method already registered for poll type {poll_type!r}")
    _tally_methods[poll_type] = method_class
    return method_class


def get_tally_method(poll_type: str) -> TallyMethod:
    """Return an instance of the tally method registered for a poll type."""
    try:
        method_class = _tally_methods[poll_type]
    except KeyError:
        raise UnsupportedPollTypeError(
            f"Unsupported poll type {poll_type!r}; "
            f"supported types: {', '.join(get_supported_poll_types()) or 'none'}"
        ) from None
    return method_class()


def get_supported_poll_types() -> list[str]:
    return list(_tally_methods)
