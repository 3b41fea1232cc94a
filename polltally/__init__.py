"""Ranked-choice poll tallying."""
