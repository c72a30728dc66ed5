"""
errors/aggregator.py - Collect errors raised during a session
"""

from __future__ import annotations
from typing import List

from .taxonomy import KitchenPlanError


class ErrorAggregator:
    """
    Errors recorded by a session, oldest first.
    """

    def __init__(self):
        self._errors: List[KitchenPlanError] = []

    def __len__(self) -> int:
        return len(self._errors)

    def add(self, error: KitchenPlanError) -> None:
        """Add an error."""
        self._errors.append(error)

    def latest(self) -> KitchenPlanError:
        """Most recently added error. Raises IndexError when empty."""
        return self._errors[-1]
