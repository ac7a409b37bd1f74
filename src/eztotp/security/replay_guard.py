"""
Replay Guard

Remembers the counter of the last accepted regular code. Once counter C has
been accepted, C and every earlier counter stay rejected for good, which
closes the whole replay window rather than only blocking exact repeats.
"""

import logging

from ..exceptions import InvalidState

logger = logging.getLogger(__name__)


class ReplayGuard:
    """
    High-water mark over accepted counters.

    Args:
        last_accepted (int or None): Last accepted counter, None if nothing
            has been accepted yet
    """

    def __init__(self, last_accepted=None):
        if last_accepted is not None and (
            isinstance(last_accepted, bool) or not isinstance(last_accepted, int) or last_accepted < 0
        ):
            raise InvalidState("last_accepted_counter must be a non-negative integer or null")
        self._last_accepted = last_accepted

    @property
    def last_accepted(self):
        return self._last_accepted

    def is_fresh(self, counter):
        """True if ``counter`` is above the last accepted one."""
        return self._last_accepted is None or counter > self._last_accepted

    def advance(self, counter):
        """
        Record ``counter`` as accepted.

        Never moves backward: a counter at or below the current mark is
        ignored.

        Returns:
            bool: True if the mark moved
        """
        if not self.is_fresh(counter):
            logger.debug("Replay guard kept at %s, ignored %s", self._last_accepted, counter)
            return False
        self._last_accepted = counter
        return True

    def __repr__(self):
        return f"ReplayGuard(last_accepted={self._last_accepted})"
