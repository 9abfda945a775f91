"""Per-slot request sequencing used to discard stale responses."""

from collections import defaultdict


class RequestSequencer:
    """Hands out increasing tokens per state slot.

    A response may only be applied if its token is still the latest one issued
    for its slot.
    """

    def __init__(self) -> None:
        self._latest: defaultdict[str, int] = defaultdict(int)

    def next(self, slot: str) -> int:
        """Issue a token for a new request on the slot."""
        self._latest[slot] += 1
        return self._latest[slot]

    def invalidate(self, slot: str) -> None:
        """Make every outstanding request on the slot stale."""
        self._latest[slot] += 1

    def is_current(self, slot: str, token: int) -> bool:
        return self._latest[slot] == token
