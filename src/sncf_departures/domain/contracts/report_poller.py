"""Protocol for report polling."""

from typing import Protocol


class ReportPollerProtocol(Protocol):
    """Protocol for periodically refreshing disruption and equipment reports."""

    @property
    def is_running(self) -> bool:
        """Whether the polling task is active."""
        ...

    async def start(self) -> None:
        """Start the poller."""
        ...

    async def stop(self) -> None:
        """Stop the poller."""
        ...
