"""Protocols for collaborators of the web layer."""

from sncf_departures.domain.contracts.report_poller import ReportPollerProtocol
from sncf_departures.domain.contracts.state_broadcaster import StateBroadcasterProtocol

__all__ = ["ReportPollerProtocol", "StateBroadcasterProtocol"]
