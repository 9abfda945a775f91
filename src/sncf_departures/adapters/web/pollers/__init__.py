"""Background pollers."""

from sncf_departures.adapters.web.pollers.report_poller import ReportPoller

__all__ = ["ReportPoller"]
