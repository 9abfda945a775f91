"""Adapters layer - external system integrations."""

from sncf_departures.adapters.config import AppConfig
from sncf_departures.adapters.sncf_api import SncfTransitClient

__all__ = ["AppConfig", "SncfTransitClient"]
