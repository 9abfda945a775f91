"""Disruption domain models."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Severity:
    """How strongly a disruption affects service."""

    name: str | None = None
    effect: str | None = None
    color: str | None = None


@dataclass(frozen=True)
class MessageChannel:
    """Channel a disruption message is intended for."""

    name: str | None = None
    content_type: str | None = None
    types: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class DisruptionMessage:
    """A human-readable disruption message."""

    text: str
    channel: MessageChannel | None = None


@dataclass(frozen=True)
class ImpactedObject:
    """A transit object (line, stop area, ...) affected by a disruption."""

    id: str
    name: str | None = None
    type: str | None = None


@dataclass(frozen=True)
class ApplicationPeriod:
    """Time window during which a disruption applies."""

    begin: datetime | None
    end: datetime | None


@dataclass(frozen=True)
class Disruption:
    """A provider-issued service-impact notice."""

    id: str
    status: str | None
    severity: Severity
    messages: list[DisruptionMessage] = field(default_factory=list)
    impacted_objects: list[ImpactedObject] = field(default_factory=list)
    application_periods: list[ApplicationPeriod] = field(default_factory=list)

    @property
    def headline(self) -> str | None:
        """First message text, if any."""
        return self.messages[0].text if self.messages else None
