"""Errors raised while talking to the transit data provider."""

from sncf_departures.domain.models.error_details import ErrorDetails


class TransitDataError(Exception):
    """Base class for all provider-related failures."""


class NetworkError(TransitDataError):
    """The request could not be sent or the provider answered with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None, url: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url

    @property
    def details(self) -> ErrorDetails:
        return ErrorDetails.from_status(self.status_code)


class MissingReferenceError(TransitDataError):
    """A required cross-reference (e.g. the vehicle journey link) is absent."""


class DecodeError(TransitDataError):
    """The provider payload does not have the expected shape."""
