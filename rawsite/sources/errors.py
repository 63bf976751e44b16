"""Exceptions raised while resolving and fetching remote content."""

from __future__ import annotations


class ContentSourceError(RuntimeError):
    """Base class for failures while locating or downloading content."""


class UnknownServiceError(ContentSourceError):
    """Raised when a service name is not a supported raw content host."""


class UnknownSourceModeError(ContentSourceError):
    """Raised when ``data_source.mode`` is not a recognised sourcing mode."""


class MalformedSourceConfigError(ContentSourceError):
    """Raised when ``data_source.data`` or ``repository`` has the wrong shape."""


class TransportError(ContentSourceError):
    """Raised when a request fails or the host answers with a non-2xx status."""


class UnexpectedPayloadError(TransportError):
    """Raised when a listing response is not the expected JSON array."""


__all__ = [
    "ContentSourceError",
    "MalformedSourceConfigError",
    "TransportError",
    "UnexpectedPayloadError",
    "UnknownServiceError",
    "UnknownSourceModeError",
]
