"""Locate, list and download page content from GitHub- or Gitee-style hosts."""

from .errors import (
    ContentSourceError,
    MalformedSourceConfigError,
    TransportError,
    UnexpectedPayloadError,
    UnknownServiceError,
    UnknownSourceModeError,
)
from .fetcher import ContentFetcher, build_listing_url, build_raw_url
from .pages import GlobalData, load_global_data, load_pages
from .providers import resolve_listing_url, resolve_raw_base

__all__ = [
    "ContentFetcher",
    "ContentSourceError",
    "GlobalData",
    "MalformedSourceConfigError",
    "TransportError",
    "UnexpectedPayloadError",
    "UnknownServiceError",
    "UnknownSourceModeError",
    "build_listing_url",
    "build_raw_url",
    "load_global_data",
    "load_pages",
    "resolve_listing_url",
    "resolve_raw_base",
]
