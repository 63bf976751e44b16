"""Download raw page content and directory listings from a git host.

:class:`ContentFetcher` turns a logical "get this sub-path" request into a
provider URL according to the configured sourcing mode and performs exactly
one HTTP GET per call. ``fetch_text`` raises on any failure; ``list_files``
degrades to an empty list so page loading never blocks on a flaky listing.

Example
-------
>>> import asyncio
>>> from rawsite.sources.fetcher import ContentFetcher
>>> fetcher = ContentFetcher(timeout=5)
>>> asyncio.run(fetcher.fetch_text(config, "/pages/index.md"))  # doctest: +SKIP
'# Welcome'
"""

from __future__ import annotations

import asyncio
import dataclasses as dc
import typing as typ
from http import HTTPStatus

import requests
import structlog

from rawsite.config.models import SourceMode
from rawsite.sources.errors import (
    ContentSourceError,
    MalformedSourceConfigError,
    TransportError,
    UnexpectedPayloadError,
    UnknownServiceError,
    UnknownSourceModeError,
)
from rawsite.sources.providers import Provider, get_provider

if typ.TYPE_CHECKING:
    from rawsite.config.models import Config

log = structlog.get_logger()

_HEADERS = {
    "Accept": "application/json",
    "User-Agent": "rawsite/0.1",
}


@dc.dataclass(slots=True, frozen=True)
class ResolvedSource:
    """Repository coordinates plus the optional content sub-folder."""

    provider: Provider
    name: str
    branch: str
    sub_folder: str | None = None

    @property
    def raw_base(self) -> str:
        return self.provider.raw_base(self.name, self.branch)


def resolve_source(config: Config) -> ResolvedSource:
    """Return the repository holding content for the configured sourcing mode.

    Raises
    ------
    UnknownSourceModeError
        If ``data_source.mode`` is neither ``independent-repository`` nor
        ``sub-path``.
    MalformedSourceConfigError
        If the mode payload is missing fields or has the wrong type.
    UnknownServiceError
        If the repository names an unsupported service.
    """
    mode = config.data_source.mode.lower()
    data = config.data_source.data
    match mode:
        case SourceMode.INDEPENDENT_REPOSITORY:
            service, name, branch = _repository_fields(data)
            sub_folder = None
        case SourceMode.SUB_PATH:
            if not isinstance(data, str):
                msg = "'data_source.data' must be a sub-folder string in sub-path mode."
                raise MalformedSourceConfigError(msg)
            repo = config.repository
            service, name, branch = repo.service, repo.name, repo.branch
            sub_folder = data
        case _:
            msg = f"Unknown data source mode '{config.data_source.mode}'."
            raise UnknownSourceModeError(msg)

    provider = get_provider(service)
    if provider is None:
        msg = f"Service '{service}' is not a supported content host."
        raise UnknownServiceError(msg)
    return ResolvedSource(
        provider=provider, name=name, branch=branch, sub_folder=sub_folder
    )


def _repository_fields(data: object) -> tuple[str, str, str]:
    """Extract ``service``, ``name`` and ``branch`` strings from a mapping."""
    if not isinstance(data, typ.Mapping):
        msg = "'data_source.data' must be a mapping in independent-repository mode."
        raise MalformedSourceConfigError(msg)
    fields: list[str] = []
    for key in ("service", "name", "branch"):
        value = data.get(key)
        if not isinstance(value, str):
            msg = f"'data_source.data.{key}' must be a string."
            raise MalformedSourceConfigError(msg)
        fields.append(value)
    service, name, branch = fields
    return service, name, branch


def build_raw_url(config: Config, sub_path: str) -> str:
    """Return the raw-content URL for ``sub_path`` under the configured source.

    In ``independent-repository`` mode the sub-path is appended directly, so
    callers pass a leading slash. In ``sub-path`` mode the sub-folder and the
    sub-path are joined with single slashes.
    """
    source = resolve_source(config)
    if source.sub_folder is None:
        return f"{source.raw_base}{sub_path}"
    return f"{source.raw_base}/{source.sub_folder}/{sub_path}"


def build_listing_url(config: Config, sub_path: str) -> str:
    """Return the directory listing URL for ``sub_path`` under the source."""
    source = resolve_source(config)
    path = sub_path
    if source.sub_folder is not None:
        path = f"{source.sub_folder}/{sub_path}"
    return source.provider.listing_url(source.name, source.branch, path)


class ContentFetcher:
    """Fetch raw text and listings from the configured content host.

    The fetcher performs a single attempt per call. Retries and backoff, if
    wanted, belong on the ``requests.Session`` passed in.
    """

    def __init__(
        self,
        *,
        session: requests.Session | None = None,
        timeout: float = 30.0,
    ) -> None:
        """Initialise the fetcher with an optional shared session.

        Parameters
        ----------
        session : requests.Session, optional
            Preconfigured session to reuse connections. A new session is
            created and owned by the fetcher when omitted.
        timeout : float, optional
            Per-request timeout in seconds. Defaults to ``30.0``.
        """
        self._owns_session = session is None
        self._session = session or requests.Session()
        self.timeout = timeout
        self.log = log.bind(service="ContentFetcher")

    def close(self) -> None:
        """Close the underlying session when the fetcher created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> ContentFetcher:
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()

    async def fetch_text(self, config: Config, sub_path: str) -> str:
        """Return the body of the file at ``sub_path`` as text.

        The body is always decoded as UTF-8, whatever ``Content-Type`` says.

        Raises
        ------
        ContentSourceError
            Any of :class:`UnknownSourceModeError`,
            :class:`MalformedSourceConfigError`, :class:`UnknownServiceError`
            or :class:`TransportError`.
        """
        url = build_raw_url(config, sub_path)
        response = await asyncio.to_thread(self._get, url)
        # Raw hosts often omit the charset; requests would then assume Latin-1.
        response.encoding = "utf-8"
        return response.text

    async def list_files(self, config: Config, sub_path: str) -> list[str]:
        """Return the names of plain files directly under ``sub_path``.

        Directory entries and other non-file types are skipped. Any failure,
        including a malformed payload, yields an empty list.
        """
        try:
            url = build_listing_url(config, sub_path)
            response = await asyncio.to_thread(self._get, url)
            names = _file_names(response)
        except ContentSourceError as exc:
            self.log.warning("listing_failed", sub_path=sub_path, error=str(exc))
            return []
        self.log.debug("listing_loaded", sub_path=sub_path, files=len(names))
        return names

    def _get(self, url: str) -> requests.Response:
        """Issue one GET, raising TransportError for errors and non-2xx codes."""
        try:
            response = self._session.get(url, headers=_HEADERS, timeout=self.timeout)
        except requests.RequestException as exc:
            msg = f"Request to '{url}' failed: {exc}"
            raise TransportError(msg) from exc
        status = response.status_code
        if not HTTPStatus.OK <= status < HTTPStatus.MULTIPLE_CHOICES:
            snippet = response.text[:200]
            msg = f"Request to '{url}' failed with status {status}: {snippet}"
            raise TransportError(msg)
        return response


def _file_names(response: requests.Response) -> list[str]:
    """Return ``name`` for every ``type == "file"`` entry in a listing payload."""
    try:
        payload = response.json()
    except ValueError as exc:
        msg = "Listing response was not valid JSON"
        raise UnexpectedPayloadError(msg) from exc
    if not isinstance(payload, list):
        msg = "Listing response must be a JSON array"
        raise UnexpectedPayloadError(msg)

    names: list[str] = []
    for entry in payload:
        if not isinstance(entry, dict):
            msg = "Listing entries must be JSON objects"
            raise UnexpectedPayloadError(msg)
        entry_type = entry.get("type")
        name = entry.get("name")
        if not isinstance(entry_type, str) or not isinstance(name, str):
            msg = "Listing entries require string 'type' and 'name' fields"
            raise UnexpectedPayloadError(msg)
        if entry_type == "file":
            names.append(name)
    return names


__all__ = [
    "ContentFetcher",
    "ResolvedSource",
    "build_listing_url",
    "build_raw_url",
    "resolve_source",
]
