"""Tests for best-effort page loading.

A stub fetcher stands in for the network so the tests can fail individual
downloads and check that only the failed pages are dropped.
"""

from __future__ import annotations

import asyncio
import typing as typ

import pytest
import requests

from rawsite.sources.errors import TransportError, UnknownServiceError
from rawsite.sources.fetcher import ContentFetcher
from rawsite.sources.pages import GlobalData, load_global_data, load_pages

if typ.TYPE_CHECKING:
    from pytest_mock import MockerFixture

    from rawsite.config import Config


class _StubFetcher:
    """Async fetcher double serving canned listings and bodies."""

    def __init__(
        self,
        listing: list[str],
        bodies: dict[str, str | Exception],
    ) -> None:
        self.listing = listing
        self.bodies = bodies
        self.listed: list[str] = []
        self.fetched: list[str] = []

    async def list_files(self, config: Config, sub_path: str) -> list[str]:  # noqa: ARG002
        self.listed.append(sub_path)
        return list(self.listing)

    async def fetch_text(self, config: Config, sub_path: str) -> str:  # noqa: ARG002
        self.fetched.append(sub_path)
        await asyncio.sleep(0)
        body = self.bodies[sub_path]
        if isinstance(body, Exception):
            raise body
        return body


@pytest.mark.asyncio
async def test_load_pages_drops_failed_fetches(independent_config: Config) -> None:
    """Three listed files with one failure yield exactly two entries."""
    fetcher = _StubFetcher(
        ["a.md", "b.json", "c.md"],
        {
            "/pages/a.md": "# A",
            "/pages/b.json": TransportError("status 500"),
            "/pages/c.md": "# C",
        },
    )

    pages = await load_pages(independent_config, fetcher=fetcher)  # type: ignore[arg-type]

    assert pages == {"a.md": "# A", "c.md": "# C"}, f"unexpected pages {pages!r}"
    assert fetcher.listed == ["pages"], "expected a single listing of 'pages'"
    assert sorted(fetcher.fetched) == ["/pages/a.md", "/pages/b.json", "/pages/c.md"]


@pytest.mark.asyncio
async def test_load_pages_recovers_every_source_error(
    independent_config: Config,
) -> None:
    """Configuration-type errors for a page are also dropped silently."""
    fetcher = _StubFetcher(
        ["a.md", "b.md"],
        {"/pages/a.md": UnknownServiceError("svn"), "/pages/b.md": "ok"},
    )
    pages = await load_pages(independent_config, fetcher=fetcher)  # type: ignore[arg-type]
    assert pages == {"b.md": "ok"}


@pytest.mark.asyncio
async def test_load_pages_propagates_unexpected_errors(
    independent_config: Config,
) -> None:
    """Errors outside the content source hierarchy are not swallowed."""
    fetcher = _StubFetcher(["a.md"], {"/pages/a.md": KeyError("bug")})
    with pytest.raises(KeyError):
        await load_pages(independent_config, fetcher=fetcher)  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_load_pages_with_empty_listing(independent_config: Config) -> None:
    """An empty listing produces an empty mapping without fetching."""
    fetcher = _StubFetcher([], {})
    assert await load_pages(independent_config, fetcher=fetcher) == {}  # type: ignore[arg-type]
    assert fetcher.fetched == []


@pytest.mark.asyncio
async def test_duplicate_names_keep_last_write(independent_config: Config) -> None:
    """Duplicate listing entries collapse to one key."""
    fetcher = _StubFetcher(["a.md", "a.md"], {"/pages/a.md": "# A"})
    pages = await load_pages(independent_config, fetcher=fetcher)  # type: ignore[arg-type]
    assert pages == {"a.md": "# A"}


@pytest.mark.asyncio
async def test_load_pages_through_real_fetcher(
    mocker: MockerFixture, sub_path_config: Config
) -> None:
    """End to end through ContentFetcher with a mocked session."""
    listing = mocker.Mock(status_code=200)
    listing.json.return_value = [
        {"type": "file", "name": "index.md"},
        {"type": "file", "name": "broken.md"},
        {"type": "dir", "name": "assets"},
    ]
    ok = mocker.Mock(status_code=200, text="# Index")
    missing = mocker.Mock(status_code=404, text="404: Not Found")

    def _get(url: str, **_kwargs: typ.Any) -> typ.Any:
        if "api.github.com" in url:
            return listing
        if url.endswith("index.md"):
            return ok
        return missing

    session = mocker.Mock(spec=requests.Session)
    session.get.side_effect = _get

    pages = await load_pages(sub_path_config, fetcher=ContentFetcher(session=session))

    assert pages == {"index.md": "# Index"}
    requested = [call.args[0] for call in session.get.call_args_list]
    assert (
        "https://raw.githubusercontent.com/acme/www/main/content//pages/index.md"
        in requested
    ), f"unexpected requests {requested!r}"


@pytest.mark.asyncio
async def test_load_global_data_bundles_config(independent_config: Config) -> None:
    """GlobalData carries the config it was loaded with."""
    fetcher = _StubFetcher(["a.md"], {"/pages/a.md": "# A"})
    data = await load_global_data(independent_config, fetcher=fetcher)  # type: ignore[arg-type]
    assert isinstance(data, GlobalData)
    assert data.config is independent_config
    assert data.pages == {"a.md": "# A"}


class _CountingFetcher(_StubFetcher):
    """Stub fetcher that records the peak number of in-flight downloads."""

    def __init__(self, listing: list[str]) -> None:
        super().__init__(listing, {f"/pages/{name}": name for name in listing})
        self.in_flight = 0
        self.peak = 0

    async def fetch_text(self, config: Config, sub_path: str) -> str:
        self.in_flight += 1
        self.peak = max(self.peak, self.in_flight)
        try:
            await asyncio.sleep(0.01)
            return await super().fetch_text(config, sub_path)
        finally:
            self.in_flight -= 1


@pytest.mark.asyncio
async def test_load_pages_bounds_concurrent_downloads(
    independent_config: Config,
) -> None:
    """No more than ``max_concurrency`` downloads run at once."""
    names = [f"page-{idx}.md" for idx in range(6)]
    fetcher = _CountingFetcher(names)

    pages = await load_pages(
        independent_config,
        fetcher=fetcher,  # type: ignore[arg-type]
        max_concurrency=2,
    )

    assert sorted(pages) == names
    assert fetcher.peak == 2, f"expected peak of 2 downloads, got {fetcher.peak}"


@pytest.mark.asyncio
async def test_load_pages_clamps_zero_concurrency(independent_config: Config) -> None:
    """A non-positive bound still lets downloads proceed one at a time."""
    names = ["a.md", "b.md", "c.md"]
    fetcher = _CountingFetcher(names)

    pages = await asyncio.wait_for(
        load_pages(
            independent_config,
            fetcher=fetcher,  # type: ignore[arg-type]
            max_concurrency=0,
        ),
        timeout=5,
    )

    assert sorted(pages) == names
    assert fetcher.peak == 1
