"""Enumerate and download every page under the content ``pages`` folder.

Loading is best-effort: a page whose download fails is left out of the result
and logged, while the rest of the site still loads.
"""

from __future__ import annotations

import asyncio
import dataclasses as dc
import typing as typ

import structlog

from rawsite._constants import PAGES_SUB_PATH
from rawsite.sources.errors import ContentSourceError
from rawsite.sources.fetcher import ContentFetcher

if typ.TYPE_CHECKING:
    from rawsite.config.models import Config

log = structlog.get_logger()

DEFAULT_MAX_CONCURRENCY = 8


@dc.dataclass(slots=True)
class GlobalData:
    """Configuration plus the raw content of every loaded page.

    Attributes
    ----------
    config : Config
        Read-only configuration the pages were loaded with.
    pages : dict[str, str]
        Page file name mapped to its raw content.
    """

    config: Config
    pages: dict[str, str] = dc.field(default_factory=dict)


async def load_pages(
    config: Config,
    *,
    fetcher: ContentFetcher | None = None,
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
) -> dict[str, str]:
    """Return a mapping of page file name to content for every listed page.

    Parameters
    ----------
    config : Config
        Configuration describing where content lives.
    fetcher : ContentFetcher, optional
        Fetcher to use; a temporary one honouring ``config.request_timeout``
        is created and closed when omitted.
    max_concurrency : int, optional
        Upper bound on simultaneous downloads. Defaults to ``8``.

    Returns
    -------
    dict[str, str]
        Only pages whose download succeeded. Failed pages are dropped.
    """
    if fetcher is None:
        with ContentFetcher(timeout=config.request_timeout) as owned:
            return await load_pages(
                config, fetcher=owned, max_concurrency=max_concurrency
            )

    names = await fetcher.list_files(config, PAGES_SUB_PATH)
    semaphore = asyncio.Semaphore(max(1, max_concurrency))

    async def _fetch(name: str) -> str:
        async with semaphore:
            return await fetcher.fetch_text(config, f"/{PAGES_SUB_PATH}/{name}")

    results = await asyncio.gather(
        *(_fetch(name) for name in names), return_exceptions=True
    )

    pages: dict[str, str] = {}
    for name, result in zip(names, results, strict=True):
        if isinstance(result, ContentSourceError):
            log.warning("page_fetch_failed", page=name, error=str(result))
            continue
        if isinstance(result, BaseException):
            raise result
        pages[name] = result
    log.info("pages_loaded", listed=len(names), loaded=len(pages))
    return pages


async def load_global_data(
    config: Config, *, fetcher: ContentFetcher | None = None
) -> GlobalData:
    """Load every page and bundle the result with ``config``."""
    pages = await load_pages(config, fetcher=fetcher)
    return GlobalData(config=config, pages=pages)


__all__ = ["DEFAULT_MAX_CONCURRENCY", "GlobalData", "load_global_data", "load_pages"]
