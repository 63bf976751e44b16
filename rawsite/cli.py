"""Cyclopts CLI entrypoint for building a rawsite static site.

The ``rawsite`` console script loads ``site.yaml``, downloads every page from
the configured content repository and writes static HTML. ``rawsite pages``
prints the remote page listing without rendering anything, which is handy for
checking a data source configuration.

Examples
--------
Build the site with the default configuration:

>>> from rawsite.cli import main
>>> main()  # doctest: +SKIP

Build into a custom directory:

>>> from rawsite.cli import app
>>> app(["generate", "--output-dir", "dist"])  # doctest: +SKIP
"""

from __future__ import annotations

import asyncio
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import PAGES_SUB_PATH
from .config import load_site_config
from .log_config import configure_logging
from .site_builder import SiteBuilder
from .sources import ContentFetcher, load_global_data

DEFAULT_CONFIG = Path("config/site.yaml")

app = App(name="rawsite", config=cyclopts.config.Env("RAWSITE_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Download pages from the content repository and write HTML.")
def generate(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="RAWSITE_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="RAWSITE_OUTPUT_DIR"),
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Log debug events")] = False,
) -> None:
    """Generate the static site described by ``config``.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file.
    output_dir : Path or None, optional
        Override for ``output_dir`` in the configuration.
    verbose : bool, optional
        Emit debug-level log events.

    Notes
    -----
    Pages that fail to download are skipped and logged; the build still
    succeeds with the remaining pages.
    """
    configure_logging(verbose=verbose)
    site_config = load_site_config(config)
    with ContentFetcher(timeout=site_config.request_timeout) as fetcher:
        data = asyncio.run(load_global_data(site_config, fetcher=fetcher))
    written = SiteBuilder(data, output_dir=output_dir).run()
    for path in written:
        print(f"wrote {_format_path(path)}")


@app.command(help="List the page files available in the content repository.")
def pages(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="RAWSITE_CONFIG")
    ] = DEFAULT_CONFIG,
    verbose: typ.Annotated[bool, Parameter(help="Log debug events")] = False,
) -> None:
    """Print each remote page file name on its own line."""
    configure_logging(verbose=verbose)
    site_config = load_site_config(config)
    with ContentFetcher(timeout=site_config.request_timeout) as fetcher:
        names = asyncio.run(fetcher.list_files(site_config, PAGES_SUB_PATH))
    for name in sorted(names):
        print(name)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``rawsite`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
