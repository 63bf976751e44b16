"""Render loaded pages into static HTML files.

:class:`SiteBuilder` takes the :class:`~rawsite.sources.pages.GlobalData`
produced by the page loader, resolves each page's template variant, renders
the resulting payload through the matching Jinja template and writes one
``<stem>.html`` file per page. A JSON manifest mapping page names to output
files is written alongside.

Typical usage:

>>> import asyncio
>>> from pathlib import Path
>>> from rawsite.config import load_site_config
>>> from rawsite.site_builder import SiteBuilder
>>> from rawsite.sources import load_global_data
>>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> data = asyncio.run(load_global_data(config))  # doctest: +SKIP
>>> SiteBuilder(data).run()  # doctest: +SKIP
[PosixPath('public/index.html'), ...]

Side effects include creating the output directory and writing UTF-8 files.
"""

from __future__ import annotations

import datetime as dt
import json
from pathlib import Path

import structlog
from jinja2 import Environment, FileSystemLoader, select_autoescape

from rawsite._constants import PAGES_MANIFEST
from rawsite.rendering.markdown import MarkdownRenderer
from rawsite.rendering.models import (
    CardListPage,
    MarkdownPage,
    NotFoundPage,
    ParseFailedPage,
    RenderedPage,
)
from rawsite.rendering.resolver import resolve_page
from rawsite.sources.pages import GlobalData

log = structlog.get_logger()

TEMPLATE_NAMES: dict[type, str] = {
    MarkdownPage: "markdown_page.jinja",
    CardListPage: "card_list.jinja",
    ParseFailedPage: "parse_error.jinja",
    NotFoundPage: "not_found.jinja",
}


class SiteBuilder:
    """Write one HTML document per loaded page."""

    def __init__(
        self,
        data: GlobalData,
        *,
        templates_dir: Path | None = None,
        output_dir: Path | None = None,
        renderer: MarkdownRenderer | None = None,
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        data : GlobalData
            Configuration plus the raw content of every loaded page.
        templates_dir : Path, optional
            Directory containing the Jinja templates. Defaults to
            ``rawsite/templates``.
        output_dir : Path, optional
            Override for the output directory; defaults to
            ``data.config.output_dir``.
        renderer : MarkdownRenderer, optional
            Markdown converter shared by every page.
        """
        self.data = data
        self.output_dir = output_dir or data.config.output_dir
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.renderer = renderer or MarkdownRenderer()
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.log = log.bind(service="SiteBuilder")

    def run(self) -> list[Path]:
        """Render every page and return the written paths in page-name order."""
        self.output_dir.mkdir(parents=True, exist_ok=True)
        generated_at = dt.datetime.now(dt.UTC)

        outputs: dict[str, Path] = {}
        manifest: dict[str, str] = {}
        for name in sorted(self.data.pages):
            payload = self.resolve(name)
            html = self.render(payload, page_name=name, generated_at=generated_at)
            output_path = self.output_dir / output_filename(name)
            if output_path.name in manifest.values():
                self.log.warning(
                    "duplicate_page_output", page=name, output=output_path.name
                )
            output_path.write_text(html, encoding="utf-8")
            outputs[output_path.name] = output_path
            manifest[name] = output_path.name
            self.log.debug("page_written", page=name, path=str(output_path))

        self._write_manifest(manifest)
        self.log.info("site_built", pages=len(manifest), output_dir=str(self.output_dir))
        return list(outputs.values())

    def resolve(self, name: str) -> RenderedPage:
        """Return the rendering payload for the loaded page ``name``."""
        config = self.data.config
        return resolve_page(
            name,
            self.data.pages[name],
            config.template_for(name),
            markdown_to_html=self.renderer.markdown,
        )

    def render(
        self,
        payload: RenderedPage,
        *,
        page_name: str,
        generated_at: dt.datetime | None = None,
    ) -> str:
        """Render ``payload`` with its template, ensuring a trailing newline."""
        config = self.data.config
        template = self.env.get_template(TEMPLATE_NAMES[type(payload)])
        html = template.render(
            page=payload,
            page_name=page_name,
            site=config.site,
            navigation=config.navigation,
            pygments_css=self.renderer.stylesheet,
            generated_at=generated_at or dt.datetime.now(dt.UTC),
        )
        if not html.endswith("\n"):
            html += "\n"
        return html

    def _write_manifest(self, manifest: dict[str, str]) -> None:
        path = self.output_dir / PAGES_MANIFEST
        path.write_text(json.dumps(manifest, indent=2, sort_keys=True), encoding="utf-8")


def output_filename(page_name: str) -> str:
    """Return the HTML filename for ``page_name`` (its stem plus ``.html``)."""
    stem = Path(page_name).stem or page_name
    return f"{stem}.html"


__all__ = ["TEMPLATE_NAMES", "SiteBuilder", "output_filename"]
