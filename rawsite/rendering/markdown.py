"""Markdown-to-HTML conversion for centered markdown pages.

Pages are trusted content, so raw HTML in the source passes through. Fenced
code blocks are highlighted by Pygments; :attr:`MarkdownRenderer.stylesheet`
supplies the matching CSS for the page head.
"""

from __future__ import annotations

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

DEFAULT_EXTENSIONS: tuple[str, ...] = (
    "fenced_code",
    "codehilite",
    "tables",
    "sane_lists",
    "toc",
)


class MarkdownRenderer:
    """Convert page markdown with one reusable Python-Markdown instance."""

    def __init__(
        self,
        pygments_style: str = "monokai",
        extensions: tuple[str, ...] = DEFAULT_EXTENSIONS,
    ) -> None:
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")
        self._md = Markdown(
            extensions=list(extensions),
            extension_configs={
                "codehilite": {"guess_lang": False, "pygments_style": pygments_style},
                "toc": {"permalink": False},
            },
        )

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(self, text: str) -> str:
        """Render ``text`` into HTML; blank input yields an empty string."""
        if not text.strip():
            return ""
        return self._md.reset().convert(text)


_default_renderer = MarkdownRenderer()


def markdown_to_html(text: str) -> str:
    """Convert ``text`` with the shared default renderer."""
    return _default_renderer.markdown(text)


__all__ = ["DEFAULT_EXTENSIONS", "MarkdownRenderer", "markdown_to_html"]
