"""Choose and run the renderer variant for a page.

The page suffix picks the content type and the ``using`` key of the page's
template table picks the variant within it. Markdown pages become a
:class:`~rawsite.rendering.models.MarkdownPage`, JSON pages a
:class:`~rawsite.rendering.models.CardListPage`, and anything else the
"content not found" placeholder. Nothing here performs I/O.

Example
-------
>>> from rawsite.rendering.resolver import resolve_page
>>> page = resolve_page("about.md", "# About", {"hide-footer": True})
>>> page.hide_footer
True
>>> type(resolve_page("notes.txt", "plain")).__name__
'NotFoundPage'
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

import msgspec

from rawsite._constants import DEFAULT_PROSE_CLASS
from rawsite.rendering.markdown import markdown_to_html as default_markdown_to_html
from rawsite.rendering.models import (
    CardInfo,
    CardListPage,
    CardTemplate,
    ContentParseError,
    MarkdownPage,
    MarkdownTemplate,
    NotFoundPage,
    ParseFailedPage,
    RenderedPage,
)
from rawsite.rendering.prose import build_prose_class

MarkdownToHtml = cabc.Callable[[str], str]

JSON_PARSE_FAILED = "JSON Parse failed"
MARKDOWN_RENDER_FAILED = "Markdown render failed"

_DEFAULT_TEMPLATE: typ.Mapping[str, typ.Any] = {"using": ""}
_card_decoder = msgspec.json.Decoder(dict[str, list[CardInfo]])


def page_suffix(name: str) -> str:
    """Return the text after the last dot in ``name``, or ``""`` without one."""
    _stem, dot, suffix = name.rpartition(".")
    return suffix if dot else ""


def resolve_page(
    name: str,
    content: str,
    template: typ.Mapping[str, typ.Any] | None = None,
    *,
    markdown_to_html: MarkdownToHtml | None = None,
) -> RenderedPage:
    """Return the rendering payload for one page.

    Parameters
    ----------
    name : str
        Page file name; its suffix selects the content type.
    content : str
        Raw page content.
    template : Mapping, optional
        Per-page template table. ``using`` selects the variant; unknown keys
        are ignored. Defaults to ``{"using": ""}``.
    markdown_to_html : Callable[[str], str], optional
        Markdown converter; defaults to
        :func:`rawsite.rendering.markdown.markdown_to_html`.

    Returns
    -------
    RenderedPage
        One of ``MarkdownPage``, ``CardListPage``, ``ParseFailedPage`` or
        ``NotFoundPage``. An unsupported suffix is a normal outcome, not an
        error.
    """
    table = template if template is not None else _DEFAULT_TEMPLATE
    using = table.get("using")
    if not isinstance(using, str):
        using = ""

    match page_suffix(name):
        case "md":
            variant = MarkdownTemplate.from_using(using)
            match variant:
                case MarkdownTemplate.CENTER:
                    return render_center_markdown(
                        content,
                        table,
                        markdown_to_html=markdown_to_html or default_markdown_to_html,
                    )
        case "json":
            variant = CardTemplate.from_using(using)
            match variant:
                case CardTemplate.CARDS:
                    return render_card_list(content)
    return NotFoundPage()


def render_center_markdown(
    content: str,
    config: typ.Mapping[str, typ.Any],
    *,
    markdown_to_html: MarkdownToHtml,
) -> MarkdownPage | ParseFailedPage:
    """Convert markdown and read ``style``, ``hide-navbar`` and ``hide-footer``.

    The converted HTML is passed through as-is; content is trusted.
    """
    try:
        html = markdown_to_html(content)
    except ValueError as exc:
        return ParseFailedPage(title=MARKDOWN_RENDER_FAILED, message=str(exc))

    style = config.get("style")
    if isinstance(style, cabc.Mapping):
        prose_class = build_prose_class(style)
    else:
        prose_class = DEFAULT_PROSE_CLASS

    return MarkdownPage(
        template=MarkdownTemplate.CENTER,
        html=html,
        prose_class=prose_class,
        hide_navbar=_flag(config, "hide-navbar"),
        hide_footer=_flag(config, "hide-footer"),
    )


def render_card_list(content: str) -> CardListPage | ParseFailedPage:
    """Parse card groups, surfacing parse errors as a ``ParseFailedPage``."""
    try:
        groups = parse_card_groups(content)
    except ContentParseError as exc:
        return ParseFailedPage(title=JSON_PARSE_FAILED, message=str(exc))
    return CardListPage(template=CardTemplate.CARDS, groups=groups)


def parse_card_groups(content: str) -> dict[str, list[CardInfo]]:
    """Decode ``content`` as a mapping of group name to a list of cards.

    Group order is the order the groups appear in the document.

    Raises
    ------
    ContentParseError
        If the JSON is malformed or does not match the card schema.
    """
    try:
        return _card_decoder.decode(content)
    except msgspec.DecodeError as exc:
        raise ContentParseError(str(exc) or "invalid card data") from exc


def _flag(config: typ.Mapping[str, typ.Any], key: str) -> bool:
    """Return ``config[key]`` when it is a boolean, otherwise False."""
    value = config.get(key)
    return value if isinstance(value, bool) else False


__all__ = [
    "JSON_PARSE_FAILED",
    "MARKDOWN_RENDER_FAILED",
    "MarkdownToHtml",
    "page_suffix",
    "parse_card_groups",
    "render_card_list",
    "render_center_markdown",
    "resolve_page",
]
