"""Card data, template variants and the payloads handed to page templates."""

from __future__ import annotations

import dataclasses as dc
import enum

NOT_FOUND_MESSAGE = "Content Not Found"


class ContentParseError(ValueError):
    """Raised when page content cannot be parsed into its expected shape."""


@dc.dataclass(slots=True)
class CardInfo:
    """A single link card in a JSON card page."""

    title: str
    url: str
    content: str
    footnote: str


class MarkdownTemplate(enum.StrEnum):
    """Renderer variants for ``.md`` pages."""

    CENTER = "center"

    @classmethod
    def from_using(cls, using: str) -> MarkdownTemplate:
        """Return the variant named by ``using``; blank or unknown means center."""
        try:
            return cls(using)
        except ValueError:
            return cls.CENTER


class CardTemplate(enum.StrEnum):
    """Renderer variants for ``.json`` pages."""

    CARDS = "cards"

    @classmethod
    def from_using(cls, using: str) -> CardTemplate:
        """Return the variant named by ``using``; blank or unknown means cards."""
        try:
            return cls(using)
        except ValueError:
            return cls.CARDS


@dc.dataclass(slots=True)
class MarkdownPage:
    """Converted markdown with the prose class and chrome toggles.

    Attributes
    ----------
    template : MarkdownTemplate
        Variant that produced this payload.
    html : str
        Converted markdown, injected unescaped by the page template.
    prose_class : str
        CSS utility classes applied to the content wrapper.
    hide_navbar : bool
        Whether the navbar is omitted.
    hide_footer : bool
        Whether the footer is omitted.
    """

    template: MarkdownTemplate
    html: str
    prose_class: str
    hide_navbar: bool = False
    hide_footer: bool = False


@dc.dataclass(slots=True)
class CardListPage:
    """Card groups in parse order, each holding cards in source order."""

    template: CardTemplate
    groups: dict[str, list[CardInfo]]


@dc.dataclass(slots=True)
class ParseFailedPage:
    """Content that could not be parsed, surfaced to the reader."""

    title: str
    message: str


@dc.dataclass(slots=True)
class NotFoundPage:
    """Placeholder for pages whose suffix has no renderer."""

    message: str = NOT_FOUND_MESSAGE


RenderedPage = MarkdownPage | CardListPage | ParseFailedPage | NotFoundPage


__all__ = [
    "NOT_FOUND_MESSAGE",
    "CardInfo",
    "CardListPage",
    "CardTemplate",
    "ContentParseError",
    "MarkdownPage",
    "MarkdownTemplate",
    "NotFoundPage",
    "ParseFailedPage",
    "RenderedPage",
]
