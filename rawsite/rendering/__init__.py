"""Resolve page templates, build prose classes and convert markdown."""

from .markdown import MarkdownRenderer, markdown_to_html
from .models import (
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
from .prose import STYLE_SLOTS, build_prose_class
from .resolver import parse_card_groups, resolve_page

__all__ = [
    "STYLE_SLOTS",
    "CardInfo",
    "CardListPage",
    "CardTemplate",
    "ContentParseError",
    "MarkdownPage",
    "MarkdownRenderer",
    "MarkdownTemplate",
    "NotFoundPage",
    "ParseFailedPage",
    "RenderedPage",
    "build_prose_class",
    "markdown_to_html",
    "parse_card_groups",
    "resolve_page",
]
