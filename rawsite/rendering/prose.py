"""Build Tailwind typography class strings from a page's ``style`` table.

Example
-------
>>> from rawsite.rendering.prose import build_prose_class
>>> build_prose_class({"h1": "text-xl", "a": "text-blue-600"})
'prose prose-sm sm:prose-base dark:prose-invert prose-h1:text-xl prose-a:text-blue-600'
"""

from __future__ import annotations

import typing as typ

from rawsite._constants import DEFAULT_PROSE_CLASS

# Output token order follows this tuple, not the order of the style table.
STYLE_SLOTS: tuple[str, ...] = (
    "headings",
    "lead",
    "h1",
    "h2",
    "h3",
    "h4",
    "p",
    "a",
    "blockquote",
    "figure",
    "figcaption",
    "strong",
    "em",
    "code",
    "pre",
    "ol",
    "ul",
    "li",
    "table",
    "thead",
    "tr",
    "th",
    "td",
    "img",
    "video",
    "hr",
)


def build_prose_class(style: typ.Mapping[str, typ.Any]) -> str:
    """Return the default prose classes followed by one modifier per styled slot.

    Only the first space-separated token of each slot value is used; any
    further tokens are dropped. Slots that are missing, empty or not strings
    contribute nothing.
    """
    result = DEFAULT_PROSE_CLASS
    for slot in STYLE_SLOTS:
        value = style.get(slot)
        if not isinstance(value, str) or not value:
            continue
        tokens = value.split(" ")
        result += f" prose-{slot}:{tokens[0]}"
    return result


__all__ = ["STYLE_SLOTS", "build_prose_class"]
