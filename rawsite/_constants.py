"""Common literal values used across rawsite.

These constants keep sub-paths, filenames and class strings centralized so the
fetcher, resolver, builder and tests import the same values without drifting.

Examples
--------
>>> from rawsite import _constants
>>> _constants.PAGES_SUB_PATH
'pages'
>>> _constants.DEFAULT_PROSE_CLASS.startswith("prose ")
True
"""

PAGES_SUB_PATH = "pages"
DEFAULT_PROSE_CLASS = "prose prose-sm sm:prose-base dark:prose-invert"
PAGES_MANIFEST = ".rawsite-pages.json"
