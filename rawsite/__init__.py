"""Static site generator that renders pages pulled from a git content host.

Page content (Markdown or JSON card data) is listed and downloaded from a
GitHub- or Gitee-style raw file service, matched to a template variant, and
written out as static HTML.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from rawsite import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
