"""Load and validate rawsite configuration YAML.

This subpackage parses the project's ``site.yaml`` file into frozen
dataclasses (:class:`Config` and friends) that the content fetcher, page
loader and site builder consume. The primary entry point is
:func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from rawsite.config import load_site_config
>>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> config.data_source.mode  # doctest: +SKIP
'independent-repository'
"""

from .loader import load_site_config
from .models import (
    Config,
    DataSourceConfig,
    NavLinkConfig,
    RepositoryConfig,
    SiteConfigError,
    SiteInfoConfig,
    SourceMode,
)

__all__ = [
    "Config",
    "DataSourceConfig",
    "NavLinkConfig",
    "RepositoryConfig",
    "SiteConfigError",
    "SiteInfoConfig",
    "SourceMode",
    "load_site_config",
]
