"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    _build_navigation,
    _build_repository,
    _build_site_info,
    _build_templates,
    _optional_str,
    _require_mapping,
)
from .models import Config, DataSourceConfig, SiteConfigError

DEFAULT_OUTPUT_DIR = Path("public")
DEFAULT_REQUEST_TIMEOUT = 30.0


def load_site_config(path: Path) -> Config:
    """Load the YAML configuration describing where content lives.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``).

    Returns
    -------
    Config
        Read-only configuration holding the data source, the site repository,
        navigation, per-page template tables and output settings.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    SiteConfigError
        If the top-level document, ``repository`` or ``data_source`` is not a
        mapping, ``data_source.mode`` is missing, ``output_dir`` is not a
        non-empty string, or ``request_timeout`` is not a positive number.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Notes
    -----
    ``data_source.data`` is stored verbatim. Its shape is only checked when
    content is fetched, so a mismatched payload degrades page loading rather
    than aborting configuration loading.
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise SiteConfigError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    source_raw = _require_mapping(raw.get("data_source"), "data_source")
    mode = _optional_str(source_raw.get("mode"))
    if not mode:
        msg = "'data_source.mode' is required."
        raise SiteConfigError(msg)

    return Config(
        data_source=DataSourceConfig(mode=mode, data=source_raw.get("data")),
        repository=_build_repository(raw.get("repository")),
        site=_build_site_info(raw.get("site")),
        navigation=_build_navigation(raw.get("navigation")),
        templates=_build_templates(raw.get("templates")),
        output_dir=_output_dir(raw.get("output_dir")),
        request_timeout=_request_timeout(raw.get("request_timeout")),
    )


def _output_dir(value: object) -> Path:
    """Return the output directory, requiring a non-empty string when set."""
    if value is None:
        return DEFAULT_OUTPUT_DIR
    if not isinstance(value, str) or not value.strip():
        msg = "'output_dir' must be a non-empty string."
        raise SiteConfigError(msg)
    return Path(value)


def _request_timeout(value: object) -> float:
    """Return the request timeout in seconds, requiring a positive number."""
    if value is None:
        return DEFAULT_REQUEST_TIMEOUT
    if isinstance(value, bool) or not isinstance(value, int | float) or value <= 0:
        msg = "'request_timeout' must be a positive number of seconds."
        raise SiteConfigError(msg)
    return float(value)


__all__ = ["load_site_config"]
