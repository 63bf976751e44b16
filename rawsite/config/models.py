"""Typed dataclasses describing rawsite configuration structures."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


class SourceMode:
    """Recognised ``data_source.mode`` values."""

    INDEPENDENT_REPOSITORY = "independent-repository"
    SUB_PATH = "sub-path"


@dc.dataclass(slots=True, frozen=True)
class RepositoryConfig:
    """Location of a repository on a raw content host."""

    service: str
    name: str
    branch: str = "main"


@dc.dataclass(slots=True, frozen=True)
class DataSourceConfig:
    """Where page content lives.

    Attributes
    ----------
    mode : str
        Either ``"independent-repository"`` or ``"sub-path"``.
    data : object
        Mode-dependent payload kept exactly as loaded: a mapping with
        ``service``, ``name`` and ``branch`` for an independent repository, a
        sub-folder string for ``sub-path``. The fetcher validates the shape.
    """

    mode: str
    data: object = None


@dc.dataclass(slots=True, frozen=True)
class NavLinkConfig:
    """Navigation entry rendered in the navbar."""

    display: str
    link: str
    target: str = "_self"


@dc.dataclass(slots=True, frozen=True)
class SiteInfoConfig:
    """Site-wide copy shown in the navbar and footer."""

    name: str = "rawsite"
    footer: str = ""


@dc.dataclass(slots=True, frozen=True)
class Config:
    """Process-wide, read-only configuration consumed by fetchers and builders."""

    data_source: DataSourceConfig
    repository: RepositoryConfig
    site: SiteInfoConfig = dc.field(default_factory=SiteInfoConfig)
    navigation: tuple[NavLinkConfig, ...] = ()
    templates: typ.Mapping[str, typ.Mapping[str, typ.Any]] = dc.field(
        default_factory=dict
    )
    output_dir: Path = Path("public")
    request_timeout: float = 30.0

    def template_for(self, page_name: str) -> typ.Mapping[str, typ.Any] | None:
        """Return the template-config table for ``page_name`` if one is set."""
        table = self.templates.get(page_name)
        if isinstance(table, typ.Mapping):
            return table
        return None


__all__ = [
    "Config",
    "DataSourceConfig",
    "NavLinkConfig",
    "RepositoryConfig",
    "SiteConfigError",
    "SiteInfoConfig",
    "SourceMode",
]
