"""Shared fixtures for rawsite tests."""

from __future__ import annotations

import typing as typ

import pytest
import structlog

from rawsite.config import (
    Config,
    DataSourceConfig,
    NavLinkConfig,
    RepositoryConfig,
    SiteInfoConfig,
)

if typ.TYPE_CHECKING:
    from pathlib import Path


def make_config(
    *,
    mode: str = "independent-repository",
    data: object = None,
    repository: RepositoryConfig | None = None,
    templates: dict[str, dict[str, typ.Any]] | None = None,
    output_dir: Path | None = None,
) -> Config:
    """Construct a Config with sensible defaults for the chosen mode."""
    if data is None and mode == "independent-repository":
        data = {"service": "github", "name": "acme/site", "branch": "main"}
    kwargs: dict[str, typ.Any] = {}
    if output_dir is not None:
        kwargs["output_dir"] = output_dir
    return Config(
        data_source=DataSourceConfig(mode=mode, data=data),
        repository=repository
        or RepositoryConfig(service="github", name="acme/www", branch="main"),
        site=SiteInfoConfig(name="Acme", footer="Acme footer"),
        navigation=(NavLinkConfig(display="Home", link="/index.html"),),
        templates=templates or {},
        **kwargs,
    )


@pytest.fixture
def independent_config() -> Config:
    """Config whose content lives in a separate GitHub repository."""
    return make_config()


@pytest.fixture
def sub_path_config() -> Config:
    """Config whose content lives in the ``content`` folder of the site repo."""
    return make_config(mode="sub-path", data="content")


@pytest.fixture
def config_factory() -> typ.Callable[..., Config]:
    """Return :func:`make_config` for tests that need custom configs."""
    return make_config


@pytest.fixture(autouse=True)
def _reset_structlog() -> typ.Iterator[None]:
    """Undo CLI logging configuration so later tests do not write to stale streams."""
    yield
    structlog.reset_defaults()
