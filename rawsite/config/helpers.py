"""Utility helpers shared by the rawsite configuration loader."""

from __future__ import annotations

import typing as typ

from .models import NavLinkConfig, RepositoryConfig, SiteConfigError, SiteInfoConfig

DEFAULT_BRANCH = "main"


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _require_mapping(value: object, key: str) -> typ.Mapping[str, typ.Any]:
    """Return ``value`` when it is a mapping, otherwise raise SiteConfigError."""
    if not isinstance(value, typ.Mapping):
        msg = f"'{key}' must be a mapping."
        raise SiteConfigError(msg)
    return value


def _build_repository(payload: object) -> RepositoryConfig:
    """Build the site repository block, requiring ``service`` and ``name``."""
    raw = _require_mapping(payload, "repository")
    service = _optional_str(raw.get("service"))
    name = _optional_str(raw.get("name"))
    if not service or not name:
        msg = "'repository' requires both 'service' and 'name'."
        raise SiteConfigError(msg)
    branch = _optional_str(raw.get("branch")) or DEFAULT_BRANCH
    return RepositoryConfig(service=service, name=name, branch=branch)


def _build_site_info(payload: object) -> SiteInfoConfig:
    """Build site copy from an optional mapping, falling back to defaults."""
    base = SiteInfoConfig()
    if not isinstance(payload, typ.Mapping):
        return base
    return SiteInfoConfig(
        name=_optional_str(payload.get("name")) or base.name,
        footer=str(payload.get("footer", base.footer) or ""),
    )


def _build_navigation(payload: object) -> tuple[NavLinkConfig, ...]:
    """Return navbar links from ``navigation.list``, skipping malformed rows."""
    if not isinstance(payload, typ.Mapping):
        return ()
    entries = payload.get("list") or []
    if not isinstance(entries, list):
        return ()
    links: list[NavLinkConfig] = []
    for entry in entries:
        if not isinstance(entry, typ.Mapping):
            continue
        display = _optional_str(entry.get("display"))
        link = _optional_str(entry.get("link"))
        if not display or not link:
            continue
        target = _optional_str(entry.get("target")) or "_self"
        links.append(NavLinkConfig(display=display, link=link, target=target))
    return tuple(links)


def _build_templates(payload: object) -> dict[str, dict[str, typ.Any]]:
    """Return per-page template tables keyed by page file name."""
    if not isinstance(payload, typ.Mapping):
        return {}
    return {
        str(name): dict(table)
        for name, table in payload.items()
        if isinstance(table, typ.Mapping)
    }


__all__ = [
    "DEFAULT_BRANCH",
    "_build_navigation",
    "_build_repository",
    "_build_site_info",
    "_build_templates",
    "_optional_str",
    "_require_mapping",
]
