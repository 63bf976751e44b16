r"""Map git hosting services to their raw-content and listing endpoints.

Both lookups are pure string construction; nothing here touches the network.
Service names are matched case-insensitively against a closed set.

Example
-------
>>> from rawsite.sources.providers import resolve_raw_base
>>> resolve_raw_base("GitHub", "acme/site", "main")
'https://raw.githubusercontent.com/acme/site/main'
>>> resolve_raw_base("bitbucket", "acme/site", "main") is None
True
"""

from __future__ import annotations

import dataclasses as dc

GITEE_HOST = "gitee.com"


@dc.dataclass(slots=True, frozen=True)
class Provider:
    """URL templates for one raw content host.

    Attributes
    ----------
    key : str
        Lowercase service identifier used in configuration.
    raw_template : str
        Template for the raw file base URL; receives ``name`` and ``branch``.
    listing_template : str
        Template for the directory listing endpoint; receives ``name``,
        ``branch`` and ``path``.
    """

    key: str
    raw_template: str
    listing_template: str

    def raw_base(self, name: str, branch: str) -> str:
        """Return the raw-content base URL for ``name`` at ``branch``."""
        return self.raw_template.format(name=name, branch=branch)

    def listing_url(self, name: str, branch: str, path: str) -> str:
        """Return the metadata URL that lists the directory at ``path``."""
        return self.listing_template.format(name=name, branch=branch, path=path)


PROVIDERS: dict[str, Provider] = {
    "github": Provider(
        key="github",
        raw_template="https://raw.githubusercontent.com/{name}/{branch}",
        listing_template="https://api.github.com/repos/{name}/contents/{path}?ref={branch}",
    ),
    "gitee": Provider(
        key="gitee",
        raw_template=f"https://{GITEE_HOST}/{{name}}/raw/{{branch}}",
        listing_template=(
            f"https://{GITEE_HOST}/api/v5/repos/{{name}}/contents/{{path}}?ref={{branch}}"
        ),
    ),
}


def get_provider(service: str) -> Provider | None:
    """Return the provider registered for ``service`` or None."""
    return PROVIDERS.get(service.lower())


def resolve_raw_base(service: str, name: str, branch: str) -> str | None:
    """Return the raw-content base URL, or None for an unsupported service."""
    provider = get_provider(service)
    if provider is None:
        return None
    return provider.raw_base(name, branch)


def resolve_listing_url(service: str, name: str, branch: str, path: str) -> str | None:
    """Return the directory listing URL, or None for an unsupported service."""
    provider = get_provider(service)
    if provider is None:
        return None
    return provider.listing_url(name, branch, path)


__all__ = [
    "GITEE_HOST",
    "PROVIDERS",
    "Provider",
    "get_provider",
    "resolve_listing_url",
    "resolve_raw_base",
]
