"""Check a canonical site configuration for broken links and unknown options.

Validation is a pure function of the :class:`~sitenav.models.SiteConfig`
and the :class:`~sitenav.settings.ValidationSettings`: it does no I/O and
never consults the document tree. Whether internal targets exist is left to
:mod:`sitenav.crosscheck`.
"""

from __future__ import annotations

import typing as typ
from urllib.parse import urlsplit

from ._constants import HOSTLESS_SCHEMES
from .diagnostics import Diagnostic, Location, ValidationReport, error, warning
from .models import (
    ExternalURL,
    GroupNode,
    InternalAnchor,
    InternalPath,
    LinkNode,
    LinkTarget,
    NavNode,
    SiteConfig,
)
from .settings import ValidationSettings


def _check_target(
    target: LinkTarget, location: Location, settings: ValidationSettings
) -> typ.Iterator[Diagnostic]:
    match target:
        case ExternalURL(url=url):
            yield from _check_external(url, location, settings)
        case InternalPath(path=path):
            if not path.startswith("/"):
                yield error(
                    "unrooted-path",
                    f"Internal link '{target.href}' must start with '/'.",
                    location,
                )
        case InternalAnchor(path=path, fragment=fragment):
            if not path.startswith("/"):
                yield error(
                    "unrooted-path",
                    f"Internal link '{target.href}' must start with '/'.",
                    location,
                )
            if not fragment or "/" in fragment:
                yield error(
                    "invalid-fragment",
                    f"Anchor '#{fragment}' must be non-empty and contain no '/'.",
                    location,
                )


def _check_external(
    url: str, location: Location, settings: ValidationSettings
) -> typ.Iterator[Diagnostic]:
    try:
        parts = urlsplit(url)
    except ValueError as exc:
        yield error("invalid-external-url", f"Cannot parse URL '{url}': {exc}", location)
        return
    scheme = parts.scheme.lower()
    if scheme not in {item.lower() for item in settings.url_schemes}:
        yield error(
            "invalid-external-url",
            f"URL '{url}' has no recognized scheme.",
            location,
        )
    elif scheme in HOSTLESS_SCHEMES:
        if not parts.path:
            yield error(
                "invalid-external-url", f"URL '{url}' has no address.", location
            )
    elif not parts.hostname:
        yield error("invalid-external-url", f"URL '{url}' has no host.", location)


def _check_level(
    nodes: typ.Sequence[NavNode],
    prefix: tuple[int, ...],
    settings: ValidationSettings,
) -> typ.Iterator[Diagnostic]:
    seen: dict[str, int] = {}
    for index, node in enumerate(nodes):
        position = (*prefix, index)
        location: Location = ("navigation", *position)
        if not node.text.strip():
            yield error("malformed-nav-entry", "Navigation entry has empty text.", location)
        elif node.text in seen:
            yield warning(
                "duplicate-label",
                f"Label '{node.text}' repeats the entry at index {seen[node.text]}.",
                location,
            )
        else:
            seen[node.text] = index

        match node:
            case LinkNode(target=target):
                yield from _check_target(target, location, settings)
            case GroupNode(children=children):
                if not children:
                    yield error(
                        "empty-group", f"Group '{node.text}' has no entries.", location
                    )
                yield from _check_level(children, position, settings)


def _check_options(
    config: SiteConfig, settings: ValidationSettings
) -> typ.Iterator[Diagnostic]:
    for key in config.theme.options:
        if key not in settings.theme_options:
            yield warning(
                "unknown-theme-option",
                f"Theme option '{key}' is not recognized.",
                ("theme", key),
            )
    for index, plugin in enumerate(config.plugins):
        if not settings.knows_plugin(plugin.name):
            yield warning(
                "unknown-plugin",
                f"Plugin '{plugin.name}' is not recognized; options not checked.",
                ("plugins", index),
            )
            continue
        allowed = settings.plugin_options[plugin.name]
        for key in plugin.options:
            if key not in allowed:
                yield warning(
                    "unknown-plugin-option",
                    f"Option '{key}' is not recognized by plugin '{plugin.name}'.",
                    ("plugins", index, key),
                )


def validate(
    config: SiteConfig, settings: ValidationSettings | None = None
) -> ValidationReport:
    """Return diagnostics for links, labels, and options in ``config``.

    Parameters
    ----------
    config : SiteConfig
        Canonical configuration from :func:`sitenav.normalizer.normalize`.
    settings : ValidationSettings, optional
        Recognized option sets; defaults to the bundled tables.

    Returns
    -------
    ValidationReport
        Errors for malformed URLs, unrooted paths, bad fragments, and empty
        labels or groups; warnings for duplicate sibling labels and
        unrecognized theme or plugin options.
    """
    active = settings or ValidationSettings.default()
    diagnostics = [
        *_check_level(config.theme.navigation, (), active),
        *_check_options(config, active),
    ]
    return ValidationReport(tuple(diagnostics))


__all__ = ["validate"]
