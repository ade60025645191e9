"""Serialize a canonical :class:`SiteConfig` back into a historical schema.

Writers are the inverse of the normalizer adapters: feeding the output of
:func:`write` back through :func:`sitenav.normalizer.normalize` with the
same shape returns an equal configuration. Link strings are rendered from
the canonical targets, so trailing-slash and anchor spellings survive.
"""

from __future__ import annotations

import typing as typ

from ._constants import DEFAULT_THEME_FACTORY, PLUGIN_FACTORY_NAMES
from .models import GroupNode, LinkNode, SchemaShape, SiteConfigError

if typ.TYPE_CHECKING:
    from .models import NavNode, PluginDescriptor, SiteConfig

PACKAGE_FACTORIES = {package: factory for factory, package in PLUGIN_FACTORY_NAMES.items()}


def _write_nodes(
    nodes: typ.Iterable[NavNode], child_key: str
) -> list[dict[str, typ.Any]]:
    entries: list[dict[str, typ.Any]] = []
    for node in nodes:
        match node:
            case LinkNode(text=text, target=target):
                entries.append({"text": text, "link": target.href})
            case GroupNode(text=text, children=children):
                entries.append(
                    {"text": text, child_key: _write_nodes(children, child_key)}
                )
    return entries


def _flat_plugin(plugin: PluginDescriptor) -> str | list[typ.Any]:
    if plugin.options:
        return [plugin.name, dict(plugin.options)]
    return plugin.name


def _factory_plugin(plugin: PluginDescriptor) -> dict[str, typ.Any]:
    return {
        "factory": PACKAGE_FACTORIES.get(plugin.name, plugin.name),
        "options": dict(plugin.options),
    }


def _theme_options(config: SiteConfig, nav_key: str) -> dict[str, typ.Any]:
    if nav_key in config.theme.options:
        msg = (
            f"Theme option '{nav_key}' clashes with the navigation list written "
            "for this layout."
        )
        raise SiteConfigError(msg)
    return dict(config.theme.options)


def write(config: SiteConfig, shape: SchemaShape) -> dict[str, typ.Any]:
    """Return ``config`` as a raw mapping laid out for ``shape``.

    Parameters
    ----------
    config : SiteConfig
        Canonical configuration.
    shape : SchemaShape
        Target layout. The flat shapes use ``themeConfig.nav`` with
        ``items``; ``THEME_FACTORY_V1`` uses a ``defaultTheme`` factory call
        with ``navbar`` and ``children``.

    Returns
    -------
    dict[str, Any]
        Plain data suitable for YAML or JSON dumping.

    Raises
    ------
    ValueError
        If ``shape`` is ``UNRECOGNIZED``.
    SiteConfigError
        If a theme option has the name of the layout's navigation key.
    """
    raw: dict[str, typ.Any] = {
        "title": config.title,
        "description": config.description,
        "dest": config.destination_path,
    }
    if shape.is_flat:
        theme_options = _theme_options(config, "nav")
        theme_options["nav"] = _write_nodes(config.navigation, "items")
        raw["themeConfig"] = theme_options
        raw["plugins"] = [_flat_plugin(plugin) for plugin in config.plugins]
    elif shape is SchemaShape.THEME_FACTORY_V1:
        theme_options = _theme_options(config, "navbar")
        theme_options["navbar"] = _write_nodes(config.navigation, "children")
        raw["theme"] = {"factory": DEFAULT_THEME_FACTORY, "options": theme_options}
        raw["plugins"] = [_factory_plugin(plugin) for plugin in config.plugins]
    else:
        msg = f"No writer for schema '{shape.value}'."
        raise ValueError(msg)
    return raw


__all__ = ["write"]
