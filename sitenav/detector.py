"""Classify raw site configuration against the known historical schemas."""

from __future__ import annotations

import logging
import typing as typ

from ._constants import EXTERNAL_SCHEMES
from .helpers import _as_mapping, _dig, _iter_link_strings
from .links import is_document_path, looks_external
from .models import SchemaShape

logger = logging.getLogger(__name__)


def _is_factory_call(theme: object) -> bool:
    """Return True for a ``{factory: name, options: {...}}`` theme declaration."""
    mapping = _as_mapping(theme)
    if mapping is None or not isinstance(mapping.get("factory"), str):
        return False
    options = _as_mapping(mapping.get("options", {}))
    return options is not None and isinstance(options.get("navbar"), list)


def _flat_shape_for(nav: list[typ.Any]) -> SchemaShape:
    """Pick the flat schema revision from the link strings in ``nav``."""
    trailing_slash = False
    for link in _iter_link_strings(nav):
        if looks_external(link, EXTERNAL_SCHEMES):
            continue
        if "#" in link:
            return SchemaShape.FLAT_THEME_CONFIG_V3_ANCHORS
        if link.endswith("/") and is_document_path(link[:-1]):
            trailing_slash = True
    if trailing_slash:
        return SchemaShape.FLAT_THEME_CONFIG_V2_TRAILING_SLASH
    return SchemaShape.FLAT_THEME_CONFIG_V1


def detect(raw: object) -> SchemaShape:
    """Return the schema ``raw`` was written against.

    Parameters
    ----------
    raw : object
        Untyped configuration, normally a mapping loaded from YAML or JSON.

    Returns
    -------
    SchemaShape
        ``THEME_FACTORY_V1`` when ``theme`` is a factory call whose options
        carry a ``navbar`` list; one of the flat shapes when
        ``themeConfig.nav`` is a list (anchors win over trailing slashes,
        which win over bare links); ``UNRECOGNIZED`` otherwise. Detection
        never raises.
    """
    config = _as_mapping(raw)
    if config is None:
        logger.debug("Configuration is not a mapping; schema unrecognized")
        return SchemaShape.UNRECOGNIZED

    if _is_factory_call(config.get("theme")):
        return SchemaShape.THEME_FACTORY_V1

    nav = _dig(config, "themeConfig", "nav")
    if isinstance(nav, list):
        return _flat_shape_for(nav)

    logger.debug(
        "No themeConfig.nav or theme factory navbar among keys %s",
        sorted(str(key) for key in config),
    )
    return SchemaShape.UNRECOGNIZED


__all__ = ["detect"]
