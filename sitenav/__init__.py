"""Normalize documentation-site navigation configuration.

This package reads site configuration written against any of the historical
theme schemas (``themeConfig.nav`` with ``items``, or a ``defaultTheme``
factory call with ``navbar`` and ``children``), produces one canonical
navigation tree, and reports problems as diagnostics the build pipeline can
act on.

Exports
-------
- ``detect``: classify raw configuration by schema.
- ``normalize``: build the canonical :class:`SiteConfig`.
- ``validate``: check links, labels, and options.
- ``load_site_config``: run the whole pipeline for a YAML/JSON file.

Examples
--------
>>> from sitenav import normalize_config
>>> raw = {"themeConfig": {"nav": [{"text": "Home", "link": "/"}]}}
>>> result = normalize_config(raw)
>>> result.config.navigation
(LinkNode(text='Home', target=InternalPath(path='/', trailing_slash_variant=False)),)
"""

from __future__ import annotations

from .crosscheck import DocumentTree, cross_check
from .detector import detect
from .diagnostics import Diagnostic, Severity, ValidationReport, log_report
from .links import parse_link
from .loader import load_raw_config, load_site_config, normalize_config
from .models import (
    ExternalURL,
    GroupNode,
    InternalAnchor,
    InternalPath,
    LinkNode,
    NormalizationResult,
    PluginDescriptor,
    PublishBlockedError,
    SchemaShape,
    SiteConfig,
    SiteConfigError,
    ThemeDescriptor,
    ThemeKind,
    UnrecognizedSchemaError,
)
from .normalizer import normalize
from .settings import ValidationSettings, load_settings
from .validator import validate
from .writers import write

__all__ = [
    "Diagnostic",
    "DocumentTree",
    "ExternalURL",
    "GroupNode",
    "InternalAnchor",
    "InternalPath",
    "LinkNode",
    "NormalizationResult",
    "PluginDescriptor",
    "PublishBlockedError",
    "SchemaShape",
    "Severity",
    "SiteConfig",
    "SiteConfigError",
    "ThemeDescriptor",
    "ThemeKind",
    "UnrecognizedSchemaError",
    "ValidationReport",
    "ValidationSettings",
    "cross_check",
    "detect",
    "load_raw_config",
    "load_settings",
    "load_site_config",
    "log_report",
    "normalize",
    "normalize_config",
    "parse_link",
    "validate",
    "write",
]
