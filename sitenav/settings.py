"""Recognized-option sets used by the validator.

The defaults cover the default theme and the first-party plugins. Sites
running newer theme or plugin releases can extend them with a small YAML
file instead of waiting for a sitenav release::

    theme_options:
      - navbarLabel
    plugins:
      "@vuepress/plugin-search":
        - hotKeys
    url_schemes:
      - irc
"""

from __future__ import annotations

import dataclasses as dc
import os
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from ._constants import DEFAULT_PLUGIN_OPTIONS, DEFAULT_THEME_OPTIONS, EXTERNAL_SCHEMES
from .models import SiteConfigError

SETTINGS_ENV_VAR = "SITENAV_SETTINGS"


@dc.dataclass(frozen=True, slots=True)
class ValidationSettings:
    """Option names and schemes the validator accepts without warnings."""

    theme_options: frozenset[str] = DEFAULT_THEME_OPTIONS
    plugin_options: typ.Mapping[str, frozenset[str]] = dc.field(
        default_factory=lambda: dict(DEFAULT_PLUGIN_OPTIONS)
    )
    url_schemes: tuple[str, ...] = EXTERNAL_SCHEMES

    @classmethod
    def default(cls) -> ValidationSettings:
        """Return settings built from the bundled tables."""
        return cls()

    def knows_plugin(self, name: str) -> bool:
        """Return True when ``name`` has a recognized option allow-list."""
        return name in self.plugin_options

    def extend(self, overrides: typ.Mapping[str, typ.Any]) -> ValidationSettings:
        """Return a copy whose recognized sets also include ``overrides``."""
        theme_options = self.theme_options | frozenset(
            _string_list(overrides.get("theme_options"), "theme_options")
        )

        plugin_options = dict(self.plugin_options)
        plugins_raw = overrides.get("plugins") or {}
        if not isinstance(plugins_raw, dict):
            msg = "Settings 'plugins' must map plugin names to option lists."
            raise SiteConfigError(msg)
        for name, options in plugins_raw.items():
            extra = frozenset(_string_list(options, f"plugins.{name}"))
            plugin_options[str(name)] = plugin_options.get(str(name), frozenset()) | extra

        url_schemes = tuple(
            dict.fromkeys(
                (
                    *self.url_schemes,
                    *_string_list(overrides.get("url_schemes"), "url_schemes"),
                )
            )
        )
        return ValidationSettings(
            theme_options=theme_options,
            plugin_options=plugin_options,
            url_schemes=url_schemes,
        )


def _string_list(value: object, field: str) -> list[str]:
    """Return ``value`` as a list of non-empty strings."""
    match value:
        case None:
            return []
        case list():
            return [str(item).strip() for item in value if str(item).strip()]
        case _:
            msg = f"Settings '{field}' must be a list of names."
            raise SiteConfigError(msg)


def load_settings(path: Path | None = None) -> ValidationSettings:
    """Load validation settings, extending the defaults.

    Parameters
    ----------
    path : Path or None, optional
        YAML override file. When ``None`` the ``SITENAV_SETTINGS``
        environment variable is consulted; without either, the defaults are
        returned unchanged.

    Returns
    -------
    ValidationSettings
        Defaults extended with the overrides.

    Raises
    ------
    FileNotFoundError
        If the settings file does not exist.
    SiteConfigError
        If the file is not a mapping or a field has the wrong type.
    """
    if path is None:
        env_path = os.environ.get(SETTINGS_ENV_VAR)
        if not env_path:
            return ValidationSettings.default()
        path = Path(env_path)

    if not path.exists():
        msg = f"Settings file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Settings file must contain a mapping."
        raise SiteConfigError(msg)
    return ValidationSettings.default().extend(loaded)


__all__ = ["SETTINGS_ENV_VAR", "ValidationSettings", "load_settings"]
