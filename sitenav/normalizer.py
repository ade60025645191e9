"""Rewrite raw site configuration into the canonical navigation model.

Each historical schema gets a small adapter that knows where the theme,
navigation list, and plugin entries live. Everything after that lookup is
shared: navigation entries are converted recursively and every link goes
through :func:`sitenav.links.parse_link`, so two configurations describing
the same navigation bar produce equal trees whatever their field names.

Problems with individual entries never abort the run. They are recorded as
diagnostics, the offending entry is left out, and its siblings are still
converted.

Examples
--------
>>> from sitenav.models import SchemaShape
>>> from sitenav.normalizer import normalize
>>> raw = {"themeConfig": {"nav": [{"text": "Home", "link": "/"}]}}
>>> result = normalize(raw, SchemaShape.FLAT_THEME_CONFIG_V1)
>>> result.config.navigation[0].text
'Home'
>>> result.diagnostics
()
"""

from __future__ import annotations

import abc
import logging
import typing as typ

from ._constants import (
    DEFAULT_DESTINATION,
    DEFAULT_THEME_FACTORY,
    EXTERNAL_SCHEMES,
    PLUGIN_FACTORY_NAMES,
    PLUGIN_PREFIX,
    VUEPRESS_SCOPE,
)
from .diagnostics import Diagnostic, error, warning
from .helpers import (
    CHILD_KEYS,
    LINK_KEYS,
    _as_mapping,
    _first_present,
    _optional_str,
    _plain_options,
)
from .links import parse_link
from .models import (
    GroupNode,
    LinkNode,
    NavNode,
    NormalizationResult,
    PluginDescriptor,
    SchemaShape,
    SiteConfig,
    ThemeDescriptor,
    ThemeKind,
    UnrecognizedSchemaError,
)

logger = logging.getLogger(__name__)


def canonical_plugin_name(name: str) -> str:
    """Return the package name a plugin reference resolves to.

    Factory helpers (``searchPlugin``) map to their package, and the
    ``@vuepress/<name>`` shorthand expands to ``@vuepress/plugin-<name>``.

    >>> canonical_plugin_name("@vuepress/search")
    '@vuepress/plugin-search'
    >>> canonical_plugin_name("searchPlugin")
    '@vuepress/plugin-search'
    """
    name = name.strip()
    if name in PLUGIN_FACTORY_NAMES:
        return PLUGIN_FACTORY_NAMES[name]
    if name.startswith(VUEPRESS_SCOPE):
        short = name[len(VUEPRESS_SCOPE) :]
        if not short.startswith((PLUGIN_PREFIX, "theme-")):
            return f"{VUEPRESS_SCOPE}{PLUGIN_PREFIX}{short}"
    return name


class _NavConverter:
    """Recursive navigation conversion that records diagnostics as it goes."""

    def __init__(self, schemes: typ.Iterable[str]) -> None:
        self.schemes = tuple(schemes)
        self.diagnostics: list[Diagnostic] = []

    def convert(
        self, entries: list[typ.Any], position: tuple[int, ...] = ()
    ) -> tuple[NavNode, ...]:
        nodes: list[NavNode] = []
        for index, entry in enumerate(entries):
            node = self._convert_entry(entry, (*position, index))
            if node is not None:
                nodes.append(node)
        return tuple(nodes)

    def _report(self, code: str, message: str, position: tuple[int, ...]) -> None:
        self.diagnostics.append(error(code, message, ("navigation", *position)))

    def _convert_entry(
        self, entry: object, position: tuple[int, ...]
    ) -> NavNode | None:
        mapping = _as_mapping(entry)
        if mapping is None:
            self._report(
                "malformed-nav-entry",
                f"Navigation entry must be a mapping, got {type(entry).__name__}.",
                position,
            )
            return None

        text = _optional_str(mapping.get("text"))
        if text is None:
            self._report(
                "malformed-nav-entry", "Navigation entry is missing 'text'.", position
            )
            return None

        child_key, children = _first_present(mapping, CHILD_KEYS)
        link_key, link = _first_present(mapping, LINK_KEYS)
        if child_key is not None:
            return self._convert_group(text, child_key, children, link, position)

        if not isinstance(link, str) or not link:
            self._report(
                "malformed-nav-entry",
                f"Navigation entry '{text}' needs a 'link' or 'children'/'items'.",
                position,
            )
            return None
        if link_key != "link":
            logger.debug("Entry %r uses %r for its link", text, link_key)
        return LinkNode(text=text, target=parse_link(link, self.schemes))

    def _convert_group(
        self,
        text: str,
        child_key: str,
        children: object,
        link: object,
        position: tuple[int, ...],
    ) -> GroupNode | None:
        match children:
            case list():
                pass
            case _:
                self._report(
                    "malformed-nav-entry",
                    f"Group '{text}' must list its '{child_key}' as a sequence.",
                    position,
                )
                return None
        if isinstance(link, str) and link:
            self.diagnostics.append(
                warning(
                    "group-link-ignored",
                    f"Group '{text}' also declares link '{link}', which is ignored.",
                    ("navigation", *position),
                )
            )
        if not children:
            self._report("empty-group", f"Group '{text}' has no entries.", position)
            return None
        nodes = self.convert(children, position)
        if not nodes:
            self._report(
                "empty-group", f"Group '{text}' has no valid entries.", position
            )
            return None
        return GroupNode(text=text, children=nodes)


class SchemaAdapter(abc.ABC):
    """Locate theme, navigation, and plugin data for one schema family."""

    theme_kind: typ.ClassVar[ThemeKind]
    nav_key: typ.ClassVar[str]

    @abc.abstractmethod
    def theme_payload(
        self, raw: typ.Mapping[str, typ.Any], diagnostics: list[Diagnostic]
    ) -> dict[str, typ.Any]:
        """Return theme options including the navigation list."""

    @abc.abstractmethod
    def decode_plugin(
        self, entry: object, index: int
    ) -> PluginDescriptor | Diagnostic | None:
        """Decode one raw plugin entry; None means the entry is disabled."""

    def plugin_entries(self, raw: typ.Mapping[str, typ.Any]) -> list[typ.Any]:
        """Return raw plugin entries as a list."""
        plugins = raw.get("plugins")
        match plugins:
            case None:
                return []
            case list():
                return plugins
            case _:
                mapping = _as_mapping(plugins)
                if mapping is not None:
                    return [{name: options} for name, options in mapping.items()]
                return [plugins]

    @staticmethod
    def _malformed_plugin(entry: object, index: int) -> Diagnostic:
        return error(
            "malformed-plugin",
            f"Cannot read plugin entry {entry!r}.",
            ("plugins", index),
        )


class FlatThemeConfigAdapter(SchemaAdapter):
    """``themeConfig: {nav: [...]}`` with string or ``[name, options]`` plugins."""

    theme_kind = ThemeKind.DEFAULT_THEME_OBJECT
    nav_key = "nav"

    def theme_payload(
        self, raw: typ.Mapping[str, typ.Any], diagnostics: list[Diagnostic]
    ) -> dict[str, typ.Any]:
        return _plain_options(raw.get("themeConfig"))

    def decode_plugin(
        self, entry: object, index: int
    ) -> PluginDescriptor | Diagnostic | None:
        match entry:
            case str() if entry.strip():
                return PluginDescriptor(name=canonical_plugin_name(entry))
            case [str() as name] if name.strip():
                return PluginDescriptor(name=canonical_plugin_name(name))
            case [str() as name, options] if name.strip():
                return self._with_options(name, options, entry, index)
            case _:
                pass
        mapping = _as_mapping(entry)
        if mapping is not None and len(mapping) == 1:
            ((name, options),) = mapping.items()
            if isinstance(name, str) and name.strip():
                return self._with_options(name, options, entry, index)
        return self._malformed_plugin(entry, index)

    def _with_options(
        self, name: str, options: object, entry: object, index: int
    ) -> PluginDescriptor | Diagnostic | None:
        match options:
            case False:
                logger.debug("Plugin %r is disabled", name)
                return None
            case True | None:
                return PluginDescriptor(name=canonical_plugin_name(name))
            case _ if _as_mapping(options) is not None:
                return PluginDescriptor(
                    name=canonical_plugin_name(name), options=_plain_options(options)
                )
            case _:
                return self._malformed_plugin(entry, index)


class ThemeFactoryAdapter(SchemaAdapter):
    """``theme: {factory: defaultTheme, options: {navbar: [...]}}`` layouts."""

    theme_kind = ThemeKind.DEFAULT_THEME_FACTORY
    nav_key = "navbar"

    def theme_payload(
        self, raw: typ.Mapping[str, typ.Any], diagnostics: list[Diagnostic]
    ) -> dict[str, typ.Any]:
        theme = _as_mapping(raw.get("theme")) or {}
        factory = theme.get("factory")
        if factory != DEFAULT_THEME_FACTORY:
            diagnostics.append(
                warning(
                    "unknown-theme",
                    f"Theme factory '{factory}' is treated as '{DEFAULT_THEME_FACTORY}'.",
                    ("theme", "factory"),
                )
            )
        return _plain_options(theme.get("options"))

    def decode_plugin(
        self, entry: object, index: int
    ) -> PluginDescriptor | Diagnostic | None:
        match entry:
            case str() if entry.strip():
                return PluginDescriptor(name=canonical_plugin_name(entry))
            case _:
                pass
        mapping = _as_mapping(entry)
        if mapping is None:
            return self._malformed_plugin(entry, index)
        factory = mapping.get("factory")
        options = mapping.get("options", {})
        if not isinstance(factory, str) or not factory.strip():
            return self._malformed_plugin(entry, index)
        if options is not None and _as_mapping(options) is None:
            return self._malformed_plugin(entry, index)
        return PluginDescriptor(
            name=canonical_plugin_name(factory), options=_plain_options(options)
        )


_FLAT_ADAPTER = FlatThemeConfigAdapter()
ADAPTERS: dict[SchemaShape, SchemaAdapter] = {
    SchemaShape.FLAT_THEME_CONFIG_V1: _FLAT_ADAPTER,
    SchemaShape.FLAT_THEME_CONFIG_V2_TRAILING_SLASH: _FLAT_ADAPTER,
    SchemaShape.FLAT_THEME_CONFIG_V3_ANCHORS: _FLAT_ADAPTER,
    SchemaShape.THEME_FACTORY_V1: ThemeFactoryAdapter(),
}


def _build_plugins(
    adapter: SchemaAdapter,
    raw: typ.Mapping[str, typ.Any],
    diagnostics: list[Diagnostic],
) -> tuple[PluginDescriptor, ...]:
    plugins: list[PluginDescriptor] = []
    for index, entry in enumerate(adapter.plugin_entries(raw)):
        decoded = adapter.decode_plugin(entry, index)
        match decoded:
            case PluginDescriptor():
                plugins.append(decoded)
            case None:
                continue
            case _:
                diagnostics.append(decoded)
    return tuple(plugins)


def normalize(
    raw: object,
    shape: SchemaShape,
    *,
    schemes: typ.Iterable[str] = EXTERNAL_SCHEMES,
) -> NormalizationResult:
    """Build the canonical :class:`SiteConfig` for ``raw``.

    Parameters
    ----------
    raw : object
        Raw configuration mapping.
    shape : SchemaShape
        Schema reported by :func:`sitenav.detector.detect`.
    schemes : Iterable[str], optional
        URL schemes treated as external links.

    Returns
    -------
    NormalizationResult
        The tree that could be built together with every diagnostic found.
        Malformed entries are reported with their index path and left out.

    Raises
    ------
    UnrecognizedSchemaError
        If ``shape`` is ``UNRECOGNIZED`` or ``raw`` is not a mapping.
    """
    config = _as_mapping(raw)
    adapter = ADAPTERS.get(shape)
    if adapter is None or config is None:
        raise UnrecognizedSchemaError(config.keys() if config is not None else ())

    diagnostics: list[Diagnostic] = []
    theme_options = adapter.theme_payload(config, diagnostics)
    raw_nav = theme_options.pop(adapter.nav_key, None)
    navigation: tuple[NavNode, ...] = ()
    match raw_nav:
        case None:
            pass
        case list():
            converter = _NavConverter(schemes)
            navigation = converter.convert(raw_nav)
            diagnostics.extend(converter.diagnostics)
        case _:
            diagnostics.append(
                error(
                    "malformed-nav-entry",
                    f"'{adapter.nav_key}' must be a sequence of entries.",
                    ("navigation",),
                )
            )

    plugins = _build_plugins(adapter, config, diagnostics)
    site = SiteConfig(
        title=_optional_str(config.get("title")) or "",
        description=_optional_str(config.get("description")) or "",
        destination_path=_optional_str(config.get("dest")) or DEFAULT_DESTINATION,
        theme=ThemeDescriptor(
            kind=adapter.theme_kind, options=theme_options, navigation=navigation
        ),
        plugins=plugins,
    )
    logger.debug(
        "Normalized %s: %d top-level entries, %d plugins, %d diagnostics",
        shape.value,
        len(navigation),
        len(plugins),
        len(diagnostics),
    )
    return NormalizationResult(
        shape=shape, config=site, diagnostics=tuple(diagnostics)
    )


__all__ = [
    "ADAPTERS",
    "FlatThemeConfigAdapter",
    "SchemaAdapter",
    "ThemeFactoryAdapter",
    "canonical_plugin_name",
    "normalize",
]
