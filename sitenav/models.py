"""Typed dataclasses describing the canonical site navigation model."""

from __future__ import annotations

import dataclasses as dc
import enum
import types
import typing as typ

if typ.TYPE_CHECKING:
    from .diagnostics import Diagnostic


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


class UnrecognizedSchemaError(SiteConfigError):
    """Raised when a raw configuration matches none of the known schemas."""

    def __init__(self, keys: typ.Iterable[str] = ()) -> None:
        self.keys = tuple(sorted(str(key) for key in keys))
        seen = ", ".join(self.keys) or "<none>"
        super().__init__(
            "Configuration matches no known navigation schema "
            f"(top-level keys: {seen})."
        )


class PublishBlockedError(SiteConfigError):
    """Raised when error diagnostics must stop the site from being published."""

    def __init__(self, errors: typ.Sequence[Diagnostic]) -> None:
        self.errors = tuple(errors)
        lines = "\n".join(f"  {error}" for error in self.errors)
        super().__init__(
            f"{len(self.errors)} configuration error(s) block publishing:\n{lines}"
        )


class SchemaShape(enum.Enum):
    """Historical configuration layouts understood by the normalizer."""

    FLAT_THEME_CONFIG_V1 = "flat-theme-config-v1"
    FLAT_THEME_CONFIG_V2_TRAILING_SLASH = "flat-theme-config-v2-trailing-slash"
    FLAT_THEME_CONFIG_V3_ANCHORS = "flat-theme-config-v3-anchors"
    THEME_FACTORY_V1 = "theme-factory-v1"
    UNRECOGNIZED = "unrecognized"

    @property
    def is_flat(self) -> bool:
        """Return True for the shapes that keep navigation under ``themeConfig``."""
        return self in FLAT_SHAPES


FLAT_SHAPES = frozenset(
    {
        SchemaShape.FLAT_THEME_CONFIG_V1,
        SchemaShape.FLAT_THEME_CONFIG_V2_TRAILING_SLASH,
        SchemaShape.FLAT_THEME_CONFIG_V3_ANCHORS,
    }
)


class ThemeKind(enum.Enum):
    """How the theme was declared in the source configuration."""

    DEFAULT_THEME_OBJECT = "default-theme-object"
    DEFAULT_THEME_FACTORY = "default-theme-factory"


@dc.dataclass(frozen=True, slots=True)
class ExternalURL:
    """Absolute URL that leaves the documentation site."""

    url: str

    @property
    def href(self) -> str:
        """Return the link string as it appears in configuration."""
        return self.url


@dc.dataclass(frozen=True, slots=True)
class InternalPath:
    """Site-rooted document path.

    Attributes
    ----------
    path : str
        Document path with a single trailing slash removed. The site root is
        kept as ``"/"``.
    trailing_slash_variant : bool
        Whether the configured link ended in ``/`` (for example
        ``/values.md/``). Both spellings point at the same document.
    """

    path: str
    trailing_slash_variant: bool = False

    @property
    def href(self) -> str:
        """Return the link string as it appears in configuration."""
        if self.trailing_slash_variant:
            return f"{self.path}/"
        return self.path


@dc.dataclass(frozen=True, slots=True)
class InternalAnchor:
    """Site-rooted document path pointing at a heading anchor."""

    path: str
    fragment: str

    @property
    def href(self) -> str:
        """Return the link string as it appears in configuration."""
        return f"{self.path}#{self.fragment}"


LinkTarget: typ.TypeAlias = ExternalURL | InternalPath | InternalAnchor


@dc.dataclass(frozen=True, slots=True)
class LinkNode:
    """Navigable leaf entry in the navigation bar."""

    text: str
    target: LinkTarget


@dc.dataclass(frozen=True, slots=True)
class GroupNode:
    """Dropdown entry grouping further navigation entries."""

    text: str
    children: tuple[NavNode, ...]


NavNode: typ.TypeAlias = LinkNode | GroupNode
NavTree: typ.TypeAlias = tuple[NavNode, ...]


def _frozen_options(value: typ.Mapping[str, typ.Any]) -> typ.Mapping[str, typ.Any]:
    """Return a read-only copy of an options mapping."""
    return types.MappingProxyType(dict(value))


@dc.dataclass(frozen=True, slots=True)
class ThemeDescriptor:
    """Theme declaration plus the navigation bar it renders.

    ``options`` is read-only and left out of the hash; two descriptors with
    the same kind and navigation hash alike and compare on options too.
    """

    kind: ThemeKind
    options: typ.Mapping[str, typ.Any] = dc.field(default_factory=dict, hash=False)
    navigation: NavTree = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", _frozen_options(self.options))


@dc.dataclass(frozen=True, slots=True)
class PluginDescriptor:
    """A plugin reference with its canonical package name and read-only options."""

    name: str
    options: typ.Mapping[str, typ.Any] = dc.field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", _frozen_options(self.options))


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """Canonical site configuration handed to the build pipeline."""

    title: str
    description: str
    destination_path: str
    theme: ThemeDescriptor
    plugins: tuple[PluginDescriptor, ...] = ()

    @property
    def navigation(self) -> NavTree:
        """Return the navigation tree owned by the theme."""
        return self.theme.navigation


@dc.dataclass(frozen=True, slots=True)
class NormalizationResult:
    """Outcome of a normalization run.

    Attributes
    ----------
    shape : SchemaShape
        Schema the raw configuration was read with.
    config : SiteConfig
        Tree that could be built; entries reported as errors are absent.
    diagnostics : tuple[Diagnostic, ...]
        Every problem found while building ``config``.
    """

    shape: SchemaShape
    config: SiteConfig
    diagnostics: tuple[Diagnostic, ...] = ()


def iter_nodes(
    nodes: typ.Iterable[NavNode], prefix: tuple[int, ...] = ()
) -> typ.Iterator[tuple[tuple[int, ...], NavNode]]:
    """Yield ``(index_path, node)`` pairs in display order, depth first."""
    for index, node in enumerate(nodes):
        position = (*prefix, index)
        yield position, node
        match node:
            case GroupNode(children=children):
                yield from iter_nodes(children, position)
            case LinkNode():
                pass


__all__ = [
    "FLAT_SHAPES",
    "ExternalURL",
    "GroupNode",
    "InternalAnchor",
    "InternalPath",
    "LinkNode",
    "LinkTarget",
    "NavNode",
    "NavTree",
    "NormalizationResult",
    "PluginDescriptor",
    "PublishBlockedError",
    "SchemaShape",
    "SiteConfig",
    "SiteConfigError",
    "ThemeDescriptor",
    "ThemeKind",
    "UnrecognizedSchemaError",
    "iter_nodes",
]
