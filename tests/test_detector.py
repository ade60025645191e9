"""Unit tests for schema detection."""

from __future__ import annotations

import copy
import typing as typ

import pytest

from sitenav.detector import detect
from sitenav.models import SchemaShape

if typ.TYPE_CHECKING:
    from .conftest import ConfigFactory


def test_factory_call_with_navbar_is_theme_factory(
    make_factory_config: ConfigFactory,
) -> None:
    """A defaultTheme factory call carrying a navbar is the newest layout."""
    assert detect(make_factory_config()) is SchemaShape.THEME_FACTORY_V1


def test_bare_links_are_flat_v1(make_flat_config: ConfigFactory) -> None:
    """themeConfig.nav with bare document links is the first revision."""
    assert detect(make_flat_config()) is SchemaShape.FLAT_THEME_CONFIG_V1


def test_document_links_with_trailing_slash_are_flat_v2(
    make_flat_config: ConfigFactory,
) -> None:
    """A '.md/' document link marks the trailing-slash revision."""
    raw = make_flat_config(
        [
            {"text": "Home", "link": "/"},
            {"text": "Values", "link": "/values.md/"},
        ]
    )
    assert detect(raw) is SchemaShape.FLAT_THEME_CONFIG_V2_TRAILING_SLASH


def test_directory_links_do_not_imply_trailing_slash_revision(
    make_flat_config: ConfigFactory,
) -> None:
    """'/examples/' is an index page, not a trailing-slash document link."""
    raw = make_flat_config([{"text": "Examples", "link": "/examples/"}])
    assert detect(raw) is SchemaShape.FLAT_THEME_CONFIG_V1


def test_anchor_links_in_groups_are_flat_v3(make_flat_config: ConfigFactory) -> None:
    """Anchor links anywhere in the tree mark the anchors revision."""
    raw = make_flat_config(
        [
            {"text": "Values", "link": "/values.md/"},
            {
                "text": "Guide",
                "items": [{"text": "Quick Start", "link": "/#quick-start"}],
            },
        ]
    )
    assert detect(raw) is SchemaShape.FLAT_THEME_CONFIG_V3_ANCHORS


def test_fragments_on_external_links_are_ignored(
    make_flat_config: ConfigFactory,
) -> None:
    """Only internal anchors identify the anchors revision."""
    raw = make_flat_config(
        [{"text": "Code", "link": "https://github.com/test-bench/test-bench#readme"}]
    )
    assert detect(raw) is SchemaShape.FLAT_THEME_CONFIG_V1


def test_empty_navigation_is_still_recognized(make_flat_config: ConfigFactory) -> None:
    """An empty nav list is a legal flat configuration."""
    assert detect(make_flat_config([])) is SchemaShape.FLAT_THEME_CONFIG_V1


@pytest.mark.parametrize(
    "raw",
    [
        None,
        "themeConfig",
        [{"text": "Home", "link": "/"}],
        {},
        {"title": "TestBench"},
        {"themeConfig": {"sidebar": "auto"}},
        {"themeConfig": {"nav": {"text": "Home"}}},
        {"theme": {"factory": "defaultTheme", "options": {"sidebar": False}}},
        {"theme": "default", "navbar": []},
    ],
)
def test_unknown_layouts_are_unrecognized(raw: object) -> None:
    """Inputs without nav or a factory navbar are reported, never raised."""
    assert detect(raw) is SchemaShape.UNRECOGNIZED


def test_detection_does_not_mutate_input(make_flat_config: ConfigFactory) -> None:
    """Detection is a pure classification."""
    raw = make_flat_config()
    snapshot = copy.deepcopy(raw)
    detect(raw)
    assert raw == snapshot
