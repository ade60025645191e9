"""Shared fixtures describing the TestBench documentation site configuration.

The same navigation bar is available in both historical layouts so tests can
compare what the normalizer produces for each of them.
"""

from __future__ import annotations

import copy
import typing as typ

import pytest

TESTBENCH_NAVBAR: list[dict[str, typ.Any]] = [
    {"text": "Home", "link": "/"},
    {"text": "Values", "link": "/values.md"},
    {
        "text": "User Guide",
        "children": [
            {"text": "Getting Started", "link": "/user-guide/getting-started.md"},
            {"text": "Writing Tests", "link": "/user-guide/writing-tests.md"},
            {"text": "Fixtures", "link": "/user-guide/fixtures.md"},
            {"text": "Running Tests", "link": "/user-guide/running-tests.md"},
            {"text": "Recipes", "link": "/user-guide/recipes.md"},
            {"text": "Tips", "link": "/user-guide/tips.md"},
        ],
    },
    {"text": "Code", "link": "https://github.com/test-bench/test-bench"},
]

ConfigFactory = typ.Callable[..., dict[str, typ.Any]]


def rename_children(
    entries: list[dict[str, typ.Any]], key: str
) -> list[dict[str, typ.Any]]:
    """Return a deep copy of ``entries`` using ``key`` for group children."""
    renamed: list[dict[str, typ.Any]] = []
    for entry in entries:
        item = copy.deepcopy(entry)
        if isinstance(item, dict):
            for old_key in ("children", "items"):
                if isinstance(item.get(old_key), list):
                    item[key] = rename_children(item.pop(old_key), key)
                    break
        renamed.append(item)
    return renamed


@pytest.fixture
def make_flat_config() -> ConfigFactory:
    """Return a builder for ``themeConfig.nav`` style configurations."""

    def _make(
        entries: list[dict[str, typ.Any]] | None = None, **top: typ.Any
    ) -> dict[str, typ.Any]:
        source = TESTBENCH_NAVBAR if entries is None else entries
        raw: dict[str, typ.Any] = {
            "title": "TestBench",
            "description": "Principled Test Framework for Ruby",
            "dest": "./_build",
            "plugins": ["@vuepress/search"],
            "themeConfig": {
                "activeHeaderLinks": True,
                "nav": rename_children(source, "items"),
            },
        }
        raw.update(top)
        return raw

    return _make


@pytest.fixture
def make_factory_config() -> ConfigFactory:
    """Return a builder for ``defaultTheme({...navbar})`` style configurations."""

    def _make(
        entries: list[dict[str, typ.Any]] | None = None, **top: typ.Any
    ) -> dict[str, typ.Any]:
        source = TESTBENCH_NAVBAR if entries is None else entries
        raw: dict[str, typ.Any] = {
            "title": "TestBench",
            "description": "Principled Test Framework for Ruby",
            "dest": "./_build",
            "plugins": [{"factory": "searchPlugin"}],
            "theme": {
                "factory": "defaultTheme",
                "options": {
                    "activeHeaderLinks": True,
                    "navbar": rename_children(source, "children"),
                },
            },
        }
        raw.update(top)
        return raw

    return _make
