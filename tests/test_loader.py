"""Tests for reading configuration files and running the full pipeline."""

from __future__ import annotations

import json
import logging
import types
import typing as typ

import pytest

from sitenav import loader
from sitenav.models import (
    InternalPath,
    LinkNode,
    SchemaShape,
    UnrecognizedSchemaError,
)

if typ.TYPE_CHECKING:
    from pathlib import Path

    from pytest_mock import MockerFixture

    from .conftest import ConfigFactory

FLAT_YAML = """
title: TestBench
description: Principled Test Framework for Ruby
dest: ./_build
plugins:
  - "@vuepress/search"
  - ["@vuepress/medium-zoom", {selector: img, scale: 2}]
themeConfig:
  activeHeaderLinks: true
  nav:
    - text: Home
      link: /
    - text: Values
      link: /values.md/
    - text: User Guide
      items:
        - text: Getting Started
          link: /user-guide/getting-started.md/
        - text: Getting Started
          link: /user-guide/getting-started.md/
    - text: Examples
      items: []
"""


def test_load_raw_config_reads_yaml(tmp_path: Path) -> None:
    """YAML mappings are returned as plain dicts."""
    path = tmp_path / "config.yaml"
    path.write_text(FLAT_YAML, encoding="utf-8")
    raw = loader.load_raw_config(path)
    assert raw["title"] == "TestBench"
    assert raw["themeConfig"]["nav"][0] == {"text": "Home", "link": "/"}


def test_load_raw_config_reads_json(
    tmp_path: Path, make_factory_config: ConfigFactory
) -> None:
    """JSON configuration is read through the same YAML loader."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps(make_factory_config()), encoding="utf-8")
    raw = loader.load_raw_config(path)
    assert raw == make_factory_config()


def test_load_raw_config_missing_file(tmp_path: Path) -> None:
    """A missing file is reported before parsing."""
    with pytest.raises(FileNotFoundError, match="not found"):
        loader.load_raw_config(tmp_path / "config.yaml")


def test_load_raw_config_rejects_sequences(tmp_path: Path) -> None:
    """The top level must be a mapping."""
    path = tmp_path / "config.yaml"
    path.write_text("- text: Home\n  link: /\n", encoding="utf-8")
    with pytest.raises(TypeError):
        loader.load_raw_config(path)


def test_load_site_config_collects_and_logs_diagnostics(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Normalizer and validator findings arrive together and are logged."""
    path = tmp_path / "config.yaml"
    path.write_text(FLAT_YAML, encoding="utf-8")
    with caplog.at_level(logging.INFO, logger="sitenav"):
        result = loader.load_site_config(path)

    assert result.shape is SchemaShape.FLAT_THEME_CONFIG_V2_TRAILING_SLASH
    assert [node.text for node in result.config.navigation] == [
        "Home",
        "Values",
        "User Guide",
    ]
    codes = [item.code for item in result.diagnostics]
    assert codes == ["empty-group", "duplicate-label", "unknown-plugin-option"]

    levels = [record.levelno for record in caplog.records]
    assert levels.count(logging.ERROR) == 1
    assert levels.count(logging.WARNING) == 2
    assert any("flat-theme-config-v2" in record.getMessage() for record in caplog.records)


def test_normalize_config_detects_once(
    mocker: MockerFixture, make_flat_config: ConfigFactory
) -> None:
    """The pipeline classifies the input a single time."""
    spy = mocker.spy(loader, "detect")
    result = loader.normalize_config(make_flat_config())
    spy.assert_called_once()
    assert result.shape is SchemaShape.FLAT_THEME_CONFIG_V1
    assert result.diagnostics == ()


def test_unrecognized_file_is_fatal(tmp_path: Path) -> None:
    """A file without nav or navbar aborts the run."""
    path = tmp_path / "config.yaml"
    path.write_text("title: TestBench\nthemeConfig:\n  sidebar: auto\n", encoding="utf-8")
    with pytest.raises(UnrecognizedSchemaError, match="themeConfig"):
        loader.load_site_config(path)


def test_rooted_link_with_query_url_passes_validation() -> None:
    """A URL inside a query string leaves an internal link internal."""
    result = loader.normalize_config(
        {"themeConfig": {"nav": [{"text": "Go", "link": "/go/?next=http://a.b"}]}}
    )
    assert result.diagnostics == (), f"unexpected diagnostics {result.diagnostics}"
    (node,) = result.config.navigation
    assert isinstance(node, LinkNode)
    assert node.target == InternalPath("/go/?next=http://a.b")


def test_unrecognized_read_only_mapping_lists_its_keys() -> None:
    """Any mapping type reports the top-level keys it was given."""
    raw = types.MappingProxyType({"title": "TestBench", "themeConfig": {}})
    with pytest.raises(UnrecognizedSchemaError) as excinfo:
        loader.normalize_config(raw)
    assert excinfo.value.keys == ("themeConfig", "title")
