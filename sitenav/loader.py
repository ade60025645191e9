"""Load site configuration files and run the normalization pipeline."""

from __future__ import annotations

import logging
import typing as typ

from ruamel.yaml import YAML

from .detector import detect
from .diagnostics import log_report
from .helpers import _as_mapping
from .models import NormalizationResult, SchemaShape, UnrecognizedSchemaError
from .normalizer import normalize
from .settings import ValidationSettings
from .validator import validate

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def load_raw_config(path: Path) -> dict[str, typ.Any]:
    """Read a YAML or JSON site configuration into plain data.

    Parameters
    ----------
    path : Path
        Configuration file. JSON is accepted because it is valid YAML 1.2.

    Returns
    -------
    dict[str, Any]
        Top-level configuration mapping.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level document is not a mapping.
    YAMLError
        If the content cannot be parsed.
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level configuration must be a mapping."
        raise TypeError(msg)
    return dict(loaded)


def normalize_config(
    raw: object, settings: ValidationSettings | None = None
) -> NormalizationResult:
    """Detect, normalize, and validate ``raw`` in one pass.

    Parameters
    ----------
    raw : object
        Raw configuration mapping.
    settings : ValidationSettings, optional
        Recognized option sets and URL schemes; defaults to the bundled
        tables.

    Returns
    -------
    NormalizationResult
        Canonical configuration with normalizer diagnostics followed by
        validator diagnostics.

    Raises
    ------
    UnrecognizedSchemaError
        If ``raw`` matches no known schema.
    """
    active = settings or ValidationSettings.default()
    shape = detect(raw)
    if shape is SchemaShape.UNRECOGNIZED:
        mapping = _as_mapping(raw)
        keys = mapping.keys() if mapping is not None else ()
        raise UnrecognizedSchemaError(keys)
    result = normalize(raw, shape, schemes=active.url_schemes)
    report = validate(result.config, active)
    return NormalizationResult(
        shape=shape,
        config=result.config,
        diagnostics=(*result.diagnostics, *report.diagnostics),
    )


def load_site_config(
    path: Path, settings: ValidationSettings | None = None
) -> NormalizationResult:
    """Load ``path`` and return its normalized, validated configuration.

    Every diagnostic is emitted through :mod:`logging`: errors at ``ERROR``
    level, warnings at ``WARNING`` level.

    Examples
    --------
    >>> from pathlib import Path
    >>> from sitenav import load_site_config
    >>> result = load_site_config(Path("docs/.vuepress/config.yaml"))  # doctest: +SKIP
    >>> [node.text for node in result.config.navigation]  # doctest: +SKIP
    ['Home', 'Values', 'User Guide', 'Code']
    """
    raw = load_raw_config(path)
    result = normalize_config(raw, settings)
    logger.info(
        "Read %s as %s with %d diagnostic(s)",
        path,
        result.shape.value,
        len(result.diagnostics),
    )
    log_report(result.diagnostics, logger)
    return result


__all__ = ["load_raw_config", "load_site_config", "normalize_config"]
