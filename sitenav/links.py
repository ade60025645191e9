r"""Classify navigation link strings into canonical link targets.

Link parsing does not depend on the schema a link came from: the same string
always produces the same target, so trailing-slash and anchor variants are
normalized identically for every historical layout.

Examples
--------
>>> from sitenav.links import parse_link
>>> parse_link("/#quick-start")
InternalAnchor(path='/', fragment='quick-start')
>>> parse_link("/values.md/")
InternalPath(path='/values.md', trailing_slash_variant=True)
>>> parse_link("https://github.com/test-bench/test-bench")
ExternalURL(url='https://github.com/test-bench/test-bench')
"""

from __future__ import annotations

import re
import typing as typ

from ._constants import EXTERNAL_SCHEMES
from .models import ExternalURL, InternalAnchor, InternalPath

if typ.TYPE_CHECKING:
    from .models import LinkTarget

SCHEME_PATTERN = re.compile(r"^(?P<scheme>[A-Za-z][A-Za-z0-9+.-]*):")
DOCUMENT_SUFFIX_PATTERN = re.compile(r"\.(md|html)$", re.IGNORECASE)


def looks_external(value: str, schemes: typ.Iterable[str] = EXTERNAL_SCHEMES) -> bool:
    """Return True when ``value`` starts with a URL scheme or ``//``.

    Any ``scheme://`` prefix counts, a bare ``scheme:`` prefix only for a
    recognized scheme. A URL later in the string (``/go?next=https://...``)
    does not make the link external.
    """
    if value.startswith("//"):
        return True
    match = SCHEME_PATTERN.match(value)
    if match is None:
        return False
    if value.startswith("//", match.end()):
        return True
    return match.group("scheme").lower() in {scheme.lower() for scheme in schemes}



def is_document_path(path: str) -> bool:
    """Return True when ``path`` names a markdown or HTML document."""
    return bool(DOCUMENT_SUFFIX_PATTERN.search(path))


def parse_link(value: str, schemes: typ.Iterable[str] = EXTERNAL_SCHEMES) -> LinkTarget:
    """Classify a configured link string.

    Parameters
    ----------
    value : str
        Link exactly as it appears in configuration.
    schemes : Iterable[str], optional
        URL schemes recognized as external links.

    Returns
    -------
    LinkTarget
        ``ExternalURL`` for scheme-qualified URLs, ``InternalAnchor`` for
        anything containing ``#`` (split on the first one, no rewriting),
        and ``InternalPath`` otherwise.
    """
    if looks_external(value, schemes):
        return ExternalURL(url=value)
    if "#" in value:
        path, fragment = value.split("#", 1)
        return InternalAnchor(path=path, fragment=fragment)
    if len(value) > 1 and value.endswith("/"):
        return InternalPath(path=value[:-1], trailing_slash_variant=True)
    return InternalPath(path=value)


__all__ = ["is_document_path", "looks_external", "parse_link"]
