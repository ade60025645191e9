"""Cross-check internal navigation links against the site's documents.

This pass needs the document sources, so it sits outside the pure
normalize/validate core. :class:`DocumentTree` lists every markdown document
by its site route together with the heading anchors the markdown renderer
generates for it; :func:`cross_check` reports links whose document or anchor
does not exist.

Examples
--------
>>> from sitenav.crosscheck import DocumentTree
>>> tree = DocumentTree({"/README.md": frozenset({"quick-start"})})
>>> tree.resolve("/")
'/README.md'
>>> tree.has_anchor("/", "quick-start")
True
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from markdown import Markdown

from ._constants import INDEX_DOCUMENTS
from .diagnostics import ValidationReport, error, warning
from .models import InternalAnchor, InternalPath, LinkNode, iter_nodes

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .diagnostics import Diagnostic
    from .models import SiteConfig

logger = logging.getLogger(__name__)


def _collect_ids(tokens: typ.Iterable[typ.Mapping[str, typ.Any]]) -> set[str]:
    ids: set[str] = set()
    for token in tokens:
        ids.add(str(token["id"]))
        ids.update(_collect_ids(token.get("children", [])))
    return ids


def heading_anchors(markdown_text: str, md: Markdown | None = None) -> frozenset[str]:
    """Return the heading ids the ``toc`` extension assigns in ``markdown_text``."""
    renderer = md or Markdown(extensions=["toc"])
    renderer.reset()
    renderer.convert(markdown_text)
    return frozenset(_collect_ids(getattr(renderer, "toc_tokens", [])))


@dc.dataclass(frozen=True, slots=True)
class DocumentTree:
    """Markdown documents keyed by site route (``/guide/start.md``)."""

    documents: typ.Mapping[str, frozenset[str]]

    @classmethod
    def from_directory(cls, root: Path) -> DocumentTree:
        """Scan ``root`` for markdown files and record their heading anchors.

        Parameters
        ----------
        root : Path
            Documentation source directory (the directory holding
            ``.vuepress``).

        Returns
        -------
        DocumentTree
            One entry per ``*.md`` file outside dot-directories.

        Raises
        ------
        FileNotFoundError
            If ``root`` is not a directory.
        """
        if not root.is_dir():
            msg = f"Documentation root '{root}' not found."
            raise FileNotFoundError(msg)
        md = Markdown(extensions=["toc"])
        documents: dict[str, frozenset[str]] = {}
        for source in sorted(root.rglob("*.md")):
            relative = source.relative_to(root)
            if any(part.startswith(".") for part in relative.parts):
                continue
            route = "/" + relative.as_posix()
            documents[route] = heading_anchors(source.read_text(encoding="utf-8"), md)
        logger.debug("Found %d documents under %s", len(documents), root)
        return cls(documents)

    def _candidates(self, path: str) -> list[str]:
        trimmed = path.rstrip("/")
        if not trimmed:
            return [f"/{name}" for name in INDEX_DOCUMENTS]
        if trimmed.endswith(".md"):
            return [trimmed]
        if trimmed.endswith(".html"):
            return [f"{trimmed[: -len('.html')]}.md"]
        return [f"{trimmed}.md", *(f"{trimmed}/{name}" for name in INDEX_DOCUMENTS)]

    def resolve(self, path: str) -> str | None:
        """Return the document route ``path`` renders, or None."""
        for candidate in self._candidates(path):
            if candidate in self.documents:
                return candidate
        return None

    def has_anchor(self, path: str, fragment: str) -> bool:
        """Return True when the document at ``path`` has heading ``fragment``."""
        route = self.resolve(path)
        return route is not None and fragment in self.documents[route]


def cross_check(config: SiteConfig, tree: DocumentTree) -> ValidationReport:
    """Report internal links whose document or anchor is missing.

    Links that are not rooted are skipped; :func:`sitenav.validator.validate`
    already reports them.
    """
    diagnostics: list[Diagnostic] = []
    for position, node in iter_nodes(config.navigation):
        match node:
            case LinkNode(target=InternalPath() | InternalAnchor() as target):
                pass
            case _:
                continue
        if not target.path.startswith("/"):
            continue
        location = ("navigation", *position)
        if tree.resolve(target.path) is None:
            diagnostics.append(
                error(
                    "missing-document",
                    f"No document found for link '{target.href}'.",
                    location,
                )
            )
            continue
        match target:
            case InternalAnchor(path=path, fragment=fragment) if not tree.has_anchor(
                path, fragment
            ):
                diagnostics.append(
                    warning(
                        "missing-anchor",
                        f"Document for '{path}' has no heading '#{fragment}'.",
                        location,
                    )
                )
            case _:
                pass
    return ValidationReport(tuple(diagnostics))


__all__ = ["DocumentTree", "cross_check", "heading_anchors"]
