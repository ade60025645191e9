"""Utility helpers shared by the detector, normalizer, and writers."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

CHILD_KEYS = ("children", "items")
LINK_KEYS = ("link", "href")


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _as_mapping(value: object) -> typ.Mapping[str, typ.Any] | None:
    """Return ``value`` when it is a mapping, otherwise None."""
    if isinstance(value, cabc.Mapping):
        return value
    return None


def _dig(payload: object, *keys: str) -> object | None:
    """Follow ``keys`` through nested mappings, returning None on any miss."""
    current: object | None = payload
    for key in keys:
        mapping = _as_mapping(current)
        if mapping is None:
            return None
        current = mapping.get(key)
    return current


def _first_present(
    entry: typ.Mapping[str, typ.Any], keys: typ.Iterable[str]
) -> tuple[str | None, typ.Any]:
    """Return the first key of ``keys`` present in ``entry`` and its value."""
    for key in keys:
        if key in entry:
            return key, entry[key]
    return None, None


def _iter_link_strings(entries: object) -> typ.Iterator[str]:
    """Yield raw link strings from a navigation list in display order."""
    match entries:
        case list():
            pass
        case _:
            return
    for entry in entries:
        mapping = _as_mapping(entry)
        if mapping is None:
            continue
        _, link = _first_present(mapping, LINK_KEYS)
        if isinstance(link, str) and link:
            yield link
        _, children = _first_present(mapping, CHILD_KEYS)
        yield from _iter_link_strings(children)


def _plain_options(value: object) -> dict[str, typ.Any]:
    """Copy a mapping of options into a plain dict with string keys."""
    mapping = _as_mapping(value)
    if mapping is None:
        return {}
    return {str(key): option for key, option in mapping.items()}


__all__ = [
    "CHILD_KEYS",
    "LINK_KEYS",
    "_as_mapping",
    "_dig",
    "_first_present",
    "_iter_link_strings",
    "_optional_str",
    "_plain_options",
]
