"""Unit tests for navigation link classification."""

from __future__ import annotations

import pytest

from sitenav.links import is_document_path, looks_external, parse_link
from sitenav.models import ExternalURL, InternalAnchor, InternalPath


@pytest.mark.parametrize(
    "link",
    [
        "https://github.com/test-bench/test-bench",
        "http://example.com/docs",
        "mailto:maintainers@example.com",
        "//cdn.example.com/logo.svg",
    ],
)
def test_scheme_links_are_external(link: str) -> None:
    """Links with a URL scheme (or scheme-relative) leave the site."""
    actual = parse_link(link)
    assert actual == ExternalURL(url=link), f"expected ExternalURL, got {actual!r}"


def test_anchor_link_splits_on_hash() -> None:
    """'/#quick-start' is the root document plus a heading anchor."""
    actual = parse_link("/#quick-start")
    assert actual == InternalAnchor(path="/", fragment="quick-start"), (
        f"expected anchor on the root document, got {actual!r}"
    )


def test_anchor_link_keeps_text_either_side_of_first_hash() -> None:
    """Path and fragment are taken verbatim around the first '#'."""
    actual = parse_link("/user-guide/Tips.md#Odd#Case")
    assert actual == InternalAnchor(path="/user-guide/Tips.md", fragment="Odd#Case")


@pytest.mark.parametrize(
    ("bare", "slashed"),
    [
        ("/values.md", "/values.md/"),
        ("/user-guide/fixtures.md", "/user-guide/fixtures.md/"),
        ("/examples", "/examples/"),
    ],
)
def test_trailing_slash_variants_share_a_path(bare: str, slashed: str) -> None:
    """Both spellings resolve to one path; only the variant flag differs."""
    plain = parse_link(bare)
    variant = parse_link(slashed)
    assert isinstance(plain, InternalPath), f"expected InternalPath for {bare!r}"
    assert isinstance(variant, InternalPath), f"expected InternalPath for {slashed!r}"
    assert plain.path == variant.path == bare
    assert plain.trailing_slash_variant is False
    assert variant.trailing_slash_variant is True


def test_root_path_is_not_a_trailing_slash_variant() -> None:
    """The site root has nothing to strip."""
    assert parse_link("/") == InternalPath(path="/", trailing_slash_variant=False)


@pytest.mark.parametrize(
    "link",
    [
        "/go/?next=http://a.b",
        "/redirect.md?to=https://example.com",
        "/user-guide/links.md#see-https://example.com",
    ],
)
def test_embedded_urls_do_not_make_a_link_external(link: str) -> None:
    """Only a scheme at the start of the string marks a link as external."""
    actual = parse_link(link)
    assert not isinstance(actual, ExternalURL), (
        f"expected an internal target, got {actual!r}"
    )
    assert actual.href == link


def test_unknown_scheme_with_authority_is_external() -> None:
    """Any 'scheme://' prefix is a URL, recognized or not."""
    assert parse_link("gopher://example.com") == ExternalURL(url="gopher://example.com")


def test_unknown_scheme_is_left_internal() -> None:
    """Schemes outside the recognized set are not treated as external."""
    actual = parse_link("javascript:void(0)")
    assert actual == InternalPath(path="javascript:void(0)")


@pytest.mark.parametrize(
    "link", ["/", "/values.md", "/values.md/", "/examples/", "/#quick-start"]
)
def test_href_reproduces_configured_link(link: str) -> None:
    """Rendering a parsed target gives back the configured string."""
    assert parse_link(link).href == link


def test_looks_external_honours_custom_schemes() -> None:
    """Extra schemes can be recognized."""
    assert not looks_external("irc:libera/testbench")
    assert looks_external("irc:libera/testbench", ("irc",))


@pytest.mark.parametrize(
    ("path", "expected"),
    [("/values.md", True), ("/index.html", True), ("/examples", False), ("", False)],
)
def test_is_document_path(path: str, expected: bool) -> None:
    """Markdown and HTML paths count as documents."""
    assert is_document_path(path) is expected
