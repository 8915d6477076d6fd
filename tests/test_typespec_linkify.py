from __future__ import annotations

from pathlib import Path

import pytest

from refs.metadata import MetadataIndex
from refs.registry import RefRegistry
from resolve.context import ResolutionContext
from resolve.ecosystem import Ecosystem
from resolve.resolver import LinkResolver
from typespec.linkify import count_args, leading_name, linkify_signature

FIXTURE = Path(__file__).parent / "fixtures" / "metadata.jsonl"


@pytest.fixture
def resolver() -> LinkResolver:
    index = MetadataIndex.from_jsonl(FIXTURE)
    return LinkResolver(
        RefRegistry(index), Ecosystem(packages=index.packages), lambda _msg: None
    )


def _context(package: str = "elixir", current: str = "String") -> ResolutionContext:
    return ResolutionContext(package=package, current_container=current, id=current)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("()", 0),
        ("() :: t()", 0),
        ("(a)", 1),
        ("(a, b)", 2),
        ("(a, b, {c, d}, [e])", 4),
        ("(a, fun((b, c) -> d)) :: x(y, z)", 2),
    ],
)
def test_count_args(text: str, expected: int) -> None:
    assert count_args(text) == expected


def test_leading_name() -> None:
    assert leading_name("upcase(t()) :: t()") == "upcase"
    assert leading_name("valid?(t()) :: boolean()") == "valid?"
    assert leading_name("String.t()") == ""


def test_local_and_builtin_types(resolver: LinkResolver) -> None:
    result = linkify_signature("upcase(t(), keyword()) :: t()", resolver, _context())

    assert result == (
        'upcase(<a href="#t:t/0">t</a>(), '
        '<a href="typespecs.html#built-in-types">keyword</a>()) :: '
        '<a href="#t:t/0">t</a>()'
    )


def test_remote_type(resolver: LinkResolver) -> None:
    result = linkify_signature("String.t()", resolver, _context(current="Kernel"))

    assert result == '<a href="String.html#t:t/0">String.t</a>()'


def test_remote_type_from_other_package(resolver: LinkResolver) -> None:
    result = linkify_signature(
        "get_user(String.t()) :: user()",
        resolver,
        _context(package="my_app", current="MyApp.Accounts"),
    )

    assert result == (
        'get_user(<a href="https://hexdocs.pm/elixir/String.html#t:t/0">'
        "String.t</a>()) :: "
        '<a href="#t:user/0">user</a>()'
    )


def test_stdlib_type(resolver: LinkResolver) -> None:
    result = linkify_signature("reverse(:lists.seq()) :: atom()", resolver, _context())

    assert result == (
        'reverse(<a href="http://www.erlang.org/doc/man/lists.html#type-seq">'
        ":lists.seq</a>()) :: "
        '<a href="typespecs.html#basic-types">atom</a>()'
    )


def test_signature_name_is_never_linked(resolver: LinkResolver) -> None:
    # "t" is both the function name and a public type of String
    result = linkify_signature("t(t()) :: t()", resolver, _context())

    assert result.startswith("t(")
    assert result == (
        't(<a href="#t:t/0">t</a>()) :: <a href="#t:t/0">t</a>()'
    )


def test_explicit_name_overrides_derived_name(resolver: LinkResolver) -> None:
    result = linkify_signature("t() :: t()", resolver, _context(), name="")

    assert result == '<a href="#t:t/0">t</a>() :: <a href="#t:t/0">t</a>()'


def test_unresolvable_types_are_left_as_text(resolver: LinkResolver) -> None:
    text = "upcase(mystery(), Unknown.thing()) :: nope(1)"

    assert linkify_signature(text, resolver, _context()) == text


def test_text_without_calls_is_unchanged(resolver: LinkResolver) -> None:
    assert linkify_signature("upcase :: binary", resolver, _context()) == (
        "upcase :: binary"
    )
