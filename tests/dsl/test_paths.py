# topmark:header:start
#
#   project      : C4DSL
#   file         : test_paths.py
#   file_relpath : tests/dsl/test_paths.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `PathResolver` registration and fallback resolution."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from c4dsl.dsl.paths import PathResolver, join_path

if TYPE_CHECKING:
    from c4dsl.model import ModelFactory


def test_join_path() -> None:
    assert join_path("a", "wa", "a") == "a.wa.a"
    assert join_path("u") == "u"


def test_registered_elements_resolve_to_their_path(factory: ModelFactory) -> None:
    web = factory.container(name="Web App", description="Frontend")
    resolver = PathResolver()
    resolver.register(web.identity, "a.wa")
    assert resolver.is_registered(web.identity)
    assert resolver.resolve(web) == "a.wa"
    assert resolver.resolve(web.identity) == "a.wa"
    assert resolver.path_of(web.identity) == "a.wa"
    assert len(resolver) == 1


def test_unregistered_element_falls_back_to_initials(factory: ModelFactory) -> None:
    outsider = factory.software_system(name="Payment Gateway", description="Pays")
    resolver = PathResolver()
    assert resolver.path_of(outsider.identity) is None
    assert resolver.resolve(outsider) == "pg"


def test_raw_string_is_formatted_as_reference() -> None:
    resolver = PathResolver()
    assert resolver.resolve("x") == "x"
    assert resolver.resolve("my system.api") == "my_system.api"


def test_same_name_elements_keep_distinct_paths(factory: ModelFactory) -> None:
    first = factory.person(name="User", description="One")
    second = factory.person(name="User", description="Two")
    resolver = PathResolver()
    resolver.register(first.identity, "u")
    resolver.register(second.identity, "u1")
    assert resolver.resolve(first) == "u"
    assert resolver.resolve(second) == "u1"


def test_registering_twice_is_an_error(factory: ModelFactory) -> None:
    user = factory.person(name="User", description="One")
    resolver = PathResolver()
    resolver.register(user.identity, "u")
    with pytest.raises(AssertionError, match="registered twice"):
        resolver.register(user.identity, "u1")
