# topmark:header:start
#
#   project      : C4DSL
#   file         : test_loader.py
#   file_relpath : tests/test_loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for reading TOML/JSON workspace documents into a builder."""

from __future__ import annotations

import json
import re
import textwrap
from typing import TYPE_CHECKING

import pytest

from c4dsl.dsl.views import ViewType
from c4dsl.loader import (
    WorkspaceDocumentError,
    load_workspace,
    loads_workspace,
    parse_document,
)
from c4dsl.model import ContainerType, ElementValidationError, InteractionStyle, Location
from tests.conftest import make_config, parametrize

if TYPE_CHECKING:
    from pathlib import Path

BANKING = textwrap.dedent(
    """\
    [workspace]
    name = "Big Bank"
    description = "Internet banking"

    [[people]]
    key = "customer"
    name = "Customer"
    description = "A bank customer"
    location = "external"

    [[systems]]
    key = "ibs"
    name = "Internet Banking"
    description = "Lets customers bank online"

    [[systems.containers]]
    key = "web"
    name = "Web App"
    description = "Delivers the SPA"
    type = "web_application"
    technology = "Java"

    [[systems.containers.components]]
    key = "signin"
    name = "Sign In"
    description = "Signs users in"
    technology = "Spring MVC"

    [[systems]]
    key = "mail"
    name = "E-mail System"
    description = "Sends e-mails"
    location = "External"

    [[relationships]]
    source = "customer"
    target = "web"
    description = "Visits"
    technology = "HTTPS"

    [[relationships]]
    source = "signin"
    target = "mail"
    description = "Sends e-mail using"
    interaction = "ASYNCHRONOUS"

    [[views]]
    type = "container"
    element = "ibs"
    title = "Containers"
    include = ["*"]

    [[styles.elements]]
    tag = "Person"
    shape = "person"

    [[styles.relationships]]
    dashed = false
    """
)


def test_banking_document_loads() -> None:
    builder = loads_workspace(BANKING)
    assert builder.name == "Big Bank"
    [customer] = builder.people
    assert customer.location is Location.EXTERNAL
    ibs, mail = builder.systems
    assert mail.location is Location.EXTERNAL
    [web] = ibs.containers
    assert web.container_type is ContainerType.WEB_APPLICATION
    assert web.components[0].technology == "Spring MVC"
    visits, sends = builder.relationships
    assert visits.source is customer.identity
    assert visits.target is web.identity
    assert sends.interaction_style is InteractionStyle.ASYNCHRONOUS
    [view] = builder.views
    assert view.view_type is ViewType.CONTAINER
    assert view.element is ibs
    assert builder.element_styles[0].tag == "Person"
    assert builder.relationship_styles[0].tag == "Relationship"
    assert builder.relationship_styles[0].dashed is False


def test_banking_document_serializes() -> None:
    out = loads_workspace(BANKING).serialize()
    assert out.startswith('workspace "Big Bank" "Internet banking" {')
    assert 'c = person "Customer" "A bank customer" {' in out
    assert 'si = component "Sign In" "Signs users in" "Spring MVC"' in out
    assert 'c -> ib.wa "Visits" "HTTPS"' in out
    assert 'ib.wa.si -> es "Sends e-mail using"' in out
    assert 'container ib "Containers" {' in out


def test_json_documents_are_supported(tmp_path: Path) -> None:
    document = {
        "people": [{"key": "u", "name": "User", "description": "A user"}],
        "relationships": [{"source": "u", "target": "x", "description": "Uses"}],
    }
    path = tmp_path / "workspace.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    out = load_workspace(path).serialize()
    assert 'u -> x "Uses"' in out


def test_top_level_declarations_by_key_and_name() -> None:
    builder = loads_workspace(
        textwrap.dedent(
            """\
            [[systems]]
            key = "api"
            name = "API"
            description = "Backend"

            [[containers]]
            key = "worker"
            parent = "api"
            name = "Worker"
            description = "Jobs"

            [[components]]
            parent = "Worker"
            name = "Queue Reader"
            description = "Reads"
            """
        )
    )
    assert len(builder.container_declarations) == 1
    assert builder.container_declarations[0].parent is builder.systems[0]
    assert builder.component_declarations[0].parent == "Worker"
    assert 'qr = component "Queue Reader" "Reads"' in builder.serialize()


def test_unknown_container_type_becomes_a_label() -> None:
    builder = loads_workspace(
        textwrap.dedent(
            """\
            [[systems]]
            name = "API"
            description = "Backend"

            [[systems.containers]]
            name = "Events"
            description = "Topic"
            type = "Kafka Topic"
            """
        )
    )
    events = builder.systems[0].containers[0]
    assert events.container_type is ContainerType.OTHER
    assert events.type_name == "Kafka Topic"


def test_config_is_passed_to_the_builder() -> None:
    builder = loads_workspace("", config=make_config(indent_width=2))
    assert builder.serialize().splitlines()[1] == "  !identifiers hierarchical"


@parametrize(
    ("text", "message"),
    [
        ("[[people]]\nkey = 'a'\nname = 'A'\ndescription = 'a'\n"
         "[[people]]\nkey = 'a'\nname = 'B'\ndescription = 'b'\n", "duplicate element key 'a'"),
        ("people = [1]\n", "document.people[0] must be a table"),
        ("[[people]]\nname = 'A'\ndescription = 'a'\nlocation = 'mars'\n", "unknown location 'mars'"),
        ("[[relationships]]\ntarget = 'x'\ndescription = 'd'\n", "relationship source must be"),
        ("[[views]]\ntitle = 'T'\n", "needs a type"),
        ("[[views]]\ntype = 'sideways'\n", "unknown view type"),
        ("[[styles.elements]]\nshape = 'box'\n", "element style needs a tag"),
        ("[[styles.elements]]\ntag = 'X'\nsize = 1.5\n", "style size must be"),
        ("[[relationships]]\nsource = 'a'\ntarget = 'b'\ndescription = 'd'\ninteraction = 'telepathy'\n",
         "unknown interaction"),
    ],
)
def test_structural_errors(text: str, message: str) -> None:
    with pytest.raises(WorkspaceDocumentError, match=re.escape(message)):
        loads_workspace(text)


def test_field_errors_come_from_the_factory() -> None:
    with pytest.raises(ElementValidationError, match="name cannot be empty"):
        loads_workspace("[[people]]\ndescription = 'nameless'\n")


def test_parse_errors_carry_the_source(tmp_path: Path) -> None:
    with pytest.raises(WorkspaceDocumentError, match="invalid TOML"):
        parse_document("[people\n")
    with pytest.raises(WorkspaceDocumentError, match="invalid JSON"):
        parse_document("{", json_format=True)
    with pytest.raises(WorkspaceDocumentError, match="top level must be a table"):
        parse_document("[1, 2]", json_format=True)
    path = tmp_path / "broken.toml"
    path.write_text("[people\n", encoding="utf-8")
    with pytest.raises(WorkspaceDocumentError) as excinfo:
        load_workspace(path)
    assert excinfo.value.source == str(path)
    assert str(excinfo.value).startswith(f"{path}: ")


def test_missing_file_raises_oserror(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        load_workspace(tmp_path / "nope.toml")


def test_undecodable_file_is_a_document_error(tmp_path: Path) -> None:
    path = tmp_path / "latin1.toml"
    path.write_bytes(b"\xff\xfe[workspace]\nname = 'X'\n")
    with pytest.raises(WorkspaceDocumentError, match="invalid UTF-8") as excinfo:
        load_workspace(path)
    assert excinfo.value.source == str(path)
