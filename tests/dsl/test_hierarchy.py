# topmark:header:start
#
#   project      : C4DSL
#   file         : test_hierarchy.py
#   file_relpath : tests/dsl/test_hierarchy.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for parent declarations: kind checks, cycles and attachment order."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from c4dsl.dsl.errors import (
    CircularHierarchyError,
    DuplicateElementError,
    HierarchyError,
    InvalidParentTypeError,
)
from c4dsl.dsl.hierarchy import HierarchyValidator, ParentDeclaration, resolve_declarations
from c4dsl.dsl.workspace import WorkspaceBuilder
from tests.conftest import parametrize

if TYPE_CHECKING:
    from c4dsl.model import ModelFactory


def test_container_parent_must_be_a_software_system(factory: ModelFactory) -> None:
    user = factory.person(name="User", description="A user")
    worker = factory.container(name="Worker", description="Jobs")
    builder = WorkspaceBuilder().add_person(user).add_container("User", worker)
    with pytest.raises(InvalidParentTypeError) as excinfo:
        builder.serialize()
    err = excinfo.value
    assert (err.child, err.expected, err.actual) == ("Worker", "SoftwareSystem", "Person")
    assert str(err) == "invalid parent type for Worker: expected SoftwareSystem, got Person"


def test_unknown_parent_is_reported_as_unregistered(factory: ModelFactory) -> None:
    worker = factory.container(name="Worker", description="Jobs")
    builder = WorkspaceBuilder().add_container("Nowhere", worker)
    with pytest.raises(InvalidParentTypeError, match="got unregistered"):
        builder.serialize()


def test_component_parent_must_be_a_container(factory: ModelFactory) -> None:
    api = factory.software_system(name="API", description="Backend")
    auth = factory.component(name="Auth", description="Auth")
    builder = WorkspaceBuilder().add_software_system(api).add_component(api, auth)
    with pytest.raises(InvalidParentTypeError) as excinfo:
        builder.serialize()
    assert excinfo.value.expected == "Container"
    assert excinfo.value.actual == "SoftwareSystem"


def test_self_parenting_is_circular(factory: ModelFactory) -> None:
    worker = factory.container(name="Worker", description="Jobs")
    builder = WorkspaceBuilder().add_container(worker, worker)
    with pytest.raises(CircularHierarchyError) as excinfo:
        builder.serialize()
    assert excinfo.value.element == "Worker"
    assert str(excinfo.value) == "circular relationship detected: Worker"


def test_self_parenting_by_name_is_circular(factory: ModelFactory) -> None:
    worker = factory.container(name="Worker", description="Jobs")
    with pytest.raises(CircularHierarchyError):
        WorkspaceBuilder().add_container("Worker", worker).serialize()


def test_errors_share_a_base_class(factory: ModelFactory) -> None:
    worker = factory.container(name="Worker", description="Jobs")
    with pytest.raises(HierarchyError):
        WorkspaceBuilder().add_container("Nowhere", worker).serialize()


def test_container_named_like_its_system_is_not_circular(factory: ModelFactory) -> None:
    system = factory.software_system(name="Billing", description="Bills")
    container = factory.container(name="Billing", description="Service")
    hierarchy = resolve_declarations(
        [], [system], [ParentDeclaration(container, "Billing")], []
    )
    assert hierarchy.containers_of(system) == (container,)


def test_declared_children_follow_owned_children(factory: ModelFactory) -> None:
    owned = factory.container(name="Web App", description="Frontend")
    system = factory.software_system(name="API", description="Backend", containers=[owned])
    declared = factory.container(name="Worker", description="Jobs")
    auth = factory.component(name="Auth", description="Auth")
    hierarchy = resolve_declarations(
        [],
        [system],
        [ParentDeclaration(declared, system.identity)],
        [ParentDeclaration(auth, "Worker")],
    )
    assert hierarchy.containers_of(system) == (owned, declared)
    assert hierarchy.components_of(declared) == (auth,)
    assert hierarchy.components_of(owned) == ()


def test_parent_chain_walks_up_to_the_system(factory: ModelFactory) -> None:
    auth = factory.component(name="Auth", description="Auth")
    web = factory.container(name="Web App", description="Frontend", components=[auth])
    api = factory.software_system(name="API", description="Backend", containers=[web])
    validator = HierarchyValidator()
    validator.register_software_system(api)
    assert [e.name for e in validator.parent_chain(auth)] == ["Web App", "API"]
    assert validator.lookup("Web App") is web
    assert validator.lookup(api.identity) is api
    assert validator.lookup("Missing") is None


def test_nothing_is_written_when_validation_fails(factory: ModelFactory) -> None:
    user = factory.person(name="User", description="A user")
    worker = factory.container(name="Worker", description="Jobs")
    builder = WorkspaceBuilder().add_person(user).add_container(user, worker)
    with pytest.raises(InvalidParentTypeError):
        builder.serialize()
    # The builder is untouched and still serializes once the bad declaration is gone.
    builder.container_declarations.clear()
    assert "u = person" in builder.serialize()


def test_owned_container_cannot_also_be_declared(factory: ModelFactory) -> None:
    web = factory.container(name="Web", description="UI")
    system = factory.software_system(name="API", description="Backend", containers=[web])
    builder = WorkspaceBuilder().add_software_system(system).add_container(system, web)
    with pytest.raises(DuplicateElementError) as excinfo:
        builder.serialize()
    assert (excinfo.value.kind, excinfo.value.element) == ("Container", "Web")
    assert str(excinfo.value) == (
        "duplicate element: Container Web appears more than once in the workspace"
    )


def test_container_declared_twice_is_rejected(factory: ModelFactory) -> None:
    system = factory.software_system(name="API", description="Backend")
    worker = factory.container(name="Worker", description="Jobs")
    builder = (
        WorkspaceBuilder()
        .add_software_system(system)
        .add_container(system, worker)
        .add_container("API", worker)
    )
    with pytest.raises(DuplicateElementError, match="Container Worker"):
        builder.serialize()


@parametrize("kind", ["person", "software_system"])
def test_top_level_element_added_twice_is_rejected(factory: ModelFactory, kind: str) -> None:
    builder = WorkspaceBuilder()
    if kind == "person":
        user = factory.person(name="User", description="A user")
        builder.add_person(user).add_person(user)
    else:
        api = factory.software_system(name="API", description="Backend")
        builder.add_software_system(api).add_software_system(api)
    with pytest.raises(HierarchyError, match="appears more than once"):
        builder.serialize()
