"""Shared fixtures for the generator tests."""

import pytest

from uml_explorer.codegen.core.model import (
    CONSTRUCTOR_RETURN_TYPE,
    ClassKind,
    Language,
    MethodKind,
    Multiplicity,
    Project,
    RelationshipType,
    Visibility,
    make_class,
    make_field,
    make_method,
    make_param,
    make_relationship,
)


def _foo_project(language: Language = Language.JAVA) -> Project:
    """One concrete class Foo with a private int field x."""
    foo = make_class(
        id="foo",
        name="Foo",
        fields=[make_field(name="x", type="int", visibility=Visibility.PRIVATE)],
    )
    return Project(language=language, classes=[foo])


@pytest.fixture
def foo_project():
    """Factory building the Foo project for a target language."""
    return _foo_project


@pytest.fixture
def zoo_project() -> Project:
    """Abstract Animal, interface Pet and a Dog that extends and implements them."""
    animal = make_class(
        id="animal",
        name="Animal",
        kind=ClassKind.ABSTRACT,
        fields=[make_field(name="name", type="String", visibility=Visibility.PROTECTED)],
        methods=[
            make_method(name="speak", kind=MethodKind.ABSTRACT, return_type="String"),
        ],
    )
    pet = make_class(
        id="pet",
        name="Pet",
        kind=ClassKind.INTERFACE,
        methods=[
            make_method(
                name="play",
                visibility=Visibility.PRIVATE,
                kind=MethodKind.ABSTRACT,
                return_type="boolean",
                params=[make_param(name="minutes", type="int")],
            ),
        ],
    )
    dog = make_class(
        id="dog",
        name="Dog",
        fields=[make_field(name="tricks", type="int", visibility=Visibility.PRIVATE)],
        methods=[
            make_method(
                name="ignored",
                return_type=CONSTRUCTOR_RETURN_TYPE,
                params=[make_param(name="name", type="String")],
            ),
            make_method(name="fetch", params=[make_param(name="", type="")]),
        ],
    )
    return Project(
        language=Language.JAVA,
        classes=[animal, pet, dog],
        relationships=[
            make_relationship("dog", "animal", type=RelationshipType.EXTENDS),
            make_relationship("dog", "pet", type=RelationshipType.IMPLEMENTS),
            make_relationship(
                "dog",
                "missing",
                type=RelationshipType.AGGREGATION,
                to_multiplicity=Multiplicity.MANY,
            ),
        ],
    )


@pytest.fixture
def project_description() -> dict:
    """JSON-style description of a small C project."""
    return {
        "language": "c",
        "classes": [
            {
                "id": "counter",
                "name": "Counter",
                "kind": "class",
                "fields": [{"name": "count", "visibility": "public", "type": "int"}],
                "methods": [
                    {
                        "name": "increment",
                        "visibility": "public",
                        "kind": "concrete",
                        "returnType": "boolean",
                        "params": [{"name": "by", "type": "int"}],
                    }
                ],
            },
            {"id": "log", "name": "Log", "kind": "interface"},
        ],
        "relationships": [
            {
                "type": "aggregation",
                "fromClassId": "counter",
                "toClassId": "log",
                "toMultiplicity": "1",
            }
        ],
    }
