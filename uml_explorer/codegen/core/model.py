"""
Core design model for code generation.

Holds the class-design value types (classes, members, relationships)
that every generator reads, plus the factories that give new entities
their default values.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from enum import Enum


# Reserved return type marking a method as a constructor.
CONSTRUCTOR_RETURN_TYPE = "__constructor__"

# Reserved type-chooser value meaning "free text type".
CUSTOM_TYPE = "__custom__"


class ModelError(Exception):
    """Exception raised for malformed project descriptions."""

    pass


class Language(Enum):
    """Target languages for source skeletons."""

    JAVA = "java"
    C = "c"


class Visibility(Enum):
    """Member visibility."""

    PRIVATE = "private"
    PUBLIC = "public"
    PROTECTED = "protected"


class ClassKind(Enum):
    """Kinds of class declarations."""

    CONCRETE = "class"
    ABSTRACT = "abstract_class"
    INTERFACE = "interface"


class MethodKind(Enum):
    """Concrete or abstract method."""

    CONCRETE = "concrete"
    ABSTRACT = "abstract"


class RelationshipType(Enum):
    """Supported relationships between classes."""

    EXTENDS = "extends"
    IMPLEMENTS = "implements"
    AGGREGATION = "aggregation"
    COMPOSITION = "composition"


class Multiplicity(Enum):
    """Multiplicity on the target side of a relationship."""

    NONE = ""
    ONE = "1"
    MANY = "*"


# Defaults given to newly created entities
DEFAULT_LANGUAGE = Language.JAVA
DEFAULT_FIELD_VISIBILITY = Visibility.PRIVATE
DEFAULT_FIELD_TYPE = "String"
DEFAULT_C_FIELD_TYPE = "char*"
DEFAULT_METHOD_VISIBILITY = Visibility.PUBLIC
DEFAULT_METHOD_KIND = MethodKind.CONCRETE
DEFAULT_METHOD_RETURN_TYPE = "void"
DEFAULT_PARAM_TYPE = "String"
DEFAULT_RELATIONSHIP_TYPE = RelationshipType.EXTENDS


def new_id() -> str:
    """Generate a fresh entity key."""
    return uuid.uuid4().hex


@dataclass
class Param:
    """A method parameter."""

    id: str
    name: str = ""
    type: str = DEFAULT_PARAM_TYPE


@dataclass
class Field:
    """A class attribute."""

    id: str
    name: str = ""
    visibility: Visibility = DEFAULT_FIELD_VISIBILITY
    type: str = DEFAULT_FIELD_TYPE


@dataclass
class Method:
    """A class operation.

    When ``return_type`` equals ``CONSTRUCTOR_RETURN_TYPE`` the method is a
    constructor: generators use the enclosing class name and ignore
    ``name`` and ``kind``.
    """

    id: str
    name: str = ""
    visibility: Visibility = DEFAULT_METHOD_VISIBILITY
    kind: MethodKind = DEFAULT_METHOD_KIND
    return_type: str = DEFAULT_METHOD_RETURN_TYPE
    params: List[Param] = field(default_factory=list)

    @property
    def is_constructor(self) -> bool:
        """Whether this method carries the constructor sentinel."""
        return self.return_type.strip() == CONSTRUCTOR_RETURN_TYPE


@dataclass
class ClassDef:
    """A class, abstract class or interface."""

    id: str
    name: str = ""
    kind: ClassKind = ClassKind.CONCRETE
    generic_param: Optional[str] = None
    fields: List[Field] = field(default_factory=list)
    methods: List[Method] = field(default_factory=list)

    @property
    def is_interface(self) -> bool:
        return self.kind == ClassKind.INTERFACE

    @property
    def is_abstract(self) -> bool:
        return self.kind == ClassKind.ABSTRACT


@dataclass
class Relationship:
    """A relationship between two classes, referenced by key.

    The keys are weak references: when either one does not name a class in
    the project the relationship is skipped by every generator.
    """

    id: str
    type: RelationshipType
    from_class_id: str
    to_class_id: str
    to_multiplicity: Multiplicity = Multiplicity.NONE


@dataclass
class Project:
    """Root of the design model."""

    language: Language = DEFAULT_LANGUAGE
    classes: List[ClassDef] = field(default_factory=list)
    relationships: List[Relationship] = field(default_factory=list)

    def find_class(self, class_id: str) -> Optional[ClassDef]:
        """Resolve a class key, returning None when it no longer exists."""
        for cls in self.classes:
            if cls.id == class_id:
                return cls
        return None

    def resolve(self, relationship: Relationship):
        """
        Resolve both ends of a relationship.

        Returns:
            Tuple of (from_class, to_class), or None if either end dangles
        """
        source = self.find_class(relationship.from_class_id)
        target = self.find_class(relationship.to_class_id)
        if source is None or target is None:
            return None
        return source, target

    def unresolved_relationships(self) -> List[Relationship]:
        """Relationships whose keys do not resolve."""
        return [r for r in self.relationships if self.resolve(r) is None]


# Factories


def make_param(**overrides) -> Param:
    """Create a parameter with default values."""
    return Param(id=overrides.pop("id", None) or new_id(), **overrides)


def make_field(language: Optional[Language] = None, **overrides) -> Field:
    """
    Create a field with default values.

    Args:
        language: Target language of the project, used to pick the default type
        **overrides: Attribute values to set instead of the defaults

    Returns:
        New Field
    """
    if "type" not in overrides:
        overrides["type"] = (
            DEFAULT_C_FIELD_TYPE if language == Language.C else DEFAULT_FIELD_TYPE
        )
    return Field(id=overrides.pop("id", None) or new_id(), **overrides)


def make_method(**overrides) -> Method:
    """Create a method with default values.

    Constructors are always concrete, whatever kind was requested.
    """
    method = Method(id=overrides.pop("id", None) or new_id(), **overrides)
    if method.is_constructor:
        method.kind = MethodKind.CONCRETE
    return method


def make_class(**overrides) -> ClassDef:
    """Create a class with default values."""
    return ClassDef(id=overrides.pop("id", None) or new_id(), **overrides)


def make_relationship(
    from_class_id: str, to_class_id: str, **overrides
) -> Relationship:
    """Create a relationship between two class keys."""
    overrides.setdefault("type", DEFAULT_RELATIONSHIP_TYPE)
    return Relationship(
        id=overrides.pop("id", None) or new_id(),
        from_class_id=from_class_id,
        to_class_id=to_class_id,
        **overrides,
    )


def make_project(language: Language = DEFAULT_LANGUAGE) -> Project:
    """Create an empty project."""
    return Project(language=language)


# Conversion from JSON-like descriptions


def _enum_value(enum_cls, value: Any, default, context: str):
    if value is None:
        return default
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        valid = ", ".join(repr(m.value) for m in enum_cls)
        raise ModelError(f"Invalid {context}: {value!r} (expected one of {valid})")


def _text(data: Dict[str, Any], key: str, default: str = "") -> str:
    value = data.get(key, default)
    if value is None:
        return default
    return str(value)


def _object(value: Any, context: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise ModelError(f"Each {context} must be a JSON object")
    return value


def _generic_param(data: Dict[str, Any]) -> Optional[str]:
    value = data.get("genericParam")
    if value is not None and not isinstance(value, str):
        raise ModelError(f"Invalid generic parameter: {value!r} (expected a string)")
    return value or None


def project_from_dict(data: Dict[str, Any]) -> Project:
    """
    Convert a project description to a Project.

    The description uses the editor's camelCase keys. Missing ids are
    generated, missing values take the factory defaults.

    Args:
        data: Parsed JSON object

    Returns:
        Project

    Raises:
        ModelError: If the description or one of its entries is not an
            object, or holds an unknown enum value or a non-string generic
            parameter
    """
    if not isinstance(data, dict):
        raise ModelError("Project description must be a JSON object")

    language = _enum_value(
        Language,
        data.get("language", data.get("targetLanguage")),
        DEFAULT_LANGUAGE,
        "language",
    )
    project = Project(language=language)

    for class_data in data.get("classes") or []:
        project.classes.append(_class_from_dict(_object(class_data, "class"), language))

    for rel_data in data.get("relationships") or []:
        rel_data = _object(rel_data, "relationship")
        project.relationships.append(
            make_relationship(
                _text(rel_data, "fromClassId"),
                _text(rel_data, "toClassId"),
                id=rel_data.get("id"),
                type=_enum_value(
                    RelationshipType,
                    rel_data.get("type"),
                    DEFAULT_RELATIONSHIP_TYPE,
                    "relationship type",
                ),
                to_multiplicity=_enum_value(
                    Multiplicity,
                    rel_data.get("toMultiplicity"),
                    Multiplicity.NONE,
                    "multiplicity",
                ),
            )
        )

    return project


def _class_from_dict(data: Dict[str, Any], language: Language) -> ClassDef:
    cls = make_class(
        id=data.get("id"),
        name=_text(data, "name"),
        kind=_enum_value(ClassKind, data.get("kind"), ClassKind.CONCRETE, "class kind"),
        generic_param=_generic_param(data),
    )

    for field_data in data.get("fields") or []:
        field_data = _object(field_data, "field")
        cls.fields.append(
            make_field(
                language,
                id=field_data.get("id"),
                name=_text(field_data, "name"),
                visibility=_enum_value(
                    Visibility,
                    field_data.get("visibility"),
                    DEFAULT_FIELD_VISIBILITY,
                    "visibility",
                ),
                **({"type": _text(field_data, "type")} if "type" in field_data else {}),
            )
        )

    for method_data in data.get("methods") or []:
        method_data = _object(method_data, "method")
        params = []
        for param_data in method_data.get("params") or []:
            param_data = _object(param_data, "param")
            params.append(
                make_param(
                    id=param_data.get("id"),
                    name=_text(param_data, "name"),
                    type=_text(param_data, "type", DEFAULT_PARAM_TYPE),
                )
            )
        cls.methods.append(
            make_method(
                id=method_data.get("id"),
                name=_text(method_data, "name"),
                visibility=_enum_value(
                    Visibility,
                    method_data.get("visibility"),
                    DEFAULT_METHOD_VISIBILITY,
                    "visibility",
                ),
                kind=_enum_value(
                    MethodKind, method_data.get("kind"), DEFAULT_METHOD_KIND, "method kind"
                ),
                return_type=_text(method_data, "returnType", DEFAULT_METHOD_RETURN_TYPE),
                params=params,
            )
        )

    return cls
