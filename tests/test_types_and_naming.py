import string

import pytest

from uml_explorer.codegen.core.model import (
    CUSTOM_TYPE,
    Language,
    Project,
    Visibility,
    make_class,
    make_field,
    make_method,
    make_param,
)
from uml_explorer.codegen.core.naming import (
    display_name,
    sanitize_diagram_id,
    sanitize_identifier,
    to_math_italic,
    visibility_keyword,
    visibility_symbol,
)
from uml_explorer.codegen.core.types import (
    core_types,
    default_return_value,
    map_return_type,
    map_type,
    needs_boolean_include,
    type_choice,
)


@pytest.mark.parametrize(
    "language, raw, expected",
    [
        (Language.JAVA, "int", "int"),
        (Language.JAVA, "  Map<String, Integer> ", "Map<String, Integer>"),
        (Language.JAVA, "", "String"),
        (Language.JAVA, "boolean", "boolean"),
        (Language.C, "String", "char*"),
        (Language.C, "", "char*"),
        (Language.C, "boolean", "bool"),
        (Language.C, "Boolean", "bool"),
        (Language.C, "bool", "bool"),
        (Language.C, "double", "double"),
        (Language.C, "Point", "Point"),
    ],
)
def test_map_type(language, raw, expected):
    assert map_type(language, raw) == expected


def test_map_return_type_defaults_to_void():
    assert map_return_type(Language.JAVA, "") == "void"
    assert map_return_type(Language.C, "   ") == "void"
    assert map_return_type(Language.C, "String") == "char*"


def test_default_return_values():
    assert default_return_value("void") is None
    assert default_return_value("bool") == "false"
    assert default_return_value("char*") == "NULL"
    assert default_return_value("Point*") == "NULL"
    assert default_return_value("int") == "0"
    assert default_return_value("double") == "0"


def test_needs_boolean_include_checks_every_type_position():
    plain = make_class(fields=[make_field(type="int")])
    assert not needs_boolean_include(Project(Language.C, [plain]))

    via_field = make_class(fields=[make_field(type="boolean")])
    via_return = make_class(methods=[make_method(return_type="Boolean")])
    via_param = make_class(
        methods=[make_method(params=[make_param(type="bool")])]
    )
    for cls in (via_field, via_return, via_param):
        assert needs_boolean_include(Project(Language.C, [cls]))


def test_type_choice():
    assert type_choice(Language.JAVA, "int") == "int"
    assert type_choice(Language.JAVA, "") == ""
    assert type_choice(Language.JAVA, "Point") == CUSTOM_TYPE
    assert type_choice(Language.C, "char*") == "char*"
    assert type_choice(Language.C, "void") == CUSTOM_TYPE
    assert type_choice(Language.C, "void", include_void=True) == "void"
    assert core_types(Language.JAVA, include_void=True)[0].value == "void"


def test_sanitize_identifier():
    assert sanitize_identifier("get value!") == "get_value_"
    assert sanitize_identifier("  ok_1  ") == "ok_1"
    assert sanitize_identifier("") == "unnamed"
    assert sanitize_identifier("   ", "Unnamed") == "Unnamed"
    assert sanitize_identifier("Box<T>") == "Box_T_"


def test_sanitize_diagram_id_keeps_tilde():
    assert sanitize_diagram_id("Box~T~") == "Box~T~"
    assert sanitize_diagram_id("my class") == "my_class"
    assert sanitize_diagram_id("") == "Unnamed"


def test_visibility_mapping_is_a_bijection():
    symbols = {v: visibility_symbol(v) for v in Visibility}
    assert symbols == {
        Visibility.PRIVATE: "-",
        Visibility.PUBLIC: "+",
        Visibility.PROTECTED: "#",
    }
    assert len(set(symbols.values())) == 3
    assert visibility_keyword(Visibility.PROTECTED) == "protected"


def test_math_italic_maps_each_letter():
    upper = to_math_italic(string.ascii_uppercase)
    lower = to_math_italic(string.ascii_lowercase)

    assert [ord(c) for c in upper] == list(range(0x1D434, 0x1D434 + 26))
    assert [ord(c) for c in lower] == list(range(0x1D44E, 0x1D44E + 26))
    assert len(set(upper + lower)) == 52


def test_math_italic_leaves_other_characters():
    text = "0_9 <T>, é😀"
    assert to_math_italic(text) == text
    mixed = to_math_italic("a😀b")
    assert len(mixed) == 3
    assert mixed[1] == "😀"


def test_display_name():
    assert display_name(make_class(name="Box", generic_param=" T ")) == "Box<T>"
    assert display_name(make_class(name="", generic_param="")) == "Unnamed"
