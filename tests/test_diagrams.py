from uml_explorer.codegen.core.model import (
    CONSTRUCTOR_RETURN_TYPE,
    ClassKind,
    MethodKind,
    Multiplicity,
    Project,
    RelationshipType,
    make_class,
    make_field,
    make_method,
    make_param,
    make_relationship,
)
from uml_explorer.codegen.core.naming import to_math_italic
from uml_explorer.codegen.diagrams import (
    AsciiUmlGenerator,
    MermaidGenerator,
    generate_ascii_uml,
    generate_mermaid,
)
from uml_explorer.codegen.diagrams.ascii import class_box


def _two_classes(rel_type, multiplicity=Multiplicity.NONE):
    a = make_class(id="a", name="A")
    b = make_class(id="b", name="B")
    rel = make_relationship("a", "b", type=rel_type, to_multiplicity=multiplicity)
    return Project(classes=[a, b], relationships=[rel])


# Mermaid


def test_mermaid_empty_project_is_placeholder():
    text = generate_mermaid(Project())
    assert text == "classDiagram\nclass StartHere {\n  +AddClasses(): void\n}"


def test_mermaid_class_block(zoo_project):
    text = generate_mermaid(zoo_project)
    lines = text.splitlines()

    assert lines[0] == "classDiagram"
    assert lines[1:6] == [
        "class Animal {",
        "  <<abstract>>",
        "  #name: String",
        "  +speak(): String",
        "}",
    ]
    assert "class Pet {\n  <<interface>>\n  -play(minutes: int): boolean\n}" in text
    assert "  +Dog(name: String)" in lines
    assert "  +fetch(arg: String): void" in lines


def test_mermaid_relationships(zoo_project):
    lines = generate_mermaid(zoo_project).splitlines()

    assert "Animal <|-- Dog" in lines
    assert "Pet <|.. Dog" in lines
    # The aggregation points at a missing class
    assert not any("o--" in line for line in lines)


def test_mermaid_composition_with_multiplicity():
    text = generate_mermaid(_two_classes(RelationshipType.COMPOSITION, Multiplicity.MANY))
    assert text.endswith('A *-- "*" B')


def test_mermaid_aggregation_without_multiplicity():
    text = generate_mermaid(_two_classes(RelationshipType.AGGREGATION))
    assert text.endswith("A o-- B")


def test_mermaid_generic_and_empty_names():
    box = make_class(
        name="Box",
        generic_param="T",
        fields=[make_field(name="", type="")],
        methods=[make_method(return_type=CONSTRUCTOR_RETURN_TYPE)],
    )
    text = generate_mermaid(Project(classes=[box, make_class(name="  ")]))

    assert "class Box~T~ {" in text
    assert "  -unnamed: String" in text
    assert "  +Box~T~()" in text
    assert "class Unnamed {" in text


def test_mermaid_concrete_class_has_no_stereotype():
    text = generate_mermaid(Project(classes=[make_class(name="Plain")]))
    assert text == "classDiagram\nclass Plain {\n}"


def test_mermaid_generator_output_name(zoo_project):
    files = MermaidGenerator().generate(zoo_project)
    assert list(files) == ["diagram.mmd"]


# Plain text


def test_ascii_box_layout(foo_project):
    text = generate_ascii_uml(foo_project())
    assert text.splitlines() == [
        "|--------------|",
        "|     Foo      |",
        "--------------",
        "| -x: int      |",
        "--------------",
        "| (no methods) |",
        "|--------------|",
    ]


def test_ascii_width_follows_longest_line():
    cls = make_class(
        name="Calc",
        methods=[
            make_method(
                name="compute",
                return_type="double",
                params=[make_param(name="a", type="int")],
            )
        ],
        fields=[make_field(name="memory", type="double")],
    )
    longest = "+compute(a: int): double"
    lines = class_box(cls).splitlines()

    assert lines[0] == "|" + "-" * (len(longest) + 2) + "|"
    rows = [line for line in lines if line.startswith("| ")]
    assert all(len(row) == len(longest) + 4 for row in rows)
    assert f"| {longest} |" in rows
    assert "| -memory: double" + " " * 9 + " |" in rows


def test_ascii_title_centered_left_biased():
    lines = class_box(make_class(name="Abcd")).splitlines()
    # 12 - 4 = 8 spaces of padding, split evenly
    assert lines[1] == "|     Abcd     |"
    lines = class_box(make_class(name="Abc")).splitlines()
    assert lines[1] == "|     Abc      |"


def test_ascii_empty_project_is_placeholder_box():
    text = generate_ascii_uml(Project())
    assert text == class_box(make_class(name="StartHere"))
    assert "|  StartHere   |" in text.splitlines()
    assert "| (no variables) |" in text.splitlines()


def test_ascii_interface_and_abstract_titles(zoo_project):
    text = generate_ascii_uml(zoo_project)

    assert "«interface» Pet" in text
    assert to_math_italic("Animal") in text
    assert f"+{to_math_italic('speak')}(): String" in text
    assert f"-{to_math_italic('play')}(minutes: int): boolean" in text
    assert "+Dog(name: String)" in text
    assert "+fetch(arg: String): void" in text


def test_ascii_abstract_constructor_is_italic():
    shape = make_class(
        name="Shape",
        kind=ClassKind.ABSTRACT,
        methods=[make_method(name="x", return_type=CONSTRUCTOR_RETURN_TYPE)],
    )
    assert f"+{to_math_italic('Shape')}()" in class_box(shape)


def test_ascii_relationships_section(zoo_project):
    text = generate_ascii_uml(zoo_project)
    tail = text.split("\n\n")[-1]

    assert tail == "Relationships:\n- Dog --|> Animal\n- Dog ..|> Pet"


def test_ascii_relationship_multiplicity_in_parentheses():
    text = generate_ascii_uml(_two_classes(RelationshipType.AGGREGATION, Multiplicity.ONE))
    assert text.endswith("- A o-- (1) B")


def test_ascii_without_resolved_relationships_has_no_heading():
    project = _two_classes(RelationshipType.EXTENDS)
    project.relationships[0].to_class_id = "gone"
    assert "Relationships:" not in generate_ascii_uml(project)


def test_ascii_generic_names_use_angle_brackets():
    project = _two_classes(RelationshipType.EXTENDS)
    project.classes[1].generic_param = "T"
    text = generate_ascii_uml(project)
    assert "B<T>" in text
    assert text.endswith("- A --|> B<T>")


def test_diagrams_are_idempotent(zoo_project):
    assert generate_mermaid(zoo_project) == generate_mermaid(zoo_project)
    assert generate_ascii_uml(zoo_project) == generate_ascii_uml(zoo_project)


def test_constructor_name_field_is_never_rendered(zoo_project):
    assert "ignored" not in generate_mermaid(zoo_project)
    assert "ignored" not in generate_ascii_uml(zoo_project)


def test_abstract_method_in_concrete_class_is_italic():
    cls = make_class(name="C", methods=[make_method(name="run", kind=MethodKind.ABSTRACT)])
    assert to_math_italic("run") in class_box(cls)


def test_ascii_generator_output_name(foo_project):
    files = AsciiUmlGenerator().generate(foo_project())
    assert list(files) == ["diagram.txt"]


def test_ascii_italic_title_width_counts_code_points():
    name = "AbstractShapeBase"
    box = class_box(make_class(name=name, kind=ClassKind.ABSTRACT)).splitlines()

    assert box[0] == "|" + "-" * (len(name) + 2) + "|"
    assert box[1] == f"| {to_math_italic(name)} |"
