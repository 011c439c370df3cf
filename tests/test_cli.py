import json

import pytest

from uml_explorer.cli import build_parser, main


@pytest.fixture
def project_file(tmp_path, project_description):
    path = tmp_path / "project.json"
    path.write_text(json.dumps(project_description), encoding="utf-8")
    return path


def test_codegen_writes_single_target(tmp_path, project_file):
    out = tmp_path / "out"
    code = main(["codegen", "--language", "mmd", str(project_file), "--output-dir", str(out)])

    assert code == 0
    text = (out / "diagram.mmd").read_text(encoding="utf-8")
    assert text.startswith("classDiagram\nclass Counter {")
    assert 'Counter o-- "1" Log' in text


def test_codegen_all_follows_project_language(tmp_path, project_file):
    out = tmp_path / "out"
    code = main(["codegen", "--all", str(project_file), "-o", str(out)])

    assert code == 0
    assert sorted(p.name for p in out.iterdir()) == [
        "diagram.mmd",
        "diagram.txt",
        "generated.c",
        "generated.h",
    ]


def test_codegen_style_options(tmp_path, project_file):
    out = tmp_path / "out"
    code = main(
        ["codegen", "-l", "c", "--no-comments", "--spaces", "2", str(project_file), "-o", str(out)]
    )

    assert code == 0
    header = (out / "generated.h").read_text(encoding="utf-8")
    assert "  int count;" in header.splitlines()
    assert "/*" not in header


def test_codegen_prints_to_terminal(project_file, capsys):
    code = main(["codegen", "--language", "java", str(project_file)])

    assert code == 0
    assert "Generated.java" in capsys.readouterr().out


def test_codegen_requires_target(project_file):
    assert main(["codegen", str(project_file)]) == 1


def test_codegen_requires_input():
    assert main(["codegen", "--language", "java"]) == 1


def test_codegen_unknown_language(project_file):
    assert main(["codegen", "--language", "cobol", str(project_file)]) == 1


def test_codegen_missing_file(tmp_path):
    assert main(["codegen", "--all", str(tmp_path / "nope.json")]) == 1


@pytest.mark.parametrize(
    "description",
    [
        {"classes": [{"name": "A", "fields": ["x"]}]},
        {"classes": [{"name": "A", "methods": [{"name": "m", "params": ["p"]}]}]},
        {"classes": [{"name": "A", "genericParam": 5}]},
    ],
)
def test_codegen_malformed_project(tmp_path, description):
    path = tmp_path / "broken.json"
    path.write_text(json.dumps(description), encoding="utf-8")
    assert main(["codegen", "-l", "java", str(path)]) == 1


def test_codegen_bad_config(tmp_path, project_file):
    config = tmp_path / "config.json"
    config.write_text("{oops", encoding="utf-8")
    assert main(["codegen", "--all", "--config", str(config), str(project_file)]) == 1


def test_informational_commands(capsys):
    assert main(["codegen", "--list-languages"]) == 0
    assert "mermaid" in capsys.readouterr().out

    assert main(["codegen", "--language-info", "h"]) == 0
    assert "generated.h" in capsys.readouterr().out

    assert main(["codegen", "--language-info", "cobol"]) == 1


def test_no_command_prints_help():
    assert main([]) == 1


def test_language_and_all_are_exclusive(project_file):
    with pytest.raises(SystemExit):
        build_parser().parse_args(["codegen", "--all", "-l", "c", str(project_file)])
