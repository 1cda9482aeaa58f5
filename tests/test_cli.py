import json

from mindnode_parser.cli import main

from conftest import make_doc, make_node


def test_convert_command(collection, tmp_path, capsys):
    collection("learn-anything/physics.json", make_doc("a" * 40, nodes=[make_node("Heat")]))
    out = tmp_path / "out"

    assert main(["convert", str(collection.root), str(out)]) == 0
    assert "Converted 1 documents" in capsys.readouterr().out
    assert json.loads((out / "learn-anything" / "physics.json").read_text())["nodes"]


def test_convert_without_arguments(monkeypatch, capsys):
    monkeypatch.delenv("MINDNODE_INPUT", raising=False)
    monkeypatch.delenv("MINDNODE_OUTPUT", raising=False)

    assert main(["convert"]) == 2
    assert "insufficient arguments" in capsys.readouterr().err


def test_info_command(collection, capsys):
    path = collection("map.json", make_doc("a" * 40, title="Physics", nodes=[
        make_node("\U0001F310 Heat", children=[make_node("\U0001F440 Lecture")]),
    ]))

    main(["info", str(path)])
    out = capsys.readouterr().out
    assert "Title: Physics" in out
    assert "Subnodes: 1" in out
    assert "wiki: 1" in out
    assert "video: 1" in out


def test_tree_command(collection, capsys):
    path = collection("map.json", make_doc("a" * 40, nodes=[
        make_node("Heat", children=[make_node("\U0001F4C4 Paper", children=[make_node("Deep")])]),
    ]))

    main(["tree", str(path), "--depth", "1"])
    assert capsys.readouterr().out.splitlines() == ["Heat", "  Paper [paper]"]


def test_emoji_html_command(capsys):
    main(["emoji-html", "\U0001F419 repo"])
    assert "octocat.png" in capsys.readouterr().out


def test_convert_accepts_flags_after_arguments(collection, tmp_path):
    collection("learn-anything/physics.json", make_doc("a" * 40, nodes=[make_node("Heat")]))
    out = tmp_path / "out"

    assert main(["convert", str(collection.root), str(out), "-v"]) == 0
    assert (out / "learn-anything" / "physics.json").is_file()

    assert main(["convert", str(collection.root), str(out), "--debug", "--root-segment", "x"]) == 0
