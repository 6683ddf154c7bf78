import logging

import pytest

from astar_maze.cli import EXIT_BAD_INPUT, EXIT_SOLVED, EXIT_UNSOLVABLE, main, resolve_level


@pytest.fixture
def maze_file(tmp_path):
    def write(text, name="maze.txt"):
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return str(p)
    return write


def test_prints_solution(maze_file, capsys):
    assert main([maze_file("s #\n   \n# f\n")]) == EXIT_SOLVED
    assert capsys.readouterr().out == "s+#\n ++\n# f\n"


def test_custom_marker(maze_file, capsys):
    assert main([maze_file("s  f\n"), "--marker", "*"]) == EXIT_SOLVED
    assert capsys.readouterr().out == "s**f\n"


def test_unsolvable(maze_file, capsys):
    assert main([maze_file("s#f\n")]) == EXIT_UNSOLVABLE
    assert capsys.readouterr().out == "Unsolvable puzzle\n"


def test_malformed_maze(maze_file, capsys):
    assert main([maze_file("s \n s\n f\n")]) == EXIT_BAD_INPUT
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip() == "Error: more than one start specified on line 2"


@pytest.mark.parametrize("text, message", [
    ("   \n  f\n", "Error: no start location"),
    ("s  \n   \n", "Error: no finish location"),
    ("s x f\n", "Error: unallowed character 'x' on line 1"),
])
def test_malformed_messages(maze_file, capsys, text, message):
    assert main([maze_file(text)]) == EXIT_BAD_INPUT
    assert capsys.readouterr().err.strip() == message


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == EXIT_BAD_INPUT
    assert capsys.readouterr().err.startswith("Error: ")


def test_bad_marker_is_usage_error(maze_file):
    with pytest.raises(SystemExit) as info:
        main([maze_file("sf\n"), "--marker", "#"])
    assert info.value.code == 2


def test_undecodable_maze_is_bad_input(tmp_path, capsys):
    p = tmp_path / "maze.txt"
    p.write_bytes(b"s \xe9f\n")
    assert main([str(p)]) == EXIT_BAD_INPUT
    assert capsys.readouterr().err.strip() == "Error: undecodable byte 0xe9 on line 1"


@pytest.mark.parametrize("name, level", [
    ("debug", logging.DEBUG),
    ("ERROR", logging.ERROR),
    ("ROOT", logging.WARNING),
    ("nonsense", logging.WARNING),
])
def test_resolve_level(name, level):
    assert resolve_level(name) == level
