import pytest

from ignoretree.patterns.pattern_file import PATTERN_FILE_NAME, parse_pattern_lines, read_pattern_file


def test_pattern_file_name():
    assert PATTERN_FILE_NAME == ".gitignore"


def test_parse_pattern_lines_strips_blank_and_comment_lines():
    assert parse_pattern_lines(["*.log", "", "# comment", "build"]) == ["*.log", "build"]


def test_parse_pattern_lines_trims_whitespace():
    lines = ["  *.tmp  \n", "\t# indented comment\n", "   \n", "dist\r\n"]
    assert parse_pattern_lines(lines) == ["*.tmp", "dist"]


def test_parse_pattern_lines_keeps_order_and_duplicates():
    assert parse_pattern_lines(["b", "a", "b"]) == ["b", "a", "b"]


def test_parse_pattern_lines_keeps_gitignore_syntax_verbatim():
    # No negation or directory semantics: these are just patterns
    assert parse_pattern_lines(["!keep.log", "node_modules/", "**/cache"]) == [
        "!keep.log",
        "node_modules/",
        "**/cache",
    ]


def test_read_pattern_file(tmp_path):
    pattern_file = tmp_path / ".gitignore"
    pattern_file.write_text("*.log\n\n# comment\nbuild\n")
    assert read_pattern_file(pattern_file) == ["*.log", "build"]


def test_read_pattern_file_empty(tmp_path):
    pattern_file = tmp_path / ".gitignore"
    pattern_file.write_text("")
    assert read_pattern_file(pattern_file) == []


def test_read_pattern_file_missing_is_empty(tmp_path):
    assert read_pattern_file(tmp_path / ".gitignore") == []


def test_read_pattern_file_directory_raises(tmp_path):
    (tmp_path / ".gitignore").mkdir()
    with pytest.raises(OSError):
        read_pattern_file(tmp_path / ".gitignore")


def test_read_pattern_file_with_non_utf8_bytes(tmp_path):
    pattern_file = tmp_path / ".gitignore"
    pattern_file.write_bytes(b"# caf\xe9\n*.log\ncaf\xe9.txt\n")

    patterns = read_pattern_file(pattern_file)

    assert patterns == ["*.log", "caf\udce9.txt"]
