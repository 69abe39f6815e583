"""Unit tests for the CLI entry point."""

import os
import sys
from unittest.mock import patch

import pytest

from ignoretree.cli.main import main
from ignoretree.cli.safe_writer import SafeWriter
from ignoretree.exclusion_rules.pattern_index import PatternIndex
from ignoretree.file_system_tree.tree_renderer import TreeRenderer


@pytest.fixture
def run_main(monkeypatch):
    """Run main() in a directory without touching the test process's signal handlers."""

    def run(cwd, *args):
        monkeypatch.chdir(cwd)
        monkeypatch.setattr(sys, "argv", ["ignoretree", *args])
        with patch("ignoretree.cli.main.setup_signal_handling"):
            main()

    return run


def test_main_prints_tree_of_working_directory(project_tree, run_main, capfd):
    run_main(project_tree)

    out, err = capfd.readouterr()
    assert out == f"{project_tree.name}\n├──.gitignore\n├──a.txt\n├──sub\n   ├──.gitignore\n"
    assert err == ""


def test_main_empty_directory(tmp_path, run_main, capfd):
    run_main(tmp_path)

    assert capfd.readouterr().out == f"{tmp_path.name}\n"


def test_main_index_build_failure(tmp_path, run_main, capfd):
    (tmp_path / "a.txt").touch()
    (tmp_path / ".gitignore").mkdir()

    with pytest.raises(SystemExit) as excinfo:
        run_main(tmp_path)

    out, err = capfd.readouterr()
    assert excinfo.value.code == 1
    assert err.startswith("Error: cannot build ignore pattern index:")
    # Nothing is printed when the index cannot be built
    assert out == ""


def test_main_permission_denied(tmp_path, run_main, capfd):
    with patch.object(PatternIndex, "build", side_effect=PermissionError("Permission denied")):
        with pytest.raises(SystemExit) as excinfo:
            run_main(tmp_path)

    assert excinfo.value.code == 126
    assert "Error: cannot build ignore pattern index: Permission denied" in capfd.readouterr().err


def test_main_working_directory_unavailable(tmp_path, run_main, capfd, monkeypatch):
    # Record the original cwd before os.getcwd is patched; monkeypatch.chdir only queries it once.
    monkeypatch.chdir(tmp_path)
    with patch("ignoretree.cli.main.os.getcwd", side_effect=FileNotFoundError("No such file or directory")):
        with pytest.raises(SystemExit) as excinfo:
            run_main(tmp_path)

    assert excinfo.value.code == 1
    assert "Error: cannot determine current directory" in capfd.readouterr().err


def test_main_render_failure(tmp_path, run_main, capfd):
    with patch.object(TreeRenderer, "stream_tree_representation", side_effect=OSError("device error")):
        with pytest.raises(SystemExit) as excinfo:
            run_main(tmp_path)

    assert excinfo.value.code == 1
    assert "Error: cannot print directory tree: device error" in capfd.readouterr().err


def test_main_broken_pipe_is_quiet(project_tree, run_main, capfd):
    with patch.object(SafeWriter, "write_line", side_effect=BrokenPipeError()):
        run_main(project_tree)

    assert capfd.readouterr().err == ""


@pytest.mark.parametrize("code", [130, 141])
def test_main_exit_code_after_signal(tmp_path, run_main, code):
    with patch("ignoretree.cli.main.signal_handler") as mock_handler:
        mock_handler.exit_code.return_value = code
        with pytest.raises(SystemExit) as excinfo:
            run_main(tmp_path)

    assert excinfo.value.code == code


def test_main_version(tmp_path, run_main, capfd):
    with pytest.raises(SystemExit) as excinfo:
        run_main(tmp_path, "--version")

    assert excinfo.value.code == 0
    assert capfd.readouterr().out.startswith("ignoretree ")


def test_main_rejects_arguments(tmp_path, run_main, capfd):
    with pytest.raises(SystemExit) as excinfo:
        run_main(tmp_path, "some/dir")

    assert excinfo.value.code == 2
    assert "unrecognized arguments" in capfd.readouterr().err


@pytest.mark.skipif(
    sys.platform == "win32" or sys.getfilesystemencoding().lower() != "utf-8",
    reason="needs byte file names decoded with surrogateescape",
)
def test_main_prints_non_utf8_names_as_bytes(tmp_path, run_main, capfdbinary):
    (tmp_path / os.fsdecode(b"caf\xe9.txt")).touch()
    (tmp_path / "z.txt").touch()

    run_main(tmp_path)

    out, err = capfdbinary.readouterr()
    branch = "├──".encode("utf-8")
    assert out == tmp_path.name.encode("utf-8") + b"\n" + branch + b"caf\xe9.txt\n" + branch + b"z.txt\n"
    assert err == b""
