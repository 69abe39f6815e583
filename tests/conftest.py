"""Test configuration and fixtures for ignoretree."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def project_tree(tmp_path):
    """Root with a .gitignore hiding *.log, and a subdirectory with an empty one."""
    (tmp_path / ".gitignore").write_text("*.log\n")
    (tmp_path / "a.txt").touch()
    (tmp_path / "b.log").touch()
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / ".gitignore").write_text("")
    (tmp_path / "sub" / "c.log").touch()
    return tmp_path
