"""Test configuration and fixtures for lstree."""

import os

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


def create_layout(root, layout):
    """Create files and directories under root from a nested dict.

    Dict values create directories; string values create files with that content.
    """
    for name, value in layout.items():
        path = root / name
        if isinstance(value, dict):
            path.mkdir()
            create_layout(path, value)
        else:
            path.write_text(value)
    return root


@pytest.fixture
def make_layout(tmp_path):
    """Build a directory layout inside tmp_path and return the root."""

    def _make(layout):
        return create_layout(tmp_path, layout)

    return _make


@pytest.fixture
def can_symlink(tmp_path):
    """Skip the test where symlink creation is not permitted."""
    link = tmp_path / ".symlink_check"
    try:
        os.symlink(tmp_path, link)
    except (OSError, NotImplementedError):
        pytest.skip("Symlink creation not supported on this platform/environment")
    link.unlink()
    return True
