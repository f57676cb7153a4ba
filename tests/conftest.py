"""Test configuration and fixtures for treefind."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def sample_tree(tmp_path):
    """Create root/{a.txt (5 bytes), sub/{b.rs (20 bytes), c.rs (2 bytes)}}."""
    root = tmp_path / "root"
    (root / "sub").mkdir(parents=True)
    (root / "a.txt").write_bytes(b"x" * 5)
    (root / "sub" / "b.rs").write_bytes(b"x" * 20)
    (root / "sub" / "c.rs").write_bytes(b"x" * 2)
    return root


@pytest.fixture
def deep_tree(tmp_path):
    """Create a chain of directories with one file per level.

    Layout: top/f0.txt, top/d1/f1.txt, top/d1/d2/f2.txt, top/d1/d2/d3/f3.txt
    """
    root = tmp_path / "top"
    current = root
    current.mkdir()
    for level in range(4):
        (current / f"f{level}.txt").write_text(f"level {level}")
        current = current / f"d{level + 1}"
        if level < 3:
            current.mkdir()
    return root
