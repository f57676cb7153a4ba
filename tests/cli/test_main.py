"""Unit tests for the CLI main module."""

import os
from unittest.mock import patch

import pytest

from treefind.cli.main import format_summary, main
from treefind.cli.signal_handler import signal_handler
from treefind.walker.walker import WalkStats


@pytest.fixture(autouse=True)
def reset_signals():
    signal_handler.reset()
    yield
    signal_handler.reset()


def run_main(*argv):
    """Run main() with argv; return the exit code (None if main returned normally)."""
    with patch("sys.argv", ["treefind", *argv]), patch("treefind.cli.main.setup_signal_handling"):
        try:
            main()
        except SystemExit as e:
            return e.code
    return None


def test_format_summary():
    assert format_summary(WalkStats(directories=2, files=3, matches=1, errors=4)) == (
        "Directories: 2\nFiles: 3\nMatches: 1\nSkipped: 4"
    )


def test_extension_and_size(sample_tree, capfd):
    assert run_main("-e", ".rs", "-g", "10", str(sample_tree)) is None
    out, err = capfd.readouterr()
    assert out == f"matching file: {sample_tree / 'sub' / 'b.rs'}\n"
    assert err == ""


def test_pattern(sample_tree, capfd):
    run_main("-p", "^b", str(sample_tree))
    assert capfd.readouterr().out == f"matching file: {sample_tree / 'sub' / 'b.rs'}\n"


def test_no_matches_is_success(sample_tree, capfd):
    assert run_main("-d", "0", str(sample_tree)) is None
    assert capfd.readouterr().out == ""


def test_missing_root(tmp_path, capfd):
    missing = tmp_path / "missing"
    assert run_main(str(missing)) == 1
    out, err = capfd.readouterr()
    assert out == ""
    assert err == f"Error: Root path does not exist: {missing}\n"


def test_invalid_pattern(sample_tree, capfd):
    assert run_main("-p", "[a-", str(sample_tree)) == 1
    out, err = capfd.readouterr()
    assert out == ""
    assert err.startswith("Error: Invalid pattern '[a-'")


def test_missing_rules_file(sample_tree, capfd):
    assert run_main("-x", str(sample_tree / "nope.ignore"), str(sample_tree)) == 1
    assert "Rules file not found" in capfd.readouterr().err


def test_ignore_case_without_extension(sample_tree, capfd):
    assert run_main("-I", str(sample_tree)) == 1
    assert "requires -e/--extension" in capfd.readouterr().err


def test_syntax_error_exit_2(capfd):
    assert run_main("-d", "-5", ".") == 2


def test_ignore_pattern(sample_tree, capfd):
    run_main("-i", "sub/", str(sample_tree))
    assert capfd.readouterr().out == f"matching file: {sample_tree / 'a.txt'}\n"


def test_tree_output(sample_tree, capfd):
    run_main("-t", "-e", ".rs", str(sample_tree))
    assert capfd.readouterr().out.splitlines() == [
        f"{sample_tree}/",
        "└── sub/",
        "    ├── b.rs",
        "    └── c.rs",
    ]


def test_summary(sample_tree, capfd):
    run_main("-s", "-e", ".rs", str(sample_tree))
    out, err = capfd.readouterr()
    assert len(out.splitlines()) == 2
    assert err == "Directories: 2\nFiles: 3\nMatches: 2\nSkipped: 0\n"


def test_permission_warn(sample_tree, capfd):
    real_scandir = os.scandir
    denied = str(sample_tree / "sub")

    def fake_scandir(path):
        if os.fspath(path) == denied:
            raise PermissionError(13, "Permission denied", denied)
        return real_scandir(path)

    with patch("treefind.walker.walker.os.scandir", side_effect=fake_scandir):
        assert run_main("-P", "warn", str(sample_tree)) is None
    out, err = capfd.readouterr()
    assert out == f"matching file: {sample_tree / 'a.txt'}\n"
    assert err.startswith(f"Warning: Cannot read {denied}:")


def test_unreadable_root_is_fatal(sample_tree, capfd):
    with patch("treefind.walker.walker.os.scandir", side_effect=PermissionError(13, "Permission denied")):
        # The root itself is unreadable, which is always fatal
        assert run_main(str(sample_tree)) == 1
    assert "Root path is not readable" in capfd.readouterr().err


def test_interrupted_exit_code(sample_tree, capfd):
    signal_handler.sigint_received.set()
    assert run_main(str(sample_tree)) == 130
    assert capfd.readouterr().out == ""


def test_interrupt_stops_walk_without_matches(tmp_path, capfd):
    for i in range(500):
        (tmp_path / f"file{i:03d}.txt").touch()
    signal_handler.sigint_received.set()

    assert run_main("-s", "-p", "nomatch", str(tmp_path)) == 130
    out, err = capfd.readouterr()
    assert out == ""
    assert "Files: 0\n" in err
    assert "Directories: 1\n" in err


def test_second_interrupt_exits_cleanly(sample_tree, capfd):
    with patch("treefind.cli.main.SafeWriter.write_line", side_effect=KeyboardInterrupt):
        assert run_main(str(sample_tree)) == 130
    assert "Traceback" not in capfd.readouterr().err
