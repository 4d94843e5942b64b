"""Integration tests for the command-line interface.

These tests run truffula in a subprocess and cover:
- The documented myFolder example
- Hidden entries and colors
- Exit codes for invalid roots and argument errors
- Broken pipes when output is cut short
"""

import subprocess
import sys

import pytest

# Slow tests, only run when --run-cli-tests is given
pytestmark = pytest.mark.skipif(
    "not config.getoption('--run-cli-tests')", reason="Only run when --run-cli-tests is given"
)


def run_cli(*args, **kwargs):
    return subprocess.run(
        [sys.executable, "-m", "truffula.cli.main", *args],
        capture_output=True,
        text=True,
        **kwargs,
    )


def test_my_folder_example(my_folder, case_sensitive_fs):
    if not case_sensitive_fs:
        pytest.skip("Filesystem does not distinguish Cat.png from cat.png")

    result = run_cli("-n", str(my_folder))

    assert result.returncode == 0
    assert result.stdout.splitlines() == [
        "myFolder/",
        "   Apple.txt",
        "   banana.txt",
        "   Documents/",
        "      images/",
        "         Cat.png",
        "         cat.png",
        "         Dog.png",
        "      notes.txt",
        "      README.md",
        "   zebra.txt",
    ]


def test_colors_and_hidden_entries(my_folder):
    result = run_cli("-a", str(my_folder))

    assert result.returncode == 0
    lines = result.stdout.splitlines()
    assert lines[0] == "\x1b[37mmyFolder/\x1b[0m"
    assert lines[1] == "\x1b[35m   .hidden_dir/\x1b[0m"
    assert lines[2] == "\x1b[33m      visible.txt\x1b[0m"


def test_relative_current_directory(my_folder):
    result = run_cli("-n", ".", cwd=my_folder)

    assert result.returncode == 0
    assert result.stdout.splitlines()[0] == "myFolder/"


def test_invalid_root(tmp_path):
    result = run_cli(str(tmp_path / "missing"))

    assert result.returncode == 1
    assert result.stdout == ""
    assert "Error: Root path does not exist" in result.stderr


def test_argument_error():
    result = run_cli()

    assert result.returncode == 2
    assert "usage: truffula" in result.stderr


def test_version():
    result = run_cli("--version")

    assert result.returncode == 0
    assert result.stdout.startswith("truffula ")


def test_output_file_and_summary(my_folder, tmp_path):
    output = tmp_path / "tree.txt"
    result = run_cli("-n", "-o", str(output), "-s", "stderr", str(my_folder))

    assert result.returncode == 0
    assert result.stdout == ""
    assert output.read_text().startswith("myFolder/\n")
    assert result.stderr.strip().endswith("files")


@pytest.mark.skipif(sys.platform == "win32", reason="SIGPIPE is not available on Windows")
def test_broken_pipe(tmp_path):
    root = tmp_path / "big"
    root.mkdir()
    for i in range(2000):
        (root / f"file_{i:04d}.txt").touch()

    process = subprocess.Popen(
        [sys.executable, "-m", "truffula.cli.main", "-n", str(root)],
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )
    assert process.stdout is not None
    process.stdout.readline()
    process.stdout.close()
    assert process.stderr is not None
    stderr = process.stderr.read()
    process.wait(timeout=30)

    assert process.returncode in (0, 141)
    assert b"Traceback" not in stderr
