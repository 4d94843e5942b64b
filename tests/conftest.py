"""Test configuration and fixtures for truffula."""

from pathlib import Path
from typing import List, Tuple

import pytest

from truffula.tree_printer.color_cycle import ConsoleColor


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


class RecordingWriter:
    """Line writer that keeps every (text, color) pair it is given."""

    def __init__(self) -> None:
        self.lines: List[Tuple[str, ConsoleColor]] = []

    def write_line(self, text: str, color: ConsoleColor) -> None:
        self.lines.append((text, color))

    @property
    def texts(self) -> List[str]:
        return [text for text, _ in self.lines]

    @property
    def colors(self) -> List[ConsoleColor]:
        return [color for _, color in self.lines]


@pytest.fixture
def recording_writer():
    """A line writer that records lines instead of printing them."""
    return RecordingWriter()


@pytest.fixture
def my_folder(tmp_path) -> Path:
    """Create the sample 'myFolder' hierarchy.

    myFolder/
       .hidden_dir/visible.txt
       .secret
       Apple.txt
       banana.txt
       Documents/
          images/
             Cat.png
             cat.png   (only on case-sensitive filesystems)
             Dog.png
          notes.txt
          README.md
       zebra.txt
    """
    root = tmp_path / "myFolder"
    root.mkdir()
    (root / "Apple.txt").write_text("apple")
    (root / "banana.txt").write_text("banana")
    (root / "zebra.txt").write_text("zebra")
    (root / ".secret").write_text("hidden")
    (root / ".hidden_dir").mkdir()
    (root / ".hidden_dir" / "visible.txt").write_text("not shown without -a")

    documents = root / "Documents"
    documents.mkdir()
    (documents / "notes.txt").write_text("notes")
    (documents / "README.md").write_text("# readme")

    images = documents / "images"
    images.mkdir()
    (images / "Cat.png").write_bytes(b"\x89PNG")
    (images / "Dog.png").write_bytes(b"\x89PNG")
    (images / "cat.png").write_bytes(b"\x89PNG")
    return root


@pytest.fixture
def case_sensitive_fs(tmp_path) -> bool:
    """Whether the temporary filesystem distinguishes names that differ only by case."""
    probe = tmp_path / "CaseProbe"
    probe.touch()
    result = not (tmp_path / "caseprobe").exists()
    probe.unlink()
    return result
