"""Exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import GitIgnoreSpec

from truffula.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules matched the way Git matches .gitignore patterns.

    Patterns support globs, directory patterns ending in /, negation with !,
    ** matching and # comments. Patterns from files and individual rules are
    combined in the order they are added, so a later negation can re-include a
    path excluded by an earlier pattern.

    Attributes:
        spec (GitIgnoreSpec): Compiled pattern matcher from the pathspec library,
            rebuilt whenever patterns are added.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("*.pyc")
        >>> rules.add_rule("build/")
        >>> rules.exclude("src/main.pyc")
        True
        >>> rules.exclude("build/")
        True
        >>> rules.exclude("src/main.py")
        False
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize the rules, optionally loading patterns from files.

        Args:
            rules_files: Path(s) to .gitignore-style files to load.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._lines: List[str] = []
        self.spec = GitIgnoreSpec.from_lines(self._lines)

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        """Check a path against the loaded patterns.

        Args:
            path: Path relative to the render root, with a trailing slash for directories.

        Returns:
            bool: True if the last matching pattern excludes the path.
        """
        return bool(self.spec.match_file(path))

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the patterns from one or more .gitignore-style files.

        Args:
            rules_files: Path or sequence of paths to pattern files.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                lines = f.read().splitlines()

            self._lines.extend(lines)
            self._compile()

    def add_rule(self, rule: str) -> None:
        """Append a single .gitignore pattern, e.g. "*.log", "node_modules/" or "!keep.log"."""
        self._lines.append(rule)
        self._compile()

    def _compile(self) -> None:
        # A PathSpec is fixed once built, so new patterns need a new matcher.
        self.spec = GitIgnoreSpec.from_lines(self._lines)
