from abc import ABC, abstractmethod
from typing import Sequence, Union

from truffula.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class for rules that remove entries from the rendered tree.

    An excluded directory is removed together with everything beneath it. The tree
    printer passes paths relative to the render root, using forward slashes, with a
    trailing slash for directories.

    Example:
        >>> class NoLogs(BaseExclusionRules):
        ...     def exclude(self, path: str) -> bool:
        ...         return path.endswith('.log')
        >>> NoLogs().exclude('logs/app.log')
        True
        >>> NoLogs().add_rule('*.tmp')
        Traceback (most recent call last):
            ...
        NotImplementedError: NoLogs doesn't support adding individual rules.
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded.

        Args:
            path (str): Path relative to the render root, e.g. "docs/notes.txt" or "build/".

        Returns:
            bool: True if the path should be excluded, False if it should be shown.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load exclusion rules from one or more files.

        Args:
            rules_files: Path to a file or sequence of paths containing exclusion rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
            FileNotFoundError: If any rules file does not exist (for file-supporting rule types).
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule.

        Args:
            rule (str): The rule to add, in the format of the concrete rule type.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
