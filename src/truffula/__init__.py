"""Directory tree rendering utilities.

This package renders a directory hierarchy as an indented listing, sorted
case-insensitively at every level and optionally colorized per depth.
"""

from importlib.metadata import PackageNotFoundError, version

from truffula.tree_printer.tree_printer import RenderConfig, TreePrinter, render_tree

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("truffula")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = ["RenderConfig", "TreePrinter", "render_tree", "__version__"]
