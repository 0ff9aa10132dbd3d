"""
AlertFixer core package.
"""

from .version import __version__  # noqa: F401

__all__ = [
    "cli",
    "config",
    "errors",
    "migration",
    "__version__",
]
