"""Top-level package for medoc-check.

Classifies scheduled M.E.Doc update runs from the application's own logs.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("medoc-check")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"
