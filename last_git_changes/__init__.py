"""List the files changed by the latest git commit."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("last-git-changes")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
