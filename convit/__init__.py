"""Conventional commit message writer with optional AI generation."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("convit")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
