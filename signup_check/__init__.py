"""End-to-end checks for the account sign-up form."""

from importlib import metadata

try:
    __version__ = metadata.version("signup-check")
except metadata.PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = ["__version__"]
