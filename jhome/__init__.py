from __future__ import annotations

"""Package metadata."""

from importlib.metadata import PackageNotFoundError, version

from jhome.errors import JhomeError, MissingJavacError, UnresolvedHomeError
from jhome.home import Jhome

try:
    __version__ = version("jhome")
except PackageNotFoundError:  # pragma: no cover - package not installed
    __version__ = "0.1.0"

__all__ = [
    "__version__",
    "Jhome",
    "JhomeError",
    "MissingJavacError",
    "UnresolvedHomeError",
]
