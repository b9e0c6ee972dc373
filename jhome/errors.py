from __future__ import annotations

"""Exceptions raised while locating a Java installation."""

from pathlib import Path


class JhomeError(RuntimeError):
    """Base class for jhome failures."""


class UnresolvedHomeError(JhomeError):
    """Raised when no source names a Java home directory."""


class MissingJavacError(JhomeError):
    """Raised when the home directory has no ``javac`` binary."""

    def __init__(self, home: Path, binary: Path) -> None:
        self.home = home
        self.binary = binary
        super().__init__(
            f"javac binary file doesn't exist in the home folder '{home}', "
            "probably JAVA_HOME points to a JRE or an incomplete JDK"
        )


__all__ = ["JhomeError", "UnresolvedHomeError", "MissingJavacError"]
