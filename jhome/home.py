from __future__ import annotations

"""Locate ``JAVA_HOME`` and the binaries inside it."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

from jhome import osinfo, properties
from jhome.errors import MissingJavacError, UnresolvedHomeError

logger = logging.getLogger(__name__)

JAVA_HOME_ENV = "JAVA_HOME"

Lookup = Callable[[], Optional[str]]


def first_present(*lookups: Lookup) -> str | None:
    """Return the first non-empty value produced by ``lookups``, in order."""
    for lookup in lookups:
        value = lookup()
        if value:
            return value
    return None


def _from_property() -> str | None:
    value = properties.get_property(properties.JAVA_HOME_PROPERTY)
    if value:
        logger.debug("Java home taken from %s property: %s", properties.JAVA_HOME_PROPERTY, value)
    return value


def _from_environ() -> str | None:
    value = os.getenv(JAVA_HOME_ENV)
    if value:
        logger.debug("Java home taken from %s: %s", JAVA_HOME_ENV, value)
    return value


def resolve_home() -> Path:
    """Find the Java home from the ``java.home`` property or ``JAVA_HOME``."""
    found = first_present(_from_property, _from_environ)
    if found is None:
        raise UnresolvedHomeError(
            f"Neither {properties.JAVA_HOME_PROPERTY} nor {JAVA_HOME_ENV} are set"
        )
    return Path(found)


def _normalize(loc: str) -> str:
    return loc.replace("/", os.sep).replace("\\", os.sep)


@dataclass(frozen=True)
class Jhome:
    """A Java installation rooted at ``home``.

    ``Jhome()`` resolves the home once, at construction. ``Jhome(path)`` (or
    :meth:`at`) uses ``path`` as given, whether or not it exists.
    """

    home: Path = field(default_factory=resolve_home)

    def __post_init__(self) -> None:
        object.__setattr__(self, "home", Path(self.home))

    @classmethod
    def at(cls, home: str | os.PathLike[str]) -> Jhome:
        return cls(Path(home))

    def path(self, *locs: str) -> Path:
        """Resolve ``locs`` (e.g. ``"bin/java"``) against the home, in order."""
        result = self.home
        for loc in locs:
            result = result / _normalize(loc)
        return result

    def java(self) -> Path:
        return self.path("bin/java" + osinfo.exe_suffix())

    def javac(self) -> Path:
        binary = self.javac_path()
        if not self.javac_exists():
            logger.warning("javac is missing under %s", self.home)
            raise MissingJavacError(self.home, binary)
        return binary

    def javac_exists(self) -> bool:
        return self.javac_path().exists()

    def javac_path(self) -> Path:
        """Where javac should be, without looking at the disk."""
        return self.path("bin/javac" + osinfo.exe_suffix())


__all__ = ["Jhome", "JAVA_HOME_ENV", "first_present", "resolve_home"]
