from __future__ import annotations

"""Process-wide runtime properties, in the manner of JVM system properties.

The registry is consulted before ``JAVA_HOME`` when resolving a Java home, so
``java.home`` set here (by the CLI's ``-D`` option, the configuration file or
directly) wins over the environment. When the interpreter itself runs on a JVM
the host's system properties are visible as well.
"""

import logging
import sys
from typing import Iterable

logger = logging.getLogger(__name__)

JAVA_HOME_PROPERTY = "java.home"

_properties: dict[str, str] = {}


def _jvm_property(name: str) -> str | None:
    if not sys.platform.startswith("java"):
        return None
    from java.lang import System  # type: ignore[import-not-found]

    return System.getProperty(name)


def get_property(name: str) -> str | None:
    """Return the value of ``name`` or ``None`` when it is not defined."""
    value = _properties.get(name)
    if value is None:
        value = _jvm_property(name)
    return value


def set_property(name: str, value: str) -> None:
    if not name:
        raise ValueError("Property name must not be empty")
    logger.debug("Setting property %s=%s", name, value)
    _properties[name] = str(value)


def clear_property(name: str) -> str | None:
    return _properties.pop(name, None)


def properties() -> dict[str, str]:
    return dict(_properties)


def define(definitions: Iterable[str]) -> None:
    """Apply ``key=value`` definitions, as passed to ``-D``."""
    for item in definitions:
        name, sep, value = item.partition("=")
        if not sep:
            raise ValueError(f"Property definition must look like key=value: {item!r}")
        set_property(name.strip(), value.strip())


def load_defaults(config) -> None:
    """Seed properties from ``config.properties`` without overriding set ones."""
    for name, value in config.properties.items():
        if name not in _properties:
            set_property(name, value)


__all__ = [
    "JAVA_HOME_PROPERTY",
    "get_property",
    "set_property",
    "clear_property",
    "properties",
    "define",
    "load_defaults",
]
