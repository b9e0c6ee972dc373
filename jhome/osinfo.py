from __future__ import annotations

import platform


def os_name() -> str:
    return platform.system()


def is_windows() -> bool:
    return "windows" in os_name().lower()


def exe_suffix() -> str:
    """Return the executable suffix of the host, ``.exe`` on Windows."""
    return ".exe" if is_windows() else ""


__all__ = ["os_name", "is_windows", "exe_suffix"]
