"""Helpers for normalising path separators."""

from __future__ import annotations

import os
from enum import Enum


class PathStyle(Enum):
    """Path conventions a string may follow."""

    NATIVE = "native"
    POSIX = "posix"
    WINDOWS_SLASH = "windows_slash"
    WINDOWS_BACKSLASH = "windows_backslash"


def _resolve(style: PathStyle) -> PathStyle:
    if style is PathStyle.NATIVE:
        return PathStyle.WINDOWS_BACKSLASH if os.name == "nt" else PathStyle.POSIX
    return style


def _is_posix(style: PathStyle) -> bool:
    return _resolve(style) is PathStyle.POSIX


def _is_separator(ch: str, style: PathStyle) -> bool:
    if ch == "/":
        return True
    return ch == "\\" and not _is_posix(style)


def convert_to_slash(path: str, style: PathStyle = PathStyle.NATIVE) -> str:
    """Replace backslashes with slashes unless ``style`` is POSIX.

    On POSIX backslashes are ordinary path characters and are kept.
    """
    if _is_posix(style):
        return path
    return path.replace("\\", "/")


def make_dirsy(path: str, style: PathStyle = PathStyle.NATIVE) -> str:
    """Return ``path`` with a trailing separator if it lacks one."""
    if path and _is_separator(path[-1], style):
        return path
    if _resolve(style) is PathStyle.WINDOWS_BACKSLASH:
        return path + "\\"
    return path + "/"