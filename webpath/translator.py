"""Translate paths from/to ``~/`` web-relative notation."""

from __future__ import annotations

import logging
import os
from types import ModuleType
from typing import Protocol, Union

from .errors import NullReferenceError, require_text
from .handles import DirectoryHandle, FileHandle

WEB_ROOT = "~/"

PathTarget = Union[FileHandle, DirectoryHandle, os.PathLike]


def _collapse(value: str, separator: str) -> str:
    doubled = separator * 2
    while doubled in value:
        value = value.replace(doubled, separator)
    return value


class PathTranslator(Protocol):
    @property
    def root(self) -> str: ...

    def to_file_system_path(self, web_path: str) -> str: ...

    def to_web_relative_path(self, target: PathTarget) -> str: ...

    def get_file(self, web_path: str) -> FileHandle: ...

    def get_directory(self, web_path: str) -> DirectoryHandle: ...


class WebPathTranslator:
    """Maps ``~/`` onto ``root``. The root is stored verbatim and need not exist."""

    def __init__(
        self,
        root: str | os.PathLike[str],
        logger: logging.Logger | None = None,
        *,
        path_module: ModuleType = os.path,
    ) -> None:
        self._root = require_text(root, "root")
        self._logger = logger
        self._path_module = path_module
        self._sep = path_module.sep
        self._trace("Web Root Path: '%s'", self._root)

    @property
    def root(self) -> str:
        return self._root

    @property
    def sep(self) -> str:
        return self._sep

    def to_file_system_path(self, web_path: str) -> str:
        initial = require_text(web_path, "web_path")
        translated = initial
        # Paths without the sentinel are normalized but never rooted.
        if translated.startswith(WEB_ROOT):
            translated = f"{self._root}{self._sep}{translated[len(WEB_ROOT):]}"

        translated = _collapse(translated, "/").replace("/", self._sep)
        translated = _collapse(translated, self._sep)
        self._trace("Web-Path '%s' to '%s'", initial, translated)
        return translated

    def to_web_relative_path(self, target: PathTarget) -> str:
        if target is None:
            raise NullReferenceError("target")
        if isinstance(target, (FileHandle, DirectoryHandle)):
            full_path = target.full_name
        else:
            full_path = self._path_module.abspath(os.fspath(target))
        return self._to_web(full_path)

    def _to_web(self, full_path: str) -> str:
        # First textual occurrence, not a prefix match.
        replaced = full_path.replace(self._root, WEB_ROOT, 1)
        web_path = _collapse(replaced.replace(self._sep, "/"), "/")
        self._trace("Path '%s' to Web-Path '%s'", full_path, web_path)
        return web_path

    def get_file(self, web_path: str) -> FileHandle:
        require_text(web_path, "web_path")
        handle = FileHandle(self.to_file_system_path(web_path), self._path_module)
        if self._logger is not None:
            self._trace("GetFile '%s' return '%s' [Exists: %s]", web_path, handle.full_name, handle.exists)
        return handle

    def get_directory(self, web_path: str) -> DirectoryHandle:
        require_text(web_path, "web_path")
        handle = DirectoryHandle(self.to_file_system_path(web_path), self._path_module)
        if self._logger is not None:
            self._trace("GetDirectory '%s' return '%s' [Exists: %s]", web_path, handle.full_name, handle.exists)
        return handle

    def _trace(self, message: str, *args: object) -> None:
        if self._logger is not None:
            self._logger.debug(message, *args)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(root={self._root!r})"
