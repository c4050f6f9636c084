from __future__ import annotations

import ntpath
import os
from dataclasses import dataclass, field
from pathlib import Path, PurePath, PurePosixPath, PureWindowsPath
from types import ModuleType


@dataclass(frozen=True, eq=False)
class _Handle:
    raw_path: str
    path_module: ModuleType = field(default=os.path, repr=False)

    @property
    def full_name(self) -> str:
        return self.path_module.abspath(self.raw_path)

    @property
    def name(self) -> str:
        return self.path_module.basename(self.full_name)

    @property
    def path(self) -> PurePath:
        # Only host-flavoured handles get a concrete Path.
        if self.path_module is os.path:
            return Path(self.full_name)
        if self.path_module is ntpath:
            return PureWindowsPath(self.full_name)
        return PurePosixPath(self.full_name)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.full_name == other.full_name

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.full_name))

    def __fspath__(self) -> str:
        return self.full_name

    def __str__(self) -> str:
        return self.full_name


class FileHandle(_Handle):
    @property
    def exists(self) -> bool:
        return os.path.isfile(self.full_name)

    @property
    def directory(self) -> DirectoryHandle:
        return DirectoryHandle(self.path_module.dirname(self.full_name), self.path_module)


class DirectoryHandle(_Handle):
    @property
    def exists(self) -> bool:
        return os.path.isdir(self.full_name)

    def create(self) -> None:
        os.makedirs(self.full_name, exist_ok=True)

    def get_file(self, name: str) -> FileHandle:
        return FileHandle(self.path_module.join(self.full_name, name), self.path_module)

    def get_directory(self, name: str) -> DirectoryHandle:
        return DirectoryHandle(self.path_module.join(self.full_name, name), self.path_module)
