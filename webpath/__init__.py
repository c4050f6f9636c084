"""Translate paths between ``~/`` web-relative notation and a filesystem root."""

from .config import TranslatorConfig, create_translator, load_config
from .errors import InvalidArgumentError, NullReferenceError, WebPathError
from .handles import DirectoryHandle, FileHandle
from .translator import WEB_ROOT, PathTranslator, WebPathTranslator

__all__ = [
    "WEB_ROOT",
    "DirectoryHandle",
    "FileHandle",
    "InvalidArgumentError",
    "NullReferenceError",
    "PathTranslator",
    "TranslatorConfig",
    "WebPathError",
    "WebPathTranslator",
    "create_translator",
    "load_config",
]
