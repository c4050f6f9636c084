from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .translator import WebPathTranslator

TRANSLATOR_LOGGER_NAME = "webpath.translator"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def env_bool(name: str, default: bool = False) -> bool:
    value = os.environ.get(name, "").strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


def _default_root_dir() -> str:
    return str(Path.cwd() / "wwwroot")


@dataclass(frozen=True)
class TranslatorConfig:
    root_dir: str
    trace: bool = False


def load_config() -> TranslatorConfig:
    raw_root = os.environ.get("WEBPATH_ROOT_DIR", _default_root_dir()).strip()
    if not raw_root:
        raise RuntimeError("WEBPATH_ROOT_DIR must not be empty")
    return TranslatorConfig(
        root_dir=os.path.expanduser(raw_root),
        trace=env_bool("WEBPATH_TRACE", False),
    )


def create_translator(config: TranslatorConfig | None = None) -> WebPathTranslator:
    config = config or load_config()
    logger = logging.getLogger(TRANSLATOR_LOGGER_NAME) if config.trace else None
    return WebPathTranslator(config.root_dir, logger)
