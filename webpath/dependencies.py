from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request, status

from .config import create_translator
from .errors import WebPathError
from .handles import DirectoryHandle, FileHandle
from .translator import PathTranslator

LOGGER = logging.getLogger(__name__)

STATE_ATTRIBUTE = "web_path_translator"


def install_translator(app: FastAPI, translator: PathTranslator | None = None) -> PathTranslator:
    if translator is None:
        translator = create_translator()
    setattr(app.state, STATE_ATTRIBUTE, translator)
    LOGGER.info("Web path translator installed: %r", translator)
    return translator


def get_translator(request: Request) -> PathTranslator:
    translator = getattr(request.app.state, STATE_ATTRIBUTE, None)
    if translator is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Web path translator is not configured",
        )
    return translator


def web_file(translator: PathTranslator, web_path: str, *, must_exist: bool = False) -> FileHandle:
    try:
        handle = translator.get_file(web_path)
    except WebPathError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    if must_exist and not handle.exists:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="File not found")
    return handle


def web_directory(translator: PathTranslator, web_path: str, *, must_exist: bool = False) -> DirectoryHandle:
    try:
        handle = translator.get_directory(web_path)
    except WebPathError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    if must_exist and not handle.exists:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Directory not found")
    return handle
