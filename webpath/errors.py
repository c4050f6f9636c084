from __future__ import annotations

import os

EMPTY_VALUE_MESSAGE = "Value cannot be null or empty or whitespace."


class WebPathError(ValueError):
    pass


class InvalidArgumentError(WebPathError):
    def __init__(self, argument: str, message: str = EMPTY_VALUE_MESSAGE) -> None:
        super().__init__(f"{message} ({argument})")
        self.argument = argument


class NullReferenceError(WebPathError):
    def __init__(self, argument: str) -> None:
        super().__init__(f"Value cannot be null. ({argument})")
        self.argument = argument


def require_text(value: object, argument: str) -> str:
    if value is None:
        raise InvalidArgumentError(argument)
    if isinstance(value, os.PathLike):
        value = os.fspath(value)
    if not isinstance(value, str):
        raise InvalidArgumentError(argument, "Value must be a string or path.")
    if not value.strip():
        raise InvalidArgumentError(argument)
    return value
