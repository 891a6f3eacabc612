"""Error types raised by the context-gathering layer."""

from __future__ import annotations

from pathlib import Path
from typing import Union


class ContextError(Exception):
    """Base class for every error this package raises."""


class MissingInputError(ContextError):
    """A required input file is missing or cannot be read."""

    def __init__(self, kind: str, path: Union[str, Path], reason: str = "not found") -> None:
        self.kind = kind
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{kind} {self.path} {reason}")


class ConfigError(ContextError):
    """An environment variable holds a value that cannot be used."""

    def __init__(self, variable: str, value: str, expected: str) -> None:
        self.variable = variable
        self.value = value
        super().__init__(f"Invalid {variable}={value!r}: expected {expected}")


class CompletionError(ContextError):
    """The chat-completion request failed."""
