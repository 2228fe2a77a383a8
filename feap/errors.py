"""The catch-all engine error and error handlers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Union

from feap.tick import Tick


class FeapError(Exception):
    """Universal error wrapping any other error or message."""

    def __init__(self, error: Union[BaseException, str]) -> None:
        super().__init__(error)
        self.error = error
        if isinstance(error, BaseException):
            self.__cause__ = error

    def __str__(self) -> str:
        return f"{self.error}\n"

    def __repr__(self) -> str:
        return f"FeapError({self.error!r})"


@dataclass(frozen=True)
class ErrorContext:
    """Describes the system in which an error occurred."""

    name: str
    last_run: Tick

    def kind(self) -> str:
        """Return the kind of construct that failed."""
        return "system"

    def __str__(self) -> str:
        return f"System `{self.name}` failed"


ErrorHandler = Callable[[FeapError, ErrorContext], None]


def panic(error: FeapError, ctx: ErrorContext) -> None:
    """Error handler that raises with the system error."""
    raise RuntimeError(
        f"Encountered an error in {ctx.kind()} `{ctx.name}`: {error}"
    ) from error


@dataclass(frozen=True)
class DefaultErrorHandler:
    """The handler called for errors that are not handled otherwise."""

    handler: ErrorHandler = field(default=panic)

    def __call__(self, error: FeapError, ctx: ErrorContext) -> None:
        self.handler(error, ctx)