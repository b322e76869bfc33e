"""Stack tracing information attached to problems."""

from __future__ import annotations

import traceback

from pydantic import BaseModel, ConfigDict

from config_problems.sources import qualified_name


def _next_cause(exc: BaseException) -> BaseException | None:
    if exc.__cause__ is not None or exc.__suppress_context__:
        return exc.__cause__
    return exc.__context__


class Failure(BaseModel):
    """A captured failure with its stack trace.

    A synthetic failure records where a problem was reported when no exception
    was involved; it has no ``exception_type``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    exception_type: str | None = None
    message: str
    stack_trace: tuple[str, ...] = ()
    synthetic: bool = False
    cause: Failure | None = None

    @classmethod
    def from_exception(cls, exc: BaseException) -> Failure:
        """Capture ``exc`` and its chain of causes, stopping if the chain loops."""
        chain: list[BaseException] = []
        seen: set[int] = set()
        current: BaseException | None = exc
        while current is not None and id(current) not in seen:
            seen.add(id(current))
            chain.append(current)
            current = _next_cause(current)

        failure: Failure | None = None
        for item in reversed(chain):
            failure = cls(
                exception_type=qualified_name(type(item)),
                message=str(item),
                stack_trace=tuple(traceback.format_tb(item.__traceback__)),
                cause=failure,
            )
        assert failure is not None
        return failure

    @classmethod
    def synthesize(cls, message: str, *, skip: int = 1) -> Failure:
        """Capture the current stack, dropping the innermost ``skip`` frames."""
        stack = traceback.format_stack()
        return cls(
            message=message,
            stack_trace=tuple(stack[: len(stack) - skip]),
            synthetic=True,
        )

    def __str__(self) -> str:
        if self.exception_type is None:
            return self.message
        return f"{self.exception_type}: {self.message}"
