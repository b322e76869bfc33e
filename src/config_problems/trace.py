"""Provenance traces: where a configuration problem was found.

A trace is a chain of frames running from the most specific context (a
property) to the most general one (a task, a script, the runtime). Wrapping
frames keep the next frame in ``tail``; terminal frames end the chain.
Frames are frozen, so equal chains built at different call sites compare and
hash equal, and a frame may be shared by any number of problems.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from config_problems.kinds import PropertyKind
from config_problems.sources import Location, UserCodeSource, qualified_name

logger = logging.getLogger(__name__)

# Equality and hashing of frozen models recurse once per frame.
DEFAULT_MAX_TRACE_DEPTH = 256

_TRACE_CONFIG = ConfigDict(extra="forbid", frozen=True)


class TraceCycleError(ValueError):
    """Raised when following tails revisits a frame or runs past the depth limit."""


def _type_name(value: Any) -> Any:
    return qualified_name(value) if isinstance(value, type) else value


class _TraceBase(BaseModel):
    model_config = _TRACE_CONFIG

    def __str__(self) -> str:
        return render_trace(self)  # type: ignore[arg-type]

    def chain(self) -> Iterator[Trace]:
        return trace_chain(self)  # type: ignore[arg-type]

    @property
    def containing_user_code(self) -> str:
        """The user code where the problem occurred, usually a plugin or script."""
        return containing_user_code(self)  # type: ignore[arg-type]


# --- terminal frames ---


class UnknownTrace(_TraceBase):
    variant: Literal["unknown"] = "unknown"


class GradleTrace(_TraceBase):
    variant: Literal["gradle"] = "gradle"


class BuildLogicTrace(_TraceBase):
    variant: Literal["build_logic"] = "build_logic"
    source: str
    line_number: int | None = None

    @classmethod
    def from_location(cls, location: Location) -> BuildLogicTrace:
        return cls(source=location.source_short_display_name, line_number=location.line_number)

    @classmethod
    def from_user_code_source(cls, user_code_source: UserCodeSource) -> BuildLogicTrace:
        return cls(source=user_code_source.display_name)


class BuildLogicClassTrace(_TraceBase):
    variant: Literal["build_logic_class"] = "build_logic_class"
    name: str


class TaskTrace(_TraceBase):
    variant: Literal["task"] = "task"
    type_name: str
    path: str

    @field_validator("type_name", mode="before")
    @classmethod
    def qualify_type(cls, value: Any) -> Any:
        return _type_name(value)


# --- wrapping frames ---


class _WrappingTrace(_TraceBase):
    @model_validator(mode="after")
    def check_chain_terminates(self) -> _WrappingTrace:
        for _ in trace_chain(self):  # type: ignore[arg-type]
            pass
        return self


class BeanTrace(_WrappingTrace):
    variant: Literal["bean"] = "bean"
    type_name: str
    tail: Trace

    @field_validator("type_name", mode="before")
    @classmethod
    def qualify_type(cls, value: Any) -> Any:
        return _type_name(value)


class PropertyTrace(_WrappingTrace):
    variant: Literal["property"] = "property"
    kind: PropertyKind
    name: str
    tail: Trace


class ProjectTrace(_WrappingTrace):
    variant: Literal["project"] = "project"
    path: str
    tail: Trace


class SystemPropertyTrace(_WrappingTrace):
    variant: Literal["system_property"] = "system_property"
    name: str
    tail: Trace


Trace = Annotated[
    UnknownTrace
    | GradleTrace
    | BuildLogicTrace
    | BuildLogicClassTrace
    | TaskTrace
    | BeanTrace
    | PropertyTrace
    | ProjectTrace
    | SystemPropertyTrace,
    Field(discriminator="variant"),
]

_WRAPPING = (BeanTrace, PropertyTrace, ProjectTrace, SystemPropertyTrace)

for _model in _WRAPPING:
    _model.model_rebuild()

UNKNOWN = UnknownTrace()
GRADLE_RUNTIME = GradleTrace()


# --- rendering ---


def _quoted(s: str) -> str:
    return f"`{s}`"


def _build_logic_phrase(trace: BuildLogicTrace) -> str:
    if trace.line_number is None:
        return trace.source
    return f"{trace.source}: line {trace.line_number}"


# Each phrase carries its own trailing connective, so frames are joined with "".
_PHRASES: dict[type[_TraceBase], Callable[[Any], str]] = {
    GradleTrace: lambda t: "Gradle runtime",
    PropertyTrace: lambda t: f"{t.kind} {_quoted(t.name)} of ",
    SystemPropertyTrace: lambda t: f"system property {_quoted(t.name)} set at ",
    BeanTrace: lambda t: f"{_quoted(t.type_name)} bean found in ",
    TaskTrace: lambda t: f"task {_quoted(t.path)} of type {_quoted(t.type_name)}",
    BuildLogicTrace: _build_logic_phrase,
    BuildLogicClassTrace: lambda t: f"class {_quoted(t.name)}",
    UnknownTrace: lambda t: "unknown location",
    ProjectTrace: lambda t: f"project {_quoted(t.path)} in ",
}


def trace_tail(trace: Trace) -> Trace | None:
    """Return the frame wrapped by ``trace``, or None for terminal frames."""
    if isinstance(trace, _WRAPPING):
        return trace.tail
    return None


def trace_chain(trace: Trace, max_depth: int = DEFAULT_MAX_TRACE_DEPTH) -> Iterator[Trace]:
    """Yield ``trace`` and every frame it wraps, ending with the terminal frame.

    Each call returns a fresh generator. Raises TraceCycleError if a frame is
    reached twice or the chain is longer than ``max_depth``.
    """
    seen: set[int] = set()
    current: Trace | None = trace
    while current is not None:
        if id(current) in seen or len(seen) >= max_depth:
            logger.warning(
                f"Trace starting at {type(trace).__name__} did not terminate "
                f"after {len(seen)} frames"
            )
            raise TraceCycleError(
                f"Trace did not reach a terminal frame within {len(seen)} frames"
            )
        seen.add(id(current))
        yield current
        current = trace_tail(current)


def render_trace(trace: Trace) -> str:
    """Render the whole chain as a sentence, innermost frame first."""
    return "".join(_PHRASES[type(frame)](frame) for frame in trace_chain(trace))


def containing_user_code(trace: Trace) -> str:
    """Render the outermost frame of the chain, the code unit that owns the problem."""
    *_, outermost = trace_chain(trace)
    return render_trace(outermost)
