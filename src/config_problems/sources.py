"""Contracts for the collaborators that describe where user code lives."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Location(Protocol):
    """A resolved position inside a build script or plugin source."""

    @property
    def source_short_display_name(self) -> str: ...

    @property
    def line_number(self) -> int | None: ...


@runtime_checkable
class UserCodeSource(Protocol):
    """A plugin or script that contributed build logic."""

    @property
    def display_name(self) -> str: ...


def qualified_name(type_: type | str) -> str:
    """Return the fully qualified name of a type, e.g. ``pkg.module.Outer.Inner``.

    Strings are taken to already be qualified names and are returned unchanged;
    anything else raises TypeError.
    """
    if isinstance(type_, str):
        return type_
    if not isinstance(type_, type):
        raise TypeError(f"Expected a type or a qualified name, got {type_!r}")
    return f"{type_.__module__}.{type_.__qualname__}"
