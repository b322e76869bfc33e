"""Structured problem messages made of text and reference fragments."""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from config_problems.sources import qualified_name

_MESSAGE_CONFIG = ConfigDict(extra="forbid", frozen=True)


class TextFragment(BaseModel):
    model_config = _MESSAGE_CONFIG

    kind: Literal["text"] = "text"
    text: str


class ReferenceFragment(BaseModel):
    """An identifier, such as a type or property name, quoted when rendered."""

    model_config = _MESSAGE_CONFIG

    kind: Literal["reference"] = "reference"
    name: str


Fragment = Annotated[TextFragment | ReferenceFragment, Field(discriminator="kind")]


class StructuredMessage(BaseModel):
    model_config = _MESSAGE_CONFIG

    fragments: tuple[Fragment, ...] = ()

    def __str__(self) -> str:
        return render_message(self)

    @classmethod
    def for_text(cls, text: str) -> StructuredMessage:
        return cls(fragments=(TextFragment(text=text),))

    @classmethod
    def build(cls, builder: Callable[[StructuredMessageBuilder], object]) -> StructuredMessage:
        """Run ``builder`` against a fresh builder and return the resulting message.

        The return value of ``builder`` is ignored, so both fluent lambdas and
        plain functions work::

            StructuredMessage.build(lambda b: b.text("cannot serialize ").reference(Foo))
        """
        accumulator = StructuredMessageBuilder()
        builder(accumulator)
        return accumulator.build()


class StructuredMessageBuilder:
    """Accumulates fragments for a single message; not safe to share between threads."""

    def __init__(self) -> None:
        self._fragments: list[TextFragment | ReferenceFragment] = []

    def text(self, string: str) -> StructuredMessageBuilder:
        self._fragments.append(TextFragment(text=string))
        return self

    def reference(self, name: str | type) -> StructuredMessageBuilder:
        self._fragments.append(ReferenceFragment(name=qualified_name(name)))
        return self

    def message(self, message: StructuredMessage) -> StructuredMessageBuilder:
        self._fragments.extend(message.fragments)
        return self

    def build(self) -> StructuredMessage:
        return StructuredMessage(fragments=tuple(self._fragments))


def render_message(message: StructuredMessage) -> str:
    return "".join(
        fragment.text if isinstance(fragment, TextFragment) else f"'{fragment.name}'"
        for fragment in message.fragments
    )
