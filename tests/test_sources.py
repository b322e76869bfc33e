"""Tests for sources.py: collaborator protocols and qualified type names."""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass

import pytest

from config_problems.sources import Location, UserCodeSource, qualified_name


@dataclass
class ScriptLocation:
    source_short_display_name: str
    line_number: int | None


@dataclass
class PluginSource:
    display_name: str


@pytest.mark.unit
def test_qualified_name_of_type():
    assert qualified_name(OrderedDict) == "collections.OrderedDict"


@pytest.mark.unit
def test_qualified_name_of_builtin():
    assert qualified_name(int) == "builtins.int"


@pytest.mark.unit
def test_qualified_name_passes_strings_through():
    assert qualified_name("org.example.Task") == "org.example.Task"


@pytest.mark.unit
def test_location_protocol():
    assert isinstance(ScriptLocation("build.gradle", 3), Location)
    assert not isinstance(PluginSource("plugin"), Location)


@pytest.mark.unit
def test_user_code_source_protocol():
    assert isinstance(PluginSource("plugin 'java'"), UserCodeSource)
    assert not isinstance(object(), UserCodeSource)


@pytest.mark.unit
def test_qualified_name_rejects_other_values():
    with pytest.raises(TypeError):
        qualified_name(None)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        qualified_name(OrderedDict())  # type: ignore[arg-type]
