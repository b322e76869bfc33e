"""Shared fixtures for config_problems tests."""

import pytest

from config_problems.kinds import PropertyKind
from config_problems.trace import BuildLogicTrace, PropertyTrace, TaskTrace


@pytest.fixture
def task_trace() -> TaskTrace:
    return TaskTrace(type_name="org.example.Compile", path=":app:compile")


@pytest.fixture
def script_trace() -> BuildLogicTrace:
    return BuildLogicTrace(source="build file 'build.gradle'", line_number=12)


@pytest.fixture
def field_trace(task_trace: TaskTrace) -> PropertyTrace:
    return PropertyTrace(kind=PropertyKind.FIELD, name="classpath", tail=task_trace)
