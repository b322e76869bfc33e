"""Enums for property kinds and documentation sections."""

from __future__ import annotations

from enum import StrEnum


class PropertyKind(StrEnum):
    FIELD = "field"
    PROPERTY_USAGE = "property usage"
    INPUT_PROPERTY = "input property"
    OUTPUT_PROPERTY = "output property"


class DocumentationSection(StrEnum):
    """Documentation pages explaining a problem; the value is the page anchor."""

    NOT_YET_IMPLEMENTED = "config_cache:not_yet_implemented"
    NOT_YET_IMPLEMENTED_SOURCE_DEPENDENCIES = (
        "config_cache:not_yet_implemented:source_dependencies"
    )
    NOT_YET_IMPLEMENTED_JAVA_SERIALIZATION = "config_cache:not_yet_implemented:java_serialization"
    NOT_YET_IMPLEMENTED_TEST_KIT_JAVA_AGENT = (
        "config_cache:not_yet_implemented:testkit_build_with_java_agent"
    )
    NOT_YET_IMPLEMENTED_BUILD_SERVICE_IN_FINGERPRINT = (
        "config_cache:not_yet_implemented:build_services_in_fingerprint"
    )
    TASK_OPT_OUT = "config_cache:task_opt_out"
    REQUIREMENTS_BUILD_LISTENERS = "config_cache:requirements:build_listeners"
    REQUIREMENTS_DISALLOWED_TYPES = "config_cache:requirements:disallowed_types"
    REQUIREMENTS_EXTERNAL_PROCESS = "config_cache:requirements:external_processes"
    REQUIREMENTS_TASK_ACCESS = "config_cache:requirements:task_access"
    REQUIREMENTS_SYS_PROP_ENV_VAR_READ = (
        "config_cache:requirements:reading_sys_props_and_env_vars"
    )
    REQUIREMENTS_USE_PROJECT_DURING_EXECUTION = (
        "config_cache:requirements:use_project_during_execution"
    )

    @property
    def anchor(self) -> str:
        return self.value
