"""config_problems: provenance traces and structured messages for configuration problems."""

from importlib.metadata import PackageNotFoundError, version

from config_problems.config import ProblemsConfig, load_problems_config
from config_problems.failure import Failure
from config_problems.kinds import DocumentationSection, PropertyKind
from config_problems.message import (
    Fragment,
    ReferenceFragment,
    StructuredMessage,
    StructuredMessageBuilder,
    TextFragment,
    render_message,
)
from config_problems.problem import PropertyProblem, build_problem
from config_problems.trace import (
    GRADLE_RUNTIME,
    UNKNOWN,
    BeanTrace,
    BuildLogicClassTrace,
    BuildLogicTrace,
    GradleTrace,
    ProjectTrace,
    PropertyTrace,
    SystemPropertyTrace,
    TaskTrace,
    Trace,
    TraceCycleError,
    UnknownTrace,
    containing_user_code,
    render_trace,
    trace_chain,
)

try:
    __version__ = version("config-problems")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "GRADLE_RUNTIME",
    "UNKNOWN",
    "BeanTrace",
    "BuildLogicClassTrace",
    "BuildLogicTrace",
    "DocumentationSection",
    "Failure",
    "Fragment",
    "GradleTrace",
    "ProblemsConfig",
    "ProjectTrace",
    "PropertyKind",
    "PropertyProblem",
    "PropertyTrace",
    "ReferenceFragment",
    "StructuredMessage",
    "StructuredMessageBuilder",
    "SystemPropertyTrace",
    "TaskTrace",
    "TextFragment",
    "Trace",
    "TraceCycleError",
    "UnknownTrace",
    "build_problem",
    "containing_user_code",
    "load_problems_config",
    "render_message",
    "render_trace",
    "trace_chain",
]
