"""The problem record handed to reporting collaborators."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

from config_problems.config import ProblemsConfig
from config_problems.failure import Failure
from config_problems.kinds import DocumentationSection
from config_problems.message import StructuredMessage
from config_problems.trace import Trace, trace_chain

logger = logging.getLogger(__name__)


class PropertyProblem(BaseModel):
    """A problem that does not necessarily compromise the execution of the build.

    Problems are values: two problems found by separate traversals of the same
    configuration code compare equal, so callers can deduplicate them.
    ``exception`` and ``stack_tracing_failure`` describe a failure the caller
    already handled and are never raised from here.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    trace: Trace
    message: StructuredMessage
    exception: BaseException | None = None
    # May be synthetic when the cause of the problem was not an exception.
    stack_tracing_failure: Failure | None = None
    documentation_section: DocumentationSection | None = None


def build_problem(
    trace: Trace,
    message: StructuredMessage | str,
    *,
    exception: BaseException | None = None,
    documentation_section: DocumentationSection | None = None,
    config: ProblemsConfig | None = None,
) -> PropertyProblem:
    """Package a trace and message into a problem, attaching failure details.

    The stack tracing failure is captured from ``exception`` when one is given,
    otherwise synthesized at the call site if the config asks for it. Raises
    TraceCycleError when the trace does not terminate within the configured depth.
    """
    if config is None:
        config = ProblemsConfig()

    frames = list(trace_chain(trace, max_depth=config.max_trace_depth))

    if isinstance(message, str):
        message = StructuredMessage.for_text(message)

    failure: Failure | None = None
    if exception is not None:
        failure = Failure.from_exception(exception)
    elif config.capture_synthetic_failures:
        failure = Failure.synthesize(str(message), skip=2)

    problem = PropertyProblem(
        trace=trace,
        message=message,
        exception=exception,
        stack_tracing_failure=failure,
        documentation_section=documentation_section,
    )
    logger.debug(f"Recorded problem at {frames[-1].variant} frame: {message}")
    return problem
