# src/native_compile/main_class.py
"""Discover the application entry point from sibling build steps."""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum

from .config_tree import ConfigNode, read_config_value
from .constants import ASSEMBLY_PLUGIN_KEY, JAR_PLUGIN_KEY, SHADE_PLUGIN_KEY
from .events import EventKind, EventSink, ResolutionEvent, emit
from .expressions import ExpressionEvaluator, resolve_expression
from .logs import getAppLogger
from .project import BuildStepDescriptor, ProjectModel


class SearchMode(str, Enum):
    DIRECT = "direct"  # the step's own configuration
    PER_EXECUTION = "per_execution"  # each execution, in declared order


@dataclass(frozen=True)
class MainClassProbe:
    step_key: str
    mode: SearchMode
    path: tuple[str, ...]

    def describe(self) -> str:
        return " -> ".join(self.path)


DEFAULT_MAIN_CLASS_PROBES: tuple[MainClassProbe, ...] = (
    MainClassProbe(
        SHADE_PLUGIN_KEY,
        SearchMode.PER_EXECUTION,
        ("transformers", "transformer", "mainClass"),
    ),
    MainClassProbe(
        ASSEMBLY_PLUGIN_KEY,
        SearchMode.DIRECT,
        ("archive", "manifest", "mainClass"),
    ),
    MainClassProbe(
        JAR_PLUGIN_KEY,
        SearchMode.DIRECT,
        ("archive", "manifest", "mainClass"),
    ),
)


def _candidate_configs(
    step: BuildStepDescriptor,
    mode: SearchMode,
) -> Iterator[tuple[str | None, ConfigNode | None]]:
    """Yield (execution id, configuration) pairs to search, in order."""
    if mode is SearchMode.DIRECT:
        yield None, step.configuration
        return
    for execution in step.executions:
        yield execution.id, execution.configuration


def _run_probe(
    probe: MainClassProbe,
    step: BuildStepDescriptor,
    evaluator: ExpressionEvaluator,
) -> tuple[str, str | None] | None:
    for execution_id, config in _candidate_configs(step, probe.mode):
        raw = read_config_value(config, probe.path)
        value = resolve_expression(raw, evaluator)
        if value is not None:
            return value, execution_id
    return None


def resolve_main_class(
    explicit: str | None,
    probes: Sequence[MainClassProbe],
    project: ProjectModel,
    evaluator: ExpressionEvaluator,
    on_event: EventSink | None = None,
) -> str | None:
    """Return the explicit main class, or the first one a probe resolves.

    Probes are tried in the given order and the first one that yields a
    string literal wins. A step whose value cannot be evaluated does not
    stop the search. Returns None when nothing matches.
    """
    if explicit is not None:
        return explicit

    logger = getAppLogger()
    for probe in probes:
        step = project.find_step(probe.step_key)
        if step is None:
            logger.debug("No %s declared, skipping main class probe", probe.step_key)
            continue

        found = _run_probe(probe, step, evaluator)
        if found is None:
            logger.debug(
                "%s declares no usable main class at %s",
                probe.step_key,
                probe.describe(),
            )
            continue

        value, execution_id = found
        message = (
            f"Obtained main class from plugin {probe.step_key}"
            f" with the following path: {probe.describe()}"
        )
        logger.info(message)
        emit(
            on_event,
            ResolutionEvent(
                EventKind.MAIN_CLASS_RESOLVED,
                message,
                {
                    "step_key": probe.step_key,
                    "mode": probe.mode.value,
                    "path": probe.path,
                    "execution_id": execution_id,
                    "main_class": value,
                },
            ),
        )
        return value

    return None
