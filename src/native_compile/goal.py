# src/native_compile/goal.py
"""The compile-no-fork goal.

Runs inside the host build without forking it: checks the skip options,
resolves the main class and arguments, hands off to the SBOM generator
when requested and finally to the image builder.
"""

from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Protocol

from .capabilities import CapabilityFacts, detect_capabilities, probe_toolchain
from .constants import POM_PACKAGING
from .events import EventSink
from .expressions import ExpressionEvaluator
from .logs import getAppLogger
from .options import NativeCompileOptionsResolved
from .project import ProjectModel, evaluator_for_project
from .resolve import ResolvedOutputs, resolve_native_compile


class ImageBuilder(Protocol):
    def build(self, arguments: Sequence[str], main_class: str | None) -> None: ...


class SbomGenerator(Protocol):
    def generate(self, project: ProjectModel, main_class: str | None) -> None: ...


@dataclass
class GoalResult:
    skipped: bool
    skip_reason: str | None = None
    outputs: ResolvedOutputs | None = None


def _skip_reason(
    options: NativeCompileOptionsResolved,
    project: ProjectModel,
) -> str | None:
    if options["skip"]:
        return "parameter 'skipNativeBuild' is true"
    if options["skip_for_pom"] and project.packaging == POM_PACKAGING:
        return "parameter 'skipNativeBuildForPom' is true"
    return None


def _detect_facts(version_text: Callable[[], str] | None) -> CapabilityFacts:
    if version_text is None:
        return probe_toolchain()
    return detect_capabilities(version_text())


def _run(  # noqa: PLR0913
    options: NativeCompileOptionsResolved,
    project: ProjectModel,
    image_builder: ImageBuilder,
    sbom_generator: SbomGenerator | None,
    evaluator: ExpressionEvaluator | None,
    facts: CapabilityFacts | None,
    version_text: Callable[[], str] | None,
    on_event: EventSink | None,
) -> GoalResult:
    logger = getAppLogger()

    reason = _skip_reason(options, project)
    if reason is not None:
        logger.info("Skipping native-image generation (%s).", reason)
        return GoalResult(skipped=True, skip_reason=reason)

    outputs = resolve_native_compile(
        project,
        evaluator if evaluator is not None else evaluator_for_project(project),
        facts if facts is not None else _detect_facts(version_text),
        main_class=options["main_class"],
        build_args=options["build_args"],
        augmented_sbom=options["augmented_sbom"],
        on_event=on_event,
    )

    if outputs.sbom_generation_requested:
        if sbom_generator is None:
            logger.warning(
                "An augmented SBOM was requested but no SBOM generator is available."
            )
        else:
            sbom_generator.generate(project, outputs.main_class)

    if outputs.main_class is None:
        logger.debug("No main class resolved; leaving it to the image builder")

    image_builder.build(outputs.arguments.tokens(), outputs.main_class)
    return GoalResult(skipped=False, outputs=outputs)


@contextmanager
def _log_level(level: str | None) -> Iterator[None]:
    # log_level: env -> goal option; unset keeps the logger's current level
    if level is None:
        yield
        return
    logger = getAppLogger()
    previous = logger.level
    logger.setLevel(logger.determineLogLevel(root_log_level=level))
    try:
        yield
    finally:
        logger.setLevel(previous)


def execute_compile_no_fork(  # noqa: PLR0913
    options: NativeCompileOptionsResolved,
    project: ProjectModel,
    *,
    image_builder: ImageBuilder,
    sbom_generator: SbomGenerator | None = None,
    evaluator: ExpressionEvaluator | None = None,
    facts: CapabilityFacts | None = None,
    version_text: Callable[[], str] | None = None,
    on_event: EventSink | None = None,
) -> GoalResult:
    """Run the goal for one project.

    Capability facts come from ``facts`` if given, else from
    ``version_text()``, else from running the ``native-image`` on PATH.
    Expressions are evaluated against the project's properties unless an
    ``evaluator`` is supplied.

    Raises:
        ConfigurationError: augmented SBOM requested on an unsupported toolchain.
    """
    with _log_level(options["log_level"]):
        return _run(
            options,
            project,
            image_builder,
            sbom_generator,
            evaluator,
            facts,
            version_text,
            on_event,
        )
