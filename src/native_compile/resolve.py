# src/native_compile/resolve.py
"""One resolution pass: main class first, then the SBOM policy."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .build_args import BuildArguments
from .capabilities import CapabilityFacts
from .events import EventSink, ResolutionEvent
from .expressions import ExpressionEvaluator
from .main_class import DEFAULT_MAIN_CLASS_PROBES, MainClassProbe, resolve_main_class
from .project import ProjectModel
from .sbom import SbomOverride, decide_sbom


@dataclass
class ResolvedOutputs:
    main_class: str | None
    arguments: BuildArguments
    sbom_generation_requested: bool
    events: list[ResolutionEvent] = field(default_factory=list)


def resolve_native_compile(  # noqa: PLR0913
    project: ProjectModel,
    evaluator: ExpressionEvaluator,
    facts: CapabilityFacts,
    *,
    main_class: str | None = None,
    build_args: Iterable[str] = (),
    augmented_sbom: bool | None = None,
    probes: Sequence[MainClassProbe] = DEFAULT_MAIN_CLASS_PROBES,
    on_event: EventSink | None = None,
) -> ResolvedOutputs:
    """Resolve the main class and final arguments for a native build.

    Events are collected on the result and also forwarded to ``on_event``.

    Raises:
        ConfigurationError: augmented SBOM was requested explicitly but the
            toolchain cannot provide it.
    """
    events: list[ResolutionEvent] = []

    def record(event: ResolutionEvent) -> None:
        events.append(event)
        if on_event is not None:
            on_event(event)

    arguments = BuildArguments(build_args)
    resolved_main = resolve_main_class(
        main_class, probes, project, evaluator, on_event=record
    )
    decision = decide_sbom(
        SbomOverride.from_optional(augmented_sbom),
        facts,
        arguments,
        on_event=record,
    )
    return ResolvedOutputs(
        main_class=resolved_main,
        arguments=arguments,
        sbom_generation_requested=decision.requested,
        events=events,
    )
