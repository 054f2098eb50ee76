# src/native_compile/events.py
"""Observable events emitted while resolving a goal."""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class EventKind(str, Enum):
    MAIN_CLASS_RESOLVED = "main_class_resolved"
    SBOM_ARGUMENT_ADDED = "sbom_argument_added"
    SBOM_SKIPPED = "sbom_skipped"


@dataclass(frozen=True)
class ResolutionEvent:
    kind: EventKind
    message: str
    details: dict[str, Any] = field(default_factory=dict)


EventSink = Callable[[ResolutionEvent], None]


def emit(on_event: EventSink | None, event: ResolutionEvent) -> None:
    if on_event is not None:
        on_event(event)
