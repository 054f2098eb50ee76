# tests/utils/factories.py
"""Shared test helpers for constructing projects, trees and collaborators."""

from collections.abc import Iterator, Sequence
from typing import Any

import native_compile.capabilities as mod_caps
import native_compile.config_tree as mod_tree
import native_compile.errors as mod_errors
import native_compile.project as mod_project


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def make_facts(
    edition: str = "oracle",
    major_version: int = 24,
) -> mod_caps.CapabilityFacts:
    return mod_caps.CapabilityFacts(
        edition=mod_caps.ToolchainEdition(edition),
        major_version=major_version,
    )


def make_step(
    key: str,
    configuration: dict[str, Any] | None = None,
    executions: Sequence[tuple[str, dict[str, Any] | None]] = (),
) -> mod_project.BuildStepDescriptor:
    return mod_project.BuildStepDescriptor(
        key=key,
        configuration=mod_tree.tree_from_raw(configuration),
        executions=tuple(
            mod_project.ExecutionDescriptor(
                id=exec_id, configuration=mod_tree.tree_from_raw(config)
            )
            for exec_id, config in executions
        ),
    )


def make_project(
    *steps: mod_project.BuildStepDescriptor,
    packaging: str = "jar",
    properties: dict[str, Any] | None = None,
) -> mod_project.ProjectModel:
    return mod_project.ProjectModel(
        packaging=packaging,
        steps=steps,
        properties=properties or {},
    )


def manifest_config(main_class: str) -> dict[str, Any]:
    """Configuration of a jar/assembly step declaring ``main_class``."""
    return {"archive": {"manifest": {"mainClass": main_class}}}


def shade_config(main_class: str) -> dict[str, Any]:
    """Configuration of a shade execution declaring ``main_class``."""
    return {
        "transformers": {
            "transformer": {
                "implementation": "ManifestResourceTransformer",
                "mainClass": main_class,
            },
        },
    }


# ---------------------------------------------------------------------------
# Fake collaborators
# ---------------------------------------------------------------------------


class ExplodingProbes(Sequence[Any]):
    """A probe list that fails the test if anything looks at it."""

    def __getitem__(self, index: Any) -> Any:
        xmsg = "probes must not be consulted"
        raise AssertionError(xmsg)

    def __len__(self) -> int:
        xmsg = "probes must not be consulted"
        raise AssertionError(xmsg)

    def __iter__(self) -> Iterator[Any]:
        xmsg = "probes must not be consulted"
        raise AssertionError(xmsg)


class RecordingImageBuilder:
    def __init__(self) -> None:
        self.calls: list[tuple[tuple[str, ...], str | None]] = []

    def build(self, arguments: Sequence[str], main_class: str | None) -> None:
        self.calls.append((tuple(arguments), main_class))


class RecordingSbomGenerator:
    def __init__(self) -> None:
        self.calls: list[tuple[mod_project.ProjectModel, str | None]] = []

    def generate(
        self, project: mod_project.ProjectModel, main_class: str | None
    ) -> None:
        self.calls.append((project, main_class))


class StaticEvaluator:
    """Evaluator returning canned values; unknown input raises."""

    def __init__(self, values: dict[str, Any]) -> None:
        self.values = values
        self.seen: list[str] = []

    def evaluate(self, expression: str) -> Any:
        self.seen.append(expression)
        if expression not in self.values:
            xmsg = f"no value for {expression!r}"
            raise mod_errors.ExpressionEvaluationError(xmsg)
        return self.values[expression]
