# src/native_compile/project.py
"""Project model: the build steps declared next to the native goal."""

import json
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

from .config_tree import ConfigNode, tree_from_raw
from .constants import DEFAULT_PLUGIN_GROUP_ID
from .expressions import PropertyExpressionEvaluator
from .logs import getAppLogger


@dataclass(frozen=True)
class ExecutionDescriptor:
    id: str
    configuration: ConfigNode | None = None


@dataclass(frozen=True)
class BuildStepDescriptor:
    key: str  # "groupId:artifactId"
    configuration: ConfigNode | None = None
    executions: tuple[ExecutionDescriptor, ...] = ()


@dataclass(frozen=True)
class ProjectModel:
    packaging: str = "jar"
    steps: tuple[BuildStepDescriptor, ...] = ()
    properties: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType({})
    )
    group_id: str = ""
    artifact_id: str = ""
    version: str = ""

    def find_step(self, key: str) -> BuildStepDescriptor | None:
        """Return the first declared step with ``key``, or None."""
        for step in self.steps:
            if step.key == key:
                return step
        return None

    def builtin_properties(self) -> dict[str, str]:
        return {
            "project.groupId": self.group_id,
            "project.artifactId": self.artifact_id,
            "project.version": self.version,
            "project.packaging": self.packaging,
        }


def evaluator_for_project(
    project: ProjectModel,
    *overrides: Mapping[str, Any],
) -> PropertyExpressionEvaluator:
    """Evaluator that sees ``overrides`` first, then project properties."""
    return PropertyExpressionEvaluator(
        *overrides, project.properties, project.builtin_properties()
    )


# --------------------------------------------------------------------------- #
# loading
# --------------------------------------------------------------------------- #


def _step_key(raw: Mapping[str, Any], index: int) -> str:
    key = raw.get("key")
    if isinstance(key, str) and key:
        return key

    artifact_id = raw.get("artifactId")
    if not isinstance(artifact_id, str) or not artifact_id:
        xmsg = f"Build step #{index} needs either 'key' or 'artifactId'"
        raise ValueError(xmsg)
    group_id = raw.get("groupId") or DEFAULT_PLUGIN_GROUP_ID
    return f"{group_id}:{artifact_id}"


def _parse_execution(raw: Any, step_key: str, index: int) -> ExecutionDescriptor:
    if not isinstance(raw, Mapping):
        xmsg = f"Execution #{index} of {step_key} must be a mapping"
        raise ValueError(xmsg)
    exec_id = raw.get("id")  # pyright: ignore[reportUnknownMemberType,reportUnknownVariableType]
    return ExecutionDescriptor(
        id=str(exec_id) if exec_id is not None else "default",  # pyright: ignore[reportUnknownArgumentType]
        configuration=tree_from_raw(raw.get("configuration")),  # pyright: ignore[reportUnknownMemberType]
    )


def _parse_step(raw: Any, index: int) -> BuildStepDescriptor:
    if not isinstance(raw, Mapping):
        xmsg = f"Build step #{index} must be a mapping, got {type(raw).__name__}"
        raise ValueError(xmsg)

    key = _step_key(raw, index)  # pyright: ignore[reportUnknownArgumentType]
    raw_executions = raw.get("executions") or []  # pyright: ignore[reportUnknownMemberType,reportUnknownVariableType]
    if not isinstance(raw_executions, list):
        xmsg = f"'executions' of {key} must be a list"
        raise ValueError(xmsg)

    return BuildStepDescriptor(
        key=key,
        configuration=tree_from_raw(raw.get("configuration")),  # pyright: ignore[reportUnknownMemberType]
        executions=tuple(
            _parse_execution(e, key, i)
            for i, e in enumerate(raw_executions)  # pyright: ignore[reportUnknownArgumentType,reportUnknownVariableType]
        ),
    )


def project_from_dict(raw: Mapping[str, Any]) -> ProjectModel:
    """Build a ProjectModel from parsed POM-like data.

    Accepted keys: ``packaging``, ``groupId``, ``artifactId``, ``version``,
    ``properties`` and ``plugins`` (a list of build steps with ``key`` or
    ``groupId``/``artifactId``, an optional ``configuration`` and optional
    ``executions``).
    """
    raw_steps = raw.get("plugins") or []
    if not isinstance(raw_steps, list):
        xmsg = "'plugins' must be a list"
        raise ValueError(xmsg)

    raw_properties = raw.get("properties") or {}
    if not isinstance(raw_properties, Mapping):
        xmsg = "'properties' must be a mapping"
        raise ValueError(xmsg)

    steps = tuple(_parse_step(s, i) for i, s in enumerate(raw_steps))  # pyright: ignore[reportUnknownArgumentType,reportUnknownVariableType]
    getAppLogger().debug(
        "Loaded project with %d build step(s): %s",
        len(steps),
        ", ".join(s.key for s in steps) or "<none>",
    )
    return ProjectModel(
        packaging=str(raw.get("packaging") or "jar"),
        steps=steps,
        properties=MappingProxyType(
            {str(k): v for k, v in raw_properties.items()}  # pyright: ignore[reportUnknownVariableType,reportUnknownArgumentType]
        ),
        group_id=str(raw.get("groupId") or ""),
        artifact_id=str(raw.get("artifactId") or ""),
        version=str(raw.get("version") or ""),
    )


def load_project(path: Path) -> ProjectModel:
    """Read a project description from a ``.json`` or ``.toml`` file."""
    if path.suffix == ".toml":
        with path.open("rb") as f:
            data: Any = tomllib.load(f)
    elif path.suffix == ".json":
        data = json.loads(path.read_text(encoding="utf-8"))
    else:
        xmsg = f"Unsupported project file type: {path.name}"
        raise ValueError(xmsg)

    if not isinstance(data, dict):
        xmsg = f"Project file {path.name} must contain a mapping at top level"
        raise ValueError(xmsg)
    return project_from_dict(data)  # pyright: ignore[reportUnknownArgumentType]
