# src/native_compile/options.py
"""Options of the compile-no-fork goal and how they are resolved.

Precedence, lowest first: built-in defaults, goal configuration,
overrides supplied by the host (command line, session). An override
whose value is None leaves the lower layer untouched. ``build_args``
accumulate across layers instead of replacing each other.
"""

from collections.abc import Mapping
from typing import Any, TypedDict

from apathetic_logging import LEVEL_ORDER

from .constants import DEFAULT_SKIP, DEFAULT_SKIP_FOR_POM
from .logs import getAppLogger
from .utils_types import safe_isinstance, schema_from_typeddict


class NativeCompileOptions(TypedDict, total=False):
    skip: bool  # skipNativeBuild
    skip_for_pom: bool  # skipNativeBuildForPom
    augmented_sbom: bool | None  # unset means "decide from build args"
    main_class: str | None
    build_args: list[str]
    log_level: str | None


class NativeCompileOptionsResolved(TypedDict):
    skip: bool
    skip_for_pom: bool
    augmented_sbom: bool | None
    main_class: str | None
    build_args: list[str]
    log_level: str | None


# Host-facing parameter names accepted as aliases
OPTION_ALIASES: dict[str, str] = {
    "skipNativeBuild": "skip",
    "skipNativeBuildForPom": "skip_for_pom",
    "augmentedSBOM": "augmented_sbom",
    "mainClass": "main_class",
    "buildArgs": "build_args",
}


def _default_options() -> NativeCompileOptionsResolved:
    return {
        "skip": DEFAULT_SKIP,
        "skip_for_pom": DEFAULT_SKIP_FOR_POM,
        "augmented_sbom": None,
        "main_class": None,
        "build_args": [],
        "log_level": None,  # keep the logger's current level
    }


def validate_options(raw: Mapping[str, Any], ctx: str) -> NativeCompileOptions:
    """Normalize aliases and check value types.

    Unknown keys are dropped with a warning.

    Raises:
        TypeError: a known key holds a value of the wrong type.
        ValueError: ``log_level`` names a level the logger does not know.
    """
    logger = getAppLogger()
    schema = schema_from_typeddict(NativeCompileOptions)
    result: dict[str, Any] = {}

    for raw_key, value in raw.items():
        key = OPTION_ALIASES.get(raw_key, raw_key)
        if key not in schema:
            logger.warning("Ignored unknown option %r %s", raw_key, ctx)
            continue
        if value is None:
            continue
        if not safe_isinstance(value, schema[key]):
            xmsg = (
                f"Option {raw_key!r} {ctx} has invalid type"
                f" {type(value).__name__}: expected {schema[key]}"
            )
            raise TypeError(xmsg)
        if key == "log_level" and value.lower() not in LEVEL_ORDER:
            xmsg = (
                f"Option {raw_key!r} {ctx} has unknown level {value!r}:"
                f" expected one of {', '.join(LEVEL_ORDER)}"
            )
            raise ValueError(xmsg)
        result[key] = value

    return result  # type: ignore[return-value]


def resolve_options(
    config: Mapping[str, Any] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> NativeCompileOptionsResolved:
    """Merge defaults, goal configuration and host overrides."""
    resolved = _default_options()
    layers = (
        (config, "in goal configuration"),
        (overrides, "in overrides"),
    )

    for layer, ctx in layers:
        if not layer:
            continue
        options = validate_options(layer, ctx)
        for key, value in options.items():
            if key == "build_args":
                resolved["build_args"] = [*resolved["build_args"], *value]
            else:
                resolved[key] = value  # type: ignore[literal-required]

    getAppLogger().debug("Resolved goal options: %s", resolved)
    return resolved
