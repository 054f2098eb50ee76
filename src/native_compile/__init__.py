# src/native_compile/__init__.py

"""Native Compile — resolve the arguments of an in-build native-image compile.

Full developer API
==================
This package re-exports all non-private symbols from its submodules,
making it suitable for embedding in a host build plugin.
Anything prefixed with "_" is considered internal and may change.

Highlights:
    - execute_compile_no_fork() → Run the goal for one project
    - resolve_native_compile()  → Main class + final arguments + SBOM decision
    - resolve_main_class()      → Probe sibling build steps for an entry point
    - decide_sbom()             → Augmented SBOM policy
"""

from .build_args import BuildArguments
from .capabilities import (
    CapabilityFacts,
    ToolchainEdition,
    clear_capability_cache,
    detect_capabilities,
    detect_edition,
    parse_major_version,
    probe_toolchain,
    query_version_text,
)
from .config_tree import Branch, ConfigNode, Leaf, read_config_value, tree_from_raw
from .constants import (
    AUGMENTED_SBOM_PARAM_NAME,
    DEFAULT_ENV_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    ORACLE_GRAALVM_IDENTIFIER,
    SBOM_ENABLE_FLAG,
    SBOM_MIN_MAJOR_VERSION,
)
from .errors import ConfigurationError, ExpressionEvaluationError, NativeCompileError
from .events import EventKind, EventSink, ResolutionEvent
from .expressions import (
    ExpressionEvaluator,
    PropertyExpressionEvaluator,
    resolve_expression,
)
from .goal import GoalResult, ImageBuilder, SbomGenerator, execute_compile_no_fork
from .logs import getAppLogger
from .main_class import (
    DEFAULT_MAIN_CLASS_PROBES,
    MainClassProbe,
    SearchMode,
    resolve_main_class,
)
from .meta import PROGRAM_ENV, PROGRAM_PACKAGE
from .options import (
    NativeCompileOptions,
    NativeCompileOptionsResolved,
    resolve_options,
    validate_options,
)
from .project import (
    BuildStepDescriptor,
    ExecutionDescriptor,
    ProjectModel,
    evaluator_for_project,
    load_project,
    project_from_dict,
)
from .resolve import ResolvedOutputs, resolve_native_compile
from .sbom import SbomDecision, SbomOverride, check_version_supported, decide_sbom


__all__ = [  # noqa: RUF022
    # build_args
    "BuildArguments",
    # capabilities
    "CapabilityFacts",
    "ToolchainEdition",
    "clear_capability_cache",
    "detect_capabilities",
    "detect_edition",
    "parse_major_version",
    "probe_toolchain",
    "query_version_text",
    # config_tree
    "Branch",
    "ConfigNode",
    "Leaf",
    "read_config_value",
    "tree_from_raw",
    # constants
    "AUGMENTED_SBOM_PARAM_NAME",
    "DEFAULT_ENV_LOG_LEVEL",
    "DEFAULT_LOG_LEVEL",
    "ORACLE_GRAALVM_IDENTIFIER",
    "SBOM_ENABLE_FLAG",
    "SBOM_MIN_MAJOR_VERSION",
    # errors
    "ConfigurationError",
    "ExpressionEvaluationError",
    "NativeCompileError",
    # events
    "EventKind",
    "EventSink",
    "ResolutionEvent",
    # expressions
    "ExpressionEvaluator",
    "PropertyExpressionEvaluator",
    "resolve_expression",
    # goal
    "GoalResult",
    "ImageBuilder",
    "SbomGenerator",
    "execute_compile_no_fork",
    # logs
    "getAppLogger",
    # main_class
    "DEFAULT_MAIN_CLASS_PROBES",
    "MainClassProbe",
    "SearchMode",
    "resolve_main_class",
    # meta
    "PROGRAM_ENV",
    "PROGRAM_PACKAGE",
    # options
    "NativeCompileOptions",
    "NativeCompileOptionsResolved",
    "resolve_options",
    "validate_options",
    # project
    "BuildStepDescriptor",
    "ExecutionDescriptor",
    "ProjectModel",
    "evaluator_for_project",
    "load_project",
    "project_from_dict",
    # resolve
    "ResolvedOutputs",
    "resolve_native_compile",
    # sbom
    "SbomDecision",
    "SbomOverride",
    "check_version_supported",
    "decide_sbom",
]
