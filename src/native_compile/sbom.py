# src/native_compile/sbom.py
"""Decide whether an augmented SBOM should be produced for this build.

Four outcomes, depending on the user's ``augmentedSBOM`` setting:

1. set to false: nothing happens, no capability checks.
2. set to true: the toolchain must be Oracle GraalVM for JDK 24 or later,
   otherwise the build fails with ConfigurationError. ``--enable-sbom`` is
   added to the arguments unless already there.
3. not set, ``--enable-sbom`` not among the arguments: nothing happens.
4. not set, ``--enable-sbom`` already among the arguments: an SBOM is
   requested if the toolchain supports it, otherwise skipped quietly.

Only case 2 can fail the build.
"""

from dataclasses import dataclass
from enum import Enum

from .build_args import BuildArguments
from .capabilities import CapabilityFacts
from .constants import (
    AUGMENTED_SBOM_PARAM_NAME,
    ORACLE_GRAALVM_IDENTIFIER,
    SBOM_ENABLE_FLAG,
    SBOM_MIN_MAJOR_VERSION,
)
from .errors import ConfigurationError
from .events import EventKind, EventSink, ResolutionEvent, emit
from .logs import getAppLogger


class SbomOverride(str, Enum):
    UNSET = "unset"
    TRUE = "true"
    FALSE = "false"

    @classmethod
    def from_optional(cls, value: bool | None) -> "SbomOverride":
        if value is None:
            return cls.UNSET
        return cls.TRUE if value else cls.FALSE


@dataclass(frozen=True)
class SbomDecision:
    requested: bool
    appended: bool = False


def check_version_supported(major_version: int, *, fail: bool) -> bool:
    """Return whether ``major_version`` supports augmented SBOMs.

    With ``fail=True`` an unsupported version raises ConfigurationError.
    """
    if major_version >= SBOM_MIN_MAJOR_VERSION:
        return True
    if fail:
        xmsg = (
            f"Configuration option {AUGMENTED_SBOM_PARAM_NAME} is only supported in"
            f" {ORACLE_GRAALVM_IDENTIFIER} for JDK {SBOM_MIN_MAJOR_VERSION} or later."
            f" Current JDK version is {major_version}."
        )
        raise ConfigurationError(
            xmsg,
            requirement="jdk_version",
            required=SBOM_MIN_MAJOR_VERSION,
            actual=major_version,
        )
    return False


def _require_oracle(facts: CapabilityFacts) -> None:
    if facts.is_oracle:
        return
    xmsg = (
        f"Configuration option {AUGMENTED_SBOM_PARAM_NAME} is only supported"
        f" in {ORACLE_GRAALVM_IDENTIFIER}."
    )
    raise ConfigurationError(
        xmsg,
        requirement="edition",
        required=ORACLE_GRAALVM_IDENTIFIER,
        actual=facts.edition.value,
    )


def _decide_explicit(
    facts: CapabilityFacts,
    args: BuildArguments,
    on_event: EventSink | None,
) -> SbomDecision:
    _require_oracle(facts)
    check_version_supported(facts.major_version, fail=True)

    if args.contains(SBOM_ENABLE_FLAG):
        return SbomDecision(requested=True)

    args.append(SBOM_ENABLE_FLAG)
    message = (
        f"Automatically added build argument {SBOM_ENABLE_FLAG} to Native Image"
        f" because configuration option {AUGMENTED_SBOM_PARAM_NAME} was set to"
        " true. An SBOM will be embedded in the image."
    )
    getAppLogger().info(message)
    emit(
        on_event,
        ResolutionEvent(
            EventKind.SBOM_ARGUMENT_ADDED, message, {"argument": SBOM_ENABLE_FLAG}
        ),
    )
    return SbomDecision(requested=True, appended=True)


def _decide_implicit(
    facts: CapabilityFacts,
    on_event: EventSink | None,
) -> SbomDecision:
    if facts.is_oracle and check_version_supported(facts.major_version, fail=False):
        return SbomDecision(requested=True)

    message = (
        f"{SBOM_ENABLE_FLAG} is set but the toolchain"
        f" ({facts.edition.value}, JDK {facts.major_version}) cannot produce an"
        " augmented SBOM; skipping it."
    )
    getAppLogger().debug(message)
    emit(
        on_event,
        ResolutionEvent(
            EventKind.SBOM_SKIPPED,
            message,
            {
                "edition": facts.edition.value,
                "major_version": facts.major_version,
            },
        ),
    )
    return SbomDecision(requested=False)


def decide_sbom(
    override: SbomOverride,
    facts: CapabilityFacts,
    args: BuildArguments,
    on_event: EventSink | None = None,
) -> SbomDecision:
    """Apply the augmented SBOM policy, appending to ``args`` when needed.

    Raises:
        ConfigurationError: ``override`` is TRUE and the toolchain is not
            Oracle GraalVM or is older than JDK 24.
    """
    if override is SbomOverride.FALSE:
        return SbomDecision(requested=False)

    if override is SbomOverride.TRUE:
        return _decide_explicit(facts, args, on_event)

    if not args.contains(SBOM_ENABLE_FLAG):
        return SbomDecision(requested=False)

    return _decide_implicit(facts, on_event)
