# src/native_compile/capabilities.py
"""Toolchain capability detection.

Facts are derived from the text printed by ``native-image --version``.
Anything that cannot be parsed degrades toward "unsupported": an unknown
edition is Community and an unknown version is 0.
"""

import re
import shutil
import subprocess
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .constants import (
    DEFAULT_NATIVE_IMAGE_EXECUTABLE,
    DEFAULT_VERSION_TIMEOUT,
    LEGACY_ENTERPRISE_PATTERN,
    ORACLE_GRAALVM_IDENTIFIER,
    UNKNOWN_MAJOR_VERSION,
)
from .logs import getAppLogger


class ToolchainEdition(str, Enum):
    COMMUNITY = "community"
    ORACLE = "oracle"


@dataclass(frozen=True)
class CapabilityFacts:
    edition: ToolchainEdition
    major_version: int

    @property
    def is_oracle(self) -> bool:
        return self.edition is ToolchainEdition.ORACLE


# Tried in order; the first pattern that matches any line wins.
_VERSION_PATTERNS: tuple[re.Pattern[str], ...] = (
    # native-image 24.0.1 2025-01-21
    re.compile(r"^\s*native-image\s+(\d+)"),
    # GraalVM 22.3.0 Java 17 CE (Java Version 17.0.5+8-jvmci-22.3-b08)
    re.compile(r"^\s*GraalVM\b.*?\bJava\s+(\d+)"),
    # openjdk version "21.0.1" 2023-10-17
    re.compile(r'\bversion\s+"(\d+)'),
    # 21.0.1
    re.compile(r"^\s*(\d+)(?:[.+\s-]|$)"),
)

_LEGACY_ENTERPRISE = re.compile(LEGACY_ENTERPRISE_PATTERN)

_capability_cache: dict[str, CapabilityFacts] = {}


def detect_edition(version_text: str) -> ToolchainEdition:
    if ORACLE_GRAALVM_IDENTIFIER in version_text:
        return ToolchainEdition.ORACLE
    if _LEGACY_ENTERPRISE.search(version_text):
        return ToolchainEdition.ORACLE
    return ToolchainEdition.COMMUNITY


def parse_major_version(version_text: str) -> int:
    """Return the major JDK version from ``version_text``, or 0."""
    lines = version_text.splitlines()
    for pattern in _VERSION_PATTERNS:
        for line in lines:
            match = pattern.search(line)
            if match:
                return int(match.group(1))

    getAppLogger().debug("Could not parse a version from %r", version_text)
    return UNKNOWN_MAJOR_VERSION


def detect_capabilities(version_text: str) -> CapabilityFacts:
    facts = CapabilityFacts(
        edition=detect_edition(version_text),
        major_version=parse_major_version(version_text),
    )
    getAppLogger().debug(
        "Detected toolchain: edition=%s, major version=%d",
        facts.edition.value,
        facts.major_version,
    )
    return facts


def query_version_text(
    executable: str = DEFAULT_NATIVE_IMAGE_EXECUTABLE,
    *,
    timeout: float = DEFAULT_VERSION_TIMEOUT,
) -> str:
    """Run ``<executable> --version`` and return its output, or "" on failure."""
    logger = getAppLogger()
    try:
        result = subprocess.run(  # noqa: S603
            [executable, "--version"],
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.warning("Could not query %s version: %s", executable, e)
        return ""

    if result.returncode != 0:
        logger.warning(
            "%s --version exited with code %d", executable, result.returncode
        )
        return ""
    return result.stdout or result.stderr


def _toolchain_identity(executable: str) -> tuple[str, str]:
    """Return the command to run and the cache key for ``executable``."""
    located = shutil.which(executable)
    if located is None:
        return executable, executable
    return located, str(Path(located).resolve())


def probe_toolchain(
    executable: str = DEFAULT_NATIVE_IMAGE_EXECUTABLE,
    *,
    timeout: float = DEFAULT_VERSION_TIMEOUT,
) -> CapabilityFacts:
    """Detect capabilities once per toolchain installation.

    Results are cached by the resolved executable path, so distinct
    installations never share facts.
    """
    command, identity = _toolchain_identity(executable)
    cached = _capability_cache.get(identity)
    if cached is not None:
        return cached

    facts = detect_capabilities(query_version_text(command, timeout=timeout))
    _capability_cache[identity] = facts
    return facts


def clear_capability_cache() -> None:
    _capability_cache.clear()
