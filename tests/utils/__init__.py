# tests/utils/__init__.py

from .constants import (
    COMMUNITY_24_VERSION_TEXT,
    DEFAULT_TEST_LOG_LEVEL,
    LEGACY_CE_VERSION_TEXT,
    ORACLE_21_VERSION_TEXT,
    ORACLE_24_VERSION_TEXT,
)
from .factories import (
    ExplodingProbes,
    RecordingImageBuilder,
    RecordingSbomGenerator,
    StaticEvaluator,
    make_facts,
    make_project,
    make_step,
    manifest_config,
    shade_config,
)


__all__ = [  # noqa: RUF022
    # constants
    "COMMUNITY_24_VERSION_TEXT",
    "DEFAULT_TEST_LOG_LEVEL",
    "LEGACY_CE_VERSION_TEXT",
    "ORACLE_21_VERSION_TEXT",
    "ORACLE_24_VERSION_TEXT",
    # factories
    "ExplodingProbes",
    "RecordingImageBuilder",
    "RecordingSbomGenerator",
    "StaticEvaluator",
    "make_facts",
    "make_project",
    "make_step",
    "manifest_config",
    "shade_config",
]
