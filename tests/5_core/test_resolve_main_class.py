# tests/5_core/test_resolve_main_class.py
"""Tests for resolve_main_class function."""

import native_compile.constants as mod_constants
import native_compile.events as mod_events
import native_compile.expressions as mod_expr
import native_compile.main_class as mod_main
from tests.utils import (
    ExplodingProbes,
    StaticEvaluator,
    make_project,
    make_step,
    manifest_config,
    shade_config,
)


IDENTITY = StaticEvaluator({})


def _literal_evaluator() -> mod_expr.PropertyExpressionEvaluator:
    return mod_expr.PropertyExpressionEvaluator({})


def test_resolve_main_class_explicit_value_wins() -> None:
    """Should return the explicit value without consulting probes."""
    project = make_project(
        make_step(mod_constants.JAR_PLUGIN_KEY, manifest_config("com.example.Jar"))
    )

    result = mod_main.resolve_main_class(
        "com.example.Explicit", ExplodingProbes(), project, _literal_evaluator()
    )

    assert result == "com.example.Explicit"


def test_resolve_main_class_no_matching_step() -> None:
    """Should return None when no probed step is declared."""
    project = make_project(
        make_step("org.example:other-plugin", manifest_config("com.example.Other"))
    )

    result = mod_main.resolve_main_class(
        None, mod_main.DEFAULT_MAIN_CLASS_PROBES, project, _literal_evaluator()
    )

    assert result is None


def test_resolve_main_class_empty_probe_list() -> None:
    """Should return None when there is nothing to probe."""
    project = make_project(
        make_step(mod_constants.JAR_PLUGIN_KEY, manifest_config("com.example.Jar"))
    )
    assert mod_main.resolve_main_class(None, (), project, _literal_evaluator()) is None


def test_resolve_main_class_probe_order_beats_declaration_order() -> None:
    """Shade is probed before jar regardless of how the project lists them."""
    project = make_project(
        make_step(mod_constants.JAR_PLUGIN_KEY, manifest_config("com.example.Jar")),
        make_step(
            mod_constants.SHADE_PLUGIN_KEY,
            executions=[("shade", shade_config("com.example.Shaded"))],
        ),
    )

    result = mod_main.resolve_main_class(
        None, mod_main.DEFAULT_MAIN_CLASS_PROBES, project, _literal_evaluator()
    )

    assert result == "com.example.Shaded"


def test_resolve_main_class_per_execution_uses_first_execution_with_value() -> None:
    """Executions are searched in declared order, skipping ones without a value."""
    events: list[mod_events.ResolutionEvent] = []
    project = make_project(
        make_step(
            mod_constants.SHADE_PLUGIN_KEY,
            executions=[
                ("no-config", None),
                ("other", {"minimizeJar": True}),
                ("with-main", shade_config("com.example.Second")),
                ("later", shade_config("com.example.Third")),
            ],
        ),
    )

    result = mod_main.resolve_main_class(
        None,
        mod_main.DEFAULT_MAIN_CLASS_PROBES,
        project,
        _literal_evaluator(),
        on_event=events.append,
    )

    assert result == "com.example.Second"
    assert len(events) == 1
    assert events[0].kind is mod_events.EventKind.MAIN_CLASS_RESOLVED
    assert events[0].details["execution_id"] == "with-main"
    assert events[0].details["step_key"] == mod_constants.SHADE_PLUGIN_KEY


def test_resolve_main_class_direct_mode_ignores_executions() -> None:
    """Direct probes only read the step's own configuration."""
    project = make_project(
        make_step(
            mod_constants.JAR_PLUGIN_KEY,
            executions=[("default-jar", manifest_config("com.example.InExecution"))],
        ),
    )

    result = mod_main.resolve_main_class(
        None, mod_main.DEFAULT_MAIN_CLASS_PROBES, project, _literal_evaluator()
    )

    assert result is None


def test_resolve_main_class_first_successful_probe_wins() -> None:
    """An unresolvable value does not stop the search."""
    probes = (
        mod_main.MainClassProbe(
            "org.example:first", mod_main.SearchMode.DIRECT, ("main",)
        ),
        mod_main.MainClassProbe(
            "org.example:second", mod_main.SearchMode.DIRECT, ("main",)
        ),
    )
    project = make_project(
        make_step("org.example:first", {"main": "${undefined.property}"}),
        make_step("org.example:second", {"main": "com.example.Second"}),
    )

    result = mod_main.resolve_main_class(None, probes, project, _literal_evaluator())

    assert result == "com.example.Second"


def test_resolve_main_class_evaluates_expressions() -> None:
    """Values found in configuration go through the evaluator."""
    project = make_project(
        make_step(mod_constants.ASSEMBLY_PLUGIN_KEY, manifest_config("${start.class}")),
    )
    evaluator = mod_expr.PropertyExpressionEvaluator(
        {"start.class": "com.example.FromProperty"}
    )

    result = mod_main.resolve_main_class(
        None, mod_main.DEFAULT_MAIN_CLASS_PROBES, project, evaluator
    )

    assert result == "com.example.FromProperty"


def test_resolve_main_class_non_string_evaluation_skipped() -> None:
    """A value evaluating to a non-string counts as not found."""
    project = make_project(
        make_step(mod_constants.ASSEMBLY_PLUGIN_KEY, manifest_config("${obj}")),
        make_step(mod_constants.JAR_PLUGIN_KEY, manifest_config("com.example.Jar")),
    )
    evaluator = StaticEvaluator(
        {"${obj}": object(), "com.example.Jar": "com.example.Jar"}
    )

    result = mod_main.resolve_main_class(
        None, mod_main.DEFAULT_MAIN_CLASS_PROBES, project, evaluator
    )

    assert result == "com.example.Jar"
    assert evaluator.seen == ["${obj}", "com.example.Jar"]


def test_resolve_main_class_no_event_without_match() -> None:
    """No event is emitted when nothing resolves."""
    events: list[mod_events.ResolutionEvent] = []

    result = mod_main.resolve_main_class(
        None,
        mod_main.DEFAULT_MAIN_CLASS_PROBES,
        make_project(),
        IDENTITY,
        on_event=events.append,
    )

    assert result is None
    assert events == []
