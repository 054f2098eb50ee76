# src/native_compile/expressions.py
"""Build-system expression evaluation (``${property}`` placeholders)."""

import re
from collections import ChainMap
from collections.abc import Mapping
from typing import Any, Protocol

from .errors import ExpressionEvaluationError
from .logs import getAppLogger


_WHOLE_EXPRESSION = re.compile(r"^\$\{([^${}]+)\}$")


class ExpressionEvaluator(Protocol):
    def evaluate(self, expression: str) -> Any:
        """Return the evaluated value or raise ExpressionEvaluationError."""
        ...


class PropertyExpressionEvaluator:
    """Evaluate ``${name}`` placeholders against property mappings.

    A value that is exactly one placeholder evaluates to the property's
    value as stored, which may be any object. Placeholders embedded in
    longer text are interpolated with ``str()``. ``$${name}`` is an escape
    for a literal ``${name}``.

    Mappings are searched in the order given.
    """

    def __init__(self, *properties: Mapping[str, Any]) -> None:
        self._properties: ChainMap[str, Any] = ChainMap(*properties)

    def _lookup(self, name: str) -> Any:
        key = name.strip()
        if not key:
            xmsg = "Empty expression '${}'"
            raise ExpressionEvaluationError(xmsg)
        if key not in self._properties:
            xmsg = f"Unknown property {key!r}"
            raise ExpressionEvaluationError(xmsg)
        return self._properties[key]

    def evaluate(self, expression: str) -> Any:
        whole = _WHOLE_EXPRESSION.match(expression)
        if whole:
            return self._lookup(whole.group(1))

        parts: list[str] = []
        pos = 0
        while True:
            start = expression.find("${", pos)
            if start < 0:
                parts.append(expression[pos:])
                break

            end = expression.find("}", start + 2)
            if end < 0:
                xmsg = f"Unterminated expression in {expression!r}"
                raise ExpressionEvaluationError(xmsg)

            if start > pos and expression[start - 1] == "$":
                # escaped: drop one '$' and keep the placeholder text as-is
                parts.append(expression[pos : start - 1])
                parts.append(expression[start : end + 1])
            else:
                parts.append(expression[pos:start])
                parts.append(str(self._lookup(expression[start + 2 : end])))
            pos = end + 1

        return "".join(parts)


def resolve_expression(
    raw: str | None,
    evaluator: ExpressionEvaluator,
) -> str | None:
    """Evaluate ``raw`` and return the result only if it is a string.

    Evaluation failures and non-string results are treated as absent.
    """
    if raw is None:
        return None

    logger = getAppLogger()
    try:
        value = evaluator.evaluate(raw)
    except ExpressionEvaluationError as e:
        logger.debug("Could not evaluate %r: %s", raw, e)
        return None

    if isinstance(value, str):
        return value

    logger.debug(
        "Expression %r evaluated to %s, not a string", raw, type(value).__name__
    )
    return None
