# src/native_compile/config_tree.py
"""Read-only configuration trees.

A plugin or execution configuration is a tree of named children ending in
string leaves. ``Leaf`` and ``Branch`` are the only node shapes; readers
handle both explicitly and treat anything else as absent.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class Leaf:
    value: str


@dataclass(frozen=True)
class Branch:
    children: Mapping[str, "ConfigNode"] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def child(self, name: str) -> "ConfigNode | None":
        return self.children.get(name)


ConfigNode = Leaf | Branch


def read_config_value(node: Any, path: Sequence[str]) -> str | None:
    """Follow ``path`` from ``node`` and return the leaf value found there.

    Returns None when any step is missing, when a leaf is reached before
    the path is exhausted, or when the path ends on a branch. Objects that
    are not config nodes at all are treated as absent.
    """
    current: Any = node
    for name in path:
        if not isinstance(current, Branch):
            return None
        current = current.child(name)
        if current is None:
            return None

    if isinstance(current, Leaf):
        return current.value
    return None


def _scalar_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _branch_from_list(items: Sequence[Any]) -> Branch:
    # Repeated XML-style elements arrive as lists. Each element is addressable
    # by position, and single-key mappings also by their key (first one wins).
    # The first element's own children are reachable through the list itself,
    # so `transformer/mainClass` reads the first `transformer`.
    children: dict[str, ConfigNode] = {}
    first: ConfigNode | None = None
    for index, item in enumerate(items):
        child = tree_from_raw(item)
        if child is None:
            continue
        if first is None:
            first = child
        children[str(index)] = child
        if isinstance(item, Mapping) and len(item) == 1:  # pyright: ignore[reportUnknownArgumentType]
            (name,) = item.keys()  # pyright: ignore[reportUnknownVariableType]
            inner = child.child(str(name)) if isinstance(child, Branch) else None  # pyright: ignore[reportUnknownArgumentType]
            if inner is not None:
                children.setdefault(str(name), inner)  # pyright: ignore[reportUnknownArgumentType]
    if isinstance(first, Branch):
        for name, inner in first.children.items():
            children.setdefault(name, inner)
    return Branch(MappingProxyType(children))


def tree_from_raw(raw: Any) -> ConfigNode | None:
    """Build a config tree from parsed data (dicts, lists and scalars).

    Mappings become branches and scalars become leaves. ``None`` and
    unsupported objects are absent. Existing nodes pass through.
    """
    if raw is None:
        return None
    if isinstance(raw, (Leaf, Branch)):
        return raw
    if isinstance(raw, Mapping):
        children: dict[str, ConfigNode] = {}
        for key, value in raw.items():  # pyright: ignore[reportUnknownVariableType]
            child = tree_from_raw(value)
            if child is not None:
                children[str(key)] = child  # pyright: ignore[reportUnknownArgumentType]
        return Branch(MappingProxyType(children))
    if isinstance(raw, (list, tuple)):
        return _branch_from_list(raw)  # pyright: ignore[reportUnknownArgumentType]
    if isinstance(raw, (str, int, float, bool)):
        return Leaf(_scalar_text(raw))
    return None
