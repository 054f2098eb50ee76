# src/native_compile/utils_types.py


from types import UnionType
from typing import Any, Literal, Union, cast, get_args, get_origin, get_type_hints

from typing_extensions import NotRequired


def schema_from_typeddict(td: type[Any]) -> dict[str, Any]:
    """Extract field names and their annotated types from a TypedDict."""
    return get_type_hints(td, include_extras=True)


def safe_isinstance(value: Any, expected_type: Any) -> bool:  # noqa: PLR0911
    """Like isinstance(), but understands the typing constructs options use.

    Handles Any, NotRequired, Literal, unions (including Optional) and
    list[...] with an inner type.
    """
    if expected_type is Any:
        return True

    origin = get_origin(expected_type)
    args = get_args(expected_type)

    if origin is NotRequired:
        return safe_isinstance(value, args[0]) if args else True

    if origin is Literal:
        return value in args

    if origin in {Union, UnionType}:
        return any(safe_isinstance(value, t) for t in args)

    if origin is list:
        if not isinstance(value, list):
            return False
        items = cast("list[Any]", value)
        return not args or all(safe_isinstance(v, args[0]) for v in items)

    # bool is an int subclass; options never accept one for the other
    if expected_type is int and isinstance(value, bool):
        return False

    try:
        return isinstance(value, expected_type)
    except TypeError:
        return False
