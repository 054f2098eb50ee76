# src/native_compile/build_args.py
"""Arguments handed to the native-image invocation."""

from collections.abc import Iterable, Iterator


class BuildArguments:
    """Append-only, ordered list of argument tokens.

    Duplicates are kept. Callers that need idempotent appends check
    ``contains()`` first.
    """

    def __init__(self, initial: Iterable[str] = ()) -> None:
        self._tokens: list[str] = list(initial)

    def append(self, token: str) -> None:
        self._tokens.append(token)

    def extend(self, tokens: Iterable[str]) -> None:
        self._tokens.extend(tokens)

    def contains(self, fragment: str) -> bool:
        """True if any token contains ``fragment`` (e.g. a flag with a value)."""
        return any(fragment in token for token in self._tokens)

    def tokens(self) -> tuple[str, ...]:
        return tuple(self._tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._tokens))

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f"BuildArguments({self._tokens!r})"
