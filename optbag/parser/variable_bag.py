# OptBag Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `VariableBag`, the parser's externally visible result.

The bag maps each dest to the value stored by its flag and keeps the ordered
positional strings under the reserved `input` entry. Each parser owns exactly one
bag; it is reset at the start of every parse.
"""
from __future__ import annotations

from typing import Any, Iterator

from optbag.parser.option import RESERVED_DEST


class VariableBag:
    """
    Parsed values keyed by dest, plus the positional `input` list.

    Example:
        bag["begin"]        # 1
        bag.input           # ["file.txt"]
        bag.as_dict()       # {"input": ["file.txt"], "begin": 1}
    """

    def __init__(self) -> None:
        self.input: list[str] = []
        self._values: dict[str, Any] = {}

    def store(self, dest: str, value: Any) -> None:
        self._values[dest] = value

    def append_input(self, text: str) -> None:
        self.input.append(text)

    def reset(self) -> None:
        """Clear stored values and positional input."""
        self.input = []
        self._values = {}

    def get(self, dest: str, default: Any = None) -> Any:
        if dest == RESERVED_DEST:
            return self.input
        return self._values.get(dest, default)

    def has(self, dest: str) -> bool:
        """Return True if a value was stored under `dest` (`input` always exists)."""
        return dest == RESERVED_DEST or self._values.get(dest) is not None

    def as_dict(self) -> dict[str, Any]:
        return {RESERVED_DEST: list(self.input), **self._values}

    def __getitem__(self, dest: str) -> Any:
        if dest == RESERVED_DEST:
            return self.input
        return self._values[dest]

    def __contains__(self, dest: object) -> bool:
        return dest == RESERVED_DEST or dest in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self.as_dict())

    def __len__(self) -> int:
        return len(self._values) + 1

    def __eq__(self, other: object) -> bool:
        if isinstance(other, VariableBag):
            return self.as_dict() == other.as_dict()
        if isinstance(other, dict):
            return self.as_dict() == other
        return False

    def __str__(self) -> str:
        return f"VariableBag({self.as_dict()})"

    def __repr__(self) -> str:
        return str(self)
