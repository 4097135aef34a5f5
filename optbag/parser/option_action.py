# OptBag Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionAction`, the enum describing what a registered flag does when it
is found on the command line.

Supports alias coercion for the legacy `save_*` spellings and a few short forms,
so option definitions loaded from YAML or TOML can use whichever is convenient.

Example:
    OptionAction("number")   → OptionAction.NUMBER
    OptionAction("save_num") → OptionAction.NUMBER (via alias)
    OptionAction("TRUE")     → OptionAction.TRUE
"""
from __future__ import annotations

from enum import Enum


class OptionAction(Enum):
    """
    Defines the action to be taken when a flag is encountered.

    Members:
        NONE: Presence only, nothing is stored.
        NUMBER: Store the adjacent argument parsed as a number.
        STRING: Store the adjacent argument verbatim.
        TRUE: Store `True`.
        FALSE: Store `False`.

    Aliases:
        - "save_none" → "none"
        - "save_num", "num" → "number"
        - "save_str", "str" → "string"
        - "save_true" → "true"
        - "save_false" → "false"
    """

    NONE = "none"
    NUMBER = "number"
    STRING = "string"
    TRUE = "true"
    FALSE = "false"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "save_none": "none",
            "save_num": "number",
            "num": "number",
            "save_str": "string",
            "str": "string",
            "save_true": "true",
            "save_false": "false",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> OptionAction:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def takes_value(self) -> bool:
        """True if the action consumes the adjacent argument."""
        return self in (OptionAction.NUMBER, OptionAction.STRING)

    def __str__(self) -> str:
        """Return the string representation of the option action."""
        return self.value
