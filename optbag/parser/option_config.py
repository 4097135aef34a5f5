# OptBag Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Registration-time model for a single option.

`OptionConfig` carries every field `OptionRegistry.add()` needs, with explicit
defaults, and validates everything that can be checked without looking at other
options: key syntax, dest syntax, the reserved `input` dest, and the action kind.
Checks that depend on the registry (key and dest collisions) live in
`OptionRegistry`.

Unknown fields are accepted and kept in `model_extra` so the registry can warn
about them instead of failing.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from optbag.exceptions import ConfigError
from optbag.parser.option import RESERVED_DEST, is_valid_key
from optbag.parser.option_action import OptionAction


class OptionConfig(BaseModel):
    """Validated registration fields for one option."""

    model_config = ConfigDict(frozen=True, extra="allow")

    keys: tuple[str, ...]
    dest: str
    action: OptionAction
    help: str | None = None

    @field_validator("keys", mode="before")
    @classmethod
    def normalize_keys(cls, value: Any) -> Any:
        if isinstance(value, str):
            return (value,)
        if value is None or isinstance(value, dict):
            raise ValueError("cannot read keys for new option")
        return value

    @field_validator("keys")
    @classmethod
    def validate_keys(cls, keys: tuple[str, ...]) -> tuple[str, ...]:
        if not keys:
            raise ValueError("keys cannot be empty")
        for key in keys:
            if not is_valid_key(key):
                raise ValueError(
                    f"key name '{key}' is invalid, expected '-x', '-xyz' or '--name'"
                )
        if len(set(keys)) != len(keys):
            raise ValueError(f"key repeated within option: {', '.join(keys)}")
        return keys

    @field_validator("dest")
    @classmethod
    def validate_dest(cls, dest: str) -> str:
        if not dest:
            raise ValueError("dest cannot be empty")
        if not dest.replace("_", "").isalnum() or not dest.isascii():
            raise ValueError(
                "dest must be a valid identifier (letters, digits, and underscores only)"
            )
        if dest[0].isdigit():
            raise ValueError("dest must not start with a digit")
        if dest == RESERVED_DEST:
            raise ValueError(
                f"cannot use the reserved word '{RESERVED_DEST}' for destination"
            )
        return dest

    @field_validator("action", mode="before")
    @classmethod
    def validate_action(cls, action: Any) -> OptionAction:
        if isinstance(action, OptionAction):
            return action
        # YAML reads a bare `true`/`false` as a boolean
        if isinstance(action, bool):
            action = str(action).lower()
        return OptionAction(action)

    @property
    def has_help(self) -> bool:
        return bool(self.help and self.help.strip())

    @property
    def extra_fields(self) -> list[str]:
        return sorted(self.model_extra or {})


def format_validation_error(error: ValidationError) -> str:
    """Flatten a pydantic `ValidationError` into one readable line."""
    messages = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"])
        message = detail["msg"].removeprefix("Value error, ")
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages)


def build_option_config(
    keys: Any, dest: Any, action: Any, help: str | None = None, **extra: Any
) -> OptionConfig:
    """
    Build an `OptionConfig`, converting validation failures into `ConfigError`.

    Raises:
        ConfigError: If any field is invalid.
    """
    try:
        return OptionConfig(keys=keys, dest=dest, action=action, help=help, **extra)
    except ValidationError as error:
        raise ConfigError(
            f"Invalid option definition: {format_validation_error(error)}"
        ) from error
