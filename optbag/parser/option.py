# OptBag Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Option` dataclass, the immutable record of one registered option.

Options are created by `OptionRegistry.add()` after validation and are never
modified afterwards. The registry owns them for the lifetime of the parser.

Key Attributes:
- `keys`: One or more short/long flags (e.g. `-v`, `--verbose`)
- `dest`: Name under which the parsed value is stored in the variable bag
- `action`: `OptionAction` describing what the flag does
- `help`: Text shown by the help listing
"""
import re
from dataclasses import dataclass

from optbag.parser.option_action import OptionAction

KEY_PATTERN = re.compile(r"-{1,2}[A-Za-z0-9]+")
SHORT_FLAG_PATTERN = re.compile(r"-[A-Za-z0-9]+")
LONG_FLAG_PATTERN = re.compile(r"--[A-Za-z0-9]+")

RESERVED_DEST = "input"
DEFAULT_HELP = "No help message."


def is_valid_key(key: object) -> bool:
    """Check whether `key` follows the flag syntax `-x`, `-xyz` or `--name`."""
    return isinstance(key, str) and KEY_PATTERN.fullmatch(key) is not None


@dataclass(frozen=True)
class Option:
    """
    Represents a registered command-line option.

    Attributes:
        keys (tuple[str, ...]): Flags that select this option.
        dest (str): The destination name for the parsed value.
        action (OptionAction): The action taken when a key is encountered.
        help (str): Help text for the option.
    """

    keys: tuple[str, ...]
    dest: str
    action: OptionAction = OptionAction.NONE
    help: str = DEFAULT_HELP

    def get_keys_text(self) -> str:
        """Return the keys as they appear in the help listing."""
        return ", ".join(self.keys)

    def __str__(self) -> str:
        return f"Option(keys={self.get_keys_text()}, dest={self.dest}, action={self.action})"
