# OptBag Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Implements `OptionRegistry`, the ordered collection of registered options.

The registry turns validated `OptionConfig` records into immutable `Option`
objects, enforces that keys and dest names are unique across all options, and
answers key lookups for the tokenizer and resolver.
"""
from __future__ import annotations

from typing import Iterator

from optbag.exceptions import ConfigError
from optbag.logger import logger
from optbag.parser.option import DEFAULT_HELP, Option
from optbag.parser.option_config import OptionConfig


class OptionRegistry:
    """
    Holds every `Option` known to a parser, in registration order.

    Attributes:
        verbose (bool): Emit registration warnings through the `optbag` logger.
    """

    def __init__(self, verbose: bool = True) -> None:
        self.verbose: bool = verbose
        self._options: list[Option] = []
        self._flag_map: dict[str, Option] = {}
        self._dest_set: set[str] = set()

    def _warn(self, message: str, *args) -> None:
        if self.verbose:
            logger.warning(message, *args)

    def add(self, config: OptionConfig) -> Option:
        """
        Register a new option.

        Args:
            config (OptionConfig): Validated registration fields.

        Returns:
            Option: The registered option.

        Raises:
            ConfigError: If a key or the dest is already used by another option.
        """
        for key in config.keys:
            if key in self._flag_map:
                existing = self._flag_map[key]
                raise ConfigError(
                    f"Collision, key '{key}' is already used by option '{existing.dest}'"
                )
        if config.dest in self._dest_set:
            raise ConfigError(f"Collision, dest '{config.dest}' is already defined")

        if config.has_help:
            help_text = config.help
        else:
            self._warn("Help message is empty for option '%s'", config.dest)
            help_text = DEFAULT_HELP
        if config.extra_fields:
            self._warn(
                "Extra parameters ignored for option '%s': %s",
                config.dest,
                ", ".join(config.extra_fields),
            )

        option = Option(
            keys=config.keys,
            dest=config.dest,
            action=config.action,
            help=help_text,
        )
        for key in option.keys:
            self._flag_map[key] = option
        self._dest_set.add(option.dest)
        self._options.append(option)
        logger.debug("Registered %s", option)
        return option

    def get(self, key: str) -> Option | None:
        """Return the option registered under `key`, if any."""
        return self._flag_map.get(key)

    def keys(self) -> list[str]:
        """Return every registered key in registration order."""
        return list(self._flag_map)

    def has_key(self, key: str) -> bool:
        return key in self._flag_map

    def __contains__(self, key: object) -> bool:
        return key in self._flag_map

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def __str__(self) -> str:
        return f"OptionRegistry(options={len(self._options)}, keys={len(self._flag_map)})"

    def __repr__(self) -> str:
        return str(self)
