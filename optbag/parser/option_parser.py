# OptBag Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `OptionParser`, the public entry point of OptBag.

Callers register options with `add()`, then call `parse()` to run the argument
list through the tokenizer and resolver. Results land in the parser's own
`VariableBag`, available as `parser.vars`.

Key Features:
- Short (`-v`), multi-character short (`-regex`) and long (`--verbose`) keys
- POSIX-style clusters for single-character flags (`-abc`)
- Strict adjacency for flags that take a value (`-b 1 -e 2`)
- `--` to cancel the leading dash of the next argument
- `-` for standard input, `.` and `..` for the working directory and its parent
- Rich-powered help listing

Public Interface:
- `add(...)`: Register a new option.
- `parse(...)`: Parse an argument list into the variable bag.
- `quiet(...)`: Toggle registration warnings.
- `hasvar(...)`: Check whether a dest received a value.
- `read_pipe()`: Read standard input on demand.
- `render_help(...)`: Print the help listing.

Example Usage:
    parser = OptionParser("Copy a byte range")
    parser.add(["-b", "--begin"], "begin", "number", "First byte")
    parser.add(["-e", "--end"], "end", "number", "Last byte")
    parser.add("-v", "verbose", "true", "Print progress")

    bag = parser.parse(["-v", "-b", "1", "-e", "2", "file.bin"])

    # bag.as_dict() == {'input': ['file.bin'], 'verbose': True, 'begin': 1, 'end': 2}
"""
from __future__ import annotations

import sys
from typing import Any, Iterable, Sequence, TextIO

from rich.console import Console
from rich.markup import escape

from optbag.console import console as optbag_console
from optbag.exceptions import ConfigError, OptBagError
from optbag.logger import logger
from optbag.parser.option import Option
from optbag.parser.option_action import OptionAction
from optbag.parser.option_config import OptionConfig, build_option_config
from optbag.parser.registry import OptionRegistry
from optbag.parser.resolver import Resolver
from optbag.parser.tokenizer import Tokenizer
from optbag.parser.variable_bag import VariableBag
from optbag.utils import read_stdin, strip_program_entries

DEFAULT_DESCRIPTION = "No description"
HELP_BANNER = "--------HELP--------"


class OptionParser:
    """
    Command-line option parser filling a per-instance variable bag.

    Args:
        description (str): What the program does.
        verbose (bool): Emit non-fatal warnings through the `optbag` logger.
        stdin (TextIO | None): Stream read for `-`. Defaults to `sys.stdin` at
            parse time.
        console (Console | None): Console used for help output.
    """

    def __init__(
        self,
        description: str = DEFAULT_DESCRIPTION,
        verbose: bool = True,
        stdin: TextIO | None = None,
        console: Console | None = None,
    ) -> None:
        self.description: str = str(description)
        self.registry: OptionRegistry = OptionRegistry(verbose=verbose)
        self.vars: VariableBag = VariableBag()
        self.console: Console = console or optbag_console
        self._stdin: TextIO | None = stdin
        self._resolver: Resolver = Resolver(self.registry)

    @property
    def verbose(self) -> bool:
        return self.registry.verbose

    @verbose.setter
    def verbose(self, value: bool) -> None:
        self.registry.verbose = bool(value)

    @property
    def stdin(self) -> TextIO | None:
        return self._stdin if self._stdin is not None else sys.stdin

    def add(
        self,
        keys: str | Iterable[str],
        dest: str,
        action: str | OptionAction,
        help: str | None = None,
        **extra: Any,
    ) -> Option:
        """
        Register a new option.

        Args:
            keys (str | Iterable[str]): One key or several (e.g. "-v", ["-v", "--verbose"]).
            dest (str): Destination name in the variable bag.
            action (str | OptionAction): What the flag does.
            help (str | None): Help text. A placeholder is used when missing.
            **extra: Ignored, with a warning when verbose.

        Returns:
            Option: The registered option.

        Raises:
            ConfigError: If any field is invalid or collides with an existing option.
        """
        return self.add_option(
            build_option_config(keys, dest, action, help, **extra)
        )

    def add_option(self, config: OptionConfig) -> Option:
        """Register an option from an already validated `OptionConfig`."""
        return self.registry.add(config)

    def add_options(self, configs: Iterable[OptionConfig]) -> list[Option]:
        return [self.add_option(config) for config in configs]

    def quiet(self, be_quiet: bool = True) -> bool:
        """
        Silence (or re-enable) warnings.

        Returns:
            bool: The new verbose setting.
        """
        self.verbose = not be_quiet
        logger.debug("Parser verbose set to %s", self.verbose)
        return self.verbose

    def read_pipe(self) -> str:
        """Read all of standard input."""
        return read_stdin(self.stdin)

    def parse(self, args: Sequence[str] | None = None) -> VariableBag:
        """
        Parse an argument list into the variable bag.

        Args:
            args (Sequence[str] | None): Arguments without program entries.
                Defaults to `sys.argv` with the program entries stripped.

        Returns:
            VariableBag: `self.vars`, reset and refilled. After a failed parse the
            bag is left empty.

        Raises:
            ParseError: If the arguments cannot be tokenized or resolved.
            ConfigError: If an option stores into the reserved `input` dest.
        """
        if args is None:
            args = strip_program_entries(sys.argv)
        tokenizer = Tokenizer(self.registry, stdin=self.stdin)
        self.vars.reset()
        try:
            stream = tokenizer.tokenize(args)
            self._resolver.resolve(stream, self.vars)
        except OptBagError:
            self.vars.reset()
            raise
        logger.debug("Parsed %s", self.vars)
        return self.vars

    def hasvar(self, name: str) -> bool:
        """Return True if a value is stored under `name`."""
        return self.vars.has(str(name))

    def get_option(self, key: str) -> Option | None:
        return self.registry.get(key)

    def render_help(self, *keys: str) -> None:
        """
        Print the help listing.

        Prints a banner followed by `<keys>: <help>` for each requested key, or for
        every registered option when no key is given.

        Raises:
            ConfigError: If a requested key is not registered.
        """
        if keys:
            options = []
            for key in keys:
                option = self.registry.get(str(key))
                if option is None:
                    raise ConfigError(
                        f"Cannot get help info of unknown option '{key}'"
                    )
                options.append(option)
        else:
            options = list(self.registry)

        self.console.print(HELP_BANNER)
        for option in options:
            self.console.print(
                f"{escape(option.get_keys_text())}: {escape(option.help)}", soft_wrap=True
            )

    def __str__(self) -> str:
        return (
            f"OptionParser(description={self.description!r}, "
            f"options={len(self.registry)}, verbose={self.verbose})"
        )

    def __repr__(self) -> str:
        return str(self)
