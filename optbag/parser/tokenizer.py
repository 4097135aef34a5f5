# OptBag Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Implements `Tokenizer`, the first stage of parsing.

The tokenizer walks the raw argument list once and builds a new sequence of
immutable `Token` values:

- `-abc`: a registered key becomes one flag token; otherwise the cluster is
  split into `-a`, `-b`, `-c`, each of which must be registered.
- `--name`: always one flag token, never split.
- `-`: replaced by everything read from standard input.
- `--`: dropped; cancels the leading-dash meaning of the next element only.
- `.` and `..`: replaced by the current working directory and its parent.
- anything else: a literal token holding the original text.
"""
from __future__ import annotations

import os
from typing import Iterable, TextIO

from optbag.exceptions import ParseError
from optbag.logger import logger
from optbag.parser.option import LONG_FLAG_PATTERN, SHORT_FLAG_PATTERN
from optbag.parser.parser_types import Token, TokenStream
from optbag.parser.registry import OptionRegistry
from optbag.utils import read_stdin

ESCAPE_MARKER = "--"
PIPE_MARKER = "-"
CURRENT_DIR = "."
PARENT_DIR = ".."


def parent_directory(path: str) -> str:
    """Return `path` with its last separator-delimited segment removed (`/home` -> `""`)."""
    return path.rpartition(os.sep)[0]


class Tokenizer:
    """
    Classifies raw arguments into flag and literal tokens.

    Args:
        registry (OptionRegistry): Registered options, used to decide between a
            single short flag and a combined cluster.
        stdin (TextIO | None): Stream read when a lone `-` appears.
    """

    def __init__(self, registry: OptionRegistry, stdin: TextIO | None = None) -> None:
        self.registry = registry
        self.stdin = stdin

    def _expand_cluster(self, item: str) -> list[Token]:
        """Expand a combined short-flag cluster into separate flag tokens."""
        # e.g. -nme -> -n -m -e
        tokens = []
        for char in item[1:]:
            flag = f"-{char}"
            if not self.registry.has_key(flag):
                raise ParseError(
                    f"Disintegrated option '{flag}' from '{item}' not found"
                )
            tokens.append(Token.flag(flag))
        return tokens

    def _read_pipe(self, pipe_data: str | None) -> str:
        if pipe_data is not None:
            return pipe_data
        data = read_stdin(self.stdin)
        logger.debug("Read %d characters of pipe data", len(data))
        return data

    def tokenize(self, args: Iterable[str]) -> TokenStream:
        """
        Classify `args` into a `TokenStream`.

        Args:
            args (Iterable[str]): Raw arguments, program entries already removed.

        Returns:
            TokenStream: Tokens in original order, plus the stdin payload if one
            was captured.

        Raises:
            ParseError: If a cluster holds an unregistered flag or stdin cannot be read.
        """
        args = list(args)
        tokens: list[Token] = []
        pipe_data: str | None = None
        escaped = False

        for item in args:
            item = str(item)
            if SHORT_FLAG_PATTERN.fullmatch(item):
                if escaped:
                    tokens.append(Token.literal(item))
                elif self.registry.has_key(item):
                    # refers to usage such as -regex, -name
                    tokens.append(Token.flag(item))
                else:
                    tokens.extend(self._expand_cluster(item))
            elif LONG_FLAG_PATTERN.fullmatch(item):
                tokens.append(Token.flag(item))
            elif item == PIPE_MARKER:
                pipe_data = self._read_pipe(pipe_data)
                tokens.append(Token.literal(pipe_data))
            elif item == ESCAPE_MARKER:
                # no token; arms the escape for the next element
                pass
            elif item == CURRENT_DIR:
                tokens.append(Token.literal(os.getcwd()))
            elif item == PARENT_DIR:
                tokens.append(Token.literal(parent_directory(os.getcwd())))
            else:
                tokens.append(Token.literal(item))
            escaped = item == ESCAPE_MARKER

        logger.debug("Tokenized %d arguments into %d tokens", len(args), len(tokens))
        return TokenStream(tokens=tuple(tokens), pipe_data=pipe_data)
