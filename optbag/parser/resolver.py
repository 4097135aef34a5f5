# OptBag Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Implements `Resolver`, the second stage of parsing.

The resolver walks the token stream twice:

1. Every flag token is looked up in the registry and dispatched by its action.
   `NUMBER` and `STRING` flags take their value from the strictly next token,
   which must be a literal. `-b -e 1 2` is therefore an error for `-b`, not
   `-b 1 -e 2`.
2. Every literal token that was not spent as a flag value is appended, in order,
   to the bag's `input` list.
"""
from __future__ import annotations

from typing import Any, Iterable, NoReturn

from optbag.exceptions import ConfigError, ParseError
from optbag.logger import logger
from optbag.parser.option import RESERVED_DEST, Option
from optbag.parser.option_action import OptionAction
from optbag.parser.parser_types import Token, TokenSlot
from optbag.parser.registry import OptionRegistry
from optbag.parser.utils import coerce_number
from optbag.parser.variable_bag import VariableBag


class Resolver:
    """
    Resolves flag tokens against the registry and fills a `VariableBag`.

    Args:
        registry (OptionRegistry): Registered options.
    """

    def __init__(self, registry: OptionRegistry) -> None:
        self.registry = registry

    def _strict_next_index(self, slots: list[TokenSlot], index: int) -> int | None:
        """Return the index of the literal directly after `index`, skipping spent slots."""
        for next_index in range(index + 1, len(slots)):
            slot = slots[next_index]
            if slot.spent:
                continue
            if slot.token.is_flag:
                return None
            return next_index
        return None

    def _raise_unknown_option(self, flag: str) -> NoReturn:
        candidates = [key for key in self.registry.keys() if key.startswith(flag)]
        if candidates:
            raise ParseError(
                f"Cannot find option '{flag}'. Did you mean one of: {', '.join(candidates)}?"
            )
        raise ParseError(f"Cannot find option '{flag}'")

    def _take_value(self, slots: list[TokenSlot], index: int) -> str:
        flag = slots[index].token.text
        next_index = self._strict_next_index(slots, index)
        if next_index is None:
            raise ParseError(f"Missing argument for option '{flag}'")
        slot = slots[next_index]
        slot.spend()
        return slot.token.text

    def _dispatch(
        self, option: Option, slots: list[TokenSlot], index: int, bag: VariableBag
    ) -> None:
        if option.dest == RESERVED_DEST:
            raise ConfigError(
                f"Cannot use the reserved word '{RESERVED_DEST}' for destination"
            )
        value: Any
        if option.action.takes_value:
            value = self._take_value(slots, index)
            if option.action == OptionAction.NUMBER:
                try:
                    value = coerce_number(value)
                except ValueError as error:
                    raise ParseError(
                        f"Cannot parse number for option '{slots[index].token.text}': {error}"
                    ) from error
        elif option.action == OptionAction.TRUE:
            value = True
        elif option.action == OptionAction.FALSE:
            value = False
        else:
            logger.debug("Option '%s' present", option.dest)
            return
        bag.store(option.dest, value)
        logger.debug("Stored %r under '%s'", value, option.dest)

    def resolve(self, tokens: Iterable[Token], bag: VariableBag) -> VariableBag:
        """
        Dispatch every flag in `tokens` and collect the remaining literals.

        Args:
            tokens (Iterable[Token]): Output of the tokenizer.
            bag (VariableBag): Bag receiving stored values and positional input.

        Returns:
            VariableBag: The same bag, for chaining.

        Raises:
            ParseError: If a flag is unknown, its argument is missing, or a number
                cannot be parsed.
            ConfigError: If an option stores into the reserved `input` dest.
        """
        slots = [TokenSlot(token) for token in tokens]

        for index, slot in enumerate(slots):
            if slot.spent or not slot.token.is_flag:
                continue
            option = self.registry.get(slot.token.text)
            if option is None:
                self._raise_unknown_option(slot.token.text)
            self._dispatch(option, slots, index, bag)

        for slot in slots:
            if not slot.spent and not slot.token.is_flag:
                bag.append_input(slot.token.text)

        return bag
