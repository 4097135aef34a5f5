"""
OptBag Option Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .option import Option
from .option_action import OptionAction
from .option_config import OptionConfig
from .option_parser import OptionParser
from .parser_types import Token, TokenStream
from .registry import OptionRegistry
from .resolver import Resolver
from .tokenizer import Tokenizer
from .variable_bag import VariableBag

__all__ = [
    "Option",
    "OptionAction",
    "OptionConfig",
    "OptionParser",
    "OptionRegistry",
    "Resolver",
    "Token",
    "TokenStream",
    "Tokenizer",
    "VariableBag",
]
