"""
OptBag Option Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import ConfigError, OptBagError, ParseError
from .parser import OptionAction, OptionParser, VariableBag
from .version import __version__

logger = logging.getLogger("optbag")


__all__ = [
    "OptionParser",
    "OptionAction",
    "VariableBag",
    "OptBagError",
    "ConfigError",
    "ParseError",
    "__version__",
]
