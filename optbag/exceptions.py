# OptBag Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by OptBag.

Every error raised by the parser is fatal for the current call: registration
or parsing stops immediately and the exception carries a descriptive message
for the caller to report.

Exception Hierarchy:
- OptBagError
    ├── ConfigError
    └── ParseError
"""


class OptBagError(Exception):
    """Base exception for OptBag."""


class ConfigError(OptBagError):
    """Exception raised when an option definition or parser configuration is invalid."""


class ParseError(OptBagError):
    """Exception raised when the argument list cannot be tokenized or resolved."""
