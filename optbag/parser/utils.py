# OptBag Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Contains value coercion utilities for OptBag argument parsing.

Functions:
- coerce_number: Convert a string to an `int` or `float`.
"""
import re

NUMBER_PATTERN = re.compile(
    r"[+-]?(?:0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+"
    r"|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.ASCII,
)


def coerce_number(value: str) -> int | float:
    """
    Convert a string to a number.

    Decimal integers become `int`, other decimal or exponent forms become `float`,
    and prefixed integer literals (`0x1f`, `0o17`, `0b101`) are accepted as well.
    Surrounding whitespace is ignored. Only ASCII digits are accepted, with no
    `_` separators.

    Args:
        value (str): The input string.

    Returns:
        int | float: Parsed number.

    Raises:
        ValueError: If the string is empty or not numeric.
    """
    text = value.strip()
    if not text:
        raise ValueError("empty string is not a number")
    if not NUMBER_PATTERN.fullmatch(text):
        raise ValueError(f"'{value}' is not a number")
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return int(text, 0)
