# OptBag Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Token models shared by the tokenizer and the resolver.

Contents:
- `Token`: An immutable tagged argument, either a flag reference or a literal string.
- `TokenStream`: The tokenizer's output, the ordered tokens plus any captured stdin.
- `TokenSlot`: Tracks whether a literal token has been spent as a flag's argument.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Token:
    """A classified command-line argument."""

    text: str
    is_flag: bool = False

    @classmethod
    def flag(cls, text: str) -> "Token":
        return cls(text, is_flag=True)

    @classmethod
    def literal(cls, text: str) -> "Token":
        return cls(text, is_flag=False)


@dataclass(frozen=True)
class TokenStream:
    """Ordered tokens produced from one argument list."""

    tokens: tuple[Token, ...]
    pipe_data: str | None = None

    def __iter__(self):
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)


@dataclass
class TokenSlot:
    """Tracks a token and whether it has been consumed by a flag."""

    token: Token
    spent: bool = False

    def spend(self) -> None:
        """Mark this token as consumed."""
        self.spent = True
