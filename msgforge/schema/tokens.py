"""
Declarative message shapes.

A MessageSchema is an ordered sequence of FormatTokens joined by a
delimiter. A token is either a fixed literal or a key looked up in the
record at render time.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple, Union

from ..core.errors import InvalidArgumentError, require

DEFAULT_DELIMITER = "|"
LITERAL_PREFIX = "="


@dataclass(frozen=True)
class FormatToken:
    """Exactly one of `literal` or `key` is set."""
    literal: Optional[str] = None
    key: Optional[str] = None

    def __post_init__(self):
        if (self.literal is None) == (self.key is None):
            raise InvalidArgumentError(
                "A format token needs exactly one of literal or key",
                param="token"
            )

    @classmethod
    def literal_token(cls, text: str) -> "FormatToken":
        return cls(literal=require(text, "literal"))

    @classmethod
    def key_token(cls, key: str) -> "FormatToken":
        return cls(key=require(key, "key"))

    @property
    def is_literal(self) -> bool:
        return self.literal is not None

    def __str__(self) -> str:
        return f"{LITERAL_PREFIX}{self.literal}" if self.is_literal else str(self.key)


TokenSpec = Union[str, FormatToken]


@dataclass(frozen=True)
class MessageSchema:
    """Ordered tokens plus the delimiter placed between rendered tokens."""
    tokens: Tuple[FormatToken, ...]
    delimiter: str = DEFAULT_DELIMITER

    def __init__(self, tokens: Iterable[FormatToken], delimiter: str = DEFAULT_DELIMITER):
        """
        Create a message schema.

        Args:
            tokens: Tokens in output order
            delimiter: Text placed between tokens (may be empty)

        Raises:
            NullInputError: If tokens or delimiter is None
            InvalidArgumentError: If no tokens are given
        """
        require(tokens, "tokens")
        require(delimiter, "delimiter")

        token_tuple = tuple(tokens)
        if not token_tuple:
            raise InvalidArgumentError("At least one token must be provided", param="tokens")
        for token in token_tuple:
            if not isinstance(token, FormatToken):
                raise InvalidArgumentError(
                    f"Expected FormatToken, got {type(token).__name__}", param="tokens"
                )

        object.__setattr__(self, "tokens", token_tuple)
        object.__setattr__(self, "delimiter", delimiter)

    @classmethod
    def from_spec(
        cls,
        items: Sequence[TokenSpec],
        delimiter: str = DEFAULT_DELIMITER
    ) -> "MessageSchema":
        """
        Build a schema from compact token specs.

        Strings starting with "=" are literals (without the prefix); every
        other string is a key. FormatToken instances pass through.

            >>> MessageSchema.from_spec(["=CONTAINERSTATUS", "ContainerId"]).keys
            ('ContainerId',)
        """
        require(items, "items")
        tokens = []
        for item in items:
            if isinstance(item, FormatToken):
                tokens.append(item)
            elif isinstance(item, str) and item.startswith(LITERAL_PREFIX):
                tokens.append(FormatToken.literal_token(item[len(LITERAL_PREFIX):]))
            else:
                tokens.append(FormatToken.key_token(item))
        return cls(tokens, delimiter)

    @property
    def keys(self) -> Tuple[str, ...]:
        """Keys referenced by the schema, in order."""
        return tuple(token.key for token in self.tokens if not token.is_literal)

    def to_spec(self) -> list:
        return [str(token) for token in self.tokens]

    def __len__(self) -> int:
        return len(self.tokens)
