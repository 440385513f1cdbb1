import enum
from dataclasses import dataclass
from typing import Union


class Keyword(enum.Enum):
    LOCAL = "local"
    FUNCTION = "function"
    END = "end"


KEYWORDS = {k.value: k for k in Keyword}


class TokenKind(enum.Enum):
    # --- Identifiers and literals ---
    IDENTIFIER = "Identifier"
    STRING = "StringLiteral"
    NUMBER = "NumberLiteral"

    # --- Keywords ---
    KEYWORD = "Keyword"

    # --- Operators ---
    ASSIGN = "Assign"

    # --- Delimiters ---
    LPAREN = "LeftParenthesis"
    RPAREN = "RightParenthesis"

    # --- Anything else that is ASCII punctuation ---
    UNEXPECTED = "UnexpectedSymbol"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: Union[str, int, Keyword, None] = None

    def __repr__(self):
        match self.value:
            case None:
                return self.kind.value
            case Keyword():
                return f"{self.kind.value}({self.value.name.capitalize()})"
            case _:
                return f"{self.kind.value}({self.value!r})"

    @classmethod
    def identifier(cls, name: str) -> "Token":
        return cls(TokenKind.IDENTIFIER, name)

    @classmethod
    def string(cls, contents: str) -> "Token":
        return cls(TokenKind.STRING, contents)

    @classmethod
    def number(cls, value: int) -> "Token":
        return cls(TokenKind.NUMBER, value)

    @classmethod
    def keyword(cls, keyword: Keyword) -> "Token":
        return cls(TokenKind.KEYWORD, keyword)

    @classmethod
    def unexpected(cls, symbol: str) -> "Token":
        return cls(TokenKind.UNEXPECTED, symbol)


OPERATORS = {
    "=": Token(TokenKind.ASSIGN),
    "(": Token(TokenKind.LPAREN),
    ")": Token(TokenKind.RPAREN),
}
