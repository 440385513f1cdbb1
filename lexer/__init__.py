from .error import LexError, NumberLiteralError, format_error
from .token import Keyword, Token, TokenKind
from .tokenizer import Mode, Tokenizer

__all__ = [
    "Keyword",
    "LexError",
    "Mode",
    "NumberLiteralError",
    "Token",
    "TokenKind",
    "Tokenizer",
    "format_error",
]
