import enum
import logging
import string
from typing import List, Optional

from .error import NumberLiteralError
from .token import KEYWORDS, OPERATORS, Token

PUNCTUATION = frozenset(string.punctuation)
QUOTES = frozenset("\"'")
# str.isspace counts the information separators; they are control characters here
SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class Mode(enum.Enum):
    MALFORMED = "malformed"
    NUMBER = "number"
    IDENTIFIER = "identifier"
    STRING = "string"
    BREAK = "break"
    OPERATOR = "operator"


def is_whitespace(c: str) -> bool:
    return c.isspace() and c not in SEPARATORS


def is_punctuation(c: str) -> bool:
    return c in PUNCTUATION


def is_quote(c: str) -> bool:
    return c in QUOTES


def classify(c: str, mode: Mode) -> Mode:
    building_string = mode == Mode.STRING

    if c.isalpha() and not building_string:
        mode = Mode.IDENTIFIER

    if is_whitespace(c) and not building_string:
        mode = Mode.BREAK

    if is_punctuation(c):
        if is_quote(c):
            mode = Mode.STRING
        elif not building_string:
            mode = Mode.OPERATOR

    if c.isdigit() and mode not in (Mode.STRING, Mode.IDENTIFIER):
        mode = Mode.NUMBER

    return mode


class Tokenizer:
    def __init__(self, source: str):
        self.source = source
        self.length = len(source)
        self.current = 0

    def capture(self) -> List[Token]:
        tokens = []

        while self.current < self.length:
            token = self.capture_token()
            if token is not None:
                logging.debug(f"captured {token!r}")
                tokens.append(token)

        return tokens

    @property
    def peek(self) -> Optional[str]:
        if self.current >= self.length:
            return None
        return self.source[self.current]

    def capture_token(self) -> Optional[Token]:
        mode = Mode.MALFORMED
        buffer = ""
        operator = None

        while self.current < self.length:
            c = self.source[self.current]
            self.current += 1

            mode = classify(c, mode)

            match mode:
                case Mode.BREAK:
                    break

                case Mode.OPERATOR:
                    operator = c
                    break

                case Mode.STRING:
                    if not is_quote(c):
                        buffer += c

                case Mode.IDENTIFIER:
                    buffer += c

                case Mode.NUMBER:
                    buffer += c
                    self.parse_number(buffer)

                case Mode.MALFORMED:
                    logging.debug(
                        f"absorbing unclassifiable character {c!r} at offset {self.current - 1}"
                    )
                    buffer += c

            nc = self.peek
            if nc is None:
                break

            if mode != Mode.STRING and (is_whitespace(nc) or is_punctuation(nc)):
                break

            if is_quote(nc):
                # the closing quote belongs to this string, not to the next token
                self.current += 1
                break

        return self.derive(mode, buffer, operator)

    def derive(self, mode: Mode, buffer: str, operator: Optional[str]) -> Optional[Token]:
        match mode:
            case Mode.OPERATOR:
                return OPERATORS.get(operator) or Token.unexpected(operator)
            case Mode.STRING:
                return Token.string(buffer)
            case Mode.IDENTIFIER:
                if buffer in KEYWORDS:
                    return Token.keyword(KEYWORDS[buffer])
                return Token.identifier(buffer)
            case Mode.NUMBER:
                return Token.number(self.parse_number(buffer))
        return None

    def parse_number(self, buffer: str) -> int:
        offset = self.current - 1
        if not (buffer.isascii() and buffer.isdigit()):
            raise NumberLiteralError(
                message=f"malformed number literal {buffer!r}",
                offset=offset,
                lexeme=buffer,
            )

        value = int(buffer)
        if not INT32_MIN <= value <= INT32_MAX:
            raise NumberLiteralError(
                message=f"number literal {buffer} does not fit in a 32-bit signed integer",
                offset=offset,
                lexeme=buffer,
            )
        return value
