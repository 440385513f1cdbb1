from dataclasses import dataclass
from typing import Optional

from colorama import Fore, Style


@dataclass
class LexError(Exception):
    message: str
    offset: Optional[int] = None
    lexeme: Optional[str] = None
    filename: Optional[str] = None

    def __str__(self):
        loc = ""
        if self.offset is not None:
            loc = f"[offset {self.offset}] "
        return f"{loc}{self.message}"


class NumberLiteralError(LexError):
    """A digit run that does not fit a signed 32-bit integer, or that picked up
    non-digit characters before the span ended. Aborts the whole capture."""


def format_error(err: LexError, source: Optional[str] = None) -> str:
    red = Fore.RED + Style.BRIGHT
    reset = Style.RESET_ALL
    parts = []
    if err.filename:
        parts.append(f"{Fore.CYAN}In {err.filename}:{reset}")

    if source is not None and err.offset is not None:
        line_start = source.rfind("\n", 0, err.offset) + 1
        line_end = source.find("\n", err.offset)
        if line_end == -1:
            line_end = len(source)
        line = source[line_start:line_end].rstrip("\r")
        width = len(err.lexeme) if err.lexeme else 1
        start = max(0, err.offset - line_start - width + 1)
        caret_line = " " * start + f"{red}{'^' * width}{reset}"
        parts.append(line)
        parts.append(caret_line)

    parts.append(f"{red}{str(err)}{reset}")
    return "\n".join(parts)
