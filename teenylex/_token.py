from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from teenylex._keyword import Keyword
from teenylex.errors import InvalidSourceError


class TokenType(str, Enum):
    EOF = "EOF"
    SLASH = "SLASH"
    NEWLINE = "NEWLINE"
    PLUS = "PLUS"
    MINUS = "MINUS"
    ASTERISK = "ASTERISK"
    GT = "GT"
    GTEQ = "GTEQ"
    LT = "LT"
    LTEQ = "LTEQ"
    EQ = "EQ"
    EQEQ = "EQEQ"
    NOTEQ = "NOTEQ"
    KEYWORD = "KEYWORD"
    IDENTIFIER = "IDENTIFIER"
    NUMBER = "NUMBER"
    STRING = "STRING"


@dataclass(frozen=True)
class Position:
    offset: int = 0
    line: int = 1
    column: int = 1

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class Token:
    """A classified piece of source text.

    ``lexeme`` is the exact slice of the source the token was scanned from, string
    delimiters included. ``text`` is what a parser usually wants: the inner text of a
    string literal and the lexeme for everything else.
    """

    type: TokenType
    lexeme: str
    position: Position
    keyword: Optional[Keyword] = None

    @property
    def text(self) -> str:
        if self.type == TokenType.STRING:
            return self.lexeme[1:-1]
        return self.lexeme

    def __str__(self) -> str:
        if self.type == TokenType.KEYWORD and self.keyword is not None:
            return f"{self.type.value}({self.keyword.value})"
        if self.type in (TokenType.IDENTIFIER, TokenType.NUMBER, TokenType.STRING):
            return f"{self.type.value}({self.text!r})"
        return self.type.value


class ScanErrorKind(str, Enum):
    UNTERMINATED_STRING = "UNTERMINATED_STRING"
    MALFORMED_NUMBER = "MALFORMED_NUMBER"
    UNEXPECTED_CHARACTER = "UNEXPECTED_CHARACTER"


@dataclass(frozen=True)
class ScanError:
    kind: ScanErrorKind
    message: str
    lexeme: str
    position: Position

    def to_exception(self) -> InvalidSourceError:
        return InvalidSourceError(self)

    def __str__(self) -> str:
        return f"{self.kind.value} at {self.position}: {self.message}"


ScanResult = Union[Token, ScanError]
