import logging
from string import ascii_letters, digits
from typing import Iterator, Optional

from teenylex._keyword import Keyword
from teenylex._settings import ScannerSettings, validate_scanner_settings
from teenylex._token import Position, ScanError, ScanErrorKind, ScanResult, Token, TokenType

logger = logging.getLogger(__name__)

WHITESPACE = frozenset(" \t\r")
DIGITS = frozenset(digits)
LETTERS = frozenset(ascii_letters)
ALPHANUMERICS = DIGITS | LETTERS
QUOTE = '"'

SINGLE_CHARACTER_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    "\n": TokenType.NEWLINE,
}

# character -> (token alone, token when followed by "=")
COMPARISON_TOKENS = {
    "=": (TokenType.EQ, TokenType.EQEQ),
    ">": (TokenType.GT, TokenType.GTEQ),
    "<": (TokenType.LT, TokenType.LTEQ),
}


class Scanner:
    """Pull based scanner over a single source buffer.

    Every call to :meth:`next_token` consumes exactly one token (or one erroneous run of
    characters) and leaves the cursor on the first character it did not consume. Iterating
    over the scanner yields the remaining results and always ends with a single EOF token.
    """

    source: str
    current: Optional[str]
    settings: ScannerSettings

    def __init__(self, source: str, settings: Optional[ScannerSettings] = None) -> None:
        self.settings = settings if settings is not None else ScannerSettings()
        validate_scanner_settings(self.settings)
        self.source = source
        self.current = source[0] if source else None
        self.__offset = 0
        self.__line = 1
        self.__column = 1
        self.__exhausted = False
        logger.debug("Scanner created for %d characters of source", len(source))

    @property
    def offset(self) -> int:
        return self.__offset

    @property
    def position(self) -> Position:
        return Position(offset=self.__offset, line=self.__line, column=self.__column)

    def advance(self) -> None:
        if self.current is None:
            return

        if self.current == "\n":
            self.__line += 1
            self.__column = 1
        else:
            self.__column += 1
        self.__offset += 1
        self.current = self.source[self.__offset] if self.__offset < len(self.source) else None

    def peek(self) -> Optional[str]:
        index = self.__offset + 1
        if index >= len(self.source):
            return None
        return self.source[index]

    def skip_whitespace(self) -> None:
        while self.current is not None and self.current in WHITESPACE:
            self.advance()

    def skip_comment(self) -> None:
        if self.current != self.settings.comment_marker:
            return
        while self.current is not None and self.current != "\n":
            self.advance()

    def next_token(self) -> ScanResult:
        self.skip_whitespace()
        self.skip_comment()

        start = self.position
        char = self.current

        if char is None:
            logger.debug("Reached end of input at %s", start)
            return Token(TokenType.EOF, "", start)

        if char in SINGLE_CHARACTER_TOKENS:
            self.advance()
            return self.__token(SINGLE_CHARACTER_TOKENS[char], start)

        if char in COMPARISON_TOKENS:
            single, double = COMPARISON_TOKENS[char]
            if self.peek() == "=":
                self.advance()
                self.advance()
                return self.__token(double, start)
            self.advance()
            return self.__token(single, start)

        if char == "!":
            if self.peek() == "=":
                self.advance()
                self.advance()
                return self.__token(TokenType.NOTEQ, start)
            self.advance()
            return self.__error(ScanErrorKind.UNEXPECTED_CHARACTER, "unexpected character after !", start)

        if char in DIGITS:
            return self.__scan_number(start)

        if char in LETTERS:
            return self.__scan_word(start)

        if char == QUOTE:
            return self.__scan_string(start)

        self.advance()
        return self.__error(ScanErrorKind.UNEXPECTED_CHARACTER, "unknown token", start)

    def __iter__(self) -> Iterator[ScanResult]:
        while not self.__exhausted:
            result = self.next_token()
            if isinstance(result, Token) and result.type == TokenType.EOF:
                self.__exhausted = True
            yield result

    def __scan_number(self, start: Position) -> ScanResult:
        self.__consume_while(DIGITS)
        if self.current == ".":
            self.advance()
            if self.current is None or self.current not in DIGITS:
                return self.__error(
                    ScanErrorKind.MALFORMED_NUMBER, "malformed number: trailing dot without fractional digits", start
                )
            self.__consume_while(DIGITS)
        return self.__token(TokenType.NUMBER, start)

    def __scan_word(self, start: Position) -> Token:
        self.__consume_while(ALPHANUMERICS)
        spelling = self.__lexeme(start)
        keyword = Keyword.from_string(spelling, case_sensitive=self.settings.case_sensitive_keywords)
        if keyword is None:
            return self.__token(TokenType.IDENTIFIER, start)
        return self.__token(TokenType.KEYWORD, start, keyword=keyword)

    def __scan_string(self, start: Position) -> ScanResult:
        self.advance()
        while self.current is not None and self.current != QUOTE:
            self.advance()
        if self.current is None:
            return self.__error(ScanErrorKind.UNTERMINATED_STRING, "unterminated string", start)
        self.advance()
        return self.__token(TokenType.STRING, start)

    def __consume_while(self, characters: frozenset) -> None:
        while self.current is not None and self.current in characters:
            self.advance()

    def __lexeme(self, start: Position) -> str:
        return self.source[start.offset : self.__offset]

    def __token(self, token_type: TokenType, start: Position, keyword: Optional[Keyword] = None) -> Token:
        return Token(type=token_type, lexeme=self.__lexeme(start), position=start, keyword=keyword)

    def __error(self, kind: ScanErrorKind, message: str, start: Position) -> ScanError:
        error = ScanError(kind=kind, message=message, lexeme=self.__lexeme(start), position=start)
        logger.debug("Scan error: %s", error)
        return error
