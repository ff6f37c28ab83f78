from teenylex._keyword import Keyword, KEYWORDS
from teenylex._scanner import Scanner
from teenylex._settings import ScannerSettings
from teenylex._source import read_source
from teenylex._token import Position, ScanError, ScanErrorKind, ScanResult, Token, TokenType
from teenylex._tokenize import scan, tokenize
from teenylex.errors import InvalidScannerSettings, InvalidSourceError, TeenylexError
