from typing import Iterator, List, Optional

from teenylex._scanner import Scanner
from teenylex._settings import ScannerSettings
from teenylex._token import ScanError, ScanResult, Token


def scan(source: str, settings: Optional[ScannerSettings] = None) -> Iterator[ScanResult]:
    return iter(Scanner(source, settings))


def tokenize(source: str, settings: Optional[ScannerSettings] = None) -> List[Token]:
    """Scan the whole source, EOF included, raising InvalidSourceError on the first scan error"""
    tokens: List[Token] = []
    for result in scan(source, settings):
        if isinstance(result, ScanError):
            raise result.to_exception()
        tokens.append(result)
    return tokens
