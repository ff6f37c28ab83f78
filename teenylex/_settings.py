from dataclasses import dataclass

from teenylex.errors import InvalidScannerSettings

RESERVED_CHARACTERS = frozenset('+-*/=<>!"\n \t\r')


@dataclass
class ScannerSettings:
    comment_marker: str = "#"
    case_sensitive_keywords: bool = False


def validate_scanner_settings(settings: ScannerSettings) -> None:
    errors = []
    if not isinstance(settings.comment_marker, str) or len(settings.comment_marker) != 1:
        errors += ["comment_marker should be a single character"]
    elif settings.comment_marker in RESERVED_CHARACTERS or settings.comment_marker.isalnum():
        errors += [f"comment_marker {settings.comment_marker!r} clashes with a token character"]
    if not isinstance(settings.case_sensitive_keywords, bool):
        errors += ["case_sensitive_keywords should be bool"]

    if errors:
        raise InvalidScannerSettings(errors)
