from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from teenylex._token import ScanError


class TeenylexError(Exception):
    message: str

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TeenylexValueError(TeenylexError, ValueError):
    pass


class TeenylexTypeError(TeenylexError, TypeError):
    pass


class InvalidScannerSettings(TeenylexTypeError):
    def __init__(self, errors: List[str]) -> None:
        super().__init__(f"Invalid scanner settings - {', '.join(errors)}")


class InvalidSourceError(TeenylexValueError):
    error: "ScanError"

    def __init__(self, error: "ScanError") -> None:
        super().__init__(
            message=f"{error.message} at line {error.position.line}, column {error.position.column}: {error.lexeme!r}"
        )
        self.error = error
