from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class Keyword(str, Enum):
    IF = "IF"
    ENDIF = "ENDIF"
    THEN = "THEN"
    GOTO = "GOTO"

    @classmethod
    def from_string(cls, name: str, case_sensitive: bool = False) -> Optional["Keyword"]:
        if case_sensitive:
            return KEYWORDS.get(name.lower()) if name.isupper() else None
        return KEYWORDS.get(name.lower())


KEYWORDS: Mapping[str, Keyword] = MappingProxyType({keyword.value.lower(): keyword for keyword in Keyword})
