from typing import Iterable


def read_source(stream: Iterable[str]) -> str:
    """Reassemble a program from a line stream such as ``sys.stdin``.

    Lines are joined as read, terminators included, so the scanner still sees the
    newlines that separate statements.
    """
    return "".join(stream)
