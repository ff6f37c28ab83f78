import sys
from typing import List

import black
from mypy import api as mypy_api
from pylint import run_pylint
import pytest

PACKAGE = "teenylex"
LINE_LENGTH = "120"


def run_black(args: List[str]) -> int:
    exit_code = 0
    try:
        black.main(["--line-length", LINE_LENGTH, *args, PACKAGE, "tests", "ci.py"])
    except SystemExit as exc:
        exit_code = exc.code

    return exit_code


def run_pylint_check() -> int:
    exit_code = 0
    try:
        run_pylint(["--rcfile=.pylintrc", PACKAGE])
    except SystemExit as exc:
        exit_code = exc.code

    return exit_code


def run_mypy_check() -> int:
    report, error_report, exit_code = mypy_api.run(["--config-file", "mypy.ini", PACKAGE])
    if report:
        print("Type checking report:")
        print(report)

    if error_report:
        print("Type error report:")
        print(error_report)

    return exit_code


def validate_exit_code(exit_code: int) -> None:
    if exit_code == 0:
        return
    sys.exit(exit_code)


def test() -> None:
    sys.exit(pytest.main(["-x", "tests"]))


def format_code() -> None:
    validate_exit_code(run_black([]))


def lint() -> None:
    print("Running formatting check")
    validate_exit_code(run_black(["--check"]))

    print("Running type check")
    validate_exit_code(run_mypy_check())

    print("Running pylint")
    validate_exit_code(run_pylint_check())


if __name__ == "__main__":
    commands = {"test": test, "lint": lint, "format": format_code}
    if len(sys.argv) != 2 or sys.argv[1] not in commands:
        print(f"usage: python ci.py [{'|'.join(commands)}]")
        sys.exit(2)
    commands[sys.argv[1]]()
