import sys
from typing import Any


def printf(format: str, *args: Any):
    print(format.format(*args), end="")


def printf_err(format: str, *args: Any):
    print(format.format(*args), end="", file=sys.stderr)


def show(value: Any) -> str:
    # strings are quoted so "1" and 1 stay distinguishable in dumps
    if isinstance(value, str):
        return repr(value)
    return str(value)
