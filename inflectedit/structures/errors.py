import errno
from pathlib import Path
from typing import Any


class InflectEditError(Exception):
    """
    Base class for every error raised by inflectedit.
    """


class UnknownOperation(InflectEditError, AttributeError):
    """
    Raised when a transformation step names an operation that is neither an inflection nor a known text operation.
    """

    def __init__(self, operation: Any, value: str):
        self.operation = operation
        self.value = value
        super().__init__(f"undefined operation {operation!r} for {value!r}")


class ArityMismatch(InflectEditError, TypeError):
    """
    Raised when a callable transformation step can't be called with exactly one argument.
    """

    def __init__(self, step: Any, expected: int = 1):
        self.step = step
        self.expected = expected
        super().__init__(f"wrong number of arguments for {step!r} (expected {expected})")


class FileNotFound(InflectEditError, FileNotFoundError):
    def __init__(self, path: str | Path):
        super().__init__(errno.ENOENT, "No such file or directory", str(path))


class TargetNotFound(InflectEditError, ValueError):
    """
    Raised when no line of a file matches the target of an edit.
    """

    def __init__(self, target: Any, path: str | Path):
        self.target = target
        self.path = path
        shown = target.pattern if hasattr(target, "pattern") else target
        super().__init__(f"Cannot find `{shown}' inside `{path}'.")
