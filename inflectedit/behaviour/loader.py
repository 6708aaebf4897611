"""
Resolve objects from names with interpolated tokens, e.g. ``myapp.(views|controllers).Index``.
"""
import importlib
import re
from typing import Any
from typing import Optional

from inflectedit.behaviour.inflector import tokens

NAME_SEPARATOR = re.compile(r"::|\.")


def load_object(pattern: str, namespace: Optional[Any] = None) -> Any:
    """
    Return the first interpolation of ``pattern`` that resolves to an object.

    Parts of a name are separated by ``::`` or ``.``. Within ``namespace`` they are read as attributes; without one,
    the longest importable prefix is imported as a module and the rest are read as its attributes. Candidates are
    tried in order, and a candidate that fails doesn't stop the search. A module that exists but fails to import
    stops the search with its own error.

    :raises NameError: if no candidate resolves.
    """
    last_error = None
    for candidate in tokens(pattern):
        try:
            return resolve_name(candidate, namespace)
        except ModuleNotFoundError as error:
            if not is_missing(error, module_name(candidate)):
                raise
            last_error = error
        except (AttributeError, ValueError) as error:
            last_error = error
    raise NameError(f"Cannot load {pattern!r}") from last_error


def resolve_name(name: str, namespace: Optional[Any] = None) -> Any:
    parts = NAME_SEPARATOR.split(name)
    if not all(parts):
        raise ValueError(f"Invalid name: {name!r}")
    if namespace is None:
        namespace, parts = import_longest_prefix(parts)
    for part in parts:
        namespace = getattr(namespace, part)
    return namespace


def import_longest_prefix(parts: list[str]) -> tuple[Any, list[str]]:
    """
    Import the longest run of leading ``parts`` that names a module.

    :raises ModuleNotFoundError: if not even the first part is a module, or if a module imports something missing.
    """
    for i in range(len(parts), 0, -1):
        name = ".".join(parts[:i])
        try:
            return importlib.import_module(name), parts[i:]
        except ModuleNotFoundError as error:
            if i == 1 or not is_missing(error, name):
                raise


def module_name(name: str) -> str:
    return ".".join(NAME_SEPARATOR.split(name))


def is_missing(error: ModuleNotFoundError, name: str) -> bool:
    """
    Whether ``error`` reports ``name`` itself, or one of its parent packages, as missing.
    """
    return error.name is not None and (name == error.name or name.startswith(f"{error.name}."))
