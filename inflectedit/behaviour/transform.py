"""
Apply a sequence of named transformations to a string.
"""
import inspect
import re
from enum import Enum
from typing import Any
from typing import Callable
from typing import Sequence
from typing import Union

from inflectedit.behaviour import inflector
from inflectedit.structures.errors import ArityMismatch
from inflectedit.structures.errors import UnknownOperation


class Operation(str, Enum):
    CLASSIFY = "classify"
    UNDERSCORE = "underscore"
    DASHERIZE = "dasherize"
    DEMODULIZE = "demodulize"
    NAMESPACE = "namespace"
    TITLEIZE = "titleize"
    CAPITALIZE = "capitalize"
    PLURALIZE = "pluralize"
    SINGULARIZE = "singularize"
    RSUB = "rsub"


# A step is an operation name, a (name, *args) sequence, or a one argument callable
Step = Union[Operation, str, Sequence[Any], Callable[[Any], Any]]

INFLECTIONS: dict[str, Callable[..., str]] = {
    Operation.CLASSIFY.value: inflector.classify,
    Operation.UNDERSCORE.value: inflector.underscore,
    Operation.DASHERIZE.value: inflector.dasherize,
    Operation.DEMODULIZE.value: inflector.demodulize,
    Operation.NAMESPACE.value: inflector.namespace,
    Operation.TITLEIZE.value: inflector.titleize,
    Operation.CAPITALIZE.value: inflector.capitalize,
    Operation.PLURALIZE.value: inflector.pluralize,
    Operation.SINGULARIZE.value: inflector.singularize,
    Operation.RSUB.value: inflector.rsub,
}


def sub(string: str, pattern: str | re.Pattern, replacement: str) -> str:
    """
    Replace every match of ``pattern``, like :func:`re.sub`.
    """
    return re.sub(pattern, inflector.to_string(replacement), string)


def reverse(string: str) -> str:
    return string[::-1]


# The plain text operations a step may name besides the inflections
TEXT_OPERATIONS: dict[str, Callable[..., Any]] = {
    "lower": str.lower,
    "upper": str.upper,
    "strip": str.strip,
    "lstrip": str.lstrip,
    "rstrip": str.rstrip,
    "swapcase": str.swapcase,
    "casefold": str.casefold,
    "title": str.title,
    "replace": str.replace,
    "removeprefix": str.removeprefix,
    "removesuffix": str.removesuffix,
    "reverse": reverse,
    "sub": sub,
}


def resolve(name: Any, value: Any) -> Callable[..., Any]:
    """
    Look up the function for a named step. Inflections win over text operations.
    """
    key = name.value if isinstance(name, Operation) else name
    if isinstance(key, str):
        if key in INFLECTIONS:
            return INFLECTIONS[key]
        if key in TEXT_OPERATIONS:
            return TEXT_OPERATIONS[key]
    raise UnknownOperation(name, value)


def call_unary(step: Callable[[Any], Any], value: Any) -> Any:
    try:
        signature = inspect.signature(step)
    except (TypeError, ValueError):
        # Some builtins don't expose a signature
        return step(value)
    try:
        signature.bind(value)
    except TypeError as error:
        raise ArityMismatch(step) from error
    return step(value)


def apply_step(value: Any, step: Step) -> Any:
    if isinstance(step, (Operation, str)):
        return resolve(step, value)(value)
    if isinstance(step, (list, tuple)):
        if not step:
            raise UnknownOperation(step, value)
        name, *args = step
        return resolve(name, value)(value, *args)
    if callable(step):
        return call_unary(step, value)
    raise UnknownOperation(step, value)


def transform(string: Any, *steps: Step) -> Any:
    """
    Apply ``steps`` to ``string`` from left to right, feeding each result into the next step.

    >>> transform("hanami/utils", "underscore", "classify")
    'Hanami::Utils'
    >>> transform("hanami/utils/string", ("rsub", "/", "#"))
    'hanami/utils#string'

    :raises UnknownOperation: if a step names neither an inflection nor a text operation.
    :raises ArityMismatch: if a callable step doesn't take exactly one argument.
    """
    value = inflector.to_string(string)
    for step in steps:
        value = apply_step(value, step)
    return value
