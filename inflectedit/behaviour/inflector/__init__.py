"""
Case conversion and grammatical number for identifiers.

Every function accepts any string-like value and returns a new plain ``str``; the input is never modified.
"""
import re
from enum import Enum
from typing import Any
from typing import Callable
from typing import Iterator

from inflectedit.behaviour.inflector.rules import DEFAULT_PLURAL_RULE
from inflectedit.behaviour.inflector.rules import DEFAULT_SINGULAR_RULE
from inflectedit.behaviour.inflector.rules import PLURALS
from inflectedit.behaviour.inflector.rules import PLURAL_RULES
from inflectedit.behaviour.inflector.rules import SINGULARS
from inflectedit.behaviour.inflector.rules import SINGULAR_RULES
from inflectedit.behaviour.inflector.rules import inflect
from inflectedit.structures.token_pattern import TokenPattern

NAMESPACE_SEPARATOR = "::"
CLASSIFY_SEPARATOR = "_"
UNDERSCORE_SEPARATOR = "/"
DASHERIZE_SEPARATOR = "-"
TITLEIZE_SEPARATOR = " "
CAPITALIZE_SEPARATOR = " "

CLASSIFY_WORD_SEPARATOR = re.compile(rf"({CLASSIFY_SEPARATOR}|{NAMESPACE_SEPARATOR}|{UNDERSCORE_SEPARATOR})")
ACRONYM_REGEXP = re.compile(r"([A-Z0-9]+)([A-Z][a-z])")
CAMEL_CASE_REGEXP = re.compile(r"([a-z0-9])([A-Z])")
WORD_BREAK_REGEXP = re.compile(r"[\s\-]")
APOSTROPHE_REGEXP = re.compile(r"['’`]")
UNDERSCORE_DIVISION_TARGET = r"\1_\2"


def to_string(value: Any) -> str:
    """
    Convert any value into a plain ``str``. ``None`` becomes the empty string.
    """
    if value is None:
        return ""
    if isinstance(value, Enum):
        # Enum members stand in for symbolic names
        value = value.value
    return str(value)


def capitalize_word(word: str) -> str:
    """
    Uppercase the first letter and lowercase the rest, leaving anything from an apostrophe onwards untouched.
    """
    match = APOSTROPHE_REGEXP.search(word)
    if match is None:
        return word.capitalize()
    return word[: match.start()].capitalize() + word[match.start():]


def underscore(string: Any) -> str:
    """
    Return a downcased and underscore separated version of the string.

    >>> underscore("Hanami::Utils::String")
    'hanami/utils/string'
    >>> underscore("APIDoc")
    'api_doc'
    """
    string = to_string(string)
    # The order matters: namespaces, then acronyms, then camel case, then downcase
    string = string.replace(NAMESPACE_SEPARATOR, UNDERSCORE_SEPARATOR)
    string = ACRONYM_REGEXP.sub(UNDERSCORE_DIVISION_TARGET, string)
    string = CAMEL_CASE_REGEXP.sub(UNDERSCORE_DIVISION_TARGET, string)
    string = WORD_BREAK_REGEXP.sub(CLASSIFY_SEPARATOR, string)
    return string.lower()


def dasherize(string: Any) -> str:
    return underscore(string).replace(CLASSIFY_SEPARATOR, DASHERIZE_SEPARATOR)


def classify(string: Any) -> str:
    """
    Return a CamelCase version of the string, with ``/`` and ``::`` turned into namespace separators.

    >>> classify("hanami::router/base_object")
    'Hanami::Router::BaseObject'
    """
    parts = CLASSIFY_WORD_SEPARATOR.split(underscore(string))
    result = []
    for i, part in enumerate(parts):
        if i % 2 == 0:
            # Words: only the first character is uppercased
            result.append(part[:1].upper() + part[1:])
        elif part != CLASSIFY_SEPARATOR:
            result.append(NAMESPACE_SEPARATOR)
    return "".join(result)


def demodulize(string: Any) -> str:
    """
    Return the string without its namespace, e.g. ``Hanami::Utils::String`` becomes ``String``.

    Trailing empty segments are ignored, so ``Hanami::`` becomes ``Hanami``.
    """
    segments = to_string(string).split(NAMESPACE_SEPARATOR)
    while len(segments) > 1 and not segments[-1]:
        segments.pop()
    return segments[-1]


def namespace(string: Any) -> str:
    """
    Return the top level namespace, e.g. ``Hanami::Utils::String`` becomes ``Hanami``.
    """
    return to_string(string).partition(NAMESPACE_SEPARATOR)[0]


def titleize(string: Any) -> str:
    words = underscore(string).split(CLASSIFY_SEPARATOR)
    return TITLEIZE_SEPARATOR.join(capitalize_word(word) for word in words)


def capitalize(string: Any) -> str:
    head, *tail = underscore(string).split(CLASSIFY_SEPARATOR)
    return CAPITALIZE_SEPARATOR.join([capitalize_word(head), *tail])


def pluralize(string: Any) -> str:
    string = to_string(string)
    if not string.strip():
        return string
    return inflect(string, PLURALS, PLURAL_RULES, DEFAULT_PLURAL_RULE)


def singularize(string: Any) -> str:
    string = to_string(string)
    if not string.strip():
        return string
    return inflect(string, SINGULARS, SINGULAR_RULES, DEFAULT_SINGULAR_RULE)


def rsub(string: Any, pattern: str | re.Pattern, replacement: Any) -> str:
    """
    Replace the rightmost match of ``pattern`` with ``replacement``.

    >>> rsub("authors/books/index", "/", "#")
    'authors/books#index'
    """
    string = to_string(string)
    if isinstance(pattern, str):
        pattern = re.compile(re.escape(pattern))
    last = None
    for last in pattern.finditer(string):
        pass
    if last is None:
        return string
    return string[: last.start()] + to_string(replacement) + string[last.end():]


def tokens(string: Any) -> Iterator[str]:
    """
    Yield every interpolation of the ``(a|b|c)`` group in the string, in order.
    """
    yield from TokenPattern.parse(to_string(string)).variants()


def tokenize(string: Any, visit: Callable[[str], Any]) -> None:
    """
    Call ``visit`` with each interpolation of the ``(a|b|c)`` group in the string.

    ``Lotus::(Utils|App)`` visits ``Lotus::Utils`` and then ``Lotus::App``. A string without a group is visited once,
    unchanged.
    """
    for token in tokens(string):
        visit(token)
