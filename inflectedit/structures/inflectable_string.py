from typing import Any
from typing import Callable

from inflectedit.behaviour import inflector
from inflectedit.behaviour.transform import Step
from inflectedit.behaviour.transform import transform


class InflectableString(str):
    """
    A string with inflection methods.

    It compares and hashes exactly like the plain string it wraps, so it can be used wherever a ``str`` is expected.
    Every inflection returns a new ``InflectableString``. Methods inherited from ``str``, such as ``strip`` or
    ``lower``, return a plain ``str``; use ``transform`` to keep the type through them.

    >>> InflectableString("hanami_view").classify()
    InflectableString('HanamiView')
    """

    def __new__(cls, value: Any = ""):
        return super().__new__(cls, inflector.to_string(value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str.__repr__(self)})"

    def classify(self) -> "InflectableString":
        return type(self)(inflector.classify(self))

    def underscore(self) -> "InflectableString":
        return type(self)(inflector.underscore(self))

    def dasherize(self) -> "InflectableString":
        return type(self)(inflector.dasherize(self))

    def demodulize(self) -> "InflectableString":
        return type(self)(inflector.demodulize(self))

    def namespace(self) -> "InflectableString":
        return type(self)(inflector.namespace(self))

    def titleize(self) -> "InflectableString":
        return type(self)(inflector.titleize(self))

    def capitalize(self) -> "InflectableString":
        # Unlike str.capitalize, this splits words first: "OneTwoThree" becomes "One two three"
        return type(self)(inflector.capitalize(self))

    def pluralize(self) -> "InflectableString":
        return type(self)(inflector.pluralize(self))

    def singularize(self) -> "InflectableString":
        return type(self)(inflector.singularize(self))

    def rsub(self, pattern, replacement) -> "InflectableString":
        return type(self)(inflector.rsub(self, pattern, replacement))

    def tokenize(self, visit: Callable[["InflectableString"], Any]) -> None:
        inflector.tokenize(self, lambda token: visit(type(self)(token)))

    def transform(self, *steps: Step) -> Any:
        result = transform(self, *steps)
        if isinstance(result, str):
            return type(self)(result)
        return result
