import re
from typing import Iterator

from attrs import define

TOKENIZE_REGEXP = re.compile(r"\((.*)\)")
TOKENIZE_SEPARATOR = "|"


@define(frozen=True)
class TokenPattern:
    """
    A string with one parenthesized alternation group, e.g. ``Lotus::(Utils|App)``.
    """

    prefix: str
    alternatives: tuple[str, ...]
    suffix: str = ""

    @classmethod
    def parse(cls, string: str) -> "TokenPattern":
        match = TOKENIZE_REGEXP.search(string)
        if match is None:
            # No group: the whole string is the only variant
            return cls(prefix=string, alternatives=("",))
        return cls(
            prefix=string[: match.start()],
            alternatives=tuple(match.group(1).split(TOKENIZE_SEPARATOR)),
            suffix=string[match.end():],
        )

    def variants(self) -> Iterator[str]:
        for alternative in self.alternatives:
            yield f"{self.prefix}{alternative}{self.suffix}"
