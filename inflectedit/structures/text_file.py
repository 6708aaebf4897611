import re
from pathlib import Path
from typing import Union

from attrs import define

# A target is either a substring to look for or a pattern searched in each line
LineTarget = Union[str, re.Pattern]


@define(frozen=True)
class TextFile:
    path: str | Path
    lines: tuple[str, ...]

    @property
    def contents(self) -> str:
        return "".join(self.lines)


@define(frozen=True)
class TextFileFragment:
    path: str | Path
    lines: tuple[str, ...]
    start_line: int

    @property
    def end_line(self) -> int:
        return self.start_line + len(self.lines) - 1

    @property
    def contents(self) -> str:
        return "".join(self.lines)
