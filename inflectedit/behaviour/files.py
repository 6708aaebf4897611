"""
Line oriented editing of text files.

Every edit reads the whole file, computes the new lines in memory and writes them back in one go. The line to edit is
located before anything is written, so a failed lookup leaves the file as it was.
"""
import re
import shutil
from pathlib import Path
from typing import Callable
from typing import Iterable
from typing import Optional

from inflectedit.structures.errors import FileNotFound
from inflectedit.structures.errors import TargetNotFound
from inflectedit.structures.text_file import LineTarget
from inflectedit.structures.text_file import TextFile
from inflectedit.structures.text_file import TextFileFragment
from inflectedit.utils.log import logger

DEFAULT_ENCODING = "utf-8"
LINE_TERMINATOR = "\n"
LEADING_WHITESPACE = re.compile(r"\s*")

PathLike = str | Path
ClosingMarker = Callable[[str, LineTarget], LineTarget]


def touch(path: PathLike, *, encoding: str = DEFAULT_ENCODING) -> None:
    """
    Create an empty file, with all the intermediate directories. Existing contents are left alone.
    """
    write(path, encoding=encoding)


def write(path: PathLike, *content: str | Iterable[str], encoding: str = DEFAULT_ENCODING) -> None:
    """
    Append ``content`` to the file, creating it and its intermediate directories when needed.
    """
    data = join(content).encode(encoding)
    make_parent_directories(path)
    with open(path, "ab") as file:
        file.write(data)


def rewrite(path: PathLike, *content: str | Iterable[str], encoding: str = DEFAULT_ENCODING) -> None:
    """
    Replace the contents of an existing file.

    The new contents are encoded before the file is opened, so bad content leaves the file untouched.

    :raises FileNotFound: if the file doesn't exist.
    """
    data = join(content).encode(encoding)
    if not Path(path).is_file():
        raise FileNotFound(path)
    logger.debug(f"Rewriting {path}")
    Path(path).write_bytes(data)


def copy(source: PathLike, destination: PathLike) -> None:
    """
    Copy ``source`` into ``destination``, creating the intermediate directories. An existing destination is replaced.
    """
    make_parent_directories(destination)
    try:
        shutil.copy(source, destination)
    except FileNotFoundError as error:
        raise FileNotFound(source) from error


def make_directory(path: PathLike) -> None:
    """
    Create ``path`` as a directory. Every token is a directory, so ``a/b.py`` creates a directory named ``b.py``.
    """
    Path(path).mkdir(parents=True, exist_ok=True)


def make_parent_directories(path: PathLike) -> None:
    """
    Create the directories leading to ``path``. The last token is a file, so ``a/b.py`` only creates ``a``.
    """
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def delete(path: PathLike) -> None:
    try:
        Path(path).unlink()
    except FileNotFoundError as error:
        raise FileNotFound(path) from error


def delete_directory(path: PathLike) -> None:
    if not Path(path).exists():
        raise FileNotFound(path)
    shutil.rmtree(path)


def exists(path: PathLike) -> bool:
    return Path(path).exists()


def is_directory(path: PathLike) -> bool:
    return Path(path).is_dir()


def read(path: PathLike, *, encoding: str = DEFAULT_ENCODING) -> TextFile:
    """
    Read a file as a sequence of lines, each keeping its own terminator.

    :raises FileNotFound: if the file doesn't exist.
    """
    try:
        with open(path, encoding=encoding, newline="") as file:
            lines = file.readlines()
    except FileNotFoundError as error:
        raise FileNotFound(path) from error
    logger.debug(f"Read {len(lines)} lines from {path}")
    return TextFile(path=path, lines=tuple(lines))


def prepend_line(path: PathLike, line: str, *, encoding: str = DEFAULT_ENCODING) -> None:
    """
    Add ``line`` at the top of the file.
    """
    lines = list(read(path, encoding=encoding).lines)
    lines.insert(0, terminate(line))
    rewrite(path, lines, encoding=encoding)


def append_line(path: PathLike, content: str, *, encoding: str = DEFAULT_ENCODING) -> None:
    """
    Add ``content`` at the bottom of the file, terminating the current last line first if needed.
    """
    make_parent_directories(path)
    lines = list(read(path, encoding=encoding).lines)
    if lines and not lines[-1].endswith(LINE_TERMINATOR):
        lines[-1] += LINE_TERMINATOR
    lines.append(terminate(content))
    rewrite(path, lines, encoding=encoding)


def replace_first_matching_line(
    path: PathLike, target: LineTarget, replacement: str, *, encoding: str = DEFAULT_ENCODING
) -> None:
    """
    Replace the first line of the file matching ``target`` with ``replacement``.

    :raises TargetNotFound: if no line matches.
    """
    lines = list(read(path, encoding=encoding).lines)
    lines[index(lines, path, target)] = terminate(replacement)
    rewrite(path, lines, encoding=encoding)


def replace_last_matching_line(
    path: PathLike, target: LineTarget, replacement: str, *, encoding: str = DEFAULT_ENCODING
) -> None:
    """
    Replace the last line of the file matching ``target`` with ``replacement``.

    :raises TargetNotFound: if no line matches.
    """
    lines = list(read(path, encoding=encoding).lines)
    lines[len(lines) - 1 - index(lines[::-1], path, target)] = terminate(replacement)
    rewrite(path, lines, encoding=encoding)


def insert_line_before(path: PathLike, target: LineTarget, content: str, *, encoding: str = DEFAULT_ENCODING) -> None:
    lines = list(read(path, encoding=encoding).lines)
    lines.insert(index(lines, path, target), terminate(content))
    rewrite(path, lines, encoding=encoding)


def insert_line_after(path: PathLike, target: LineTarget, content: str, *, encoding: str = DEFAULT_ENCODING) -> None:
    lines = list(read(path, encoding=encoding).lines)
    lines.insert(index(lines, path, target) + 1, terminate(content))
    rewrite(path, lines, encoding=encoding)


def remove_line(path: PathLike, target: LineTarget, *, encoding: str = DEFAULT_ENCODING) -> None:
    lines = list(read(path, encoding=encoding).lines)
    del lines[index(lines, path, target)]
    rewrite(path, lines, encoding=encoding)


def block_closing_marker(opening_line: str, target: LineTarget) -> LineTarget:
    """
    The closing line of a block opened by ``opening_line``: ``}`` when the target opens a brace, ``end`` otherwise,
    indented like the opening line.
    """
    width = LEADING_WHITESPACE.match(opening_line).end()
    source = target.pattern if isinstance(target, re.Pattern) else target
    return " " * width + ("}" if "{" in source else "end")


def locate_block(
    path: PathLike,
    target: LineTarget,
    *,
    closing_marker: ClosingMarker = block_closing_marker,
    encoding: str = DEFAULT_ENCODING,
) -> TextFileFragment:
    """
    Find the first block opened by a line matching ``target``.

    :raises TargetNotFound: if there is no opening line, or it is never closed.
    """
    lines = read(path, encoding=encoding).lines
    start, end = block_bounds(lines, path, target, closing_marker)
    return TextFileFragment(path=path, lines=lines[start: end + 1], start_line=start)


def remove_block(
    path: PathLike,
    target: LineTarget,
    *,
    closing_marker: ClosingMarker = block_closing_marker,
    encoding: str = DEFAULT_ENCODING,
) -> None:
    """
    Remove every block opened by a line matching ``target``.

    A block runs from the opening line to the first line, at or after it, matching
    ``closing_marker(opening_line, target)``. Given::

        class App
          configure do
            root __dir__
          end
        end

    ``remove_block(path, "configure")`` leaves::

        class App
        end

    :raises TargetNotFound: if no line matches ``target``, or a block is never closed.
    """
    lines = list(read(path, encoding=encoding).lines)
    while True:
        start, end = block_bounds(lines, path, target, closing_marker)
        logger.debug(f"Removing lines {start + 1}-{end + 1} of {path}")
        del lines[start: end + 1]
        # Each pass removes at least the opening line, so this ends
        if line_number(lines, target) is None:
            break
    rewrite(path, lines, encoding=encoding)


def block_bounds(
    lines: list[str] | tuple[str, ...], path: PathLike, target: LineTarget, closing_marker: ClosingMarker
) -> tuple[int, int]:
    start = index(lines, path, target)
    closing = closing_marker(lines[start], target)
    return start, start + index(lines[start:], path, closing)


def matches(line: str, target: LineTarget) -> bool:
    if isinstance(target, str):
        return target in line
    if isinstance(target, re.Pattern):
        return target.search(line) is not None
    raise TypeError(f"Invalid target: {target!r}")


def line_number(lines: Iterable[str], target: LineTarget) -> Optional[int]:
    for i, line in enumerate(lines):
        if matches(line, target):
            return i
    return None


def index(lines: Iterable[str], path: PathLike, target: LineTarget) -> int:
    i = line_number(lines, target)
    if i is None:
        raise TargetNotFound(target, path)
    return i


def terminate(line: str) -> str:
    return f"{line}{LINE_TERMINATOR}"


def join(content: Iterable[str | Iterable[str]]) -> str:
    return "".join(part if isinstance(part, str) else "".join(part) for part in content)
