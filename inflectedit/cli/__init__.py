import pathlib
import re
from typing import Any
from typing import Callable

import fire
from delegatefn import delegate
from rich.console import Console

from inflectedit.behaviour import files
from inflectedit.behaviour.inflector import tokens
from inflectedit.behaviour.transform import transform
from inflectedit.structures.text_file import LineTarget
from inflectedit.utils.diff import DEFAULT_CONTEXT_LINES
from inflectedit.utils.diff import pretty_diff
from inflectedit.utils.log import logger
from inflectedit.utils.log import setup_logging

console = Console()


def inflect(string: str, *steps: Any) -> Any:
    """
    Apply inflections to a string, from left to right.

    `inflectedit inflect HanamiView underscore pluralize` prints `hanami_views`. A step with arguments is written as a
    list, e.g. `'["rsub", "/", "#"]'`.

    :param string: The string to transform.
    :param steps: The names of the operations to apply.
    :return: The transformed string.
    """
    return transform(string, *steps)


def tokenize(pattern: str) -> list[str]:
    """
    List every interpolation of the `(a|b|c)` group in a pattern.

    :param pattern: A string such as `Lotus::(Utils|App)`.
    :return: The interpolated strings, in order.
    """
    return list(tokens(pattern))


def make_target(target: str, regex: bool) -> LineTarget:
    return re.compile(target) if regex else target


def edit(path: str, operation: Callable[..., None], *args: Any, show_diff: bool, context: int, **kwargs) -> None:
    """
    Run a file operation and print what it changed.
    """
    file = pathlib.Path(path)
    encoding = kwargs.get("encoding", files.DEFAULT_ENCODING)
    before = file.read_text(encoding=encoding) if file.is_file() else ""
    logger.info(f"Running {operation.__name__} on {path}")
    operation(path, *args, **kwargs)
    if show_diff:
        after = file.read_text(encoding=encoding)
        console.print(pretty_diff(before, after, title=str(path), context=context))


@delegate(files.touch, ignore={"path"})
def touch(path: str, *, show_diff: bool = False, context: int = DEFAULT_CONTEXT_LINES, **kwargs):
    """
    Create a file and its intermediate directories, leaving existing contents alone.

    :param path: The file to create.
    """
    edit(path, files.touch, show_diff=show_diff, context=context, **kwargs)


@delegate(files.append_line, ignore={"path", "content"})
def append(path: str, content: str, *, show_diff: bool = True, context: int = DEFAULT_CONTEXT_LINES, **kwargs):
    """
    Add a line at the bottom of a file.

    :param path: The file to edit.
    :param content: The line to add.
    :param show_diff: Print the changes.
    :param context: The number of lines of context to show around each change.
    """
    edit(path, files.append_line, content, show_diff=show_diff, context=context, **kwargs)


@delegate(files.prepend_line, ignore={"path", "line"})
def prepend(path: str, line: str, *, show_diff: bool = True, context: int = DEFAULT_CONTEXT_LINES, **kwargs):
    """
    Add a line at the top of a file.

    :param path: The file to edit.
    :param line: The line to add.
    :param show_diff: Print the changes.
    :param context: The number of lines of context to show around each change.
    """
    edit(path, files.prepend_line, line, show_diff=show_diff, context=context, **kwargs)


@delegate(files.replace_first_matching_line, ignore={"path", "target", "replacement"})
def replace_first(
    path: str,
    target: str,
    replacement: str,
    *,
    regex: bool = False,
    show_diff: bool = True,
    context: int = DEFAULT_CONTEXT_LINES,
    **kwargs,
):
    """
    Replace the first line containing (or, with --regex, matching) the target.

    :param path: The file to edit.
    :param target: The text to look for.
    :param replacement: The new line.
    :param regex: Treat the target as a regular expression.
    :param show_diff: Print the changes.
    :param context: The number of lines of context to show around each change.
    :raises: TargetNotFound - If no line matches the target.
    """
    edit(
        path,
        files.replace_first_matching_line,
        make_target(target, regex),
        replacement,
        show_diff=show_diff,
        context=context,
        **kwargs,
    )


@delegate(files.replace_last_matching_line, ignore={"path", "target", "replacement"})
def replace_last(
    path: str,
    target: str,
    replacement: str,
    *,
    regex: bool = False,
    show_diff: bool = True,
    context: int = DEFAULT_CONTEXT_LINES,
    **kwargs,
):
    """
    Replace the last line containing (or, with --regex, matching) the target.

    :param path: The file to edit.
    :param target: The text to look for.
    :param replacement: The new line.
    :param regex: Treat the target as a regular expression.
    :param show_diff: Print the changes.
    :param context: The number of lines of context to show around each change.
    :raises: TargetNotFound - If no line matches the target.
    """
    edit(
        path,
        files.replace_last_matching_line,
        make_target(target, regex),
        replacement,
        show_diff=show_diff,
        context=context,
        **kwargs,
    )


@delegate(files.insert_line_before, ignore={"path", "target", "content"})
def insert_before(
    path: str,
    target: str,
    content: str,
    *,
    regex: bool = False,
    show_diff: bool = True,
    context: int = DEFAULT_CONTEXT_LINES,
    **kwargs,
):
    """
    Insert a line before the first line matching the target.
    """
    edit(
        path,
        files.insert_line_before,
        make_target(target, regex),
        content,
        show_diff=show_diff,
        context=context,
        **kwargs,
    )


@delegate(files.insert_line_after, ignore={"path", "target", "content"})
def insert_after(
    path: str,
    target: str,
    content: str,
    *,
    regex: bool = False,
    show_diff: bool = True,
    context: int = DEFAULT_CONTEXT_LINES,
    **kwargs,
):
    """
    Insert a line after the first line matching the target.
    """
    edit(
        path,
        files.insert_line_after,
        make_target(target, regex),
        content,
        show_diff=show_diff,
        context=context,
        **kwargs,
    )


@delegate(files.remove_line, ignore={"path", "target"})
def remove_line(
    path: str,
    target: str,
    *,
    regex: bool = False,
    show_diff: bool = True,
    context: int = DEFAULT_CONTEXT_LINES,
    **kwargs,
):
    """
    Remove the first line matching the target.
    """
    edit(path, files.remove_line, make_target(target, regex), show_diff=show_diff, context=context, **kwargs)


@delegate(files.remove_block, ignore={"path", "target", "closing_marker"})
def remove_block(
    path: str,
    target: str,
    *,
    regex: bool = False,
    show_diff: bool = True,
    context: int = DEFAULT_CONTEXT_LINES,
    **kwargs,
):
    """
    Remove every block opened by a line matching the target.

    The block ends at the first following line holding `end` (or `}` when the target contains `{`) at the indentation
    of the opening line.
    """
    edit(path, files.remove_block, make_target(target, regex), show_diff=show_diff, context=context, **kwargs)


def main():
    setup_logging()
    fire.Fire(
        {
            "inflect"      : inflect,
            "tokenize"     : tokenize,
            "touch"        : touch,
            "append"       : append,
            "prepend"      : prepend,
            "replace-first": replace_first,
            "replace-last" : replace_last,
            "insert-before": insert_before,
            "insert-after" : insert_after,
            "remove-line"  : remove_line,
            "remove-block" : remove_block,
        }
    )


if __name__ == "__main__":
    main()
