import difflib
from typing import NamedTuple

from rich.panel import Panel
from rich.style import Style
from rich.text import Text

DEFAULT_CONTEXT_LINES = 3

ADDED_STYLE = Style(bgcolor="rgb(0,90,0)")
REMOVED_STYLE = Style(bgcolor="rgb(90,0,0)")
HUNK_STYLE = Style(color="cyan", dim=True)


class DiffStats(NamedTuple):
    """
    The number of lines an edit added and removed.
    """

    added: int
    removed: int


def get_diff_stats(a: str, b: str) -> DiffStats:
    """
    Count the lines added and removed going from ``a`` to ``b``.

    :param a: The text before the edit.
    :param b: The text after the edit.
    :return: A named tuple containing the statistics of the diff.
    """
    added = 0
    removed = 0
    for line in difflib.ndiff(a.splitlines(), b.splitlines()):
        if line.startswith("+ "):
            added += 1
        elif line.startswith("- "):
            removed += 1
    return DiffStats(added=added, removed=removed)


def diff_text(a: str, b: str, *, context: int = DEFAULT_CONTEXT_LINES) -> Text:
    """
    Render the unified diff between ``a`` and ``b``, with added lines on green and removed lines on red.
    """
    text = Text()
    lines = difflib.unified_diff(a.splitlines(), b.splitlines(), lineterm="", n=context)
    for line in lines:
        # The file headers carry no information here
        if line.startswith(("---", "+++")):
            continue
        if line.startswith("@@"):
            style = HUNK_STYLE
        elif line.startswith("+"):
            style = ADDED_STYLE
        elif line.startswith("-"):
            style = REMOVED_STYLE
        else:
            style = None
        text.append(line, style=style)
        text.append("\n")
    return text


def pretty_diff(a: str, b: str, *, title: str = "", context: int = DEFAULT_CONTEXT_LINES) -> Panel:
    """
    Wrap the diff between ``a`` and ``b`` in a panel, with the line counts as its subtitle.

    :param a: The text before the edit.
    :param b: The text after the edit.
    :param title: The panel title, usually the path that was edited.
    :param context: The number of lines of context to show around each change.
    """
    stats = get_diff_stats(a, b)
    body = diff_text(a, b, context=context) if stats.added or stats.removed else Text("No changes", style="dim")
    return Panel(
        body,
        title=title,
        subtitle=f"{stats.added} lines added, {stats.removed} lines removed",
    )
