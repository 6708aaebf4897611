from rich.console import Console
from rich.panel import Panel

from inflectedit.utils.diff import DiffStats
from inflectedit.utils.diff import diff_text
from inflectedit.utils.diff import get_diff_stats
from inflectedit.utils.diff import pretty_diff


def test_get_diff_stats():
    before = "one\ntwo\nthree\n"
    after = "one\n2\nthree\nfour\n"
    assert get_diff_stats(before, after) == DiffStats(added=2, removed=1)


def test_get_diff_stats_without_changes():
    assert get_diff_stats("same\n", "same\n") == DiffStats(added=0, removed=0)


def test_diff_text_skips_file_headers():
    text = diff_text("one\ntwo\n", "one\n2\n")
    assert "---" not in text.plain
    assert "+++" not in text.plain
    assert "-two" in text.plain
    assert "+2" in text.plain


def test_pretty_diff_panel():
    panel = pretty_diff("one\n", "one\ntwo\n", title="file.txt")
    assert isinstance(panel, Panel)
    assert panel.title == "file.txt"
    assert panel.subtitle == "1 lines added, 0 lines removed"
    console = Console(width=80, record=True)
    console.print(panel)
    assert "+two" in console.export_text()


def test_pretty_diff_without_changes():
    console = Console(width=80, record=True)
    console.print(pretty_diff("same\n", "same\n"))
    assert "No changes" in console.export_text()
