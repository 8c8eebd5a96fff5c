"""
Tests for the title-link-copy command line.
"""
import io

import pytest

from title_link_copy.cli import main
from title_link_copy.clipboard.writer import ClipboardWriter


def _run(argv, **kwargs):
    stdout = io.StringIO()
    code = main(argv, stdout=stdout, **kwargs)
    return code, stdout.getvalue()


def test_titlecase_arguments():
    code, out = _run(["titlecase", "a", "tale", "of", "two", "cities"])

    assert code == 0
    assert out == "A Tale of Two Cities\n"


def test_titlecase_reads_stdin_lines():
    stdin = io.StringIO("how to win friends\nNASA launches new satellite\n")

    code, out = _run(["titlecase"], stdin=stdin)

    assert code == 0
    assert out.splitlines() == ["How To Win Friends", "NASA Launches New Satellite"]


def test_copy_print_only():
    code, out = _run([
        "copy", "page-title-link",
        "--page-title", "why iPhone sales are rising",
        "--page-url", "https://news.test/a",
        "--ap-title-case",
        "--print",
    ])

    assert code == 0
    assert out == "Why iPhone Sales Are Rising\nhttps://news.test/a\n"


def test_copy_hyperlink_to_clipboard(fake_clipboard):
    code, out = _run(
        [
            "copy", "copy-hyperlink",
            "--page-title", "Title",
            "--page-url", "https://x.test",
            "--selection", "quote",
            "--placement", "above",
        ],
        writer=ClipboardWriter(fake_clipboard),
    )

    assert code == 0
    assert out == ""
    assert fake_clipboard.html == 'quote<br><a href="https://x.test">Title</a>'
    assert fake_clipboard.text == "quote\nTitle\nhttps://x.test"


def test_copy_link_target(fake_clipboard):
    code, _ = _run(
        [
            "copy", "link-text-url",
            "--page-title", "Front page",
            "--link-text", "the end",
            "--link-url", "https://x.test/end",
        ],
        writer=ClipboardWriter(fake_clipboard),
    )

    assert code == 0
    assert fake_clipboard.text == "the end\nhttps://x.test/end"


def test_copy_nothing_returns_error():
    code, out = _run(["copy", "page-link-only", "--page-title", "Title", "--print"])

    assert code == 1
    assert out == ""


def test_copy_clipboard_failure_returns_error(clipboard_factory):
    writer = ClipboardWriter(clipboard_factory(fail_text=True))

    code, _ = _run(
        ["copy", "page-title-only", "--page-title", "Title"],
        writer=writer,
    )

    assert code == 1


def test_unknown_action_is_usage_error():
    with pytest.raises(SystemExit) as exc_info:
        _run(["copy", "ttlc-options"])
    assert exc_info.value.code == 2


def test_command_is_required():
    with pytest.raises(SystemExit) as exc_info:
        _run([])
    assert exc_info.value.code == 2
