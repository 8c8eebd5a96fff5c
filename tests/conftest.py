import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import title_link_copy
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


class FakeClipboard:
    """Records QClipboard writes without touching a display server."""

    def __init__(self, fail_html: bool = False, fail_text: bool = False):
        self.fail_html = fail_html
        self.fail_text = fail_text
        self.text = None
        self.html = None

    def setText(self, text):
        if self.fail_text:
            raise RuntimeError("clipboard unavailable")
        self.text = text
        self.html = None

    def setMimeData(self, mime):
        if self.fail_html:
            raise RuntimeError("rich clipboard unavailable")
        self.html = mime.html()
        self.text = mime.text()


# Common test fixtures
@pytest.fixture
def fake_clipboard():
    """Return a clipboard that records writes."""
    return FakeClipboard()


@pytest.fixture
def title_corpus():
    """Titles covering acronyms, brands, possessives, digits and punctuation."""
    return [
        "NASA launches new satellite",
        "why iPhone sales are rising",
        "a tale of two cities",
        "how to win friends",
        "mcdonald's menu",
        "top 3rd place finishers",
        "  leading and trailing spaces  ",
        "“quoted” — em dash, commas; semicolons!",
        "café au lait à la française",
        "Ελληνικά και русский текст",
        "don’t stop believin'",
        "24K gold: the U.S. market's rise",
        "",
        "!!! ??? ...",
        "1999",
    ]


@pytest.fixture
def clipboard_factory():
    """Return the FakeClipboard class for tests that need failure modes."""
    return FakeClipboard
