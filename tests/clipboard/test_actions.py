"""
Tests for clipboard.actions

Test Coverage:
- CopyAction.from_name(): Values, command aliases, menu ids
- CopyContext.resolve_target(): Link vs page targets
- build_payload(): Every action, empty-result errors
"""
import logging

import pytest

from title_link_copy.clipboard.actions import CopyAction, CopyContext, build_payload
from title_link_copy.common.options import CopyOptions, SelectedTextPlacement

PAGE = CopyContext(page_title="why iPhone sales are rising", page_url="https://news.test/a")
LINK = CopyContext(
    page_title="Front page",
    page_url="https://news.test/",
    link_text="a tale of two cities",
    link_url="https://books.test/1",
)


class TestFromName:

    @pytest.mark.parametrize("action", list(CopyAction))
    def test_values(self, action):
        assert CopyAction.from_name(action.value) is action

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("copy-title-link", CopyAction.PAGE_TITLE_LINK),
            ("copy-title-only", CopyAction.PAGE_TITLE_ONLY),
            ("copy-link-only", CopyAction.PAGE_LINK_ONLY),
            ("copy-hyperlink", CopyAction.HYPERLINK),
            ("ttlc-universal-hyperlink", CopyAction.HYPERLINK),
            ("ttlc-link-text-url", CopyAction.LINK_TEXT_URL),
            ("  Page-Title-Only ", CopyAction.PAGE_TITLE_ONLY),
        ],
    )
    def test_aliases(self, name, expected):
        assert CopyAction.from_name(name) is expected

    def test_unknown_name_raises(self):
        with pytest.raises(ValueError, match="Unknown copy action"):
            CopyAction.from_name("ttlc-options")


class TestResolveTarget:

    def test_page_target(self):
        assert PAGE.resolve_target() == ("why iPhone sales are rising", "https://news.test/a")

    def test_link_target(self):
        assert LINK.resolve_target() == ("a tale of two cities", "https://books.test/1")

    def test_link_title_falls_back_to_selection_then_default(self):
        with_selection = CopyContext(link_url="https://x.test", selection_text="picked")
        bare = CopyContext(link_url="https://x.test")

        assert with_selection.resolve_target() == ("picked", "https://x.test")
        assert bare.resolve_target() == ("Link", "https://x.test")


class TestBuildPayload:

    def test_page_title_link(self):
        payload = build_payload(CopyAction.PAGE_TITLE_LINK, PAGE, CopyOptions(use_ap_title_case=True))

        assert payload.plain == "Why iPhone Sales Are Rising\nhttps://news.test/a"
        assert payload.html is None

    def test_title_only_includes_selection(self):
        context = CopyContext(page_title="Title", page_url="https://x.test", selection_text="quote")

        payload = build_payload(CopyAction.PAGE_TITLE_ONLY, context, CopyOptions())

        assert payload.plain == "Title\nquote"

    def test_link_only_excludes_title_and_selection(self):
        context = CopyContext(page_title="Title", page_url="https://x.test", selection_text="quote")

        payload = build_payload(CopyAction.PAGE_LINK_ONLY, context, CopyOptions(use_ap_title_case=True))

        assert payload.plain == "https://x.test"

    def test_link_actions_use_link_target(self):
        options = CopyOptions(use_ap_title_case=True)

        assert build_payload(CopyAction.LINK_TEXT_URL, LINK, options).plain == (
            "A Tale of Two Cities\nhttps://books.test/1"
        )
        assert build_payload(CopyAction.LINK_TEXT_ONLY, LINK, options).plain == "A Tale of Two Cities"
        assert build_payload(CopyAction.LINK_URL_ONLY, LINK, options).plain == "https://books.test/1"

    def test_page_actions_prefer_link_when_present(self):
        """Target follows the context, not the action name."""
        payload = build_payload(CopyAction.PAGE_LINK_ONLY, LINK, CopyOptions())
        assert payload.plain == "https://books.test/1"

    def test_hyperlink(self):
        context = CopyContext(
            page_title="how to win friends",
            page_url="https://x.test",
            selection_text="chapter one",
        )
        options = CopyOptions(use_ap_title_case=True, selected_text_placement=SelectedTextPlacement.ABOVE)

        payload = build_payload(CopyAction.HYPERLINK, context, options)

        assert payload.html == 'chapter one<br><a href="https://x.test">How To Win Friends</a>'
        assert payload.plain == "chapter one\nHow To Win Friends\nhttps://x.test"

    def test_hyperlink_without_title_uses_url(self):
        context = CopyContext(page_url="https://x.test")

        payload = build_payload(CopyAction.HYPERLINK, context, CopyOptions())

        assert payload.html == '<a href="https://x.test">https://x.test</a>'

    def test_hyperlink_without_url_raises(self):
        with pytest.raises(ValueError, match="without a URL"):
            build_payload(CopyAction.HYPERLINK, CopyContext(page_title="Title"), CopyOptions())

    def test_nothing_to_copy_raises(self):
        with pytest.raises(ValueError, match="Nothing to copy"):
            build_payload(CopyAction.PAGE_LINK_ONLY, CopyContext(page_title="Title"), CopyOptions())


def test_build_payload_logs_action_at_info(caplog):
    with caplog.at_level(logging.INFO, logger="title_link_copy.clipboard.actions"):
        build_payload(CopyAction.PAGE_TITLE_LINK, PAGE, CopyOptions())

    assert "page-title-link" in caplog.text
    assert any(record.levelno == logging.INFO for record in caplog.records)
