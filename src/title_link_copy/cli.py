"""
Module: cli

Purpose:
    Command line for Title-Link Copy.

    title-link-copy titlecase [TEXT ...]
        Print the AP-style title case of TEXT, or of each stdin line.

    title-link-copy copy ACTION [--page-title ...] [--page-url ...]
                                [--link-text ...] [--link-url ...]
                                [--selection ...] [--ap-title-case]
                                [--placement {above,below,none}] [--print]
        Build the payload for ACTION and write it to the clipboard.

Exit codes: 0 success, 1 copy failure, 2 usage error.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from title_link_copy import __version__
from title_link_copy.clipboard import (
    ClipboardError,
    ClipboardWriter,
    CopyAction,
    CopyContext,
    build_payload,
)
from title_link_copy.common.options import CopyOptions, SelectedTextPlacement
from title_link_copy.titlecase import ap_style_title_case

logger = logging.getLogger(__name__)

ACTION_CHOICES = [action.value for action in CopyAction]


def _action_name(value: str) -> CopyAction:
    try:
        return CopyAction.from_name(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="title-link-copy",
        description="Copy page titles and links, optionally in AP-style title case",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    case = sub.add_parser("titlecase", help="Print text in AP-style title case")
    case.add_argument("text", nargs="*", help="Text to convert (default: read lines from stdin)")

    copy = sub.add_parser("copy", help="Copy a title, URL or hyperlink to the clipboard")
    copy.add_argument(
        "action",
        type=_action_name,
        metavar="ACTION",
        help=f"One of: {', '.join(ACTION_CHOICES)}",
    )
    copy.add_argument("--page-title", default="", help="Title of the page")
    copy.add_argument("--page-url", default="", help="URL of the page")
    copy.add_argument("--link-text", default=None, help="Text of the link")
    copy.add_argument("--link-url", default=None, help="URL of the link")
    copy.add_argument("--selection", default=None, help="Selected text to include")
    copy.add_argument(
        "--ap-title-case",
        action="store_true",
        help="Convert the title to AP-style title case",
    )
    copy.add_argument(
        "--placement",
        choices=[p.value for p in SelectedTextPlacement],
        default=SelectedTextPlacement.BELOW.value,
        help="Where selected text goes relative to the URL (default: below)",
    )
    copy.add_argument(
        "--print",
        dest="print_only",
        action="store_true",
        help="Print the plain text instead of writing the clipboard",
    )
    return parser


def _run_titlecase(text: List[str], stdin: TextIO, stdout: TextIO) -> int:
    if text:
        print(ap_style_title_case(" ".join(text)), file=stdout)
        return 0
    for line in stdin:
        print(ap_style_title_case(line.rstrip("\n")), file=stdout)
    return 0


def _run_copy(args: argparse.Namespace, stdout: TextIO, writer: Optional[ClipboardWriter]) -> int:
    options = CopyOptions(
        use_ap_title_case=args.ap_title_case,
        selected_text_placement=SelectedTextPlacement(args.placement),
    )
    context = CopyContext(
        page_title=args.page_title,
        page_url=args.page_url,
        link_text=args.link_text,
        link_url=args.link_url,
        selection_text=args.selection,
    )
    try:
        payload = build_payload(args.action, context, options)
    except ValueError as e:
        logger.error(str(e))
        return 1

    if args.print_only:
        print(payload.plain, file=stdout)
        return 0

    writer = writer or ClipboardWriter()
    try:
        writer.copy_payload(payload)
    except ClipboardError as e:
        logger.error(str(e))
        return 1

    logger.info(f"Copied {args.action.value} to clipboard")
    return 0


def main(
    argv: Optional[List[str]] = None,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    writer: Optional[ClipboardWriter] = None,
) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    if args.command == "titlecase":
        return _run_titlecase(args.text, stdin, stdout)
    return _run_copy(args, stdout, writer)


if __name__ == "__main__":
    raise SystemExit(main())
