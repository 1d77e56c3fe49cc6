"""Render a markdown or source file to a standalone HTML page."""

from __future__ import annotations

import argparse
import html
import sys
from pathlib import Path

from markview.exceptions import SourceError
from markview.output_formatter import format_anchor_tree, format_summary
from markview.pipeline import RenderOptions, render_request
from markview.sources import read_source
from markview.theme import init_stylesheets, set_dark_mode
from markview.utils.logging_config import get_logger

logger = get_logger(__name__)

_PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
{styles}
</head>
<body>
{body}
</body>
</html>
"""


def main() -> None:
    parser = argparse.ArgumentParser(description="Render markdown or source code to HTML.")
    parser.add_argument("file", help="Markdown or source file to render")
    parser.add_argument("--out", help="Write the HTML page here instead of stdout")
    parser.add_argument("--toc", action="store_true", help="Prepend a table of contents")
    parser.add_argument("--dark", action="store_true", help="Use the dark code theme")
    parser.add_argument("--outline", action="store_true", help="Print the heading outline to stderr")
    args = parser.parse_args()

    try:
        request = read_source(args.file)
    except SourceError as exc:
        parser.error(str(exc))

    stylesheets = init_stylesheets()
    set_dark_mode(args.dark)
    result = render_request(request, options=RenderOptions(include_toc=args.toc))

    page = _PAGE_TEMPLATE.format(
        title=html.escape(request.name_hint),
        styles=stylesheets.style_tags(),
        body=result.html,
    )
    if args.out:
        Path(args.out).write_text(page, encoding="utf-8")
        logger.info("Wrote %s", args.out)
    else:
        sys.stdout.write(page)

    if args.outline:
        print(format_summary(result, name_hint=request.name_hint), file=sys.stderr)
        print(format_anchor_tree(result.anchors), file=sys.stderr)


if __name__ == "__main__":
    main()
