"""Command-line interface for mindnode-parser."""

from __future__ import annotations

import argparse
import logging
import sys
from collections import Counter

from . import emoji_to_html, normalize_document, normalize_node, read
from .config import ConfigError, Settings
from .links import ROOT_SEGMENT, LinkTable
from .pipeline import convert


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    level = logging.DEBUG if debug else (logging.INFO if verbose else logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="mindnode-parser",
        description="Convert MindNode JSON exports into normalized JSON",
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-v", "--verbose", action="store_true", help="Log progress")
    common.add_argument("--debug", action="store_true", help="Log every file and link")
    sub = parser.add_subparsers(dest="command", required=True)

    # --- convert ---
    p_convert = sub.add_parser("convert", parents=[common], help="Convert a directory of exports")
    p_convert.add_argument("input", nargs="?", help="Directory of MindNode .json files")
    p_convert.add_argument("output", nargs="?", help="Directory for normalized files")
    p_convert.add_argument(
        "--root-segment",
        default=ROOT_SEGMENT,
        help=f"Path segment dropped from link paths (default: {ROOT_SEGMENT})",
    )

    # --- info ---
    p_info = sub.add_parser("info", parents=[common], help="Show document summary")
    p_info.add_argument("file", help="Path to .json file")

    # --- tree ---
    p_tree = sub.add_parser("tree", parents=[common], help="Print the normalized node tree")
    p_tree.add_argument("file", help="Path to .json file")
    p_tree.add_argument("--depth", type=int, default=99, help="Max depth")

    # --- emoji-html ---
    p_html = sub.add_parser("emoji-html", parents=[common], help="Render emoji in text as <img> tags")
    p_html.add_argument("text", help="Text containing emoji")

    args = parser.parse_args(argv)
    setup_logging(args.verbose, args.debug)

    if args.command == "convert":
        return cmd_convert(args)
    elif args.command == "info":
        cmd_info(args)
    elif args.command == "tree":
        cmd_tree(args)
    elif args.command == "emoji-html":
        print(emoji_to_html(args.text))
    return 0


def cmd_convert(args):
    settings = Settings.from_values(args.input, args.output, root_segment=args.root_segment)
    try:
        written = convert(settings)
    except ConfigError as exc:
        print(exc, file=sys.stderr)
        return 2
    print(f"Converted {len(written)} documents to {settings.output_dir}")
    return 0


def cmd_info(args):
    raw = read(args.file)
    doc = normalize_document(raw, LinkTable())
    print(f"File: {args.file}")
    print(f"Title: {raw.title}")
    print(f"Token: {raw.token}")
    print(f"Nodes: {len(doc.nodes)}")
    print(f"Subnodes: {len(doc.subnodes)}")
    print(f"Connections: {len(doc.connections)}")

    categories = Counter(n.category for n in doc.nodes + doc.subnodes if n.category)
    if categories:
        print()
        for category, count in categories.most_common():
            print(f"  {category}: {count}")


def cmd_tree(args):
    raw = read(args.file)
    links = LinkTable()

    stack = [(node, 0) for node in reversed(raw.nodes)]
    while stack:
        node, depth = stack.pop()
        if depth > args.depth:
            continue
        parsed = normalize_node(node, links)
        category = f" [{parsed.category}]" if parsed.category else ""
        print("  " * depth + f"{parsed.text}{category}")
        stack.extend((child, depth + 1) for child in reversed(node.children))


if __name__ == "__main__":
    sys.exit(main())
