"""Command-line front door for lazymarks.

Loads a JSON bookmark forest, applies expansion/sort/search options, and
prints the flattened tree. ``--move`` simulates one drag gesture and prints
the resulting move instruction.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .highlight import DEFAULT_STYLE, colorize_json
from .logging_config import setup_logging
from .runtime import BookmarkBrowser, BrowserSettings
from .runtime import config
from .store import BookmarkStore, BookmarkStoreError
from .tree_model import (
    SORT_TYPES,
    BookmarkFolder,
    count_bookmarks,
    count_nodes,
    entry_to_dict,
    format_drop_indicator,
    format_entry,
)
from .tree_model.rendering import highlight_substring, url_host
from .ui_theme import UITheme, available_theme_names, normalize_theme_name, resolve_theme

logger = logging.getLogger(__name__)


def _sort_type(value: str) -> str:
    """argparse type for sort-order names."""
    candidate = value.strip().lower()
    if candidate not in SORT_TYPES:
        raise argparse.ArgumentTypeError(f"invalid sort type: {value!r} (choose from {', '.join(SORT_TYPES)})")
    return candidate


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Browse and rearrange a JSON bookmark forest as a flattened tree.")
    parser.add_argument("path", help="Path to a JSON file holding a list of bookmark nodes.")
    parser.add_argument("--expand", action="append", default=[], metavar="ID", help="Expand folder ID (repeatable).")
    parser.add_argument("--expand-all", action="store_true", help="Expand every folder.")
    parser.add_argument("--reveal", metavar="ID", help="Open the tree down to ID and select it.")
    parser.add_argument("--search", metavar="QUERY", help="Print matching bookmarks and folders instead of the tree.")
    parser.add_argument("--sort", type=_sort_type, default=None, help=f"Sort order ({', '.join(SORT_TYPES)}).")
    parser.add_argument("--theme", default=None, help=f"UI theme name ({', '.join(available_theme_names())}).")
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--json", action="store_true", help="Print flattened entries as JSON.")
    parser.add_argument("--open-all", metavar="ID", help="List every bookmark URL under folder ID instead of the tree.")
    parser.add_argument("--keys", action="store_true", help="Print the tree key bindings instead of the tree.")
    parser.add_argument("--style", default=DEFAULT_STYLE, help="Pygments style name for --json output.")
    parser.add_argument("--move", metavar="ID", help="Drag ID (requires --over).")
    parser.add_argument("--over", metavar="ID", help="Entry under the pointer when the drag is released.")
    parser.add_argument("--offset", type=float, default=0.0, help="Horizontal drag offset in pixels.")
    parser.add_argument("--write", action="store_true", help="Save the store back to PATH after --move.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr.")
    return parser


def _render_tree(browser: BookmarkBrowser, theme: UITheme) -> str:
    lines: list[str] = []
    for entry in browser.entries:
        lines.append(format_entry(
                entry,
                selected=entry.id == browser.state.selected_id,
                search_query=browser.state.search_query,
                theme=theme,
            ))
    return "\n".join(lines)


def _render_search(browser: BookmarkBrowser, query: str, theme: UITheme) -> str:
    results = browser.search(query)
    lines = [f"{len(results)} result(s) for {query!r}"]
    for node in results:
        title = highlight_substring(node.title, query, theme)
        if isinstance(node, BookmarkFolder):
            lines.append(f"{theme.tree_folder}{title}/{theme.reset} {theme.tree_count}({count_bookmarks(node)}){theme.reset}")
        else:
            lines.append(f"{theme.tree_bookmark}{title}{theme.reset} {theme.tree_url}{url_host(node.url)}{theme.reset}")
    return "\n".join(lines)


def _render_keys(browser: BookmarkBrowser) -> str:
    return "\n".join(f"{'/'.join(keys):<10} {name}" for name, keys in browser.keys.describe())


def _render_open_all(browser: BookmarkBrowser, folder_id: str) -> str:
    if not isinstance(browser.node(folder_id), BookmarkFolder):
        raise SystemExit(f"Not a folder: {folder_id}")
    urls = browser.open_all(folder_id)
    return "\n".join([f"open all ({len(urls)}) from {folder_id}", *urls])


def _run_move(browser: BookmarkBrowser, args: argparse.Namespace, theme: UITheme) -> list[str]:
    if not browser.reorder_enabled:
        raise SystemExit("Reordering is disabled while a sort order is active (use --sort none).")
    session = browser.begin_drag(args.move)
    if session is None:
        raise SystemExit(f"Not a visible entry: {args.move}")
    session.move(args.offset)
    session.over(args.over)
    if session.over_id is None:
        session.cancel()
        raise SystemExit(f"Not a visible entry: {args.over}")

    projection = session.projection
    indicator = session.drop_indicator()
    out: list[str] = []
    if projection is not None:
        out.append(
            f"projection: depth={projection.depth} bounds=[{projection.min_depth}, {projection.max_depth}] "
            f"parent={projection.parent_id if projection.parent_id is not None else '<root>'}"
        )
    if indicator is not None:
        out.append(f"drop {indicator.side} of {indicator.over_id}")
        out.append(format_drop_indicator(indicator.depth, theme=theme))

    try:
        result = browser.complete_drop()
    except BookmarkStoreError as exc:
        raise SystemExit(f"Move failed: {exc}") from exc
    instruction = result.instruction if result is not None else None
    if instruction is None:
        out.append("no move")
    else:
        parent = instruction.new_parent_id if instruction.new_parent_id is not None else "<root>"
        out.append(f"move {instruction.node_id} -> parent={parent} index={instruction.new_index}")
        if args.write:
            browser.store.save(Path(args.path))
    return out


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print the requested view of the bookmark file."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if (args.move is None) != (args.over is None):
        raise SystemExit("--move and --over must be given together.")

    path = Path(args.path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    try:
        store = BookmarkStore.load(path)
    except (OSError, BookmarkStoreError) as exc:
        raise SystemExit(f"Cannot read bookmarks from {path}: {exc}") from exc

    if args.sort is not None:
        config.save_sort_type(args.sort)
    if args.theme:
        config.save_theme_name(normalize_theme_name(args.theme))
    sort_type = args.sort if args.sort is not None else config.load_sort_type()
    theme = resolve_theme(args.theme or config.load_theme_name(), no_color=args.no_color)
    settings = BrowserSettings(
        indent_width=config.load_indent_width(),
        hover_expand_seconds=config.load_hover_expand_seconds(),
    )
    browser = BookmarkBrowser(store, settings=settings, sort_type=sort_type)
    logger.debug("loaded %d nodes from %s", count_nodes(browser.forest), path)

    if args.expand_all:
        browser.expand_all()
    for node_id in args.expand:
        if node_id not in browser.state.expanded:
            browser.toggle_folder(node_id)
    if args.reveal is not None:
        browser.reveal(args.reveal)

    out: list[str] = []
    if args.move is not None:
        out.extend(_run_move(browser, args, theme))

    if args.search:
        out.append(_render_search(browser, args.search, theme))
    elif args.open_all is not None:
        out.append(_render_open_all(browser, args.open_all))
    elif args.keys:
        out.append(_render_keys(browser))
    elif args.json:
        payload = json.dumps([entry_to_dict(entry) for entry in browser.entries], indent=2)
        out.append(colorize_json(payload, args.style, no_color=args.no_color).rstrip("\n"))
    else:
        out.append(_render_tree(browser, theme))

    sys.stdout.write("\n".join(out) + "\n")


if __name__ == "__main__":
    main()
