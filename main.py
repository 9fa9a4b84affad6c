#!/usr/bin/env python3
"""
Liturgica - prayer collection tooling

Command line entry point. Builds the navigation tree from the tree
configuration, validates prayer documents against the block definitions,
converts legacy prayer files to the current document shape, and manages
the working draft.
"""

import json
import logging
import sys
import argparse
from pathlib import Path
from typing import List, Optional

from liturgica.config import config
from liturgica.exceptions import ConfigError, LoadError
from liturgica.stores import DraftPrayerStore, JsonFilePrayerStore
from liturgica.tree import build_navigation_tree, render_tree, search_tree, visible_tree
from liturgica.validation import load_block_definitions, validate_prayer


def setup_logging(verbose: bool = False):
    """Configure logging for the application."""
    level_name = "DEBUG" if verbose else config.get("logging.level", "INFO")
    level = getattr(logging, level_name.upper())
    format_str = config.get("logging.format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    log_file = config.log_filename

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(log_file)
        ]
    )


def run_tree(args) -> int:
    """Build the navigation tree and print or export it."""
    tree = build_navigation_tree(args.config or config.tree_config_path)

    include_editor_only = config.include_editor_only and not args.no_editor_only
    tree = visible_tree(tree, include_editor_only=include_editor_only)
    if tree is None:
        logging.warning("Every node in the tree is editor-only")
        return 0

    if args.search:
        tree = search_tree(tree, args.search)
        if tree is None:
            print(f"No routes or filenames match '{args.search}'")
            return 0

    if args.output:
        output = Path(args.output)
        output.parent.mkdir(parents=True, exist_ok=True)
        with open(output, 'w', encoding='utf-8') as f:
            json.dump(tree.to_dict(), f, indent=config.export_indent, ensure_ascii=False)
        logging.info(f"Navigation tree written to {output}")
    else:
        print(render_tree(tree, max_depth=args.depth))

    return 0


def report_errors(name: str, errors) -> bool:
    """Print validation errors for one prayer; return True if there were none."""
    if not errors:
        print(f"{name}: OK")
        return True

    print(f"{name}: {len(errors)} error(s)")
    for error in errors:
        if error.index < 0:
            location = "document"
        elif error.nested_index is None:
            location = f"block {error.index}"
        else:
            location = f"block {error.index}.{error.nested_index}"
        print(f"  [{location}] {error.message}")
    return False


def run_validate(args) -> int:
    """Validate prayer files; return 1 if any fails to load or validate."""
    definitions = load_block_definitions(args.definitions or config.block_definitions_path)
    store = JsonFilePrayerStore(config.prayers_directory)

    failures = 0
    for path in args.prayers:
        try:
            prayer = store.load(path)
        except LoadError as e:
            logging.error(f"Could not load prayer: {e}")
            failures += 1
            continue

        if not report_errors(path, validate_prayer(prayer, definitions)):
            failures += 1

    return 1 if failures else 0


def run_normalize(args) -> int:
    """Load prayers (legacy aware) and save them in the current shape."""
    source = JsonFilePrayerStore(config.prayers_directory)
    target = JsonFilePrayerStore(args.output_dir)

    failures = 0
    for path in args.prayers:
        try:
            prayer = source.load(path)
        except LoadError as e:
            logging.error(f"Could not load prayer: {e}")
            failures += 1
            continue
        print(f"{path} -> {target.save(prayer)}")

    return 1 if failures else 0


def run_draft(args) -> int:
    """Manage the working draft and validate it."""
    store = DraftPrayerStore(args.dir or config.drafts_directory)

    if args.clear:
        store.clear()
        print(f"Draft cleared: {store.path}")
        return 0

    if args.start_from:
        try:
            prayer = JsonFilePrayerStore(config.prayers_directory).load(args.start_from)
        except LoadError as e:
            logging.error(f"Could not load prayer: {e}")
            return 1
        print(f"{args.start_from} -> {store.save(prayer)}")

    definitions = load_block_definitions(args.definitions or config.block_definitions_path)
    prayer = store.load_or_default()
    return 0 if report_errors(f"draft '{prayer.id}'", validate_prayer(prayer, definitions)) else 1


def parse_arguments(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Liturgica - navigation tree and prayer validation tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py tree                                   # Print the navigation tree
  python main.py tree --search qurbana                  # Only routes matching 'qurbana'
  python main.py tree --output build/tree.json          # Export the tree as JSON
  python main.py validate prayers/morningPrayer.json    # Validate a prayer
  python main.py normalize old/vespers.json --output-dir prayers
  python main.py draft --from prayers/morningPrayer.json # Start a draft from a prayer
        """
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    parser.add_argument(
        "--version",
        action="version",
        version="Liturgica 0.1.0"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    tree_parser = subparsers.add_parser("tree", help="Build the navigation tree")
    tree_parser.add_argument("--config", type=str, help="Tree configuration JSON (default: bundled)")
    tree_parser.add_argument("--output", type=str, help="Write the tree as JSON to this file")
    tree_parser.add_argument("--search", type=str, help="Only show routes or filenames containing this text")
    tree_parser.add_argument("--depth", type=int, help="Maximum depth to print")
    tree_parser.add_argument("--no-editor-only", action="store_true", help="Hide editor-only branches")
    tree_parser.set_defaults(handler=run_tree)

    validate_parser = subparsers.add_parser("validate", help="Validate prayer documents")
    validate_parser.add_argument("prayers", nargs="+", help="Prayer ids or JSON files")
    validate_parser.add_argument("--definitions", type=str, help="Block definitions JSON (default: bundled)")
    validate_parser.set_defaults(handler=run_validate)

    normalize_parser = subparsers.add_parser("normalize", help="Convert prayers to the current document shape")
    normalize_parser.add_argument("prayers", nargs="+", help="Prayer ids or JSON files")
    normalize_parser.add_argument("--output-dir", required=True, help="Directory to write converted prayers to")
    normalize_parser.set_defaults(handler=run_normalize)

    draft_parser = subparsers.add_parser("draft", help="Validate or reset the working draft")
    draft_parser.add_argument("--dir", type=str, help="Draft directory or file (default: from config)")
    draft_parser.add_argument("--from", dest="start_from", type=str, help="Replace the draft with this prayer")
    draft_parser.add_argument("--clear", action="store_true", help="Delete the saved draft")
    draft_parser.add_argument("--definitions", type=str, help="Block definitions JSON (default: bundled)")
    draft_parser.set_defaults(handler=run_draft)

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_arguments(argv)
    setup_logging(args.verbose)

    try:
        return args.handler(args)
    except ConfigError as e:
        logging.error(f"Configuration error: {e}")
        print(f"\nFailed: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logging.info("Interrupted by user")
        return 1


if __name__ == "__main__":
    sys.exit(main())
