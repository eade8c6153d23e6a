#!/usr/bin/env python3
"""
Threadexport - Reddit thread to table exporter

Main entry point for Threadexport. Fetches a thread, flattens its comments
into a numbered table and writes the requested CSV, HTML and tree outputs.
"""

import json
import logging
import sys
import argparse
from pathlib import Path
from typing import Optional

from threadexport.client import RedditThreadClient
from threadexport.config import config, DATE_FORMATS
from threadexport.core import ExportSession, ExportPreferences, TreeViewState
from threadexport.exceptions import ThreadExportError, MissingURLError
from threadexport.exporters import write_csv, write_html
from threadexport.importers import BaseImporter, MockImporter, RedditJSONImporter


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


def build_preferences(args) -> ExportPreferences:
    """Merge command line flags over the configured defaults."""
    defaults = ExportPreferences.from_config()
    return ExportPreferences(
        date_format=args.date_format or defaults.date_format,
        compact_mode=args.compact or defaults.compact_mode,
        remove_newlines=args.remove_newlines or defaults.remove_newlines,
    )


def get_importer(args, client: Optional[RedditThreadClient] = None) -> BaseImporter:
    """
    Pick the thread source from the arguments.

    Args:
        args: Parsed command line arguments
        client: Open HTTP client, required for URL sources

    Returns:
        An importer for the thread
    """
    if args.mock:
        return MockImporter()
    if args.input:
        return RedditJSONImporter.from_file(args.input)
    if client is None:
        raise ValueError("An HTTP client is required to fetch a thread URL")
    return client.fetch_thread(args.url or "")


def write_tree(session: ExportSession, path: str, collapse: bool = False) -> Path:
    """Write the visualization hierarchy as JSON."""
    root = session.hierarchy()
    view = TreeViewState()
    if collapse:
        view.collapse_all(root)

    data = root.to_dict()
    data["collapsed"] = sorted(view.collapsed)

    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)

    logging.info(f"Wrote hierarchy with {len(view.visible_nodes(root))} visible nodes to {file_path}")
    return file_path


def run_export(args) -> ExportSession:
    """
    Execute one export: load the thread, sort, and write outputs.

    Returns:
        The populated session
    """
    session = ExportSession(build_preferences(args))

    if args.mock or args.input:
        importer = get_importer(args)
    else:
        if not (args.url or "").strip():
            raise MissingURLError("Please enter a valid Reddit post URL before exporting.")
        with RedditThreadClient() as client:
            importer = get_importer(args, client)

    session.load(importer.get_post(), importer.get_comments())

    for column in args.sort or []:
        session.sort(column)

    if not args.no_csv:
        if session.records:
            write_csv(session, args.csv or config.csv_filename)
        else:
            logging.warning("Thread has no comments, skipping CSV export")
    if args.html is not None:
        write_html(session, args.html or config.html_filename)
    if args.tree is not None:
        write_tree(session, args.tree or config.tree_filename, collapse=args.collapse)

    return session


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Threadexport - Reddit thread to table exporter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py https://www.reddit.com/r/python/comments/abc123/title/
  python main.py URL --compact --date-format utc       # Two-column CSV with Z dates
  python main.py URL --sort level --sort level         # Sort ascending, then descending
  python main.py URL --html --tree                     # Also write HTML table and hierarchy JSON
  python main.py --input thread.json --remove-newlines # Use a saved .json response
  python main.py --mock --tree                         # Run against built-in sample data
        """
    )

    parser.add_argument(
        "url",
        nargs="?",
        help="Reddit thread URL (.json is appended automatically)"
    )

    parser.add_argument(
        "--input",
        type=str,
        help="Read a saved thread JSON file instead of fetching"
    )

    parser.add_argument(
        "--mock",
        action="store_true",
        help="Use built-in sample thread"
    )

    parser.add_argument(
        "--date-format",
        choices=DATE_FORMATS,
        help="Date format for exported timestamps (default from config.yaml)"
    )

    parser.add_argument(
        "--compact",
        action="store_true",
        help="Two-column layout: number and body with author, date and score"
    )

    parser.add_argument(
        "--remove-newlines",
        action="store_true",
        help="Collapse line breaks in comment bodies to spaces"
    )

    parser.add_argument(
        "--sort",
        action="append",
        metavar="COLUMN",
        help="Sort by column; repeat to toggle direction (numbering, level, body, author, timestamp, upvotes, downvotes, score)"
    )

    parser.add_argument(
        "--csv",
        type=str,
        help="CSV output path (default from config.yaml)"
    )

    parser.add_argument(
        "--no-csv",
        action="store_true",
        help="Do not write a CSV file"
    )

    parser.add_argument(
        "--html",
        nargs="?",
        const="",
        help="Also write an HTML table, optionally to the given path"
    )

    parser.add_argument(
        "--tree",
        nargs="?",
        const="",
        help="Also write the comment hierarchy as JSON, optionally to the given path"
    )

    parser.add_argument(
        "--collapse",
        action="store_true",
        help="Mark every reply branch as collapsed in the hierarchy output"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    parser.add_argument(
        "--version",
        action="version",
        version="Threadexport 0.1.0"
    )

    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_arguments(argv)
    setup_logging(args.verbose)

    logging.info("Threadexport - Reddit thread to table exporter")

    try:
        session = run_export(args)
        print(f"\nExported {len(session.records)} comments from '{session.post.title}'")

    except MissingURLError as e:
        logging.error(str(e))
        print(f"\n{e}")
        sys.exit(2)

    except ThreadExportError as e:
        logging.error(f"Export failed: {e}")
        print(f"\nExport failed: {e}")
        sys.exit(1)

    except KeyboardInterrupt:
        logging.info("Export interrupted by user")
        print("\nExport interrupted.")


if __name__ == "__main__":
    main()
