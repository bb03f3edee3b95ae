#!/usr/bin/env python3
"""
opdocidx — Opcode documentation indexer CLI

Usage:
    python opdocidx.py [--doc 65816-opcodes.md] [--snippet-types instruction-snippet-types.json]
                       [--plain] [--location-file instruction-json-location.txt]
                       [--dry-run] [-v]

The output path is read from instruction-json-location.txt next to this
script (or --location-file). Exit status is 0 on success and 1 on any error;
nothing is written unless the whole document indexed cleanly.

Examples:
    python opdocidx.py                      # annotated index, build-time paths
    python opdocidx.py --plain              # documentation strings only
    python opdocidx.py --dry-run -v         # parse and report, write nothing
"""

import argparse
import sys
import os

# Allow running from project root without installing
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from opdoc_indexer import __version__, index_document
from opdoc_indexer import config
from opdoc_indexer.console import print_error, print_info, print_success, setup_logging
from opdoc_indexer.errors import IndexerError
from opdoc_indexer.writer import write_index


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="opdocidx",
        description="Index an opcode documentation file into JSON for editor tooling",
    )
    parser.add_argument("--doc", default=str(config.DOC_FILE),
                        help="Opcode documentation source (default: %(default)s)")
    parser.add_argument("--snippet-types", default=str(config.SNIPPET_TYPES_FILE),
                        help="JSON object of snippet type -> keywords (default: %(default)s)")
    parser.add_argument("--plain", action="store_true",
                        help="Emit documentation strings only, without snippet types")
    parser.add_argument("--location-file", default=str(config.LOCATION_FILE),
                        help="File naming the JSON output path (default: %(default)s)")
    parser.add_argument("--dry-run", action="store_true",
                        help="Parse and report without writing the JSON file")
    parser.add_argument("--verbose", "-v", action="count", default=0,
                        help="Log progress (-v) or every block (-vv) to stderr")
    parser.add_argument("--version", action="version",
                        version=f"opdocidx {__version__}")
    return parser


def main(argv=None):
    args = build_arg_parser().parse_args(argv)
    log = setup_logging(args.verbose)

    try:
        dest = config.output_path(args.location_file)
        log.info("Output: %s", dest)

        snippet_types = None if args.plain else args.snippet_types
        doc = index_document(args.doc, snippet_types)
        log.info("Indexed %s: %s", args.doc, doc.summary())

        if args.dry_run:
            print_info(f"[dry run] {doc.summary()}; would write {dest}")
            return 0

        write_index(doc, dest)
    except IndexerError as e:
        print_error(str(e))
        sys.exit(1)

    print_success(dest)
    return 0


if __name__ == "__main__":
    sys.exit(main())
