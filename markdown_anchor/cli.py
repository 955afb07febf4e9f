"""Command line interface for printing heading anchors."""

import argparse
import logging
import sys
from collections.abc import Iterable, Sequence

from markdown_anchor.anchor import anchor
from markdown_anchor.errors import AnchorError
from markdown_anchor.get_url_hash import get_url_hash
from markdown_anchor.load_config import load_config
from markdown_anchor.platform import Platform

logger = logging.getLogger(__name__)


def _read_headings(args: argparse.Namespace) -> Iterable[str]:
    if args.headings:
        return args.headings
    return [line.rstrip("\n") for line in sys.stdin if line.strip()]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the markdown-anchor command."""
    ap = argparse.ArgumentParser(
        prog="markdown-anchor",
        description="Print the markdown link (or URL fragment) a platform uses for headings.",
    )
    ap.add_argument(
        "headings",
        nargs="*",
        help="Heading text; read one heading per line from stdin when omitted",
    )
    ap.add_argument(
        "--platform",
        choices=[p.value for p in Platform],
        help="Platform whose anchor rules apply (default: github.com)",
    )
    ap.add_argument(
        "--repetition",
        help="Occurrence number of a duplicated heading (0 means first)",
    )
    ap.add_argument(
        "--module-name",
        help="Module name that namespaces nodejs.org anchors",
    )
    ap.add_argument(
        "--hash-only",
        action="store_true",
        help="Print only the fragment instead of a markdown link",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return ap


def run(args: argparse.Namespace) -> int:
    """Print one anchor per heading."""
    config = load_config(args.config)
    platform = args.platform or config["platform"]
    module_name = args.module_name or config["module_name"]
    hash_only = args.hash_only or config["output"] == "hash"

    for heading in _read_headings(args):
        if hash_only:
            print(get_url_hash(heading, platform, args.repetition, module_name))
        else:
            print(anchor(heading, platform, args.repetition, module_name))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the markdown-anchor command."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return run(args)
    except (AnchorError, ValueError) as e:
        logger.error("%s", e)
        raise SystemExit(2) from e


if __name__ == "__main__":
    raise SystemExit(main())
