"""Command-line entry point: enumerate tuples and write them as CSV rows.

Example::

    python -m combinatorics.main --kind combinations --items A B C D -r 2
    python -m combinatorics.main --config run.yaml --limit 10
"""

from __future__ import annotations

import argparse
import csv
import logging
import sys
from itertools import islice
from typing import Iterator, List, Optional, TextIO

from combinatorics.config import KINDS, RunConfig, load_config
from combinatorics.counting import combination_count, permutation_count, sublist_count
from combinatorics.projector import combinations, permutations, sublists

logger = logging.getLogger("combinatorics.main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="combinatorics",
        description="Enumerate combinations, permutations or ordered selections of items.",
    )
    parser.add_argument("--config", help="YAML/JSON run configuration file.")
    parser.add_argument("--kind", choices=KINDS, help="What to enumerate.")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--items", nargs="+", help="Values to enumerate over.")
    group.add_argument("--n", type=int, help="Shorthand for items 0..n-1.")
    parser.add_argument("-r", type=int, help="Selection size.")
    parser.add_argument("--limit", type=int, help="Stop after this many rows.")
    parser.add_argument("--output", help="CSV output path (default: stdout).")
    parser.add_argument("--log-level", dest="log_level", help="Logging level name.")
    return parser


def expected_count(config: RunConfig) -> int:
    """Total number of tuples the run would produce without a limit."""
    n = len(config.items)
    if config.kind == "combinations":
        return combination_count(n, config.r)
    if config.kind == "sublists":
        return sublist_count(n, config.r)
    if config.r is None:
        return permutation_count(n)
    return sublist_count(n, config.r)


def enumerate_rows(config: RunConfig) -> Iterator[tuple]:
    """Lazy tuples for ``config``, truncated to ``config.limit``."""
    if config.kind == "combinations":
        rows = combinations(config.items, config.r)
    elif config.kind == "sublists":
        rows = sublists(config.items, config.r)
    else:
        rows = permutations(config.items, config.r)
    if config.limit is not None:
        rows = islice(rows, config.limit)
    return rows


def write_rows(rows: Iterator[tuple], stream: TextIO) -> int:
    """Write each tuple as one CSV row and return the row count."""
    writer = csv.writer(stream)
    written = 0
    for row in rows:
        writer.writerow(row)
        written += 1
    return written


def run(config: RunConfig, stream: Optional[TextIO] = None) -> int:
    """Execute one run and return the number of rows written."""
    total = expected_count(config)
    logger.info(
        "kind=%s items=%d r=%s expected=%d limit=%s",
        config.kind,
        len(config.items),
        config.r,
        total,
        config.limit,
    )
    rows = enumerate_rows(config)
    if stream is not None:
        written = write_rows(rows, stream)
    elif config.output:
        with open(config.output, "w", encoding="utf-8", newline="") as f:
            written = write_rows(rows, f)
        logger.info("Saved %d rows to %s", written, config.output)
    else:
        written = write_rows(rows, sys.stdout)
    logger.info("Rows written: %d", written)
    return written


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    overrides = {
        "kind": args.kind,
        "items": args.items if args.n is None else args.n,
        "r": args.r,
        "limit": args.limit,
        "output": args.output,
        "log_level": args.log_level,
    }
    config = load_config(args.config, overrides)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
