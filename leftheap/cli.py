"""Command line entry point that runs the merge and failing-comparison checks."""

from __future__ import annotations

import argparse
import sys
from typing import Dict, List, Optional, Sequence

from .selfcheck_core import merge_check
from .selfcheck_extra import faulty_compare_checks

MERGE_SIZE = 400000


def _run(merge_size: int) -> Dict[str, bool]:
    results = {"merge": merge_check(merge_size)}
    results.update(faulty_compare_checks())
    return results


def run_all() -> Dict[str, bool]:
    """Run every check at full size and map each check's name to whether it passed."""
    return _run(MERGE_SIZE)


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="leftheap",
        description="Check the priority queue's merge and its behaviour when comparisons fail.",
    )
    parser.add_argument(
        "--merge-size",
        type=_positive_int,
        default=None,
        help=f"values pushed into each queue before merging (default {MERGE_SIZE})",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="also report every failing-comparison check by name",
    )
    return parser


def _report(results: Dict[str, bool], verbose: bool) -> List[str]:
    lines = ["OKAY" if results["merge"] else "FAIL"]
    faulty = {name: passed for name, passed in results.items() if name != "merge"}
    if verbose:
        lines.extend(f"{name}: {'pass' if passed else 'fail'}" for name, passed in faulty.items())
    lines.append("1" if all(faulty.values()) else "0")
    return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the checks, print their outcome and return 0 only if all passed."""
    args = _parser().parse_args(argv)
    results = run_all() if args.merge_size is None else _run(args.merge_size)
    for line in _report(results, args.verbose):
        print(line)
    return 0 if all(results.values()) else 1


if __name__ == "__main__":
    sys.exit(main())