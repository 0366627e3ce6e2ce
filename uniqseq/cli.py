from __future__ import annotations

import sys
import argparse
import json as _json
from typing import List, Optional

from uniqseq.bench import run_suite
from uniqseq.constants import DEFAULT_SEED, HUGE_UNIVERSE
from uniqseq.errors import UniqSeqError
from uniqseq.primes import select_prime
from uniqseq.sequence import UniqueSequence


def cmd_sample(universe: int, *, count: int = 10, seed: int = DEFAULT_SEED, as_json: bool = False) -> List[int]:
    """Print the first values of a unique sequence.

    Args:
        universe: Inclusive upper bound of the produced values.
        count: Number of values to draw.
        seed: Generator seed (0..2**32-1).
        as_json: When True, print a JSON object instead of one value per line.

    Returns:
        The values printed.
    """
    if count < 0:
        raise ValueError("--count must be >= 0")
    seq = UniqueSequence(universe, seed)
    values = seq.take(count)
    if as_json:
        print(_json.dumps({"range": seq.range, "prime": seq.prime, "seed": seq.seed, "values": values}))
    else:
        for v in values:
            print(v)
    return values


def cmd_prime(universe: int) -> int:
    """Print the field prime selected for ``universe``."""
    if universe < 1:
        raise ValueError(f"Range must be >= 1, got {universe}")
    prime = select_prime(universe)
    print(prime)
    return prime


def cmd_bench(*, check: bool = False, huge: bool = True) -> bool:
    """Run the benchmark suite comparing smart, bitfield and naive choosers.

    Args:
        check: Verify every produced sequence holds no duplicate (much slower).
        huge: Include the 10**9 universe run (smart and bitfield only).
    """
    if check:
        print("!!! Attention: running with validity check will slow down a lot !!!!", file=sys.stderr)
    run_suite(check, huge_universe=HUGE_UNIVERSE if huge else None)
    return True


def main(argv: List[str] | None = None):
    ap = argparse.ArgumentParser(
        prog="uniqseq",
        description="Unique pseudo-random integer sequences",
        epilog="Values are drawn from [0, RANGE] inclusive; the stream repeats after one field period.",
    )
    sub = ap.add_subparsers(dest="cmd", required=True)

    ap_sample = sub.add_parser("sample", help="Print values from a unique sequence")
    ap_sample.add_argument("range", type=int, help="Inclusive upper bound of the values")
    ap_sample.add_argument("--count", "-n", type=int, default=10, help="Number of values (default 10)")
    ap_sample.add_argument("--seed", type=int, default=DEFAULT_SEED, help=f"Generator seed (default {DEFAULT_SEED})")
    ap_sample.add_argument("--json", action="store_true", help="Emit a JSON object")

    ap_prime = sub.add_parser("prime", help="Show the field prime chosen for a range")
    ap_prime.add_argument("range", type=int, help="Requested range")

    ap_bench = sub.add_parser("bench", help="Time the smart generator against the baselines")
    ap_bench.add_argument("--check", action="store_true", help="Check every sequence for duplicates (slow)")
    ap_bench.add_argument("--no-huge", action="store_true", help="Skip the huge universe run")

    args = ap.parse_args(argv)
    try:
        if args.cmd == "sample":
            cmd_sample(args.range, count=args.count, seed=args.seed, as_json=args.json)
        elif args.cmd == "prime":
            cmd_prime(args.range)
        elif args.cmd == "bench":
            cmd_bench(check=args.check, huge=not args.no_huge)
        else:
            raise RuntimeError("Unknown command")
    except (UniqSeqError, ValueError, RuntimeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
