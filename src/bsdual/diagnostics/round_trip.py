from __future__ import annotations

import argparse
import random
from typing import List, Tuple

import bsdual
from bsdual.core.errors import UnsupportedEra


def random_bs_date(start_year: int, end_year: int, *, oracle: str) -> Tuple[int, int, int]:
    y = random.randint(start_year, end_year)
    m = random.randint(0, 11)
    d = random.randint(1, bsdual.days_in_month(y, m, calendar="bs", oracle=oracle))
    return y, m, d


def roundtrip_test(
    oracle: str,
    N: int,
    start_year: int,
    end_year: int,
    seed: int,
    *,
    max_failures: int,
) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        bs0 = random_bs_date(start_year, end_year, oracle=oracle)
        try:
            dual = bsdual.convert(*bs0, calendar="bs", oracle=oracle)
            back = bsdual.convert(*dual.ad(), calendar="ad", oracle=oracle)
        except UnsupportedEra as e:
            failures += 1
            print("\nFAIL (era)")
            print("bs0:", bs0, "error:", e)
        else:
            if back.bs() == bs0:
                continue
            failures += 1
            print("\nFAIL (round-trip)")
            print("bs0:", bs0)
            print("ad:", dual.ad())
            print("back:", back.bs())
        if failures >= max_failures:
            break

    return failures


def main(argv: List[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Check adToBs(bsToAd(x)) == x over random BS dates.")
    p.add_argument("--oracle", default=bsdual.DEFAULT_ORACLE)
    p.add_argument("--start", type=int, default=2000, help="first BS year (default: 2000)")
    p.add_argument("--end", type=int, default=2090, help="last BS year (default: 2090)")
    p.add_argument("--samples", type=int, default=2000)
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--max-failures", type=int, default=10)
    args = p.parse_args(argv)

    failures = roundtrip_test(
        args.oracle, args.samples, args.start, args.end, args.seed,
        max_failures=args.max_failures,
    )
    print(f"oracle={args.oracle} samples={args.samples} BS {args.start}..{args.end} failures={failures}")
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
