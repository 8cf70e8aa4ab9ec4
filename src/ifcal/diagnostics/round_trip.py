from __future__ import annotations

import argparse
import random
from datetime import date, timedelta

import ifcal


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def roundtrip_test(N: int, start: date, end: date, seed: int, *, max_failures: int) -> int:
    """gregorian -> IFC -> gregorian for N random dates; returns the failure count."""
    random.seed(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(start, end)
        t = ifcal.gregorian_to_ifc(d0)
        doy = ifcal.day_of_year(d0)

        if t.is_special:
            ok = doy >= 365
            back = None
        else:
            back = ifcal.ifc_date_to_gregorian(t)
            ok = back == d0

        if not ok:
            failures += 1
            print("\nFAIL")
            print("d0:", d0, "doy:", doy)
            print("ifc:", t)
            print("back:", back)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: gregorian -> IFC -> gregorian.")
    p.add_argument("--N", type=int, default=20000, help="Trials.")
    p.add_argument("--start", type=str, default="1600-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2400-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    start = ifcal.parse_iso_date(args.start)
    end = ifcal.parse_iso_date(args.end)

    if end < start:
        raise SystemExit("--end must be >= --start")

    f = roundtrip_test(N=args.N, start=start, end=end, seed=args.seed, max_failures=args.max_failures)
    if f == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {f}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
