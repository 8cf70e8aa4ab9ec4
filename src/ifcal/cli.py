from __future__ import annotations

import argparse
import importlib
import inspect
import json
import logging
import re
import sys

from ifcal.core.errors import IfcalError, InvalidDateInput


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _setup_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def cmd_convert(argv: list[str]) -> int:
    import ifcal

    p = argparse.ArgumentParser(prog="ifcal convert", description="Gregorian -> IFC date label")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--json", action="store_true", help="print the IFC fields as JSON")
    args = p.parse_args(argv)

    d = ifcal.parse_iso_date(args.date)
    t = ifcal.gregorian_to_ifc(d)
    if args.json:
        print(json.dumps({
            "gregorian": d.isoformat(),
            "year": t.year,
            "month": t.month,
            "month_index": t.month_index,
            "day": t.day,
            "special": t.special,
            "text": ifcal.format_ifc_date(t),
        }))
    else:
        print(ifcal.format_ifc_date(t))
    return 0

def cmd_to_gregorian(argv: list[str]) -> int:
    import ifcal

    p = argparse.ArgumentParser(prog="ifcal to-gregorian", description="IFC month/day -> Gregorian date")
    p.add_argument("year", type=int)
    p.add_argument("month", help="IFC month name (e.g. Sol) or index 0..12")
    p.add_argument("day", type=int, help="1..28")
    args = p.parse_args(argv)

    i = int(args.month) if args.month.isdigit() else ifcal.month_index(args.month)
    print(ifcal.ifc_to_gregorian(args.year, i, args.day).isoformat())
    return 0

def _dispatch(argv: list[str]) -> int:
    # Backward compatibility: `ifcal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        flags = ("-v", "--verbose")
        _setup_logging(any(a in flags for a in argv[1:]))
        return cmd_convert([a for a in argv if a not in flags])

    p = argparse.ArgumentParser(prog="ifcal", description="International Fixed Calendar converter.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("convert", help="Gregorian -> IFC date label")
    sub.add_parser("to-gregorian", help="IFC month/day -> Gregorian date")
    sub.add_parser("month", help="Print Gregorian/IFC month calendars")
    sub.add_parser("year-table", help="Print Sol 1 / Year Day / Leap Day dates per year")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "offset-plot"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    _setup_logging(args.verbose)

    if args.cmd == "convert":
        return cmd_convert(rest)

    if args.cmd == "to-gregorian":
        return cmd_to_gregorian(rest)

    if args.cmd == "month":
        return _run_module_main("ifcal.diagnostics.pretty_month", rest)

    if args.cmd == "year-table":
        return _run_module_main("ifcal.diagnostics.year_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "ifcal.diagnostics.round_trip",
            "offset-plot": "ifcal.diagnostics.offset_plot",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")

def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        return _dispatch(argv)
    except InvalidDateInput as e:
        print(f"ifcal: {e}. Please re-enter the date as YYYY-MM-DD.", file=sys.stderr)
        return 2
    except IfcalError as e:
        print(f"ifcal: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
