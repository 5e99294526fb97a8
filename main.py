"""Inspect the KMEHR CD-ITEM scheme catalog from the command line."""

from __future__ import annotations

import argparse

from kmehr.cd import UnknownScheme, all_schemes, from_wire_name
from kmehr.logger import log_debug, log_error, log_warning


def print_catalog() -> None:
    schemes = all_schemes()
    width = max(len(s.wire_name) for s in schemes)
    print(f"{'S':<{width}}  SV")
    for scheme in schemes:
        print(f"{scheme.wire_name:<{width}}  {scheme.version}")
    print()
    print(f"{len(schemes)} schemes")


def resolve(names: list[str]) -> int:
    """Print `S -> SV` per name. Returns the number of unknown names."""
    unknown = 0
    for name in names:
        try:
            scheme = from_wire_name(name)
        except UnknownScheme as exc:
            log_error(str(exc))
            unknown += 1
            continue
        log_debug(f"resolved {name!r} to {scheme.name}")
        print(f"{scheme.wire_name} -> {scheme.version}")
    if unknown == len(names):
        log_warning(f"none of {len(names)} name(s) is a CD-ITEM scheme")
    return unknown


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Inspect the KMEHR CD-ITEM scheme catalog."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("list", help="Print every scheme with its version")
    resolve_parser = subparsers.add_parser(
        "resolve", help="Resolve S attribute values to their catalog version"
    )
    resolve_parser.add_argument("names", nargs="+", help="Wire names, matched exactly")
    args = parser.parse_args(argv)

    if args.command == "list":
        print_catalog()
        return 0
    return 1 if resolve(args.names) else 0


if __name__ == "__main__":
    raise SystemExit(main())
