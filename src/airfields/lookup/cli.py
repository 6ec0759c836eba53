"""CLI for country lookups and airfield reports."""

import argparse
import logging
import sys

from airfields.config import DEFAULT_REPORT_SIZE, data_dir
from airfields.lookup.reports import RUNWAY_ENDS
from airfields.lookup.service import AirfieldService
from airfields.reference.errors import AirfieldsError


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Look up countries, airports and runways (OurAirports data)"
    )
    parser.add_argument(
        "--data-dir",
        help="Directory holding countries.csv, airports.csv and runways.csv "
        "(default: $AIRFIELDS_DATA_DIR or ./data)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Debug logging",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    query = commands.add_parser("query", help="Country by code or partial name (e.g. 'zimb')")
    query.add_argument("text", help="Country code or part of its name")
    query.add_argument("--output", "-o", help="Write results to CSV file")

    report = commands.add_parser("report", help="Aggregate reports")
    report.add_argument(
        "kind",
        choices=["counts", "surfaces", "idents"],
        help="counts: most/fewest airports; surfaces: runway surfaces per country; "
        "idents: most common runway identifiers",
    )
    report.add_argument(
        "-n",
        type=int,
        default=DEFAULT_REPORT_SIZE,
        help=f"Entries per list (default: {DEFAULT_REPORT_SIZE})",
    )
    report.add_argument(
        "--end",
        choices=RUNWAY_ENDS,
        default="le",
        help="Runway end identifier to tally for 'idents' (default: le)",
    )
    report.add_argument("--output", "-o", help="Write results to CSV file")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        service = AirfieldService.from_directory(data_dir(args.data_dir))
    except (FileNotFoundError, AirfieldsError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        if args.command == "query":
            df = service.queries().lookup_country_frame(args.text)
        elif args.kind == "counts":
            df = service.reports().airport_counts_frame(args.n)
        elif args.kind == "surfaces":
            df = service.reports().surface_types_frame()
        else:
            df = service.reports().runway_identifiers_frame(args.n, args.end)
    except (AirfieldsError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if df.empty:
        print("No results.", file=sys.stderr)
    else:
        print(df.to_string(index=False))

    if args.output and not df.empty:
        df.to_csv(args.output, index=False)
        print(f"\nWrote {len(df)} rows to {args.output}", file=sys.stderr)


if __name__ == "__main__":
    main()
