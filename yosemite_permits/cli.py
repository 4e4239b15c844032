"""
Yosemite Wilderness Permit Availability

Reports how many wilderness permits are still open at each Yosemite
trailhead for every date in the walk-up window, as CSV.

Usage:
    python main.py [--start YYYY-MM-DD] [--days N] [--output FILE] [--open-only]
    python main.py --trailheads-json trailheads.json --report-json report_south.json

The session cookie is taken from --cookie, the COOKIE environment variable
(or .env file), or prompted for.
"""

import argparse
import os
import sys
from datetime import datetime, timedelta

import requests

from yosemite_permits.availability import compute
from yosemite_permits.client import YosemiteClient
from yosemite_permits.config import COOKIE_ENV_VAR, WINDOW_LENGTH_DAYS, today
from yosemite_permits.csv_handler import save_availability_to_csv, write_availability_csv
from yosemite_permits.decoder import (
    decode_report, decode_trailheads, load_payload, quota_periods_for, regions_of,
)
from yosemite_permits.errors import PermitError
from yosemite_permits.logger import get_logger
from yosemite_permits.report import assemble, get_summary

logger = get_logger(__name__)


def parse_date(value):
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid date '{value}', expected YYYY-MM-DD")


def build_parser():
    parser = argparse.ArgumentParser(description='Report Yosemite wilderness permit availability')
    parser.add_argument('--cookie', help=f'Session cookie for yosemite.org (default: ${COOKIE_ENV_VAR})')
    parser.add_argument('--start', type=parse_date, default=None, help='First date of the window (default: today, Pacific time)')
    parser.add_argument('--days', type=int, default=WINDOW_LENGTH_DAYS, help='Number of days in the window')
    parser.add_argument('--output', default=None, help='Output CSV file (default: standard output)')
    parser.add_argument('--open-only', action='store_true', help='Only list trailheads with permits left')
    parser.add_argument('--trailheads-json', help='Read trailheads from a saved response instead of fetching')
    parser.add_argument('--report-json', action='append', default=[], help='Saved region report (repeatable, used with --trailheads-json)')
    return parser


def get_cookie(args):
    """Cookie from the command line, the environment, or an interactive prompt."""
    cookie = args.cookie or os.environ.get(COOKIE_ENV_VAR)
    if not cookie:
        cookie = input("Cookie plz: ").strip()
    if not cookie:
        raise PermitError("A yosemite.org session cookie is required")
    return cookie


def load_offline(trailheads_path, report_paths):
    """Load trailheads and occupancy from saved responses."""
    trailheads = decode_trailheads(load_payload(trailheads_path))
    entries = []
    for path in report_paths:
        entries.extend(decode_report(load_payload(path)))
    return trailheads, entries


def fetch_online(cookie):
    """Fetch trailheads, then the occupancy report of every region they belong to."""
    with YosemiteClient(cookie) as client:
        trailheads = client.fetch_trailheads()
        regions = regions_of(trailheads)
        logger.info(f"Fetching reports for {len(regions)} regions: {', '.join(regions)}")
        entries = client.fetch_reports(regions)
    return trailheads, entries


def drop_unlisted(entries, trailheads):
    """
    Remove occupancy for trailheads missing from the metadata.

    Reports include a few unlisted trailheads with no name or capacity.
    """
    known = set(t.id for t in trailheads)
    kept = [e for e in entries if e.trailhead_id in known]
    unlisted = sorted(set(e.trailhead_id for e in entries if e.trailhead_id not in known))
    if unlisted:
        logger.info(f"Ignoring occupancy for {len(unlisted)} unlisted trailheads: {', '.join(unlisted)}")
    return kept


def run(args):
    park_today = today()
    window_start = args.start or park_today
    window_end = window_start + timedelta(days=args.days - 1)

    if args.trailheads_json:
        trailheads, entries = load_offline(args.trailheads_json, args.report_json)
    else:
        trailheads, entries = fetch_online(get_cookie(args))

    quota_periods = quota_periods_for(trailheads, park_today, window_start, window_end)
    entries = drop_unlisted(entries, trailheads)

    rows = compute(trailheads, quota_periods, entries, window_start, args.days)
    report_rows = assemble(rows, open_only=args.open_only)
    logger.info(get_summary(report_rows))

    if args.output:
        save_availability_to_csv(report_rows, args.output)
        logger.info(f"Saved availability to: {args.output}")
    else:
        write_availability_csv(report_rows, sys.stdout)

    return report_rows


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.report_json and not args.trailheads_json:
        parser.error('--report-json requires --trailheads-json')

    try:
        run(args)
    except (PermitError, requests.RequestException, OSError, EOFError) as e:
        logger.error(f"Error: {e}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
