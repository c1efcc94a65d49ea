"""Print organizations whose press kit has gone stale, oldest first.

Usage:
  python scripts/report_stale_kits.py [--days 30] [--json]
"""
import argparse
import json
import os
import sys

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from datetime import timedelta
from presskits import create_app
from presskits.services.fleet import find_stale_organizations


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('--days', type=int, default=None, help='staleness threshold in days (default: STALE_AFTER_DAYS)')
    parser.add_argument('--json', action='store_true', help='print JSON instead of a table')
    args = parser.parse_args(argv)

    app = create_app()
    with app.app_context():
        threshold = timedelta(days=args.days) if args.days is not None else None
        rows = find_stale_organizations(threshold)

    if args.json:
        print(json.dumps(rows, ensure_ascii=False, indent=2))
        return 0
    for r in rows:
        print(f"{r['lastUpdated']}  {r['orgId']}  {r['name'] or '-'}")
    print(f"\n{len(rows)} organization(s) need an update.")
    return 0


if __name__ == '__main__':
    sys.exit(main())
