"""CLI for CSV export of ranking history."""

from __future__ import annotations

import argparse
import csv
from datetime import date

from rank_tracker.db.repository import keyword_history, url_history
from rank_tracker.db.session import get_session

KEYWORD_COLUMNS = [
    "id",
    "checked_at",
    "site_name",
    "keyword",
    "rank_position",
    "result_url",
    "result_title",
]
URL_COLUMNS = [
    "id",
    "checked_at",
    "keyword",
    "target_url",
    "rank_position",
    "section_name",
    "section_rank",
    "is_exposed",
    "section_exists",
]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Export ranking history to CSV")
    parser.add_argument("--type", required=True, choices=["keyword", "url"], dest="kind")
    parser.add_argument("--start", required=True, type=date.fromisoformat, help="YYYY-MM-DD")
    parser.add_argument("--end", required=True, type=date.fromisoformat, help="YYYY-MM-DD")
    parser.add_argument("--out", required=True, help="Output CSV path")
    return parser


def write_csv(path: str, columns: list[str], rows: list[dict]) -> None:
    with open(path, "w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=columns)
        writer.writeheader()
        for row in rows:
            writer.writerow(row)


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    if args.start > args.end:
        parser.error("--start must not be after --end")

    with get_session() as session:
        if args.kind == "keyword":
            rows = keyword_history(session, args.start, args.end)
            columns = KEYWORD_COLUMNS
        else:
            rows = url_history(session, args.start, args.end)
            columns = URL_COLUMNS

    write_csv(args.out, columns, rows)
    print(f"Exported {len(rows)} rows to {args.out}")


if __name__ == "__main__":
    main()
