"""Quick one-off SERP fetch and parse."""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict

from rank_tracker.config.settings import get_settings
from rank_tracker.providers.naver import NaverSearchClient, SearchScope
from rank_tracker.services.rank_service import RankChecker
from rank_tracker.utils.logs import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fetch one Naver SERP and print parsed entries")
    parser.add_argument("--q", required=True, help="Search query")
    parser.add_argument(
        "--scope",
        default=SearchScope.nexearch.value,
        choices=[s.value for s in SearchScope],
        help="Search vertical",
    )
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    settings = get_settings()
    setup_logging(settings.log_level)
    checker = RankChecker(NaverSearchClient(settings))
    entries = checker.entries(args.q, SearchScope(args.scope))
    print(json.dumps([asdict(e) for e in entries], ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
