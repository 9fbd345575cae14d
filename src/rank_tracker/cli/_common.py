from __future__ import annotations

import argparse

from rank_tracker.config.loaders import load_ids
from rank_tracker.config.settings import Settings
from rank_tracker.providers.naver import NaverSearchClient
from rank_tracker.services.batch_service import BatchService
from rank_tracker.services.rank_service import RankChecker


def add_id_arguments(parser: argparse.ArgumentParser) -> None:
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--ids", type=int, nargs="+", help="Ids to check, in order")
    source.add_argument("--config", help="Path to yaml/json file with an `ids` list")
    source.add_argument("--all-active", action="store_true", help="Check every active row")


def ids_from_args(args: argparse.Namespace) -> list[int] | None:
    if args.ids:
        return list(args.ids)
    if args.config:
        return load_ids(args.config)
    return None


def build_batch_service(settings: Settings) -> BatchService:
    client = NaverSearchClient(settings)
    checker = RankChecker(
        client,
        site_scope=settings.site_rank_scope,
        url_scope=settings.url_tracking_scope,
    )
    return BatchService(checker)
