"""CLI for tracked-url exposure checks."""

from __future__ import annotations

import argparse
import json

from rank_tracker.cli._common import add_id_arguments, build_batch_service, ids_from_args
from rank_tracker.config.settings import get_settings
from rank_tracker.db.repository import active_tracked_url_ids
from rank_tracker.db.session import get_session
from rank_tracker.utils.logs import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Check exposure of tracked urls")
    add_id_arguments(parser)
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    settings = get_settings()
    setup_logging(settings.log_level)
    service = build_batch_service(settings)

    with get_session() as session:
        ids = ids_from_args(args)
        if ids is None:
            ids = active_tracked_url_ids(session)
        if not ids:
            print("No tracked urls to check")
            return
        results = service.check_tracked_urls(session, ids)

    print(json.dumps([r.as_dict() for r in results], ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
