"""Sequential batch checks over keyword and tracked-url ids.

Items run strictly one after another so the search engine sees a single
client at a time. Every id yields exactly one result, in input order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable

from sqlalchemy.orm import Session

from rank_tracker.db import repository
from rank_tracker.errors import PersistError, RankTrackerError
from rank_tracker.services.rank_service import RankChecker

logger = logging.getLogger(__name__)


@dataclass
class BatchItemResult:
    id: int
    outcome: dict[str, Any] = field(default_factory=dict)
    error: str | None = None
    persist_error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def as_dict(self) -> dict[str, Any]:
        if self.error is not None:
            return {"id": self.id, "error": self.error}
        data = {"id": self.id, **self.outcome}
        if self.persist_error is not None:
            data["persistError"] = self.persist_error
        return data


def _now() -> datetime:
    return datetime.now(timezone.utc)


class BatchService:
    def __init__(self, checker: RankChecker) -> None:
        self._checker = checker

    def check_keywords(self, session: Session, keyword_ids: list[int]) -> list[BatchItemResult]:
        results = [self._run_item(session, kid, self._check_keyword) for kid in keyword_ids]
        self._log_summary("keyword", results)
        return results

    def check_tracked_urls(self, session: Session, tracked_url_ids: list[int]) -> list[BatchItemResult]:
        results = [self._run_item(session, tid, self._check_tracked_url) for tid in tracked_url_ids]
        self._log_summary("tracked url", results)
        return results

    def _run_item(
        self,
        session: Session,
        item_id: int,
        check: Callable[[Session, int, BatchItemResult], None],
    ) -> BatchItemResult:
        result = BatchItemResult(id=item_id)
        try:
            check(session, item_id, result)
        except PersistError as exc:
            logger.warning("write failed for id=%s: %s", item_id, exc)
            result.persist_error = str(exc)
        except RankTrackerError as exc:
            session.rollback()
            logger.warning("check failed for id=%s: %s", item_id, exc)
            result.error = str(exc)
        except Exception as exc:  # noqa: BLE001
            session.rollback()
            logger.exception("unexpected failure for id=%s", item_id)
            result.error = str(exc)
        return result

    def _check_keyword(self, session: Session, keyword_id: int, result: BatchItemResult) -> None:
        keyword = repository.get_keyword(session, keyword_id)
        site = repository.get_site(session, keyword.site_id)
        found = self._checker.check_site_rank(keyword.keyword, site.url)
        result.outcome = {
            "keyword": keyword.keyword,
            "rank": found.rank if found else None,
            "url": found.url if found else None,
            "title": found.title if found else None,
        }
        repository.add_ranking(
            session,
            keyword_id=keyword_id,
            rank_position=result.outcome["rank"],
            search_type=self._checker.site_scope.value,
            result_url=result.outcome["url"],
            result_title=result.outcome["title"],
            checked_at=_now(),
        )

    def _check_tracked_url(self, session: Session, tracked_url_id: int, result: BatchItemResult) -> None:
        tracked = repository.get_tracked_url(session, tracked_url_id)
        found = self._checker.check_url_tracking(tracked.keyword, tracked.target_url, tracked.section)
        result.outcome = {
            "keyword": tracked.keyword,
            "targetUrl": tracked.target_url,
            "isExposed": found.is_exposed,
            "sectionExists": found.section_exists,
            "sectionRank": found.section_rank,
            "overallRank": found.overall_rank,
            "foundInSection": found.found_in_section,
        }
        # a rank outside the requested section is not stored when that section is absent
        section_missing = bool(tracked.section) and not found.section_exists
        repository.add_url_ranking(
            session,
            tracked_url_id=tracked_url_id,
            rank_position=found.overall_rank,
            section_name=None if section_missing else found.found_in_section,
            section_rank=None if section_missing else found.section_rank,
            is_exposed=found.is_exposed,
            section_exists=found.section_exists,
            checked_at=_now(),
        )

    @staticmethod
    def _log_summary(kind: str, results: list[BatchItemResult]) -> None:
        failed = sum(1 for r in results if not r.ok)
        logger.info("%s batch finished: total=%d failed=%d", kind, len(results), failed)
