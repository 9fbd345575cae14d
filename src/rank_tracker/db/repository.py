"""Lookup and append-only write helpers for the ranking tables."""

from __future__ import annotations

import logging
from datetime import date, datetime, time, timezone
from typing import Any

from sqlalchemy import desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from rank_tracker.db.models import Keyword, Ranking, Site, TrackedUrl, UrlRanking
from rank_tracker.errors import EntityNotFoundError, PersistError

logger = logging.getLogger(__name__)

HISTORY_LIMIT = 500


def get_keyword(session: Session, keyword_id: int) -> Keyword:
    keyword = session.get(Keyword, keyword_id)
    if keyword is None:
        raise EntityNotFoundError("keyword", keyword_id)
    return keyword


def get_site(session: Session, site_id: int) -> Site:
    site = session.get(Site, site_id)
    if site is None:
        raise EntityNotFoundError("site", site_id)
    return site


def get_tracked_url(session: Session, tracked_url_id: int) -> TrackedUrl:
    tracked = session.get(TrackedUrl, tracked_url_id)
    if tracked is None:
        raise EntityNotFoundError("tracked url", tracked_url_id)
    return tracked


def active_keyword_ids(session: Session) -> list[int]:
    stmt = select(Keyword.id).where(Keyword.is_active.is_(True)).order_by(Keyword.id)
    return list(session.execute(stmt).scalars())


def active_tracked_url_ids(session: Session) -> list[int]:
    stmt = select(TrackedUrl.id).where(TrackedUrl.is_active.is_(True)).order_by(TrackedUrl.id)
    return list(session.execute(stmt).scalars())


def _append(session: Session, row: Any) -> Any:
    try:
        session.add(row)
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        raise PersistError(f"failed to write {row.__tablename__}: {exc}") from exc
    return row


def add_ranking(session: Session, **values: Any) -> Ranking:
    return _append(session, Ranking(**values))


def add_url_ranking(session: Session, **values: Any) -> UrlRanking:
    return _append(session, UrlRanking(**values))


def _day_bounds(start: date, end: date) -> tuple[datetime, datetime]:
    return (
        datetime.combine(start, time.min, tzinfo=timezone.utc),
        datetime.combine(end, time.max, tzinfo=timezone.utc),
    )


def keyword_history(session: Session, start: date, end: date) -> list[dict[str, Any]]:
    lower, upper = _day_bounds(start, end)
    stmt = (
        select(
            Ranking.id,
            Ranking.checked_at,
            Site.name,
            Keyword.keyword,
            Ranking.rank_position,
            Ranking.result_url,
            Ranking.result_title,
        )
        .join(Keyword, Keyword.id == Ranking.keyword_id)
        .outerjoin(Site, Site.id == Keyword.site_id)
        .where(Ranking.checked_at >= lower, Ranking.checked_at <= upper)
        .order_by(desc(Ranking.checked_at), desc(Ranking.id))
        .limit(HISTORY_LIMIT)
    )
    return [
        {
            "id": row[0],
            "checked_at": row[1],
            "site_name": row[2] or "",
            "keyword": row[3],
            "rank_position": row[4],
            "result_url": row[5],
            "result_title": row[6],
        }
        for row in session.execute(stmt).all()
    ]


def url_history(session: Session, start: date, end: date) -> list[dict[str, Any]]:
    lower, upper = _day_bounds(start, end)
    stmt = (
        select(
            UrlRanking.id,
            UrlRanking.checked_at,
            TrackedUrl.keyword,
            TrackedUrl.target_url,
            UrlRanking.rank_position,
            UrlRanking.section_name,
            UrlRanking.section_rank,
            UrlRanking.is_exposed,
            UrlRanking.section_exists,
        )
        .join(TrackedUrl, TrackedUrl.id == UrlRanking.tracked_url_id)
        .where(UrlRanking.checked_at >= lower, UrlRanking.checked_at <= upper)
        .order_by(desc(UrlRanking.checked_at), desc(UrlRanking.id))
        .limit(HISTORY_LIMIT)
    )
    return [
        {
            "id": row[0],
            "checked_at": row[1],
            "keyword": row[2],
            "target_url": row[3],
            "rank_position": row[4],
            "section_name": row[5],
            "section_rank": row[6],
            "is_exposed": row[7],
            "section_exists": row[8],
        }
        for row in session.execute(stmt).all()
    ]
