from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from rank_tracker.db.base import Base


class UrlRanking(Base):
    __tablename__ = "url_rankings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    tracked_url_id: Mapped[int] = mapped_column(
        ForeignKey("tracked_urls.id", ondelete="CASCADE"), index=True
    )
    rank_position: Mapped[int | None] = mapped_column(Integer)
    section_name: Mapped[str | None] = mapped_column(String(100))
    section_rank: Mapped[int | None] = mapped_column(Integer)
    is_exposed: Mapped[bool] = mapped_column(Boolean, default=False)
    section_exists: Mapped[bool] = mapped_column(Boolean, default=False)
    checked_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), index=True
    )
