from rank_tracker.db.models.site import Site
from rank_tracker.db.models.keyword import Keyword
from rank_tracker.db.models.ranking import Ranking
from rank_tracker.db.models.tracked_url import TrackedUrl
from rank_tracker.db.models.url_ranking import UrlRanking

__all__ = [
    "Site",
    "Keyword",
    "Ranking",
    "TrackedUrl",
    "UrlRanking",
]
