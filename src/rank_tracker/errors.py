from __future__ import annotations


class RankTrackerError(Exception):
    pass


class FetchError(RankTrackerError):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class EntityNotFoundError(RankTrackerError, LookupError):
    def __init__(self, kind: str, entity_id: int) -> None:
        super().__init__(f"{kind} not found: {entity_id}")
        self.kind = kind
        self.entity_id = entity_id


class PersistError(RankTrackerError):
    pass
