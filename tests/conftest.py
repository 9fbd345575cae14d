from __future__ import annotations

from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from rank_tracker.db.base import Base
from rank_tracker.db import models  # noqa: F401

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def nexearch_html() -> str:
    return load_fixture("nexearch.html")


@pytest.fixture
def e2e_html() -> str:
    return load_fixture("e2e.html")


@pytest.fixture
def session():
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    factory = sessionmaker(autoflush=False, autocommit=False, bind=engine)
    with factory() as session:
        yield session
    engine.dispose()
