import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from merchant_profile_import.db import create_schema


@pytest.fixture
def engine():
    engine = create_engine("sqlite://")
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session
