"""
Repositories.

Each repository wraps one ORM model behind two calls:

- ``find_or_create(**criteria)`` returns the matching row, or a new unsaved row
  built from the criteria.
- ``save(row)`` writes the row only when it is new or has modified attributes,
  and reports whether anything was written.

The session is owned by the caller; repositories flush but never commit.
"""

import logging

from sqlalchemy import inspect, select
from sqlalchemy.orm import Session

from .models import GlossaryKey, GlossaryTranslation, MerchantProfile, Url

logger = logging.getLogger(__name__)


class Repository:
    model = None

    def __init__(self, session: Session):
        self.session = session

    def find_or_create(self, **criteria):
        row = self.session.execute(select(self.model).filter_by(**criteria)).scalar_one_or_none()
        if row is None:
            logger.debug("No %s matches %s; creating", self.model.__tablename__, criteria)
            row = self.model(**criteria)
        return row

    def is_new(self, row) -> bool:
        state = inspect(row)
        return state.transient or state.pending

    def save(self, row) -> bool:
        if not (self.is_new(row) or self.session.is_modified(row)):
            return False
        self.session.add(row)
        self.session.flush()
        return True


class MerchantProfileRepository(Repository):
    model = MerchantProfile


class GlossaryKeyRepository(Repository):
    model = GlossaryKey


class GlossaryTranslationRepository(Repository):
    model = GlossaryTranslation


class UrlRepository(Repository):
    model = Url


__all__ = [
    "Repository",
    "MerchantProfileRepository",
    "GlossaryKeyRepository",
    "GlossaryTranslationRepository",
    "UrlRepository",
]
