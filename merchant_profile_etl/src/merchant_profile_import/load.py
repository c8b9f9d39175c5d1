"""
Load step.

Run the writer step over a batch of merchant profile data sets. Each data set
gets its own transaction so one bad row does not roll back the others.
Validation failures are logged and reported; anything else (database errors)
aborts the batch.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Optional, Union

import pandas as pd
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from .config import ImportConfig, Settings
from .db import create_database_if_missing, create_schema, get_engine
from .exceptions import InvalidDataError
from .writer import MerchantProfileWriterStep, PublishEvent

logger = logging.getLogger(__name__)


@dataclass
class ImportReport:
    imported: int = 0
    failed: list[tuple[int, str]] = field(default_factory=list)
    events: list[PublishEvent] = field(default_factory=list)

    def merge_events(self, events: Iterable[PublishEvent]) -> None:
        for event in events:
            if event not in self.events:
                self.events.append(event)


def _iter_data_sets(records: Union[pd.DataFrame, Iterable[Mapping]]) -> Iterable[Mapping]:
    if isinstance(records, pd.DataFrame):
        return records.to_dict("records")
    return records


def load_records(
    records: Union[pd.DataFrame, Iterable[Mapping]],
    engine: Engine,
    config: Optional[ImportConfig] = None,
) -> ImportReport:
    report = ImportReport()
    config = config or ImportConfig()

    for index, data_set in enumerate(_iter_data_sets(records)):
        try:
            with Session(engine) as session, session.begin():
                step = MerchantProfileWriterStep(session, config=config)
                events = step.apply(data_set)
        except InvalidDataError as exc:
            logger.warning("Skipping data set %d: %s", index, exc)
            report.failed.append((index, str(exc)))
            continue
        report.imported += 1
        report.merge_events(events)

    logger.info(
        "Load complete: %d imported, %d skipped, %d publish events.",
        report.imported,
        len(report.failed),
        len(report.events),
    )
    return report


def run_import(
    records: Union[pd.DataFrame, Iterable[Mapping]],
    settings: Optional[Settings] = None,
) -> ImportReport:
    """
    Import data sets into the database configured in the environment.

    Creates the database and tables when they do not exist yet.
    """
    settings = settings or Settings.load()
    create_database_if_missing(settings.db)
    engine = get_engine(settings.db)
    create_schema(engine)
    return load_records(records, engine, config=settings.importer)


__all__ = ["ImportReport", "load_records", "run_import"]
