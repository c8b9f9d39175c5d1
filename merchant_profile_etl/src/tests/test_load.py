import pandas as pd
import pytest
from sqlalchemy import create_engine, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from merchant_profile_import import load as load_mod
from merchant_profile_import.config import DbConfig, ImportConfig, Settings
from merchant_profile_import.constants import GLOSSARY_KEY_PUBLISH, MERCHANT_PROFILE_PUBLISH, URL_PUBLISH
from merchant_profile_import.load import ImportReport, load_records
from merchant_profile_import.models import MerchantProfile, Url
from merchant_profile_import.writer import PublishEvent


def data_set(id_merchant, text="Hello", url=None):
    return {
        "id_merchant": id_merchant,
        "localized_attributes": {
            "en_US": {"description_glossary_key": text, "url": url or f"/en/merchant/{id_merchant}"},
        },
    }


def profile_count(engine):
    with Session(engine) as session:
        return session.scalar(select(func.count()).select_from(MerchantProfile))


def test_import_report_merges_events_without_duplicates():
    report = ImportReport()
    report.merge_events([PublishEvent("a", 1), PublishEvent("b", 1)])
    report.merge_events([PublishEvent("a", 1), PublishEvent("a", 2)])
    assert report.events == [PublishEvent("a", 1), PublishEvent("b", 1), PublishEvent("a", 2)]


def test_load_records_skips_invalid_and_keeps_valid(engine):
    records = [data_set(1), {"logo_url": "no id"}, data_set(2)]
    report = load_records(records, engine)

    assert report.imported == 2
    assert report.failed == [(1, '"id_merchant" is required.')]
    assert profile_count(engine) == 2
    names = [e.event_name for e in report.events]
    assert names.count(MERCHANT_PROFILE_PUBLISH) == 2
    assert names.count(GLOSSARY_KEY_PUBLISH) == 2
    assert names.count(URL_PUBLISH) == 2


def test_load_records_twice_only_republishes_profiles(engine):
    load_records([data_set(1), data_set(2)], engine)
    report = load_records([data_set(1), data_set(2)], engine)

    assert report.imported == 2
    assert {e.event_name for e in report.events} == {MERCHANT_PROFILE_PUBLISH}
    assert len(report.events) == 2


def test_load_records_merges_duplicate_profile_events(engine):
    report = load_records([data_set(1), data_set(1, text="Hello again")], engine)

    assert report.imported == 2
    assert [e.event_name for e in report.events].count(MERCHANT_PROFILE_PUBLISH) == 1
    assert profile_count(engine) == 1


def test_load_records_accepts_dataframe(engine):
    df = pd.DataFrame(
        [
            {"id_merchant": 1, "logo_url": "a.png", "is_active": "1"},
            {"id_merchant": None, "logo_url": "b.png", "is_active": "0"},
            {"id_merchant": 3, "logo_url": None, "is_active": "true"},
        ]
    )
    report = load_records(df, engine)

    assert report.imported == 2
    assert [index for index, _ in report.failed] == [1]
    with Session(engine) as session:
        rows = session.execute(select(MerchantProfile.fk_merchant, MerchantProfile.logo_url)).all()
    assert sorted(rows) == [(1, "a.png"), (3, None)]


def test_load_records_uses_import_config(engine):
    load_records([data_set(5)], engine, config=ImportConfig(glossary_key_prefix="shop"))
    with Session(engine) as session:
        profile = session.scalars(select(MerchantProfile)).one()
    assert profile.description_glossary_key == "shop.description_glossary_key.5"


def test_load_records_aborts_on_persistence_error(engine):
    records = [data_set(1, url="/shared"), data_set(2, url="/shared"), data_set(3)]
    with pytest.raises(IntegrityError):
        load_records(records, engine)

    assert profile_count(engine) == 1
    with Session(engine) as session:
        assert session.scalars(select(Url.url)).all() == ["/shared"]


def test_run_import_prepares_database_and_loads(monkeypatch):
    engine = create_engine("sqlite://")
    calls = []
    monkeypatch.setattr(load_mod, "create_database_if_missing", lambda cfg: calls.append(cfg.database))
    monkeypatch.setattr(load_mod, "get_engine", lambda cfg: engine)

    settings = Settings(
        db=DbConfig(host="localhost", port=5432, database="merchants_test", user="u", password="p"),
        importer=ImportConfig(),
    )
    report = load_mod.run_import([data_set(1)], settings=settings)

    assert calls == ["merchants_test"]
    assert report.imported == 1
    assert profile_count(engine) == 1
    engine.dispose()
