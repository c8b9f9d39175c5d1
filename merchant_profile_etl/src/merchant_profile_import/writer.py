"""
Writer step.

Upsert one merchant profile data set into the profile, glossary and URL tables
and return the publish events for every entity that changed.

A data set is a plain mapping:

    {
        "id_merchant": 1,
        "logo_url": "https://cdn/logo.png",
        "is_active": "1",
        "localized_attributes": {
            "en_US": {"description_glossary_key": "Hello", "url": "/en/merchant/1"},
            "de_DE": {"description_glossary_key": "Hallo", "url": "/de/merchant/1"},
        },
    }

Top-level keys that name profile columns are copied onto the profile row.
Every localized attribute other than the URL one becomes a glossary key
``<prefix>.<attribute>.<id_merchant>`` with one translation per locale.
"""

import logging
import numbers
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

import pandas as pd
from sqlalchemy.orm import Session

from .config import ImportConfig
from .constants import (
    DEFAULT_GLOSSARY_KEY_PREFIX,
    GLOSSARY_KEY_PUBLISH,
    ID_MERCHANT,
    IS_ACTIVE,
    LOCALIZED_ATTRIBUTES,
    MERCHANT_PROFILE_PUBLISH,
    PROFILE_GLOSSARY_FIELDS,
    PROFILE_SCALAR_FIELDS,
    REQUIRED_DATA_SET_KEYS,
    URL_PUBLISH,
)
from .exceptions import InvalidDataError
from .models import MerchantProfile
from .repositories import (
    GlossaryKeyRepository,
    GlossaryTranslationRepository,
    MerchantProfileRepository,
    UrlRepository,
)

logger = logging.getLogger(__name__)

BOOLEAN_FIELDS = (IS_ACTIVE,)


@dataclass(frozen=True)
class PublishEvent:
    event_name: str
    entity_id: int


def _is_blank(value) -> bool:
    if value is None or value is pd.NA:
        return True
    if isinstance(value, float) and pd.isna(value):
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def _to_bool(value):
    if _is_blank(value):
        return None
    if isinstance(value, bool):
        return value
    text_value = str(value).strip().lower()
    return text_value in ("true", "1", "t", "yes", "y")


def _clean_str(value, default=None):
    if _is_blank(value):
        return default
    return str(value).strip()


def generate_glossary_key(attribute: str, id_merchant: int, prefix: str = DEFAULT_GLOSSARY_KEY_PREFIX) -> str:
    return f"{prefix}.{attribute}.{id_merchant}"


class MerchantProfileWriterStep:
    """
    Write one merchant profile data set.

    The step works inside the caller's session and transaction. It flushes so
    generated ids are available to dependent rows, but never commits.
    """

    def __init__(
        self,
        session: Session,
        config: Optional[ImportConfig] = None,
        profiles: Optional[MerchantProfileRepository] = None,
        glossary_keys: Optional[GlossaryKeyRepository] = None,
        glossary_translations: Optional[GlossaryTranslationRepository] = None,
        urls: Optional[UrlRepository] = None,
    ):
        self.config = config or ImportConfig()
        self.profiles = profiles or MerchantProfileRepository(session)
        self.glossary_keys = glossary_keys or GlossaryKeyRepository(session)
        self.glossary_translations = glossary_translations or GlossaryTranslationRepository(session)
        self.urls = urls or UrlRepository(session)

    def apply(self, data_set: Mapping) -> list[PublishEvent]:
        id_merchant = self.validate_data_set(data_set)
        events: list[PublishEvent] = []

        profile = self.profiles.find_or_create(fk_merchant=id_merchant)
        self._apply_scalar_fields(profile, data_set)
        self.profiles.save(profile)

        localized = data_set.get(LOCALIZED_ATTRIBUTES)
        if _is_blank(localized):
            localized = {}
        for locale, attributes in localized.items():
            self._save_localized_attributes(profile, str(locale), attributes or {}, events)

        self.profiles.save(profile)
        self._add_publish_event(events, MERCHANT_PROFILE_PUBLISH, profile.id_merchant_profile)

        logger.debug("Merchant %s written; %d publish events", id_merchant, len(events))
        return events

    def validate_data_set(self, data_set: Mapping) -> int:
        """
        Check the required keys and return the merchant id as an int.

        Raises InvalidDataError before anything is written.
        """
        for key in REQUIRED_DATA_SET_KEYS:
            if _is_blank(data_set.get(key)):
                raise InvalidDataError(f'"{key}" is required.', field=key)

        raw_id = data_set[ID_MERCHANT]
        if isinstance(raw_id, bool):
            raise InvalidDataError(f'"{ID_MERCHANT}" must be an integer, got {raw_id!r}.', field=ID_MERCHANT)
        try:
            id_merchant = int(raw_id)
        except (TypeError, ValueError, OverflowError) as exc:
            raise InvalidDataError(f'"{ID_MERCHANT}" must be an integer, got {raw_id!r}.', field=ID_MERCHANT) from exc
        if isinstance(raw_id, numbers.Number) and raw_id != id_merchant:
            raise InvalidDataError(f'"{ID_MERCHANT}" must be an integer, got {raw_id!r}.', field=ID_MERCHANT)
        if id_merchant == 0:
            raise InvalidDataError(f'"{ID_MERCHANT}" is required.', field=ID_MERCHANT)
        if id_merchant < 0:
            raise InvalidDataError(f'"{ID_MERCHANT}" must be a positive integer, got {raw_id!r}.', field=ID_MERCHANT)

        localized = data_set.get(LOCALIZED_ATTRIBUTES)
        if _is_blank(localized):
            localized = None
        if localized is not None and not isinstance(localized, Mapping):
            raise InvalidDataError(f'"{LOCALIZED_ATTRIBUTES}" must be a mapping of locale to attributes.', field=LOCALIZED_ATTRIBUTES)
        for locale, attributes in (localized or {}).items():
            if attributes is not None and not isinstance(attributes, Mapping):
                raise InvalidDataError(f'Attributes for locale "{locale}" must be a mapping.', field=LOCALIZED_ATTRIBUTES)

        return id_merchant

    def _apply_scalar_fields(self, profile: MerchantProfile, data_set: Mapping) -> None:
        for field in PROFILE_SCALAR_FIELDS + PROFILE_GLOSSARY_FIELDS:
            value = data_set.get(field)
            if _is_blank(value):
                continue
            if field in BOOLEAN_FIELDS:
                setattr(profile, field, _to_bool(value))
            else:
                setattr(profile, field, _clean_str(value))

    def _save_localized_attributes(self, profile: MerchantProfile, locale: str, attributes: Mapping, events: list) -> None:
        id_merchant = profile.fk_merchant
        for attribute_name, attribute_value in attributes.items():
            # falsy values (0, False) are skipped here, unlike scalar fields
            if _is_blank(attribute_value) or not attribute_value:
                continue
            value = str(attribute_value)

            if attribute_name == self.config.url_attribute:
                self._save_url(profile.id_merchant_profile, locale, value, events)
                continue

            glossary_key = generate_glossary_key(attribute_name, id_merchant, self.config.glossary_key_prefix)
            if attribute_name in PROFILE_GLOSSARY_FIELDS:
                setattr(profile, attribute_name, glossary_key)

            key_row = self.glossary_keys.find_or_create(key=glossary_key)
            key_changed = self.glossary_keys.save(key_row)

            translation = self.glossary_translations.find_or_create(
                fk_glossary_key=key_row.id_glossary_key,
                locale=locale,
            )
            translation.value = value
            translation_changed = self.glossary_translations.save(translation)

            if key_changed or translation_changed:
                self._add_publish_event(events, GLOSSARY_KEY_PUBLISH, key_row.id_glossary_key)
            else:
                logger.debug("Glossary key %s (%s) unchanged", glossary_key, locale)

    def _save_url(self, id_merchant_profile: int, locale: str, url: str, events: list) -> None:
        url_row = self.urls.find_or_create(
            fk_resource_merchant_profile=id_merchant_profile,
            locale=locale,
        )
        url_row.url = url
        if self.urls.save(url_row):
            self._add_publish_event(events, URL_PUBLISH, url_row.id_url)
        else:
            logger.debug("URL for profile %s (%s) unchanged", id_merchant_profile, locale)

    @staticmethod
    def _add_publish_event(events: list, event_name: str, entity_id: int) -> None:
        event = PublishEvent(event_name, entity_id)
        if event not in events:
            events.append(event)


__all__ = ["PublishEvent", "MerchantProfileWriterStep", "generate_glossary_key"]
