"""
ORM models for the tables the writer step touches.
"""
from sqlalchemy import Boolean, Column, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class MerchantProfile(Base):
    __tablename__ = "merchant_profile"

    id_merchant_profile = Column(Integer, primary_key=True, autoincrement=True)
    fk_merchant = Column(Integer, nullable=False, unique=True, index=True)
    contact_person_role = Column(String(255))
    contact_person_title = Column(String(64))
    contact_person_first_name = Column(String(255))
    contact_person_last_name = Column(String(255))
    contact_person_phone = Column(String(255))
    logo_url = Column(String(1024))
    public_email = Column(String(255))
    public_phone = Column(String(255))
    fax_number = Column(String(255))
    is_active = Column(Boolean, nullable=False, default=False)
    description_glossary_key = Column(String(255))
    banner_url_glossary_key = Column(String(255))
    delivery_time_glossary_key = Column(String(255))
    terms_conditions_glossary_key = Column(String(255))
    cancellation_policy_glossary_key = Column(String(255))
    imprint_glossary_key = Column(String(255))
    data_privacy_glossary_key = Column(String(255))

    def __repr__(self):
        return f"<MerchantProfile(id={self.id_merchant_profile}, fk_merchant={self.fk_merchant})>"


class GlossaryKey(Base):
    __tablename__ = "glossary_key"

    id_glossary_key = Column(Integer, primary_key=True, autoincrement=True)
    key = Column(String(255), nullable=False, unique=True, index=True)
    is_active = Column(Boolean, nullable=False, default=True)

    def __repr__(self):
        return f"<GlossaryKey(id={self.id_glossary_key}, key={self.key})>"


class GlossaryTranslation(Base):
    __tablename__ = "glossary_translation"
    __table_args__ = (UniqueConstraint("fk_glossary_key", "locale"),)

    id_glossary_translation = Column(Integer, primary_key=True, autoincrement=True)
    fk_glossary_key = Column(Integer, nullable=False, index=True)
    locale = Column(String(16), nullable=False)
    value = Column(Text, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)

    def __repr__(self):
        return f"<GlossaryTranslation(key={self.fk_glossary_key}, locale={self.locale})>"


class Url(Base):
    __tablename__ = "url"
    __table_args__ = (UniqueConstraint("fk_resource_merchant_profile", "locale"),)

    id_url = Column(Integer, primary_key=True, autoincrement=True)
    fk_resource_merchant_profile = Column(Integer, nullable=False, index=True)
    locale = Column(String(16), nullable=False)
    url = Column(String(1024), nullable=False, unique=True)

    def __repr__(self):
        return f"<Url(id={self.id_url}, url={self.url})>"


__all__ = ["Base", "MerchantProfile", "GlossaryKey", "GlossaryTranslation", "Url"]
